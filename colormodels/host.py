"""
Adapter between the color models and a host toolkit's color type.

The core never imports this module. A host color only has to expose integer
``red``, ``green``, ``blue`` and ``alpha`` attributes in 0..255 (the layout
most GUI toolkits use); everything else reaches it by pivoting through
:class:`RgbColor`.
"""
from __future__ import annotations
from typing import Callable, Protocol, TypeVar

from .colors import ColorBase, RgbColor
from .types.color_types import ColorSpace
from .utils.num_utils import round_half_up

H = TypeVar("H")


class HostColor(Protocol):
    red: int
    green: int
    blue: int
    alpha: int


def rgb_from_host(color: HostColor) -> RgbColor:
    """Read a host color as an RgbColor (alpha 0..255 becomes 0..1)."""
    return RgbColor(color.red, color.green, color.blue, color.alpha / 255)


def from_host(color: HostColor, space: ColorSpace | str | type[ColorBase]) -> ColorBase:
    """Read a host color into any model."""
    return rgb_from_host(color).convert(space)


def to_host(color: ColorBase, factory: Callable[[int, int, int, int], H]) -> H:
    """
    Build a host color from any model.

    ``factory`` receives red, green, blue and alpha as 0..255 ints, rounded half up.
    """
    rgb = color.to_rgb_color()
    red, green, blue = rgb.to_int_list()
    return factory(red, green, blue, round_half_up(rgb.alpha * 255))


def from_argb32(value: int) -> RgbColor:
    """Unpack a 0xAARRGGBB integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"ARGB value must be an int, got {type(value).__name__}")
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"ARGB value must fit in 32 bits, got {value:#x}")
    return RgbColor(
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
        ((value >> 24) & 0xFF) / 255,
    )


def to_argb32(color: ColorBase) -> int:
    """Pack any model into a 0xAARRGGBB integer."""
    return to_host(color, lambda r, g, b, a: (a << 24) | (r << 16) | (g << 8) | b)
