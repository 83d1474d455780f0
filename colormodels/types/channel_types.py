"""
Per-model channel table.

Each channel carries its valid domain, the divisor that brings it to the
unit scale the conversion formulas work in, and the scale/offset used for
factored ([0, 1]) lists.
"""
from __future__ import annotations
from typing import NamedTuple, Optional, Tuple

from .color_types import ColorSpace


class ChannelSpec(NamedTuple):
    name: str
    minimum: Optional[float]
    maximum: Optional[float]
    unit: float = 1.0
    factor: float = 1.0
    offset: float = 0.0
    cyclic: bool = False

    def to_factored(self, value: float) -> float:
        return (value - self.offset) / self.factor

    def from_factored(self, value: float) -> float:
        return value * self.factor + self.offset

    @property
    def domain(self) -> str:
        low = "-inf" if self.minimum is None else f"{self.minimum:g}"
        high = "inf" if self.maximum is None else f"{self.maximum:g}"
        return f"[{low}, {high}]"


def _hue() -> ChannelSpec:
    # formulas take hue in degrees, so unit stays 1
    return ChannelSpec("hue", 0, 360, unit=1.0, factor=360.0, cyclic=True)


def _percent(name: str) -> ChannelSpec:
    return ChannelSpec(name, 0, 100, unit=100.0, factor=100.0)


def _rgb(name: str) -> ChannelSpec:
    return ChannelSpec(name, 0, 255, unit=255.0, factor=255.0)


ALPHA = ChannelSpec("alpha", 0, 1)

CHANNELS: dict[ColorSpace, Tuple[ChannelSpec, ...]] = {
    ColorSpace.RGB: (_rgb("red"), _rgb("green"), _rgb("blue")),
    ColorSpace.XYZ: (
        ChannelSpec("x", 0, None, factor=100.0),
        ChannelSpec("y", 0, None, factor=100.0),
        ChannelSpec("z", 0, None, factor=100.0),
    ),
    ColorSpace.LAB: (
        ChannelSpec("lightness", 0, 100, factor=100.0),
        ChannelSpec("a", None, None, factor=255.0, offset=-128.0),
        ChannelSpec("b", None, None, factor=255.0, offset=-128.0),
    ),
    ColorSpace.CMYK: (
        _percent("cyan"),
        _percent("magenta"),
        _percent("yellow"),
        _percent("black"),
    ),
    ColorSpace.HSB: (_hue(), _percent("saturation"), _percent("brightness")),
    ColorSpace.HSI: (_hue(), _percent("saturation"), _percent("intensity")),
    ColorSpace.HSL: (_hue(), _percent("saturation"), _percent("lightness")),
    ColorSpace.HSP: (_hue(), _percent("saturation"), _percent("perceived_brightness")),
}


def num_channels(space: ColorSpace) -> int:
    return len(CHANNELS[space])
