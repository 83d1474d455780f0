from __future__ import annotations
from typing import Any

from .color_base import ColorBase
from .rgb import RgbColor
from .xyz import XyzColor
from .lab import LabColor
from .cmyk import CmykColor
from .hsb import HsbColor
from .hsi import HsiColor
from .hsl import HslColor
from .hsp import HspColor
from ..conversions.hex import hex_to_rgb
from ..conversions.wrapper import convert_channels
from ..types.color_types import ColorSpace, to_color_space


def build_registry(*classes: type[ColorBase]) -> dict[ColorSpace, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}


unified_space_to_class: dict[ColorSpace, type[ColorBase]] = build_registry(
    RgbColor,
    XyzColor,
    LabColor,
    CmykColor,
    HsbColor,
    HsiColor,
    HslColor,
    HspColor,
)


def get_color_class(target: Any) -> type[ColorBase]:
    """
    Resolve a conversion target to a model class.

    Args:
        target: a ColorSpace, a space name ("hsl"), a model class, or a
            model instance (whose class is used)
    """
    if isinstance(target, ColorBase):
        return target.__class__
    if isinstance(target, type) and issubclass(target, ColorBase):
        return target
    if isinstance(target, (str, ColorSpace)):
        return unified_space_to_class[to_color_space(target)]
    raise TypeError(
        f"Cannot convert to {target!r}; expected a ColorSpace, space name, "
        f"color class or color instance"
    )


def color_convert(self: ColorBase, to_space: Any) -> ColorBase:
    """
    Convert this color to another model.

    Converting to the color's own model returns the instance unchanged.
    Alpha is carried over as-is.

    Returns:
        New ColorBase instance in the target model
    """
    cls = get_color_class(to_space)
    if cls.mode == self.mode:
        return self if cls is self.__class__ else cls(*self.value, self.alpha)
    result = convert_channels(self.value, self.mode, cls.mode)
    return cls(*result, self.alpha)


def color_from_hex(cls: type[ColorBase], hex_str: str) -> ColorBase:
    """
    Parse a 3- or 6-digit hex string (optional leading ``#``) into this model.
    """
    rgb = RgbColor(*hex_to_rgb(hex_str))
    return rgb.convert(cls)


ColorBase.convert = color_convert
ColorBase.from_hex = classmethod(color_from_hex)  # type: ignore[assignment]
