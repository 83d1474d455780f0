"""colormodels: immutable color values and conversions between color spaces."""

from .colors import (
    ColorBase,
    RgbColor,
    XyzColor,
    LabColor,
    CmykColor,
    HsbColor,
    HsvColor,
    HsiColor,
    HslColor,
    HspColor,
    color_convert,
)
from .conversions import (
    WHITE_POINT,
    convert,
    np_convert,
    hex_to_rgb,
    rgb_to_hex,
)
from .errors import (
    ColorModelError,
    ChannelDomainError,
    ChannelCountError,
    HexFormatError,
    GamutClipWarning,
)
from .types.color_types import ColorSpace

__all__ = [
    # core color types
    "ColorBase",
    "RgbColor",
    "XyzColor",
    "LabColor",
    "CmykColor",
    "HsbColor",
    "HsvColor",
    "HsiColor",
    "HslColor",
    "HspColor",
    "ColorSpace",
    "color_convert",
    # conversions
    "WHITE_POINT",
    "convert",
    "np_convert",
    "hex_to_rgb",
    "rgb_to_hex",
    # errors
    "ColorModelError",
    "ChannelDomainError",
    "ChannelCountError",
    "HexFormatError",
    "GamutClipWarning",
]
