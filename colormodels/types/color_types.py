from __future__ import annotations
from enum import Enum
from typing import Tuple

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]


class ColorSpace(str, Enum):
    RGB = "rgb"
    XYZ = "xyz"
    LAB = "lab"
    CMYK = "cmyk"
    HSB = "hsb"
    HSI = "hsi"
    HSL = "hsl"
    HSP = "hsp"


HUE_SPACES = {ColorSpace.HSB, ColorSpace.HSI, ColorSpace.HSL, ColorSpace.HSP}

# "hsv" is the common name for HSB
SPACE_ALIASES = {"hsv": ColorSpace.HSB}


def to_color_space(space: ColorSpace | str) -> ColorSpace:
    """
    Resolve a color space name (case-insensitive) or enum member.

    Raises:
        ValueError: if the name is not a supported color space.
    """
    if isinstance(space, ColorSpace):
        return space
    if not isinstance(space, str):
        raise TypeError(f"Color space must be a ColorSpace or str, got {type(space).__name__}")
    name = space.lower()
    if name in SPACE_ALIASES:
        return SPACE_ALIASES[name]
    try:
        return ColorSpace(name)
    except ValueError:
        raise ValueError(f"Unknown color space: {space!r}") from None


def is_hue_space(color_space: ColorSpace | str) -> bool:
    """
    Check if the given color space leads with a hue channel.

    Args:
        color_space: Color space name or enum member
    Returns:
        True if hue-based, False otherwise
    """
    return to_color_space(color_space) in HUE_SPACES
