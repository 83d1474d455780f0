from typing import Tuple

from .hue import hue_from_unit_rgb


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSL.

    Lightness is the mean of the largest and smallest channels; saturation is
    0 for achromatic colors.
    """
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn
    l = (mx + mn) / 2
    if delta == 0:
        s = 0.0
    else:
        s = delta / (1 - abs(2 * l - 1))
    return hue_from_unit_rgb(r, g, b), s, l
