from typing import Tuple

from .hue import hue_from_unit_rgb


def unit_rgb_to_hsb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSB (HSV).

    Input:
        r, g, b in [0, 1]

    Output:
        h in [0, 360)
        s in [0, 1]
        v in [0, 1]   (the largest channel)
    """
    mx = max(r, g, b)
    mn = min(r, g, b)
    s = 0.0 if mx == 0 else (mx - mn) / mx
    return hue_from_unit_rgb(r, g, b), s, mx
