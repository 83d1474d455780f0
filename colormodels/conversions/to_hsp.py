import math
from typing import Tuple

from .constants import HSP_WEIGHTS


def perceived_brightness(r: float, g: float, b: float) -> float:
    """Weighted RGB magnitude, sqrt(.299 r^2 + .587 g^2 + .114 b^2)."""
    pr, pg, pb = HSP_WEIGHTS
    return math.sqrt(r * r * pr + g * g * pg + b * b * pb)


def unit_rgb_to_hsp(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSP (hue, saturation, perceived brightness).

    Hue and saturation use the six-sector scheme of the HSP model; the
    returned hue is in degrees and the other two channels are unit values.
    """
    p = perceived_brightness(r, g, b)

    if r == g == b:
        return 0.0, 0.0, p

    if r >= g and r >= b:
        if b >= g:
            h = 1 - (b - g) / (r - g) / 6
            s = 1 - g / r
        else:
            h = (g - b) / (r - b) / 6
            s = 1 - b / r
    elif g >= r and g >= b:
        if r >= b:
            h = 2 / 6 - (r - b) / (g - b) / 6
            s = 1 - b / g
        else:
            h = 2 / 6 + (b - r) / (g - r) / 6
            s = 1 - r / g
    else:
        if g >= r:
            h = 4 / 6 - (g - r) / (b - r) / 6
            s = 1 - r / b
        else:
            h = 4 / 6 + (r - g) / (b - g) / 6
            s = 1 - g / b

    # pure red lands on h == 1; keep hue in [0, 360)
    return (h * 360.0) % 360.0, s, p
