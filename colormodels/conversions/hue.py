"""Hue helpers shared by the hexcone models (HSB, HSL) and interpolation."""
from typing import Tuple

from boundednumbers.functions import cyclic_wrap_float

HUE_360 = 360.0


def hue_from_unit_rgb(r: float, g: float, b: float) -> float:
    """
    Hexcone hue of a unit RGB triple, in degrees [0, 360).

    Achromatic colors (max == min) have hue 0.
    """
    mx = max(r, g, b)
    delta = mx - min(r, g, b)
    if delta == 0:
        return 0.0
    if mx == r:
        h = ((g - b) / delta) % 6
    elif mx == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return (60.0 * h) % HUE_360


def hexcone_to_unit_rgb(h: float, chroma: float, m: float) -> Tuple[float, float, float]:
    """
    Rebuild unit RGB from hue (degrees), chroma and the minimum channel ``m``.

    Shared by HSB and HSL, which differ only in how chroma and m are derived.
    """
    hp = (h % HUE_360) / 60.0
    x = chroma * (1 - abs(hp % 2 - 1))
    sector = int(hp)
    if sector == 0:
        r, g, b = chroma, x, 0.0
    elif sector == 1:
        r, g, b = x, chroma, 0.0
    elif sector == 2:
        r, g, b = 0.0, chroma, x
    elif sector == 3:
        r, g, b = 0.0, x, chroma
    elif sector == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x
    return r + m, g + m, b + m


def wrap_hue(h: float) -> float:
    """Wrap any angle into [0, 360)."""
    wrapped = float(cyclic_wrap_float(h, 0.0, HUE_360))
    # guard against the closed end of the wrap
    return 0.0 if wrapped >= HUE_360 else wrapped


def interpolate_hue(start: float, end: float, step: float) -> float:
    """Interpolate between two hues along the shortest arc."""
    delta = ((end - start + 180.0) % HUE_360) - 180.0
    return wrap_hue(start + delta * step)
