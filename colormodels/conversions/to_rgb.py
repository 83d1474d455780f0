"""Every model -> unit (0..1) RGB.

Results are not clipped here: HSI, HSP and XYZ can describe colors outside the
RGB gamut, and the wrapper decides how to bring them back.
"""
import math
from typing import Tuple

import numpy as np

from .constants import HSP_WEIGHTS, XYZ_TO_RGB
from .hue import hexcone_to_unit_rgb
from .transfer import np_linear_to_srgb

UnitRGB = Tuple[float, float, float]


def hsb_to_unit_rgb(h: float, s: float, v: float) -> UnitRGB:
    """HSB (hue in degrees, unit s/v) to unit RGB."""
    chroma = v * s
    return hexcone_to_unit_rgb(h, chroma, v - chroma)


def hsl_to_unit_rgb(h: float, s: float, l: float) -> UnitRGB:
    """HSL (hue in degrees, unit s/l) to unit RGB."""
    chroma = (1 - abs(2 * l - 1)) * s
    return hexcone_to_unit_rgb(h, chroma, l - chroma / 2)


def hsi_to_unit_rgb(h: float, s: float, i: float) -> UnitRGB:
    """
    HSI to unit RGB, one 120 degree sector at a time.

    In each sector the trailing channel is i(1 - s), the leading channel is
    i(1 + s cos(h)/cos(60 - h)) and the third makes the mean equal to i.
    """
    h = h % 360.0
    sector = int(h // 120)
    h -= sector * 120

    low = i * (1 - s)
    high = i * (1 + s * math.cos(math.radians(h)) / math.cos(math.radians(60 - h)))
    rest = 3 * i - (low + high)

    if sector == 0:
        return high, rest, low
    if sector == 1:
        return low, high, rest
    return rest, low, high


def hsp_to_unit_rgb(h: float, s: float, p: float) -> UnitRGB:
    """
    HSP (hue in degrees, unit s/p) to unit RGB.

    Six sectors, each fixing the ordering of the channels; the smallest
    channel is solved from the perceived brightness equation and the others
    follow from the saturation ratio and the hue fraction.
    """
    pr, pg, pb = HSP_WEIGHTS
    h = (h % 360.0) / 360.0
    min_over_max = 1 - s

    if min_over_max > 0:
        def solve(w_max: float, w_mid: float, w_min: float, frac: float):
            part = 1 + frac * (1 / min_over_max - 1)
            low = p / math.sqrt(w_max / min_over_max / min_over_max + w_mid * part * part + w_min)
            high = low / min_over_max
            return high, low + frac * (high - low), low

        if h < 1 / 6:
            r, g, b = solve(pr, pg, pb, 6 * h)
        elif h < 2 / 6:
            g, r, b = solve(pg, pr, pb, 6 * (2 / 6 - h))
        elif h < 3 / 6:
            g, b, r = solve(pg, pb, pr, 6 * (h - 2 / 6))
        elif h < 4 / 6:
            b, g, r = solve(pb, pg, pr, 6 * (4 / 6 - h))
        elif h < 5 / 6:
            b, r, g = solve(pb, pr, pg, 6 * (h - 4 / 6))
        else:
            r, b, g = solve(pr, pb, pg, 6 * (1 - h))
        return r, g, b

    # fully saturated: the smallest channel is 0
    def solve_saturated(w_max: float, w_mid: float, frac: float):
        high = math.sqrt(p * p / (w_max + w_mid * frac * frac))
        return high, high * frac, 0.0

    if h < 1 / 6:
        r, g, b = solve_saturated(pr, pg, 6 * h)
    elif h < 2 / 6:
        g, r, b = solve_saturated(pg, pr, 6 * (2 / 6 - h))
    elif h < 3 / 6:
        g, b, r = solve_saturated(pg, pb, 6 * (h - 2 / 6))
    elif h < 4 / 6:
        b, g, r = solve_saturated(pb, pg, 6 * (4 / 6 - h))
    elif h < 5 / 6:
        b, r, g = solve_saturated(pb, pr, 6 * (h - 4 / 6))
    else:
        r, b, g = solve_saturated(pr, pb, 6 * (1 - h))
    return r, g, b


def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> UnitRGB:
    """Unit CMYK to unit RGB (subtractive, no ink limiting)."""
    return (1 - c) * (1 - k), (1 - m) * (1 - k), (1 - y) * (1 - k)


def xyz_to_unit_rgb(x: float, y: float, z: float) -> UnitRGB:
    """XYZ on the 0-100 scale to unit nonlinear RGB."""
    linear = XYZ_TO_RGB @ (np.array([x, y, z]) / 100.0)
    r, g, b = (float(c) for c in np_linear_to_srgb(linear))
    return r, g, b
