"""RGB -> XYZ and LAB -> XYZ, both on the 0-100 XYZ scale."""
import sys
from typing import Tuple

from boundednumbers import clamp

from .constants import LAB_EPSILON, LAB_KAPPA, RGB_TO_XYZ, WHITE_POINT
from .transfer import np_srgb_to_linear


def unit_rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert unit (0..1) nonlinear RGB to XYZ."""
    linear = np_srgb_to_linear((r, g, b))
    x, y, z = RGB_TO_XYZ @ linear * 100.0
    return float(x), float(y), float(z)


# keeps huge a/b results finite; XYZ channels must stay finite
FLOAT_MAX = sys.float_info.max


def _inverse_f(f: float) -> float:
    # multiplication overflows to inf where ** would raise
    cube = f * f * f
    if cube > LAB_EPSILON:
        return cube
    return (116.0 * f - 16.0) / LAB_KAPPA


def lab_to_xyz(lightness: float, a: float, b: float) -> Tuple[float, float, float]:
    """
    Convert CIELAB to XYZ relative to WHITE_POINT.

    Strongly chromatic LAB values can fall outside the visible range and yield
    negative XYZ components; callers clip those to 0.
    """
    fy = (lightness + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0

    if lightness > LAB_KAPPA * LAB_EPSILON:
        yr = fy ** 3
    else:
        yr = lightness / LAB_KAPPA

    xr = _inverse_f(fx)
    zr = _inverse_f(fz)

    wx, wy, wz = WHITE_POINT
    x, y, z = (float(clamp(v, -FLOAT_MAX, FLOAT_MAX)) for v in (xr * wx, yr * wy, zr * wz))
    return x, y, z
