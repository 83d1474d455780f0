"""XYZ -> CIELAB relative to the calibrated white point."""
from typing import Tuple

from .constants import LAB_EPSILON, LAB_KAPPA, WHITE_POINT


def _f(t: float) -> float:
    if t > LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return (LAB_KAPPA * t + 16.0) / 116.0


def xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """
    Convert XYZ (0-100 scale) to CIELAB.

    Returns:
        (lightness, a, b); lightness is 0..100 for XYZ inside the white point.
    """
    wx, wy, wz = WHITE_POINT
    fx = _f(x / wx)
    fy = _f(y / wy)
    fz = _f(z / wz)

    lightness = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)
    return lightness, a, b
