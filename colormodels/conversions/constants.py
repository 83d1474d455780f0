"""
Constants shared by the conversion formulas.

XYZ is kept on a 0-100 scale. The white point was calibrated for this
library's RGB primaries rather than taken from a CIE standard illuminant:
unit RGB white maps exactly onto it, and LAB is computed relative to it.
"""
from typing import Tuple

import numpy as np

WHITE_POINT: Tuple[float, float, float] = (
    105.21266389510953,
    100.0000000000007,
    91.82249511582535,
)

# sRGB primaries, D65 (Lindbloom)
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

# Rows rescaled so that linear RGB (1, 1, 1) lands on WHITE_POINT / 100.
RGB_TO_XYZ = SRGB_TO_XYZ * (np.array(WHITE_POINT) / 100.0 / SRGB_TO_XYZ.sum(axis=1))[:, np.newaxis]
XYZ_TO_RGB = np.linalg.inv(RGB_TO_XYZ)

# CIE constants, kept at the precision the library has always used
LAB_EPSILON = 0.008856
LAB_KAPPA = 903.3

# Perceived brightness weights (Finley's HSP)
HSP_WEIGHTS: Tuple[float, float, float] = (0.299, 0.587, 0.114)
