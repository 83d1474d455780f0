"""
colormodels conversions
=======================

Pure functions converting single colors between RGB, XYZ, LAB, CMYK, HSB, HSI,
HSL and HSP.

The formulas work on *unit* values: RGB, saturation, brightness, intensity,
lightness, perceived brightness and CMYK inks on [0, 1], hue in degrees.
XYZ (0-100 scale, upwardly unbounded) and LAB take their native scales.

Conversion Functions
--------------------

RGB -> model:
    unit_rgb_to_cmyk, unit_rgb_to_hsb, unit_rgb_to_hsi, unit_rgb_to_hsl,
    unit_rgb_to_hsp, unit_rgb_to_xyz

model -> RGB:
    cmyk_to_unit_rgb, hsb_to_unit_rgb, hsi_to_unit_rgb, hsl_to_unit_rgb,
    hsp_to_unit_rgb, xyz_to_unit_rgb

XYZ <-> LAB:
    xyz_to_lab, lab_to_xyz

Hex:
    hex_to_rgb, rgb_to_hex

High-Level API
--------------
    convert(color, from_space, to_space)
        Native-scale tuple in, native-scale tuple out, alpha passed through.
    np_convert(array, from_space, to_space)
        The same over the last axis of an array.

Every pair of models is reachable: conversions pivot through RGB, and LAB
additionally through XYZ.

Examples
--------
>>> from colormodels.conversions import convert
>>> convert((255, 0, 0), "rgb", "hsb")
(0.0, 100.0, 100.0)
>>> convert((0, 0, 0, 100, 0.5), "cmyk", "rgb")
(0.0, 0.0, 0.0, 0.5)
"""

from .constants import WHITE_POINT, LAB_EPSILON, LAB_KAPPA, HSP_WEIGHTS
from .hex import hex_to_rgb, rgb_to_hex
from .to_cmyk import unit_rgb_to_cmyk
from .to_hsb import unit_rgb_to_hsb
from .to_hsi import unit_rgb_to_hsi
from .to_hsl import unit_rgb_to_hsl
from .to_hsp import unit_rgb_to_hsp, perceived_brightness
from .to_lab import xyz_to_lab
from .to_rgb import (
    cmyk_to_unit_rgb,
    hsb_to_unit_rgb,
    hsi_to_unit_rgb,
    hsl_to_unit_rgb,
    hsp_to_unit_rgb,
    xyz_to_unit_rgb,
)
from .to_xyz import unit_rgb_to_xyz, lab_to_xyz
from .wrapper import convert, np_convert

from ..types.color_types import ColorSpace

__all__ = [
    # constants
    'WHITE_POINT',
    'LAB_EPSILON',
    'LAB_KAPPA',
    'HSP_WEIGHTS',

    # hex
    'hex_to_rgb',
    'rgb_to_hex',

    # RGB -> model
    'unit_rgb_to_cmyk',
    'unit_rgb_to_hsb',
    'unit_rgb_to_hsi',
    'unit_rgb_to_hsl',
    'unit_rgb_to_hsp',
    'unit_rgb_to_xyz',
    'perceived_brightness',

    # model -> RGB
    'cmyk_to_unit_rgb',
    'hsb_to_unit_rgb',
    'hsi_to_unit_rgb',
    'hsl_to_unit_rgb',
    'hsp_to_unit_rgb',
    'xyz_to_unit_rgb',

    # XYZ <-> LAB
    'xyz_to_lab',
    'lab_to_xyz',

    # High-level API
    'convert',
    'np_convert',

    # Types
    'ColorSpace',
]
