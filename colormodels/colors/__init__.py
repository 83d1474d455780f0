"""
colormodels color classes
=========================

Immutable color values for the RGB, XYZ, LAB, CMYK, HSB (HSV), HSI, HSL and
HSP color spaces.

Features
--------
- Immutable instances (frozen after initialization); ``with_*`` methods
  return modified copies
- Channel validation on construction, never clamping
- Alpha channel in [0, 1] on every model, default 1.0
- Conversion between any two models through the RGB (and XYZ) pivots
- Native-scale and factored ([0, 1]) list interchange, hex strings

Usage
-----
>>> from colormodels.colors import RgbColor, CmykColor
>>> red = RgbColor(255, 0, 0)
>>> red.to_hex()
'ff0000'
>>> red.to_hsb_color()
HsbColor(0.0, 100.0, 100.0)
>>> CmykColor.from_hex("#f00") == red.to_cmyk_color()
True
>>> red.with_alpha(0.5).alpha
0.5

Notes
-----
- Equality and hashing ignore alpha: ``RgbColor(1, 2, 3, 0.5) == RgbColor(1, 2, 3)``.
- ``is_white``/``is_black`` use exact comparisons, so colors produced by a
  conversion rarely satisfy them.
"""

from .color_base import ColorBase, WithHue
from .rgb import RgbColor
from .xyz import XyzColor
from .lab import LabColor
from .cmyk import CmykColor
from .hsb import HsbColor, HsvColor
from .hsi import HsiColor
from .hsl import HslColor
from .hsp import HspColor
from .color import color_convert, get_color_class, unified_space_to_class


__all__ = [
    'ColorBase',
    'WithHue',
    'RgbColor',
    'XyzColor',
    'LabColor',
    'CmykColor',
    'HsbColor',
    'HsvColor',
    'HsiColor',
    'HslColor',
    'HspColor',
    'color_convert',
    'get_color_class',
    'unified_space_to_class',
]
