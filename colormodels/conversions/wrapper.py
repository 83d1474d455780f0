import warnings
from typing import Callable, Dict, Sequence, Tuple

import numpy as np
from boundednumbers import clamp

from ..errors import ChannelCountError, GamutClipWarning
from ..types.channel_types import ALPHA, CHANNELS, num_channels
from ..types.color_types import ColorSpace, ScalarVector, to_color_space
from ..utils.num_utils import clip_to_domain, validate_channel, validate_count

from .to_cmyk import unit_rgb_to_cmyk
from .to_hsb import unit_rgb_to_hsb
from .to_hsi import unit_rgb_to_hsi
from .to_hsl import unit_rgb_to_hsl
from .to_hsp import unit_rgb_to_hsp
from .to_lab import xyz_to_lab
from .to_rgb import (
    cmyk_to_unit_rgb,
    hsb_to_unit_rgb,
    hsi_to_unit_rgb,
    hsl_to_unit_rgb,
    hsp_to_unit_rgb,
    xyz_to_unit_rgb,
)
from .to_xyz import lab_to_xyz, unit_rgb_to_xyz

# An RGB intermediate further than this outside [0, 1] is a real gamut
# excursion, not rounding noise, and is reported when clipped.
GAMUT_TOLERANCE = 1e-9

TO_UNIT_RGB: Dict[ColorSpace, Callable[..., Tuple[float, float, float]]] = {
    ColorSpace.XYZ: xyz_to_unit_rgb,
    ColorSpace.CMYK: cmyk_to_unit_rgb,
    ColorSpace.HSB: hsb_to_unit_rgb,
    ColorSpace.HSI: hsi_to_unit_rgb,
    ColorSpace.HSL: hsl_to_unit_rgb,
    ColorSpace.HSP: hsp_to_unit_rgb,
}

FROM_UNIT_RGB: Dict[ColorSpace, Callable[[float, float, float], Tuple[float, ...]]] = {
    ColorSpace.XYZ: unit_rgb_to_xyz,
    ColorSpace.CMYK: unit_rgb_to_cmyk,
    ColorSpace.HSB: unit_rgb_to_hsb,
    ColorSpace.HSI: unit_rgb_to_hsi,
    ColorSpace.HSL: unit_rgb_to_hsl,
    ColorSpace.HSP: unit_rgb_to_hsp,
}

# Pairs that skip the RGB pivot
CONVERT_DIRECT: Dict[Tuple[ColorSpace, ColorSpace], Callable[[float, float, float], Tuple[float, float, float]]] = {
    (ColorSpace.XYZ, ColorSpace.LAB): xyz_to_lab,
    (ColorSpace.LAB, ColorSpace.XYZ): lab_to_xyz,
}


def normalize(values: Sequence[float], space: ColorSpace) -> Tuple[float, ...]:
    """Native channel values -> the scale the formulas take."""
    return tuple(v / spec.unit for v, spec in zip(values, CHANNELS[space]))


def scale(values: Sequence[float], space: ColorSpace) -> Tuple[float, ...]:
    """Formula output -> native channel values, clipped into each channel's domain."""
    return tuple(
        clip_to_domain(spec, float(v) * spec.unit)
        for v, spec in zip(values, CHANNELS[space])
    )


def _clip_unit_rgb(rgb: Tuple[float, float, float], source: ColorSpace) -> Tuple[float, float, float]:
    if any(c < -GAMUT_TOLERANCE or c > 1 + GAMUT_TOLERANCE for c in rgb):
        warnings.warn(
            f"{source.value} color is outside the RGB gamut (unit RGB {rgb}); clipping to [0, 1]",
            GamutClipWarning,
            stacklevel=4,
        )
    r, g, b = (float(clamp(c, 0.0, 1.0)) for c in rgb)
    return r, g, b


def _to_unit_rgb(values: Tuple[float, ...], space: ColorSpace) -> Tuple[float, float, float]:
    if space == ColorSpace.RGB:
        r, g, b = values
        return r, g, b
    if space == ColorSpace.LAB:
        xyz = scale(lab_to_xyz(*values), ColorSpace.XYZ)
        return _clip_unit_rgb(xyz_to_unit_rgb(*xyz), space)
    return _clip_unit_rgb(TO_UNIT_RGB[space](*values), space)


def _from_unit_rgb(rgb: Tuple[float, float, float], space: ColorSpace) -> Tuple[float, ...]:
    if space == ColorSpace.RGB:
        return rgb
    if space == ColorSpace.LAB:
        return xyz_to_lab(*unit_rgb_to_xyz(*rgb))
    return FROM_UNIT_RGB[space](*rgb)


def convert_channels(values: Sequence[float], from_space: ColorSpace, to_space: ColorSpace) -> Tuple[float, ...]:
    """
    Convert already-validated channel values (no alpha) between two spaces.

    Routes through the direct table when a pair has one, otherwise through
    unit RGB (LAB additionally passes through XYZ on either side).
    """
    unit = normalize(values, from_space)
    key = (from_space, to_space)
    if key in CONVERT_DIRECT:
        converted = CONVERT_DIRECT[key](*unit)
    else:
        converted = _from_unit_rgb(_to_unit_rgb(unit, from_space), to_space)
    return scale(converted, to_space)


def convert(
    color: Sequence[float],
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> ScalarVector:
    """
    Convert one color given as native channel values, with optional trailing alpha.

    Args:
        color: channel values on the source space's native scale
        from_space: source color space (e.g. "rgb", ColorSpace.LAB)
        to_space: target color space

    Returns:
        Tuple of target channel values, followed by the unchanged alpha if
        one was given.
    """
    fs = to_color_space(from_space)
    ts = to_color_space(to_space)
    arity = num_channels(fs)
    values = validate_count(f"{fs.value} color", color, arity)
    owner = f"{fs.value} color"
    checked = tuple(
        validate_channel(owner, spec, v)
        for v, spec in zip(values, CHANNELS[fs] + (ALPHA,))
    )
    if fs == ts:
        return checked
    return convert_channels(checked[:arity], fs, ts) + checked[arity:]


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> np.ndarray:
    """
    Vectorized :func:`convert` over the last axis of ``color``.

    The last dimension holds the channels (optionally followed by alpha);
    every leading dimension is preserved.

    Rows are converted one at a time through :func:`convert` (via
    ``np.apply_along_axis``), so this is a Python-level loop: each row gets
    the same validation, clipping and gamut warnings as a single color.
    """
    fs = to_color_space(from_space)
    ts = to_color_space(to_space)
    arr = np.asarray(color, dtype=float)
    arity = num_channels(fs)
    if arr.ndim == 0 or arr.shape[-1] not in (arity, arity + 1):
        raise ChannelCountError(
            f"{fs.value} expects last dimension to be {arity} or {arity + 1}, "
            f"got shape {arr.shape}"
        )
    if fs == ts:
        return arr
    return np.apply_along_axis(lambda row: np.array(convert(row, fs, ts)), -1, arr)
