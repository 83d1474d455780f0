from __future__ import annotations
import math
from numbers import Real
from typing import Any, Sequence, Tuple

import numpy as np
from boundednumbers import clamp

from ..errors import ChannelCountError, ChannelDomainError
from ..types.channel_types import ChannelSpec
from ..types.color_types import Scalar


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (0.5 -> 1, 2.5 -> 3)."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def validate_channel(owner: str, spec: ChannelSpec, value: Any) -> Scalar:
    """
    Check a single channel value against its domain.

    Numpy scalars are unwrapped to the matching Python number. Nothing is
    clamped: out-of-domain values raise.

    Raises:
        ChannelDomainError: if the value is None, NaN, infinite or out of range.
        TypeError: if the value is not a real number.
    """
    if value is None:
        raise ChannelDomainError(f"{owner} {spec.name} must not be None")
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(
            f"{owner} {spec.name} must be a real number, got {type(value).__name__}"
        )
    if not math.isfinite(value):
        raise ChannelDomainError(f"{owner} {spec.name} must be finite, got {value!r}")
    if (spec.minimum is not None and value < spec.minimum) or (
        spec.maximum is not None and value > spec.maximum
    ):
        raise ChannelDomainError(
            f"{owner} {spec.name} must be within {spec.domain}, got {value!r}"
        )
    return value


def validate_count(owner: str, values: Sequence[Any], arity: int) -> Tuple[Any, ...]:
    """
    Check that ``values`` holds ``arity`` channels, optionally followed by alpha.

    Only the length is looked at; the elements are validated by the caller.
    """
    values = tuple(values)
    if len(values) not in (arity, arity + 1):
        raise ChannelCountError(
            f"{owner} expects {arity} or {arity + 1} values, got {len(values)}"
        )
    return values


def clip_to_domain(spec: ChannelSpec, value: float) -> float:
    """Clip a computed value into the channel's domain (unbounded sides are left alone)."""
    if spec.minimum is not None and spec.maximum is not None:
        return float(clamp(value, spec.minimum, spec.maximum))
    if spec.minimum is not None:
        return max(value, spec.minimum)
    if spec.maximum is not None:
        return min(value, spec.maximum)
    return value
