from __future__ import annotations
from typing import ClassVar, Self, Tuple

from ..conversions.constants import WHITE_POINT
from ..types.channel_types import CHANNELS, ChannelSpec
from ..types.color_types import ColorSpace, Scalar
from .color_base import ColorBase


class XyzColor(ColorBase):
    """
    A color in the CIEXYZ color space.

    ``x``, ``y`` and ``z`` must be ``>= 0``. They are scaled so that 100 is
    nominal white but are left upwardly unbounded, since LAB colors outside
    the RGB gamut convert to XYZ values above the white point.

    ``is_white`` and ``is_black`` compare exactly against 100 and 0, so they
    are rarely true for a color that came out of a conversion.
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace] = ColorSpace.XYZ
    channels:     ClassVar[Tuple[ChannelSpec, ...]] = CHANNELS[ColorSpace.XYZ]

    # calibrated for this library's RGB primaries, not a CIE illuminant
    WHITE_POINT: ClassVar[Tuple[float, float, float]] = WHITE_POINT

    def __init__(self, x: Scalar, y: Scalar, z: Scalar, alpha: Scalar = 1.0) -> None:
        super().__init__((x, y, z), alpha)

    @property
    def x(self) -> Scalar:
        return self._value[0]

    @property
    def y(self) -> Scalar:
        return self._value[1]

    @property
    def z(self) -> Scalar:
        return self._value[2]

    @property
    def is_white(self) -> bool:
        return self._value == (100, 100, 100)

    @property
    def is_black(self) -> bool:
        return self._value == (0, 0, 0)

    def with_x(self, x: Scalar) -> Self:
        return self._with_channel(0, x)

    def with_y(self, y: Scalar) -> Self:
        return self._with_channel(1, y)

    def with_z(self, z: Scalar) -> Self:
        return self._with_channel(2, z)
