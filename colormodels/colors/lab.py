from __future__ import annotations
from typing import ClassVar, Self, Tuple

from ..types.channel_types import CHANNELS, ChannelSpec
from ..types.color_types import ColorSpace, Scalar
from .color_base import ColorBase


class LabColor(ColorBase):
    """
    A color in the CIELAB color space, computed against the XYZ white point.

    ``lightness`` ranges from 0 to 100; ``a`` and ``b`` accept any finite
    value, roughly -128 to 127 for colors inside the RGB gamut.
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace] = ColorSpace.LAB
    channels:     ClassVar[Tuple[ChannelSpec, ...]] = CHANNELS[ColorSpace.LAB]

    def __init__(self, lightness: Scalar, a: Scalar, b: Scalar, alpha: Scalar = 1.0) -> None:
        super().__init__((lightness, a, b), alpha)

    @property
    def lightness(self) -> Scalar:
        return self._value[0]

    @property
    def a(self) -> Scalar:
        return self._value[1]

    @property
    def b(self) -> Scalar:
        return self._value[2]

    @property
    def is_white(self) -> bool:
        return self.lightness == 100

    @property
    def is_black(self) -> bool:
        return self.lightness == 0

    def with_lightness(self, lightness: Scalar) -> Self:
        return self._with_channel(0, lightness)

    def with_a(self, a: Scalar) -> Self:
        return self._with_channel(1, a)

    def with_b(self, b: Scalar) -> Self:
        return self._with_channel(2, b)
