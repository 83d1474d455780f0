from __future__ import annotations
from typing import ClassVar, Self, Tuple

from ..types.channel_types import CHANNELS, ChannelSpec
from ..types.color_types import ColorSpace, Scalar
from .color_base import ColorBase, WithHue


class HslColor(WithHue, ColorBase):
    """
    A color in the HSL color space.

    ``hue`` ranges from 0 to 360; ``saturation`` and ``lightness`` from 0 to
    100.
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace] = ColorSpace.HSL
    channels:     ClassVar[Tuple[ChannelSpec, ...]] = CHANNELS[ColorSpace.HSL]

    def __init__(self, hue: Scalar, saturation: Scalar, lightness: Scalar, alpha: Scalar = 1.0) -> None:
        super().__init__((hue, saturation, lightness), alpha)

    @property
    def lightness(self) -> Scalar:
        return self._value[2]

    @property
    def is_white(self) -> bool:
        return self.lightness == 100

    @property
    def is_black(self) -> bool:
        return self.lightness == 0

    def with_lightness(self, lightness: Scalar) -> Self:
        return self._with_channel(2, lightness)
