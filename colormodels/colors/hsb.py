from __future__ import annotations
from typing import ClassVar, Self, Tuple

from ..types.channel_types import CHANNELS, ChannelSpec
from ..types.color_types import ColorSpace, Scalar
from .color_base import ColorBase, WithHue


class HsbColor(WithHue, ColorBase):
    """
    A color in the HSB (HSV) color space.

    ``hue`` ranges from 0 to 360; ``saturation`` and ``brightness`` from 0
    to 100. Brightness is the largest RGB channel.
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace] = ColorSpace.HSB
    channels:     ClassVar[Tuple[ChannelSpec, ...]] = CHANNELS[ColorSpace.HSB]

    def __init__(self, hue: Scalar, saturation: Scalar, brightness: Scalar, alpha: Scalar = 1.0) -> None:
        super().__init__((hue, saturation, brightness), alpha)

    @property
    def brightness(self) -> Scalar:
        return self._value[2]

    @property
    def is_white(self) -> bool:
        return self.saturation == 0 and self.brightness == 100

    @property
    def is_black(self) -> bool:
        return self.brightness == 0

    def with_brightness(self, brightness: Scalar) -> Self:
        return self._with_channel(2, brightness)


# "HSV" is the common name for HSB
HsvColor = HsbColor
