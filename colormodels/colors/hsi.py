from __future__ import annotations
from typing import ClassVar, Self, Tuple

from ..types.channel_types import CHANNELS, ChannelSpec
from ..types.color_types import ColorSpace, Scalar
from .color_base import ColorBase, WithHue


class HsiColor(WithHue, ColorBase):
    """
    A color in the HSI color space.

    ``hue`` ranges from 0 to 360; ``saturation`` and ``intensity`` from 0 to
    100. Intensity is the mean of the RGB channels. Not every in-range HSI
    triple lies inside the RGB gamut; converting one that doesn't clips the
    result and emits a GamutClipWarning.
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace] = ColorSpace.HSI
    channels:     ClassVar[Tuple[ChannelSpec, ...]] = CHANNELS[ColorSpace.HSI]

    def __init__(self, hue: Scalar, saturation: Scalar, intensity: Scalar, alpha: Scalar = 1.0) -> None:
        super().__init__((hue, saturation, intensity), alpha)

    @property
    def intensity(self) -> Scalar:
        return self._value[2]

    @property
    def is_white(self) -> bool:
        return self.saturation == 0 and self.intensity == 100

    @property
    def is_black(self) -> bool:
        return self.intensity == 0

    def with_intensity(self, intensity: Scalar) -> Self:
        return self._with_channel(2, intensity)
