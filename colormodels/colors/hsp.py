from __future__ import annotations
from typing import ClassVar, Self, Tuple

from ..types.channel_types import CHANNELS, ChannelSpec
from ..types.color_types import ColorSpace, Scalar
from .color_base import ColorBase, WithHue


class HspColor(WithHue, ColorBase):
    """
    A color in the HSP color space.

    Like HSB, but brightness is perceived brightness,
    sqrt(.299 R^2 + .587 G^2 + .114 B^2), so a yellow and a blue with the same
    ``perceived_brightness`` look about equally bright. ``hue`` ranges from 0
    to 360; ``saturation`` and ``perceived_brightness`` from 0 to 100.
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace] = ColorSpace.HSP
    channels:     ClassVar[Tuple[ChannelSpec, ...]] = CHANNELS[ColorSpace.HSP]

    def __init__(
        self,
        hue: Scalar,
        saturation: Scalar,
        perceived_brightness: Scalar,
        alpha: Scalar = 1.0,
    ) -> None:
        super().__init__((hue, saturation, perceived_brightness), alpha)

    @property
    def perceived_brightness(self) -> Scalar:
        return self._value[2]

    @property
    def is_white(self) -> bool:
        return self.saturation == 0 and self.perceived_brightness == 100

    @property
    def is_black(self) -> bool:
        return self.perceived_brightness == 0

    def with_perceived_brightness(self, perceived_brightness: Scalar) -> Self:
        return self._with_channel(2, perceived_brightness)
