from __future__ import annotations
from typing import ClassVar, List, Self, Tuple

from ..types.channel_types import CHANNELS, ChannelSpec
from ..types.color_types import ColorSpace, Scalar
from ..utils.num_utils import round_half_up
from .color_base import ColorBase


class RgbColor(ColorBase):
    """
    A color in the RGB color space, the library's main pivot.

    ``red``, ``green`` and ``blue`` range from 0 to 255 and may be fractional.
    """
    __slots__ = ()

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace] = ColorSpace.RGB
    channels:     ClassVar[Tuple[ChannelSpec, ...]] = CHANNELS[ColorSpace.RGB]

    def __init__(self, red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar = 1.0) -> None:
        super().__init__((red, green, blue), alpha)

    @property
    def red(self) -> Scalar:
        return self._value[0]

    @property
    def green(self) -> Scalar:
        return self._value[1]

    @property
    def blue(self) -> Scalar:
        return self._value[2]

    @property
    def is_white(self) -> bool:
        return self._value == (255, 255, 255)

    @property
    def is_black(self) -> bool:
        return self._value == (0, 0, 0)

    def with_red(self, red: Scalar) -> Self:
        return self._with_channel(0, red)

    def with_green(self, green: Scalar) -> Self:
        return self._with_channel(1, green)

    def with_blue(self, blue: Scalar) -> Self:
        return self._with_channel(2, blue)

    def to_int_list(self) -> List[int]:
        """Channels rounded to the nearest integer, halves rounding up."""
        return [round_half_up(v) for v in self._value]
