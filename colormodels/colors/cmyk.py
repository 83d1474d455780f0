from __future__ import annotations
from typing import ClassVar, Self, Tuple

from ..types.channel_types import CHANNELS, ChannelSpec
from ..types.color_types import ColorSpace, Scalar
from .color_base import ColorBase


class CmykColor(ColorBase):
    """A color in the CMYK color space; every ink ranges from 0 to 100."""
    __slots__ = ()

    num_channels: ClassVar[int] = 4
    mode:         ClassVar[ColorSpace] = ColorSpace.CMYK
    channels:     ClassVar[Tuple[ChannelSpec, ...]] = CHANNELS[ColorSpace.CMYK]

    def __init__(
        self,
        cyan: Scalar,
        magenta: Scalar,
        yellow: Scalar,
        black: Scalar,
        alpha: Scalar = 1.0,
    ) -> None:
        super().__init__((cyan, magenta, yellow, black), alpha)

    @property
    def cyan(self) -> Scalar:
        return self._value[0]

    @property
    def magenta(self) -> Scalar:
        return self._value[1]

    @property
    def yellow(self) -> Scalar:
        return self._value[2]

    @property
    def black(self) -> Scalar:
        return self._value[3]

    @property
    def is_white(self) -> bool:
        return self._value == (0, 0, 0, 0)

    @property
    def is_black(self) -> bool:
        return self.black == 100

    def with_cyan(self, cyan: Scalar) -> Self:
        return self._with_channel(0, cyan)

    def with_magenta(self, magenta: Scalar) -> Self:
        return self._with_channel(1, magenta)

    def with_yellow(self, yellow: Scalar) -> Self:
        return self._with_channel(2, yellow)

    def with_black(self, black: Scalar) -> Self:
        return self._with_channel(3, black)
