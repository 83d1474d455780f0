from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, ClassVar, List, Self, Sequence, Tuple

from ..conversions.hex import rgb_to_hex
from ..conversions.hue import interpolate_hue, wrap_hue
from ..errors import ChannelCountError
from ..types.channel_types import ALPHA, ChannelSpec
from ..types.color_types import ColorSpace, Scalar, ScalarVector
from ..utils.num_utils import clip_to_domain, validate_channel, validate_count

if TYPE_CHECKING:
    from .cmyk import CmykColor
    from .hsb import HsbColor
    from .hsi import HsiColor
    from .hsl import HslColor
    from .hsp import HspColor
    from .lab import LabColor
    from .rgb import RgbColor
    from .xyz import XyzColor


class ColorBase(ABC):
    """
    Immutable color value: a fixed tuple of channels plus an alpha in [0, 1].

    Subclasses declare their channel table and a constructor taking the
    channels positionally followed by ``alpha``. Every channel is validated on
    construction and nothing is clamped.

    Equality and hashing look at the channel values only. Alpha is ignored, so
    two colors that differ only in transparency compare equal.
    """
    __slots__ = ('_value', '_alpha', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int]
    mode:         ClassVar[ColorSpace]
    channels:     ClassVar[Tuple[ChannelSpec, ...]]

    # attached in color.py, which knows every model class
    convert: Callable[[ColorBase, Any], ColorBase]
    from_hex: Callable[[str], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Sequence[Scalar], alpha: Scalar = 1.0) -> None:
        owner = self.__class__.__name__
        if len(value) != self.num_channels:
            raise ChannelCountError(f"{owner} expects {self.num_channels} channels, got {len(value)}")

        self._value = tuple(
            validate_channel(owner, spec, v) for v, spec in zip(value, self.channels)
        )
        self._alpha = validate_channel(owner, ALPHA, alpha)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    @property
    def alpha(self) -> Scalar:
        return self._alpha

    @property
    @abstractmethod
    def is_white(self) -> bool:
        """Exact comparison against the model's white; no tolerance."""

    @property
    @abstractmethod
    def is_black(self) -> bool:
        """Exact comparison against the model's black; no tolerance."""

    @property
    def has_hue(self) -> bool:
        """Check if this color space leads with a hue channel."""
        return self.channels[0].cyclic

    # ------------------ LISTS ------------------
    def to_list(self) -> List[Scalar]:
        """Channel values in order, on the model's native scale."""
        return list(self._value)

    def to_list_with_alpha(self) -> List[Scalar]:
        return list(self._value) + [self._alpha]

    def to_factored_list(self) -> List[float]:
        """Channel values rescaled to [0, 1]."""
        return [spec.to_factored(v) for v, spec in zip(self._value, self.channels)]

    @classmethod
    def from_list(cls, values: Sequence[Scalar]) -> Self:
        """
        Build a color from native-scale values.

        ``values`` must hold exactly the model's channels, optionally followed
        by alpha.
        """
        values = validate_count(cls.__name__, values, cls.num_channels)
        return cls(*values)

    @classmethod
    def extrapolate(cls, values: Sequence[float]) -> Self:
        """
        Build a color from factored ([0, 1]-scaled) values.

        An optional trailing alpha is taken as-is.
        """
        values = validate_count(cls.__name__, values, cls.num_channels)
        owner = cls.__name__
        channels = []
        for v, spec in zip(values, cls.channels):
            factored = spec._replace(
                minimum=None if spec.minimum is None else spec.to_factored(spec.minimum),
                maximum=None if spec.maximum is None else spec.to_factored(spec.maximum),
            )
            channels.append(spec.from_factored(validate_channel(owner, factored, v)))
        return cls(*channels, *values[cls.num_channels:])

    @classmethod
    def from_color(cls, color: ColorBase) -> Self:
        """Return ``color`` converted into this model."""
        if not isinstance(color, ColorBase):
            raise TypeError(f"{cls.__name__}.from_color requires a ColorBase instance")
        return color.convert(cls)  # type: ignore[return-value]

    def to_hex(self, with_hash: bool = False) -> str:
        """6-digit lowercase hex of this color's RGB form."""
        return rgb_to_hex(*self.to_rgb_color().value, with_hash=with_hash)

    # ------------------ COPIES ------------------
    def _with_channel(self, index: int, value: Scalar) -> Self:
        values = list(self._value)
        values[index] = value
        return self.__class__(*values, self._alpha)

    def with_alpha(self, alpha: Scalar) -> Self:
        """Return a copy with ``alpha`` replaced."""
        return self.__class__(*self._value, alpha)

    def with_values(self, values: Sequence[Scalar]) -> Self:
        """Return a copy with every channel replaced; alpha is kept unless given."""
        values = validate_count(self.__class__.__name__, values, self.num_channels)
        if len(values) == self.num_channels:
            values = values + (self._alpha,)
        return self.__class__(*values)

    # ------------------ CONVERSIONS ------------------
    def to_rgb_color(self) -> RgbColor:
        return self.convert(ColorSpace.RGB)  # type: ignore[return-value]

    def to_xyz_color(self) -> XyzColor:
        return self.convert(ColorSpace.XYZ)  # type: ignore[return-value]

    def to_lab_color(self) -> LabColor:
        return self.convert(ColorSpace.LAB)  # type: ignore[return-value]

    def to_cmyk_color(self) -> CmykColor:
        return self.convert(ColorSpace.CMYK)  # type: ignore[return-value]

    def to_hsb_color(self) -> HsbColor:
        return self.convert(ColorSpace.HSB)  # type: ignore[return-value]

    def to_hsi_color(self) -> HsiColor:
        return self.convert(ColorSpace.HSI)  # type: ignore[return-value]

    def to_hsl_color(self) -> HslColor:
        return self.convert(ColorSpace.HSL)  # type: ignore[return-value]

    def to_hsp_color(self) -> HspColor:
        return self.convert(ColorSpace.HSP)  # type: ignore[return-value]

    # ------------------ DERIVED COLORS ------------------
    def interpolate(self, end: ColorBase, step: float) -> Self:
        """
        Blend towards ``end`` (converted to this model) by ``step`` in [0, 1].

        Channels and alpha move linearly; a hue channel takes the shortest
        way around the circle.
        """
        if not 0 <= step <= 1:
            raise ValueError(f"step must be within [0, 1], got {step!r}")
        other = end.convert(self.__class__)
        if step == 0:
            return self
        if step == 1:
            return other  # type: ignore[return-value]

        values = []
        for spec, start, stop in zip(self.channels, self._value, other.value):
            if spec.cyclic:
                values.append(interpolate_hue(start, stop, step))
            else:
                values.append(clip_to_domain(spec, start + (stop - start) * step))
        alpha = clip_to_domain(ALPHA, self._alpha + (other.alpha - self._alpha) * step)
        return self.__class__(*values, alpha)

    def lerp_to(self, color: ColorBase, steps: int, exclude_original_colors: bool = False) -> List[Self]:
        """
        ``steps`` evenly spaced colors between this color and ``color``.

        Unless ``exclude_original_colors`` is set, the list starts with this
        color and ends with ``color`` expressed in this model.
        """
        if isinstance(steps, bool) or not isinstance(steps, int) or steps < 1:
            raise ValueError(f"steps must be a positive integer, got {steps!r}")
        colors = [self.interpolate(color, i / (steps + 1)) for i in range(1, steps + 1)]
        if exclude_original_colors:
            return colors
        return [self, *colors, color.convert(self.__class__)]  # type: ignore[list-item]

    @property
    def inverted(self) -> Self:
        """The RGB complement of this color, in this model."""
        rgb = self.to_rgb_color()
        inverse = rgb.with_values([255 - v for v in rgb.value])
        return inverse.convert(self.__class__)  # type: ignore[return-value]

    def rotate_hue(self, degrees: float) -> Self:
        """Rotate the hue by ``degrees``; models without a hue go through HSB."""
        if self.has_hue:
            return self._with_channel(0, wrap_hue(self._value[0] + degrees))
        return self.to_hsb_color().rotate_hue(degrees).convert(self.__class__)  # type: ignore[return-value]

    @property
    def opposite(self) -> Self:
        """The color on the other side of the hue circle."""
        return self.rotate_hue(180)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        args = ", ".join(repr(v) for v in self._value)
        if self._alpha != 1:
            args += f", alpha={self._alpha!r}"
        return f"{self.__class__.__name__}({args})"


class WithHue(ABC):
    """
    Mixin for a ColorBase subclass that leads with hue and saturation.
    Assumes hue is channel 0 and saturation is channel 1.
    """
    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColorBase)
    _value: ScalarVector
    _with_channel: Callable[..., Any]

    @property
    def hue(self) -> Scalar:
        """Hue in degrees, 0 to 360."""
        return self._value[0]

    @property
    def saturation(self) -> Scalar:
        """Saturation, 0 to 100."""
        return self._value[1]

    def with_hue(self, hue: Scalar) -> Self:
        return self._with_channel(0, hue)

    def with_saturation(self, saturation: Scalar) -> Self:
        return self._with_channel(1, saturation)
