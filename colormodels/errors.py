"""Exceptions and warnings raised by colormodels.

Every error is a subclass of :class:`ValueError` so callers that already guard
conversions with ``except ValueError`` keep working.
"""


class ColorModelError(ValueError):
    """Base class for invalid input handed to a color model."""


class ChannelDomainError(ColorModelError):
    """A channel or alpha value is missing, not finite, or outside its domain."""


class ChannelCountError(ColorModelError):
    """A channel sequence has the wrong number of elements."""


class HexFormatError(ColorModelError):
    """A hexadecimal color string has the wrong length or non-hex characters."""


class GamutClipWarning(UserWarning):
    """A conversion produced RGB values outside the gamut and they were clipped."""
