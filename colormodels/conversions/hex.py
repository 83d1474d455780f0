"""Hexadecimal color strings ("#ff8800", "f80")."""
import string
from typing import Tuple

from ..errors import HexFormatError
from ..utils.num_utils import round_half_up

HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_rgb(hex_str: str) -> Tuple[int, int, int]:
    """
    Parse a 3- or 6-digit hex color into integer RGB (0..255).

    Case-insensitive, with one optional leading ``#``. The 3-digit form
    repeats each digit ("f0a" == "ff00aa").

    Raises:
        HexFormatError: wrong length or a non-hex character.
        TypeError: if ``hex_str`` is not a string.
    """
    if not isinstance(hex_str, str):
        raise TypeError(f"hex color must be a str, got {type(hex_str).__name__}")

    digits = hex_str[1:] if hex_str.startswith("#") else hex_str
    if len(digits) not in (3, 6):
        raise HexFormatError(
            f"hex color must have 3 or 6 digits, got {len(digits)} in {hex_str!r}"
        )
    if not HEX_DIGITS.issuperset(digits):
        raise HexFormatError(f"hex color contains non-hex characters: {hex_str!r}")

    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(r: float, g: float, b: float, with_hash: bool = False) -> str:
    """Format RGB (0..255, rounded half up to integers) as 6 lowercase hex digits."""
    hex_str = "".join(f"{round_half_up(channel):02x}" for channel in (r, g, b))
    return f"#{hex_str}" if with_hash else hex_str
