import pytest

from colormodels.conversions import hex_to_rgb, rgb_to_hex
from colormodels.errors import HexFormatError


def test_six_digit_hex():
    assert hex_to_rgb("ff8000") == (255, 128, 0)
    assert hex_to_rgb("#FF8000") == (255, 128, 0)
    assert hex_to_rgb("#aBcDeF") == (171, 205, 239)


def test_three_digit_hex_repeats_digits():
    assert hex_to_rgb("f0a") == (255, 0, 170)
    assert hex_to_rgb("#f00") == (255, 0, 0)
    assert hex_to_rgb("f0a") == hex_to_rgb("ff00aa")


@pytest.mark.parametrize(
    "bad",
    ["", "#", "ff", "ffff", "fffff", "fffffff", "##fff", "#ff00zz", "gg0000", " fff", "ff 000"],
)
def test_malformed_hex(bad):
    with pytest.raises(HexFormatError):
        hex_to_rgb(bad)


def test_non_string_hex():
    with pytest.raises(TypeError):
        hex_to_rgb(0xFF0000)


def test_rgb_to_hex():
    assert rgb_to_hex(255, 0, 0) == "ff0000"
    assert rgb_to_hex(255, 0, 0, with_hash=True) == "#ff0000"
    assert rgb_to_hex(1, 2, 3) == "010203"


def test_rgb_to_hex_rounds_fractions():
    assert rgb_to_hex(254.6, 0.4, 15.2) == "ff000f"


def test_rgb_to_hex_rounds_halves_up():
    assert rgb_to_hex(126.5, 0.5, 2.5) == "7f0103"
    assert rgb_to_hex(254.5, 0, 0) == "ff0000"


def test_hex_round_trip():
    for rgb in ((0, 0, 0), (255, 255, 255), (18, 52, 86), (171, 205, 239)):
        assert hex_to_rgb(rgb_to_hex(*rgb)) == rgb
