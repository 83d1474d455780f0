import pytest

from colormodels.conversions.hue import interpolate_hue, wrap_hue
from colormodels.types.channel_types import ALPHA, CHANNELS, ChannelSpec, num_channels
from colormodels.types.color_types import ColorSpace, is_hue_space, to_color_space
from colormodels.utils.num_utils import clip_to_domain, round_half_up, validate_channel, validate_count
from colormodels.errors import ChannelCountError, ChannelDomainError


def test_to_color_space():
    assert to_color_space("rgb") is ColorSpace.RGB
    assert to_color_space("CMYK") is ColorSpace.CMYK
    assert to_color_space("hsv") is ColorSpace.HSB
    assert to_color_space(ColorSpace.LAB) is ColorSpace.LAB
    with pytest.raises(ValueError, match="Unknown color space"):
        to_color_space("ycbcr")
    with pytest.raises(TypeError):
        to_color_space(None)


def test_is_hue_space():
    for space in ("hsb", "hsv", "hsi", "hsl", "hsp"):
        assert is_hue_space(space)
    for space in ("rgb", "xyz", "lab", "cmyk"):
        assert not is_hue_space(space)


def test_channel_table_covers_every_space():
    for space in ColorSpace:
        assert space in CHANNELS
    assert num_channels(ColorSpace.CMYK) == 4
    assert num_channels(ColorSpace.HSP) == 3
    assert [spec.name for spec in CHANNELS[ColorSpace.HSP]] == ["hue", "saturation", "perceived_brightness"]


def test_channel_spec_domain():
    assert CHANNELS[ColorSpace.RGB][0].domain == "[0, 255]"
    assert CHANNELS[ColorSpace.XYZ][0].domain == "[0, inf]"
    assert CHANNELS[ColorSpace.LAB][1].domain == "[-inf, inf]"
    assert ALPHA.domain == "[0, 1]"


def test_channel_spec_factoring():
    a = CHANNELS[ColorSpace.LAB][1]
    assert a.to_factored(-128) == 0
    assert a.from_factored(1) == 127
    hue = CHANNELS[ColorSpace.HSL][0]
    assert hue.to_factored(90) == 0.25
    assert hue.cyclic


def test_validate_channel():
    spec = ChannelSpec("level", 0, 10)
    assert validate_channel("Meter", spec, 10) == 10
    with pytest.raises(ChannelDomainError, match=r"Meter level must be within \[0, 10\], got 11"):
        validate_channel("Meter", spec, 11)
    with pytest.raises(ChannelDomainError):
        validate_channel("Meter", ChannelSpec("free", None, None), float("inf"))
    with pytest.raises(TypeError):
        validate_channel("Meter", spec, "5")


def test_validate_count():
    assert validate_count("Meter", [1, 2, 3], 3) == (1, 2, 3)
    assert validate_count("Meter", iter([1, 2, 3, 4]), 3) == (1, 2, 3, 4)
    with pytest.raises(ChannelCountError, match="expects 3 or 4 values, got 2"):
        validate_count("Meter", [1, 2], 3)


def test_clip_to_domain():
    assert clip_to_domain(ChannelSpec("level", 0, 10), 11.5) == 10
    assert clip_to_domain(ChannelSpec("level", 0, 10), -1) == 0
    assert clip_to_domain(ChannelSpec("level", 0, None), 1e6) == 1e6
    assert clip_to_domain(ChannelSpec("level", 0, None), -3) == 0
    assert clip_to_domain(ChannelSpec("level", None, None), -3) == -3


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2
    assert round_half_up(-2.5) == -3
    assert round_half_up(7) == 7


def test_wrap_hue():
    assert wrap_hue(0) == 0
    assert wrap_hue(360) == 0
    assert wrap_hue(370) == 10
    assert wrap_hue(-90) == 270
    assert 0 <= wrap_hue(-1e-20) < 360


def test_interpolate_hue():
    assert interpolate_hue(0, 90, 0.5) == 45
    assert interpolate_hue(300, 60, 0.5) == 0
    assert interpolate_hue(60, 300, 0.25) == 30
