import pytest

from colormodels.colors import (
    CmykColor,
    HsbColor,
    HsiColor,
    HslColor,
    HspColor,
    LabColor,
    RgbColor,
    XyzColor,
)
from colormodels.errors import ChannelCountError, ChannelDomainError

sample_colors = [
    RgbColor(12, 200.5, 100),
    XyzColor(20, 30, 110),
    LabColor(55, -40, 72.5),
    CmykColor(0, 50, 80, 20),
    HsbColor(210, 60, 40),
    HsiColor(200, 40, 50),
    HslColor(210, 60, 40),
    HspColor(200, 50, 40),
]


def _assert_close(actual, expected, tol=1e-12):
    assert len(actual) == len(expected)
    for a, e in zip(actual, expected):
        assert abs(a - e) < tol


def test_to_list():
    assert RgbColor(1, 2, 3, 0.5).to_list() == [1, 2, 3]
    assert RgbColor(1, 2, 3, 0.5).to_list_with_alpha() == [1, 2, 3, 0.5]
    assert CmykColor(1, 2, 3, 4).to_list() == [1, 2, 3, 4]


def test_list_round_trip():
    for color in sample_colors:
        cls = color.__class__
        assert cls.from_list(color.to_list()) == color
        copy = cls.from_list(color.with_alpha(0.4).to_list_with_alpha())
        assert copy == color
        assert copy.alpha == 0.4


def test_from_list_alpha_defaults_to_opaque():
    assert RgbColor.from_list([1, 2, 3]).alpha == 1.0
    assert RgbColor.from_list((1, 2, 3, 0.2)).alpha == 0.2


def test_factored_lists():
    _assert_close(RgbColor(255, 0, 51).to_factored_list(), [1, 0, 0.2])
    _assert_close(HsbColor(90, 50, 100).to_factored_list(), [0.25, 0.5, 1])
    _assert_close(CmykColor(0, 25, 50, 100).to_factored_list(), [0, 0.25, 0.5, 1])
    _assert_close(XyzColor(50, 100, 150).to_factored_list(), [0.5, 1, 1.5])
    _assert_close(LabColor(50, -128, 127).to_factored_list(), [0.5, 0, 1])


def test_factored_list_excludes_alpha():
    assert len(RgbColor(1, 2, 3, 0.5).to_factored_list()) == 3


def test_extrapolate():
    _assert_close(RgbColor.extrapolate([1, 0, 0.2]).value, (255, 0, 51), tol=1e-9)
    assert HslColor.extrapolate([0.5, 1, 0.5]) == HslColor(180, 100, 50)
    lab = LabColor.extrapolate([0.5, 0, 1])
    _assert_close(lab.value, (50, -128, 127))
    assert RgbColor.extrapolate([1, 1, 1, 0.25]).alpha == 0.25


def test_factored_round_trip():
    for color in sample_colors:
        copy = color.__class__.extrapolate(color.to_factored_list())
        _assert_close(copy.value, color.value, tol=1e-9)


def test_extrapolate_rejects_out_of_range():
    with pytest.raises(ChannelDomainError):
        RgbColor.extrapolate([1.5, 0, 0])
    with pytest.raises(ChannelDomainError):
        HsbColor.extrapolate([0, -0.1, 0])
    with pytest.raises(ChannelDomainError):
        RgbColor.extrapolate([1, 1, 1, 2])


def test_wrong_length():
    # 3-channel model given 2 values
    with pytest.raises(ChannelCountError):
        RgbColor.from_list([255, 0])
    with pytest.raises(ChannelCountError):
        RgbColor.from_list([255, 0, 0, 1, 1])
    with pytest.raises(ChannelCountError):
        CmykColor.from_list([0, 0, 0])
    with pytest.raises(ChannelCountError):
        HspColor.extrapolate([])


def test_count_checked_before_values():
    with pytest.raises(ChannelCountError):
        RgbColor.from_list([None, "x"])
