import pytest

from colormodels.colors import HsbColor, HslColor, HspColor, LabColor, RgbColor


def test_interpolate_rgb():
    black = RgbColor(0, 0, 0, 0)
    white = RgbColor(255, 255, 255)
    mid = black.interpolate(white, 0.5)
    assert mid == RgbColor(127.5, 127.5, 127.5)
    assert mid.alpha == 0.5


def test_interpolate_ends():
    red = RgbColor(255, 0, 0)
    green = HsbColor(120, 100, 100)
    assert red.interpolate(green, 0) is red
    assert red.interpolate(green, 1) == RgbColor(0, 255, 0)
    assert isinstance(red.interpolate(green, 0.3), RgbColor)


def test_interpolate_hue_takes_shortest_arc():
    start = HsbColor(350, 100, 100)
    end = HsbColor(10, 100, 100)
    assert start.interpolate(end, 0.25).hue == 355
    assert start.interpolate(end, 0.5).hue == 0
    assert end.interpolate(start, 0.5).hue == 0


def test_interpolate_step_out_of_range():
    with pytest.raises(ValueError):
        RgbColor(0, 0, 0).interpolate(RgbColor(1, 1, 1), 1.5)
    with pytest.raises(ValueError):
        RgbColor(0, 0, 0).interpolate(RgbColor(1, 1, 1), -0.1)


def test_lerp_to():
    black = RgbColor(0, 0, 0)
    white = RgbColor(255, 255, 255)
    colors = black.lerp_to(white, 3)
    assert len(colors) == 5
    assert colors[0] is black
    assert colors[-1] == white
    assert colors[2] == RgbColor(127.5, 127.5, 127.5)

    inner = black.lerp_to(white, 3, exclude_original_colors=True)
    assert inner == colors[1:-1]


def test_lerp_to_converts_end_color():
    colors = RgbColor(255, 0, 0).lerp_to(HslColor(0, 0, 100), 1)
    assert all(isinstance(c, RgbColor) for c in colors)
    assert colors[-1] == RgbColor(255, 255, 255)


@pytest.mark.parametrize("steps", [0, -2, 1.5, True])
def test_lerp_to_bad_steps(steps):
    with pytest.raises(ValueError):
        RgbColor(0, 0, 0).lerp_to(RgbColor(1, 1, 1), steps)


def test_inverted():
    assert RgbColor(255, 0, 0).inverted == RgbColor(0, 255, 255)
    assert RgbColor(10, 20, 30, 0.5).inverted.alpha == 0.5
    assert HslColor(0, 100, 50).inverted == HslColor(180, 100, 50)
    assert isinstance(LabColor(50, 10, 10).inverted, LabColor)


def test_rotate_hue():
    hsb = HsbColor(300, 50, 50, 0.3)
    rotated = hsb.rotate_hue(90)
    assert rotated.hue == 30
    assert rotated.value[1:] == hsb.value[1:]
    assert rotated.alpha == 0.3
    assert hsb.rotate_hue(-330).hue == 330
    assert HspColor(10, 20, 30).rotate_hue(360).hue == 10


def test_rotate_hue_without_hue_channel():
    assert RgbColor(255, 0, 0).rotate_hue(120) == RgbColor(0, 255, 0)


def test_opposite():
    assert HslColor(0, 100, 50).opposite == HslColor(180, 100, 50)
    assert HsbColor(270, 10, 10).opposite.hue == 90
    assert RgbColor(255, 0, 0).opposite == RgbColor(0, 255, 255)
