from colormodels.conversions import (
    unit_rgb_to_cmyk,
    unit_rgb_to_hsb,
    unit_rgb_to_hsi,
    unit_rgb_to_hsl,
    unit_rgb_to_hsp,
)
from tests.samples import (
    samples_rgb_cmyk,
    samples_rgb_hsb,
    samples_rgb_hsi,
    samples_rgb_hsl,
    samples_rgb_hsp,
)


def _unit(rgb):
    return tuple(c / 255 for c in rgb)


def _check_hue_model(func, samples):
    for rgb, (h_exp, s_exp, x_exp) in samples.items():
        h, s, x = func(*_unit(rgb))

        assert abs(h - h_exp) < 1e-9
        assert abs(s * 100 - s_exp) < 1e-9
        assert abs(x * 100 - x_exp) < 1e-9


def test_unit_rgb_to_hsb():
    _check_hue_model(unit_rgb_to_hsb, samples_rgb_hsb)


def test_unit_rgb_to_hsl():
    _check_hue_model(unit_rgb_to_hsl, samples_rgb_hsl)


def test_unit_rgb_to_hsi():
    _check_hue_model(unit_rgb_to_hsi, samples_rgb_hsi)


def test_unit_rgb_to_hsp():
    _check_hue_model(unit_rgb_to_hsp, samples_rgb_hsp)


def test_hsp_hue_stays_below_360():
    # pure red is the top of the last sector
    h, _, _ = unit_rgb_to_hsp(1.0, 0.0, 0.0)
    assert h == 0.0
    h, _, _ = unit_rgb_to_hsp(1.0, 0.0, 0.5)
    assert 0 <= h < 360


def test_unit_rgb_to_cmyk():
    for rgb, expected in samples_rgb_cmyk.items():
        cmyk = unit_rgb_to_cmyk(*_unit(rgb))
        for out, exp in zip(cmyk, expected):
            assert abs(out * 100 - exp) < 1e-9


def test_cmyk_black_has_no_ink():
    assert unit_rgb_to_cmyk(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0, 1.0)


def test_achromatic_hue_is_zero():
    for func in (unit_rgb_to_hsb, unit_rgb_to_hsl, unit_rgb_to_hsi, unit_rgb_to_hsp):
        h, s, _ = func(0.3, 0.3, 0.3)
        assert h == 0.0
        assert s == 0.0


def test_hsi_zero_intensity_has_zero_saturation():
    assert unit_rgb_to_hsi(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
