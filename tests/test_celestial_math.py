import pytest

from astrosky.core.celestial_math import (
    blackbody_rgb,
    bv_to_rgb,
    ci_to_temperature,
    normalize_deg,
)


def test_normalize_deg_wraps_into_range():
    assert normalize_deg(-1e-17) == 0.0
    assert normalize_deg(370.0) == pytest.approx(10.0)
    assert normalize_deg(-90.0) == pytest.approx(270.0)


def test_sun_colour_index_gives_solar_temperature():
    assert ci_to_temperature(0.65) == pytest.approx(5778.0, abs=20.0)


def test_solar_type_star_is_nearly_white():
    r, g, b = bv_to_rgb(0.65)
    # 5600 K entry, 0xffeee3, pushed 1.5x away from white
    assert (r, g, b) == (255, 229, 213)


def test_hot_star_is_blue_and_cool_star_is_red():
    vega = bv_to_rgb(0.0)
    betelgeuse = bv_to_rgb(1.85)
    assert vega[2] == 255 and vega[0] < vega[2]
    assert betelgeuse[0] == 255 and betelgeuse[2] < 100


@pytest.mark.parametrize("temperature,expected", [
    (500.0, blackbody_rgb(1000.0)),
    (1199.0, blackbody_rgb(1000.0)),
    (45000.0, blackbody_rgb(29800.0)),
])
def test_blackbody_snaps_and_clamps(temperature, expected):
    assert blackbody_rgb(temperature) == expected


def test_extreme_colour_indices_stay_in_range():
    for bv in (-2.0, -0.4, 0.3, 1.4, 5.0):
        assert all(0 <= c <= 255 for c in bv_to_rgb(bv))
