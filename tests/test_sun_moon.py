import math

import numpy as np
import pytest

from astrosky.core import AstroTime
from astrosky.universe.lunar import (
    moon_phase_angle,
    moon_phase_days,
    moon_phase_fraction,
    moon_position,
)
from astrosky.universe.orbital_body import sun_position


class TestSun:

    def test_golden_position_2024(self, new_year_2024):
        sun = sun_position(new_year_2024)
        assert sun.ra == pytest.approx(280.9245, abs=0.01)
        assert sun.dec == pytest.approx(-23.0586, abs=0.01)
        assert sun.distance == pytest.approx(0.98333, abs=1e-4)

    def test_accepts_julian_date(self, new_year_2024):
        assert sun_position(2460310.5) == sun_position(new_year_2024)

    def test_meeus_example(self):
        # Meeus example 25.a, 1992 October 13 0h TD
        sun = sun_position(2448908.5)
        assert sun.ra == pytest.approx(198.38083, abs=0.01)
        assert sun.dec == pytest.approx(-7.78507, abs=0.01)
        assert sun.distance == pytest.approx(0.99766, abs=1e-4)

    def test_cartesian_matches_angles(self, new_year_2024):
        sun = sun_position(new_year_2024)
        assert math.sqrt(sun.x ** 2 + sun.y ** 2 + sun.z ** 2) == pytest.approx(sun.distance)
        assert math.degrees(math.atan2(sun.y, sun.x)) % 360.0 == pytest.approx(sun.ra)
        assert math.degrees(math.asin(sun.z / sun.distance)) == pytest.approx(sun.dec)

    @pytest.mark.parametrize("month,sign", [(6, 1), (12, -1)])
    def test_solstice_declination(self, month, sign):
        sun = sun_position(AstroTime.from_calendar(2024, month, 21))
        assert sign * sun.dec == pytest.approx(23.44, abs=0.05)


class TestMoonPosition:

    def test_meeus_example(self):
        # Meeus example 47.a, 1992 April 12 0h TD
        moon = moon_position(2448724.5)
        assert moon.ra == pytest.approx(134.688470, abs=0.01)
        assert moon.dec == pytest.approx(13.768368, abs=0.01)
        assert moon.distance == pytest.approx(368409700.0, abs=1000.0)
        assert moon.longitude == pytest.approx(133.167265, abs=0.01)
        assert moon.latitude == pytest.approx(-3.229126, abs=0.01)
        assert moon.parallax == pytest.approx(0.991990, abs=1e-4)

    def test_ecliptic_vector(self, new_year_2024):
        moon = moon_position(new_year_2024)
        assert np.linalg.norm(moon.ecliptic) == pytest.approx(moon.distance)
        lon = math.degrees(math.atan2(moon.ecliptic[1], moon.ecliptic[0])) % 360.0
        assert lon == pytest.approx(moon.longitude)

    def test_distance_range(self):
        start = AstroTime.from_calendar(2024, 1, 1)
        for day in range(0, 60, 3):
            moon = moon_position(start.shifted(days=day))
            assert 356e6 < moon.distance < 407e6
            assert 0.0 <= moon.ra < 360.0
            assert abs(moon.dec) < 29.5


class TestMoonPhase:

    def test_new_moon(self):
        # new moon 2024-01-11 11:57 UTC
        p = moon_phase_fraction(AstroTime.from_calendar(2024, 1, 11, 12, 0))
        assert min(p, 1.0 - p) < 0.02

    def test_full_moon(self):
        # full moon 2024-01-25 17:54 UTC
        p = moon_phase_fraction(AstroTime.from_calendar(2024, 1, 25, 17, 54))
        assert p == pytest.approx(0.5, abs=0.03)

    def test_phase_days_near_zero_at_new_moon(self):
        days = moon_phase_days(AstroTime.from_calendar(2024, 1, 11, 11, 57))
        assert abs(days) < 0.05

    def test_fraction_range(self):
        start = AstroTime.from_calendar(2023, 12, 1)
        for day in range(0, 90, 2):
            assert 0.0 <= moon_phase_fraction(start.shifted(days=day)) < 1.0

    @pytest.mark.parametrize("fraction,angle", [(0.0, 180.0), (0.25, 90.0), (0.5, 0.0), (0.75, 90.0)])
    def test_phase_angle(self, fraction, angle):
        assert moon_phase_angle(fraction) == pytest.approx(angle)
