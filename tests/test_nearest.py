import logging

import pytest

from astrosky.core import DegenerateInputError, equatorial_to_horizontal
from astrosky.universe.nearest import nearest_solar_system, nearest_star
from astrosky.universe.solar_system import calc_solar_system


def pointing_at(observer, ra, dec, time):
    pos = equatorial_to_horizontal(observer.lat_deg, observer.lon_deg, ra, dec, time)
    return pos.x, pos.y, pos.z


class TestNearestStar:

    def test_finds_star_under_pointer(self, catalog, turin, new_year_2024):
        vega = next(s for s in catalog if s.proper == "Vega")
        xyz = pointing_at(turin, vega.ra + 0.2, vega.dec - 0.1, new_year_2024)
        found = nearest_star(catalog, turin.lat_deg, turin.lon_deg, *xyz, new_year_2024, 6.5)
        assert found.proper_name == "Vega"
        assert found.name == vega.designation
        assert found.constellation == "Lyr"
        assert found.distance == pytest.approx(0.05, abs=1e-6)

    def test_brightness_limit_excludes_faint_neighbours(self, catalog, turin, new_year_2024):
        vega = next(s for s in catalog if s.proper == "Vega")
        xyz = pointing_at(turin, vega.ra, vega.dec, new_year_2024)
        found = nearest_star(catalog, turin.lat_deg, turin.lon_deg, *xyz, new_year_2024, -0.5)
        assert found.magnitude <= -0.5
        assert found.proper_name != "Vega"

    def test_early_exit_visits_fewer_entries(self, catalog, turin, new_year_2024):
        assert any(s.mag > -1 for s in catalog)
        found = nearest_star(catalog, turin.lat_deg, turin.lon_deg, 0.0, 1.0, 0.0,
                             new_year_2024, -1.0)
        assert found.proper_name == "Sirius"
        assert found.visited == 1
        assert found.visited < len(catalog)

    def test_visits_whole_catalog_when_everything_qualifies(self, small_catalog, turin, new_year_2024):
        found = nearest_star(small_catalog, turin.lat_deg, turin.lon_deg, 0.0, 1.0, 0.0,
                             new_year_2024, 10.0)
        assert found.visited == len(small_catalog)

    def test_none_when_nothing_qualifies(self, small_catalog, turin, new_year_2024):
        found = nearest_star(small_catalog, turin.lat_deg, turin.lon_deg, 0.0, 1.0, 0.0,
                             new_year_2024, -5.0)
        assert found is None

    def test_degenerate_pointer(self, small_catalog, turin, new_year_2024):
        with pytest.raises(DegenerateInputError):
            nearest_star(small_catalog, turin.lat_deg, turin.lon_deg, 0.0, 0.0, 0.0,
                         new_year_2024, 6.0)

    def test_logs_summary(self, small_catalog, turin, new_year_2024, caplog):
        with caplog.at_level(logging.DEBUG, logger="astrosky"):
            nearest_star(small_catalog, turin.lat_deg, turin.lon_deg, 0.0, 1.0, 0.0,
                         new_year_2024, 2.0)
        assert "2 of 4 entries visited" in caplog.text


class TestNearestSolarSystem:

    def test_finds_body_under_pointer(self, turin, new_year_2024):
        bodies = calc_solar_system(turin.lat_deg, turin.lon_deg, new_year_2024)
        jupiter = bodies["Jupiter"].values
        xyz = pointing_at(turin, jupiter.ra, jupiter.dec, new_year_2024)
        found = nearest_solar_system(bodies, turin.lat_deg, turin.lon_deg, *xyz,
                                     new_year_2024, 6.5)
        assert found.name == "Jupiter"
        assert found.distance == pytest.approx(0.0, abs=1e-9)
        assert found.magnitude == jupiter.magnitude

    def test_magnitude_filter(self, turin, new_year_2024):
        bodies = calc_solar_system(turin.lat_deg, turin.lon_deg, new_year_2024)
        jupiter = bodies["Jupiter"].values
        xyz = pointing_at(turin, jupiter.ra, jupiter.dec, new_year_2024)
        # only the Sun and the Moon are brighter than -5
        found = nearest_solar_system(bodies, turin.lat_deg, turin.lon_deg, *xyz,
                                     new_year_2024, -5.0)
        assert found.name in ("Sol", "Luna")
        assert found.visited == 2

    def test_none_when_nothing_qualifies(self, turin, new_year_2024):
        bodies = calc_solar_system(turin.lat_deg, turin.lon_deg, new_year_2024)
        assert nearest_solar_system(bodies, turin.lat_deg, turin.lon_deg, 0.0, 1.0, 0.0,
                                    new_year_2024, -30.0) is None
