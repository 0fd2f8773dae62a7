import pytest

from astrosky.core import AstroTime, Observer
from astrosky.universe.star_catalog import StarCatalog, StarCatalogEntry, default_catalog


@pytest.fixture
def new_year_2024():
    """2024-01-01 00:00 UTC, JD 2460310.5"""
    return AstroTime.from_calendar(2024, 1, 1)


@pytest.fixture
def j2000():
    return AstroTime.from_calendar(2000, 1, 1, 12)


@pytest.fixture
def turin():
    return Observer(lat_deg=45.07, lon_deg=7.69)


@pytest.fixture
def catalog():
    return default_catalog()


def make_star(designation, mag, ra=0.0, dec=0.0, proper=""):
    return StarCatalogEntry(designation=designation, proper=proper, ra=ra, dec=dec,
                            distance=0.0, mag=mag, ci=0.5, constellation="")


@pytest.fixture
def small_catalog():
    # deliberately out of order; the constructor sorts
    return StarCatalog([
        make_star("C", 3.0, ra=200.0, dec=-10.0),
        make_star("A", -1.5, ra=100.0, dec=-16.0, proper="Alpha"),
        make_star("B", 1.0, ra=150.0, dec=20.0),
        make_star("D", 5.5, ra=10.0, dec=40.0),
    ])
