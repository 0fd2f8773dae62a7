import logging

import numpy as np
import pandas as pd
import pytest

from astrosky.catalogs import BRIGHT_STARS
from astrosky.core import canonical_position
from astrosky.universe.star_catalog import (
    StarCatalog,
    StarCatalogEntry,
    default_catalog,
    get_star_data,
    load_hyg_catalog,
)


HYG_COLUMNS = "id,hip,hd,hr,gl,bf,proper,ra,dec,dist,pmra,pmdec,rv,mag,absmag,spect,ci,x,y,z,con"
HYG_ROWS = [
    "0,,,,,,Sol,0.000000,0.000000,0.0000,0.00,0.00,0.0,-26.700,4.850,G2V,0.656,0.000005,0.000000,0.000000,",
    "32263,32349,48915,2491,Gl 244A,9Alp CMa,Sirius,6.752481,-16.716116,2.6371,-546.01,-1223.08,-9.4,-1.440,1.454,A0m...,0.009,-0.494323,2.476731,-0.758485,CMa",
    "24378,24436,34085,1713,,19Bet Ori,Rigel,5.242298,-8.201640,264.5503,1.87,-0.56,20.7,0.180,-6.933,B8Ia,-0.030,192.836,8.9,-37.7,Ori",
    "101,12345,,,,,,2.500000,10.000000,50.0,0,0,0,5.900,2.4,K0,,1,2,3,Ari",
    "102,,,,,,,3.000000,12.000000,,0,0,0,,2.4,K0,0.5,1,2,3,Ari",
    "103,54321,,,,,,4.000000,14.000000,80.0,0,0,0,8.100,4.0,M0,1.5,1,2,3,Tau",
]


@pytest.fixture
def hyg_file(tmp_path):
    path = tmp_path / "hygdata_v41.csv"
    path.write_text("\n".join([HYG_COLUMNS] + HYG_ROWS) + "\n")
    return path


class TestStarCatalog:

    def test_sorted_by_magnitude_at_construction(self, small_catalog):
        assert [s.designation for s in small_catalog] == ["A", "B", "C", "D"]
        assert list(small_catalog.magnitudes) == [-1.5, 1.0, 3.0, 5.5]

    def test_default_catalog_is_sorted(self, catalog):
        mags = catalog.magnitudes
        assert len(catalog) == len(BRIGHT_STARS)
        assert np.all(np.diff(mags) >= 0)
        assert catalog[0].proper == "Sirius"

    def test_default_catalog_is_shared(self):
        assert default_catalog() is default_catalog()

    def test_sequence_protocol(self, small_catalog):
        assert len(small_catalog) == 4
        assert small_catalog[-1].designation == "D"
        assert [s.designation for s in small_catalog[1:3]] == ["B", "C"]
        assert small_catalog[0] in small_catalog

    def test_count_brighter_than(self, small_catalog):
        assert small_catalog.count_brighter_than(-2.0) == 0
        assert small_catalog.count_brighter_than(1.0) == 2
        assert small_catalog.count_brighter_than(10.0) == 4

    def test_empty_catalog(self):
        empty = StarCatalog([])
        assert len(empty) == 0
        assert empty.canonical_positions().shape == (0, 3)
        assert "empty" in repr(empty)

    def test_canonical_positions_match_scalar_transform(self, catalog):
        positions = catalog.canonical_positions(radius=1000.0)
        assert positions.shape == (len(catalog), 3)
        for i in (0, 10, len(catalog) - 1):
            star = catalog[i]
            expected = canonical_position(star.ra, star.dec, 1000.0).as_array()
            assert positions[i] == pytest.approx(expected, abs=1e-6)

    def test_to_dataframe(self, small_catalog):
        df = small_catalog.to_dataframe()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["designation", "proper", "ra", "dec", "distance",
                                    "mag", "ci", "constellation"]
        assert df["designation"].tolist() == ["A", "B", "C", "D"]

    def test_missing_fields_default(self):
        catalog = StarCatalog.from_rows([("X", None, 370.0, 1.0, None, 2.0, None, None)])
        star = catalog[0]
        assert star.proper == ""
        assert star.constellation == ""
        assert star.distance == 0.0
        assert star.ci == 0.0
        assert star.ra == pytest.approx(10.0)
        assert star.display_name == "X"

    def test_entry_colour_and_temperature(self):
        hot = StarCatalogEntry("hot", "", 0.0, 0.0, 0.0, 1.0, 0.5, "")
        assert len(hot.color) == 3
        assert all(0 <= c <= 255 for c in hot.color)
        assert 5000.0 < hot.temperature < 7000.0


class TestHygLoader:

    def test_load(self, hyg_file, caplog):
        with caplog.at_level(logging.INFO, logger="astrosky"):
            catalog = load_hyg_catalog(hyg_file, max_magnitude=6.5)
        assert [s.display_name for s in catalog] == ["Sirius", "Rigel", "HIP 12345"]
        sirius = catalog[0]
        assert sirius.designation == "9Alp CMa"
        assert sirius.ra == pytest.approx(101.28722, abs=1e-4)
        assert sirius.dec == pytest.approx(-16.716116)
        assert sirius.constellation == "CMa"
        assert catalog[2].ci == 0.0
        assert "Loaded 3 stars" in caplog.text

    def test_no_magnitude_limit(self, hyg_file):
        catalog = load_hyg_catalog(hyg_file)
        assert len(catalog) == 4
        assert catalog[-1].mag == pytest.approx(8.1)

    def test_missing_columns(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("name,vmag\nfoo,1.0\n")
        with pytest.raises(ValueError, match="missing ra/dec/mag"):
            load_hyg_catalog(path)


def test_get_star_data(catalog, turin, new_year_2024):
    star = get_star_data(catalog, 0, turin.lat_deg, turin.lon_deg, new_year_2024, radius=1000.0)
    assert star.proper_name == "Sirius"
    assert star.constellation == "CMa"
    assert star.magnitude == -1.46
    assert len(star.color) == 3
    assert np.linalg.norm(star.coords.as_array()) == pytest.approx(1000.0)
    assert star.canonical_coords.as_array() == pytest.approx(
        canonical_position(catalog[0].ra, catalog[0].dec, 1000.0).as_array())
