"""
Star catalog

StarCatalog is an immutable, magnitude-sorted sequence of catalog entries.
The ascending-magnitude order is established once, in the constructor, and
the nearest-star search relies on it to stop at the first entry fainter
than the display limit. Anything that builds a catalog must go through
the constructor so the order holds.

Usage:
    catalog = default_catalog()                # compiled-in bright stars
    catalog = load_hyg_catalog("hygdata_v41.csv", max_magnitude=6.5)

    star = get_star_data(catalog, 0, lat=45.0, lon=7.0, time=t)
    xyz = catalog.canonical_positions(radius=1000.0)
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, NamedTuple, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..catalogs.bright_stars import BRIGHT_STARS
from ..core.astro_time import AstroTime
from ..core.celestial_math import RAD_PER_DEG, bv_to_rgb, ci_to_temperature
from ..core.coords import canonical_position, equatorial_to_horizontal
from ..core.types import HorizontalPosition
from ..logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class StarCatalogEntry:
    designation: str
    proper: str             # "" when the star has no proper name
    ra: float               # deg, J2000
    dec: float              # deg, J2000
    distance: float         # parsec, 0 when unknown
    mag: float
    ci: float               # B-V colour index
    constellation: str

    @property
    def color(self) -> Tuple[int, int, int]:
        return bv_to_rgb(self.ci)

    @property
    def temperature(self) -> float:
        """Effective temperature (K) estimated from the colour index."""
        return ci_to_temperature(self.ci)

    @property
    def display_name(self) -> str:
        return self.proper or self.designation


class StarCatalog(Sequence[StarCatalogEntry]):
    """
    Read-only star list sorted by ascending magnitude (brightest first).
    """

    def __init__(self, entries: Iterable[StarCatalogEntry]):
        # sorted() is stable: equal magnitudes keep their input order
        self._entries: Tuple[StarCatalogEntry, ...] = tuple(
            sorted(entries, key=lambda s: s.mag)
        )
        self._mags = np.array([s.mag for s in self._entries], dtype=float)

    @classmethod
    def from_rows(cls, rows: Iterable[tuple]) -> "StarCatalog":
        """Rows as (designation, proper, ra, dec, distance, mag, ci, constellation)."""
        entries = []
        for designation, proper, ra, dec, dist, mag, ci, con in rows:
            entries.append(StarCatalogEntry(
                designation=designation or "",
                proper=proper or "",
                ra=float(ra) % 360.0,
                dec=float(dec),
                distance=float(dist or 0.0),
                mag=float(mag),
                ci=float(ci or 0.0),
                constellation=con or "",
            ))
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, i):
        return self._entries[i]

    def __iter__(self) -> Iterator[StarCatalogEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        if not self._entries:
            return "<StarCatalog empty>"
        return f"<StarCatalog {len(self)} stars, mag {self._mags[0]:.2f}..{self._mags[-1]:.2f}>"

    @property
    def magnitudes(self) -> np.ndarray:
        return self._mags

    def count_brighter_than(self, max_magnitude: float) -> int:
        """Number of entries with mag <= max_magnitude."""
        return int(np.searchsorted(self._mags, max_magnitude, side="right"))

    def canonical_positions(self, radius: float = 1.0) -> np.ndarray:
        """
        (N, 3) renderer XYZ of every star in the canonical frame
        (north pole, Greenwich, sidereal time 0).

        Equivalent to canonical_position() per star, vectorised.
        """
        if not self._entries:
            return np.zeros((0, 3))
        ra = np.array([s.ra for s in self._entries]) * RAD_PER_DEG
        dec = np.array([s.dec for s in self._entries]) * RAD_PER_DEG
        cos_d = np.cos(dec)
        return radius * np.column_stack((cos_d * np.sin(ra), np.sin(dec), cos_d * np.cos(ra)))

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [(s.designation, s.proper, s.ra, s.dec, s.distance, s.mag, s.ci, s.constellation)
             for s in self._entries],
            columns=["designation", "proper", "ra", "dec", "distance", "mag", "ci", "constellation"],
        )


@lru_cache(maxsize=1)
def default_catalog() -> StarCatalog:
    """The compiled-in bright star catalog (built once)."""
    catalog = StarCatalog.from_rows(BRIGHT_STARS)
    logger.debug("Built default star catalog: %d stars", len(catalog))
    return catalog


# ---------------------------------------------------------------------------
# HYG database
# ---------------------------------------------------------------------------

def _pick_col(df: pd.DataFrame, *names: str) -> Optional[str]:
    cols = {c.lower().strip(): c for c in df.columns}
    for n in names:
        if n.lower() in cols:
            return cols[n.lower()]
    return None


def load_hyg_catalog(path: str | Path, max_magnitude: Optional[float] = None) -> StarCatalog:
    """
    Load the HYG star database (CSV, RA in hours).

    The Sun row is dropped, rows without usable ra/dec/mag are skipped and
    missing names, distances and colour indices default to "" / 0.

    Args:
        path: hygdata CSV
        max_magnitude: keep only stars at least this bright
    """
    path = Path(path)
    df = pd.read_csv(path, low_memory=False)

    ra_c = _pick_col(df, "ra", "rarad")
    dec_c = _pick_col(df, "dec", "decrad")
    mag_c = _pick_col(df, "mag", "vmag")
    if ra_c is None or dec_c is None or mag_c is None:
        raise ValueError(f"{path.name}: missing ra/dec/mag columns. Found: {list(df.columns)}")

    for c in (ra_c, dec_c, mag_c):
        df[c] = pd.to_numeric(df[c], errors="coerce")
    df = df.dropna(subset=[ra_c, dec_c, mag_c])

    proper_c = _pick_col(df, "proper")
    if proper_c is not None:
        df = df[df[proper_c].fillna("") != "Sol"]
    if max_magnitude is not None:
        df = df[df[mag_c] <= max_magnitude]

    def text(*names: str) -> pd.Series:
        c = _pick_col(df, *names)
        if c is None:
            return pd.Series("", index=df.index)
        return df[c].fillna("").astype(str).str.strip()

    def number(*names: str) -> pd.Series:
        c = _pick_col(df, *names)
        if c is None:
            return pd.Series(0.0, index=df.index)
        return pd.to_numeric(df[c], errors="coerce").fillna(0.0)

    if ra_c.lower() == "rarad":
        ra = np.degrees(df[ra_c].to_numpy(float))
        dec = np.degrees(df[dec_c].to_numpy(float))
    else:
        ra = df[ra_c].to_numpy(float) * 15.0
        dec = df[dec_c].to_numpy(float)

    designation = text("bf")
    hip = number("hip").astype(int)
    designation = designation.where(designation != "", "HIP " + hip.astype(str))

    rows = zip(designation, text("proper"), ra, dec, number("dist"),
               df[mag_c].to_numpy(float), number("ci"), text("con"))
    catalog = StarCatalog.from_rows(rows)
    logger.info("Loaded %d stars from %s", len(catalog), path.name)
    return catalog


# ---------------------------------------------------------------------------
# Per-star query
# ---------------------------------------------------------------------------

class StarData(NamedTuple):
    name: str
    proper_name: str
    constellation: str
    magnitude: float
    color: Tuple[int, int, int]
    coords: HorizontalPosition            # observer frame
    canonical_coords: HorizontalPosition  # north-pole / sidereal-zero frame


def get_star_data(catalog: StarCatalog, i: int, lat: float, lon: float,
                  time: AstroTime, radius: float = 1.0) -> StarData:
    """Display data of the i-th (i-th brightest) star for an observer."""
    star = catalog[i]
    return StarData(
        name=star.designation,
        proper_name=star.proper,
        constellation=star.constellation,
        magnitude=star.mag,
        color=star.color,
        coords=equatorial_to_horizontal(lat, lon, star.ra, star.dec, time, radius),
        canonical_coords=canonical_position(star.ra, star.dec, radius),
    )
