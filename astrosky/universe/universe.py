"""
Universe: one entry point over the star catalog and the solar system.

The Universe holds the (immutable) star catalog and the engine config.
Everything it returns is computed per call; no per-frame state is kept.

Query interface
---------------
  universe.solar_system(t)                 -> {designation: SolarSystemResultItem}
  universe.visible_stars(t)                -> [StarData] brighter than the limit
  universe.nearest(x, y, z, t)             -> NearestObject or None
  universe.query_cone(ra, dec, r_deg)      -> catalog entries within angular radius
  universe.sky_rotation(t)                 -> 3x3 canonical -> observer matrix

Universe(epoch=t0) rebuilds the planet series around t0 (see
solar_system_at_epoch); by default the J2000 series are shared.

The observer defaults to config.sky.observer; every query accepts an
explicit Observer instead.
"""

from __future__ import annotations
import math
from typing import Dict, List, Optional

import numpy as np

from ..config import DEFAULT_CONFIG, EngineConfig
from ..core.astro_time import AstroTime
from ..core.coords import observer_rotation
from ..core.types import Observer
from ..logging_config import get_logger
from .nearest import NearestObject, nearest_solar_system, nearest_star
from .orbital_body import SOLAR_SYSTEM, solar_system_at_epoch
from .solar_system import SolarSystemResultItem, calc_solar_system
from .star_catalog import StarCatalog, StarCatalogEntry, StarData, default_catalog, \
    get_star_data, load_hyg_catalog

logger = get_logger(__name__)


class Universe:
    """
    Star catalog plus solar system for an observer.
    """

    def __init__(self, catalog: Optional[StarCatalog] = None,
                 config: Optional[EngineConfig] = None,
                 epoch: Optional[AstroTime] = None):
        self.catalog = catalog if catalog is not None else default_catalog()
        self.config = config or DEFAULT_CONFIG
        self.epoch = epoch
        # planet series are rebuilt only when an epoch is asked for
        if epoch is not None:
            self.bodies, self.earth_series = solar_system_at_epoch(epoch)
        else:
            self.bodies, self.earth_series = SOLAR_SYSTEM, None

    def _observer(self, observer: Optional[Observer]) -> Observer:
        return observer if observer is not None else self.config.sky.observer

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------

    def solar_system(self, time: AstroTime,
                     observer: Optional[Observer] = None) -> Dict[str, SolarSystemResultItem]:
        obs = self._observer(observer)
        return calc_solar_system(obs.lat_deg, obs.lon_deg, time, self.config.sky.au_scaling,
                                 bodies=self.bodies, earth_series=self.earth_series)

    def visible_stars(self, time: AstroTime,
                      observer: Optional[Observer] = None,
                      max_magnitude: Optional[float] = None) -> List[StarData]:
        """Stars no fainter than the limit, brightest first."""
        obs = self._observer(observer)
        limit = self.config.sky.max_magnitude if max_magnitude is None else max_magnitude
        radius = self.config.sky.star_sphere_radius
        n = self.catalog.count_brighter_than(limit)
        return [get_star_data(self.catalog, i, obs.lat_deg, obs.lon_deg, time, radius)
                for i in range(n)]

    def nearest(self, x: float, y: float, z: float, time: AstroTime,
                observer: Optional[Observer] = None,
                max_magnitude: Optional[float] = None,
                include_solar_system: bool = True) -> Optional[NearestObject]:
        """
        Nearest star or solar-system body to a pointing direction.

        Both searches use the same RA/Dec metric, so their distances are
        directly comparable.
        """
        obs = self._observer(observer)
        limit = self.config.sky.max_magnitude if max_magnitude is None else max_magnitude
        candidates = [nearest_star(self.catalog, obs.lat_deg, obs.lon_deg,
                                   x, y, z, time, limit)]
        if include_solar_system:
            bodies = self.solar_system(time, obs)
            candidates.append(nearest_solar_system(bodies, obs.lat_deg, obs.lon_deg,
                                                   x, y, z, time, limit))
        found = [c for c in candidates if c is not None]
        if not found:
            return None
        return min(found, key=lambda c: c.distance)

    def query_cone(self, center_ra: float, center_dec: float,
                   radius_deg: float) -> List[StarCatalogEntry]:
        """
        Catalog entries within an angular radius of (ra, dec), great-circle.
        """
        df = self.catalog.to_dataframe()
        ra0 = math.radians(center_ra)
        dec0 = math.radians(center_dec)
        ra = np.radians(df["ra"].to_numpy())
        dec = np.radians(df["dec"].to_numpy())
        dot = np.sin(dec0) * np.sin(dec) + np.cos(dec0) * np.cos(dec) * np.cos(ra - ra0)
        inside = np.clip(dot, -1.0, 1.0) >= math.cos(math.radians(radius_deg))
        return [self.catalog[i] for i in np.flatnonzero(inside)]

    def sky_rotation(self, time: AstroTime,
                     observer: Optional[Observer] = None) -> np.ndarray:
        """Matrix turning catalog.canonical_positions() into the observer's sky."""
        obs = self._observer(observer)
        return observer_rotation(obs.lat_deg, obs.lon_deg, time)

    def __repr__(self) -> str:
        obs = self.config.sky.observer
        return (f"<Universe: {len(self.catalog)} stars, "
                f"observer {obs.lat_deg:.2f}, {obs.lon_deg:.2f}>")


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

def build_universe(hyg_path: Optional[str] = None,
                   config: Optional[EngineConfig] = None,
                   epoch: Optional[AstroTime] = None) -> Universe:
    """
    Build a Universe from the HYG database when a path is given, otherwise
    from the compiled-in bright stars.

    Pass an epoch to rebuild the planet series around it, for sessions
    set centuries away from J2000.
    """
    config = config or DEFAULT_CONFIG
    if hyg_path:
        catalog = load_hyg_catalog(hyg_path, max_magnitude=config.sky.max_magnitude)
    else:
        catalog = default_catalog()
    universe = Universe(catalog, config, epoch)
    logger.info("Universe ready: %s", universe)
    return universe
