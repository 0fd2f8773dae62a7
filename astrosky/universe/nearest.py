"""
Nearest-object search for a pointing direction.

The pointing direction (renderer XYZ for an observer) is converted back
to RA/Dec and candidates are ranked by the planar squared difference
dRA^2 + dDec^2 in degrees. That is not a great-circle distance, but it
ranks neighbours correctly at the angular scales a pointer resolves.

nearest_star() scans the catalog brightest first and stops at the first
entry fainter than the limit, so it only touches the visible part.
"""

from __future__ import annotations
import math
from typing import Mapping, NamedTuple, Optional, Tuple

from ..core.astro_time import AstroTime
from ..core.coords import horizontal_xyz_to_equatorial
from ..logging_config import get_logger
from .star_catalog import StarCatalog

logger = get_logger(__name__)


class NearestObject(NamedTuple):
    name: str
    proper_name: str
    constellation: str
    magnitude: float
    color: Tuple[int, int, int]
    ra: float
    dec: float
    distance: float     # squared planar RA/Dec metric, deg^2
    visited: int        # candidates examined


def _metric(ra: float, dec: float, target_ra: float, target_dec: float) -> float:
    d_ra = ra - target_ra
    d_dec = dec - target_dec
    return d_ra * d_ra + d_dec * d_dec


def nearest_star(catalog: StarCatalog, lat: float, lon: float,
                 x: float, y: float, z: float, time: AstroTime,
                 max_magnitude: float) -> Optional[NearestObject]:
    """
    Brightness-limited nearest star to a pointing direction.

    Returns None when no star is at least as bright as max_magnitude.

    Raises:
        DegenerateInputError: zero-length or non-finite direction.
    """
    target = horizontal_xyz_to_equatorial(lat, lon, x, y, z, time)

    best = -1
    best_metric = math.inf
    visited = 0
    for i, star in enumerate(catalog):
        if star.mag > max_magnitude:
            break
        visited += 1
        d = _metric(star.ra, star.dec, target.ra, target.dec)
        if d < best_metric:
            best_metric = d
            best = i

    logger.debug("nearest_star: RA %.3f Dec %.3f, %d of %d entries visited",
                 target.ra, target.dec, visited, len(catalog))
    if best < 0:
        return None
    star = catalog[best]
    return NearestObject(
        name=star.designation,
        proper_name=star.proper,
        constellation=star.constellation,
        magnitude=star.mag,
        color=star.color,
        ra=star.ra,
        dec=star.dec,
        distance=best_metric,
        visited=visited,
    )


def nearest_solar_system(results: Mapping, lat: float, lon: float,
                         x: float, y: float, z: float, time: AstroTime,
                         max_magnitude: float) -> Optional[NearestObject]:
    """
    Nearest body among calc_solar_system() results no fainter than
    max_magnitude, or None.
    """
    target = horizontal_xyz_to_equatorial(lat, lon, x, y, z, time)

    best = None
    best_metric = math.inf
    visited = 0
    for item in results.values():
        values = item.values
        if values.magnitude > max_magnitude:
            continue
        visited += 1
        d = _metric(values.ra, values.dec, target.ra, target.dec)
        if d < best_metric:
            best_metric = d
            best = item

    if best is None:
        return None
    return NearestObject(
        name=best.body.designation,
        proper_name=best.body.proper,
        constellation="",
        magnitude=best.values.magnitude,
        color=best.body.color,
        ra=best.values.ra,
        dec=best.values.dec,
        distance=best_metric,
        visited=visited,
    )
