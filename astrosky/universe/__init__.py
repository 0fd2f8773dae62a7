"""
Universe module: stars, solar-system bodies and the queries over them.

Usage:
    from astrosky.universe import build_universe
    from astrosky.core import AstroTime

    universe = build_universe()
    t = AstroTime.from_calendar(2024, 1, 1)

    bodies = universe.solar_system(t)
    stars = universe.visible_stars(t)
    obj = universe.nearest(0.0, 1.0, 0.0, t)
"""

from .universe import Universe, build_universe

__all__ = [
    "Universe",
    "build_universe",
]

# Solar system bodies
from .orbital_body import (
    BodyKind,
    MeanElements,
    SolarSystemBody,
    SunPosition,
    SOLAR_SYSTEM,
    BODIES_BY_DESIGNATION,
    planet_position_ecliptic,
    earth_position,
    sun_position,
    solar_system_at_epoch,
)
from .series import PeriodicSeries, PeriodicTerm, parse_vsop87
from .lunar import MoonPosition, moon_position, moon_phase_days, moon_phase_fraction
from .minor_bodies import (
    KeplerianElements,
    KeplerSolution,
    KeplerianPosition,
    from_keplerian,
    load_mpc_file,
    minor_body_magnitude,
)
from .planet_physics import calculate_magnitude, distance_magnitude_factors
from .solar_system import (
    BodyState,
    SolarSystemResultItem,
    calc_solar_system,
    calculate_body,
    earth_position_at_time,
)

__all__ += [
    "BodyKind",
    "MeanElements",
    "SolarSystemBody",
    "SunPosition",
    "SOLAR_SYSTEM",
    "BODIES_BY_DESIGNATION",
    "planet_position_ecliptic",
    "earth_position",
    "sun_position",
    "solar_system_at_epoch",
    "PeriodicSeries",
    "PeriodicTerm",
    "parse_vsop87",
    "MoonPosition",
    "moon_position",
    "moon_phase_days",
    "moon_phase_fraction",
    "KeplerianElements",
    "KeplerSolution",
    "KeplerianPosition",
    "from_keplerian",
    "load_mpc_file",
    "minor_body_magnitude",
    "calculate_magnitude",
    "distance_magnitude_factors",
    "BodyState",
    "SolarSystemResultItem",
    "calc_solar_system",
    "calculate_body",
    "earth_position_at_time",
]

# Stars
from .star_catalog import (
    StarCatalog,
    StarCatalogEntry,
    StarData,
    default_catalog,
    get_star_data,
    load_hyg_catalog,
)
from .nearest import NearestObject, nearest_star, nearest_solar_system

__all__ += [
    "StarCatalog",
    "StarCatalogEntry",
    "StarData",
    "default_catalog",
    "get_star_data",
    "load_hyg_catalog",
    "NearestObject",
    "nearest_star",
    "nearest_solar_system",
]
