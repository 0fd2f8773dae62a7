"""
Solar-system aggregator.

calc_solar_system() computes the state of every body in SOLAR_SYSTEM for
an observer and instant. The Earth's heliocentric position is evaluated
once per call and shared by all bodies.

Per-body work is dispatched on BodyKind:
    GENERIC  periodic series, geocentric via the Earth, phase angle and
             distance-dependent magnitude
    SUN      closed-form solar theory, fixed magnitude, sunlight direction
    MOON     lunar theory, synodic phase, and the disk rotation that keeps
             surface features aligned with the Moon's motion

Distances in BodyState are metres. Scene positions are scaled by
au_scaling scene units per AU.
"""

from __future__ import annotations
import math
from typing import Dict, NamedTuple, Optional, Sequence

import numpy as np

from ..core.astro_time import AstroTime
from ..core.celestial_math import DEG_PER_RAD, METERS_PER_AU, RAD_PER_DEG
from ..core.coords import canonical_position, ecliptic_to_equatorial, \
    equatorial_to_horizontal, lit_point_rotation
from ..core.types import HorizontalPosition
from ..logging_config import get_logger
from .lunar import moon_phase_angle, moon_phase_fraction, moon_position
from .orbital_body import SOLAR_SYSTEM, BodyKind, SolarSystemBody, \
    earth_position, planet_position_ecliptic, sun_position
from .planet_physics import calculate_magnitude, distance_magnitude_factors, \
    illuminated_fraction
from .series import PeriodicSeries

logger = get_logger(__name__)


class EarthAtTime(NamedTuple):
    time: AstroTime
    position: np.ndarray    # heliocentric ecliptic, m


def earth_position_at_time(time: AstroTime,
                           series: Optional[PeriodicSeries] = None) -> EarthAtTime:
    return EarthAtTime(time=time, position=earth_position(time, series))


class BodyState(NamedTuple):
    ra: float
    dec: float
    distance: float                 # m
    phase_angle: float              # Sun-body-observer, deg
    phase_fraction: float           # Moon: synodic 0..1, others: lit fraction
    magnitude: float
    coords: HorizontalPosition
    canonical_coords: HorizontalPosition
    canonical_rotate_by: float = 0.0
    canonical_sunlight_direction: Optional[HorizontalPosition] = None
    scaled_radius: float = 0.0
    scaled_distance: float = 0.0


class SolarSystemResultItem(NamedTuple):
    body: SolarSystemBody
    values: BodyState


def _scaled(metres: float, au_scaling: float) -> float:
    return metres / METERS_PER_AU * au_scaling


def _calculate_generic(body: SolarSystemBody, earth: EarthAtTime,
                       lat: float, lon: float, au_scaling: float) -> BodyState:
    planet = planet_position_ecliptic(earth.time, body)
    geocentric = ecliptic_to_equatorial(planet, earth.position)

    # both vectors in the ecliptic frame
    phase_angle = lit_point_rotation(earth.position, planet - earth.position)
    factors = distance_magnitude_factors(
        float(np.linalg.norm(planet)) / METERS_PER_AU,
        geocentric.distance / METERS_PER_AU,
    )
    magnitude = calculate_magnitude(body, phase_angle, *factors)

    scene_distance = _scaled(geocentric.distance, au_scaling)
    return BodyState(
        ra=geocentric.ra,
        dec=geocentric.dec,
        distance=geocentric.distance,
        phase_angle=phase_angle,
        phase_fraction=illuminated_fraction(phase_angle),
        magnitude=magnitude,
        coords=equatorial_to_horizontal(lat, lon, geocentric.ra, geocentric.dec,
                                        earth.time, scene_distance),
        canonical_coords=canonical_position(geocentric.ra, geocentric.dec, scene_distance),
        scaled_radius=_scaled(body.radius, au_scaling),
        scaled_distance=scene_distance,
    )


def _calculate_sun(body: SolarSystemBody, earth: EarthAtTime,
                   lat: float, lon: float, au_scaling: float) -> BodyState:
    sun = sun_position(earth.time)
    distance = sun.distance * METERS_PER_AU
    scene_distance = sun.distance * au_scaling
    return BodyState(
        ra=sun.ra,
        dec=sun.dec,
        distance=distance,
        phase_angle=0.0,
        phase_fraction=1.0,
        magnitude=calculate_magnitude(body, 0.0),
        coords=equatorial_to_horizontal(lat, lon, sun.ra, sun.dec, earth.time, scene_distance),
        canonical_coords=canonical_position(sun.ra, sun.dec, scene_distance),
        canonical_sunlight_direction=canonical_position(sun.ra, sun.dec, 10.0),
        scaled_radius=_scaled(body.radius, au_scaling),
        scaled_distance=scene_distance,
    )


def moon_disk_rotation(time: AstroTime, au_scaling: float = 1.0) -> float:
    """
    Angle (deg) to turn the Moon's disk so it follows the direction of its
    motion in the canonical frame.

    The Moon is moved one hour along its orbit and the angle of that step
    is measured in alt/az. Approximate, good enough for orienting the
    surface texture.
    """
    now = moon_position(time)
    soon = moon_position(time.shifted(hours=1))
    here = canonical_position(now.ra, now.dec, _scaled(now.distance, au_scaling))
    there = canonical_position(soon.ra, soon.dec, _scaled(soon.distance, au_scaling))
    p = here.alt - there.alt
    # shortest way round, azimuth wraps at 0/360
    d_az = (here.az - there.az + 180.0) % 360.0 - 180.0
    q = d_az * math.cos(here.alt * RAD_PER_DEG)
    return math.atan2(p, q) * DEG_PER_RAD


def _calculate_moon(body: SolarSystemBody, earth: EarthAtTime,
                    lat: float, lon: float, au_scaling: float) -> BodyState:
    moon = moon_position(earth.time)
    fraction = moon_phase_fraction(earth.time)
    phase_angle = moon_phase_angle(fraction)
    scene_distance = _scaled(moon.distance, au_scaling)
    return BodyState(
        ra=moon.ra,
        dec=moon.dec,
        distance=moon.distance,
        phase_angle=phase_angle,
        phase_fraction=fraction,
        magnitude=calculate_magnitude(body, phase_angle),
        coords=equatorial_to_horizontal(lat, lon, moon.ra, moon.dec, earth.time, scene_distance),
        canonical_coords=canonical_position(moon.ra, moon.dec, scene_distance),
        canonical_rotate_by=moon_disk_rotation(earth.time, au_scaling),
        scaled_radius=_scaled(body.radius, au_scaling),
        scaled_distance=scene_distance,
    )


_CALCULATORS = {
    BodyKind.GENERIC: _calculate_generic,
    BodyKind.SUN: _calculate_sun,
    BodyKind.MOON: _calculate_moon,
}


def calculate_body(body: SolarSystemBody, earth: EarthAtTime,
                   lat: float, lon: float, au_scaling: float = 1.0) -> BodyState:
    """State of one body for an observer, given the Earth at that instant."""
    return _CALCULATORS[body.kind](body, earth, lat, lon, au_scaling)


def calc_solar_system(lat: float, lon: float, time: AstroTime,
                      au_scaling: float = 1.0,
                      bodies: Optional[Sequence[SolarSystemBody]] = None,
                      earth_series: Optional[PeriodicSeries] = None,
                      ) -> Dict[str, SolarSystemResultItem]:
    """
    States of all registered bodies, keyed by designation in registry
    order (Sol, Mercury, Venus, Luna, Mars, ...).

    bodies and earth_series replace the compiled-in registry, e.g. with
    the output of solar_system_at_epoch().
    """
    earth = earth_position_at_time(time, earth_series)
    result: Dict[str, SolarSystemResultItem] = {}
    for body in (SOLAR_SYSTEM if bodies is None else bodies):
        result[body.designation] = SolarSystemResultItem(
            body=body, values=calculate_body(body, earth, lat, lon, au_scaling))
    logger.debug("Solar system computed for JD %.5f (%d bodies)",
                 time.julian_date, len(result))
    return result
