"""
Coordinate transforms

Equatorial (RA/Dec) <-> renderer XYZ / Altitude-Azimuth for an observer,
ecliptic -> equatorial, and the Sun-body-observer phase angle.

Renderer frame: x is east, y is up and z is south. Azimuth is measured
eastwards from north.

Stars are usually placed once in the canonical frame (latitude 90,
longitude 0, sidereal time 0) and the whole sky is then reoriented with
observer_rotation(), so the per-star trigonometry is not repeated every
frame.
"""

from __future__ import annotations
import math
from typing import NamedTuple

import numpy as np

from .astro_time import AstroTime
from .celestial_math import DEG_PER_RAD, RAD_PER_DEG, normalize_deg
from .types import DegenerateInputError, Frame, HorizontalPosition
from . import vectors

# Mean obliquity of the ecliptic at J2000 (degrees)
OBLIQUITY_J2000 = 23.439281


def sphere_to_xyz(rho: float, theta: float, phi: float) -> tuple[float, float, float]:
    """
    Spherical -> renderer cartesian.

    theta is the elevation (+90..-90) and phi goes west from south, so for
    RA/Dec pass theta=dec and phi=-ra.
    """
    t = theta * RAD_PER_DEG
    p = phi * RAD_PER_DEG
    x = -math.cos(t) * math.sin(p) * rho
    y = math.sin(t) * rho
    z = math.cos(t) * math.cos(p) * rho
    return x, y, z


def local_sidereal_degrees(time: AstroTime, longitude: float) -> float:
    """Local sidereal time in degrees [0, 360)."""
    return normalize_deg(time.sidereal_degrees_at_greenwich + longitude)


def local_hour_angle_degrees(time: AstroTime, longitude: float, ra: float) -> float:
    """
    Hour angle of an object, measured west from the meridian.

    RA is the local sidereal time at which the hour angle is 0, so RA
    increases eastwards.
    """
    return normalize_deg(local_sidereal_degrees(time, longitude) - ra)


def _place(lat: float, ra: float, dec: float, hour_angle: float,
           radius: float, frame: Frame) -> HorizontalPosition:
    dec_r = dec * RAD_PER_DEG
    ha_r = hour_angle * RAD_PER_DEG
    # position as seen from the north pole; hour angle runs clockwise
    xeq = -math.cos(dec_r) * math.sin(ha_r)
    yeq = math.sin(dec_r)
    zeq = math.cos(dec_r) * math.cos(ha_r)

    if lat == 90:
        x, y, z = xeq, yeq, zeq
        alt = dec
    else:
        # tilt by the colatitude in the y-z plane, moving y towards the north
        colat = (90.0 - lat) * RAD_PER_DEG
        x = xeq
        y = yeq * math.cos(colat) + zeq * math.sin(colat)
        z = -yeq * math.sin(colat) + zeq * math.cos(colat)
        alt = math.asin(max(-1.0, min(1.0, y))) * DEG_PER_RAD

    az = normalize_deg(math.atan2(x, -z) * DEG_PER_RAD)
    return HorizontalPosition(ra=ra, dec=dec,
                              x=radius * x, y=radius * y, z=radius * z,
                              alt=alt, az=az, frame=frame)


def equatorial_to_horizontal(lat: float, longitude: float, ra: float, dec: float,
                             time: AstroTime, radius: float = 1.0) -> HorizontalPosition:
    """
    Place RA/Dec for an observer at lat/longitude and time.

    Returns altitude/azimuth and the renderer XYZ on a sphere of the given
    radius. At the north pole (lat == 90) no tilt is needed and the
    azimuth is 180 + hour angle.
    """
    hour_angle = local_hour_angle_degrees(time, longitude, ra)
    return _place(lat, ra, dec, hour_angle, radius, Frame.HORIZON)


def canonical_position(ra: float, dec: float, radius: float = 1.0) -> HorizontalPosition:
    """
    Position in the canonical frame: observer at the north pole on the
    Greenwich meridian at sidereal time 0.

    Rotate with observer_rotation() to get the view for a real observer.
    """
    hour_angle = normalize_deg(-ra)
    return _place(90.0, ra, dec, hour_angle, radius, Frame.CANONICAL)


def observer_rotation(lat: float, longitude: float, time: AstroTime) -> np.ndarray:
    """
    3x3 matrix taking canonical-frame XYZ to the observer frame.

    First a turn about the polar (y) axis by the local sidereal time, then
    the colatitude tilt about the east (x) axis.
    """
    lst = local_sidereal_degrees(time, longitude) * RAD_PER_DEG
    c_l, s_l = math.cos(lst), math.sin(lst)
    spin = np.array([
        [c_l, 0.0, -s_l],
        [0.0, 1.0, 0.0],
        [s_l, 0.0, c_l],
    ])
    colat = (90.0 - lat) * RAD_PER_DEG
    c_c, s_c = math.cos(colat), math.sin(colat)
    tilt = np.array([
        [1.0, 0.0, 0.0],
        [0.0, c_c, s_c],
        [0.0, -s_c, c_c],
    ])
    return tilt @ spin


class RaDec(NamedTuple):
    ra: float
    dec: float


def horizontal_xyz_to_equatorial(lat: float, longitude: float,
                                 x: float, y: float, z: float,
                                 time: AstroTime) -> RaDec:
    """
    Inverse of equatorial_to_horizontal: which RA/Dec does a renderer
    direction correspond to for this observer and time.

    The direction is normalised first, so any non-zero length works.

    Raises:
        DegenerateInputError: for a zero-length or non-finite direction.
    """
    try:
        ux, uy, uz = vectors.vnormalize((x, y, z))
    except DegenerateInputError:
        raise DegenerateInputError(
            f"pointing direction ({x}, {y}, {z}) has no usable length") from None

    lst = local_sidereal_degrees(time, longitude)
    colat = (90.0 - lat) * RAD_PER_DEG
    xeq = ux
    yeq = uy * math.cos(colat) - uz * math.sin(colat)
    zeq = uy * math.sin(colat) + uz * math.cos(colat)

    dec = math.asin(max(-1.0, min(1.0, yeq))) * DEG_PER_RAD
    hour_angle = math.atan2(-xeq, zeq) * DEG_PER_RAD
    return RaDec(ra=normalize_deg(lst - hour_angle), dec=dec)


class EclipticConversion(NamedTuple):
    ra: float
    dec: float
    distance: float
    x: float
    y: float
    z: float


def ecliptic_to_equatorial(position, origin,
                           obliquity_deg: float = OBLIQUITY_J2000) -> EclipticConversion:
    """
    Vector from origin to position (both ecliptic cartesian, same units)
    rotated into the equatorial frame, with its RA/Dec/distance.

    Typically position is a planet and origin the Earth, both heliocentric.
    """
    gx, gy, gz = vectors.vsub(position, origin)

    eps = obliquity_deg * RAD_PER_DEG
    cos_e, sin_e = math.cos(eps), math.sin(eps)
    eqx = gx
    eqy = gy * cos_e - gz * sin_e
    eqz = gy * sin_e + gz * cos_e

    ra = normalize_deg(math.atan2(eqy, eqx) * DEG_PER_RAD)
    dec = math.atan2(eqz, math.sqrt(eqx * eqx + eqy * eqy)) * DEG_PER_RAD
    distance = math.sqrt(eqx * eqx + eqy * eqy + eqz * eqz)
    return EclipticConversion(ra=ra, dec=dec, distance=distance,
                              x=float(eqx), y=float(eqy), z=float(eqz))


def lit_point_rotation(observer_from_sun, body_from_observer) -> float:
    """
    Phase angle (degrees) Sun-body-observer.

    observer_from_sun is the observer's position relative to the Sun and
    body_from_observer the body relative to the observer, in one frame.
    0 means the body is fully lit as seen by the observer, 180 that the
    observer faces its unlit side.
    """
    obs_from_body = vectors.vneg(body_from_observer)
    sun_from_obs = vectors.vneg(observer_from_sun)
    sun_from_body = vectors.vadd(obs_from_body, sun_from_obs)

    s = vectors.vnormalize(sun_from_body)
    o = vectors.vnormalize(obs_from_body)
    dot = vectors.vdot(s, o)
    cross = vectors.vcross(s, o)
    return math.atan2(vectors.vlength(cross), dot) * DEG_PER_RAD
