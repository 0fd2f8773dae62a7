"""
planet_physics.py
=================
Brightness and apparent size of solar-system bodies.

Magnitudes follow the split used throughout the package:
    distance_mag_factor = 5*log10(r) + 5*log10(delta)
with r the distance from the Sun and delta from the observer, in AU.
Most bodies are base_mag + distance_mag_factor. Mercury and Venus add a
polynomial in the phase angle (Mallama & Hilton 2018 fits, Venus with a
separate regime past 163.7 deg). The Sun is fixed and the Moon depends
on its phase angle only.

Units: distances in AU unless noted, angles in degrees.
"""

from __future__ import annotations
import math
from typing import NamedTuple

from .orbital_body import BodyKind, SolarSystemBody

# arcsec per radian
_ARCSEC_PER_RAD = 206264.806

# Venus changes photometric regime at this phase angle
VENUS_REGIME_SPLIT = 163.7


class MagnitudeFactors(NamedTuple):
    r_mag_factor: float         # 5*log10(r)
    delta_mag_factor: float     # 5*log10(delta)
    distance_mag_factor: float  # sum of both


def distance_magnitude_factors(au_from_sun: float, au_from_observer: float) -> MagnitudeFactors:
    if au_from_sun <= 0 or au_from_observer <= 0:
        raise ValueError("distances must be positive")
    r = 5.0 * math.log10(au_from_sun)
    delta = 5.0 * math.log10(au_from_observer)
    return MagnitudeFactors(r, delta, r + delta)


def calculate_magnitude(body: SolarSystemBody, phase_angle: float,
                        r_mag_factor: float = 0.0, delta_mag_factor: float = 0.0,
                        distance_mag_factor: float = 0.0) -> float:
    """
    Apparent V magnitude of a body.

    Args:
        body: descriptor; dispatch is on its kind and designation
        phase_angle: Sun-body-observer angle (deg)
        r_mag_factor, delta_mag_factor: the two halves of the distance term,
            kept for models that weight them separately
        distance_mag_factor: 5*log10(r * delta)
    """
    if body.kind is BodyKind.SUN:
        return body.base_mag
    if body.kind is BodyKind.MOON:
        return _mag_moon(body, phase_angle)
    if body.designation == "Mercury":
        return _mag_mercury(body, phase_angle, distance_mag_factor)
    if body.designation == "Venus":
        return _mag_venus(body, phase_angle, distance_mag_factor)
    return body.base_mag + distance_mag_factor


def _mag_mercury(body: SolarSystemBody, ph: float, distance_mag_factor: float) -> float:
    phase_factor = (((((-3.0334e-12 * ph + 1.6893e-09) * ph - 3.4265e-07) * ph
                      + 3.3644e-05) * ph - 1.6336e-03) * ph + 6.3280e-02) * ph
    return body.base_mag + distance_mag_factor + phase_factor


def _mag_venus(body: SolarSystemBody, ph: float, distance_mag_factor: float) -> float:
    if ph < VENUS_REGIME_SPLIT:
        phase_factor = (-1.044e-03 * ph + 3.687e-04 * ph**2
                        - 2.814e-06 * ph**3 + 8.938e-09 * ph**4)
    else:
        # near inferior conjunction; the constant cancels base_mag
        phase_factor = 236.05828 + 4.384 - 2.81914 * ph + 8.39034e-03 * ph**2
    return body.base_mag + distance_mag_factor + phase_factor


def _mag_moon(body: SolarSystemBody, phase_angle: float) -> float:
    g = math.radians(phase_angle)
    return body.base_mag + 1.49 * abs(g) + 0.043 * g**4


def hg_magnitude(H: float, G: float, r: float, delta: float, phase: float) -> float:
    """
    IAU H,G system for asteroids and comets without a dedicated model.
    """
    tan_half = math.tan(math.radians(phase) / 2.0)
    if tan_half < 1e-10:
        phi1 = phi2 = 1.0
    else:
        phi1 = math.exp(-3.33 * tan_half**0.63)
        phi2 = math.exp(-1.87 * tan_half**1.22)
    return (H
            - 2.5 * math.log10((1.0 - G) * phi1 + G * phi2)
            + 5.0 * math.log10(r * delta))


def illuminated_fraction(phase_deg: float) -> float:
    """Illuminated fraction 0..1 of the disk from the phase angle."""
    return (1.0 + math.cos(math.radians(phase_deg))) / 2.0


def apparent_diameter_arcsec(body: SolarSystemBody, distance_m: float) -> float:
    """Apparent diameter in arcseconds at distance_m metres (0 if not positive)."""
    if distance_m <= 0:
        return 0.0
    return 2.0 * math.atan(body.radius / distance_m) * _ARCSEC_PER_RAD
