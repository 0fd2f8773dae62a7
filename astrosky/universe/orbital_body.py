"""
Solar-system body descriptors and heliocentric positions.

Every body the sky shows (Sun, Moon, Mercury..Neptune) is a frozen
SolarSystemBody. The registry SOLAR_SYSTEM is built once at import and
never mutated; positions are computed per query by the solvers here and
in lunar.py / solar_system.py.

Planet positions come from a PeriodicSeries per body, in Julian millennia
since J2000 and heliocentric ecliptic coordinates (see series.py). The
compiled-in series are harmonic expansions of the J2000 mean elements
(Standish 1992); full VSOP87 tables can be swapped in with
dataclasses.replace(body, series=PeriodicSeries.from_vsop87(path)).

The Sun has its own closed-form model (Meeus ch. 25) and the Moon its own
periodic theory (lunar.py).
"""

from __future__ import annotations
import math
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Tuple

import numpy as np

from ..core.astro_time import AstroTime, jd_to_centuries, nutation_and_obliquity
from ..core.celestial_math import DEG_PER_RAD, METERS_PER_AU, RAD_PER_DEG, normalize_deg
from ..logging_config import get_logger
from .series import PeriodicSeries

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Mean orbital elements (J2000 epoch, with secular rates)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MeanElements:
    """
    Keplerian mean elements at J2000.0, plus secular rates per century.

    Units:
        a     : semi-major axis (AU)
        e     : eccentricity
        i     : inclination (degrees)
        L     : mean longitude (degrees)
        w_bar : longitude of perihelion (degrees)
        Om    : longitude of ascending node (degrees)

    Each element has a rate suffixed _dot (per Julian century).
    Source: Standish 1992, JPL "Keplerian Elements for Approximate Positions".
    """
    a:     float = 1.0;   a_dot:     float = 0.0
    e:     float = 0.0;   e_dot:     float = 0.0
    i:     float = 0.0;   i_dot:     float = 0.0
    L:     float = 0.0;   L_dot:     float = 0.0
    w_bar: float = 0.0;   w_bar_dot: float = 0.0
    Om:    float = 0.0;   Om_dot:    float = 0.0

    @classmethod
    def from_tuple(cls, data: Tuple[float, ...]) -> "MeanElements":
        """(a, a_dot, e, e_dot, i, i_dot, L, L_dot, w_bar, w_bar_dot, Om, Om_dot)"""
        a, ad, e, ed, i, id_, L, Ld, wp, wpd, Om, Omd = data
        return cls(a=a, a_dot=ad, e=e, e_dot=ed, i=i, i_dot=id_,
                   L=L, L_dot=Ld, w_bar=wp, w_bar_dot=wpd, Om=Om, Om_dot=Omd)

    def at_epoch(self, T: float) -> "MeanElements":
        """Elements at T Julian centuries from J2000, rates unchanged."""
        return replace(
            self,
            a     = self.a     + self.a_dot     * T,
            e     = self.e     + self.e_dot     * T,
            i     = self.i     + self.i_dot     * T,
            L     = self.L     + self.L_dot     * T,
            w_bar = self.w_bar + self.w_bar_dot * T,
            Om    = self.Om    + self.Om_dot    * T,
        )


# ---------------------------------------------------------------------------
# Body descriptors
# ---------------------------------------------------------------------------

class BodyKind(Enum):
    GENERIC = "generic"   # position from its periodic series
    SUN = "sun"
    MOON = "moon"


@dataclass(frozen=True)
class SolarSystemBody:
    """
    Static description of a solar-system body.

    Physical sizes are in metres, rotation in degrees per day, the
    orbital period in days. base_mag is the magnitude at 1 AU from both
    the Sun and the observer at zero phase.
    """
    designation: str
    proper: str
    kind: BodyKind
    radius: float
    mass: float
    base_mag: float
    axis_ra: float
    axis_dec: float
    rotate_daily: float
    color: Tuple[int, int, int] = (255, 255, 255)
    orbital_period: Optional[float] = None
    temperature: float = 5778.0
    spectral_type: str = ""
    elements: Optional[MeanElements] = None
    series: Optional[PeriodicSeries] = None

    def __repr__(self) -> str:
        return f"<SolarSystemBody {self.designation} ({self.kind.value})>"


# ---------------------------------------------------------------------------
# Heliocentric positions
# ---------------------------------------------------------------------------

def planet_position_ecliptic(time: AstroTime, body) -> np.ndarray:
    """
    Heliocentric ecliptic position in metres.

    Args:
        time: instant
        body: a SolarSystemBody with a series, or a PeriodicSeries
    """
    series = body if isinstance(body, PeriodicSeries) else body.series
    if series is None:
        raise ValueError(f"{body!r} has no periodic series")
    return series.evaluate(time.millennia) * METERS_PER_AU


def earth_position(time: AstroTime, series: Optional[PeriodicSeries] = None) -> np.ndarray:
    """Heliocentric ecliptic position of the Earth in metres."""
    return planet_position_ecliptic(time, series if series is not None else EARTH_SERIES)


class SunPosition(NamedTuple):
    ra: float           # deg
    dec: float          # deg
    distance: float     # AU
    x: float            # geocentric equatorial, AU
    y: float
    z: float


def sun_position(time: AstroTime | float) -> SunPosition:
    """
    Apparent geocentric position of the Sun (Meeus ch. 25, ~0.01 deg).

    Mean longitude and anomaly as polynomials in centuries, a three-term
    equation of centre, then nutation and aberration on the longitude and
    the true obliquity for the equatorial rotation.
    """
    jd = time.julian_date if isinstance(time, AstroTime) else float(time)
    t = jd_to_centuries(jd)

    mean_longitude = 280.46646 + 36000.76983 * t + 0.0003032 * t * t
    mean_anomaly = 357.52911 + 35999.05029 * t - 0.0001537 * t * t
    eccentricity = 0.016708634 - 0.000042037 * t - 0.0000001267 * t * t

    m_r = mean_anomaly * RAD_PER_DEG
    equation = ((1.914602 - 0.004817 * t - 0.000014 * t * t) * math.sin(m_r)
                + (0.019993 - 0.000101 * t) * math.sin(2 * m_r)
                + 0.000289 * math.sin(3 * m_r))
    true_longitude = mean_longitude + equation
    true_anomaly = mean_anomaly + equation
    radius = (1.000001018 * (1 - eccentricity * eccentricity)
              / (1 + eccentricity * math.cos(true_anomaly * RAD_PER_DEG)))

    nao = nutation_and_obliquity(jd)
    # annual aberration is -20.4898" / R
    longitude = true_longitude + nao.nutation - 0.00569
    lam = longitude * RAD_PER_DEG
    eps = nao.obliquity * RAD_PER_DEG

    ra = normalize_deg(math.atan2(math.cos(eps) * math.sin(lam), math.cos(lam)) * DEG_PER_RAD)
    dec = math.asin(math.sin(eps) * math.sin(lam)) * DEG_PER_RAD
    return SunPosition(
        ra=ra, dec=dec, distance=radius,
        x=radius * math.cos(lam),
        y=radius * math.sin(lam) * math.cos(eps),
        z=radius * math.sin(lam) * math.sin(eps),
    )


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

# (a, a_dot, e, e_dot, i, i_dot, L, L_dot, w_bar, w_bar_dot, Om, Om_dot)
_ELEMENTS = {
    "Earth": (1.00000261, 0.00000562,
              0.01671022, -0.00003804,
              0.00005, -46.94 / 3600,
              100.46457166, 35999.37244981,
              102.93768193, 0.32327364,
              -11.26064, -18228.25 / 3600),
    "Mercury": (0.38709927, 0.00000037,
                0.20563593, 0.00001906,
                7.00497902, -0.00594749,
                252.25032350, 149472.67411175,
                77.45779628, 0.16047689,
                48.33076593, -0.12534081),
    "Venus": (0.72333566, 0.00000390,
              0.00677672, -0.00004107,
              3.39467605, -0.00078890,
              181.97909950, 58517.81538729,
              131.60246718, 0.00268329,
              76.67984255, -0.27769418),
    "Mars": (1.52371034, 0.00001847,
             0.09339410, 0.00007882,
             1.84969142, -0.00813131,
             -4.55343205, 19140.30268499,
             -23.94362959, 0.44441088,
             49.55953891, -0.29257343),
    "Jupiter": (5.20288700, -0.00011607,
                0.04838624, -0.00013253,
                1.30439695, -0.00183714,
                34.39644051, 3034.74612775,
                14.72847983, 0.21252668,
                100.47390909, 0.20469106),
    "Saturn": (9.53667594, -0.00125060,
               0.05386179, -0.00050991,
               2.48599187, 0.00193609,
               49.95424423, 1222.49362201,
               92.59887831, -0.41897216,
               113.66242448, -0.28867794),
    "Uranus": (19.18916464, -0.00196176,
               0.04725744, -0.00004397,
               0.77263783, -0.00242939,
               313.23810451, 428.48202785,
               170.95427630, 0.40805281,
               74.01692503, 0.04240589),
    "Neptune": (30.06992276, 0.00026291,
                0.00859048, 0.00005105,
                1.77004347, 0.00035372,
                -55.12002969, 218.45945325,
                44.96476227, -0.32241464,
                131.78422574, -0.00508664),
}

EARTH_ELEMENTS = MeanElements.from_tuple(_ELEMENTS["Earth"])
EARTH_SERIES = PeriodicSeries.from_mean_elements(EARTH_ELEMENTS, name="Earth")


def _planet(designation, radius, mass, base_mag, axis, rotate_daily,
            period, temperature, color=(255, 255, 255)) -> SolarSystemBody:
    elements = MeanElements.from_tuple(_ELEMENTS[designation])
    return SolarSystemBody(
        designation=designation, proper=designation, kind=BodyKind.GENERIC,
        radius=radius, mass=mass, base_mag=base_mag,
        axis_ra=axis[0], axis_dec=axis[1], rotate_daily=rotate_daily,
        color=color, orbital_period=period, temperature=temperature,
        elements=elements,
        series=PeriodicSeries.from_mean_elements(elements, name=designation),
    )


SUN = SolarSystemBody(
    designation="Sol", proper="Sun", kind=BodyKind.SUN,
    radius=696340000.0, mass=1.989e30, base_mag=-26.74,
    axis_ra=286.13, axis_dec=63.87, rotate_daily=14.1844,
    temperature=5778.0, spectral_type="G2V",
)

MOON = SolarSystemBody(
    designation="Luna", proper="Moon", kind=BodyKind.MOON,
    radius=1737100.0, mass=7.342e22, base_mag=-12.73,
    axis_ra=270.0, axis_dec=66.54, rotate_daily=13.17635576160556,
    orbital_period=27.321661,
)

MERCURY = _planet("Mercury", 2439700.0, 3.3022e23, -0.613, (281.01, 61.45), 6.14,
                  87.969, 4000.0)
VENUS = _planet("Venus", 6051800.0, 4.8685e24, -4.384, (272.76, 67.16), -1.48,
                224.70069, 5778.0)
MARS = _planet("Mars", 3396200.0, 6.4185e23, -0.367, (317.67, 52.88), 350.89,
               686.971, 2500.0, color=(255, 200, 200))
JUPITER = _planet("Jupiter", 71492000.0, 1.8986e27, -9.428, (268.06, 64.5), 870.54,
                  4331.572, 5778.0)
SATURN = _planet("Saturn", 60268000.0, 5.6846e26, -8.9, (40.6, 83.54), 810.79,
                 10759.22, 5600.0, color=(255, 255, 200))
URANUS = _planet("Uranus", 25559000.0, 8.6810e25, -7.1, (257.31, -15.18), -501.16,
                 30799.095, 5600.0, color=(200, 255, 200))
NEPTUNE = _planet("Neptune", 24764000.0, 1.0243e26, -7.0, (299.4, 42.95), 536.31,
                  60190.0, 10000.0, color=(200, 255, 255))

SOLAR_SYSTEM: Tuple[SolarSystemBody, ...] = (
    SUN, MERCURY, VENUS, MOON, MARS, JUPITER, SATURN, URANUS, NEPTUNE,
)

BODIES_BY_DESIGNATION: Mapping[str, SolarSystemBody] = MappingProxyType(
    {b.designation: b for b in SOLAR_SYSTEM}
)


def solar_system_at_epoch(time: AstroTime) -> Tuple[Tuple[SolarSystemBody, ...], PeriodicSeries]:
    """
    The registry, and the Earth's series, with every planet series rebuilt
    around `time`.

    The compiled-in series hold each orbit's perihelion, node and
    inclination at their J2000 values. Rebuilding from the elements
    propagated to `time` moves them along by their secular rates, which
    matters for dates centuries away from J2000.

    Returns:
        (bodies in registry order, Earth series)
    """
    T = time.centuries
    earth = PeriodicSeries.from_mean_elements(EARTH_ELEMENTS, name="Earth", epoch=T)
    bodies = tuple(
        replace(body, series=PeriodicSeries.from_mean_elements(
            body.elements, name=body.designation, epoch=T))
        if body.elements is not None else body
        for body in SOLAR_SYSTEM
    )
    logger.info("Rebuilt planet series around JD %.1f", time.julian_date)
    return bodies, earth
