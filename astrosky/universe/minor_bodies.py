"""
Minor bodies: general Keplerian orbits.

Comets and asteroids are described by osculating elements at an epoch
(or a time of perihelion passage) rather than by periodic series.
from_keplerian() solves Kepler's equation for the elliptic (e < 1) and
hyperbolic (e > 1) cases and rotates the orbital-plane position into
heliocentric ecliptic coordinates.

Exactly parabolic orbits (e == 1) are not solved directly: the
eccentricity is nudged to 1.0000001 and the hyperbolic branch is used.
This is a numerical workaround, good enough for display.

Elements can be read from the MPC's MPCORB.DAT fixed-column format with
KeplerianElements.from_mpc_line() / load_mpc_file().
Their H and G feed minor_body_magnitude() (IAU H,G system).
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from pathlib import Path
from typing import List, NamedTuple, Optional

from ..config import DEFAULT_CONFIG, KeplerConfig
from ..core.astro_time import AstroTime, julian_date
from ..core.coords import lit_point_rotation
from ..core.types import NonConvergentError
from ..core.vectors import vlength, vsub
from ..logging_config import get_logger
from .planet_physics import hg_magnitude

logger = get_logger(__name__)

# Gaussian gravitational constant squared (AU^3 / day^2)
GM_SUN = 2.9591220828559093e-4

PARABOLIC_NUDGE = 1.0000001


@dataclass(frozen=True)
class KeplerianElements:
    """
    Osculating orbital elements (AU, degrees, Julian Dates).

    Size of the orbit: semi_major_axis, or perihelion_distance from which
    a is derived. Position on the orbit: mean_anomaly at epoch, or
    time_of_periapsis (which then takes precedence as the reference time).
    """
    eccentricity: float
    inclination: float
    longitude_of_ascending_node: float
    argument_of_periapsis: float
    semi_major_axis: Optional[float] = None
    perihelion_distance: Optional[float] = None
    epoch: Optional[float] = None
    mean_anomaly: Optional[float] = None
    time_of_periapsis: Optional[float] = None
    name: str = ""
    absolute_magnitude: Optional[float] = None   # H
    slope: float = 0.15                          # G

    def __post_init__(self):
        if self.eccentricity < 0:
            raise ValueError(f"eccentricity must be >= 0, got {self.eccentricity}")
        if self.semi_major_axis is None and self.perihelion_distance is None:
            raise ValueError("either semi_major_axis or perihelion_distance is required")
        if self.time_of_periapsis is None and (self.epoch is None or self.mean_anomaly is None):
            raise ValueError("either time_of_periapsis or epoch with mean_anomaly is required")

    @property
    def reference_time(self) -> float:
        return self.time_of_periapsis if self.time_of_periapsis is not None else self.epoch

    @classmethod
    def from_mpc_line(cls, line: str) -> Optional["KeplerianElements"]:
        """
        Parse one line of MPCORB.DAT (fixed ASCII columns).
        Returns None for headers, comments and malformed lines.

        Columns:
          0-6:    number / packed designation
          8-13:   H (absolute magnitude)
          14-19:  G (slope)
          20-25:  epoch (packed)
          26-35:  M (mean anomaly, deg)
          37-46:  argument of perihelion (deg)
          48-57:  longitude of ascending node (deg)
          59-67:  inclination (deg)
          70-79:  e
          92-102: a (AU)
          166-194: readable designation
        """
        if len(line) < 103 or line.startswith('#'):
            return None
        try:
            h = float(line[8:13].strip() or '10.0')
            g = float(line[14:19].strip() or '0.15')
            epoch = _unpack_mpc_epoch(line[20:25].strip())
            m0 = float(line[26:35])
            peri = float(line[37:46])
            node = float(line[48:57])
            inc = float(line[59:67])
            e = float(line[70:79])
            a = float(line[92:102])
        except ValueError:
            return None
        name = line[166:194].strip() if len(line) > 166 else ""
        return cls(eccentricity=e, inclination=inc,
                   longitude_of_ascending_node=node, argument_of_periapsis=peri,
                   semi_major_axis=a, epoch=epoch, mean_anomaly=m0,
                   name=name or line[:7].strip(),
                   absolute_magnitude=h, slope=g)


def _unpack_mpc_epoch(packed: str) -> float:
    """
    Packed MPC epoch (5 characters) -> Julian Date.
    K24B1 = 2024 Nov 1; I=1800, J=1900, K=2000; day/month A=10 .. V=31.
    """
    if len(packed) != 5:
        raise ValueError(f"bad packed epoch {packed!r}")
    centuries = {'I': 1800, 'J': 1900, 'K': 2000}
    if packed[0] not in centuries:
        raise ValueError(f"bad packed epoch {packed!r}")

    def unpack(c: str) -> int:
        return int(c) if c.isdigit() else ord(c) - ord('A') + 10

    year = centuries[packed[0]] + int(packed[1:3])
    return julian_date(year, unpack(packed[3]), unpack(packed[4]))


def load_mpc_file(path: str | Path, max_h: float = 16.0,
                  max_objects: int = 10000) -> List[KeplerianElements]:
    """
    Read MPCORB.DAT, keeping bodies with absolute magnitude <= max_h.
    """
    bodies: List[KeplerianElements] = []
    skipped = 0
    with open(path, 'r', encoding='ascii', errors='ignore') as f:
        for line in f:
            if len(bodies) >= max_objects:
                break
            elems = KeplerianElements.from_mpc_line(line)
            if elems is None:
                skipped += 1
                continue
            if elems.absolute_magnitude > max_h:
                continue
            bodies.append(elems)
    logger.info("Loaded %d minor bodies from %s (%d lines skipped)",
                len(bodies), Path(path).name, skipped)
    return bodies


# ---------------------------------------------------------------------------
# Kepler's equation
# ---------------------------------------------------------------------------

class KeplerSolution(NamedTuple):
    anomaly: float      # eccentric (or hyperbolic) anomaly, rad
    converged: bool
    iterations: int


def solve_kepler_elliptic(mean_anomaly: float, e: float,
                          tol: float = 1e-8, max_iter: int = 100000) -> KeplerSolution:
    """
    Newton-Raphson on M = E - e*sin(E), starting from E = M.

    Args:
        mean_anomaly: rad
        e: eccentricity, 0 <= e < 1
    """
    u = mean_anomaly
    for i in range(1, max_iter + 1):
        delta = (mean_anomaly - u + e * math.sin(u)) / (1.0 - e * math.cos(u))
        u += delta
        if abs(delta) <= tol:
            return KeplerSolution(u, True, i)
    return KeplerSolution(u, False, max_iter)


def solve_kepler_hyperbolic(mean_anomaly: float, e: float,
                            tol: float = 1e-5, max_iter: int = 100000) -> KeplerSolution:
    """
    Newton-Raphson on M = e*sinh(H) - H, starting from H = asinh(M/e).

    The start keeps sinh/cosh finite however large M grows, which it does
    without bound for hyperbolic orbits long after perihelion.
    """
    u = math.asinh(mean_anomaly / e)
    for i in range(1, max_iter + 1):
        delta = (mean_anomaly - e * math.sinh(u) + u) / (e * math.cosh(u) - 1.0)
        u += delta
        if abs(delta) <= tol:
            return KeplerSolution(u, True, i)
    return KeplerSolution(u, False, max_iter)


# ---------------------------------------------------------------------------
# Position from elements
# ---------------------------------------------------------------------------

class OrbitalPlanePosition(NamedTuple):
    x: float    # towards perihelion, AU
    y: float
    r: float    # heliocentric distance, AU


class KeplerianPosition(NamedTuple):
    x: float    # heliocentric ecliptic, AU
    y: float
    z: float
    orbital_plane: OrbitalPlanePosition
    solution: KeplerSolution


def _mean_motion(a: float) -> float:
    """deg/day"""
    return math.degrees(math.sqrt(GM_SUN / (a * a * a)))


def _mean_anomaly_at(elements: KeplerianElements, a: float, jd: float) -> float:
    """Mean anomaly in degrees, not wrapped."""
    elapsed = jd - elements.reference_time
    if elements.time_of_periapsis is not None:
        return _mean_motion(a) * elapsed
    return _mean_motion(a) * elapsed + elements.mean_anomaly


def _elliptic_plane(elements: KeplerianElements, e: float, jd: float,
                    config: KeplerConfig):
    if elements.semi_major_axis is not None:
        a = elements.semi_major_axis
    else:
        a = elements.perihelion_distance / (1.0 - e)

    l = math.radians(_mean_anomaly_at(elements, a, jd) % 360.0)
    sol = solve_kepler_elliptic(l, e, config.elliptic_tolerance, config.max_iterations)
    u = sol.anomaly
    if u < 0:
        u += 2.0 * math.pi
    plane = OrbitalPlanePosition(
        x=a * (math.cos(u) - e),
        y=a * math.sqrt(1.0 - e * e) * math.sin(u),
        r=a * (1.0 - e * math.cos(u)),
    )
    return plane, sol._replace(anomaly=u)


def _hyperbolic_plane(elements: KeplerianElements, e: float, jd: float,
                      config: KeplerConfig):
    if elements.semi_major_axis is not None and elements.semi_major_axis > 0:
        a = elements.semi_major_axis
    elif elements.perihelion_distance is not None:
        a = elements.perihelion_distance / (e - 1.0)
    else:
        raise ValueError("hyperbolic orbit needs perihelion_distance or a positive semi_major_axis")

    # hyperbolic mean anomaly is not periodic
    l = math.radians(_mean_anomaly_at(elements, a, jd))
    sol = solve_kepler_hyperbolic(l, e, config.hyperbolic_tolerance, config.max_iterations)
    u = sol.anomaly
    plane = OrbitalPlanePosition(
        x=a * (e - math.cosh(u)),
        y=a * math.sqrt(e * e - 1.0) * math.sinh(u),
        r=a * (e * math.cosh(u) - 1.0),
    )
    return plane, sol


def _ecliptic_rectangular(elements: KeplerianElements, plane: OrbitalPlanePosition):
    lan = math.radians(elements.longitude_of_ascending_node)
    ap = math.radians(elements.argument_of_periapsis)
    inc = math.radians(elements.inclination)
    cos_n, sin_n = math.cos(lan), math.sin(lan)
    cos_w, sin_w = math.cos(ap), math.sin(ap)
    cos_i, sin_i = math.cos(inc), math.sin(inc)

    x = plane.x * (cos_n * cos_w - sin_n * cos_i * sin_w) - plane.y * (cos_n * sin_w + sin_n * cos_i * cos_w)
    y = plane.x * (sin_n * cos_w + cos_n * cos_i * sin_w) - plane.y * (sin_n * sin_w - cos_n * cos_i * cos_w)
    z = plane.x * sin_i * sin_w + plane.y * sin_i * cos_w
    return x, y, z


def from_keplerian(elements: KeplerianElements, time: AstroTime | float,
                   config: Optional[KeplerConfig] = None,
                   strict: bool = False) -> KeplerianPosition:
    """
    Heliocentric ecliptic position (AU) of a body on a Keplerian orbit.

    Args:
        elements: the orbit
        time: AstroTime or Julian Date
        config: solver tolerances and iteration cap
        strict: raise instead of returning a non-converged estimate

    Raises:
        NonConvergentError: only when strict and the iteration cap is hit.
    """
    config = config or DEFAULT_CONFIG.kepler
    jd = time.julian_date if isinstance(time, AstroTime) else float(time)

    e = elements.eccentricity
    if e < 1.0:
        plane, sol = _elliptic_plane(elements, e, jd, config)
    else:
        if e == 1.0:
            e = PARABOLIC_NUDGE
        plane, sol = _hyperbolic_plane(elements, e, jd, config)

    if not sol.converged:
        label = elements.name or "orbit"
        if strict:
            raise NonConvergentError(
                f"Kepler solver did not converge for {label} (e={e}) "
                f"after {sol.iterations} iterations",
                value=sol.anomaly, iterations=sol.iterations)
        logger.warning("Kepler solver did not converge for %s (e=%s) after %d iterations",
                       label, e, sol.iterations)

    x, y, z = _ecliptic_rectangular(elements, plane)
    return KeplerianPosition(x=x, y=y, z=z, orbital_plane=plane, solution=sol)


def minor_body_magnitude(elements: KeplerianElements, position: KeplerianPosition,
                         earth_au) -> Optional[float]:
    """
    Apparent magnitude from the H,G elements, seen from the Earth.

    Args:
        elements: the orbit, with absolute_magnitude (H) and slope (G)
        position: from_keplerian() result for the same instant
        earth_au: the Earth's heliocentric ecliptic position in AU

    Returns None when the elements carry no H.
    """
    if elements.absolute_magnitude is None:
        return None
    helio = (position.x, position.y, position.z)
    geo = vsub(helio, earth_au)
    phase = lit_point_rotation(earth_au, geo)
    return hg_magnitude(elements.absolute_magnitude, elements.slope,
                        vlength(helio), vlength(geo), phase)
