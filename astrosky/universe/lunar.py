"""
Moon position and phase.

Position: the truncated ELP-2000/82 theory of Meeus, "Astronomical
Algorithms" ch. 47. Five fundamental arguments (quartic polynomials in
centuries), the 60-term longitude/distance and latitude tables with the
eccentricity factor E applied to terms in the Sun's anomaly, and the
additive Venus (A1), Jupiter (A2) and flattening (A3) terms. Accuracy is
about 10" in longitude, plenty for display.

Phase: time since the most recent new moon (Meeus ch. 49). This is a
separate algorithm from the position and only drives the illuminated
fraction of the disk.
"""

from __future__ import annotations
import math
from datetime import datetime, timezone
from typing import NamedTuple

import numpy as np

from ..core.astro_time import AstroTime, jd_to_centuries, nutation_and_obliquity
from ..core.celestial_math import DEG_PER_RAD, RAD_PER_DEG, normalize_deg
from .lunar_terms import LATITUDE, LONGITUDE_DISTANCE

SYNODIC_MONTH = 29.53059   # days

# Mean Earth-Moon distance (m) and Earth equatorial radius (m)
_MEAN_DISTANCE = 385000560.0
_EARTH_RADIUS = 6378140.0

_LR = np.array(LONGITUDE_DISTANCE, dtype=float)
_B = np.array(LATITUDE, dtype=float)


class MoonPosition(NamedTuple):
    ra: float               # deg
    dec: float              # deg
    distance: float         # m, centre to centre
    parallax: float         # equatorial horizontal parallax, deg
    longitude: float        # apparent ecliptic longitude, deg
    latitude: float         # ecliptic latitude, deg
    ecliptic: np.ndarray    # geocentric ecliptic x, y, z (m)


def _fundamental_arguments(t: float):
    """L', D, M, M', F in radians, and the eccentricity factor E."""
    t2, t3, t4 = t * t, t * t * t, t * t * t * t
    L1 = 218.3164477 + 481267.88123421 * t - 0.0015786 * t2 + t3 / 538841 - t4 / 65194000
    D = 297.8501921 + 445267.1114034 * t - 0.0018819 * t2 + t3 / 545868 - t4 / 113065000
    M = 357.5291092 + 35999.0502909 * t - 0.0001536 * t2 + t3 / 24490000
    M1 = 134.9633964 + 477198.8675055 * t + 0.0087414 * t2 + t3 / 69699 - t4 / 14712000
    F = 93.2720950 + 483202.0175233 * t - 0.0036539 * t2 - t3 / 3526000 + t4 / 863310000
    E = 1.0 - 0.002516 * t - 0.0000074 * t2
    return tuple(normalize_deg(a) * RAD_PER_DEG for a in (L1, D, M, M1, F)) + (E,)


def _eccentricity_factor(sun_multiple: np.ndarray, E: float) -> np.ndarray:
    m = np.abs(sun_multiple)
    return np.where(m == 1, E, np.where(m == 2, E * E, 1.0))


def moon_position(time: AstroTime | float) -> MoonPosition:
    """Apparent geocentric position of the Moon."""
    jd = time.julian_date if isinstance(time, AstroTime) else float(time)
    t = jd_to_centuries(jd)
    L1, D, M, M1, F, E = _fundamental_arguments(t)
    A1 = normalize_deg(119.75 + 131.849 * t) * RAD_PER_DEG
    A2 = normalize_deg(53.09 + 479264.290 * t) * RAD_PER_DEG
    A3 = normalize_deg(313.45 + 481266.484 * t) * RAD_PER_DEG

    arg = _LR[:, 0] * D + _LR[:, 1] * M + _LR[:, 2] * M1 + _LR[:, 3] * F
    ecc = _eccentricity_factor(_LR[:, 1], E)
    sigma_l = float(np.sum(_LR[:, 4] * np.sin(arg) * ecc))
    sigma_r = float(np.sum(_LR[:, 5] * np.cos(arg) * ecc))

    arg_b = _B[:, 0] * D + _B[:, 1] * M + _B[:, 2] * M1 + _B[:, 3] * F
    sigma_b = float(np.sum(_B[:, 4] * np.sin(arg_b) * _eccentricity_factor(_B[:, 1], E)))

    sigma_l += 3958 * math.sin(A1) + 1962 * math.sin(L1 - F) + 318 * math.sin(A2)
    sigma_b += (-2235 * math.sin(L1) + 382 * math.sin(A3)
                + 175 * math.sin(A1 - F) + 175 * math.sin(A1 + F)
                + 127 * math.sin(L1 - M1) - 115 * math.sin(L1 + M1))

    true_longitude = L1 * DEG_PER_RAD + sigma_l / 1e6
    latitude = sigma_b / 1e6
    distance = _MEAN_DISTANCE + sigma_r

    nao = nutation_and_obliquity(jd)
    longitude = normalize_deg(true_longitude + nao.nutation)

    lam = longitude * RAD_PER_DEG
    beta = latitude * RAD_PER_DEG
    eps = nao.obliquity * RAD_PER_DEG
    ra = normalize_deg(math.atan2(math.sin(lam) * math.cos(eps) - math.tan(beta) * math.sin(eps),
                                  math.cos(lam)) * DEG_PER_RAD)
    dec = math.asin(math.sin(beta) * math.cos(eps)
                    + math.cos(beta) * math.sin(eps) * math.sin(lam)) * DEG_PER_RAD

    ecliptic = np.array([
        distance * math.cos(beta) * math.cos(lam),
        distance * math.cos(beta) * math.sin(lam),
        distance * math.sin(beta),
    ])
    parallax = math.asin(_EARTH_RADIUS / distance) * DEG_PER_RAD
    return MoonPosition(ra=ra, dec=dec, distance=distance, parallax=parallax,
                        longitude=longitude, latitude=latitude, ecliptic=ecliptic)


# ---------------------------------------------------------------------------
# Phase
# ---------------------------------------------------------------------------

def _decimal_year(time: AstroTime) -> float:
    start = datetime(time.year, 1, 1, tzinfo=timezone.utc)
    end = datetime(time.year + 1, 1, 1, tzinfo=timezone.utc)
    return time.year + (time.date - start).total_seconds() / (end - start).total_seconds()


def _new_moon_jde(k: int) -> float:
    """JDE of the mean new moon number k (k=0 at 2000 Jan 6), with the
    periodic and planetary corrections."""
    t = k / 1236.85
    t2, t3, t4 = t * t, t * t * t, t * t * t * t
    jde0 = (2451550.09766 + 29.530588861 * k + 0.00015437 * t2
            - 0.000000150 * t3 + 0.00000000073 * t4)

    e = 1 - 0.002516 * t - 0.0000074 * t2
    m0 = normalize_deg(2.5534 + 29.10535670 * k - 0.0000014 * t2 - 0.00000011 * t3) * RAD_PER_DEG
    m1 = normalize_deg(201.5643 + 385.81693528 * k + 0.0107582 * t2
                       + 0.00001238 * t3 - 0.000000011 * t4) * RAD_PER_DEG
    f = normalize_deg(160.7108 + 390.67050284 * k - 0.0016118 * t2
                      - 0.00000227 * t3 + 0.000000011 * t4) * RAD_PER_DEG
    omega = normalize_deg(124.7746 - 1.56375588 * k + 0.0020672 * t2
                          + 0.00000215 * t3) * RAD_PER_DEG

    s = math.sin
    c1 = (-0.40720 * s(m1)
          + 0.17241 * e * s(m0)
          + 0.01608 * s(2 * m1)
          + 0.01039 * s(2 * f)
          + 0.00739 * e * s(m1 - m0)
          - 0.00514 * e * s(m1 + m0)
          + 0.00208 * e * e * s(2 * m0)
          - 0.00111 * s(m1 - 2 * f)
          - 0.00057 * s(m1 + 2 * f)
          + 0.00056 * e * s(2 * m1 + m0)
          - 0.00042 * s(3 * m1)
          + 0.00042 * e * s(m0 + 2 * f)
          + 0.00038 * e * s(m0 - 2 * f)
          - 0.00024 * e * s(2 * m1 - m0)
          - 0.00017 * s(omega)
          - 0.00007 * s(m1 + 2 * m0)
          + 0.00004 * s(2 * m1 - 2 * f)
          + 0.00004 * s(3 * m0)
          + 0.00003 * s(m1 + m0 - 2 * f)
          + 0.00003 * s(2 * m1 + 2 * f)
          - 0.00003 * s(m1 + m0 + 2 * f)
          + 0.00003 * s(m1 - m0 + 2 * f)
          - 0.00002 * s(m1 - m0 - 2 * f)
          - 0.00002 * s(3 * m1 + m0)
          + 0.00002 * s(4 * m1))

    # planetary arguments (deg) and amplitudes (days)
    planetary = (
        (299.77 + 0.107408 * k - 0.009173 * t2, 0.000325),
        (251.88 + 0.016321 * k, 0.000165),
        (251.83 + 26.651886 * k, 0.000164),
        (349.42 + 36.412478 * k, 0.000126),
        (84.66 + 18.206239 * k, 0.000110),
        (141.74 + 53.303771 * k, 0.000062),
        (207.14 + 2.453732 * k, 0.000060),
        (154.84 + 7.306860 * k, 0.000056),
        (34.52 + 27.261239 * k, 0.000047),
        (207.19 + 0.121824 * k, 0.000042),
        (291.34 + 1.844379 * k, 0.000040),
        (161.72 + 24.198154 * k, 0.000037),
        (239.56 + 25.513099 * k, 0.000035),
        (331.55 + 3.592518 * k, 0.000023),
    )
    c2 = sum(amp * math.sin(arg * RAD_PER_DEG) for arg, amp in planetary)
    return jde0 + c1 + c2


def moon_phase_days(time: AstroTime) -> float:
    """
    Days between the instant and the new moon picked by
    k = floor((year - 2000) * 12.3685).

    k is an estimate, so the value can be slightly negative (new moon
    just ahead) or exceed a synodic month; moon_phase_fraction() folds it.
    """
    k = math.floor((_decimal_year(time) - 2000) * 12.3685)
    return time.julian_date - _new_moon_jde(k)


def moon_phase_fraction(time: AstroTime) -> float:
    """Synodic phase in [0, 1): 0 new moon, 0.5 full moon."""
    p = ((SYNODIC_MONTH + moon_phase_days(time)) / SYNODIC_MONTH) % 1.0
    return 0.0 if p >= 1.0 else p


def moon_phase_angle(phase_fraction: float) -> float:
    """Sun-Moon-observer angle (deg) for a synodic phase fraction."""
    return abs(180.0 - 360.0 * phase_fraction)
