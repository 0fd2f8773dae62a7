"""
Time system

Julian Date, Greenwich sidereal time, nutation / obliquity of the ecliptic
and the historical Delta-T polynomials.

AstroTime bundles a UTC instant with its Julian Date and sidereal time so
the many downstream calculations for one frame do not recompute them.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import NamedTuple

from .celestial_math import RAD_PER_DEG, normalize_hours

J2000_JD = 2451545.0
DAYS_PER_CENTURY = 36525.0
DAYS_PER_MILLENNIUM = 365250.0
SIDEREAL_RATE = 1.00273790925

_J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def julian_date(year: int, month: int, day: int,
                hour: float = 0.0, minute: float = 0.0, second: float = 0.0) -> float:
    """
    Julian Date of a UT instant in the Gregorian calendar.

    Month is 1 for January. Fractional hour/minute/second are allowed.
    """
    if month <= 2:
        year -= 1
        month += 12
    julian_day = math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day - 1524.5
    time_in_day = hour / 24.0 + minute / 1440.0 + second / 86400.0
    a = math.floor(year / 100)
    b = 2 - a + math.floor(a / 4)
    return julian_day + b + time_in_day


def datetime_to_julian_date(dt: datetime) -> float:
    """Julian Date of a datetime (naive datetimes are taken as UTC)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    delta = dt - _J2000
    return J2000_JD + delta.total_seconds() / 86400.0


def jd_to_centuries(jd: float) -> float:
    """Julian centuries since J2000.0"""
    return (jd - J2000_JD) / DAYS_PER_CENTURY


def jd_to_millennia(jd: float) -> float:
    """Julian millennia since J2000.0 (the VSOP87 time argument)"""
    return (jd - J2000_JD) / DAYS_PER_MILLENNIUM


def jd_to_modified_julian_date(jd: float) -> float:
    return jd - 2400000.5


def jd_to_truncated_julian_date(jd: float) -> int:
    return math.floor(jd - 2440000.5)


def _nutation_terms(t: float):
    """Moon's node, Sun and Moon mean longitudes (radians) for nutation."""
    omega = (125.04452 - 1934.136261 * t + 0.0020708 * t * t + t * t * t / 450000.0) * RAD_PER_DEG
    l_sun = (280.4665 + 36000.7698 * t) * RAD_PER_DEG
    l_moon = (218.3165 + 481267.8813 * t) * RAD_PER_DEG
    return omega, l_sun, l_moon


def _nutation_in_longitude_arcsec(omega: float, l_sun: float, l_moon: float) -> float:
    return (-17.20 * math.sin(omega)
            - 1.32 * math.sin(2 * l_sun)
            - 0.23 * math.sin(2 * l_moon)
            + 0.21 * math.sin(2 * omega))


def _mean_obliquity_deg(t: float) -> float:
    return (23.0 + 26.0 / 60.0 + 21.448 / 3600.0
            - (46.8150 / 3600.0) * t
            - (0.00059 / 3600.0) * t * t
            + (0.001813 / 3600.0) * t * t * t)


def greenwich_sidereal_hours(jd: float) -> float:
    """
    Greenwich sidereal time in hours [0, 24) for a Julian Date.

    Mean sidereal time at 0h UT of the day is advanced by the elapsed
    fraction of the day at the sidereal rate, then corrected by the
    equation of the equinoxes (nutation in longitude * cos(obliquity)).
    """
    time_of_day = (jd + 0.5) % 1.0
    jd_midnight = jd - time_of_day
    t = jd_to_centuries(jd_midnight)

    gmst_at_zero = ((24110.5484 + 8640184.812866 * t + 0.093104 * t * t
                     + 0.0000062 * t * t * t) / 3600.0) % 24.0
    gmst = gmst_at_zero + time_of_day * 24.0 * SIDEREAL_RATE

    eps = _mean_obliquity_deg(t)
    dpsi = _nutation_in_longitude_arcsec(*_nutation_terms(t))
    gmst += (dpsi / 15.0) * math.cos(eps * RAD_PER_DEG) / 3600.0
    return normalize_hours(gmst)


class Nutation(NamedTuple):
    nutation: float          # nutation in longitude (deg)
    mean_obliquity: float    # deg
    obliquity: float         # true obliquity (deg)


def nutation_and_obliquity(time: "AstroTime | float") -> Nutation:
    """
    Nutation in longitude and the mean / true obliquity of the ecliptic.

    Accepts an AstroTime or a bare Julian Date.
    """
    jd = time.julian_date if isinstance(time, AstroTime) else float(time)
    t = jd_to_centuries(jd)
    omega, l_sun, l_moon = _nutation_terms(t)

    nutation = _nutation_in_longitude_arcsec(omega, l_sun, l_moon) / 3600.0
    eps0 = _mean_obliquity_deg(t)
    d_eps = (9.20 * math.cos(omega)
             + 0.57 * math.cos(2 * l_sun)
             + 0.10 * math.cos(2 * l_moon)
             - 0.09 * math.cos(2 * omega)) / 3600.0
    return Nutation(nutation=nutation, mean_obliquity=eps0, obliquity=eps0 + d_eps)


def delta_t(year: int, month: int = 1) -> float:
    """
    Delta T = TT - UT in seconds.

    NASA polynomial expressions (Espenak & Meeus), selected by year range.
    Not applied by the position solvers, which treat UT as dynamical time.
    """
    y = year + (month - 0.5) / 12.0

    if year <= -500:
        u = (y - 1820) / 100
        return -20 + 32 * u * u
    if year <= 500:
        u = y / 100
        return (10583.6 - 1014.41 * u + 33.78311 * u**2 - 5.952053 * u**3
                - 0.1798452 * u**4 + 0.022174192 * u**5 + 0.0090316521 * u**6)
    if year <= 1600:
        u = (y - 1000) / 100
        return (1574.2 - 556.01 * u + 71.23472 * u**2 + 0.319781 * u**3
                - 0.8503463 * u**4 - 0.005050998 * u**5 + 0.0083572073 * u**6)
    if year <= 1700:
        t = y - 1600
        return 120 - 0.9808 * t - 0.01532 * t**2 + t**3 / 7129
    if year <= 1800:
        t = y - 1700
        return 8.83 + 0.1603 * t - 0.0059285 * t**2 + 0.00013336 * t**3 - t**4 / 1174000
    if year <= 1860:
        t = y - 1800
        return (13.72 - 0.332447 * t + 0.0068612 * t**2 + 0.0041116 * t**3
                - 0.00037436 * t**4 + 0.0000121272 * t**5 - 0.0000001699 * t**6
                + 0.000000000875 * t**7)
    if year <= 1900:
        t = y - 1860
        return (7.62 + 0.5737 * t - 0.251754 * t**2 + 0.01680668 * t**3
                - 0.0004473624 * t**4 + t**5 / 233174)
    if year <= 1920:
        t = y - 1900
        return -2.79 + 1.494119 * t - 0.0598939 * t**2 + 0.0061966 * t**3 - 0.000197 * t**4
    if year <= 1941:
        t = y - 1920
        return 21.20 + 0.84493 * t - 0.076100 * t**2 + 0.0020936 * t**3
    if year <= 1961:
        t = y - 1950
        return 29.07 + 0.407 * t - t**2 / 233 + t**3 / 2547
    if year <= 1986:
        t = y - 1975
        return 45.45 + 1.067 * t - t**2 / 260 - t**3 / 718
    if year <= 2005:
        t = y - 2000
        return (63.86 + 0.3345 * t - 0.060374 * t**2 + 0.0017275 * t**3
                + 0.000651814 * t**4 + 0.00002373599 * t**5)
    if year <= 2050:
        t = y - 2000
        return 62.92 + 0.32217 * t + 0.005589 * t**2
    if year <= 2150:
        # last term removes the discontinuity at 2150
        return -20 + 32 * ((y - 1820) / 100) ** 2 - 0.5628 * (2150 - y)
    u = (y - 1820) / 100
    return -20 + 32 * u * u


@dataclass(frozen=True)
class AstroTime:
    """
    An immutable UTC instant with its Julian Date and Greenwich sidereal
    time computed once at construction.

    Month is 1 for January.
    """
    date: datetime
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    julian_date: float
    sidereal_hours_at_greenwich: float

    @classmethod
    def from_datetime(cls, dt: datetime) -> "AstroTime":
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        dt = dt.astimezone(timezone.utc)
        jd = datetime_to_julian_date(dt)
        return cls(
            date=dt,
            year=dt.year, month=dt.month, day=dt.day,
            hour=dt.hour, minute=dt.minute, second=dt.second,
            julian_date=jd,
            sidereal_hours_at_greenwich=greenwich_sidereal_hours(jd),
        )

    @classmethod
    def from_calendar(cls, year: int, month: int, day: int,
                      hour: int = 0, minute: int = 0, second: int = 0) -> "AstroTime":
        return cls.from_datetime(datetime(year, month, day, hour, minute, second,
                                          tzinfo=timezone.utc))

    @classmethod
    def now(cls) -> "AstroTime":
        return cls.from_datetime(datetime.now(timezone.utc))

    def shifted(self, hours: float = 0.0, days: float = 0.0) -> "AstroTime":
        """A new AstroTime offset from this one."""
        return AstroTime.from_datetime(self.date + timedelta(hours=hours, days=days))

    @property
    def centuries(self) -> float:
        return jd_to_centuries(self.julian_date)

    @property
    def millennia(self) -> float:
        return jd_to_millennia(self.julian_date)

    @property
    def sidereal_degrees_at_greenwich(self) -> float:
        return self.sidereal_hours_at_greenwich * 15.0
