"""
Core astronomy: time system, coordinate transforms, vector maths.

Usage:
    from astrosky.core import AstroTime, equatorial_to_horizontal

    t = AstroTime.from_calendar(2024, 1, 1)
    pos = equatorial_to_horizontal(45.0, 7.0, ra=101.287, dec=-16.716, time=t)
"""

from .types import (
    AstroskyError,
    DegenerateInputError,
    NonConvergentError,
    Frame,
    Observer,
    EquatorialCoords,
    CartesianPosition,
    HorizontalPosition,
)
from .astro_time import (
    AstroTime,
    Nutation,
    julian_date,
    datetime_to_julian_date,
    greenwich_sidereal_hours,
    nutation_and_obliquity,
    delta_t,
    jd_to_centuries,
    jd_to_millennia,
    jd_to_modified_julian_date,
    jd_to_truncated_julian_date,
)
from .coords import (
    OBLIQUITY_J2000,
    EclipticConversion,
    RaDec,
    sphere_to_xyz,
    local_sidereal_degrees,
    local_hour_angle_degrees,
    equatorial_to_horizontal,
    canonical_position,
    observer_rotation,
    horizontal_xyz_to_equatorial,
    ecliptic_to_equatorial,
    lit_point_rotation,
)

__all__ = [
    "AstroskyError",
    "DegenerateInputError",
    "NonConvergentError",
    "Frame",
    "Observer",
    "EquatorialCoords",
    "CartesianPosition",
    "HorizontalPosition",
    "AstroTime",
    "Nutation",
    "julian_date",
    "datetime_to_julian_date",
    "greenwich_sidereal_hours",
    "nutation_and_obliquity",
    "delta_t",
    "jd_to_centuries",
    "jd_to_millennia",
    "jd_to_modified_julian_date",
    "jd_to_truncated_julian_date",
    "OBLIQUITY_J2000",
    "EclipticConversion",
    "RaDec",
    "sphere_to_xyz",
    "local_sidereal_degrees",
    "local_hour_angle_degrees",
    "equatorial_to_horizontal",
    "canonical_position",
    "observer_rotation",
    "horizontal_xyz_to_equatorial",
    "ecliptic_to_equatorial",
    "lit_point_rotation",
]
