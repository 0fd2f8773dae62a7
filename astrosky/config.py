"""
Engine configuration.

Plain dataclasses with defaults that reproduce the reference behaviour.
Values are checked in __post_init__; EngineConfig.from_env() lets an
application override the common observer settings without code changes.
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field

from .core.types import Observer


@dataclass(frozen=True)
class KeplerConfig:
    """Newton-Raphson settings for the Keplerian solver.

    Attributes:
        elliptic_tolerance: stop when the anomaly step drops below this (rad).
        hyperbolic_tolerance: same, for e >= 1.
        max_iterations: hard cap on iterations for either branch.
    """
    elliptic_tolerance: float = 1e-8
    hyperbolic_tolerance: float = 1e-5
    max_iterations: int = 100000

    def __post_init__(self):
        if self.elliptic_tolerance <= 0 or self.hyperbolic_tolerance <= 0:
            raise ValueError("Kepler tolerances must be positive")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")


@dataclass(frozen=True)
class SkyConfig:
    """Observer and scene scaling."""
    observer: Observer = field(default_factory=lambda: Observer(lat_deg=45.0, lon_deg=0.0))
    au_scaling: float = 1.0             # scene units per AU
    star_sphere_radius: float = 1000.0  # scene units
    max_magnitude: float = 6.5          # faintest object considered

    def __post_init__(self):
        if not -90.0 <= self.observer.lat_deg <= 90.0:
            raise ValueError(f"latitude out of range: {self.observer.lat_deg}")
        if self.au_scaling <= 0:
            raise ValueError(f"au_scaling must be positive, got {self.au_scaling}")
        if self.star_sphere_radius <= 0:
            raise ValueError(f"star_sphere_radius must be positive, got {self.star_sphere_radius}")


@dataclass(frozen=True)
class EngineConfig:
    """Top-level configuration."""
    kepler: KeplerConfig = field(default_factory=KeplerConfig)
    sky: SkyConfig = field(default_factory=SkyConfig)

    @classmethod
    def from_env(cls, environ=None) -> "EngineConfig":
        """
        Build a config from ASTROSKY_LAT, ASTROSKY_LON, ASTROSKY_MAX_MAG and
        ASTROSKY_AU_SCALING. Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        base = SkyConfig()
        observer = Observer(
            lat_deg=float(env.get("ASTROSKY_LAT", base.observer.lat_deg)),
            lon_deg=float(env.get("ASTROSKY_LON", base.observer.lon_deg)),
        )
        sky = SkyConfig(
            observer=observer,
            au_scaling=float(env.get("ASTROSKY_AU_SCALING", base.au_scaling)),
            star_sphere_radius=base.star_sphere_radius,
            max_magnitude=float(env.get("ASTROSKY_MAX_MAG", base.max_magnitude)),
        )
        return cls(sky=sky)


DEFAULT_CONFIG = EngineConfig()
