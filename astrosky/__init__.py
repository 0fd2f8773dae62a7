"""
astrosky: apparent positions, brightness and nearest-object queries for
stars and solar-system bodies, for any instant and observer on Earth.

Usage:
    from astrosky import AstroTime, build_universe

    universe = build_universe()
    t = AstroTime.from_calendar(2024, 1, 1)
    bodies = universe.solar_system(t)
"""

__version__ = "0.1.0"

from .config import DEFAULT_CONFIG, EngineConfig, KeplerConfig, SkyConfig
from .core import (
    AstroTime,
    AstroskyError,
    DegenerateInputError,
    NonConvergentError,
    Observer,
)
from .logging_config import configure_logging, get_logger
from .universe import Universe, build_universe

__all__ = [
    "__version__",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "KeplerConfig",
    "SkyConfig",
    "AstroTime",
    "AstroskyError",
    "DegenerateInputError",
    "NonConvergentError",
    "Observer",
    "configure_logging",
    "get_logger",
    "Universe",
    "build_universe",
]
