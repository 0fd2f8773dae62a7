from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

import numpy as np


class AstroskyError(Exception):
    """Base class for errors raised by astrosky."""


class DegenerateInputError(AstroskyError, ValueError):
    """A direction vector was zero-length or not finite."""


class NonConvergentError(AstroskyError, ArithmeticError):
    """An iterative solver hit its iteration cap before reaching tolerance."""

    def __init__(self, message: str, value: float, iterations: int):
        super().__init__(message)
        self.value = value
        self.iterations = iterations


class Frame(Enum):
    ECLIPTIC = "ecliptic"
    EQUATORIAL = "equatorial"
    # observer-relative: x east, y up, z south
    HORIZON = "horizon"
    # latitude 90, longitude 0, sidereal time 0
    CANONICAL = "canonical"


@dataclass(frozen=True, slots=True)
class Observer:
    lat_deg: float   # positive = North
    lon_deg: float   # positive = East
    elevation_m: float = 0.0


@dataclass(frozen=True, slots=True)
class EquatorialCoords:
    ra: float
    dec: float
    distance: float = 1.0


@dataclass(frozen=True, slots=True)
class CartesianPosition:
    x: float
    y: float
    z: float
    frame: Frame = Frame.ECLIPTIC

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    @property
    def length(self) -> float:
        return float(np.sqrt(self.x * self.x + self.y * self.y + self.z * self.z))


@dataclass(frozen=True, slots=True)
class HorizontalPosition:
    """
    An equatorial direction placed on a sphere around the observer.

    x, y, z are renderer coordinates (x east, y up, z south) scaled by the
    sphere radius; alt/az are degrees with azimuth measured east from north.
    """
    ra: float
    dec: float
    x: float
    y: float
    z: float
    alt: float
    az: float
    frame: Frame = Frame.HORIZON

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)
