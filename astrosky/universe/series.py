"""
Periodic series for heliocentric planet positions.

A series is a list of terms

    t**power * amplitude * cos(phase + frequency * t)

summed separately for the ecliptic x, y and z axes, with t in Julian
millennia since J2000.0 and the result in AU. This is the layout of the
VSOP87 version A tables.

Two ways to build one:
  - PeriodicSeries.from_vsop87(path) reads a published VSOP87A file.
  - PeriodicSeries.from_mean_elements(elements) expands the two-body
    ellipse of a set of J2000 mean elements into harmonics of the mean
    anomaly. This is what the compiled-in bodies use.
"""

from __future__ import annotations
import math
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, NamedTuple

import numpy as np

from ..logging_config import get_logger

logger = get_logger(__name__)

# Axis indices
X, Y, Z = 0, 1, 2


class PeriodicTerm(NamedTuple):
    axis: int           # 0=x, 1=y, 2=z
    power: int          # power of t
    amplitude: float    # AU
    phase: float        # rad
    frequency: float    # rad per Julian millennium


@dataclass(frozen=True)
class PeriodicSeries:
    """
    Immutable table of periodic terms, evaluated with numpy.

    Term columns are unpacked once into arrays so evaluate() is a handful
    of vector operations whatever the table length.
    """
    terms: tuple[PeriodicTerm, ...]
    name: str = ""

    _axis:      np.ndarray = field(init=False, repr=False, compare=False)
    _power:     np.ndarray = field(init=False, repr=False, compare=False)
    _amplitude: np.ndarray = field(init=False, repr=False, compare=False)
    _phase:     np.ndarray = field(init=False, repr=False, compare=False)
    _frequency: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        terms = tuple(PeriodicTerm(*t) for t in self.terms)
        for t in terms:
            if t.axis not in (X, Y, Z):
                raise ValueError(f"term axis must be 0, 1 or 2, got {t.axis}")
        object.__setattr__(self, "terms", terms)
        cols = np.array(terms, dtype=float).reshape(-1, 5)
        object.__setattr__(self, "_axis", cols[:, 0].astype(int))
        object.__setattr__(self, "_power", cols[:, 1])
        object.__setattr__(self, "_amplitude", cols[:, 2])
        object.__setattr__(self, "_phase", cols[:, 3])
        object.__setattr__(self, "_frequency", cols[:, 4])

    def __len__(self) -> int:
        return len(self.terms)

    def evaluate(self, t: float) -> np.ndarray:
        """
        Heliocentric ecliptic position (AU) at t Julian millennia from J2000.

        Returns:
            array of shape (3,) holding x, y, z
        """
        values = np.power(t, self._power) * self._amplitude * np.cos(self._phase + self._frequency * t)
        return np.bincount(self._axis, weights=values, minlength=3)[:3]

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    @classmethod
    def from_mean_elements(cls, elements, name: str = "", epoch: float = 0.0,
                           samples: int = 64, max_harmonic: int = 12,
                           min_amplitude: float = 1e-9) -> "PeriodicSeries":
        """
        Harmonic expansion of a Keplerian ellipse.

        The elements are first propagated to `epoch` with their secular
        rates (MeanElements.at_epoch), and the orbit they describe is
        sampled at `samples` equally spaced mean anomalies. A real FFT of
        each ecliptic axis gives the cosine terms of harmonics
        k = 0..max_harmonic. Size, shape and orientation are held at their
        epoch values and the mean longitude advances at L_dot, so the
        series is most accurate within a few centuries of `epoch`.

        Args:
            elements: mean orbital elements at J2000 (MeanElements)
            epoch: Julian centuries from J2000 the series is built around
            samples: number of mean-anomaly samples per revolution
            max_harmonic: highest multiple of the mean anomaly kept
            min_amplitude: terms smaller than this (AU) are dropped
        """
        if samples < 2 * max_harmonic + 2:
            raise ValueError("samples must exceed twice the highest harmonic")
        elements = elements.at_epoch(epoch)
        a, e = elements.a, elements.e
        if not 0.0 <= e < 1.0:
            raise ValueError(f"mean elements need an elliptic orbit, got e={e}")

        mean_anomaly = 2.0 * np.pi * np.arange(samples) / samples
        ecc_anomaly = _solve_kepler_grid(mean_anomaly, e)
        x_orb = a * (np.cos(ecc_anomaly) - e)
        y_orb = a * math.sqrt(1.0 - e * e) * np.sin(ecc_anomaly)

        # perihelion, node and inclination fixed at the epoch
        w = math.radians(elements.w_bar - elements.Om)
        om = math.radians(elements.Om)
        inc = math.radians(elements.i)
        p_vec = np.array([
            math.cos(om) * math.cos(w) - math.sin(om) * math.sin(w) * math.cos(inc),
            math.sin(om) * math.cos(w) + math.cos(om) * math.sin(w) * math.cos(inc),
            math.sin(w) * math.sin(inc),
        ])
        q_vec = np.array([
            -math.cos(om) * math.sin(w) - math.sin(om) * math.cos(w) * math.cos(inc),
            -math.sin(om) * math.sin(w) + math.cos(om) * math.cos(w) * math.cos(inc),
            math.cos(w) * math.sin(inc),
        ])
        xyz = np.outer(p_vec, x_orb) + np.outer(q_vec, y_orb)

        n = math.radians(elements.L_dot) * 10.0   # rad / millennium
        # mean anomaly at t = 0 that reaches L - w_bar at the epoch
        m0 = math.radians(elements.L - elements.w_bar) - n * epoch / 10.0

        terms: list[PeriodicTerm] = []
        for axis in (X, Y, Z):
            spectrum = np.fft.rfft(xyz[axis])
            constant = spectrum[0].real / samples
            if abs(constant) >= min_amplitude:
                terms.append(PeriodicTerm(axis, 0, float(constant), 0.0, 0.0))
            for k in range(1, max_harmonic + 1):
                a_k = 2.0 * spectrum[k].real / samples
                b_k = -2.0 * spectrum[k].imag / samples
                amplitude = math.hypot(a_k, b_k)
                if amplitude < min_amplitude:
                    continue
                phase = (k * m0 - math.atan2(b_k, a_k)) % (2.0 * math.pi)
                terms.append(PeriodicTerm(axis, 0, amplitude, phase, k * n))

        logger.debug("Built %d periodic terms for %s", len(terms), name or "orbit")
        return cls(terms=tuple(terms), name=name)

    @classmethod
    def from_vsop87(cls, path: str | Path, name: str = "") -> "PeriodicSeries":
        """
        Load a VSOP87 version A file (heliocentric rectangular ecliptic
        coordinates, J2000 equinox).

        Header lines name the coordinate (VARIABLE 1..3) and the power of
        time (*T**n) of the terms that follow; each term line ends with
        the amplitude, phase and frequency.
        """
        path = Path(path)
        with path.open("r", encoding="ascii") as f:
            terms = list(parse_vsop87(f))
        if not terms:
            raise ValueError(f"no VSOP87 terms found in {path}")
        logger.info("Loaded %d VSOP87 terms from %s", len(terms), path.name)
        return cls(terms=tuple(terms), name=name or path.stem)


_HEADER_RE = re.compile(r"VARIABLE\s+(\d).*\*T\*\*(\d)")


def parse_vsop87(lines: Iterable[str]) -> Iterable[PeriodicTerm]:
    """Yield the terms of a VSOP87A text table."""
    axis = power = None
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        if "VSOP87" in line:
            m = _HEADER_RE.search(line)
            if not m:
                raise ValueError(f"line {line_no}: unrecognised VSOP87 header")
            axis = int(m.group(1)) - 1
            power = int(m.group(2))
            continue
        if axis is None:
            raise ValueError(f"line {line_no}: term before any VSOP87 header")
        fields = line.split()
        try:
            amplitude, phase, frequency = (float(v) for v in fields[-3:])
        except ValueError:
            raise ValueError(f"line {line_no}: malformed VSOP87 term") from None
        yield PeriodicTerm(axis, power, amplitude, phase, frequency)


def _solve_kepler_grid(mean_anomaly: np.ndarray, e: float,
                       tol: float = 1e-14, max_iter: int = 50) -> np.ndarray:
    """Eccentric anomaly for an array of mean anomalies (Newton, vectorised)."""
    E = mean_anomaly + e * np.sin(mean_anomaly)
    for _ in range(max_iter):
        dE = (mean_anomaly - E + e * np.sin(E)) / (1.0 - e * np.cos(E))
        E = E + dE
        if np.max(np.abs(dE)) < tol:
            break
    return E
