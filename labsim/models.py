"""Core value types: peaks, analytes, sampling domains and curves."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Literal, Mapping, Optional

import numpy as np

from .errors import DegenerateInputError


@dataclass(frozen=True)
class Peak:
    """One spectral or chromatographic feature.

    Attributes:
        center: Position in domain units (wavenumber, m/z, minutes, nm...).
        intensity: Peak height / amplitude, never negative.
        width: Spread of the peak in the units its kernel expects.
        label: Optional display label (compound name, functional group).
    """

    center: float
    intensity: float
    width: float
    label: Optional[str] = None

    def __post_init__(self) -> None:
        if math.isnan(self.intensity) or self.intensity < 0:
            raise ValueError(f"Peak intensity must be >= 0, got {self.intensity}")
        if math.isnan(self.width) or self.width <= 0:
            raise ValueError(f"Peak width must be > 0, got {self.width}")


@dataclass(frozen=True)
class Analyte:
    """A named compound with its reference peaks and scalar metadata."""

    id: str
    name: str
    peaks: tuple[Peak, ...] = ()
    properties: Mapping[str, float] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "peaks", tuple(self.peaks))
        object.__setattr__(
            self, "properties", MappingProxyType(dict(self.properties)),
        )

    def __getitem__(self, key: str) -> float:
        return self.properties[key]


@dataclass(frozen=True)
class Sample:
    """A selectable sample made of one or more analytes (e.g. a mixture)."""

    id: str
    name: str
    components: tuple[Analyte, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", tuple(self.components))


@dataclass(frozen=True)
class AnalyteSummary:
    """What a UI needs to populate a selection control."""

    id: str
    display_name: str


@dataclass(frozen=True)
class Domain:
    """Sampling grid for a synthesized curve.

    Points run from ``start`` to ``stop`` inclusive; ``stop < start`` gives a
    decreasing axis (FTIR). ``scale="log"`` spaces points evenly in log10.
    """

    start: float
    stop: float
    samples: int
    scale: Literal["linear", "log"] = "linear"

    def __post_init__(self) -> None:
        if self.samples < 2:
            raise DegenerateInputError(
                f"A domain needs at least 2 samples, got {self.samples}"
            )
        if not (math.isfinite(self.start) and math.isfinite(self.stop)):
            raise DegenerateInputError(
                f"Domain bounds must be finite, got {self.start}..{self.stop}"
            )
        if self.start == self.stop:
            raise DegenerateInputError(
                f"Domain start and stop are both {self.start}"
            )
        if self.scale == "log" and (self.start <= 0 or self.stop <= 0):
            raise DegenerateInputError(
                f"Log domain bounds must be positive, got {self.start}..{self.stop}"
            )

    @classmethod
    def from_step(cls, start: float, stop: float, step: float) -> "Domain":
        """Build a linear domain from a step size instead of a sample count."""
        if step <= 0:
            raise DegenerateInputError(f"Domain step must be > 0, got {step}")
        return cls(start=start, stop=stop, samples=int(round(abs(stop - start) / step)) + 1)

    def grid(self) -> np.ndarray:
        """Sample positions as a float array."""
        if self.scale == "log":
            return np.logspace(np.log10(self.start), np.log10(self.stop), self.samples)
        return np.linspace(self.start, self.stop, self.samples)

    def points(self) -> tuple[float, ...]:
        return tuple(self.grid().tolist())


@dataclass(frozen=True)
class SampledCurve:
    """Immutable sampled signal: parallel x and y tuples."""

    xs: tuple[float, ...]
    ys: tuple[float, ...]

    @property
    def is_valid(self) -> bool:
        return len(self.xs) > 0 and len(self.xs) == len(self.ys)

    @property
    def max_y(self) -> float:
        return max(self.ys) if self.ys else 0.0

    def __len__(self) -> int:
        return len(self.xs)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return iter(zip(self.xs, self.ys))

    def points(self) -> list[tuple[float, float]]:
        return list(zip(self.xs, self.ys))

    def prefix(self, length: int) -> "SampledCurve":
        """Return the first *length* points as a new curve."""
        length = max(0, min(length, len(self.xs)))
        return SampledCurve(xs=self.xs[:length], ys=self.ys[:length])

    def y_at(self, x: float) -> float:
        """Return the y value of the sample nearest to *x*."""
        if not self.xs:
            raise DegenerateInputError("Cannot read a value from an empty curve")
        index = min(range(len(self.xs)), key=lambda i: abs(self.xs[i] - x))
        return self.ys[index]
