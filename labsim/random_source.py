"""Seedable random source shared by every response and derivation call."""

from __future__ import annotations

from typing import Optional

import numpy as np


class RandomSource:
    """Thin wrapper around a numpy :class:`~numpy.random.Generator`.

    All instrument noise goes through one of two calls so a test can swap
    in :class:`QuietRandomSource` and get noise-free results. Both calls
    return a float, or an array of *size* draws for per-point curve noise.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self, low: float, high: float, size: Optional[int] = None):
        """Return a value (or *size* values) in ``[low, high)``."""
        if size is None:
            return float(self._rng.uniform(low, high))
        return self._rng.uniform(low, high, size)

    def jitter(self, amplitude: float, size: Optional[int] = None):
        """Return a symmetric perturbation in ``[-amplitude/2, amplitude/2)``."""
        if size is None:
            return float((self._rng.random() - 0.5) * amplitude)
        return (self._rng.random(size) - 0.5) * amplitude

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(seed={self.seed!r})"


class QuietRandomSource(RandomSource):
    """Random source with all noise switched off."""

    def __init__(self) -> None:
        super().__init__(seed=0)

    def uniform(self, low: float, high: float, size: Optional[int] = None):
        if size is None:
            return float(low)
        return np.full(size, float(low))

    def jitter(self, amplitude: float, size: Optional[int] = None):
        if size is None:
            return 0.0
        return np.zeros(size)
