"""Curve synthesizer: sum per-peak kernels over a sampling domain."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional

import numpy as np

from .models import Domain, Peak, SampledCurve

Kernel = Callable[[np.ndarray, Peak], np.ndarray]
Noise = Callable[[int], np.ndarray]

_SQRT_2PI = np.sqrt(2 * np.pi)


def gaussian_kernel(x: np.ndarray, peak: Peak) -> np.ndarray:
    """Unit-height Gaussian with standard deviation ``peak.width``."""
    return np.exp(-((np.asarray(x, dtype=float) - peak.center) ** 2) / (2 * peak.width ** 2))


def lognormal_kernel(x: np.ndarray, peak: Peak) -> np.ndarray:
    """Log-normal density with log-space standard deviation ``peak.width``.

    Zero for non-positive *x*.
    """
    x = np.asarray(x, dtype=float)
    positive = x > 0
    safe_x = np.where(positive, x, 1.0)
    sigma = peak.width
    exponent = -((np.log(safe_x) - np.log(peak.center)) ** 2) / (2 * sigma ** 2)
    density = np.exp(exponent) / (safe_x * sigma * _SQRT_2PI)
    return np.where(positive, density, 0.0)


def stick_kernel(x: np.ndarray, peak: Peak) -> np.ndarray:
    """1 within half a width of the center, 0 elsewhere (centroided spectra)."""
    x = np.asarray(x, dtype=float)
    return np.where(np.abs(x - peak.center) <= peak.width / 2, 1.0, 0.0)


KERNELS: Dict[str, Kernel] = {
    "gaussian": gaussian_kernel,
    "lognormal": lognormal_kernel,
    "stick": stick_kernel,
}


def synthesize(
    peaks: Iterable[Peak],
    domain: Domain,
    kernel: str | Kernel = "gaussian",
    *,
    baseline: float = 0.0,
    absorbing: bool = False,
    noise: Optional[Noise] = None,
    floor: Optional[float] = 0.0,
    ceiling: Optional[float] = None,
) -> SampledCurve:
    """Build a sampled curve from *peaks* over *domain*.

    Args:
        peaks: Peaks to sum. Only read.
        domain: Sampling grid.
        kernel: Kernel name from ``KERNELS`` or a callable
            ``(x_array, peak) -> array`` evaluated over the whole grid.
        baseline: Signal level with no peaks present.
        absorbing: Subtract peak contributions from the baseline instead of
            adding them (transmittance spectra).
        noise: Called once with the number of points; the returned array is
            added to the signal point by point.
        floor: Lower clamp for every point, or ``None`` for no clamp.
        ceiling: If given, rescale the finished curve so its maximum equals
            this value. Skipped when the maximum is not positive.

    Returns:
        A new SampledCurve with one point per domain sample.
    """
    kernel_fn = KERNELS[kernel] if isinstance(kernel, str) else kernel
    xs = domain.grid()

    signal = np.zeros_like(xs)
    for peak in peaks:
        signal += peak.intensity * kernel_fn(xs, peak)

    ys = baseline - signal if absorbing else baseline + signal
    if noise is not None:
        ys = ys + np.asarray(noise(xs.size), dtype=float)
    if floor is not None:
        ys = np.maximum(ys, floor)

    if ceiling is not None:
        top = ys.max()
        if top > 0:
            ys = ys / top * ceiling

    return SampledCurve(xs=tuple(xs.tolist()), ys=tuple(ys.tolist()))
