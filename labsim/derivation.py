"""Result derivation: report metrics computed from peaks and curves.

Every function is pure with respect to its inputs and total over
well-formed input: an empty peak set yields an empty or zero result.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Optional, Sequence

import numpy as np

from .errors import DegenerateInputError
from .models import Peak
from .random_source import RandomSource

# ── Chromatographic peak table ───────────────────────────────────────────────

PLATE_COUNT = 5000
WIDTH_SPREAD = 4.0


def peak_width(retention_time: float) -> float:
    """Gaussian standard deviation of a peak eluting at *retention_time*."""
    return (WIDTH_SPREAD * retention_time) / math.sqrt(PLATE_COUNT)


def peak_area(height: float, retention_time: float) -> float:
    """Area of a Gaussian peak, ``height * width * sqrt(2*pi)``, to 0.01."""
    area = height * peak_width(retention_time) * math.sqrt(2 * math.pi)
    return round(area, 2)


def percent_areas(areas: Sequence[float]) -> list[float]:
    """Each area as a percentage of the total; all zeros if the total is not positive."""
    total = sum(areas)
    if total <= 0:
        return [0.0 for _ in areas]
    return [100.0 * a / total for a in areas]


@dataclass(frozen=True)
class PeakTableRow:
    """One line of a chromatography report."""

    number: int
    name: str
    retention_time: float
    height: float
    area: float
    percent_area: float


def build_peak_table(peaks: Sequence[Peak]) -> tuple[PeakTableRow, ...]:
    """Number the peaks, compute their areas and percent areas.

    ``peak.center`` is the retention time and ``peak.intensity`` the height.
    """
    areas = [peak_area(p.intensity, p.center) for p in peaks]
    percents = percent_areas(areas)
    return tuple(
        PeakTableRow(
            number=i + 1,
            name=p.label or f"Peak {i + 1}",
            retention_time=p.center,
            height=p.intensity,
            area=area,
            percent_area=pct,
        )
        for i, (p, area, pct) in enumerate(zip(peaks, areas, percents))
    )


def within_run_window(retention_time: float, run_time: float) -> bool:
    """True if a peak elutes after injection and before the run stops."""
    return 0.0 <= retention_time < run_time


# ── Spectral library matching ────────────────────────────────────────────────

MATCH_TOLERANCE_CM1 = 25.0
SELF_MATCH_FLOOR = 95.0
SELF_MATCH_SPREAD = 4.0
MISMATCH_WEIGHT = 0.8
MISMATCH_SPREAD = 10.0
NO_MATCH_CEILING = MISMATCH_SPREAD


@dataclass(frozen=True)
class MatchResult:
    """Similarity between a sample spectrum and a library standard."""

    score: float
    is_match: bool
    matched_peaks: int
    total_peaks: int

    @property
    def raw_score(self) -> float:
        if self.total_peaks == 0:
            return 0.0
        return self.matched_peaks / self.total_peaks * 100.0


def count_matched_peaks(
    sample_peaks: Sequence[Peak],
    standard_peaks: Sequence[Peak],
    tolerance: float = MATCH_TOLERANCE_CM1,
) -> int:
    """Count sample peaks lying within *tolerance* of any standard peak."""
    standard_positions = [p.center for p in standard_peaks]
    return sum(
        1
        for p in sample_peaks
        if any(abs(p.center - s) <= tolerance for s in standard_positions)
    )


def match_score(
    sample_peaks: Sequence[Peak],
    standard_peaks: Sequence[Peak],
    rng: RandomSource,
    self_match: bool = False,
) -> MatchResult:
    """Score how well a sample matches a standard.

    An exact self-match is reported in the 95-99 % band. Otherwise the
    fraction of matched peaks is weighted by 0.8 and up to 10 points of
    noise are added.
    """
    total = len(sample_peaks)
    if total == 0:
        return MatchResult(score=0.0, is_match=False, matched_peaks=0, total_peaks=0)

    matched = count_matched_peaks(sample_peaks, standard_peaks)
    if self_match:
        score = SELF_MATCH_FLOOR + rng.uniform(0.0, SELF_MATCH_SPREAD)
    else:
        raw = matched / total * 100.0
        score = raw * MISMATCH_WEIGHT + rng.uniform(0.0, MISMATCH_SPREAD)
    return MatchResult(
        score=score, is_match=self_match, matched_peaks=matched, total_peaks=total,
    )


def assign_functional_group(
    peaks: Sequence[Peak],
    wavenumber: float,
    tolerance: float = 200.0,
) -> Optional[Peak]:
    """Return the labelled peak nearest to *wavenumber*, if within *tolerance*."""
    closest: Optional[Peak] = None
    best = math.inf
    for peak in peaks:
        distance = abs(peak.center - wavenumber)
        if distance < best and distance < tolerance:
            best = distance
            closest = peak
    return closest


# ── Calibration regression ───────────────────────────────────────────────────


@dataclass(frozen=True)
class RegressionFit:
    """Ordinary least-squares line ``y = slope * x + intercept``."""

    slope: float
    intercept: float
    r_squared: float
    n_points: int

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


def linear_regression(xs: Sequence[float], ys: Sequence[float]) -> RegressionFit:
    """Least-squares fit of *ys* against *xs*.

    Raises:
        DegenerateInputError: On mismatched lengths, fewer than two points,
            or when every x value is identical.
    """
    if len(xs) != len(ys):
        raise DegenerateInputError(
            f"Mismatched lengths: {len(xs)} x values vs {len(ys)} y values"
        )
    n = len(xs)
    if n < 2:
        raise DegenerateInputError(f"Need at least 2 data points, got {n}")

    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    if np.ptp(x) == 0:
        raise DegenerateInputError("Cannot fit a line: all x values are identical")

    slope, intercept = np.polyfit(x, y, 1)
    ss_res = np.sum((y - (slope * x + intercept)) ** 2)
    ss_tot = np.sum((y - y.mean()) ** 2)
    r_squared = 1 - (ss_res / ss_tot) if ss_tot != 0 else 0.0

    return RegressionFit(
        slope=float(slope),
        intercept=float(intercept),
        r_squared=float(r_squared),
        n_points=n,
    )


def back_calculate_concentration(absorbance: float, fit: RegressionFit) -> float:
    """Invert the calibration line: ``(absorbance - intercept) / slope``."""
    if np.isclose(fit.slope, 0.0):
        raise DegenerateInputError("Calibration slope is zero")
    return (absorbance - fit.intercept) / fit.slope


# ── Particle size statistics ─────────────────────────────────────────────────

BROAD_PEAK_STD_DEV = 30.0
Z_AVERAGE_JITTER = 0.05
POLYDISPERSE_PDI = (0.3, 0.5)
MONODISPERSE_PDI = (0.05, 0.15)
INTERCEPT_BASE = 0.9
INTERCEPT_PDI_WEIGHT = 0.5
INTERCEPT_JITTER = 0.05
GOOD_PDI_LIMIT = 0.25
GOOD_INTERCEPT_LIMIT = 0.8

Quality = Literal["Good", "Warning"]


@dataclass(frozen=True)
class SizePeakSummary:
    label: str
    size_nm: float
    intensity: float
    width_nm: float


@dataclass(frozen=True)
class SizeStatistics:
    """Summary of a particle-size distribution measurement."""

    z_average_nm: float
    polydispersity_index: float
    intercept: float
    quality: Quality
    peaks: tuple[SizePeakSummary, ...]


def classify_quality(polydispersity_index: float, intercept: float) -> Quality:
    if polydispersity_index < GOOD_PDI_LIMIT and intercept > GOOD_INTERCEPT_LIMIT:
        return "Good"
    return "Warning"


def size_statistics(peaks: Sequence[Peak], rng: RandomSource) -> SizeStatistics:
    """Z-average, PDI, intercept and quality for a size distribution.

    ``peak.center`` is the mean size in nm and ``peak.width`` its standard
    deviation in nm.
    """
    if not peaks:
        return SizeStatistics(
            z_average_nm=0.0,
            polydispersity_index=0.0,
            intercept=0.0,
            quality="Warning",
            peaks=(),
        )

    total_intensity = sum(p.intensity for p in peaks)
    if total_intensity > 0:
        weighted_mean = sum(p.center * p.intensity / total_intensity for p in peaks)
    else:
        weighted_mean = sum(p.center for p in peaks) / len(peaks)
    z_average = weighted_mean * (1 + rng.jitter(Z_AVERAGE_JITTER))

    if len(peaks) > 1 or peaks[0].width > BROAD_PEAK_STD_DEV:
        pdi = rng.uniform(*POLYDISPERSE_PDI)
    else:
        pdi = rng.uniform(*MONODISPERSE_PDI)

    intercept = INTERCEPT_BASE - pdi * INTERCEPT_PDI_WEIGHT + rng.jitter(INTERCEPT_JITTER)

    summaries = tuple(
        SizePeakSummary(
            label=f"Peak {i + 1}",
            size_nm=p.center,
            intensity=p.intensity,
            width_nm=p.width * 2,
        )
        for i, p in enumerate(peaks)
    )
    return SizeStatistics(
        z_average_nm=z_average,
        polydispersity_index=pdi,
        intercept=intercept,
        quality=classify_quality(pdi, intercept),
        peaks=summaries,
    )


# ── Optical rotation ─────────────────────────────────────────────────────────

RotationClass = Literal["dextrorotatory", "levorotatory", "optically inactive"]


@dataclass(frozen=True)
class RotationResult:
    rotation_deg: float
    sign: str
    classification: RotationClass

    @property
    def formatted(self) -> str:
        return f"{self.sign}{abs(self.rotation_deg)}°"


def rotation_result(rotation_deg: float) -> RotationResult:
    """Sign and dextro/levo classification of a specific rotation."""
    if rotation_deg > 0:
        return RotationResult(rotation_deg, "+", "dextrorotatory")
    if rotation_deg < 0:
        return RotationResult(rotation_deg, "-", "levorotatory")
    return RotationResult(rotation_deg, "", "optically inactive")
