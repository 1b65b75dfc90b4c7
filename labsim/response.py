"""Parameter-response laws: instrument settings -> observed peak properties.

Each function here is the scientific contract of one simulator. They are
deterministic; instrument noise is added by the callers through a
:class:`~labsim.random_source.RandomSource`.
"""

from __future__ import annotations

import math
from typing import Iterable

from .errors import DegenerateInputError
from .models import Peak

# ── Liquid chromatography ────────────────────────────────────────────────────

BASELINE_FLOW_RATE = 1.0          # mL/min
BASELINE_COMPOSITION = 60.0       # % organic modifier
DETECTION_FALLOFF_NM = 50.0       # efficiency reaches zero this far from optimum
MAX_PEAK_HEIGHT_MAU = 300.0       # height for a 100 uL injection at optimum


def liquid_retention_time(
    base_retention_time: float,
    flow_rate: float,
    composition: float,
) -> float:
    """Scale a reference retention time to the user's flow rate and composition.

    ``rt = base * (baseline_flow / flow) * (baseline_composition / composition)``,
    rounded to 0.01 min.

    Raises:
        DegenerateInputError: If flow rate or composition is not positive.
    """
    if flow_rate <= 0:
        raise DegenerateInputError(f"Flow rate must be > 0, got {flow_rate}")
    if composition <= 0:
        raise DegenerateInputError(f"Mobile-phase composition must be > 0, got {composition}")
    rt = base_retention_time
    rt *= BASELINE_FLOW_RATE / flow_rate
    rt *= BASELINE_COMPOSITION / composition
    return round(rt, 2)


def detection_efficiency(wavelength_nm: float, optimal_wavelength_nm: float) -> float:
    """Linear falloff from 1 at the optimum to 0 at ``DETECTION_FALLOFF_NM`` away."""
    offset = abs(wavelength_nm - optimal_wavelength_nm)
    return max(0.0, 1.0 - offset / DETECTION_FALLOFF_NM)


def liquid_peak_height(injection_volume_ul: float, efficiency: float) -> float:
    return (injection_volume_ul / 100.0) * MAX_PEAK_HEIGHT_MAU * efficiency


# ── Gas chromatography ───────────────────────────────────────────────────────

OVEN_FINAL_TEMP_C = 250.0


def column_factor(boiling_point_c: float) -> float:
    """Extra column residence for higher-boiling analytes, in minutes."""
    return 0.5 + boiling_point_c / 500.0


def elution_time(
    boiling_point_c: float,
    initial_temp_c: float,
    ramp_rate_c_per_min: float,
) -> float:
    """Time for the oven ramp to reach the boiling point, plus the column factor.

    Raises:
        DegenerateInputError: If the ramp rate is not positive.
    """
    if ramp_rate_c_per_min <= 0:
        raise DegenerateInputError(f"Ramp rate must be > 0, got {ramp_rate_c_per_min}")
    time_to_boiling_point = (boiling_point_c - initial_temp_c) / ramp_rate_c_per_min
    return time_to_boiling_point + column_factor(boiling_point_c)


def oven_temperature(
    time_min: float,
    initial_temp_c: float,
    ramp_rate_c_per_min: float,
    final_temp_c: float = OVEN_FINAL_TEMP_C,
) -> float:
    """Oven temperature *time_min* into a linear ramp, capped at *final_temp_c*."""
    return min(initial_temp_c + time_min * ramp_rate_c_per_min, final_temp_c)


# ── Mass spectrometry ────────────────────────────────────────────────────────

COLLISION_ENERGY_FLOOR_EV = 10.0
COLLISION_ENERGY_RANGE_EV = 90.0
MOLECULAR_ION_DAMPING = 0.9
RELATIVE_ABUNDANCE_SCALE = 100.0


def collision_energy_factor(collision_energy_ev: float) -> float:
    """Fraction of the molecular ion that survives at the given collision energy."""
    fraction = (collision_energy_ev - COLLISION_ENERGY_FLOOR_EV) / COLLISION_ENERGY_RANGE_EV
    return 1.0 - fraction * MOLECULAR_ION_DAMPING


def normalize_intensities(
    peaks: Iterable[Peak],
    scale: float = RELATIVE_ABUNDANCE_SCALE,
) -> list[Peak]:
    """Rescale intensities so the most intense peak equals *scale*.

    Peaks are returned sorted by position. If every intensity is zero the
    peaks are returned unscaled.
    """
    ordered = sorted(peaks, key=lambda p: p.center)
    top = max((p.intensity for p in ordered), default=0.0)
    if top <= 0:
        return ordered
    return [
        Peak(center=p.center, intensity=p.intensity / top * scale, width=p.width, label=p.label)
        for p in ordered
    ]


def mass_resolution_bar_width(mass_resolution: float) -> int:
    """Display width of a stick for the given resolving power."""
    if mass_resolution < 2000:
        return 5
    if mass_resolution < 10000:
        return 2
    return 1


# ── UV-Vis ───────────────────────────────────────────────────────────────────

ABSORBANCE_PEAK_WIDTH_NM = 40.0
PEAK_ABSORBANCE = 0.8
ABSORPTIVITY_PATH_DIVISOR = 10.0


def absorbance_peak(lambda_max_nm: float, label: str | None = None) -> Peak:
    """Fixed-shape absorbance band centered at lambda max."""
    return Peak(
        center=lambda_max_nm,
        intensity=PEAK_ABSORBANCE,
        width=ABSORBANCE_PEAK_WIDTH_NM,
        label=label,
    )


def standard_absorbance(absorptivity: float, concentration_mg_l: float) -> float:
    """Beer-Lambert absorbance of a standard before measurement noise."""
    return absorptivity * concentration_mg_l / ABSORPTIVITY_PATH_DIVISOR


# ── Particle sizing ──────────────────────────────────────────────────────────

LOG_WIDTH_DIVISOR = 100.0


def lognormal_peak(peak: Peak) -> Peak:
    """Convert a size-distribution peak (std dev in nm) to a log-space peak."""
    return Peak(
        center=peak.center,
        intensity=peak.intensity,
        width=peak.width / LOG_WIDTH_DIVISOR,
        label=peak.label,
    )


# ── Polarimetry ──────────────────────────────────────────────────────────────


def analyzer_transmission(analyzer_angle_deg: float, rotation_deg: float) -> float:
    """Malus's law: percent of light passing an analyzer set at *analyzer_angle_deg*."""
    return 100.0 * math.cos(math.radians(analyzer_angle_deg - rotation_deg)) ** 2
