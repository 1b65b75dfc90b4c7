from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import Field

from labsim.derivation import RegressionFit
from labsim.parameters import SimulatorParameters

DEFAULT_STANDARDS_MG_L = (2.0, 4.0, 6.0, 8.0, 10.0)


class UvVisParameters(SimulatorParameters):
    """Quantitation workflow settings.

    ``analysis_wavelength`` defaults to the compound's lambda max. The
    unknown is only measured when ``unknown_concentration`` is set.
    """

    analysis_wavelength: Optional[float] = Field(default=None, gt=0)                      # nm
    unknown_concentration: Optional[float] = Field(default=None, ge=0)                    # mg/L
    standard_concentrations: tuple[float, ...] = Field(default=DEFAULT_STANDARDS_MG_L, min_length=2)


@dataclass(frozen=True)
class CalibrationPoint:
    concentration: float
    absorbance: float


@dataclass(frozen=True)
class Calibration:
    """Measured standards and the least-squares line through them."""

    wavelength: float
    standards: tuple[CalibrationPoint, ...]
    fit: RegressionFit

    @property
    def equation(self) -> str:
        return (
            f"y = {self.fit.slope:.3f}x + {self.fit.intercept:.3f} "
            f"(R² = {self.fit.r_squared:.4f})"
        )


@dataclass(frozen=True)
class UnknownMeasurement:
    true_concentration: float
    absorbance: float
    calculated_concentration: float


@dataclass(frozen=True)
class UvVisResult:
    lambda_max: float
    calibration: Calibration
    unknown: Optional[UnknownMeasurement] = None
