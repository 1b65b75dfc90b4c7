from __future__ import annotations

from typing import Optional, Sequence

from labsim.derivation import back_calculate_concentration, linear_regression
from labsim.models import Analyte, Domain, Peak, SampledCurve
from labsim.random_source import RandomSource
from labsim.response import absorbance_peak, standard_absorbance
from labsim.simulators.base_simulator import BaseSimulator
from labsim.synthesis import synthesize

from .library import COMPOUNDS
from .models import (
    DEFAULT_STANDARDS_MG_L,
    Calibration,
    CalibrationPoint,
    UnknownMeasurement,
    UvVisParameters,
    UvVisResult,
)

SCAN_START_NM = 200.0
SCAN_STOP_NM = 400.0
SCAN_STEP_NM = 2.0
SCAN_NOISE = 0.02
STANDARD_NOISE = 0.015


class UvVisSimulator(BaseSimulator[UvVisResult]):
    """Double-beam UV-Vis spectrophotometer.

    A run performs the whole quantitation workflow: wavelength scan,
    calibration with standards, then (optionally) the unknown. Each step is
    also available on its own.
    """

    kind = "uv_vis"
    parameters_model = UvVisParameters
    library = COMPOUNDS

    def scan(self, compound_id: str, rng: Optional[RandomSource] = None) -> SampledCurve:
        """Absorbance spectrum from 200 to 400 nm."""
        rng = rng or self.random_source
        compound = self.library.lookup(compound_id)
        return self._scan(compound, rng)

    def calibrate(
        self,
        compound_id: str,
        concentrations: Sequence[float] = DEFAULT_STANDARDS_MG_L,
        wavelength: Optional[float] = None,
        rng: Optional[RandomSource] = None,
    ) -> Calibration:
        """Measure the standards and fit the calibration line.

        Raises:
            DegenerateInputError: Fewer than two standards, or all standards
                at the same concentration.
        """
        rng = rng or self.random_source
        compound = self.library.lookup(compound_id)
        standards = tuple(
            CalibrationPoint(
                concentration=c,
                absorbance=round(self._absorbance(compound, c, rng), 3),
            )
            for c in concentrations
        )
        fit = linear_regression(
            [s.concentration for s in standards],
            [s.absorbance for s in standards],
        )
        calibration = Calibration(
            wavelength=wavelength or compound["lambda_max"],
            standards=standards,
            fit=fit,
        )
        self.logger.info("Calibration for %s: %s", compound_id, calibration.equation)
        return calibration

    def measure_unknown(
        self,
        compound_id: str,
        concentration: float,
        calibration: Calibration,
        rng: Optional[RandomSource] = None,
    ) -> UnknownMeasurement:
        """Measure a sample of known true concentration against *calibration*."""
        rng = rng or self.random_source
        compound = self.library.lookup(compound_id)
        absorbance = self._absorbance(compound, concentration, rng)
        return UnknownMeasurement(
            true_concentration=concentration,
            absorbance=absorbance,
            calculated_concentration=back_calculate_concentration(absorbance, calibration.fit),
        )

    @staticmethod
    def _absorbance(compound: Analyte, concentration: float, rng: RandomSource) -> float:
        return (
            standard_absorbance(compound["absorptivity"], concentration)
            + rng.jitter(STANDARD_NOISE)
        )

    @staticmethod
    def _scan(compound: Analyte, rng: RandomSource) -> SampledCurve:
        return synthesize(
            [absorbance_peak(compound["lambda_max"], label=compound.name)],
            Domain.from_step(SCAN_START_NM, SCAN_STOP_NM, SCAN_STEP_NM),
            noise=lambda n: rng.jitter(SCAN_NOISE, size=n),
        )

    def _simulate(
        self,
        entry: Analyte,
        params: UvVisParameters,
        rng: RandomSource,
    ) -> tuple[tuple[Peak, ...], SampledCurve, UvVisResult]:
        curve = self._scan(entry, rng)
        calibration = self.calibrate(
            entry.id, params.standard_concentrations, params.analysis_wavelength, rng,
        )
        unknown = None
        if params.unknown_concentration is not None:
            unknown = self.measure_unknown(
                entry.id, params.unknown_concentration, calibration, rng,
            )
        result = UvVisResult(
            lambda_max=entry["lambda_max"], calibration=calibration, unknown=unknown,
        )
        return (absorbance_peak(entry["lambda_max"], label=entry.name),), curve, result
