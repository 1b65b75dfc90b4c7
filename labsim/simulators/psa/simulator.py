from __future__ import annotations

from labsim.derivation import size_statistics
from labsim.models import Analyte, Domain, Peak, SampledCurve
from labsim.random_source import RandomSource
from labsim.response import lognormal_peak
from labsim.simulators.base_simulator import BaseSimulator
from labsim.synthesis import synthesize

from .library import PRESETS
from .models import PsaParameters, PsaResult

SIZE_MIN_NM = 1.0
SIZE_MAX_NM = 1.0e4
DISTRIBUTION_SAMPLES = 250
INTENSITY_SCALE = 100.0


class PsaSimulator(BaseSimulator[PsaResult]):
    """Dynamic light scattering particle size analyser."""

    kind = "psa"
    parameters_model = PsaParameters
    library = PRESETS

    def _simulate(
        self,
        entry: Analyte,
        params: PsaParameters,
        rng: RandomSource,
    ) -> tuple[tuple[Peak, ...], SampledCurve, PsaResult]:
        statistics = size_statistics(entry.peaks, rng)
        curve = synthesize(
            [lognormal_peak(p) for p in entry.peaks],
            Domain(SIZE_MIN_NM, SIZE_MAX_NM, DISTRIBUTION_SAMPLES, scale="log"),
            kernel="lognormal",
            ceiling=INTENSITY_SCALE,
        )
        viscosity = params.effective_viscosity
        run_log = (
            f"Sample: {entry.name}",
            f"Dispersant: {params.dispersant.capitalize()} ({viscosity:.2f} cP)",
            f"Equilibration: {params.equilibration_time_s:g}s, Runs: {params.number_of_runs}",
            f"Quality: {statistics.quality}",
        )
        for line in run_log:
            self.logger.debug(line)
        result = PsaResult(
            statistics=statistics,
            dispersant=params.dispersant,
            viscosity_cp=viscosity,
            run_log=run_log,
        )
        return entry.peaks, curve, result
