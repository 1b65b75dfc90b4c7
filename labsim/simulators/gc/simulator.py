from __future__ import annotations

from labsim.derivation import within_run_window
from labsim.models import Domain, Peak, Sample, SampledCurve
from labsim.random_source import RandomSource
from labsim.response import elution_time, oven_temperature
from labsim.simulators.base_simulator import BaseSimulator
from labsim.synthesis import synthesize

from .library import SAMPLES
from .models import GcParameters, GcPeak, GcResult

CHROMATOGRAM_SAMPLES = 501
GC_PEAK_STD_DEV = 0.1  # min


class GcSimulator(BaseSimulator[GcResult]):
    """Temperature-programmed gas chromatograph with an FID."""

    kind = "gc"
    parameters_model = GcParameters
    default_animation_duration_ms = 5000.0
    library = SAMPLES

    def observed_peaks(self, sample: Sample, params: GcParameters) -> list[Peak]:
        return [
            Peak(
                center=elution_time(compound["boiling_point"], params.initial_temp, params.ramp_rate),
                intensity=compound["peak_height"],
                width=GC_PEAK_STD_DEV,
                label=compound.name,
            )
            for compound in sample.components
        ]

    def oven_temperature_at(self, time_min: float, params: GcParameters | None = None) -> float:
        """Live oven readout *time_min* minutes into the run."""
        params = params or self.default_parameters
        return oven_temperature(time_min, params.initial_temp, params.ramp_rate)

    def _simulate(
        self,
        entry: Sample,
        params: GcParameters,
        rng: RandomSource,
    ) -> tuple[tuple[Peak, ...], SampledCurve, GcResult]:
        peaks = self.observed_peaks(entry, params)
        curve = synthesize(
            peaks,
            Domain(start=0.0, stop=params.run_time, samples=CHROMATOGRAM_SAMPLES),
        )
        # Peak numbers follow the sample's component order, including peaks
        # that did not elute in time.
        rows = tuple(
            GcPeak(number=i + 1, name=p.label, retention_time=p.center, height=p.intensity)
            for i, p in enumerate(peaks)
            if within_run_window(p.center, params.run_time)
        )
        return tuple(peaks), curve, GcResult(peaks=rows, run_time=params.run_time)
