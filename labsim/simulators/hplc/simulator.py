from __future__ import annotations

from labsim.derivation import build_peak_table, peak_width, within_run_window
from labsim.models import Domain, Peak, Sample, SampledCurve
from labsim.random_source import RandomSource
from labsim.response import detection_efficiency, liquid_peak_height, liquid_retention_time
from labsim.simulators.base_simulator import BaseSimulator
from labsim.synthesis import synthesize

from .library import SAMPLES
from .models import HplcParameters, HplcResult

CHROMATOGRAM_SAMPLES = 501
MIN_VISIBLE_HEIGHT = 1.0  # mAU; smaller peaks are lost in the baseline
MIN_PEAK_WIDTH = 1e-3     # min; floor for peaks eluting at t0


class HplcSimulator(BaseSimulator[HplcResult]):
    """Liquid chromatograph with a variable-wavelength UV detector."""

    kind = "hplc"
    parameters_model = HplcParameters
    default_animation_duration_ms = 4000.0
    library = SAMPLES

    def observed_peaks(self, sample: Sample, params: HplcParameters) -> list[Peak]:
        """Retention time and detector response of every component."""
        peaks = []
        for compound in sample.components:
            rt = liquid_retention_time(
                compound["base_retention_time"], params.flow_rate, params.composition,
            )
            efficiency = detection_efficiency(
                params.detection_wavelength, compound["optimal_wavelength"],
            )
            height = liquid_peak_height(params.injection_volume, efficiency)
            peaks.append(
                Peak(
                    center=rt,
                    intensity=height,
                    width=max(peak_width(rt), MIN_PEAK_WIDTH),
                    label=compound.name,
                )
            )
        return peaks

    def _simulate(
        self,
        entry: Sample,
        params: HplcParameters,
        rng: RandomSource,
    ) -> tuple[tuple[Peak, ...], SampledCurve, HplcResult]:
        peaks = self.observed_peaks(entry, params)
        visible = [p for p in peaks if p.intensity > MIN_VISIBLE_HEIGHT]
        curve = synthesize(
            visible,
            Domain(start=0.0, stop=params.run_time, samples=CHROMATOGRAM_SAMPLES),
        )
        reported = [p for p in visible if within_run_window(p.center, params.run_time)]
        result = HplcResult(peaks=build_peak_table(reported), run_time=params.run_time)
        return tuple(peaks), curve, result
