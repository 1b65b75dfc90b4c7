from __future__ import annotations

from labsim.models import Analyte, Domain, Peak, SampledCurve
from labsim.random_source import RandomSource
from labsim.response import (
    collision_energy_factor,
    mass_resolution_bar_width,
    normalize_intensities,
)
from labsim.simulators.base_simulator import BaseSimulator
from labsim.synthesis import synthesize

from .library import MOLECULAR_ION_LABEL, SPECTRA
from .models import MassSpecParameters, MassSpecResult

MZ_MIN = 0.0
MZ_MAX = 250.0
MZ_STEP = 1.0


class MassSpecSimulator(BaseSimulator[MassSpecResult]):
    """Single-quadrupole EI mass spectrometer with a collision cell."""

    kind = "mass_spec"
    parameters_model = MassSpecParameters
    default_animation_duration_ms = 1500.0
    library = SPECTRA

    @staticmethod
    def fragment(analyte: Analyte, params: MassSpecParameters) -> list[Peak]:
        """Damp the molecular ion by collision energy and renormalise to 100."""
        factor = collision_energy_factor(params.collision_energy)
        peaks = [
            Peak(p.center, p.intensity * factor, p.width, p.label)
            if p.label == MOLECULAR_ION_LABEL else p
            for p in analyte.peaks
        ]
        return normalize_intensities(peaks)

    def _simulate(
        self,
        entry: Analyte,
        params: MassSpecParameters,
        rng: RandomSource,
    ) -> tuple[tuple[Peak, ...], SampledCurve, MassSpecResult]:
        peaks = self.fragment(entry, params)
        curve = synthesize(
            peaks, Domain.from_step(MZ_MIN, MZ_MAX, MZ_STEP), kernel="stick",
        )
        result = MassSpecResult(
            peaks=tuple(peaks),
            molecular_ion_mz=entry["molecular_ion_mz"],
            energy_factor=collision_energy_factor(params.collision_energy),
            bar_width=mass_resolution_bar_width(params.mass_resolution),
        )
        return tuple(peaks), curve, result
