from __future__ import annotations

from typing import Optional, Sequence

from labsim.derivation import assign_functional_group, match_score
from labsim.models import Analyte, Domain, Peak, SampledCurve
from labsim.random_source import RandomSource
from labsim.simulators.base_simulator import BaseSimulator
from labsim.synthesis import synthesize

from .library import SPECTRA
from .models import FtirParameters, FtirResult

WAVENUMBER_MAX = 4000.0      # cm-1
WAVENUMBER_MIN = 400.0       # cm-1
RESOLUTION_CM1 = 4.0
BASELINE_TRANSMITTANCE = 100.0
BASELINE_NOISE = 1.5         # % T, always below the baseline


class FtirSimulator(BaseSimulator[FtirResult]):
    """Transmission FTIR spectrometer with a two-entry reference library."""

    kind = "ftir"
    parameters_model = FtirParameters
    default_animation_duration_ms = 2500.0
    library = SPECTRA

    @staticmethod
    def band_peaks(analyte: Analyte) -> list[Peak]:
        """Library bands converted to Gaussian standard deviations."""
        return [
            Peak(center=p.center, intensity=p.intensity, width=p.width / RESOLUTION_CM1, label=p.label)
            for p in analyte.peaks
        ]

    def spectrum(self, analyte: Analyte, rng: RandomSource) -> SampledCurve:
        """% transmittance from 4000 down to 400 cm-1."""
        return synthesize(
            self.band_peaks(analyte),
            Domain.from_step(WAVENUMBER_MAX, WAVENUMBER_MIN, RESOLUTION_CM1),
            baseline=BASELINE_TRANSMITTANCE,
            absorbing=True,
            noise=lambda n: -rng.uniform(0.0, BASELINE_NOISE, size=n),
            floor=0.0,
        )

    def overlay_standard(
        self,
        sample_id: str,
        standard_id: str,
        rng: Optional[RandomSource] = None,
    ) -> tuple[SampledCurve, FtirResult]:
        """Spectrum of a library standard plus its match score against the sample."""
        rng = rng or self.random_source
        sample = self.library.lookup(sample_id)
        standard = self.library.lookup(standard_id)
        curve = self.spectrum(standard, rng)
        match = match_score(
            sample.peaks, standard.peaks, rng, self_match=sample.id == standard.id,
        )
        self.logger.info(
            "Overlay %s on %s: %.1f%% similarity", standard_id, sample_id, match.score,
        )
        return curve, FtirResult(
            bands=sample.peaks,
            standard_id=standard.id,
            standard_curve=curve,
            match=match,
        )

    @staticmethod
    def identify_peak(bands: Sequence[Peak], wavenumber: float) -> Optional[Peak]:
        """Functional group of the band nearest a clicked wavenumber."""
        return assign_functional_group(bands, wavenumber)

    def _simulate(
        self,
        entry: Analyte,
        params: FtirParameters,
        rng: RandomSource,
    ) -> tuple[tuple[Peak, ...], SampledCurve, FtirResult]:
        curve = self.spectrum(entry, rng)
        if params.standard is None:
            result = FtirResult(bands=entry.peaks)
        else:
            _, result = self.overlay_standard(entry.id, params.standard, rng)
        return tuple(self.band_peaks(entry)), curve, result
