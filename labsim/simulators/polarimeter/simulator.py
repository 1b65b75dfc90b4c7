from __future__ import annotations

from labsim.derivation import rotation_result
from labsim.models import Domain, Peak, SampledCurve
from labsim.random_source import RandomSource
from labsim.response import analyzer_transmission
from labsim.simulators.base_simulator import BaseSimulator

from .library import COMPOUNDS
from .models import Enantiomer, PolarimeterParameters, PolarimeterResult

ANALYZER_SWEEP = Domain.from_step(-180.0, 180.0, 1.0)
FULL_TRANSMISSION = 100.0


class PolarimeterSimulator(BaseSimulator[PolarimeterResult]):
    """Sodium-D polarimeter.

    The curve is the light passing the analyzer as it sweeps through a full
    turn; transmission peaks where the analyzer matches the sample rotation.
    """

    kind = "polarimeter"
    parameters_model = PolarimeterParameters
    library = COMPOUNDS

    def _simulate(
        self,
        entry: Enantiomer,
        params: PolarimeterParameters,
        rng: RandomSource,
    ) -> tuple[tuple[Peak, ...], SampledCurve, PolarimeterResult]:
        xs = ANALYZER_SWEEP.points()
        curve = SampledCurve(
            xs=xs, ys=tuple(analyzer_transmission(angle, entry.rotation) for angle in xs),
        )
        peak = Peak(center=entry.rotation, intensity=FULL_TRANSMISSION, width=1.0, label=entry.name)
        result = PolarimeterResult(compound=entry, rotation=rotation_result(entry.rotation))
        return (peak,), curve, result
