from labsim.simulators.polarimeter.library import COMPOUNDS
from labsim.simulators.polarimeter.models import (
    Enantiomer,
    PolarimeterParameters,
    PolarimeterResult,
)
from labsim.simulators.polarimeter.simulator import PolarimeterSimulator

__all__ = [
    "COMPOUNDS",
    "Enantiomer",
    "PolarimeterParameters",
    "PolarimeterResult",
    "PolarimeterSimulator",
]
