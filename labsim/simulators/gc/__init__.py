from labsim.simulators.gc.library import SAMPLES
from labsim.simulators.gc.models import GcParameters, GcPeak, GcResult
from labsim.simulators.gc.simulator import GcSimulator

__all__ = [
    "SAMPLES",
    "GcParameters",
    "GcPeak",
    "GcResult",
    "GcSimulator",
]
