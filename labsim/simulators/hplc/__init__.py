from labsim.simulators.hplc.library import COMPOUNDS, SAMPLES
from labsim.simulators.hplc.models import HplcParameters, HplcResult
from labsim.simulators.hplc.simulator import HplcSimulator

__all__ = [
    "COMPOUNDS",
    "SAMPLES",
    "HplcParameters",
    "HplcResult",
    "HplcSimulator",
]
