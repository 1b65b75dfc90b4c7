from labsim.simulators.psa.library import DISPERSANT_VISCOSITY_CP, PRESETS
from labsim.simulators.psa.models import PsaParameters, PsaResult
from labsim.simulators.psa.simulator import PsaSimulator

__all__ = [
    "DISPERSANT_VISCOSITY_CP",
    "PRESETS",
    "PsaParameters",
    "PsaResult",
    "PsaSimulator",
]
