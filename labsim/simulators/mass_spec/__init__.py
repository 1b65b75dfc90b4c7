from labsim.simulators.mass_spec.library import SPECTRA
from labsim.simulators.mass_spec.models import MassSpecParameters, MassSpecResult
from labsim.simulators.mass_spec.simulator import MassSpecSimulator

__all__ = [
    "SPECTRA",
    "MassSpecParameters",
    "MassSpecResult",
    "MassSpecSimulator",
]
