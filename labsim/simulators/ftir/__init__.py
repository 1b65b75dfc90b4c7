from labsim.simulators.ftir.library import SPECTRA
from labsim.simulators.ftir.models import FtirParameters, FtirResult
from labsim.simulators.ftir.simulator import FtirSimulator

__all__ = [
    "SPECTRA",
    "FtirParameters",
    "FtirResult",
    "FtirSimulator",
]
