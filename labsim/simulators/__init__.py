"""Instrument simulators, one subpackage per technique."""

from labsim.simulators.base_simulator import BaseSimulator, RunContext
from labsim.simulators.ftir import FtirSimulator
from labsim.simulators.gc import GcSimulator
from labsim.simulators.hplc import HplcSimulator
from labsim.simulators.mass_spec import MassSpecSimulator
from labsim.simulators.polarimeter import PolarimeterSimulator
from labsim.simulators.psa import PsaSimulator
from labsim.simulators.uv_vis import UvVisSimulator

__all__ = [
    "BaseSimulator",
    "RunContext",
    "FtirSimulator",
    "GcSimulator",
    "HplcSimulator",
    "MassSpecSimulator",
    "PolarimeterSimulator",
    "PsaSimulator",
    "UvVisSimulator",
]
