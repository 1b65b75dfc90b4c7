from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field

from labsim.parameters import SimulatorParameters
from labsim.response import OVEN_FINAL_TEMP_C


class GcParameters(SimulatorParameters):
    """Oven temperature program."""

    initial_temp: float = Field(default=50.0, gt=0)   # deg C
    ramp_rate: float = Field(default=10.0, gt=0)      # deg C/min
    run_time: float = Field(default=12.0, gt=0)       # min


@dataclass(frozen=True)
class GcPeak:
    number: int
    name: str
    retention_time: float
    height: float


@dataclass(frozen=True)
class GcResult:
    """Peaks that eluted before the end of the run."""

    peaks: tuple[GcPeak, ...]
    run_time: float
    final_temp: float = OVEN_FINAL_TEMP_C
