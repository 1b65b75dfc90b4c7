from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from pydantic import Field

from labsim.derivation import SizeStatistics
from labsim.parameters import SimulatorParameters

from .library import DISPERSANT_VISCOSITY_CP


class PsaParameters(SimulatorParameters):
    """Dynamic light scattering measurement settings.

    ``viscosity`` overrides the dispersant's tabulated value when set.
    """

    dispersant: Literal["water", "ethanol"] = "water"
    viscosity: Optional[float] = Field(default=None, gt=0)          # cP
    equilibration_time_s: float = Field(default=120.0, ge=0)
    number_of_runs: int = Field(default=3, ge=1)

    @property
    def effective_viscosity(self) -> float:
        if self.viscosity is not None:
            return self.viscosity
        return DISPERSANT_VISCOSITY_CP[self.dispersant]


@dataclass(frozen=True)
class PsaResult:
    statistics: SizeStatistics
    dispersant: str
    viscosity_cp: float
    run_log: tuple[str, ...] = ()
