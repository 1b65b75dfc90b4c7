from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field

from labsim.derivation import PeakTableRow
from labsim.parameters import SimulatorParameters


class HplcParameters(SimulatorParameters):
    """Isocratic reverse-phase method settings."""

    flow_rate: float = Field(default=1.0, gt=0)                  # mL/min
    composition: float = Field(default=60.0, gt=0, le=100)       # % methanol
    injection_volume: float = Field(default=20.0, gt=0)          # uL
    detection_wavelength: float = Field(default=254.0, gt=0)     # nm
    run_time: float = Field(default=10.0, gt=0)                  # min


@dataclass(frozen=True)
class HplcResult:
    """Integrated peak table for one injection."""

    peaks: tuple[PeakTableRow, ...]
    run_time: float

    @property
    def total_area(self) -> float:
        return sum(row.area for row in self.peaks)
