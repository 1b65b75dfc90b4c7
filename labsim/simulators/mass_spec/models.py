from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field

from labsim.models import Peak
from labsim.parameters import SimulatorParameters


class MassSpecParameters(SimulatorParameters):
    collision_energy: float = Field(default=20.0, ge=10, le=100)   # eV
    mass_resolution: float = Field(default=5000.0, gt=0)           # m/dm


@dataclass(frozen=True)
class MassSpecResult:
    """Centroided spectrum on a 0-100 relative abundance scale."""

    peaks: tuple[Peak, ...]
    molecular_ion_mz: float
    energy_factor: float
    bar_width: int

    @property
    def base_peak(self) -> Peak:
        return max(self.peaks, key=lambda p: p.intensity)
