from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import field_validator

from labsim.derivation import MatchResult
from labsim.models import Peak, SampledCurve
from labsim.parameters import SimulatorParameters

NO_STANDARD = "none"


class FtirParameters(SimulatorParameters):
    """Optional library standard to overlay and compare against."""

    standard: Optional[str] = None

    @field_validator("standard", mode="before")
    @classmethod
    def _none_means_no_standard(cls, value: Any) -> Any:
        # selection controls offer "none" as their first option
        if isinstance(value, str) and value.strip().lower() in (NO_STANDARD, ""):
            return None
        return value


@dataclass(frozen=True)
class FtirResult:
    """Band assignments of the sample and, if requested, a library comparison."""

    bands: tuple[Peak, ...]
    standard_id: Optional[str] = None
    standard_curve: Optional[SampledCurve] = None
    match: Optional[MatchResult] = None
