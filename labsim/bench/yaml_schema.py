"""Strict Pydantic schemas for bench YAML."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .registry import SIMULATOR_REGISTRY


class SimulatorYamlEntry(BaseModel):
    """Schema for one simulator in bench YAML.

    ``parameters`` are the simulator's default run settings; they are coerced
    by the simulator's own parameter model, not validated here.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    type: str
    animation_duration_ms: Optional[float] = Field(default=None, gt=0)
    seed: Optional[int] = None
    parameters: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("type")
    @classmethod
    def _registered_type(cls, value: str) -> str:
        if value not in SIMULATOR_REGISTRY:
            raise ValueError(
                f"unknown simulator type '{value}' "
                f"(expected one of: {', '.join(sorted(SIMULATOR_REGISTRY))})"
            )
        return value


class BenchYamlSchema(BaseModel):
    """Root bench YAML schema: only 'simulators' key allowed."""

    model_config = ConfigDict(extra="forbid")

    simulators: Dict[str, SimulatorYamlEntry]
