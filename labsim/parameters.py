"""Instrument parameter models that never reject user input.

Every simulator declares its settings as a :class:`SimulatorParameters`
subclass. A value that fails its field's type or range check, or is not a
finite number, is replaced by that field's default, so a run can always
start.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

logger = logging.getLogger(__name__)

ParamsT = TypeVar("ParamsT", bound="SimulatorParameters")


class SimulatorParameters(BaseModel):
    """Base model for per-simulator instrument settings."""

    model_config = ConfigDict(extra="ignore", frozen=True, allow_inf_nan=False)

    @field_validator("*", mode="wrap")
    @classmethod
    def _fall_back_to_default(
        cls,
        value: Any,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> Any:
        try:
            return handler(value)
        except ValidationError as exc:
            field_info = cls.model_fields[info.field_name]
            default = field_info.get_default(call_default_factory=True)
            logger.debug(
                "%s.%s: rejected %r (%s); using default %r",
                cls.__name__,
                info.field_name,
                value,
                exc.errors()[0].get("type", "invalid") if exc.errors() else "invalid",
                default,
            )
            return default

    @classmethod
    def coerce(
        cls: Type[ParamsT],
        params: Optional[Mapping[str, Any] | BaseModel] = None,
    ) -> ParamsT:
        """Build parameters from a mapping, a model instance or ``None``."""
        if params is None:
            return cls()
        if isinstance(params, cls):
            return params
        if isinstance(params, BaseModel):
            params = params.model_dump()
        if not isinstance(params, Mapping):
            logger.debug(
                "%s: ignoring non-mapping parameters %r", cls.__name__, params,
            )
            return cls()
        return cls.model_validate(dict(params))

    def merged(self: ParamsT, overrides: Optional[Mapping[str, Any]]) -> ParamsT:
        """Return a copy with *overrides* applied (still coerced)."""
        if not overrides:
            return self
        data = self.model_dump()
        data.update(overrides)
        return type(self).coerce(data)
