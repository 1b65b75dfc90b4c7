from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Mapping, Optional, Type, TypeVar

from labsim.errors import SimulatorError
from labsim.library import ReferenceLibrary
from labsim.models import AnalyteSummary, Peak, SampledCurve
from labsim.parameters import SimulatorParameters
from labsim.playback import DoneCallback, Playback, TickCallback
from labsim.random_source import RandomSource

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")


def _positive_or(value: Optional[float], default: float) -> float:
    """*value* if it is a positive finite duration, else *default*."""
    if value is None or not math.isfinite(value) or value <= 0:
        return default
    return float(value)


@dataclass(frozen=True)
class RunContext(Generic[ResultT]):
    """Everything one analysis run produced.

    Returned by :meth:`BaseSimulator.run_analysis`; the caller keeps it for
    as long as the run is displayed.
    """

    simulator: str
    analyte_id: str
    parameters: SimulatorParameters
    peaks: tuple[Peak, ...]
    curve: SampledCurve
    result: ResultT
    seed: Optional[int] = None


class BaseSimulator(ABC, Generic[ResultT]):
    """
    Abstract base class for all instrument simulators.
    Subclasses supply a reference library, a parameter model and the
    response/synthesis/derivation pipeline in ``_simulate``.
    """

    kind: ClassVar[str] = "simulator"
    parameters_model: ClassVar[Type[SimulatorParameters]] = SimulatorParameters
    default_animation_duration_ms: ClassVar[float] = 4000.0

    def __init__(
        self,
        name: Optional[str] = None,
        random_source: Optional[RandomSource] = None,
        animation_duration_ms: Optional[float] = None,
        parameters: Optional[Mapping[str, Any]] = None,
    ):
        self.name = name or self.__class__.__name__
        self.random_source = random_source or RandomSource()
        self.animation_duration_ms = _positive_or(
            animation_duration_ms, self.default_animation_duration_ms,
        )
        self.default_parameters = self.parameters_model.coerce(parameters)
        self.logger = logging.getLogger(f"{__name__}.{self.name}")
        self._playback: Optional[Playback] = None

    @property
    @abstractmethod
    def library(self) -> ReferenceLibrary:
        """The read-only table of selectable analytes or samples."""

    @abstractmethod
    def _simulate(
        self,
        entry: Any,
        params: SimulatorParameters,
        rng: RandomSource,
    ) -> tuple[tuple[Peak, ...], SampledCurve, ResultT]:
        """Return (adjusted peaks, curve, result) for one run."""

    # ── Public interface ──────────────────────────────────────────────────

    def list_analytes(self) -> list[AnalyteSummary]:
        return [
            AnalyteSummary(id=entry.id, display_name=entry.name)
            for entry in self.library.list()
        ]

    def run_analysis(
        self,
        analyte_id: str,
        params: Optional[Mapping[str, Any] | SimulatorParameters] = None,
        rng_seed: Optional[int] = None,
    ) -> RunContext[ResultT]:
        """Compute one run: adjusted peaks, synthesized curve and result.

        Unknown ids raise NotFoundError before anything is computed. Any
        in-flight animation is cancelled only once the new run succeeded.
        """
        entry = self.library.lookup(analyte_id)
        if isinstance(params, Mapping):
            resolved = self.default_parameters.merged(params)
        else:
            resolved = self.parameters_model.coerce(params) if params is not None else self.default_parameters
        rng = RandomSource(rng_seed) if rng_seed is not None else self.random_source

        self.logger.info("Running %s analysis of '%s'", self.kind, analyte_id)
        try:
            peaks, curve, result = self._simulate(entry, resolved, rng)
        except Exception as exc:
            self.handle_error(exc, context=f"run_analysis({analyte_id!r})")

        self.cancel_animation()
        self.logger.info(
            "Analysis of '%s' complete: %d peaks, %d points",
            analyte_id, len(peaks), len(curve),
        )
        return RunContext(
            simulator=self.kind,
            analyte_id=analyte_id,
            parameters=resolved,
            peaks=tuple(peaks),
            curve=curve,
            result=result,
            seed=rng_seed,
        )

    def drive_animation(
        self,
        curve: SampledCurve,
        on_tick: Optional[TickCallback] = None,
        on_done: Optional[DoneCallback] = None,
        duration_ms: Optional[float] = None,
    ) -> Playback:
        """Start revealing *curve*, replacing any animation already running.

        The returned Playback is ticked by the caller's frame clock.
        """
        self.cancel_animation()
        self._playback = Playback(
            curve,
            _positive_or(duration_ms, self.animation_duration_ms),
            on_tick=on_tick,
            on_done=on_done,
        )
        return self._playback

    def cancel_animation(self) -> None:
        """Cancel the current animation, if any. Idempotent."""
        if self._playback is not None:
            self._playback.cancel()
            self._playback = None

    @property
    def playback(self) -> Optional[Playback]:
        return self._playback

    def handle_error(self, error: Exception, context: str = "") -> None:
        """
        Generic error handler. Logs the error and re-raises as SimulatorError
        if it's not already one.

        Args:
            error: The caught exception.
            context: Contextual message describing where the error occurred.
        """
        msg = f"Error in {self.name}{f' ({context})' if context else ''}: {str(error)}"
        self.logger.error(msg)
        if isinstance(error, SimulatorError):
            raise error
        raise SimulatorError(msg) from error
