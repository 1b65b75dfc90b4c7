"""Time-based progressive reveal of a synthesized curve.

The mapping from elapsed time to revealed points is pure
(:meth:`Playback.advance`). The frame loop belongs to the caller: it calls
:meth:`Playback.tick` with its own clock once per frame, or iterates
:meth:`Playback.frames`.
"""

from __future__ import annotations

import logging
import math
import time
from typing import Callable, Iterator, Optional

from .models import SampledCurve

logger = logging.getLogger(__name__)

DEFAULT_FRAME_INTERVAL_MS = 1000.0 / 60.0

TickCallback = Callable[[SampledCurve], None]
DoneCallback = Callable[[], None]


class Playback:
    """One in-flight curve animation."""

    def __init__(
        self,
        curve: SampledCurve,
        duration_ms: float,
        on_tick: Optional[TickCallback] = None,
        on_done: Optional[DoneCallback] = None,
    ):
        if duration_ms <= 0:
            raise ValueError(f"Playback duration must be > 0 ms, got {duration_ms}")
        self.curve = curve
        self.duration_ms = float(duration_ms)
        self._on_tick = on_tick
        self._on_done = on_done
        self._start_ms: Optional[float] = None
        self._revealed = 0
        self._done = False
        self._cancelled = False

    # ── Pure mapping ──────────────────────────────────────────────────────

    def advance(self, elapsed_ms: float) -> int:
        """Number of curve points revealed after *elapsed_ms*."""
        progress = min(max(elapsed_ms, 0.0) / self.duration_ms, 1.0)
        return math.floor(progress * len(self.curve))

    # ── State ─────────────────────────────────────────────────────────────

    @property
    def revealed(self) -> int:
        return self._revealed

    @property
    def is_done(self) -> bool:
        return self._done

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    @property
    def is_active(self) -> bool:
        return not (self._done or self._cancelled)

    # ── Driving ───────────────────────────────────────────────────────────

    def tick(self, now_ms: float) -> int:
        """Advance to *now_ms* on the caller's clock and notify listeners.

        The first tick marks the start of the animation. Returns the number
        of points revealed so far.
        """
        if not self.is_active:
            return self._revealed
        if self._start_ms is None:
            self._start_ms = now_ms

        elapsed = now_ms - self._start_ms
        self._revealed = max(self._revealed, self.advance(elapsed))
        if self._on_tick is not None:
            self._on_tick(self.curve.prefix(self._revealed))

        if elapsed >= self.duration_ms:
            self._done = True
            logger.debug("Playback finished (%d points)", self._revealed)
            if self._on_done is not None:
                self._on_done()
        return self._revealed

    def cancel(self) -> None:
        """Stop the animation. Safe to call more than once."""
        if self.is_active:
            logger.debug("Playback cancelled at %d/%d points", self._revealed, len(self.curve))
        self._cancelled = True

    def frames(self, clock: Callable[[], float]) -> Iterator[int]:
        """Yield the revealed length once per frame until done or cancelled.

        *clock* returns the current time in milliseconds. Control returns to
        the caller between frames.
        """
        while self.is_active:
            yield self.tick(clock())

    def play(
        self,
        clock: Callable[[], float] = lambda: time.monotonic() * 1000.0,
        sleep: Callable[[float], None] = time.sleep,
        frame_interval_ms: float = DEFAULT_FRAME_INTERVAL_MS,
    ) -> None:
        """Block until the animation finishes, ticking every *frame_interval_ms*."""
        for _ in self.frames(clock):
            if self.is_active:
                sleep(frame_interval_ms / 1000.0)
