"""Simulator exception types."""

from __future__ import annotations


class SimulatorError(Exception):
    """Base exception for all simulator errors."""


class NotFoundError(SimulatorError, KeyError):
    """Raised when an analyte, sample or standard id is not in a library."""

    def __init__(self, kind: str, key: str, available: list[str]) -> None:
        self.kind = kind
        self.key = key
        self.available = list(available)
        super().__init__(
            f"Unknown {kind} '{key}'. "
            f"Available: {', '.join(self.available) or '(none)'}"
        )

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class DegenerateInputError(SimulatorError):
    """A ratio or fit cannot be computed from the given input (e.g. zero denominator)."""


class BenchLoaderError(SimulatorError):
    """Human-friendly bench loader error intended for CLI output."""
