"""Synthetic signals and derived results for analytical-instrument simulators."""

from .errors import BenchLoaderError, DegenerateInputError, NotFoundError, SimulatorError
from .models import Analyte, AnalyteSummary, Domain, Peak, Sample, SampledCurve
from .playback import Playback
from .random_source import QuietRandomSource, RandomSource

__all__ = [
    "Analyte",
    "AnalyteSummary",
    "BenchLoaderError",
    "DegenerateInputError",
    "Domain",
    "NotFoundError",
    "Peak",
    "Playback",
    "QuietRandomSource",
    "RandomSource",
    "Sample",
    "SampledCurve",
    "SimulatorError",
]
