from labsim.simulators.uv_vis.library import COMPOUNDS
from labsim.simulators.uv_vis.models import (
    Calibration,
    CalibrationPoint,
    UnknownMeasurement,
    UvVisParameters,
    UvVisResult,
)
from labsim.simulators.uv_vis.simulator import UvVisSimulator

__all__ = [
    "COMPOUNDS",
    "Calibration",
    "CalibrationPoint",
    "UnknownMeasurement",
    "UvVisParameters",
    "UvVisResult",
    "UvVisSimulator",
]
