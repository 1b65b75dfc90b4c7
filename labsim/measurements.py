"""Run normalization into plain, serializable records."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

from labsim.simulators.base_simulator import RunContext
from labsim.simulators.ftir.models import FtirResult
from labsim.simulators.gc.models import GcResult
from labsim.simulators.hplc.models import HplcResult
from labsim.simulators.mass_spec.models import MassSpecResult
from labsim.simulators.polarimeter.models import PolarimeterResult
from labsim.simulators.psa.models import PsaResult
from labsim.simulators.uv_vis.models import UvVisResult


class MeasurementType(str, Enum):
    """Normalized measurement types understood by UI collaborators."""

    HPLC_CHROMATOGRAM = "hplc_chromatogram"
    GC_CHROMATOGRAM = "gc_chromatogram"
    FTIR_SPECTRUM = "ftir_spectrum"
    MASS_SPECTRUM = "mass_spectrum"
    UVVIS_SPECTRUM = "uvvis_spectrum"
    OPTICAL_ROTATION = "optical_rotation"
    SIZE_DISTRIBUTION = "size_distribution"


# result type -> (measurement type, x axis label, y axis label)
_RESULT_TYPES: list[tuple[type, MeasurementType, str, str]] = [
    (HplcResult, MeasurementType.HPLC_CHROMATOGRAM, "time_min", "absorbance_mau"),
    (GcResult, MeasurementType.GC_CHROMATOGRAM, "time_min", "fid_response"),
    (FtirResult, MeasurementType.FTIR_SPECTRUM, "wavenumber_cm1", "transmittance_pct"),
    (MassSpecResult, MeasurementType.MASS_SPECTRUM, "mz", "relative_abundance_pct"),
    (UvVisResult, MeasurementType.UVVIS_SPECTRUM, "wavelength_nm", "absorbance_au"),
    (PolarimeterResult, MeasurementType.OPTICAL_ROTATION, "analyzer_angle_deg", "transmission_pct"),
    (PsaResult, MeasurementType.SIZE_DISTRIBUTION, "size_nm", "intensity_pct"),
]


@dataclass(frozen=True)
class RunRecord:
    """Instrument-agnostic view of one analysis run."""

    measurement_type: MeasurementType
    payload: dict[str, Any]
    result: dict[str, Any]
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "measurement_type": self.measurement_type.value,
            "payload": self.payload,
            "result": self.result,
            "metadata": self.metadata,
        }


def normalize_run(run: RunContext) -> RunRecord:
    """Flatten a RunContext into plain lists and dicts."""
    for result_type, measurement_type, x_label, y_label in _RESULT_TYPES:
        if isinstance(run.result, result_type):
            return RunRecord(
                measurement_type=measurement_type,
                payload={"x": list(run.curve.xs), "y": list(run.curve.ys)},
                result=asdict(run.result),
                metadata={
                    "simulator": run.simulator,
                    "analyte_id": run.analyte_id,
                    "parameters": run.parameters.model_dump(),
                    "seed": run.seed,
                    "x_label": x_label,
                    "y_label": y_label,
                },
            )

    raise TypeError(
        "Unsupported run result type: "
        f"{type(run.result).__name__} from {run.simulator}/{run.analyte_id}"
    )
