"""GC samples: volatile mixtures with boiling points and detector response."""

from labsim.library import ReferenceLibrary
from labsim.models import Analyte, Sample


def _compound(compound_id: str, name: str, boiling_point: float, height: float) -> Analyte:
    return Analyte(
        id=compound_id,
        name=name,
        properties={"boiling_point": boiling_point, "peak_height": height},
    )


SAMPLES = ReferenceLibrary(
    [
        Sample(
            id="alcohols",
            name="Alcohol Mixture",
            components=(
                _compound("methanol", "Methanol", 65.0, 250.0),
                _compound("ethanol", "Ethanol", 78.0, 300.0),
                _compound("propanol", "Propanol", 97.0, 200.0),
            ),
        ),
        Sample(
            id="peppermint",
            name="Peppermint Oil",
            components=(
                _compound("menthol", "Menthol", 212.0, 300.0),
                _compound("menthone", "Menthone", 207.0, 250.0),
            ),
        ),
    ],
    kind="GC sample",
)
