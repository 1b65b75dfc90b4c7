"""UV-Vis compounds: wavelength of maximum absorbance and absorptivity.

Absorptivity is in L mg-1 cm-1 scaled so that ``absorptivity * c / 10`` is
the absorbance of a *c* mg/L solution in a 1 cm cell.
"""

from labsim.library import ReferenceLibrary
from labsim.models import Analyte


def _compound(compound_id: str, name: str, lambda_max: float, absorptivity: float) -> Analyte:
    return Analyte(
        id=compound_id,
        name=name,
        properties={"lambda_max": lambda_max, "absorptivity": absorptivity},
    )


COMPOUNDS = ReferenceLibrary(
    [
        _compound("paracetamol", "Paracetamol", 245, 0.715),
        _compound("ibuprofen", "Ibuprofen", 222, 0.450),
        _compound("caffeine", "Caffeine", 273, 0.504),
        _compound("aspirin", "Aspirin", 230, 0.500),
        _compound("diclofenac", "Diclofenac Sodium", 276, 0.380),
        _compound("loratadine", "Loratadine", 247, 0.420),
        _compound("ranitidine", "Ranitidine HCl", 314, 0.405),
        _compound("salbutamol", "Salbutamol", 276, 0.055),
        _compound("theophylline", "Theophylline", 272, 0.530),
        _compound("metronidazole", "Metronidazole", 320, 0.375),
    ],
    kind="UV-Vis compound",
)
