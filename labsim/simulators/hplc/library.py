"""HPLC reference compounds and selectable samples (C18, methanol/water)."""

from labsim.library import ReferenceLibrary
from labsim.models import Analyte, Sample

PARACETAMOL = Analyte(
    id="paracetamol",
    name="Paracetamol",
    properties={"base_retention_time": 3.8, "optimal_wavelength": 245.0},
)
ASPIRIN = Analyte(
    id="aspirin",
    name="Aspirin",
    properties={"base_retention_time": 2.5, "optimal_wavelength": 230.0},
)
CAFFEINE = Analyte(
    id="caffeine",
    name="Caffeine",
    properties={"base_retention_time": 2.9, "optimal_wavelength": 273.0},
)

COMPOUNDS = ReferenceLibrary([PARACETAMOL, ASPIRIN, CAFFEINE], kind="HPLC compound")

SAMPLES = ReferenceLibrary(
    [
        Sample(id="paracetamol", name="Paracetamol", components=(PARACETAMOL,)),
        Sample(id="aspirin", name="Aspirin", components=(ASPIRIN,)),
        Sample(id="caffeine", name="Caffeine", components=(CAFFEINE,)),
        Sample(id="mixture", name="Aspirin + Caffeine Mixture", components=(ASPIRIN, CAFFEINE)),
    ],
    kind="HPLC sample",
)
