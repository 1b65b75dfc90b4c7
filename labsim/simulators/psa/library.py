"""Particle-size presets and dispersant viscosities.

Preset peaks carry the mean size in nm as ``center`` and the standard
deviation in nm as ``width``.
"""

from labsim.library import ReferenceLibrary
from labsim.models import Analyte, Peak

DISPERSANT_VISCOSITY_CP = {
    "water": 0.89,
    "ethanol": 1.07,
}

PRESETS = ReferenceLibrary(
    [
        Analyte(
            id="liposomes",
            name="Liposomal Drug Delivery",
            peaks=(Peak(center=120, intensity=100, width=18),),
        ),
        Analyte(
            id="microemulsion",
            name="Microemulsion",
            peaks=(Peak(center=50, intensity=100, width=15),),
        ),
        Analyte(
            id="raw_powder",
            name="Unprocessed Drug Powder",
            peaks=(Peak(center=800, intensity=100, width=55),),
        ),
        Analyte(
            id="aggregated_protein",
            name="Aggregated Protein Solution",
            peaks=(
                Peak(center=15, intensity=80, width=10),
                Peak(center=250, intensity=20, width=40),
            ),
        ),
    ],
    kind="PSA sample preset",
)
