"""FTIR reference spectra with functional-group band assignments.

Band width is the full spread in cm-1 as tabulated; the simulator divides it
by the instrument resolution to get the Gaussian standard deviation.
"""

from labsim.library import ReferenceLibrary
from labsim.models import Analyte, Peak

SPECTRA = ReferenceLibrary(
    [
        Analyte(
            id="paracetamol",
            name="Paracetamol",
            peaks=(
                Peak(center=3320, intensity=50, width=80, label="O-H Stretch (Phenol)"),
                Peak(center=3160, intensity=40, width=50, label="N-H Stretch (Amide)"),
                Peak(center=1650, intensity=10, width=8, label="C=O Stretch (Amide I)"),
                Peak(center=1560, intensity=20, width=15, label="N-H Bend (Amide II)"),
                Peak(center=1505, intensity=25, width=10, label="C=C Stretch (Aromatic)"),
                Peak(center=1260, intensity=35, width=20, label="C-O Stretch (Phenol)"),
                Peak(center=837, intensity=45, width=10, label="Para Disubstituted Benzene"),
            ),
        ),
        Analyte(
            id="ipa",
            name="Isopropyl Alcohol",
            peaks=(
                Peak(center=3350, intensity=15, width=150, label="O-H Stretch (Alcohol)"),
                Peak(center=2970, intensity=10, width=20, label="C-H Stretch (Alkane)"),
                Peak(center=1380, intensity=50, width=10, label="C-H Bend (Alkane)"),
                Peak(center=1130, intensity=40, width=30, label="C-O Stretch (Alcohol)"),
                Peak(center=950, intensity=60, width=15, label="C-C Stretch"),
            ),
        ),
    ],
    kind="FTIR spectrum",
)
