"""Electron-ionisation fragmentation patterns (NIST WebBook values)."""

from labsim.library import ReferenceLibrary
from labsim.models import Analyte, Peak

MOLECULAR_ION_LABEL = "M+"


def _spectrum(compound_id, name, molecular_ion, fragments):
    mz, intensity = molecular_ion
    return Analyte(
        id=compound_id,
        name=name,
        peaks=(
            *(Peak(center=f_mz, intensity=f_int, width=1.0) for f_mz, f_int in fragments),
            Peak(center=mz, intensity=intensity, width=1.0, label=MOLECULAR_ION_LABEL),
        ),
        properties={"molecular_ion_mz": mz},
    )


SPECTRA = ReferenceLibrary(
    [
        _spectrum("paracetamol", "Paracetamol", (151, 35), [(109, 100), (80, 20), (43, 45)]),
        _spectrum("caffeine", "Caffeine", (194, 100), [(109, 55), (82, 40), (55, 35)]),
        _spectrum("aspirin", "Aspirin", (180, 5), [(120, 100), (92, 50), (43, 85)]),
        _spectrum("ibuprofen", "Ibuprofen", (206, 15), [(161, 100), (91, 30)]),
        _spectrum("lidocaine", "Lidocaine", (234, 5), [(86, 100), (58, 20)]),
    ],
    kind="mass spectrum",
)
