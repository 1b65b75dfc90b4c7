from __future__ import annotations

from dataclasses import dataclass

from labsim.derivation import RotationResult
from labsim.parameters import SimulatorParameters

PUBCHEM_COMPOUND_URL = "https://pubchem.ncbi.nlm.nih.gov/compound/{cid}"


@dataclass(frozen=True)
class Enantiomer:
    """A chiral compound and its specific rotation [alpha]D in degrees."""

    id: str
    name: str
    cid: int
    rotation: float
    formula: str
    molar_mass: float  # g/mol

    @property
    def pubchem_url(self) -> str:
        return PUBCHEM_COMPOUND_URL.format(cid=self.cid)


class PolarimeterParameters(SimulatorParameters):
    """The polarimeter has no user-adjustable settings."""


@dataclass(frozen=True)
class PolarimeterResult:
    compound: Enantiomer
    rotation: RotationResult
