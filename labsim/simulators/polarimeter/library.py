"""Enantiomer pairs with their specific rotations and PubChem records."""

from labsim.library import ReferenceLibrary

from .models import Enantiomer

COMPOUNDS = ReferenceLibrary(
    [
        Enantiomer("s_ibuprofen", "(S)-(+)-Ibuprofen", 98917, 54.5, "C13H18O2", 206.28),
        Enantiomer("r_ibuprofen", "(R)-(-)-Ibuprofen", 177937, -54.5, "C13H18O2", 206.28),
        Enantiomer("d_glucose", "D-(+)-Glucose", 5793, 52.7, "C6H12O6", 180.16),
        Enantiomer("l_glucose", "L-(-)-Glucose", 439533, -52.7, "C6H12O6", 180.16),
        Enantiomer("s_limonene", "(S)-(-)-Limonene", 440917, -125.6, "C10H16", 136.23),
        Enantiomer("r_limonene", "(R)-(+)-Limonene", 8033, 125.6, "C10H16", 136.23),
    ],
    kind="chiral compound",
)
