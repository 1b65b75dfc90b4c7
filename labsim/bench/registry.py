"""Bench YAML ``type`` keys mapped to simulator classes."""

from __future__ import annotations

from typing import Dict, Type

from labsim.simulators import (
    BaseSimulator,
    FtirSimulator,
    GcSimulator,
    HplcSimulator,
    MassSpecSimulator,
    PolarimeterSimulator,
    PsaSimulator,
    UvVisSimulator,
)

SIMULATOR_REGISTRY: Dict[str, Type[BaseSimulator]] = {
    "ftir": FtirSimulator,
    "gc": GcSimulator,
    "hplc": HplcSimulator,
    "mass_spec": MassSpecSimulator,
    "polarimeter": PolarimeterSimulator,
    "psa": PsaSimulator,
    "uv_vis": UvVisSimulator,
}
