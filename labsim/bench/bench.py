from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from labsim.errors import NotFoundError
from labsim.simulators.base_simulator import BaseSimulator, RunContext


class Bench:
    """A named set of simulator instances, as configured in bench YAML."""

    def __init__(self, simulators: dict[str, BaseSimulator] | None = None):
        self.simulators: Dict[str, BaseSimulator] = simulators or {}
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def get(self, name: str) -> BaseSimulator:
        if name not in self.simulators:
            raise NotFoundError("simulator", name, list(self.simulators))
        return self.simulators[name]

    def run(
        self,
        simulator: str,
        analyte_id: str,
        params: Optional[Mapping[str, Any]] = None,
        rng_seed: Optional[int] = None,
    ) -> RunContext:
        """Run one analysis on the named simulator."""
        self.logger.info("Bench run: %s / %s", simulator, analyte_id)
        return self.get(simulator).run_analysis(analyte_id, params, rng_seed)

    def cancel_all(self) -> None:
        for sim in self.simulators.values():
            sim.cancel_animation()

    def __contains__(self, name: object) -> bool:
        return name in self.simulators

    def __iter__(self):
        return iter(self.simulators)

    def __len__(self) -> int:
        return len(self.simulators)
