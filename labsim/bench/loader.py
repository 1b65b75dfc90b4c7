"""Build a Bench of simulators from a bench YAML file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml
from pydantic import ValidationError

from labsim.errors import BenchLoaderError
from labsim.random_source import RandomSource
from labsim.simulators import BaseSimulator

from .bench import Bench
from .registry import SIMULATOR_REGISTRY
from .yaml_schema import BenchYamlSchema, SimulatorYamlEntry

logger = logging.getLogger(__name__)

SAMPLE_CONFIG = "configs/bench.sample.yaml"

ENTRY_KEYS = tuple(SimulatorYamlEntry.model_fields)

_FIELD_GUIDANCE = {
    "type": f"Set `type` to one of: {', '.join(sorted(SIMULATOR_REGISTRY))}.",
    "animation_duration_ms": (
        "Use a positive number of milliseconds, or drop the key to keep the "
        "simulator's default."
    ),
    "seed": "Use a whole-number seed, or drop the key for fresh noise on every run.",
    "parameters": "Give `parameters` as a mapping of setting name to value.",
    "simulators": "Give `simulators` as a mapping of bench name to simulator entry.",
}


def _location(error: Mapping[str, Any]) -> str:
    return ".".join(str(part) for part in error.get("loc", ()))


def _guidance(error: Mapping[str, Any]) -> str:
    """How to fix one pydantic error, keyed on the offending bench key."""
    loc = error.get("loc", ())
    key = str(loc[-1]) if loc else ""

    if error.get("type") == "extra_forbidden":
        if len(loc) == 1:
            return f"Remove `{key}`; a bench file has only a top-level `simulators` mapping."
        return (
            f"Remove `{key}`; a simulator entry takes only {', '.join(ENTRY_KEYS)}. "
            f"Instrument settings such as `{key}` go under `parameters`."
        )
    if key in _FIELD_GUIDANCE:
        return _FIELD_GUIDANCE[key]
    return f"Compare the entry with {SAMPLE_CONFIG}."


def _format_loader_exception(path: Path, error: Exception) -> str:
    """Return a message naming every bad bench setting and how to fix it."""
    if isinstance(error, ValidationError):
        lines = [f"Invalid bench file `{path}`:"]
        for item in error.errors():
            where = _location(item) or "(root)"
            lines.append(f"  {where}: {item.get('msg', 'invalid value')}")
            lines.append(f"    How to fix: {_guidance(item)}")
        return "\n".join(lines)

    if isinstance(error, yaml.YAMLError):
        mark = getattr(error, "problem_mark", None)
        where = f" (line {mark.line + 1})" if mark is not None else ""
        return (
            f"Bench file `{path}` is not valid YAML{where}.\n"
            f"How to fix: Check indentation and colons; {SAMPLE_CONFIG} shows the layout."
        )

    if isinstance(error, FileNotFoundError):
        return (
            f"Bench file `{path}` does not exist.\n"
            f"How to fix: Pass an existing file to --bench, or start from {SAMPLE_CONFIG}."
        )

    return (
        f"Could not build a bench from `{path}`: {error}\n"
        f"How to fix: Compare the file with {SAMPLE_CONFIG}."
    )


def _build_simulator(name: str, entry: SimulatorYamlEntry) -> BaseSimulator:
    cls = SIMULATOR_REGISTRY[entry.type]
    return cls(
        name=name,
        random_source=RandomSource(entry.seed),
        animation_duration_ms=entry.animation_duration_ms,
        parameters=entry.parameters,
    )


def load_bench_from_yaml(path: str | Path) -> Bench:
    """Read a bench file and instantiate one simulator per entry.

    Entry parameters become the simulator's default run settings. An empty
    file is treated as a bench with no ``simulators`` key and fails
    validation.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValidationError: If a key is unknown, a value is malformed, or a
            ``type`` is not a registered simulator.
    """
    path = Path(path)
    with path.open() as f:
        raw = yaml.safe_load(f) or {}

    schema = BenchYamlSchema.model_validate(raw)
    simulators: Dict[str, BaseSimulator] = {
        name: _build_simulator(name, entry)
        for name, entry in schema.simulators.items()
    }

    logger.info("Loaded bench from %s: %s", path, ", ".join(simulators) or "(empty)")
    return Bench(simulators=simulators)


def load_bench_from_yaml_safe(path: str | Path) -> Bench:
    """Like :func:`load_bench_from_yaml`, for command-line use.

    Raises:
        BenchLoaderError: With every problem found and how to fix it; the
            underlying exception is chained.
    """
    resolved = Path(path)
    try:
        return load_bench_from_yaml(resolved)
    except (OSError, yaml.YAMLError, ValidationError) as exc:
        raise BenchLoaderError(_format_loader_exception(resolved, exc)) from exc
