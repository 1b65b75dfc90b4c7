"""Run an instrument simulation from the command line."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Optional, Sequence

import yaml

from labsim.bench import SIMULATOR_REGISTRY, Bench, load_bench_from_yaml_safe
from labsim.errors import SimulatorError
from labsim.measurements import normalize_run
from labsim.report import format_analytes, format_run

logger = logging.getLogger(__name__)


def _parse_param(text: str) -> tuple[str, Any]:
    """Parse ``key=value``; the value is read as a YAML scalar (numbers, null, lists)."""
    if "=" not in text:
        raise argparse.ArgumentTypeError(f"Expected key=value, got {text!r}")
    key, value = text.split("=", 1)
    return key.strip(), yaml.safe_load(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Simulate an analytical instrument run (HPLC, GC, FTIR, MS, UV-Vis, "
            "polarimeter, PSA) and print the report."
        )
    )
    parser.add_argument(
        "--bench",
        type=Path,
        default=None,
        help="Path to bench YAML (default: one simulator of each type)",
    )
    parser.add_argument(
        "--simulator",
        help="Simulator name from the bench (or type when no bench is given)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the selectable analytes and exit",
    )
    parser.add_argument("--analyte", help="Analyte or sample id to analyse")
    parser.add_argument(
        "--param",
        type=_parse_param,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a run parameter (repeatable)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for instrument noise")
    parser.add_argument(
        "--animate",
        action="store_true",
        help="Reveal the curve progressively before printing the report",
    )
    parser.add_argument("--json", action="store_true", help="Print the normalized run as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def _default_bench() -> Bench:
    return Bench({key: cls(name=key) for key, cls in SIMULATOR_REGISTRY.items()})


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(message)s",
    )

    try:
        bench = load_bench_from_yaml_safe(args.bench) if args.bench else _default_bench()
        names = [args.simulator] if args.simulator else list(bench)

        if args.list:
            for name in names:
                print(format_analytes(name, bench.get(name).list_analytes()))
            return 0

        if not args.simulator or not args.analyte:
            parser.error("--simulator and --analyte are required unless --list is given")

        simulator = bench.get(args.simulator)
        run = simulator.run_analysis(args.analyte, dict(args.param), rng_seed=args.seed)

        if args.animate:
            playback = simulator.drive_animation(
                run.curve,
                on_done=lambda: logger.info("Acquisition complete"),
            )
            playback.play()

        if args.json:
            print(json.dumps(normalize_run(run).to_dict(), indent=2, default=str))
        else:
            print(format_run(run))
    except SimulatorError as exc:
        print(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
