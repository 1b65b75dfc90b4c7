"""Terminal-friendly rendering of analysis runs."""

from __future__ import annotations

from typing import Iterable

from labsim.models import AnalyteSummary
from labsim.simulators.base_simulator import RunContext
from labsim.simulators.ftir.models import FtirResult
from labsim.simulators.gc.models import GcResult
from labsim.simulators.hplc.models import HplcResult
from labsim.simulators.mass_spec.models import MassSpecResult
from labsim.simulators.polarimeter.models import PolarimeterResult
from labsim.simulators.psa.models import PsaResult
from labsim.simulators.uv_vis.models import UvVisResult


def format_analytes(simulator: str, analytes: Iterable[AnalyteSummary]) -> str:
    lines = [f"{simulator}:"]
    lines.extend(f"  {a.id:<20} {a.display_name}" for a in analytes)
    return "\n".join(lines)


def _format_hplc(result: HplcResult) -> list[str]:
    lines = [
        "Peak | Name                 | RT (min) | Height  | Area     | Area %",
        "-----+----------------------+----------+---------+----------+-------",
    ]
    for row in result.peaks:
        lines.append(
            f"{row.number:>4} | "
            f"{row.name:<20} | "
            f"{row.retention_time:>8.2f} | "
            f"{row.height:>7.1f} | "
            f"{row.area:>8.2f} | "
            f"{row.percent_area:>6.2f}"
        )
    if not result.peaks:
        lines.append("No peaks eluted within the run time.")
    return lines


def _format_gc(result: GcResult) -> list[str]:
    lines = [
        "Peak | Name                 | RT (min) | Height",
        "-----+----------------------+----------+-------",
    ]
    for row in result.peaks:
        lines.append(
            f"{row.number:>4} | {row.name:<20} | {row.retention_time:>8.2f} | {row.height:>6.1f}"
        )
    if not result.peaks:
        lines.append("No peaks eluted within the run time.")
    return lines


def _format_ftir(result: FtirResult) -> list[str]:
    lines = [
        "Band (cm-1) | Assignment",
        "------------+---------------------------",
    ]
    lines.extend(f"{band.center:>11.0f} | {band.label or ''}" for band in result.bands)
    if result.match is not None:
        verdict = "MATCH" if result.match.is_match else "NO MATCH"
        lines += [
            "",
            f"Library standard: {result.standard_id}",
            f"Similarity: {result.match.score:.1f}% ({verdict}, "
            f"{result.match.matched_peaks}/{result.match.total_peaks} bands)",
        ]
    return lines


def _format_mass_spec(result: MassSpecResult) -> list[str]:
    lines = [
        f"Molecular ion m/z {result.molecular_ion_mz:g} "
        f"(survival factor {result.energy_factor:.2f}), bar width {result.bar_width}",
        "",
        "   m/z | Rel. abundance %",
        "-------+-----------------",
    ]
    lines.extend(f"{p.center:>6g} | {p.intensity:>6.1f}" for p in result.peaks)
    return lines


def _format_uv_vis(result: UvVisResult) -> list[str]:
    cal = result.calibration
    lines = [
        f"Lambda max: {result.lambda_max:g} nm (analysis at {cal.wavelength:g} nm)",
        "",
        "Conc (mg/L) | Absorbance",
        "------------+-----------",
    ]
    lines.extend(f"{s.concentration:>11g} | {s.absorbance:>9.3f}" for s in cal.standards)
    lines += ["", cal.equation]
    if result.unknown is not None:
        lines += [
            f"Measured Absorbance: {result.unknown.absorbance:.3f}",
            f"Calculated Concentration: {result.unknown.calculated_concentration:.2f} mg/L",
        ]
    return lines


def _format_polarimeter(result: PolarimeterResult) -> list[str]:
    compound = result.compound
    return [
        f"{compound.name} ({compound.formula}, {compound.molar_mass:.2f} g/mol)",
        f"Specific rotation: {result.rotation.formatted}",
        f"The compound is {result.rotation.classification}.",
        f"PubChem: {compound.pubchem_url}",
    ]


def _format_psa(result: PsaResult) -> list[str]:
    stats = result.statistics
    lines = list(result.run_log) + [
        "",
        f"Z-Average (d.nm): {stats.z_average_nm:.2f}",
        f"PDI: {stats.polydispersity_index:.3f}",
        f"Intercept: {stats.intercept:.3f}",
        "",
        "Peak   | Size (d.nm) | Intensity | Width (d.nm)",
        "-------+-------------+-----------+-------------",
    ]
    lines.extend(
        f"{p.label:<6} | {p.size_nm:>11.2f} | {p.intensity:>9.1f} | {p.width_nm:>12.2f}"
        for p in stats.peaks
    )
    return lines


def format_run(run: RunContext) -> str:
    """Render a run as a header followed by the simulator's result table."""
    result = run.result
    if isinstance(result, HplcResult):
        body = _format_hplc(result)
    elif isinstance(result, GcResult):
        body = _format_gc(result)
    elif isinstance(result, FtirResult):
        body = _format_ftir(result)
    elif isinstance(result, MassSpecResult):
        body = _format_mass_spec(result)
    elif isinstance(result, UvVisResult):
        body = _format_uv_vis(result)
    elif isinstance(result, PolarimeterResult):
        body = _format_polarimeter(result)
    elif isinstance(result, PsaResult):
        body = _format_psa(result)
    else:
        raise TypeError(f"Unsupported run result type: {type(result).__name__}")

    header = [
        f"{run.simulator.upper()} analysis of '{run.analyte_id}' "
        f"({len(run.curve)} points, max {run.curve.max_y:.2f})",
        "",
    ]
    return "\n".join(header + body)
