"""CLI command for generating the metrics report."""

from __future__ import annotations

import json
from pathlib import Path

from rich import print as rprint
from rich.markup import escape
from rich.table import Table

from qagate.config import load_config
from qagate.gates.models import GateStatus
from qagate.pipeline import PipelineResult, generate_report
from qagate.report.markdown import GATE_LABELS, overall_label

CONFIG_ERROR_EXIT_CODE = 2

_STATUS_STYLES = {
    GateStatus.PASS: "[green]pass[/green]",
    GateStatus.WARN: "[yellow]warn[/yellow]",
    GateStatus.FAIL: "[red]fail[/red]",
}


def report_command(
    project_root: Path,
    config_file: Path | None = None,
    results_dir: Path | None = None,
    min_coverage: float | None = None,
    min_pass_rate: float | None = None,
    max_duration_ms: float | None = None,
    format: str = "human",
) -> int:
    """Generate the metrics report for a project.

    Args:
        project_root: Directory the artifact paths are relative to
        config_file: Optional TOML config file (pyproject.toml otherwise)
        results_dir: Override for the output directory
        min_coverage: Override for the coverage threshold
        min_pass_rate: Override for the pass rate threshold
        max_duration_ms: Override for the duration threshold
        format: Output format: "human" or "json"

    Returns:
        Exit code (0 = all gates passed, 1 = gates failed, 2 = bad configuration)
    """
    try:
        root_exists = project_root.exists()
    except OSError:
        root_exists = False
    if not root_exists:
        _error(f"Project root does not exist: {project_root}", format)
        return CONFIG_ERROR_EXIT_CODE

    try:
        config = load_config(project_root, config_file).with_overrides(
            coverage=min_coverage,
            pass_rate=min_pass_rate,
            max_duration_ms=max_duration_ms,
            results_dir=results_dir,
        )
    except ValueError as e:
        _error(str(e), format)
        return CONFIG_ERROR_EXIT_CODE

    try:
        result = generate_report(config, project_root)
    except OSError as e:
        _error(f"Could not write report: {e}", format)
        return 1

    _output_result(result, format)
    return result.exit_code


def _error(message: str, format: str) -> None:
    if format == "human":
        rprint(f"[red]Error:[/red] {escape(message)}")
    else:
        print(json.dumps({"error": message}))


def _output_result(result: PipelineResult, format: str) -> None:
    """Output pipeline result in specified format.

    Args:
        result: PipelineResult to output
        format: Output format ("human" or "json")
    """
    if format == "json":
        print(result.summary.model_dump_json(indent=2))
        return

    metrics = result.metrics
    table = Table(title="Quality Gates")
    table.add_column("Gate", style="cyan")
    table.add_column("Threshold", justify="right")
    table.add_column("Actual", justify="right")
    table.add_column("Status")
    for check in result.gates.checks:
        table.add_row(
            GATE_LABELS[check.gate],
            f"{check.threshold:g}",
            f"{check.actual:g}",
            _STATUS_STYLES[check.status],
        )

    rprint("")
    rprint(table)
    rprint(
        f"\n[bold]{overall_label(result.gates.status)}[/bold] "
        f"health {result.gates.health_score}/100, "
        f"{metrics.passed_tests}/{metrics.total_tests} tests passed "
        f"({metrics.pass_rate}%), {metrics.defects.total} defects"
    )
    if result.paths is not None:
        rprint(f"[dim]Report: {result.paths.markdown}[/dim]")
        rprint(f"[dim]Summary: {result.paths.summary}[/dim]")
    rprint("")
