"""qagate CLI application."""

from __future__ import annotations

import sys
from enum import StrEnum
from typing import Annotated

import typer
from loguru import logger
from rich import print as rprint

import qagate as qagate_pkg


class OutputFormat(StrEnum):
    """Output format for CLI commands."""

    human = "human"
    json = "json"


app = typer.Typer(
    name="qagate",
    help="Test metrics aggregation and quality gates.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        rprint(f"qagate {qagate_pkg.__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send diagnostics to stderr; DEBUG when verbose, warnings only otherwise."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """qagate: test metrics aggregation and quality gates."""


@app.command("report")
def report(
    project_root: Annotated[
        str | None,
        typer.Option("--project-root", "-p", help="Project root directory"),
    ] = None,
    config: Annotated[
        str | None,
        typer.Option("--config", "-c", help="TOML config file (default: pyproject.toml)"),
    ] = None,
    results_dir: Annotated[
        str | None,
        typer.Option("--results-dir", "-o", help="Directory for the report outputs"),
    ] = None,
    min_coverage: Annotated[
        float | None,
        typer.Option("--min-coverage", help="Minimum code coverage percent"),
    ] = None,
    min_pass_rate: Annotated[
        float | None,
        typer.Option("--min-pass-rate", help="Minimum pass rate percent"),
    ] = None,
    max_duration_ms: Annotated[
        float | None,
        typer.Option("--max-duration-ms", help="Maximum total duration in milliseconds"),
    ] = None,
    format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.human,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Show debug diagnostics"),
    ] = False,
) -> None:
    """Generate the metrics report and evaluate quality gates."""
    from pathlib import Path

    from qagate.cli.report_cli import report_command

    configure_logging(verbose)

    root = Path(project_root) if project_root else Path.cwd()

    exit_code = report_command(
        project_root=root,
        config_file=Path(config) if config else None,
        results_dir=Path(results_dir) if results_dir else None,
        min_coverage=min_coverage,
        min_pass_rate=min_pass_rate,
        max_duration_ms=max_duration_ms,
        format=format.value,
    )
    raise typer.Exit(exit_code)
