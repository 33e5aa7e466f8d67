"""Persist the rendered report and the JSON summary."""

from pathlib import Path

from loguru import logger

from qagate.report.markdown import render_markdown
from qagate.report.models import MetricsSummary, Report, ReportPaths

REPORT_FILENAME = "METRICS-REPORT.md"
SUMMARY_FILENAME = "metrics.json"


def _staging_path(target: Path) -> Path:
    return target.with_name(f".{target.name}.tmp")


def write_report(report: Report, summary: MetricsSummary, results_dir: Path) -> ReportPaths:
    """Write the Markdown report and JSON summary, replacing earlier ones.

    Both files are staged next to their targets and only moved into place
    once both are written, so a failed write leaves the previous pair intact.
    Creates results_dir if it doesn't exist.

    Args:
        report: Report model to render
        summary: Machine-readable summary
        results_dir: Output directory

    Returns:
        ReportPaths of the written files

    Raises:
        OSError: If either file cannot be written
    """
    results_dir.mkdir(parents=True, exist_ok=True)

    paths = ReportPaths(
        markdown=results_dir / REPORT_FILENAME,
        summary=results_dir / SUMMARY_FILENAME,
    )
    contents = {
        paths.markdown: render_markdown(report),
        paths.summary: summary.model_dump_json(indent=2) + "\n",
    }

    staged: list[Path] = []
    try:
        for target, text in contents.items():
            staging = _staging_path(target)
            staged.append(staging)
            staging.write_text(text, encoding="utf-8")
        for target in contents:
            _staging_path(target).replace(target)
    finally:
        for staging in staged:
            staging.unlink(missing_ok=True)

    logger.info(f"Wrote {paths.markdown} and {paths.summary}")
    return paths
