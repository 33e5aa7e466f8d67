"""Report model, rendering and persistence."""

from qagate.report.builder import build_recommendations, build_report, build_summary
from qagate.report.markdown import render_markdown
from qagate.report.models import MetricsSummary, Recommendation, Report, ReportPaths
from qagate.report.writer import write_report

__all__ = [
    "MetricsSummary",
    "Recommendation",
    "Report",
    "ReportPaths",
    "build_recommendations",
    "build_report",
    "build_summary",
    "render_markdown",
    "write_report",
]
