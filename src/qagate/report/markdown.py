"""Markdown rendering of the Report model."""

from qagate.gates.models import GateCheck, GateName, GateStatus
from qagate.report.models import (
    CoverageSection,
    DefectsSection,
    ExecutionSection,
    ExecutiveSummary,
    QualityGateSection,
    Recommendation,
    Report,
)
from qagate.results.models import Severity

SEVERITY_ICONS = {
    Severity.CRITICAL: "🔴",
    Severity.HIGH: "🟠",
    Severity.MEDIUM: "🟡",
    Severity.LOW: "🟢",
}

GATE_LABELS = {
    GateName.COVERAGE: "Code Coverage",
    GateName.PASS_RATE: "Pass Rate",
    GateName.DURATION: "Execution Time",
    GateName.DEFECTS: "Defects",
}

_DASHBOARD_WIDTH = 58


def _seconds(ms: float) -> str:
    return f"{ms / 1000:.2f}s"


def _percent(value: float, digits: int = 2) -> str:
    return f"{value:.{digits}f}%"


def _share(part: int, whole: int) -> str:
    return _percent(part / whole * 100, 1) if whole else "0.0%"


def overall_label(status: GateStatus) -> str:
    """Overall verdict text, e.g. '✅ PASSED'."""
    return "✅ PASSED" if status == GateStatus.PASS else "❌ FAILED"


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def _dashboard(summary: ExecutiveSummary) -> list[str]:
    icons = {gate: status.icon for gate, status in summary.gate_statuses.items()}
    rows = [
        f"Overall Status:       {overall_label(summary.status)}",
        f"Test Pass Rate:       {_percent(summary.pass_rate)} "
        f"({summary.passed_tests}/{summary.total_tests}) {icons[GateName.PASS_RATE]}",
        f"Code Coverage:        {_percent(summary.coverage)} {icons[GateName.COVERAGE]}",
        f"Total Duration:       {_seconds(summary.total_duration_ms)} {icons[GateName.DURATION]}",
        f"Defects Found:        {summary.defects_total} {icons[GateName.DEFECTS]}",
    ]
    border = "═" * _DASHBOARD_WIDTH
    lines = ["```", f"╔{border}╗", f"║{'QUALITY METRICS DASHBOARD'.center(_DASHBOARD_WIDTH)}║"]
    lines.append(f"╠{border}╣")
    lines.extend(f"║  {row.ljust(_DASHBOARD_WIDTH - 2)}║" for row in rows)
    lines.extend([f"╚{border}╝", "```"])
    return lines


def _coverage(section: CoverageSection) -> list[str]:
    lines = [
        "## 1. Code Coverage Analysis",
        "",
        "| Component | Coverage | Status | Target |",
        "|-----------|----------|--------|--------|",
        f"| **Overall** | **{_percent(section.coverage)}** | **{section.status.icon}** "
        f"| ≥{section.threshold:g}% |",
        "",
    ]
    if section.details:
        lines.extend(["### Coverage Breakdown (from Unit Tests)", "", "```", section.details, "```", ""])
    return lines


def _execution_time(section: ExecutionSection) -> list[str]:
    lines = [
        "## 2. Test Execution Time",
        "",
        "| Test Layer | Duration | Status | % of Total |",
        "|------------|----------|--------|------------|",
    ]
    for row in section.rows:
        lines.append(
            f"| **{row.layer.label}** | {_seconds(row.duration_ms)} | {row.status.icon} "
            f"| {_percent(row.duration_share, 1)} |"
        )
    lines.append(
        f"| **TOTAL** | **{_seconds(section.total_duration_ms)}** "
        f"| **{section.duration_status.icon}** | **100%** |"
    )
    within = "Within acceptable range" if section.duration_status == GateStatus.PASS else "Exceeds threshold"
    lines.extend(
        [
            "",
            f"**Performance Status**: {within} (Target: ≤{_seconds(section.max_duration_ms)})",
            "",
        ]
    )
    if section.not_run:
        not_run = ", ".join(layer.label for layer in section.not_run)
        lines.extend([f"**Not run**: {not_run}", ""])
    return lines


def _pass_fail(section: ExecutionSection) -> list[str]:
    lines = [
        "## 3. Pass/Fail Rate Analysis",
        "",
        "### Overall Results",
        "",
        f"- **Total Tests**: {section.total_tests}",
        f"- **Passed**: {section.passed_tests} ({section.pass_rate_status.icon})",
        f"- **Failed**: {section.failed_tests}",
        f"- **Pass Rate**: **{_percent(section.pass_rate)}**",
        f"- **Target**: ≥{section.pass_rate_threshold:g}%",
        "",
        "### Breakdown by Test Layer",
        "",
        "| Layer | Passed | Failed | Total | Pass Rate | Status |",
        "|-------|--------|--------|-------|-----------|--------|",
    ]
    for row in section.rows:
        lines.append(
            f"| **{row.layer.label}** | {row.passed} | {row.failed} | {row.total} "
            f"| {_percent(row.pass_rate, 1)} | {row.status.icon} |"
        )
    lines.append("")
    return lines


def _defects(section: DefectsSection) -> list[str]:
    summary = section.summary
    categories = summary.by_category
    lines = [
        "## 4. Defects Analysis",
        "",
        "### Summary",
        "",
        f"- **Total Defects**: {summary.total}",
        f"- **Critical**: {summary.critical} {SEVERITY_ICONS[Severity.CRITICAL]}",
        f"- **High**: {summary.high} {SEVERITY_ICONS[Severity.HIGH]}",
        f"- **Medium**: {summary.medium} {SEVERITY_ICONS[Severity.MEDIUM]}",
        f"- **Low**: {summary.low} {SEVERITY_ICONS[Severity.LOW]}",
        "",
        "### Defects by Category",
        "",
        "| Category | Count | Percentage |",
        "|----------|-------|------------|",
        f"| Functional | {categories.functional} | {_share(categories.functional, summary.total)} |",
        f"| Integration | {categories.integration} | {_share(categories.integration, summary.total)} |",
        f"| API | {categories.api} | {_share(categories.api, summary.total)} |",
        f"| UI | {categories.ui} | {_share(categories.ui, summary.total)} |",
        "",
    ]

    if not section.defects:
        lines.extend(["### 🎉 No Defects Found!", "", "All tests passed successfully. Great work!", ""])
        return lines

    lines.extend(
        [
            "### Detailed Defect List",
            "",
            "| # | Severity | Type | Name | Category | Details |",
            "|---|----------|------|------|----------|---------|",
        ]
    )
    for index, defect in enumerate(section.defects, start=1):
        lines.append(
            f"| {index} | {SEVERITY_ICONS[defect.severity]} {defect.severity} | {defect.type} "
            f"| {_escape_cell(defect.name)} | {defect.category} "
            f"| {_escape_cell(defect.details or '')} |"
        )
    lines.append("")
    return lines


def _gate_cells(check: GateCheck) -> tuple[str, str]:
    """Threshold and actual cells for one gate row."""
    if check.gate == GateName.DURATION:
        return f"≤{_seconds(check.threshold)}", _seconds(check.actual)
    if check.gate == GateName.DEFECTS:
        return "0", str(int(check.actual))
    return f"≥{check.threshold:g}%", _percent(check.actual)


def _quality_gates(section: QualityGateSection) -> list[str]:
    lines = [
        "## 5. Quality Gates Status",
        "",
        "| Gate | Threshold | Actual | Status |",
        "|------|-----------|--------|--------|",
    ]
    for check in section.checks:
        threshold, actual = _gate_cells(check)
        lines.append(f"| **{GATE_LABELS[check.gate]}** | {threshold} | {actual} | {check.status.icon} |")
    critical_icon = GateStatus.PASS.icon if section.critical_defects == 0 else GateStatus.FAIL.icon
    lines.append(f"| **Critical Defects** | 0 | {section.critical_defects} | {critical_icon} |")
    lines.extend(["", f"**Overall Quality Gate**: {overall_label(section.status)}", ""])
    return lines


def _recommendation(item: Recommendation) -> str:
    text = f"- {item.icon} **{item.headline}**"
    return f"{text} {item.advice}" if item.advice else text


def render_markdown(report: Report) -> str:
    """Render a Report as a Markdown document.

    Args:
        report: Report model to render

    Returns:
        Markdown text
    """
    timestamp = report.generated_at.isoformat()
    summary = report.summary

    lines = [
        "# Test Automation Metrics Report",
        "",
        f"**Generated**: {timestamp}  ",
        f"**Status**: {overall_label(summary.status)}  ",
        f"**Build Health**: {summary.health_score}/100 ⭐",
        "",
        "---",
        "",
        "## 📊 Executive Summary",
        "",
        *_dashboard(summary),
        "",
        "---",
        "",
        *_coverage(report.coverage),
        "---",
        "",
        *_execution_time(report.execution),
        "---",
        "",
        *_pass_fail(report.execution),
        "---",
        "",
        *_defects(report.defects),
        "---",
        "",
        *_quality_gates(report.quality_gates),
        "---",
        "",
        "## 6. Recommendations",
        "",
        *(_recommendation(item) for item in report.recommendations),
        "",
        "---",
        "",
        "## 7. Artifacts",
        "",
        *(f"- **{entry.label}**: `{entry.path.as_posix()}`" for entry in report.artifacts),
        "",
        "---",
        "",
        "**Report Generated by**: qagate  ",
        f"**Timestamp**: {timestamp}  ",
        f"**Version**: {report.version}",
        "",
    ]
    return "\n".join(lines)
