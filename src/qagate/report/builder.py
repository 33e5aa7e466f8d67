"""Build the Report data model from metrics and gate verdicts."""

from __future__ import annotations

from datetime import datetime

import qagate
from qagate.gates.models import GateName, GateResult, GateStatus, QualityThresholds
from qagate.metrics.models import AggregateMetrics
from qagate.report.models import (
    ArtifactEntry,
    CoverageSection,
    DefectsSection,
    ExecutionSection,
    ExecutiveSummary,
    LayerRow,
    MetricsSummary,
    QualityGateSection,
    Recommendation,
    Report,
)
from qagate.results.models import Layer, LayerResults
from qagate.results.readers import ArtifactPaths

PASS_RATE_LOW = Recommendation(
    icon="⚠️",
    headline="Pass rate is below target.",
    advice="Review and fix failing tests.",
)
COVERAGE_LOW = Recommendation(
    icon="⚠️",
    headline="Coverage is below target.",
    advice="Add more unit tests to uncovered code.",
)
DURATION_HIGH = Recommendation(
    icon="⚠️",
    headline="Execution time exceeds target.",
    advice="Consider parallelizing tests or optimizing slow tests.",
)
CRITICAL_DEFECTS = Recommendation(
    icon="🔴",
    headline="Critical defects found.",
    advice="These must be fixed immediately before release.",
)
HIGH_DEFECTS = Recommendation(
    icon="🟠",
    headline="High-priority defects found.",
    advice="Plan to fix these in the current sprint.",
)
MINOR_DEFECTS = Recommendation(
    icon="🟡",
    headline="Medium and low-priority defects found.",
    advice="Triage them before the next release.",
)
ALL_PASSED = Recommendation(
    icon="✅",
    headline="All quality gates passed!",
    advice="Maintain the current testing standards.",
)


def build_recommendations(metrics: AggregateMetrics, gates: GateResult) -> list[Recommendation]:
    """Derive recommendations from the gates that failed or warned.

    Args:
        metrics: Aggregated run metrics
        gates: Gate verdicts for the run

    Returns:
        One recommendation per failing condition, or a single positive one
    """
    recommendations: list[Recommendation] = []

    if gates.check(GateName.PASS_RATE).status != GateStatus.PASS:
        recommendations.append(PASS_RATE_LOW)
    if gates.check(GateName.COVERAGE).status != GateStatus.PASS:
        recommendations.append(COVERAGE_LOW)
    if gates.check(GateName.DURATION).status != GateStatus.PASS:
        recommendations.append(DURATION_HIGH)

    defects = metrics.defects
    if defects.critical > 0:
        recommendations.append(CRITICAL_DEFECTS)
    if defects.high > 0:
        recommendations.append(HIGH_DEFECTS)
    if defects.total > 0 and defects.critical == 0 and defects.high == 0:
        recommendations.append(MINOR_DEFECTS)

    return recommendations or [ALL_PASSED]


def _layer_rows(results: LayerResults, metrics: AggregateMetrics) -> list[LayerRow]:
    rows = []
    for result in results.present():
        layer_summary = metrics.layers[result.layer]
        rows.append(
            LayerRow(
                layer=result.layer,
                passed=layer_summary.passed,
                failed=layer_summary.failed,
                total=layer_summary.total,
                pass_rate=layer_summary.pass_rate,
                duration_ms=layer_summary.duration_ms,
                duration_share=layer_summary.duration_share,
                status=GateStatus.PASS if layer_summary.failed == 0 else GateStatus.FAIL,
            )
        )
    return rows


def _artifact_index(paths: ArtifactPaths) -> list[ArtifactEntry]:
    return [
        ArtifactEntry(label="Coverage Report", path=paths.coverage_html),
        ArtifactEntry(label="Unit Test Results", path=paths.unit),
        ArtifactEntry(label="BDD Test Results", path=paths.bdd),
        ArtifactEntry(label="API Test Results", path=paths.api),
        ArtifactEntry(label="API JSON Report", path=paths.api_json),
        ArtifactEntry(label="UI Test Results", path=paths.ui),
    ]


def build_report(
    results: LayerResults,
    metrics: AggregateMetrics,
    gates: GateResult,
    thresholds: QualityThresholds,
    generated_at: datetime,
    artifacts: ArtifactPaths | None = None,
) -> Report:
    """Assemble every report section.

    Args:
        results: Normalized per-layer results
        metrics: Aggregated metrics
        gates: Gate verdicts
        thresholds: Thresholds the gates were evaluated against
        generated_at: Report timestamp
        artifacts: Artifact locations listed in the artifact index

    Returns:
        Report ready for rendering
    """
    coverage_status = gates.check(GateName.COVERAGE).status
    pass_rate_status = gates.check(GateName.PASS_RATE).status
    duration_status = gates.check(GateName.DURATION).status

    return Report(
        generated_at=generated_at,
        version=qagate.__version__,
        summary=ExecutiveSummary(
            status=gates.status,
            health_score=gates.health_score,
            pass_rate=metrics.pass_rate,
            passed_tests=metrics.passed_tests,
            total_tests=metrics.total_tests,
            coverage=metrics.coverage,
            total_duration_ms=metrics.total_duration_ms,
            defects_total=metrics.defects.total,
            gate_statuses={c.gate.value: c.status for c in gates.checks},
        ),
        coverage=CoverageSection(
            coverage=metrics.coverage,
            threshold=thresholds.coverage,
            status=coverage_status,
            details=results.unit.coverage_details if results.unit is not None else None,
        ),
        execution=ExecutionSection(
            rows=_layer_rows(results, metrics),
            not_run=[layer for layer in Layer if results.get(layer) is None],
            total_tests=metrics.total_tests,
            passed_tests=metrics.passed_tests,
            failed_tests=metrics.failed_tests,
            pass_rate=metrics.pass_rate,
            pass_rate_threshold=thresholds.pass_rate,
            pass_rate_status=pass_rate_status,
            total_duration_ms=metrics.total_duration_ms,
            max_duration_ms=thresholds.max_duration_ms,
            duration_status=duration_status,
        ),
        defects=DefectsSection(
            summary=metrics.defects,
            defects=list(metrics.defect_list),
        ),
        quality_gates=QualityGateSection(
            checks=gates.checks,
            status=gates.status,
            critical_defects=metrics.defects.critical,
        ),
        recommendations=build_recommendations(metrics, gates),
        artifacts=_artifact_index(artifacts or ArtifactPaths()),
    )


def build_summary(
    metrics: AggregateMetrics,
    gates: GateResult,
    thresholds: QualityThresholds,
    generated_at: datetime,
) -> MetricsSummary:
    """Build the machine-readable summary for a run."""
    return MetricsSummary(
        generated_at=generated_at,
        version=qagate.__version__,
        status=gates.status,
        health_score=gates.health_score,
        metrics=metrics,
        gates=gates.checks,
        thresholds=thresholds,
    )

