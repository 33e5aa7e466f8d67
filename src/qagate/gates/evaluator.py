"""Quality gate evaluation."""

from qagate.gates.models import (
    HEALTH_POINTS_PER_GATE,
    PASSING_HEALTH_SCORE,
    GateCheck,
    GateName,
    GateResult,
    GateStatus,
    QualityThresholds,
)
from qagate.metrics.models import AggregateMetrics


def _at_least(actual: float, threshold: float) -> GateStatus:
    return GateStatus.PASS if actual >= threshold else GateStatus.FAIL


def _defects_status(metrics: AggregateMetrics) -> GateStatus:
    if metrics.defects.total == 0:
        return GateStatus.PASS
    if metrics.defects.critical > 0:
        return GateStatus.FAIL
    return GateStatus.WARN


def evaluate_gates(
    metrics: AggregateMetrics,
    thresholds: QualityThresholds | None = None,
) -> GateResult:
    """Evaluate every quality gate against aggregated metrics.

    Args:
        metrics: Aggregated run metrics
        thresholds: Gate thresholds (defaults if None)

    Returns:
        GateResult with per-gate verdicts, overall status and health score
    """
    thresholds = thresholds or QualityThresholds()

    duration_status = (
        GateStatus.PASS
        if metrics.total_duration_ms <= thresholds.max_duration_ms
        else GateStatus.WARN
    )

    checks = [
        GateCheck(
            gate=GateName.COVERAGE,
            status=_at_least(metrics.coverage, thresholds.coverage),
            threshold=thresholds.coverage,
            actual=metrics.coverage,
        ),
        GateCheck(
            gate=GateName.PASS_RATE,
            status=_at_least(metrics.pass_rate, thresholds.pass_rate),
            threshold=thresholds.pass_rate,
            actual=metrics.pass_rate,
        ),
        GateCheck(
            gate=GateName.DURATION,
            status=duration_status,
            threshold=thresholds.max_duration_ms,
            actual=metrics.total_duration_ms,
        ),
        GateCheck(
            gate=GateName.DEFECTS,
            status=_defects_status(metrics),
            threshold=0,
            actual=metrics.defects.total,
        ),
    ]

    passing = sum(1 for c in checks if c.status == GateStatus.PASS)
    if passing == len(checks):
        return GateResult(checks=checks, status=GateStatus.PASS, health_score=PASSING_HEALTH_SCORE)

    return GateResult(
        checks=checks,
        status=GateStatus.FAIL,
        health_score=passing * HEALTH_POINTS_PER_GATE,
    )
