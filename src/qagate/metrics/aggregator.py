"""Aggregation of normalized layer results into overall metrics."""

from __future__ import annotations

from collections import Counter

from qagate.metrics.models import AggregateMetrics, CategoryCounts, DefectSummary, LayerSummary
from qagate.results.models import Category, Defect, LayerResults, Severity

_CATEGORY_FIELDS = {category.value.lower(): category.name.lower() for category in Category}


def _round2(value: float) -> float:
    return round(value, 2)


def summarize_defects(defects: list[Defect] | tuple[Defect, ...]) -> DefectSummary:
    """Tally defects by severity and known category.

    Args:
        defects: Defects from every layer

    Returns:
        DefectSummary with severity and category counts
    """
    severities = Counter(d.severity for d in defects)
    categories: Counter[str] = Counter()
    for defect in defects:
        field = _CATEGORY_FIELDS.get(defect.category.lower())
        if field is not None:
            categories[field] += 1

    return DefectSummary(
        total=len(defects),
        critical=severities[Severity.CRITICAL],
        high=severities[Severity.HIGH],
        medium=severities[Severity.MEDIUM],
        low=severities[Severity.LOW],
        by_category=CategoryCounts(**categories),
    )


def aggregate(results: LayerResults) -> AggregateMetrics:
    """Merge the layer results of one run.

    A missing layer contributes nothing and has no per-layer entry.
    Coverage comes from the unit layer only.

    Args:
        results: Normalized results for each layer that ran

    Returns:
        AggregateMetrics for the run
    """
    present = results.present()

    total = sum(r.counts.total for r in present)
    passed = sum(r.counts.passed for r in present)
    failed = sum(r.counts.failed for r in present)
    duration = sum(r.duration_ms for r in present)
    defects = tuple(d for r in present for d in r.defects)

    coverage = 0.0
    if results.unit is not None and results.unit.coverage_percent is not None:
        coverage = results.unit.coverage_percent

    layers = {
        r.layer: LayerSummary(
            passed=r.counts.passed,
            failed=r.counts.failed,
            total=r.counts.total,
            pass_rate=_round2(r.counts.pass_rate),
            duration_ms=r.duration_ms,
            duration_share=_round2(r.duration_ms / duration * 100) if duration else 0.0,
        )
        for r in present
    }

    return AggregateMetrics(
        total_tests=total,
        passed_tests=passed,
        failed_tests=failed,
        pass_rate=_round2(passed / total * 100) if total else 0.0,
        coverage=coverage,
        total_duration_ms=duration,
        defects=summarize_defects(defects),
        defect_list=defects,
        layers=layers,
    )
