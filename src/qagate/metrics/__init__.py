"""Metrics aggregation across test layers."""

from qagate.metrics.aggregator import aggregate, summarize_defects
from qagate.metrics.models import AggregateMetrics, CategoryCounts, DefectSummary, LayerSummary

__all__ = [
    "AggregateMetrics",
    "CategoryCounts",
    "DefectSummary",
    "LayerSummary",
    "aggregate",
    "summarize_defects",
]
