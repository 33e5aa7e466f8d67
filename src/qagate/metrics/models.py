"""Aggregate metrics models."""

from pydantic import BaseModel, ConfigDict

from qagate.results.models import Defect, Layer


class CategoryCounts(BaseModel):
    """Defect counts for the four known categories."""

    functional: int = 0
    integration: int = 0
    api: int = 0
    ui: int = 0

    model_config = ConfigDict(frozen=True)


class DefectSummary(BaseModel):
    """Defect tallies by severity and category.

    Defects with a category outside the known four count toward total
    but toward no category bucket.
    """

    total: int = 0
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    by_category: CategoryCounts = CategoryCounts()

    model_config = ConfigDict(frozen=True)


class LayerSummary(BaseModel):
    """Per-layer breakdown for a layer that ran."""

    passed: int
    failed: int
    total: int
    pass_rate: float
    duration_ms: float
    duration_share: float

    model_config = ConfigDict(frozen=True)


class AggregateMetrics(BaseModel):
    """Totals across every layer that ran."""

    total_tests: int = 0
    passed_tests: int = 0
    failed_tests: int = 0
    pass_rate: float = 0.0
    coverage: float = 0.0
    total_duration_ms: float = 0.0
    defects: DefectSummary = DefectSummary()
    defect_list: tuple[Defect, ...] = ()
    layers: dict[Layer, LayerSummary] = {}

    model_config = ConfigDict(frozen=True)
