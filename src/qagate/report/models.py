"""Report data model.

A Report is plain data; report.markdown formats it and report.writer
persists it. Sections hold values, never preformatted text.
"""

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from qagate.gates.models import GateCheck, GateStatus, QualityThresholds
from qagate.metrics.models import AggregateMetrics, DefectSummary
from qagate.results.models import Defect, Layer


class ExecutiveSummary(BaseModel):
    """Headline numbers for the dashboard block."""

    status: GateStatus
    health_score: int
    pass_rate: float
    passed_tests: int
    total_tests: int
    coverage: float
    total_duration_ms: float
    defects_total: int
    gate_statuses: dict[str, GateStatus]

    model_config = ConfigDict(frozen=True)


class CoverageSection(BaseModel):
    """Code coverage analysis."""

    coverage: float
    threshold: float
    status: GateStatus
    details: str | None = None

    model_config = ConfigDict(frozen=True)


class LayerRow(BaseModel):
    """One test layer's timing and pass/fail figures."""

    layer: Layer
    passed: int
    failed: int
    total: int
    pass_rate: float
    duration_ms: float
    duration_share: float
    status: GateStatus

    model_config = ConfigDict(frozen=True)


class ExecutionSection(BaseModel):
    """Per-layer execution time and pass/fail breakdown."""

    rows: list[LayerRow]
    not_run: list[Layer]
    total_tests: int
    passed_tests: int
    failed_tests: int
    pass_rate: float
    pass_rate_threshold: float
    pass_rate_status: GateStatus
    total_duration_ms: float
    max_duration_ms: float
    duration_status: GateStatus

    model_config = ConfigDict(frozen=True)


class DefectsSection(BaseModel):
    """Defect tallies and the full defect listing."""

    summary: DefectSummary
    defects: list[Defect]

    model_config = ConfigDict(frozen=True)


class QualityGateSection(BaseModel):
    """Gate table and overall verdict."""

    checks: list[GateCheck]
    status: GateStatus
    critical_defects: int

    model_config = ConfigDict(frozen=True)


class Recommendation(BaseModel):
    """A fixed advice sentence triggered by a gate condition."""

    icon: str
    headline: str
    advice: str = ""

    model_config = ConfigDict(frozen=True)


class ArtifactEntry(BaseModel):
    """A raw artifact referenced from the report."""

    label: str
    path: Path

    model_config = ConfigDict(frozen=True)


class Report(BaseModel):
    """The full structured metrics report."""

    generated_at: datetime
    version: str
    summary: ExecutiveSummary
    coverage: CoverageSection
    execution: ExecutionSection
    defects: DefectsSection
    quality_gates: QualityGateSection
    recommendations: list[Recommendation]
    artifacts: list[ArtifactEntry]

    model_config = ConfigDict(frozen=True)


class MetricsSummary(BaseModel):
    """Machine-readable summary written next to the report."""

    generated_at: datetime
    version: str
    status: GateStatus
    health_score: int
    metrics: AggregateMetrics
    gates: list[GateCheck]
    thresholds: QualityThresholds

    model_config = ConfigDict(frozen=True)


class ReportPaths(BaseModel):
    """Where the report outputs were written."""

    markdown: Path
    summary: Path

    model_config = ConfigDict(frozen=True)
