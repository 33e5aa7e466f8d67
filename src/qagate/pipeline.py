"""Single-pass metrics pipeline: read, parse, aggregate, evaluate, render."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ConfigDict

from qagate.config import QAGateConfig
from qagate.gates.evaluator import evaluate_gates
from qagate.gates.models import GateResult
from qagate.metrics.aggregator import aggregate
from qagate.metrics.models import AggregateMetrics
from qagate.parsers import parse_artifacts
from qagate.report.builder import build_report, build_summary
from qagate.report.models import MetricsSummary, Report, ReportPaths
from qagate.report.writer import write_report
from qagate.results.models import Layer, LayerResults
from qagate.results.readers import load_artifacts


class PipelineResult(BaseModel):
    """Everything one pipeline run produced."""

    results: LayerResults
    metrics: AggregateMetrics
    gates: GateResult
    report: Report
    summary: MetricsSummary
    paths: ReportPaths | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def exit_code(self) -> int:
        """0 when every gate passed, 1 otherwise."""
        return self.gates.exit_code


def run_pipeline(
    config: QAGateConfig,
    project_root: Path,
    generated_at: datetime | None = None,
) -> PipelineResult:
    """Run the pipeline without writing anything.

    Args:
        config: Thresholds and artifact locations
        project_root: Directory the artifact paths are relative to
        generated_at: Report timestamp (now if None); fixing it makes the
            result fully deterministic

    Returns:
        PipelineResult with metrics, gate verdicts and the report model
    """
    generated_at = generated_at or datetime.now(UTC)

    artifacts = load_artifacts(config.artifacts, project_root)
    results = parse_artifacts(artifacts)
    for layer in Layer:
        state = "parsed" if results.get(layer) is not None else "not found"
        logger.info(f"{layer.label}: {state}")

    metrics = aggregate(results)
    gates = evaluate_gates(metrics, config.thresholds)
    logger.info(
        f"{metrics.total_tests} tests, pass rate {metrics.pass_rate}%, "
        f"coverage {metrics.coverage:.2f}%, {metrics.defects.total} defects: {gates.status}"
    )

    return PipelineResult(
        results=results,
        metrics=metrics,
        gates=gates,
        report=build_report(
            results, metrics, gates, config.thresholds, generated_at, config.artifacts
        ),
        summary=build_summary(metrics, gates, config.thresholds, generated_at),
    )


def generate_report(
    config: QAGateConfig,
    project_root: Path,
    generated_at: datetime | None = None,
) -> PipelineResult:
    """Run the pipeline and write the report and summary.

    The results directory is resolved against project_root when relative.

    Returns:
        PipelineResult including the written paths
    """
    result = run_pipeline(config, project_root, generated_at)
    paths = write_report(result.report, result.summary, project_root / config.results_dir)
    return result.model_copy(update={"paths": paths})
