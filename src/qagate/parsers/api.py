"""API (Newman) report parser.

Prefers Newman's JSON reporter output and falls back to the CLI
reporter's summary table.
"""

import re
from typing import Any

from loguru import logger

from qagate.parsers.patterns import lines_matching
from qagate.results.models import Category, Counts, Defect, Layer, NormalizedResult, Severity

ASSERTION_DEFECT_TYPE = "API Assertion Failure"
TEXT_DEFECT_TYPE = "API Test Failure"

_REQUESTS_ROW = re.compile(r"[│|]\s+requests\s+[│|]\s+(\d+)\s+[│|]\s+(\d+)\s+[│|]")
_ASSERTIONS_ROW = re.compile(r"[│|]\s+assertions\s+[│|]\s+(\d+)\s+[│|]\s+(\d+)\s+[│|]")
_DURATION = re.compile(r"total run duration: ([\d.]+)(ms|s)\b")
_FAILURE = re.compile(r"✖\s+(.+)")


def parse_api(text: str | None, report: dict[str, Any] | None = None) -> NormalizedResult | None:
    """Parse API test results.

    Layer counts are assertion counts; request counts are kept alongside.

    Args:
        text: Newman CLI output, or None
        report: Parsed Newman JSON report, or None

    Returns:
        NormalizedResult for the API layer, or None if both inputs are absent
    """
    if text is None and report is None:
        return None

    run = report.get("run") if report is not None else None
    if isinstance(run, dict):
        try:
            return _parse_json_run(run)
        except (AttributeError, TypeError, ValueError) as e:
            logger.warning(f"Malformed API JSON report, falling back to text output: {e}")
    elif report is not None:
        logger.warning("API JSON report has no 'run' object, falling back to text output")
    if text is None:
        return None
    return _parse_text(text)


def _stat(stats: dict[str, Any], name: str) -> Counts:
    """Counts from a Newman ``run.stats.<name>`` block."""
    block = stats.get(name) or {}
    return Counts.reconcile(
        failed=int(block.get("failed") or 0),
        total=int(block.get("total") or 0),
    )


def _parse_json_run(run: dict[str, Any]) -> NormalizedResult:
    stats = run.get("stats") or {}
    timings = run.get("timings") or {}

    duration = 0.0
    if "started" in timings and "completed" in timings:
        duration = max(float(timings["completed"]) - float(timings["started"]), 0.0)

    defects: list[Defect] = []
    for execution in run.get("executions") or []:
        item_name = (execution.get("item") or {}).get("name", "")
        for assertion in execution.get("assertions") or []:
            error = assertion.get("error")
            if not error:
                continue
            defects.append(
                Defect(
                    type=ASSERTION_DEFECT_TYPE,
                    name=f"{item_name} - {assertion.get('assertion', '')}",
                    severity=Severity.HIGH,
                    category=Category.API,
                    details=error.get("message") if isinstance(error, dict) else str(error),
                )
            )

    return NormalizedResult(
        layer=Layer.API,
        counts=_stat(stats, "assertions"),
        requests=_stat(stats, "requests"),
        duration_ms=duration,
        defects=tuple(defects),
        source="json",
    )


def _table_counts(text: str, pattern: re.Pattern[str]) -> Counts:
    match = pattern.search(text)
    if not match:
        return Counts()
    return Counts.reconcile(failed=int(match.group(2)), total=int(match.group(1)))


def _parse_text(text: str) -> NormalizedResult:
    duration = 0.0
    match = _DURATION.search(text)
    if match:
        value = float(match.group(1))
        duration = value if match.group(2) == "ms" else value * 1000

    return NormalizedResult(
        layer=Layer.API,
        counts=_table_counts(text, _ASSERTIONS_ROW),
        requests=_table_counts(text, _REQUESTS_ROW),
        duration_ms=duration,
        defects=tuple(
            Defect(
                type=TEXT_DEFECT_TYPE,
                name=m.group(1).strip(),
                severity=Severity.HIGH,
                category=Category.API,
            )
            for m in lines_matching(text, _FAILURE)
        ),
        source="text",
    )
