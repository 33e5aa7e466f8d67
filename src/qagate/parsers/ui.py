"""UI (Mocha + Selenium) report parser."""

import re

from qagate.parsers.patterns import first_int, lines_matching
from qagate.results.models import Category, Counts, Defect, Layer, NormalizedResult, Severity

DEFECT_TYPE = "UI Test Failure"

_PASSING = re.compile(r"(\d+) passing")
_FAILING = re.compile(r"(\d+) failing")
# "1m" or "1m 20s", never the "m" of "3880ms"
_MINUTES = re.compile(r"(\d+)m(?!s)(?:\s+(\d+)s)?")
_PASSING_DURATION = re.compile(r"\d+ passing \((\d+)(ms|s)\)")
_FAILURE_BLOCK = re.compile(r"\d+\)\s+(.+?):\s*\n\s+(.+)")


def parse_ui(text: str | None) -> NormalizedResult | None:
    """Parse Mocha spec reporter output.

    Args:
        text: Mocha output, or None if the layer did not run

    Returns:
        NormalizedResult for the UI layer, or None if text is None
    """
    if text is None:
        return None

    return NormalizedResult(
        layer=Layer.UI,
        counts=Counts.reconcile(
            passed=first_int(text, _PASSING) or 0,
            failed=first_int(text, _FAILING) or 0,
        ),
        duration_ms=_duration_ms(text),
        defects=tuple(
            Defect(
                type=DEFECT_TYPE,
                name=m.group(1).strip(),
                severity=Severity.CRITICAL,
                category=Category.UI,
                details=m.group(2).strip(),
            )
            for m in lines_matching(text, _FAILURE_BLOCK)
        ),
    )


def _duration_ms(text: str) -> float:
    match = _MINUTES.search(text)
    if match:
        minutes = int(match.group(1))
        seconds = int(match.group(2) or 0)
        return float((minutes * 60 + seconds) * 1000)

    match = _PASSING_DURATION.search(text)
    if match:
        value = int(match.group(1))
        return float(value if match.group(2) == "ms" else value * 1000)
    return 0.0
