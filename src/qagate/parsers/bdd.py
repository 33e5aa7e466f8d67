"""BDD (Cucumber) report parser."""

import re

from qagate.parsers.patterns import lines_matching, parse_tally, seconds_to_ms
from qagate.results.models import Category, Counts, Defect, Layer, NormalizedResult, Severity

DEFECT_TYPE = "BDD Scenario Failure"

_SCENARIOS = re.compile(r"(\d+) scenarios? \(([^)]*)\)")
_STEPS = re.compile(r"(\d+) steps? \(([^)]*)\)")
_DURATION = re.compile(r"(\d+)m([\d.]+)s")
_FAILURE = re.compile(r"✖ (.+)")


def parse_bdd(text: str | None) -> NormalizedResult | None:
    """Parse a Cucumber summary.

    Layer counts are scenario counts; step counts are kept alongside.

    Args:
        text: Cucumber output, or None if the layer did not run

    Returns:
        NormalizedResult for the BDD layer, or None if text is None
    """
    if text is None:
        return None

    return NormalizedResult(
        layer=Layer.BDD,
        counts=_summary_counts(text, _SCENARIOS) or Counts(),
        steps=_summary_counts(text, _STEPS),
        duration_ms=_duration_ms(text),
        defects=tuple(
            Defect(
                type=DEFECT_TYPE,
                name=m.group(1).strip(),
                severity=Severity.HIGH,
                category=Category.INTEGRATION,
            )
            for m in lines_matching(text, _FAILURE)
        ),
    )


def _summary_counts(text: str, pattern: re.Pattern[str]) -> Counts | None:
    """Counts from a ``N scenarios (P passed, F failed)`` sentence."""
    match = pattern.search(text)
    if not match:
        return None
    passed, failed = parse_tally(match.group(2))
    return Counts.reconcile(passed=passed or 0, failed=failed or 0)


def _duration_ms(text: str) -> float:
    """Milliseconds from an ``MmS.FFFs`` token, 0.0 if absent."""
    match = _DURATION.search(text)
    if not match:
        return 0.0
    return int(match.group(1)) * 60_000 + seconds_to_ms(match.group(2))
