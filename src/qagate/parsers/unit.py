"""Unit test report parser.

Understands the Node test runner's spec reporter (``ℹ pass 16``) and its
TAP reporter (``# pass 16``), plus text and lcov coverage summaries.
"""

import re

from loguru import logger

from qagate.parsers.patterns import first_float, first_int, lines_matching, sum_ints
from qagate.results.models import Category, Counts, Defect, Layer, NormalizedResult, Severity

DEFECT_TYPE = "Unit Test Failure"

_PASS = (re.compile(r"ℹ pass (\d+)"), re.compile(r"# pass (\d+)"))
_FAIL = (re.compile(r"ℹ fail (\d+)"), re.compile(r"# fail (\d+)"))
_TESTS = (re.compile(r"ℹ tests (\d+)"), re.compile(r"# tests (\d+)"))
_DURATION = (re.compile(r"ℹ duration_ms ([\d.]+)"), re.compile(r"# duration_ms ([\d.]+)"))

_COVERAGE_ROW = re.compile(r"All files\s+\|\s+([\d.]+)")
_LCOV_TOTAL = re.compile(r"^LF:(\d+)", re.MULTILINE)
_LCOV_HIT = re.compile(r"^LH:(\d+)", re.MULTILINE)

_TAP_FAILURE = re.compile(r"not ok \d+ - (.+)")
_SPEC_FAILURE = re.compile(r"✖ (.+?) \((\d+\.?\d*)ms\)")


def parse_unit(text: str | None, lcov: str | None = None) -> NormalizedResult | None:
    """Parse a unit test report.

    Args:
        text: Unit test runner output, or None if the layer did not run
        lcov: Optional lcov.info contents used when the report has no
            coverage table

    Returns:
        NormalizedResult for the unit layer, or None if text is None
    """
    if text is None:
        return None

    failed = first_int(text, *_FAIL)
    counts = Counts.reconcile(
        passed=first_int(text, *_PASS),
        failed=failed,
        total=first_int(text, *_TESTS),
    )

    coverage = coverage_from_table(text)
    if coverage is None and lcov is not None:
        coverage = coverage_from_lcov(lcov)

    # A report that explicitly counts zero failures has no defects.
    defects = [] if failed == 0 else extract_defects(text)

    return NormalizedResult(
        layer=Layer.UNIT,
        counts=counts,
        duration_ms=first_float(text, *_DURATION) or 0.0,
        coverage_percent=coverage,
        coverage_details=coverage_table(text),
        defects=tuple(defects),
    )


def coverage_from_table(text: str) -> float | None:
    """Line coverage from an ``All files | P`` summary row."""
    coverage = first_float(text, _COVERAGE_ROW)
    if coverage is None:
        return None
    return min(coverage, 100.0)


def coverage_from_lcov(lcov: str) -> float | None:
    """Line coverage summed over every lcov record.

    Returns:
        hit / total * 100, or None when no lines were instrumented
    """
    total = sum_ints(lcov, _LCOV_TOTAL)
    hit = sum_ints(lcov, _LCOV_HIT)
    if not total or hit is None:
        logger.debug("lcov data has no instrumented lines")
        return None

    logger.debug(f"lcov totals: {total} lines, {hit} hit")
    return min(hit / total * 100, 100.0)


def coverage_table(text: str) -> str | None:
    """Extract the text coverage table surrounding the ``All files`` row."""
    lines = text.splitlines()
    anchor = next((i for i, line in enumerate(lines) if _COVERAGE_ROW.search(line)), None)
    if anchor is None:
        return None

    def in_table(line: str) -> bool:
        return "|" in line

    start = anchor
    while start > 0 and in_table(lines[start - 1]):
        start -= 1
    end = anchor
    while end + 1 < len(lines) and in_table(lines[end + 1]):
        end += 1
    return "\n".join(lines[start : end + 1])


def extract_defects(text: str) -> list[Defect]:
    """One defect per failing-test marker, in order of occurrence."""
    matches = lines_matching(text, _TAP_FAILURE) + lines_matching(text, _SPEC_FAILURE)
    matches.sort(key=lambda m: m.start())
    return [
        Defect(
            type=DEFECT_TYPE,
            name=m.group(1).strip(),
            severity=Severity.HIGH,
            category=Category.FUNCTIONAL,
        )
        for m in matches
    ]
