"""Small named pattern matchers shared by the format parsers.

Each helper returns a typed optional: None means the pattern was not
found, never an error.
"""

import re
from decimal import Decimal


def first_int(text: str, *patterns: re.Pattern[str]) -> int | None:
    """Return group 1 of the first pattern that matches, as int."""
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return int(match.group(1))
    return None


def first_float(text: str, *patterns: re.Pattern[str]) -> float | None:
    """Return group 1 of the first pattern that matches, as float."""
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return float(match.group(1))
    return None


def sum_ints(text: str, pattern: re.Pattern[str]) -> int | None:
    """Sum group 1 over every match of pattern, or None if nothing matched."""
    values = [int(m.group(1)) for m in pattern.finditer(text)]
    if not values:
        return None
    return sum(values)


def seconds_to_ms(seconds: str) -> float:
    """Convert a decimal seconds token to whole milliseconds, rounding down."""
    return float(int(Decimal(seconds) * 1000))


_TALLY_ITEM = re.compile(r"(\d+) (passed|failed)")


def parse_tally(tally: str) -> tuple[int | None, int | None]:
    """Read passed/failed from a tally like '3 passed, 1 failed, 2 skipped'.

    Statuses other than passed and failed are ignored; the items may come
    in any order.

    Returns:
        Tuple of (passed, failed), each None when missing
    """
    found: dict[str, int] = {}
    for match in _TALLY_ITEM.finditer(tally):
        found.setdefault(match.group(2), int(match.group(1)))
    return found.get("passed"), found.get("failed")


def lines_matching(text: str, pattern: re.Pattern[str]) -> list[re.Match[str]]:
    """All matches of pattern, in order of occurrence."""
    return list(pattern.finditer(text))
