# golf_league/logic/date_keys.py
from __future__ import annotations

import re
from typing import Any, NamedTuple

__all__ = [
    "DateKey",
    "parse_date_key",
    "key_sort_key",
    "format_date_key",
]

# ---------------------------------------------------------------------------
# Week keys
# - Stored as "YYYY <marker> <week>", e.g. "2021 Wk 3"
# - Marker casing drifted over the seasons ("WK" up to 2020, "Wk" after) and
#   any two ASCII word characters are accepted on read
# ---------------------------------------------------------------------------

_DATE_KEY_RE = re.compile(r"(\d{4}) (\w{2}) (\d+)", re.ASCII)

# Last season written with the upper-case marker
LAST_UPPER_MARKER_YEAR = 2020


class DateKey(NamedTuple):
    year: int
    week: int

    @property
    def ordinal(self) -> int:
        """Scalar x-axis value; assumes fewer than 100 weeks per year."""
        return self.year * 100 + self.week


def parse_date_key(key: Any) -> DateKey | None:
    """
    Parse '2021 Wk 3' -> DateKey(2021, 3). Anything else (e.g. 'Names') -> None.
    """
    if not isinstance(key, str):
        return None
    m = _DATE_KEY_RE.fullmatch(key)
    if not m:
        return None
    return DateKey(int(m.group(1)), int(m.group(3)))


def key_sort_key(key: Any) -> tuple[int, int, int]:
    """
    Sort key for a mixed list of record keys: week keys by (year, week),
    every other key after them (Python's sort keeps those in input order).
    """
    dk = parse_date_key(key)
    if dk is None:
        return (1, 0, 0)
    return (0, dk.year, dk.week)


def format_date_key(year: int, week: int) -> str:
    """
    Canonical key for writing a new week.
    Example: format_date_key(2020, 3) -> "2020 WK 3"; format_date_key(2021, 3) -> "2021 Wk 3"
    """
    marker = "WK" if year <= LAST_UPPER_MARKER_YEAR else "Wk"
    return f"{year} {marker} {week}"
