# golf_league/logic/metadata.py
from __future__ import annotations

from collections import defaultdict
from typing import Any, Iterable

from .date_keys import parse_date_key
from .records import NAMES_KEY, GolferRecord


def metadata(records: Iterable[GolferRecord]) -> dict[str, Any]:
    """
    Scan every record for names and week keys.

    Shape:
    {
      names: [...]                   # alphabetical, duplicates kept, unnamed records as None (last)
      years: [2022, 2021, ...]       # descending
      weeks: [1, 2, ...]             # ascending, across all years
      years_to_weeks: {year: [weeks ascending]},
      latest_year: int | "",
      latest_week: int | "",
    }
    """
    names: list[str | None] = []
    by_year: dict[int, set[int]] = defaultdict(set)

    for rec in records:
        names.append(rec.get(NAMES_KEY))
        for key in rec.keys():
            dk = parse_date_key(key)
            if dk is not None:
                by_year[dk.year].add(dk.week)

    names.sort(key=lambda n: (n is None, "" if n is None else str(n)))
    years = sorted(by_year.keys(), reverse=True)
    weeks = sorted({w for ws in by_year.values() for w in ws})
    years_to_weeks = {y: sorted(by_year[y]) for y in years}

    latest_year: int | str = years[0] if years else ""
    latest_week: int | str = years_to_weeks[latest_year][-1] if years and years_to_weeks[latest_year] else ""

    return {
        "names": names,
        "years": years,
        "weeks": weeks,
        "years_to_weeks": years_to_weeks,
        "latest_year": latest_year,
        "latest_week": latest_week,
    }
