# golf_league/logic/records.py
from __future__ import annotations

from typing import Any, Iterable, Mapping, NamedTuple

from ..utils.num import to_score
from .date_keys import DateKey, format_date_key, key_sort_key, parse_date_key

# A golfer record is the stored document: {"Names": "Al", "2021 Wk 1": 90, ...}
GolferRecord = Mapping[str, Any]

NAMES_KEY = "Names"


class DatedScore(NamedTuple):
    key: str  # key as stored, e.g. "2021 WK 3"
    date: DateKey
    score: int | None  # None = no round that week


def golfer_name(record: GolferRecord) -> str | None:
    return record.get(NAMES_KEY)


def dated_entries(record: GolferRecord) -> list[DatedScore]:
    """
    Week entries of a record in chronological order.
    Keys that are not week keys are skipped; missing scores are kept as None.
    """
    out: list[DatedScore] = []
    for key in sorted(record.keys(), key=key_sort_key):
        dk = parse_date_key(key)
        if dk is None:
            continue
        out.append(DatedScore(key, dk, to_score(record[key])))
    return out


def week_keys(records: Iterable[GolferRecord], date: DateKey) -> list[str]:
    """Every stored spelling of one week across the records, in first-seen order."""
    seen: dict[str, None] = {}
    for rec in records:
        for key in rec.keys():
            if parse_date_key(key) == date:
                seen.setdefault(key, None)
    return list(seen)


def resolve_week_key(records: Iterable[GolferRecord], date: DateKey) -> str:
    """
    Key to write a week under: the spelling already on file, else the canonical one.
    Keeps a record at one value per week whatever casing the caller posted.
    """
    existing = week_keys(records, date)
    return existing[0] if existing else format_date_key(date.year, date.week)
