# golf_league/logic/history.py
from __future__ import annotations

from typing import TypedDict

from pydantic import BaseModel

from .records import GolferRecord, dated_entries
from .stats import HandicapStrategy, average, handicap, trend


class HistoryFilter(BaseModel):
    """Inclusive (year, week) window. A bound is active when its year is set."""

    start_year: int | None = None
    start_week: int | None = None
    end_year: int | None = None
    end_week: int | None = None

    def start_x(self) -> int | None:
        if self.start_year is None:
            return None
        return self.start_year * 100 + (self.start_week or 0)

    def end_x(self) -> int | None:
        if self.end_year is None:
            return None
        return self.end_year * 100 + (99 if self.end_week is None else self.end_week)


class GolferStats(TypedDict):
    handicap: int
    avg_score: float
    trend: list[float]
    scores: list[int]
    dates: list[str]
    x_values: list[int]


def _empty_stats() -> GolferStats:
    return {"handicap": 0, "avg_score": 0.0, "trend": [0.0, 0.0], "scores": [], "dates": [], "x_values": []}


def golfer_stats(
    record: GolferRecord,
    window: HistoryFilter | None = None,
    strategy: HandicapStrategy | None = None,
) -> GolferStats:
    """
    Chronological score history for one golfer, optionally clipped to a week window,
    with handicap / average / trend over the kept rounds. Weeks without a score are dropped.
    """
    start_x = window.start_x() if window else None
    end_x = window.end_x() if window else None

    scores: list[int] = []
    dates: list[str] = []
    x_values: list[int] = []
    for entry in dated_entries(record):
        x = entry.date.ordinal
        if start_x is not None and x < start_x:
            continue
        if end_x is not None and x > end_x:
            continue
        if entry.score is None:
            continue
        scores.append(entry.score)
        dates.append(entry.key)
        x_values.append(x)

    if not scores:
        return _empty_stats()

    return {
        "handicap": handicap(scores, strategy),
        "avg_score": average(scores),
        "trend": trend(scores),
        "scores": scores,
        "dates": dates,
        "x_values": x_values,
    }
