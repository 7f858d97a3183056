# golf_league/logic/report.py
from __future__ import annotations

import math
from typing import Any, Iterable, TypedDict

from .date_keys import DateKey
from .records import GolferRecord, dated_entries, golfer_name
from .stats import HandicapStrategy, average, handicap

FLIGHT_A = "A"
FLIGHT_B = "B"
PLACEHOLDER = "?"


class ReportEntry(TypedDict):
    golfer_name: str
    flight: str
    gross: int
    net: int
    handicap: int
    ytd_mean: float
    handicap_round_count: int


def _entry_for_week(
    record: GolferRecord, target: DateKey, strategy: HandicapStrategy | None
) -> ReportEntry | None:
    """
    Score one golfer for the target week; None when they did not post a round.
    Handicap uses every round strictly before the target week; the YTD mean
    covers the target year up to and including the target week.
    """
    handicap_scores: list[int] = []
    ytd_scores: list[int] = []
    gross: int | None = None

    for entry in dated_entries(record):
        if entry.score is None:
            continue
        if entry.date < target:
            handicap_scores.append(entry.score)
            if entry.date.year == target.year:
                ytd_scores.append(entry.score)
        elif entry.date == target and gross is None:
            gross = entry.score
            ytd_scores.append(entry.score)

    if gross is None:
        return None

    hcp = handicap(handicap_scores, strategy)
    return {
        "golfer_name": golfer_name(record),
        "flight": FLIGHT_B,
        "gross": gross,
        "net": gross - hcp,
        "handicap": hcp,
        "ytd_mean": average(ytd_scores),
        "handicap_round_count": len(handicap_scores),
    }


def assign_flights(entries: list[ReportEntry]) -> None:
    """Lowest handicaps (first ceil(n/2), ties in input order) play in flight A."""
    ranked = sorted(entries, key=lambda e: e["handicap"])
    cut = math.ceil(len(ranked) / 2)
    for i, e in enumerate(ranked):
        e["flight"] = FLIGHT_A if i < cut else FLIGHT_B


def _lowest_net(entries: Iterable[ReportEntry]) -> ReportEntry | None:
    # strict < keeps the first golfer on a tie
    best: ReportEntry | None = None
    for e in entries:
        if best is None or e["net"] < best["net"]:
            best = e
    return best


def summarize(flight_map: dict[str, ReportEntry]) -> dict[str, Any]:
    entries = list(flight_map.values())
    a_best = _lowest_net(e for e in entries if e["flight"] == FLIGHT_A)
    b_best = _lowest_net(e for e in entries if e["flight"] == FLIGHT_B)
    low = _lowest_net(entries)

    return {
        "a_winner": a_best["golfer_name"] if a_best else PLACEHOLDER,
        "b_winner": b_best["golfer_name"] if b_best else PLACEHOLDER,
        "low_net": f"{low['golfer_name']} ({low['net']:.2f})" if low else PLACEHOLDER,
        "mean_score": f"{average([e['gross'] for e in entries]):.1f}" if entries else PLACEHOLDER,
        "golfer_count": len(entries),
    }


def league_report(
    records: Iterable[GolferRecord],
    year: int,
    week: int,
    strategy: HandicapStrategy | None = None,
) -> dict[str, Any]:
    """
    Weekly league report for (year, week).

    Returns:
    {
      flight_map: { golfer_name: {golfer_name, flight, gross, net, handicap, ytd_mean, handicap_round_count} },
      summary: { a_winner, b_winner, low_net, mean_score, golfer_count }
    }
    Golfers without a score that week are left out. flight_map keeps record order.
    """
    target = DateKey(year, week)

    flight_map: dict[str, ReportEntry] = {}
    for rec in records:
        entry = _entry_for_week(rec, target, strategy)
        if entry is not None:
            flight_map[entry["golfer_name"]] = entry

    assign_flights(list(flight_map.values()))

    return {"flight_map": flight_map, "summary": summarize(flight_map)}
