# golf_league/logic/stats.py
from __future__ import annotations

import math
from typing import Protocol, Sequence

from pydantic import BaseModel, Field

__all__ = [
    "HandicapRules",
    "HandicapStrategy",
    "LeagueHandicap",
    "average",
    "handicap",
    "round_half_up",
    "trend",
]


def round_half_up(x: float) -> int:
    """Round .5 away from negative infinity, like JavaScript's Math.round."""
    return int(math.floor(x + 0.5))


def average(scores: Sequence[int]) -> float:
    """Arithmetic mean; 0.0 for no scores."""
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def trend(scores: Sequence[int]) -> list[float]:
    """
    Least-squares line through (i, scores[i]) for i = 0..n-1.
    Returns [slope, intercept]; [0, 0] for no scores and [0, score] for one.
    """
    n = len(scores)
    if n == 0:
        return [0.0, 0.0]

    sum_x = n * (n - 1) / 2
    sum_y = float(sum(scores))
    sum_xy = float(sum(i * y for i, y in enumerate(scores)))
    sum_xx = (n - 1) * n * (2 * n - 1) / 6

    denom = n * sum_xx - sum_x * sum_x
    if denom == 0:
        return [0.0, sum_y / n]

    slope = (n * sum_xy - sum_x * sum_y) / denom
    intercept = (sum_y - slope * sum_x) / n
    return [slope, intercept]


# ---------------------------------------------------------------------------
# Handicap
# ---------------------------------------------------------------------------


class HandicapRules(BaseModel):
    window: int = Field(10, ge=1, description="Most recent rounds considered.")
    counted: int = Field(5, ge=1, description="Lowest rounds averaged within the window.")
    par: float = Field(36.0, description="Baseline score (9-hole par).")
    allowance: float = Field(0.8, gt=0, description="Fraction of the differential awarded.")


class HandicapStrategy(Protocol):
    def __call__(self, scores: Sequence[int]) -> int: ...


class LeagueHandicap:
    """
    Best-`counted`-of-last-`window` league handicap:
      round_half_up((mean(lowest counted of last window) - par) * allowance)
    Scores must be in chronological order. Below-par golfers get a negative handicap.
    """

    def __init__(self, rules: HandicapRules | None = None) -> None:
        self.rules = rules or HandicapRules()

    def __call__(self, scores: Sequence[int]) -> int:
        if not scores:
            return 0
        recent = list(scores)[-self.rules.window :]
        best = sorted(recent)[: self.rules.counted]
        return round_half_up((average(best) - self.rules.par) * self.rules.allowance)


DEFAULT_HANDICAP = LeagueHandicap()


def handicap(scores: Sequence[int], strategy: HandicapStrategy | None = None) -> int:
    return (strategy or DEFAULT_HANDICAP)(scores)
