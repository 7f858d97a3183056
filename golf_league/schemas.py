# golf_league/schemas.py
from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

# A stored week value: score, digit string (form posts), or ""/None for "no round"
ScoreValue = Annotated[int, Field(ge=0)] | Annotated[str, Field(pattern=r"^\s*\d*\s*$")] | None


# -----------------------
# Golfers
# -----------------------
class GolferCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    scores: dict[str, ScoreValue] = Field(default_factory=dict, description="date-key -> score")


class GolferStatsOut(BaseModel):
    handicap: int
    avg_score: float
    trend: list[float]
    scores: list[int]
    dates: list[str]
    x_values: list[int]


class MetadataOut(BaseModel):
    names: list[str | None]
    years: list[int]
    weeks: list[int]
    years_to_weeks: dict[int, list[int]]
    latest_year: int | str
    latest_week: int | str


# -----------------------
# Weeks / Scores
# -----------------------
class WeekCreate(BaseModel):
    year: int = Field(..., ge=1000, le=9999)
    week: int = Field(..., ge=1)


class WeekFieldsIn(BaseModel):
    fields: dict[str, ScoreValue] = Field(..., description="date-key -> value set on every golfer")


class ScoreUpdate(BaseModel):
    name: str
    date: str = Field(..., description='date-key, e.g. "2021 Wk 3"')
    score: int | None = Field(None, ge=0)


class WriteResultOut(BaseModel):
    acknowledged: bool
    matched_count: int
    modified_count: int
    inserted_name: str | None = None
    key: str | None = None
    keys: list[str] | None = None


# -----------------------
# Reports
# -----------------------
class ReportEntryOut(BaseModel):
    golfer_name: str
    flight: str
    gross: int
    net: int
    handicap: int
    ytd_mean: float
    handicap_round_count: int


class ReportSummaryOut(BaseModel):
    a_winner: str
    b_winner: str
    low_net: str
    mean_score: str
    golfer_count: int


class LeagueReportOut(BaseModel):
    year: int | None = None
    week: int | None = None
    flight_map: dict[str, ReportEntryOut]
    summary: ReportSummaryOut
