# golf_league/routers/reports.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from .. import schemas
from ..deps import get_handicap_strategy, get_store
from ..logic.metadata import metadata
from ..logic.report import league_report, summarize
from ..logic.stats import HandicapStrategy
from ..services.store import GolferStore

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/latest", response_model=schemas.LeagueReportOut)
def latest_report(
    store: GolferStore = Depends(get_store),
    strategy: HandicapStrategy = Depends(get_handicap_strategy),
):
    """Report for the most recent week on file; empty report when nothing is on file."""
    records = store.fetch_all_records()
    meta = metadata(records)
    year, week = meta["latest_year"], meta["latest_week"]
    if year == "" or week == "":
        return {"year": None, "week": None, "flight_map": {}, "summary": summarize({})}

    return {"year": year, "week": week, **league_report(records, year, week, strategy)}


@router.get("/{year}/{week}", response_model=schemas.LeagueReportOut)
def weekly_report(
    year: int,
    week: int,
    store: GolferStore = Depends(get_store),
    strategy: HandicapStrategy = Depends(get_handicap_strategy),
):
    """
    Flights, gross/net and winners for one league week.
    Golfers without a score that week are not listed.
    """
    report = league_report(store.fetch_all_records(), year, week, strategy)
    return {"year": year, "week": week, **report}
