# golf_league/routers/golfers.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from .. import schemas
from ..deps import get_handicap_strategy, get_store
from ..logic.date_keys import DateKey, format_date_key, parse_date_key
from ..logic.history import HistoryFilter, golfer_stats
from ..logic.metadata import metadata
from ..logic.records import NAMES_KEY
from ..logic.stats import HandicapStrategy
from ..services.store import GolferStore

router = APIRouter(prefix="/golfers", tags=["golfers"])


@router.get("/")
def list_golfers(store: GolferStore = Depends(get_store)) -> list[dict[str, Any]]:
    """Every stored golfer document: {"Names": ..., "<year> Wk <n>": score, ...}."""
    return store.fetch_all_records()


@router.get("/metadata", response_model=schemas.MetadataOut)
def read_metadata(store: GolferStore = Depends(get_store)):
    """Names, years (desc), weeks (asc), year -> weeks and the latest played week."""
    return metadata(store.fetch_all_records())


@router.get("/{name}")
def read_golfer(name: str, store: GolferStore = Depends(get_store)) -> dict[str, Any]:
    rec = store.fetch_one_record(name)
    if rec is None:
        raise HTTPException(status_code=404, detail="Golfer not found")
    return rec


@router.get("/{name}/stats", response_model=schemas.GolferStatsOut)
def read_golfer_stats(
    name: str,
    start_year: int | None = Query(None),
    start_week: int | None = Query(None),
    end_year: int | None = Query(None),
    end_week: int | None = Query(None),
    store: GolferStore = Depends(get_store),
    strategy: HandicapStrategy = Depends(get_handicap_strategy),
):
    """
    Handicap, average, trend and the chronological score series for one golfer.
    Optional inclusive (year, week) bounds clip the series.
    """
    rec = store.fetch_one_record(name)
    if rec is None:
        raise HTTPException(status_code=404, detail="Golfer not found")

    window = HistoryFilter(start_year=start_year, start_week=start_week, end_year=end_year, end_week=end_week)
    return golfer_stats(rec, window, strategy)


@router.post("/", response_model=schemas.WriteResultOut)
def create_golfer(body: schemas.GolferCreate, store: GolferStore = Depends(get_store)):
    """Add a golfer; week keys are stored in their canonical spelling, one per week."""
    record: dict[str, Any] = {NAMES_KEY: body.name}
    seen: set[DateKey] = set()
    for key, value in body.scores.items():
        if key == NAMES_KEY:
            raise HTTPException(status_code=422, detail=f"'{NAMES_KEY}' is not a week key")
        date = parse_date_key(key)
        if date is None:
            record[key] = value
            continue
        if date in seen:
            raise HTTPException(status_code=422, detail=f"Week posted twice: '{key}'")
        seen.add(date)
        record[format_date_key(date.year, date.week)] = value

    try:
        return store.insert_record(record)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
