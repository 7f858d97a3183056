# golf_league/routers/weeks.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from .. import schemas
from ..deps import get_store
from ..logic.date_keys import DateKey, format_date_key, parse_date_key
from ..logic.records import resolve_week_key, week_keys
from ..services.store import GolferStore

router = APIRouter(prefix="/weeks", tags=["weeks"])


@router.post("/", response_model=schemas.WriteResultOut)
def add_week(body: schemas.WeekCreate, store: GolferStore = Depends(get_store)):
    """
    Open a new league week: every golfer gets an empty score under the canonical key.
    Existing scores for that week are left alone.
    """
    key = format_date_key(body.year, body.week)

    records = store.fetch_all_records()
    if week_keys(records, DateKey(body.year, body.week)):
        # week already open (possibly under the other marker casing)
        return {"acknowledged": True, "matched_count": len(records), "modified_count": 0, "key": key}

    result = store.apply_bulk_field_set({key: None})
    return {**result, "key": key}


@router.post("/fields", response_model=schemas.WriteResultOut)
def set_week_fields(body: schemas.WeekFieldsIn, store: GolferStore = Depends(get_store)):
    """
    Set week fields on every golfer (e.g. {"2023 Wk 5": ""}).
    Each week lands under the spelling already on file (else the canonical one);
    other spellings of that week are dropped so every golfer keeps one value per week.
    """
    dates: dict[DateKey, str] = {}
    for k in body.fields:
        date = parse_date_key(k)
        if date is None:
            raise HTTPException(status_code=422, detail=f"Not a week key: '{k}'")
        if date in dates:
            raise HTTPException(status_code=422, detail=f"Week posted twice: '{dates[date]}' and '{k}'")
        dates[date] = k

    records = store.fetch_all_records()
    fields = {}
    stale: list[str] = []
    for date, posted in dates.items():
        key = resolve_week_key(records, date)
        fields[key] = body.fields[posted]
        stale.extend(k for k in week_keys(records, date) if k != key)

    if stale:
        store.apply_bulk_field_unset(stale)
    result = store.apply_bulk_field_set(fields)
    return {**result, "keys": list(fields)}


@router.delete("/{year}/{week}", response_model=schemas.WriteResultOut)
def remove_week(year: int, week: int, store: GolferStore = Depends(get_store)):
    """Drop a week from every golfer, whatever marker casing it was stored under."""
    keys = sorted(week_keys(store.fetch_all_records(), DateKey(year, week)))
    if not keys:
        raise HTTPException(status_code=404, detail="Week not found")
    result = store.apply_bulk_field_unset(keys)
    return {**result, "keys": keys}
