# golf_league/routers/scores.py
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from .. import schemas
from ..deps import get_store
from ..logic.date_keys import parse_date_key
from ..logic.records import resolve_week_key
from ..services.store import GolferStore

router = APIRouter(prefix="/scores", tags=["scores"])


@router.post("/", response_model=schemas.WriteResultOut)
def update_score(body: schemas.ScoreUpdate, store: GolferStore = Depends(get_store)):
    """
    Post (or clear, with score=null) one golfer's score for one week.
    The week is written under the key the golfer already has for it, else the canonical key.
    """
    date = parse_date_key(body.date)
    if date is None:
        raise HTTPException(status_code=422, detail=f"Invalid week key '{body.date}'. Expected 'YYYY Wk N'.")

    rec = store.fetch_one_record(body.name)
    if rec is None:
        raise HTTPException(status_code=404, detail="Golfer not found")

    key = resolve_week_key([rec], date)
    result = store.update_single_field(body.name, key, body.score)
    return {**result, "key": key}
