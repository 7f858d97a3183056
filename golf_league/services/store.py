# golf_league/services/store.py
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Protocol, TypedDict

from sqlalchemy.orm import Session

from .. import models
from ..logic.records import NAMES_KEY, GolferRecord

__all__ = ["WriteResult", "GolferStore", "SqlGolferStore"]

logger = logging.getLogger("golf_league.store")


class WriteResult(TypedDict):
    acknowledged: bool
    matched_count: int
    modified_count: int
    inserted_name: str | None


def _result(matched: int = 0, modified: int = 0, inserted: str | None = None) -> WriteResult:
    return {"acknowledged": True, "matched_count": matched, "modified_count": modified, "inserted_name": inserted}


class GolferStore(Protocol):
    """Storage the routers hand to the stats engine: full-record reads and week-field writes."""

    def fetch_all_records(self) -> list[dict[str, Any]]: ...

    def fetch_one_record(self, name: str) -> dict[str, Any] | None: ...

    def apply_bulk_field_set(self, fields: Mapping[str, Any]) -> WriteResult: ...

    def apply_bulk_field_unset(self, field_names: Iterable[str]) -> WriteResult: ...

    def insert_record(self, record: GolferRecord) -> WriteResult: ...

    def update_single_field(self, name: str, date_key: str, score: int | None) -> WriteResult: ...


def _to_record(g: models.Golfer) -> dict[str, Any]:
    # fresh dict: callers never touch ORM state
    return {NAMES_KEY: g.name, **(g.scores or {})}


class SqlGolferStore:
    """GolferStore over the `golfers` table (one row per golfer, scores in JSON)."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _all(self) -> list[models.Golfer]:
        return self.db.query(models.Golfer).order_by(models.Golfer.id.asc()).all()

    def _by_name(self, name: str) -> models.Golfer | None:
        return self.db.query(models.Golfer).filter(models.Golfer.name == name).first()

    # ---------- reads ----------

    def fetch_all_records(self) -> list[dict[str, Any]]:
        return [_to_record(g) for g in self._all()]

    def fetch_one_record(self, name: str) -> dict[str, Any] | None:
        g = self._by_name(name)
        return _to_record(g) if g else None

    # ---------- writes ----------

    def apply_bulk_field_set(self, fields: Mapping[str, Any]) -> WriteResult:
        if NAMES_KEY in fields:
            raise ValueError(f"'{NAMES_KEY}' cannot be bulk-set")

        golfers = self._all()
        modified = 0
        for g in golfers:
            current = dict(g.scores or {})
            updated = {**current, **fields}
            if updated != current:
                # reassign so SQLAlchemy sees the JSON change
                g.scores = updated
                modified += 1
        self.db.commit()

        logger.info("bulk set fields=%s matched=%d modified=%d", sorted(fields), len(golfers), modified)
        return _result(matched=len(golfers), modified=modified)

    def apply_bulk_field_unset(self, field_names: Iterable[str]) -> WriteResult:
        names = set(field_names)
        golfers = self._all()
        modified = 0
        for g in golfers:
            current = dict(g.scores or {})
            updated = {k: v for k, v in current.items() if k not in names}
            if len(updated) != len(current):
                g.scores = updated
                modified += 1
        self.db.commit()

        logger.info("bulk unset fields=%s matched=%d modified=%d", sorted(names), len(golfers), modified)
        return _result(matched=len(golfers), modified=modified)

    def insert_record(self, record: GolferRecord) -> WriteResult:
        name = record.get(NAMES_KEY)
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Record needs a non-empty '{NAMES_KEY}'")
        name = name.strip()
        if self._by_name(name):
            raise ValueError(f"Golfer '{name}' already exists")

        scores = {k: v for k, v in record.items() if k != NAMES_KEY}
        self.db.add(models.Golfer(name=name, scores=scores))
        self.db.commit()

        logger.info("inserted golfer name=%s weeks=%d", name, len(scores))
        return _result(inserted=name)

    def update_single_field(self, name: str, date_key: str, score: int | None) -> WriteResult:
        g = self._by_name(name)
        if not g:
            logger.info("update skipped, unknown golfer name=%s", name)
            return _result()

        current = dict(g.scores or {})
        modified = 0
        if date_key not in current or current[date_key] != score:
            current[date_key] = score
            g.scores = current
            modified = 1
        self.db.commit()

        logger.info("updated golfer name=%s key=%s score=%s", name, date_key, score)
        return _result(matched=1, modified=modified)
