# golf_league/deps.py
from fastapi import Depends
from sqlalchemy.orm import Session

from .config import get_settings
from .db import get_db
from .logic.stats import HandicapStrategy, LeagueHandicap
from .services.store import GolferStore, SqlGolferStore


def get_store(db: Session = Depends(get_db)) -> GolferStore:
    """Dependency: storage collaborator bound to the request's session."""
    return SqlGolferStore(db)


def get_handicap_strategy() -> HandicapStrategy:
    """Dependency: handicap formula from settings (overridable in tests)."""
    return LeagueHandicap(get_settings().handicap)
