# golf_league/config.py
from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field

from .logic.stats import HandicapRules


class Settings(BaseModel):
    database_url: str = Field("sqlite:///./golf_league.db", description="SQLAlchemy database URL.")
    log_level: str = Field("INFO", description="Root log level name.")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], description="Allowed browser origins.")
    handicap: HandicapRules = Field(default_factory=HandicapRules)

    @classmethod
    def from_env(cls) -> "Settings":
        rules = HandicapRules()
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            database_url=os.getenv("DATABASE_URL", "sqlite:///./golf_league.db"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()] or ["*"],
            handicap=HandicapRules(
                window=int(os.getenv("HANDICAP_WINDOW", rules.window)),
                counted=int(os.getenv("HANDICAP_COUNTED", rules.counted)),
                par=float(os.getenv("HANDICAP_PAR", rules.par)),
                allowance=float(os.getenv("HANDICAP_ALLOWANCE", rules.allowance)),
            ),
        )


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read from the environment once."""
    return Settings.from_env()
