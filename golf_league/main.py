# golf_league/main.py
from __future__ import annotations

import json
import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from golf_league import models  # noqa: F401  (import registers models with Base)
from golf_league.config import get_settings

# --- DB bootstrapping: create tables at startup ---
from golf_league.db import Base, engine

# Routers
from .routers import golfers, health, reports, scores, weeks

settings = get_settings()

# ---------- App ----------
app = FastAPI(title="Golf League Stats", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------- Minimal structured logging ----------
logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
logger = logging.getLogger("golf_league")


# Create tables once on app start
@app.on_event("startup")
def _create_tables() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("tables ready url=%s", engine.url.render_as_string(hide_password=True))


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id

    duration_ms = (time.perf_counter() - start) * 1000.0
    log_obj = {
        "msg": "request",
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "query": request.url.query or None,
        "status": response.status_code,
        "duration_ms": round(duration_ms, 2),
    }
    logger.info(json.dumps(log_obj, separators=(",", ":")))
    return response


def _include_router_flex(app: FastAPI, module) -> None:
    for attr in ("router", "route"):
        if hasattr(module, attr):
            app.include_router(getattr(module, attr))
            return
    name = getattr(module, "__name__", str(module))
    raise RuntimeError(f"Module {name} does not define `router` or `route`")


# ---------- Include Routers ----------
_include_router_flex(app, health)  # /health
_include_router_flex(app, golfers)  # /golfers
_include_router_flex(app, weeks)  # /weeks
_include_router_flex(app, scores)  # /scores
_include_router_flex(app, reports)  # /reports
