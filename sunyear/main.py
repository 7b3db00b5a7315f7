"""
FastAPI entrypoint.

This file focuses on:
- routing
- request validation (query parameter bounds)
- wiring together the gazetteer store + daylight calculator
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import FastAPI, Depends, Query

from .settings import settings
from .db import Base, engine, SessionLocal
from . import models  # noqa: F401  (registers the cities table on Base.metadata)
from .schemas import GeoPoint, DaylightEventsOut, CityOut
from .series import MIN_YEAR, MAX_YEAR, generate
from .gazetteer import GazetteerIndex, GazetteerStore

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# The importer normally creates this; an empty table just means no matches.
Base.metadata.create_all(bind=engine)

gazetteer = GazetteerStore(settings.preferred_country_code)


@asynccontextmanager
async def lifespan(app: FastAPI):
    gazetteer.reload(SessionLocal)
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)


def get_gazetteer() -> GazetteerIndex:
    """Index published at the time the request starts."""
    return gazetteer.current


def current_year() -> int:
    return datetime.now(timezone.utc).year


# -------------------------
# Daylight API
# -------------------------

@app.get("/api/daylightdata", status_code=201, response_model=List[DaylightEventsOut])
def api_daylight_data(
    lat: float = Query(..., ge=-90.0, le=90.0, allow_inf_nan=False),
    lon: float = Query(..., ge=-180.0, le=180.0, allow_inf_nan=False),
    year: Optional[int] = Query(None, ge=MIN_YEAR, le=MAX_YEAR),
):
    """
    Sun events for every day of a year at (lat, lon).
    Defaults to the current UTC year when `year` is omitted.
    """
    point = GeoPoint(latitude=lat, longitude=lon)
    target_year = year if year is not None else current_year()
    series = generate(point, target_year)
    logger.debug("Computed %d days for %s in %d", len(series), point, target_year)
    return series


# -------------------------
# Gazetteer API
# -------------------------

@app.get("/api/search", response_model=List[CityOut])
def api_search(
    query: Optional[str] = None,
    limit: int = Query(settings.search_default_limit, ge=0),
    index: GazetteerIndex = Depends(get_gazetteer),
):
    """Prefix search on city name; short or empty queries return []."""
    return index.search(query, limit)


@app.get("/api/health")
def api_health(index: GazetteerIndex = Depends(get_gazetteer)):
    """Liveness plus the size of the published gazetteer."""
    return {"ok": True, "cities": len(index)}
