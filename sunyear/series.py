"""
Year-long daylight series.

One DaylightEvents per calendar day, January 1 to December 31, ascending.
The year is always passed in; nothing here looks at the clock.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Any, Iterator, List

from .schemas import GeoPoint
from .solar import DaylightEvents, compute

# Range over which the low-precision solar equations stay within a minute or so
MIN_YEAR = 1000
MAX_YEAR = 3000


def days_in_year(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


def _coerce_point(point: Any) -> GeoPoint:
    """Accept a GeoPoint, a {latitude, longitude} mapping or a (lat, lon) pair."""
    if isinstance(point, GeoPoint):
        return point
    if isinstance(point, dict):
        return GeoPoint(**point)
    lat, lon = point
    return GeoPoint(latitude=lat, longitude=lon)


def _validate(point: Any, year: int) -> GeoPoint:
    geo = _coerce_point(point)
    if isinstance(year, bool) or not isinstance(year, int):
        raise ValueError(f"Year must be an integer, got {year!r}.")
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise ValueError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}.")
    return geo


def _days(geo: GeoPoint, year: int) -> Iterator[DaylightEvents]:
    day = date(year, 1, 1)
    for offset in range(days_in_year(year)):
        yield compute(geo, day + timedelta(days=offset))


def iter_year(point: Any, year: int) -> Iterator[DaylightEvents]:
    """
    Lazily yield each day of `year`.

    Validation happens on the call, not on first iteration, so a bad
    point or year fails before anything is produced.
    """
    geo = _validate(point, year)
    return _days(geo, year)


def generate(point: Any, year: int) -> List[DaylightEvents]:
    """All 365/366 days of `year` at `point`, ordered by date."""
    return list(iter_year(point, year))
