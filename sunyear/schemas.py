"""
Pydantic schemas.

Why:
- Validation (coordinates in range, no NaN sneaking into the trig)
- Defines the contract of our REST endpoints
"""

from enum import Enum
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GeoPoint(BaseModel):
    """
    A point on the globe, east-positive longitude.

    Out-of-range values are rejected at construction, never clamped.
    """
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90.0, le=90.0, allow_inf_nan=False)
    longitude: float = Field(..., ge=-180.0, le=180.0, allow_inf_nan=False)


class DaylightKind(str, Enum):
    """Whether the sun crossed the horizon on a given day."""
    NORMAL = "normal"
    POLAR_DAY = "polar_day"
    POLAR_NIGHT = "polar_night"


class DaylightEventsOut(BaseModel):
    """
    One day of sun events as returned by /api/daylightdata.

    Timestamps are UTC. An event is null when the sun never reaches its
    threshold altitude on that day.
    """
    model_config = ConfigDict(from_attributes=True)

    date: date
    kind: DaylightKind
    solar_noon: datetime
    sunrise: Optional[datetime] = None
    sunset: Optional[datetime] = None
    civil_twilight_begin: Optional[datetime] = None
    civil_twilight_end: Optional[datetime] = None
    nautical_twilight_begin: Optional[datetime] = None
    nautical_twilight_end: Optional[datetime] = None
    astronomical_twilight_begin: Optional[datetime] = None
    astronomical_twilight_end: Optional[datetime] = None
    golden_hour_end: Optional[datetime] = None
    golden_hour_begin: Optional[datetime] = None
    day_length: int


class CityOut(BaseModel):
    """City record returned from /api/search."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str = Field(..., max_length=100)
    country: str = Field(..., min_length=2, max_length=2)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    population: int = 0
    region: Optional[str] = Field(None, max_length=100)
