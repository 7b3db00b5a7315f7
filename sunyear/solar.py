"""
Sun event calculator.

Computes sunrise, sunset, solar noon and the twilight boundaries for one
date at one point, using the NOAA low-precision solar position equations
(Meeus, "Astronomical Algorithms", ch. 25 and 28).

Conventions:
- all times are UTC, rounded to whole seconds
- longitude is east-positive
- an event the sun never reaches that day is None, never a made-up time
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from datetime import date, datetime, time, timedelta, timezone
from typing import Dict, Optional, Tuple

from .schemas import DaylightKind, GeoPoint

# Sun altitude (degrees) that defines each pair of rising/setting events.
GOLDEN_HOUR_ALTITUDE = 6.0
SUNRISE_ALTITUDE = 0.0
CIVIL_TWILIGHT_ALTITUDE = -6.0
NAUTICAL_TWILIGHT_ALTITUDE = -12.0
ASTRONOMICAL_TWILIGHT_ALTITUDE = -18.0

THRESHOLDS: Tuple[Tuple[str, str, float], ...] = (
    ("golden_hour_end", "golden_hour_begin", GOLDEN_HOUR_ALTITUDE),
    ("sunrise", "sunset", SUNRISE_ALTITUDE),
    ("civil_twilight_begin", "civil_twilight_end", CIVIL_TWILIGHT_ALTITUDE),
    ("nautical_twilight_begin", "nautical_twilight_end", NAUTICAL_TWILIGHT_ALTITUDE),
    ("astronomical_twilight_begin", "astronomical_twilight_end", ASTRONOMICAL_TWILIGHT_ALTITUDE),
)

SECONDS_PER_DAY = 86400
MINUTES_PER_DAY = 1440.0

J2000 = 2451545.0
# Julian day of 0001-01-01 00:00 UTC minus its proleptic ordinal (1)
_JD_ORDINAL_OFFSET = 1721424.5


@dataclass(frozen=True)
class DaylightEvents:
    """
    Sun events for one (point, date) pair.

    `kind` only describes the sunrise/sunset threshold; the twilight and
    golden-hour pairs are nulled independently.
    """
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
    day_length: int = 0

    def as_dict(self) -> Dict[str, Optional[datetime]]:
        """Event name -> timestamp mapping (no date/kind/day_length)."""
        skip = {"date", "kind", "day_length"}
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name not in skip}


def julian_day(day: date) -> float:
    """Julian day number at 00:00 UTC of `day`."""
    return day.toordinal() + _JD_ORDINAL_OFFSET


def sun_position(jd: float) -> Tuple[float, float]:
    """
    Solar declination (radians) and equation of time (minutes) at `jd`.
    """
    t = (jd - J2000) / 36525.0

    mean_long = (280.46646 + t * (36000.76983 + t * 0.0003032)) % 360.0
    mean_anom = 357.52911 + t * (35999.05029 - 0.0001537 * t)
    ecc = 0.016708634 - t * (0.000042037 + 0.0000001267 * t)

    m = math.radians(mean_anom)
    center = (
        math.sin(m) * (1.914602 - t * (0.004817 + 0.000014 * t))
        + math.sin(2 * m) * (0.019993 - 0.000101 * t)
        + math.sin(3 * m) * 0.000289
    )

    omega = math.radians(125.04 - 1934.136 * t)
    apparent_long = math.radians(mean_long + center - 0.00569 - 0.00478 * math.sin(omega))

    mean_obliq = 23.0 + (26.0 + (21.448 - t * (46.815 + t * (0.00059 - t * 0.001813))) / 60.0) / 60.0
    obliq = math.radians(mean_obliq + 0.00256 * math.cos(omega))

    declination = math.asin(math.sin(obliq) * math.sin(apparent_long))

    l0 = math.radians(mean_long)
    y = math.tan(obliq / 2.0) ** 2
    eot = 4.0 * math.degrees(
        y * math.sin(2 * l0)
        - 2 * ecc * math.sin(m)
        + 4 * ecc * y * math.sin(m) * math.cos(2 * l0)
        - 0.5 * y * y * math.sin(4 * l0)
        - 1.25 * ecc * ecc * math.sin(2 * m)
    )
    return declination, eot


def hour_angle_cosine(latitude: float, declination: float, altitude: float) -> float:
    """
    cos(H) for the sun at `altitude` degrees.

    Below -1 the sun stays above that altitude all day; above 1 it never
    gets up to it.
    """
    lat = math.radians(latitude)
    numerator = math.sin(math.radians(altitude)) - math.sin(lat) * math.sin(declination)
    denominator = math.cos(lat) * math.cos(declination)
    if denominator == 0.0:
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _at(midnight: datetime, minutes: float) -> datetime:
    return midnight + timedelta(seconds=round(minutes * 60.0))


def compute(point: GeoPoint, day: date) -> DaylightEvents:
    """
    Sun events for `day` at `point`.

    The day is the solar day around the local meridian transit, so for
    longitudes far from Greenwich some events land on the neighbouring
    UTC date.
    """
    if isinstance(day, datetime):
        day = day.date()

    midnight = datetime.combine(day, time(0, 0), tzinfo=timezone.utc)
    jd = julian_day(day)

    # Two passes: the equation of time is re-evaluated at the refined noon.
    noon = 720.0 - 4.0 * point.longitude
    for _ in range(2):
        declination, eot = sun_position(jd + noon / MINUTES_PER_DAY)
        noon = 720.0 - 4.0 * point.longitude - eot

    events: Dict[str, Optional[datetime]] = {}
    kind = DaylightKind.NORMAL
    for rising, setting, altitude in THRESHOLDS:
        cos_h = hour_angle_cosine(point.latitude, declination, altitude)
        if altitude == SUNRISE_ALTITUDE:
            if cos_h < -1.0:
                kind = DaylightKind.POLAR_DAY
            elif cos_h > 1.0:
                kind = DaylightKind.POLAR_NIGHT

        if -1.0 <= cos_h <= 1.0:
            half_arc = 4.0 * math.degrees(math.acos(cos_h))
            events[rising] = _at(midnight, noon - half_arc)
            events[setting] = _at(midnight, noon + half_arc)
        else:
            events[rising] = None
            events[setting] = None

    if kind is DaylightKind.POLAR_DAY:
        day_length = SECONDS_PER_DAY
    elif kind is DaylightKind.POLAR_NIGHT:
        day_length = 0
    else:
        day_length = int((events["sunset"] - events["sunrise"]).total_seconds())

    return DaylightEvents(
        date=day,
        kind=kind,
        solar_noon=_at(midnight, noon),
        day_length=day_length,
        **events,
    )
