"""Tests for the sun event calculator."""
from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from sunyear.schemas import DaylightKind, GeoPoint
from sunyear.solar import compute, hour_angle_cosine, julian_day


def _minutes(ts: datetime) -> float:
    return ts.hour * 60 + ts.minute + ts.second / 60


class TestGeoPoint:
    def test_valid_point(self):
        p = GeoPoint(latitude=60.17, longitude=24.94)
        assert p.latitude == 60.17

    @pytest.mark.parametrize("lat,lon", [(91, 0), (-90.5, 0), (0, 180.1), (0, -181), (float("nan"), 0)])
    def test_out_of_range_rejected(self, lat, lon):
        with pytest.raises(ValidationError):
            GeoPoint(latitude=lat, longitude=lon)

    def test_bounds_are_inclusive(self):
        p = GeoPoint(latitude=-90, longitude=180)
        assert (p.latitude, p.longitude) == (-90, 180)

    def test_immutable(self):
        p = GeoPoint(latitude=1, longitude=2)
        with pytest.raises(ValidationError):
            p.latitude = 3


class TestJulianDay:
    def test_j2000_epoch(self):
        # 2000-01-01 12:00 UTC is JD 2451545.0
        assert julian_day(date(2000, 1, 1)) + 0.5 == 2451545.0


class TestHourAngleCosine:
    def test_equator_at_horizon_is_zero(self):
        assert hour_angle_cosine(0.0, 0.3, 0.0) == pytest.approx(0.0)

    def test_pole_summer_below_minus_one(self):
        assert hour_angle_cosine(90.0, 0.4, 0.0) < -1.0

    def test_pole_winter_above_one(self):
        assert hour_angle_cosine(90.0, -0.4, 0.0) > 1.0


class TestCompute:
    def test_equator_equinox_twelve_hour_day(self):
        ev = compute(GeoPoint(latitude=0, longitude=0), date(2025, 3, 20))
        assert ev.kind is DaylightKind.NORMAL
        assert abs(ev.day_length - 12 * 3600) <= 1

    def test_equation_of_time_early_november(self):
        # Sun runs ~16 minutes fast in early November
        ev = compute(GeoPoint(latitude=51.48, longitude=0.0), date(2025, 11, 3))
        assert _minutes(ev.solar_noon) == pytest.approx(11 * 60 + 43.6, abs=1.0)

    def test_equation_of_time_mid_february(self):
        ev = compute(GeoPoint(latitude=51.48, longitude=0.0), date(2025, 2, 11))
        assert _minutes(ev.solar_noon) == pytest.approx(12 * 60 + 14.2, abs=1.0)

    def test_east_longitude_shifts_noon_earlier(self):
        west = compute(GeoPoint(latitude=45, longitude=-15), date(2025, 5, 1))
        east = compute(GeoPoint(latitude=45, longitude=15), date(2025, 5, 1))
        # 30 degrees of longitude is two hours
        assert (west.solar_noon - east.solar_noon).total_seconds() == pytest.approx(7200, abs=5)

    def test_helsinki_midsummer(self, helsinki):
        ev = compute(helsinki, date(2025, 6, 21))
        assert ev.kind is DaylightKind.NORMAL
        assert 50 <= _minutes(ev.sunrise) <= 80
        assert 18 * 3600 + 20 * 60 <= ev.day_length <= 18 * 3600 + 45 * 60

    def test_helsinki_midsummer_twilight_nulled_per_threshold(self, helsinki):
        ev = compute(helsinki, date(2025, 6, 21))
        # Sun dips just past -6 degrees but never to -12
        assert ev.civil_twilight_begin is not None
        assert ev.civil_twilight_end is not None
        assert ev.nautical_twilight_begin is None
        assert ev.nautical_twilight_end is None
        assert ev.astronomical_twilight_begin is None
        assert ev.astronomical_twilight_end is None

    def test_tromso_midwinter_civil_twilight_without_sunrise(self):
        ev = compute(GeoPoint(latitude=69.65, longitude=18.96), date(2025, 12, 21))
        assert ev.kind is DaylightKind.POLAR_NIGHT
        assert ev.sunrise is None and ev.sunset is None
        assert ev.day_length == 0
        assert ev.civil_twilight_begin is not None
        assert ev.nautical_twilight_begin is not None
        assert ev.golden_hour_end is None

    def test_north_pole_june_is_polar_day(self):
        ev = compute(GeoPoint(latitude=90, longitude=0), date(2024, 6, 21))
        assert ev.kind is DaylightKind.POLAR_DAY
        assert ev.day_length == 86400
        assert all(v is None for k, v in ev.as_dict().items() if k != "solar_noon")

    def test_north_pole_december_is_polar_night(self):
        ev = compute(GeoPoint(latitude=90, longitude=0), date(2024, 12, 21))
        assert ev.kind is DaylightKind.POLAR_NIGHT
        assert ev.day_length == 0
        assert ev.sunrise is None
        assert ev.astronomical_twilight_begin is None

    def test_south_pole_december_is_polar_day(self):
        ev = compute(GeoPoint(latitude=-90, longitude=0), date(2024, 12, 21))
        assert ev.kind is DaylightKind.POLAR_DAY

    def test_event_order_on_normal_day(self):
        ev = compute(GeoPoint(latitude=40.4, longitude=-3.7), date(2025, 4, 15))
        ordered = [
            ev.astronomical_twilight_begin,
            ev.nautical_twilight_begin,
            ev.civil_twilight_begin,
            ev.sunrise,
            ev.golden_hour_end,
            ev.solar_noon,
            ev.golden_hour_begin,
            ev.sunset,
            ev.civil_twilight_end,
            ev.nautical_twilight_end,
            ev.astronomical_twilight_end,
        ]
        assert ordered == sorted(ordered)

    def test_timestamps_are_utc_whole_seconds(self, helsinki):
        ev = compute(helsinki, date(2025, 1, 1))
        for ts in ev.as_dict().values():
            assert ts is not None
            assert ts.tzinfo == timezone.utc
            assert ts.microsecond == 0

    def test_date_label(self, helsinki):
        ev = compute(helsinki, date(2025, 1, 1))
        assert ev.date == date(2025, 1, 1)
        assert ev.date.isoformat() == "2025-01-01"

    def test_datetime_input_uses_its_date(self, helsinki):
        ev = compute(helsinki, datetime(2025, 1, 1, 18, 30))
        assert ev == compute(helsinki, date(2025, 1, 1))

    def test_deterministic(self, helsinki):
        assert compute(helsinki, date(2025, 8, 9)) == compute(helsinki, date(2025, 8, 9))

    def test_as_dict_keys(self, helsinki):
        keys = set(compute(helsinki, date(2025, 8, 9)).as_dict())
        assert "date" not in keys and "kind" not in keys
        assert {"sunrise", "sunset", "solar_noon", "civil_twilight_begin", "golden_hour_begin"} <= keys
        assert len(keys) == 11
