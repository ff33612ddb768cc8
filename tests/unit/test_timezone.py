"""Tests for zone resolution, conversion and the process-wide zone context."""

from __future__ import annotations

import threading
from datetime import date, datetime, time, timedelta, timezone

import pytest

from app.LocaleDating import (
    UnknownZoneError,
    ZoneContext,
    ZoneConverter,
    get_zone,
    resolve_zone,
    set_zone,
    zone_context,
)
from app.LocaleDating.TimeZone import as_instant, zone_name
from config.localization import LOCALIZATION_CONFIG


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class TestResolveZone:

    def test_iana_name(self) -> None:
        assert zone_name(resolve_zone('America/Chicago')) == 'America/Chicago'

    def test_display_alias(self) -> None:
        assert zone_name(resolve_zone('Central Time (US & Canada)')) == 'America/Chicago'
        assert zone_name(resolve_zone('Mountain Time (US & Canada)')) == 'America/Denver'

    def test_tzinfo_passes_through(self) -> None:
        assert resolve_zone(timezone.utc) is timezone.utc

    def test_unknown_zone(self) -> None:
        with pytest.raises(UnknownZoneError, match="Narnia"):
            resolve_zone('Narnia/Cair_Paravel')


class TestAsInstant:

    def test_naive_datetime_is_utc(self) -> None:
        assert as_instant(datetime(2012, 12, 30, 23, 30)) == utc(2012, 12, 30, 23, 30)

    def test_aware_datetime_is_converted(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        result = as_instant(datetime(2012, 12, 30, 12, 0, tzinfo=plus_two))
        assert result == utc(2012, 12, 30, 10, 0)
        assert result.utcoffset() == timedelta(0)

    def test_date_is_midnight_utc(self) -> None:
        assert as_instant(date(2012, 12, 30)) == utc(2012, 12, 30)

    def test_time_is_placed_on_today(self) -> None:
        result = as_instant(time(8, 15))
        assert result.time() == time(8, 15)
        assert result.utcoffset() == timedelta(0)

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            as_instant('2012-12-30')  # type: ignore[arg-type]


class TestZoneConverter:

    @pytest.fixture
    def converter(self) -> ZoneConverter:
        return ZoneConverter()

    def test_to_instant_winter(self, converter: ZoneConverter) -> None:
        result = converter.to_instant(datetime(2012, 12, 30, 15, 30), 'America/Chicago')
        assert result == utc(2012, 12, 30, 21, 30)

    def test_to_instant_summer(self, converter: ZoneConverter) -> None:
        result = converter.to_instant(datetime(2012, 7, 4, 12, 0), 'America/Chicago')
        assert result == utc(2012, 7, 4, 17, 0)

    def test_to_local(self, converter: ZoneConverter) -> None:
        local = converter.to_local(utc(2012, 12, 30, 23, 30), 'America/Denver')
        assert local.replace(tzinfo=None) == datetime(2012, 12, 30, 16, 30)
        assert local.utcoffset() == timedelta(hours=-7)

    def test_round_trip(self, converter: ZoneConverter) -> None:
        wall = datetime(2013, 3, 20, 8, 45)
        instant = converter.to_instant(wall, 'Europe/Berlin')
        assert converter.to_local(instant, 'Europe/Berlin').replace(tzinfo=None) == wall

    def test_ambiguous_wall_clock_uses_standard_time(self, converter: ZoneConverter) -> None:
        # 01:30 happens twice on 2012-11-04 in Chicago
        result = converter.to_instant(datetime(2012, 11, 4, 1, 30), 'America/Chicago')
        assert result == utc(2012, 11, 4, 7, 30)

    def test_missing_wall_clock_moves_forward(self, converter: ZoneConverter) -> None:
        # 02:30 never happens on 2012-03-11 in Chicago
        result = converter.to_instant(datetime(2012, 3, 11, 2, 30), 'America/Chicago')
        assert result == utc(2012, 3, 11, 8, 30)
        local = converter.to_local(result, 'America/Chicago')
        assert local.replace(tzinfo=None) == datetime(2012, 3, 11, 3, 30)

    def test_fixed_offset_tzinfo(self, converter: ZoneConverter) -> None:
        plus_one = timezone(timedelta(hours=1))
        assert converter.to_instant(datetime(2012, 1, 1, 1, 0), plus_one) == utc(2012, 1, 1, 0, 0)


class TestZoneContext:

    def test_default_zone_from_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(LOCALIZATION_CONFIG, 'timezone', 'Tokyo')
        assert zone_name(ZoneContext().zone) == 'Asia/Tokyo'

    def test_set_zone_returns_previous(self, zones: ZoneContext) -> None:
        previous = zones.set_zone('Mountain Time (US & Canada)')
        assert zone_name(previous) == 'America/Chicago'
        assert zone_name(zones.get_zone()) == 'America/Denver'

    def test_set_unknown_zone_keeps_current(self, zones: ZoneContext) -> None:
        with pytest.raises(UnknownZoneError):
            zones.set_zone('Nowhere')
        assert zone_name(zones.zone) == 'America/Chicago'

    def test_use_restores_zone(self, zones: ZoneContext) -> None:
        with zones.use('Tokyo') as zone:
            assert zone_name(zone) == 'Asia/Tokyo'
        assert zone_name(zones.zone) == 'America/Chicago'

    def test_use_restores_zone_after_error(self, zones: ZoneContext) -> None:
        with pytest.raises(RuntimeError):
            with zones.use('Tokyo'):
                raise RuntimeError('boom')
        assert zone_name(zones.zone) == 'America/Chicago'

    def test_local(self, zones: ZoneContext) -> None:
        local = zones.local(2012, 12, 30, 23, 30)
        assert local.replace(tzinfo=None) == datetime(2012, 12, 30, 23, 30)
        assert local.utcoffset() == timedelta(hours=-6)

    def test_today_is_in_current_zone(self, zones: ZoneContext) -> None:
        assert zones.today() == zones.now().date()
        assert zones.now().utcoffset() == zones.to_local(datetime.now(timezone.utc)).utcoffset()

    def test_zone_is_shared_across_threads(self) -> None:
        seen = []
        zone_context.set_zone('Tokyo')

        thread = threading.Thread(target=lambda: seen.append(zone_name(get_zone())))
        thread.start()
        thread.join()

        assert seen == ['Asia/Tokyo']

    def test_module_helpers(self) -> None:
        set_zone('Mountain Time (US & Canada)')
        assert zone_name(get_zone()) == 'America/Denver'
