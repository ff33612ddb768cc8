"""
Zone handling for time and datetime accessors.

The process keeps a single "current zone" in a ZoneContext. Stored instants
are UTC datetimes; text is always read and written as wall-clock time in the
current zone. Ambiguous wall clocks (the repeated hour when DST ends) resolve
to standard time, and wall clocks inside the DST gap are pushed forward by
the size of the gap.
"""
from __future__ import annotations

import contextlib
import logging
import threading
from datetime import date, datetime, time, tzinfo
from typing import Iterator, Optional, Union

import pytz

from config.localization import get_default_timezone, get_zone_aliases
from .Exceptions import UnknownZoneError

ZoneLike = Union[str, tzinfo]

logger = logging.getLogger(__name__)


def resolve_zone(zone: ZoneLike) -> tzinfo:
    """Turn an IANA name, a display alias or a tzinfo into a tzinfo."""
    if isinstance(zone, tzinfo):
        return zone

    name = get_zone_aliases().get(zone, zone)
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        raise UnknownZoneError(zone) from None


def zone_name(zone: tzinfo) -> str:
    return getattr(zone, 'zone', None) or str(zone)


def as_instant(value: Union[datetime, date, time]) -> datetime:
    """
    Normalise a stored value to an aware UTC datetime.

    Naive datetimes are taken to be UTC, which is how SQLAlchemy hands back
    timestamps from backends without zone support. A bare date means midnight
    UTC and a bare time is placed on today's UTC date.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
            return pytz.utc.localize(value.replace(tzinfo=None))
        return value.astimezone(pytz.utc)
    if isinstance(value, date):
        return pytz.utc.localize(datetime(value.year, value.month, value.day))
    if isinstance(value, time):
        today = datetime.now(pytz.utc).date()
        return pytz.utc.localize(datetime.combine(today, value.replace(tzinfo=None)))
    raise TypeError(f"Cannot treat {type(value).__name__} as a stored instant")


class ZoneConverter:
    """Converts between local wall clocks and UTC instants."""

    def to_instant(self, wall_clock: datetime, zone: ZoneLike) -> datetime:
        """Read a naive wall clock in ``zone`` and return the UTC instant."""
        tz = resolve_zone(zone)
        naive = wall_clock.replace(tzinfo=None)

        if hasattr(tz, 'localize'):
            local = tz.normalize(tz.localize(naive, is_dst=False))
        else:
            local = naive.replace(tzinfo=tz)

        return local.astimezone(pytz.utc)

    def to_local(self, instant: datetime, zone: ZoneLike) -> datetime:
        """Express an instant as an aware wall clock in ``zone``."""
        tz = resolve_zone(zone)
        local = as_instant(instant).astimezone(tz)

        if hasattr(tz, 'normalize'):
            local = tz.normalize(local)
        return local


class ZoneContext:
    """
    Process-wide holder of the current zone.

    Reads are lock-free; set_zone swaps the zone under a lock. Callers that
    need consistent output across threads must not change the zone while
    conversions are running.
    """

    def __init__(self, zone: Optional[ZoneLike] = None, converter: Optional[ZoneConverter] = None) -> None:
        self._lock = threading.Lock()
        self._zone = resolve_zone(zone if zone is not None else get_default_timezone())
        self.converter = converter or ZoneConverter()

    @property
    def zone(self) -> tzinfo:
        return self._zone

    def get_zone(self) -> tzinfo:
        return self._zone

    def set_zone(self, zone: ZoneLike) -> tzinfo:
        """Make ``zone`` current and return the zone it replaced."""
        resolved = resolve_zone(zone)
        with self._lock:
            previous, self._zone = self._zone, resolved
        logger.debug(f"Current zone changed from {zone_name(previous)} to {zone_name(resolved)}")
        return previous

    @contextlib.contextmanager
    def use(self, zone: ZoneLike) -> Iterator[tzinfo]:
        """Temporarily switch the current zone."""
        previous = self.set_zone(zone)
        try:
            yield self._zone
        finally:
            self.set_zone(previous)

    def now(self) -> datetime:
        return self.to_local(datetime.now(pytz.utc))

    def today(self) -> date:
        """Today's calendar date in the current zone."""
        return self.now().date()

    def local(self, year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> datetime:
        """Build an aware wall clock in the current zone."""
        instant = self.to_instant(datetime(year, month, day, hour, minute, second))
        return self.to_local(instant)

    def to_instant(self, wall_clock: datetime) -> datetime:
        return self.converter.to_instant(wall_clock, self._zone)

    def to_local(self, instant: datetime) -> datetime:
        return self.converter.to_local(instant, self._zone)


# Global zone context for the process
zone_context = ZoneContext()


def get_zone() -> tzinfo:
    """Get the current zone"""
    return zone_context.get_zone()


def set_zone(zone: ZoneLike) -> tzinfo:
    """Set the current zone"""
    return zone_context.set_zone(zone)
