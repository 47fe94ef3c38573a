from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from .utils import MS_PER_SECOND

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class TimeZone:
    name: str
    tzinfo: ZoneInfo = field(compare=False, repr=False)


@dataclass(frozen=True)
class LocalTime:
    year: int; month: int; day: int
    hour: int; minute: int; second: int
    utc_offset_minutes: int
    abbreviation: str


def instant_to_utc(instant: int) -> datetime:
    return _EPOCH + timedelta(milliseconds=instant)


def utc_to_instant(dt: datetime) -> int:
    delta = dt.astimezone(timezone.utc) - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * MS_PER_SECOND + delta.microseconds // 1000


class TimezoneCatalog:
    """Read-only collection of named timezones, in stable name order.

    Built once at startup, either from an explicit list of names or from
    everything ``zoneinfo`` can see. Names that cannot be loaded are skipped.
    """

    def __init__(self, names: Optional[Iterable[str]] = None):
        if names is None:
            names = sorted(available_timezones())
        self._zones: List[TimeZone] = []
        self._by_name: Dict[str, TimeZone] = {}
        for name in names:
            if name in self._by_name:
                continue
            try:
                tz = TimeZone(name, ZoneInfo(name))
            except (ZoneInfoNotFoundError, ValueError, OSError) as e:
                logger.debug("Skipping timezone %r: %s", name, e)
                continue
            self._zones.append(tz)
            self._by_name[name] = tz
        logger.debug("Loaded %d timezones", len(self._zones))

    def __len__(self) -> int: return len(self._zones)
    def __iter__(self): return iter(self._zones)
    def __contains__(self, name: object) -> bool: return name in self._by_name

    def all(self) -> List[TimeZone]:
        return list(self._zones)

    def lookup(self, name: str) -> Optional[TimeZone]:
        return self._by_name.get(name)

    @staticmethod
    def local_datetime(zone: TimeZone, instant: int) -> datetime:
        return instant_to_utc(instant).astimezone(zone.tzinfo)

    @classmethod
    def local_time(cls, zone: TimeZone, instant: int) -> LocalTime:
        dt = cls.local_datetime(zone, instant)
        offset = dt.utcoffset() or timedelta(0)
        return LocalTime(
            dt.year, dt.month, dt.day,
            dt.hour, dt.minute, dt.second,
            int(offset.total_seconds() // 60),
            dt.tzname() or "UTC",
        )
