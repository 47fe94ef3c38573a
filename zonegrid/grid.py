from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .catalog import TimeZone, TimezoneCatalog, instant_to_utc
from .utils import HOURS_PER_DAY, MS_PER_HOUR, hour_label


@dataclass(frozen=True)
class Row:
    zone_name: str
    cells: Tuple[str, ...]


def anchor_instant(zone: TimeZone, reference: int) -> int:
    """``reference`` rounded down to the top of the hour in ``zone``'s local frame."""
    # Step back in elapsed time; rebuilding the local wall clock breaks inside repeated hours.
    lt = TimezoneCatalog.local_time(zone, reference)
    return reference - ((lt.minute * 60 + lt.second) * 1000 + reference % 1000)

def column_instants(reference: int) -> List[int]:
    return [reference + h * MS_PER_HOUR for h in range(HOURS_PER_DAY)]

def column_headers(reference: int) -> List[str]:
    return [f"{instant_to_utc(i).hour}:00 UTC" for i in column_instants(reference)]

def project_row(zone: TimeZone, reference: int) -> Row:
    # Hours are added to the absolute anchor, so DST shifts show up as skipped or repeated labels.
    anchor = anchor_instant(zone, reference)
    cells = tuple(
        hour_label(TimezoneCatalog.local_time(zone, anchor + h * MS_PER_HOUR).hour)
        for h in range(HOURS_PER_DAY)
    )
    return Row(zone.name, cells)

def project(zones: Iterable[TimeZone], reference: int) -> List[Row]:
    return [project_row(z, reference) for z in zones]
