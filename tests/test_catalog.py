from __future__ import annotations
from datetime import datetime, timezone

from zonegrid.catalog import TimezoneCatalog, instant_to_utc, utc_to_instant


def test_catalog_keeps_given_order_and_skips_bad_names():
    cat = TimezoneCatalog(["Asia/Tokyo", "Not/A_Zone", "UTC", "Asia/Tokyo"])
    assert [z.name for z in cat.all()] == ["Asia/Tokyo", "UTC"]
    assert len(cat) == 2
    assert "UTC" in cat and "Not/A_Zone" not in cat


def test_default_catalog_is_sorted_and_complete():
    cat = TimezoneCatalog()
    names = [z.name for z in cat]
    assert names == sorted(names)
    assert "Europe/London" in cat


def test_lookup(catalog):
    assert catalog.lookup("Asia/Tokyo").name == "Asia/Tokyo"
    assert catalog.lookup("asia/tokyo") is None
    assert catalog.lookup("Mars/Base") is None


def test_all_returns_a_copy(catalog):
    zones = catalog.all()
    zones.clear()
    assert len(catalog.all()) == len(catalog)


def test_local_time_fields(catalog, reference):
    lt = TimezoneCatalog.local_time(catalog.lookup("Asia/Tokyo"), reference)
    assert (lt.year, lt.month, lt.day) == (2024, 1, 15)
    assert (lt.hour, lt.minute) == (23, 37)
    assert lt.utc_offset_minutes == 540
    assert lt.abbreviation == "JST"
    lt = TimezoneCatalog.local_time(catalog.lookup("America/Los_Angeles"), reference)
    assert (lt.hour, lt.utc_offset_minutes) == (6, -480)


def test_instant_conversions():
    dt = datetime(2024, 1, 15, 14, 37, 12, 345000, tzinfo=timezone.utc)
    instant = utc_to_instant(dt)
    assert instant == 1705329432345
    assert instant_to_utc(instant) == dt
    assert utc_to_instant(datetime(1969, 12, 31, 23, 0, tzinfo=timezone.utc)) == -3_600_000
