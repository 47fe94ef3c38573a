from __future__ import annotations
from datetime import datetime, timezone

import pytest

from zonegrid.catalog import TimezoneCatalog, utc_to_instant

ZONES = [
    "UTC",
    "Europe/London",
    "America/New_York",
    "America/Los_Angeles",
    "Asia/Tokyo",
    "Asia/Kolkata",
    "Australia/Sydney",
]


@pytest.fixture
def catalog():
    return TimezoneCatalog(ZONES)


@pytest.fixture
def reference():
    # 14:37 UTC
    return utc_to_instant(datetime(2024, 1, 15, 14, 37, tzinfo=timezone.utc))
