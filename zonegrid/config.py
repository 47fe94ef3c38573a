from __future__ import annotations
import os
from typing import List


def _int_env(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= minimum else default


def get_menu_limit() -> int:
    """Return how many candidates the suggestion menu shows at once.

    Environment variable: ZONEGRID_MENU_LIMIT
    Defaults to 10.
    """
    return _int_env("ZONEGRID_MENU_LIMIT", 10, 1)


def get_refresh_seconds() -> int:
    """Return the clock refresh interval in seconds.

    Environment variable: ZONEGRID_REFRESH_SECONDS (0 disables refresh)
    Defaults to 60.
    """
    return _int_env("ZONEGRID_REFRESH_SECONDS", 60, 0)


def get_log_level() -> str:
    """Return the logging level name from environment.

    Environment variable: ZONEGRID_LOG_LEVEL (values: debug|info|warning|error)
    Defaults to "WARNING".
    """
    level = (os.getenv("ZONEGRID_LOG_LEVEL") or "warning").strip().upper()
    if level not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
        return "WARNING"
    return level


def get_initial_zones() -> List[str]:
    """Return zone names to commit at startup, in order.

    Environment variable: ZONEGRID_INITIAL_ZONES (comma separated)
    """
    raw = os.getenv("ZONEGRID_INITIAL_ZONES") or ""
    return [part.strip() for part in raw.split(",") if part.strip()]
