"""
ZoneGrid: pick timezones and compare their local hours side by side.

The core (catalog, filtering, selection state machine, grid projection) is
plain Python and has no Qt dependency; the Qt shell lives in ``main_ui``,
``models``, ``widgets`` and ``ui``.

Entry point: see `run_zonegrid.py` in the project root, or `python -m zonegrid`.
"""

__all__ = [
    "utils",
    "catalog",
    "search_core",
    "selection",
    "app_state",
    "grid",
    "clock",
    "config",
    "models",
    "widgets",
    "main_ui",
]
