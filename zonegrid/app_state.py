from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterable, List, Optional, Tuple

from . import selection
from .catalog import TimeZone, TimezoneCatalog
from .grid import Row, column_headers, column_instants, project
from .search_core import filter_zones
from .selection import (
    IDLE, Commit, Dismiss, MoveHighlight, QueryChanged, SelectionState,
)
from .utils import ensure_visible

logger = logging.getLogger(__name__)

EPOCH = 0
DEFAULT_MENU_LIMIT = 10


# ----------------------------- intents ----------------------------
@dataclass(frozen=True)
class GotTime:
    instant: int

@dataclass(frozen=True)
class RemoveZone:
    position: int

@dataclass(frozen=True)
class ClearZones:
    pass


@dataclass(frozen=True)
class AppState:
    selection: SelectionState = IDLE
    selected: Tuple[TimeZone, ...] = ()
    reference: Optional[int] = None  # None until the clock has answered

    @property
    def time_loaded(self) -> bool:
        return self.reference is not None

    @property
    def reference_or_epoch(self) -> int:
        return EPOCH if self.reference is None else self.reference

    @property
    def selected_names(self) -> List[str]:
        return [z.name for z in self.selected]


@dataclass(frozen=True)
class MenuView:
    open: bool
    query: str
    items: Tuple[TimeZone, ...]
    highlight: Optional[int]  # index into the full candidate list
    offset: int               # index of items[0] in the full candidate list
    total: int

    @property
    def window_highlight(self) -> Optional[int]:
        if self.highlight is None:
            return None
        return self.highlight - self.offset


def candidates_for(state: AppState, catalog: Iterable[TimeZone]) -> List[TimeZone]:
    return filter_zones(state.selection.query, catalog)


def _commit(intent: Commit, state: AppState, catalog: TimezoneCatalog) -> AppState:
    if intent.name is not None:
        zone = catalog.lookup(intent.name)
        if zone is None:
            logger.info("No timezone named %r, nothing committed", intent.name)
            return state
    else:
        sel = state.selection
        if not sel.menu_open or sel.highlight is None:
            return state
        cands = candidates_for(state, catalog)
        selection.check_highlight(sel, len(cands))
        zone = cands[sel.highlight]
    return replace(state, selection=IDLE, selected=(zone,) + state.selected)


def apply(intent, state: AppState, catalog: TimezoneCatalog) -> AppState:
    """Return the state after ``intent``; never mutates ``state``."""
    sel = state.selection
    if isinstance(intent, QueryChanged):
        new = replace(state, selection=selection.query_changed(sel, intent.text))
    elif isinstance(intent, MoveHighlight):
        count = len(candidates_for(state, catalog)) if sel.menu_open else 0
        new = replace(state, selection=selection.move_highlight(sel, intent.direction, count))
    elif isinstance(intent, Commit):
        new = _commit(intent, state, catalog)
    elif isinstance(intent, Dismiss):
        new = replace(state, selection=selection.dismiss(sel))
    elif isinstance(intent, GotTime):
        new = replace(state, reference=intent.instant)
    elif isinstance(intent, RemoveZone):
        if not 0 <= intent.position < len(state.selected):
            return state
        zones = state.selected
        new = replace(state, selected=zones[:intent.position] + zones[intent.position + 1:])
    elif isinstance(intent, ClearZones):
        new = replace(state, selected=())
    else:
        raise TypeError(f"Unknown intent: {intent!r}")
    if new.selection.highlight is not None:
        selection.check_highlight(new.selection, len(candidates_for(new, catalog)))
    return new


class ZoneGridCore:
    """Holds the catalog and the current state; ``dispatch`` is the only way in."""

    def __init__(self, catalog: TimezoneCatalog, state: Optional[AppState] = None,
                 menu_limit: int = DEFAULT_MENU_LIMIT):
        self.catalog = catalog
        self.menu_limit = max(1, menu_limit)
        self._state = state or AppState()
        self._listeners: List[Callable[[AppState], None]] = []
        self._menu_offset = 0

    @property
    def state(self) -> AppState:
        return self._state

    def subscribe(self, listener: Callable[[AppState], None]) -> None:
        self._listeners.append(listener)

    def dispatch(self, intent) -> AppState:
        old = self._state
        self._state = apply(intent, old, self.catalog)
        if self._state != old:
            self._scroll_menu()
            logger.debug("%r -> %r", intent, self._state.selection)
            for listener in list(self._listeners):
                listener(self._state)
        return self._state

    def _scroll_menu(self) -> None:
        sel = self._state.selection
        if not sel.menu_open or sel.highlight is None:
            self._menu_offset = 0
            return
        total = len(self.candidates())
        self._menu_offset = ensure_visible(sel.highlight, self._menu_offset, self.menu_limit, total)

    # ---------------- read models -----------------
    def candidates(self) -> List[TimeZone]:
        return candidates_for(self._state, self.catalog)

    def menu_view(self) -> MenuView:
        sel = self._state.selection
        if not sel.menu_open:
            return MenuView(False, sel.query, (), None, 0, 0)
        cands = self.candidates()
        offset = self._menu_offset
        items = tuple(cands[offset:offset + self.menu_limit])
        return MenuView(True, sel.query, items, sel.highlight, offset, len(cands))

    def grid(self) -> List[Row]:
        return project(self._state.selected, self._state.reference_or_epoch)

    def column_instants(self) -> List[int]:
        return column_instants(self._state.reference_or_epoch)

    def column_headers(self) -> List[str]:
        return column_headers(self._state.reference_or_epoch)


def seed_zones(core: ZoneGridCore, names: Iterable[str]) -> List[str]:
    """Commit ``names`` so the grid lists them in the given order; returns the names skipped."""
    names = list(names)
    skipped = [n for n in names if core.catalog.lookup(n) is None]
    for name in skipped:
        logger.warning("Unknown timezone %r in initial zones, skipping", name)
    for name in reversed(names):
        if name not in skipped:
            core.dispatch(Commit(name))
    return skipped
