"""
Selection state machine for the zone picker.

Two shapes of state exist: idle (empty query, menu closed, no highlight)
and filtering (query typed, menu open, highlight either ``None`` or an index
into the candidates of that query). Navigation clamps at both ends; there is
no wraparound. ``None`` counts as the slot before the first candidate, so
moving in either direction from it lands on index 0.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional

UP = -1
DOWN = 1


class StaleHighlightError(AssertionError):
    """Highlight points outside the candidate list it belongs to."""


# ----------------------------- intents ----------------------------
@dataclass(frozen=True)
class QueryChanged:
    text: str

@dataclass(frozen=True)
class MoveHighlight:
    direction: int  # negative = up, positive = down; magnitude = steps

@dataclass(frozen=True)
class Commit:
    name: Optional[str] = None  # set for pointer selection of a specific zone

@dataclass(frozen=True)
class Dismiss:
    pass


# ------------------------------ state -----------------------------
@dataclass(frozen=True)
class SelectionState:
    query: str = ""
    menu_open: bool = False
    highlight: Optional[int] = None

    @property
    def idle(self) -> bool:
        return not self.menu_open and not self.query and self.highlight is None


IDLE = SelectionState()


def query_changed(state: SelectionState, text: str) -> SelectionState:
    return SelectionState(query=text, menu_open=True, highlight=None)

def move_highlight(state: SelectionState, direction: int, count: int) -> SelectionState:
    if not state.menu_open or count <= 0 or direction == 0:
        return state
    current = -1 if state.highlight is None else state.highlight
    target = min(max(current + direction, 0), count - 1)
    if target == state.highlight:
        return state
    return replace(state, highlight=target)

def dismiss(state: SelectionState) -> SelectionState:
    return IDLE

def check_highlight(state: SelectionState, count: int) -> None:
    h = state.highlight
    if h is None:
        return
    if not state.menu_open or not 0 <= h < count:
        raise StaleHighlightError(
            f"highlight {h} invalid for {count} candidates (menu open: {state.menu_open})"
        )
