from __future__ import annotations
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
pytest.importorskip("PyQt6.QtWidgets")
pytest.importorskip("PyQt6.QtTest")

from PyQt6.QtCore import QEvent, Qt  # noqa: E402
from PyQt6.QtGui import QFocusEvent  # noqa: E402
from PyQt6.QtTest import QTest  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from zonegrid.clock import FixedClock  # noqa: E402
from zonegrid.main_ui import ZoneGridUI  # noqa: E402


@pytest.fixture
def ui(catalog, reference, monkeypatch):
    monkeypatch.setenv("ZONEGRID_REFRESH_SECONDS", "0")
    monkeypatch.delenv("ZONEGRID_INITIAL_ZONES", raising=False)
    monkeypatch.delenv("ZONEGRID_MENU_LIMIT", raising=False)
    app = QApplication.instance() or QApplication([])
    w = ZoneGridUI(catalog, FixedClock(reference))
    for worker in list(w._clock_workers):
        worker.wait(2000)
    app.processEvents()
    yield w
    w.close()
    app.processEvents()


def test_clock_answer_reaches_state(ui, reference):
    assert ui.core.state.reference == reference


def test_arrow_and_page_keys_move_highlight(ui):
    QTest.keyClicks(ui.search, "asia")
    sel = ui.core.state.selection
    assert (sel.query, sel.menu_open, sel.highlight) == ("asia", True, None)
    QTest.keyClick(ui.search, Qt.Key.Key_Down)
    assert ui.core.state.selection.highlight == 0
    QTest.keyClick(ui.search, Qt.Key.Key_PageDown)
    assert ui.core.state.selection.highlight == 1
    QTest.keyClick(ui.search, Qt.Key.Key_Up)
    assert ui.core.state.selection.highlight == 0
    QTest.keyClick(ui.search, Qt.Key.Key_PageUp)
    assert ui.core.state.selection.highlight == 0
    assert ui.search.text() == "asia"


def test_enter_commits_highlighted_zone_and_clears_search(ui):
    QTest.keyClicks(ui.search, "tokyo")
    QTest.keyClick(ui.search, Qt.Key.Key_Down)
    QTest.keyClick(ui.search, Qt.Key.Key_Return)
    assert ui.core.state.selected_names == ["Asia/Tokyo"]
    assert ui.core.state.selection.idle
    assert ui.search.text() == ""
    assert ui.grid_model.rowCount() == 1


def test_escape_and_focus_out_dismiss(ui):
    QTest.keyClicks(ui.search, "america")
    QTest.keyClick(ui.search, Qt.Key.Key_Down)
    QTest.keyClick(ui.search, Qt.Key.Key_Escape)
    assert ui.core.state.selection.idle
    assert ui.search.text() == ""
    QTest.keyClicks(ui.search, "lon")
    QApplication.sendEvent(ui.search, QFocusEvent(QEvent.Type.FocusOut))
    assert ui.core.state.selection.idle
    assert ui.core.state.selected == ()


def test_menu_click_commits_that_zone(ui):
    QTest.keyClicks(ui.search, "a")
    ui.menu.clicked.emit(ui.menu_model.index(1))
    assert ui.core.state.selected_names == ["America/Los_Angeles"]
    assert ui.core.state.selection.idle
