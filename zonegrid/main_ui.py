from __future__ import annotations
import logging
from typing import List, Optional

from PyQt6.QtCore import Qt, QEvent, QModelIndex, QObject, QTimer
from PyQt6.QtGui import QKeyEvent
from PyQt6.QtWidgets import QWidget, QLineEdit, QLabel, QVBoxLayout

from .app_state import AppState, ClearZones, GotTime, RemoveZone, ZoneGridCore, seed_zones
from .catalog import TimezoneCatalog
from .clock import Clock
from .config import get_initial_zones, get_menu_limit, get_refresh_seconds
from .models import CandidatesModel, GridModel
from .selection import DOWN, UP, Commit, Dismiss, MoveHighlight, QueryChanged
from .ui.workers import ClockWorker
from .widgets import GridView, ZoneMenu, center_on_screen, divider

logger = logging.getLogger(__name__)

PAGE_STEP = 5


class ZoneGridUI(QWidget):
    def __init__(self, catalog: Optional[TimezoneCatalog] = None, clock: Optional[Clock] = None):
        super().__init__()
        self.setWindowTitle("ZoneGrid")
        self.setMinimumSize(900, 320)
        self.core = ZoneGridCore(catalog or TimezoneCatalog(), menu_limit=get_menu_limit())
        self._clock = clock
        self._clock_workers: List[ClockWorker] = []

        wrapper = QWidget(); wrapper.setObjectName("wrapper")

        self.search = QLineEdit()
        self.search.setPlaceholderText("Add a timezone...")
        self.search.setObjectName("mainSearch")
        self.search.setMinimumHeight(36)
        self.search.setClearButtonEnabled(True)
        self.search.textEdited.connect(self._on_text_edited)
        self.search.installEventFilter(self)

        self.menu_model = CandidatesModel()
        self.menu = ZoneMenu(); self.menu.setModel(self.menu_model)
        self.menu.clicked.connect(self._on_menu_clicked)

        self.status = QLabel("Waiting for clock…"); self.status.setObjectName("statusLine")

        self.grid_model = GridModel()
        self.grid = GridView(); self.grid.setModel(self.grid_model)
        self.grid.remove_requested.connect(lambda row: self.core.dispatch(RemoveZone(row)))
        self.grid.clear_requested.connect(lambda: self.core.dispatch(ClearZones()))

        lay = QVBoxLayout(wrapper); lay.setContentsMargins(16, 16, 16, 16); lay.setSpacing(8)
        lay.addWidget(self.search)
        lay.addWidget(self.menu)
        lay.addWidget(divider())
        lay.addWidget(self.status)
        lay.addWidget(self.grid, 1)
        outer = QVBoxLayout(self); outer.setContentsMargins(0, 0, 0, 0); outer.addWidget(wrapper)

        self.core.subscribe(self._render)
        seed_zones(self.core, get_initial_zones())

        self._refresh_timer: Optional[QTimer] = None
        refresh = get_refresh_seconds()
        if refresh > 0:
            self._refresh_timer = QTimer(self)
            self._refresh_timer.setInterval(refresh * 1000)
            self._refresh_timer.timeout.connect(self._request_time)
            self._refresh_timer.start()

        self._apply_style()
        self._render(self.core.state)
        self.resize(1100, 420)
        center_on_screen(self)
        self.show()
        self.search.setFocus()
        self._request_time()

    # ---------------- input -> intents -----------------
    def _on_text_edited(self, text: str):
        self.core.dispatch(QueryChanged(text))

    def _on_menu_clicked(self, index: QModelIndex):
        z = self.menu_model.item(index.row())
        if z:
            self.core.dispatch(Commit(z.name))

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:  # type: ignore[override]
        if obj is self.search:
            if event.type() == QEvent.Type.KeyPress and self._handle_search_key(event):  # type: ignore[arg-type]
                return True
            if event.type() == QEvent.Type.FocusOut and self.core.state.selection.menu_open:
                self.core.dispatch(Dismiss())
        return super().eventFilter(obj, event)

    def _handle_search_key(self, event: QKeyEvent) -> bool:
        key = event.key()
        if key == Qt.Key.Key_Down:
            self.core.dispatch(MoveHighlight(DOWN))
        elif key == Qt.Key.Key_Up:
            self.core.dispatch(MoveHighlight(UP))
        elif key == Qt.Key.Key_PageDown:
            self.core.dispatch(MoveHighlight(DOWN * PAGE_STEP))
        elif key == Qt.Key.Key_PageUp:
            self.core.dispatch(MoveHighlight(UP * PAGE_STEP))
        elif key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self.core.dispatch(Commit())
        elif key == Qt.Key.Key_Escape:
            self.core.dispatch(Dismiss())
        else:
            return False
        return True

    # ---------------- clock -----------------
    def _request_time(self):
        worker = ClockWorker(self._clock)
        worker.time_ready.connect(self._on_time_ready)
        worker.finished.connect(lambda: self._forget_worker(worker))
        self._clock_workers.append(worker)
        worker.start()

    def _forget_worker(self, worker: ClockWorker):
        if worker in self._clock_workers:
            self._clock_workers.remove(worker)
        worker.deleteLater()

    def _on_time_ready(self, instant: int):
        logger.debug("Reference instant from clock: %d", instant)
        self.core.dispatch(GotTime(instant))

    # ---------------- state -> widgets -----------------
    def _render(self, state: AppState):
        sel = state.selection
        if self.search.text() != sel.query:
            self.search.setText(sel.query)

        view = self.core.menu_view()
        self.menu_model.set_view(view, state.reference_or_epoch)
        self.menu.setVisible(view.open and view.total > 0)
        wh = view.window_highlight
        if wh is not None:
            self.menu.setCurrentIndex(self.menu_model.index(wh))
        else:
            self.menu.clearSelection()
        if view.open and view.items:
            rows = len(view.items)
            row_h = max(self.menu.sizeHintForRow(0), 24)
            self.menu.setFixedHeight(min(rows, self.core.menu_limit) * row_h + 8)

        self.grid_model.set_rows(self.core.grid(), self.core.column_headers())

        if not state.time_loaded:
            self.status.setText("Waiting for clock…")
        elif view.open:
            self.status.setText(f"{view.total} matching zones")
        else:
            self.status.setText(f"{len(state.selected)} zones")

    def _apply_style(self):
        self.setStyleSheet("""
        QWidget#wrapper {background: white;}
        QLineEdit#mainSearch {background: transparent; border: 1px solid rgba(0,0,0,0.1); border-radius: 8px; padding: 8px 12px; color: #111; selection-background-color: #bcd4ff; font-size: 16px;}
        QListView#zoneMenu {background: white; border: 1px solid rgba(0,0,0,0.08); border-radius: 8px; color: #222;}
        QListView#zoneMenu::item {padding: 4px 8px;}
        QListView#zoneMenu::item:selected {background: rgba(59, 130, 246, 0.12); color: #111;}
        QListView#zoneMenu::item:hover {background: rgba(0,0,0,0.04);}
        QLabel#statusLine {color:#6f6f6f; font-size:11px;}
        QTableView#zoneGrid {background: white; gridline-color: rgba(0,0,0,0.06); color: #222; border: none;}
        QTableView#zoneGrid::item:selected {background: rgba(59, 130, 246, 0.08); color: #111;}
        """)
