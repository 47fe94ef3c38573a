from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QAction, QKeyEvent
from PyQt6.QtWidgets import QAbstractItemView, QFrame, QHeaderView, QListView, QMenu, QTableView, QWidget


def center_on_screen(w: QWidget):
    g = w.screen().availableGeometry() if hasattr(w, 'screen') and w.screen() else None
    if not g:
        from PyQt6.QtWidgets import QApplication
        g = QApplication.primaryScreen().availableGeometry()
    w.move(int((g.width()-w.width())/2), int((g.height()-w.height())/3))

def divider() -> QFrame:
    d = QFrame(); d.setFrameShape(QFrame.Shape.HLine); d.setStyleSheet("color: rgba(0,0,0,0.08);"); return d


class ZoneMenu(QListView):
    """Suggestion list under the search box. Never takes focus, so the query keeps it."""
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("zoneMenu")
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setUniformItemSizes(True)
        self.setMouseTracking(True)
        self.hide()


class GridView(QTableView):
    remove_requested = pyqtSignal(int)
    clear_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("zoneGrid")
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        self.verticalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Fixed)
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.customContextMenuRequested.connect(self._show_context_menu)

    def keyPressEvent(self, e: QKeyEvent):  # type: ignore[override]
        if e.key() in (Qt.Key.Key_Delete, Qt.Key.Key_Backspace):
            idx = self.currentIndex()
            if idx.isValid():
                self.remove_requested.emit(idx.row())
            return
        super().keyPressEvent(e)

    def _show_context_menu(self, pos):
        idx = self.indexAt(pos)
        menu = QMenu(self)
        if idx.isValid():
            remove = QAction("Remove zone", menu)
            remove.triggered.connect(lambda: self.remove_requested.emit(idx.row()))
            menu.addAction(remove)
        clear = QAction("Clear all", menu)
        clear.setEnabled(self.model() is not None and self.model().rowCount() > 0)
        clear.triggered.connect(lambda: self.clear_requested.emit())
        menu.addAction(clear)
        menu.exec(self.viewport().mapToGlobal(pos))
