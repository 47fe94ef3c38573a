from __future__ import annotations
from typing import List, Optional

from PyQt6.QtCore import Qt, QAbstractListModel, QAbstractTableModel, QModelIndex

from .app_state import MenuView
from .catalog import TimeZone, TimezoneCatalog
from .grid import Row
from .utils import elide_middle, format_offset


class CandidatesModel(QAbstractListModel):
    """The visible window of the suggestion menu."""
    def __init__(self, reference: int = 0):
        super().__init__(); self._items: List[TimeZone]=[]; self._reference=reference
    def rowCount(self, parent: QModelIndex=QModelIndex()) -> int: return len(self._items)  # type: ignore[override]
    def data(self, index: QModelIndex, role: int):  # type: ignore[override]
        if not index.isValid(): return None
        z=self._items[index.row()]
        if role==Qt.ItemDataRole.DisplayRole: return z.name.replace("_", " ")
        if role==Qt.ItemDataRole.ToolTipRole:
            dt=TimezoneCatalog.local_datetime(z, self._reference)
            return f"{z.name}\nUTC{format_offset(dt.utcoffset())} ({dt.tzname() or 'UTC'})"
        return None
    def set_view(self, view: MenuView, reference: int):
        self.beginResetModel(); self._items=list(view.items); self._reference=reference; self.endResetModel()
    def item(self, row:int)->Optional[TimeZone]: return self._items[row] if 0<=row<len(self._items) else None


class GridModel(QAbstractTableModel):
    """Selected zones down, 24 hours across. Column 0 is the current hour."""
    def __init__(self):
        super().__init__(); self._rows: List[Row]=[]; self._headers: List[str]=[]
    def rowCount(self, parent: QModelIndex=QModelIndex()) -> int: return len(self._rows)  # type: ignore[override]
    def columnCount(self, parent: QModelIndex=QModelIndex()) -> int: return len(self._headers)  # type: ignore[override]
    def data(self, index: QModelIndex, role: int):  # type: ignore[override]
        if not index.isValid(): return None
        row=self._rows[index.row()]
        if role==Qt.ItemDataRole.DisplayRole: return row.cells[index.column()]
        if role==Qt.ItemDataRole.ToolTipRole: return f"{row.zone_name}: {row.cells[index.column()]}"
        if role==Qt.ItemDataRole.TextAlignmentRole: return Qt.AlignmentFlag.AlignCenter
        if role==Qt.ItemDataRole.FontRole and index.column()==0:
            from PyQt6.QtGui import QFont
            f=QFont(); f.setBold(True); return f
        return None
    def headerData(self, section: int, orientation: Qt.Orientation, role: int=Qt.ItemDataRole.DisplayRole):  # type: ignore[override]
        if role!=Qt.ItemDataRole.DisplayRole: return None
        if orientation==Qt.Orientation.Horizontal:
            return self._headers[section] if 0<=section<len(self._headers) else None
        return elide_middle(self._rows[section].zone_name, 28) if 0<=section<len(self._rows) else None
    def set_rows(self, rows: List[Row], headers: List[str]):
        self.beginResetModel(); self._rows=list(rows); self._headers=list(headers) if rows else []; self.endResetModel()
