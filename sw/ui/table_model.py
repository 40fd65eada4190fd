"""Table model exposing a SessionRegistry to a QTableView.

The model never keeps its own copy of the rows. It reads straight from the
registry and listens to it: structural changes reset the model, refreshes
emit dataChanged for the derived Remaining and State columns only.
"""

from PySide6.QtCore import QAbstractTableModel, QModelIndex, Qt
from sw.core import registry as reg
from sw.core.registry import SessionRegistry
from sw.ui.theme import state_color
from sw.util import format_timestamp

COL_CODE = 0
COL_INPUT = 1
COL_OUTPUT = 2
COL_REMAINING = 3
COL_STATE = 4

HEADERS = ["ID code", "Input time", "Output time", "Remaining", "State"]


class SessionTableModel(QAbstractTableModel):

    def __init__(self, registry: SessionRegistry, datetime_format="%d/%m/%Y %H:%M", state_colors=None, parent=None):
        super().__init__(parent)
        self.registry = registry
        self.datetime_format = datetime_format
        self.state_colors = dict(state_colors or {})
        registry.subscribe(self._on_registry_event)

    def detach(self):
        self.registry.unsubscribe(self._on_registry_event)

    def _on_registry_event(self, event, row):
        if event == reg.REFRESHED:
            if self.registry:
                top_left = self.index(0, COL_REMAINING)
                bottom_right = self.index(len(self.registry) - 1, COL_STATE)
                self.dataChanged.emit(top_left, bottom_right)
        else:
            # Rows are few, so a reset on add/remove/clear keeps the view simple
            self.beginResetModel()
            self.endResetModel()

    # ------------------------------------------------------------------ #
    #  QAbstractTableModel                                                 #
    # ------------------------------------------------------------------ #

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self.registry)

    def columnCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(HEADERS)

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role == Qt.DisplayRole and orientation == Qt.Horizontal:
            return HEADERS[section]
        return None

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid() or not 0 <= index.row() < len(self.registry):
            return None
        record = self.registry[index.row()]
        col = index.column()

        if role == Qt.DisplayRole:
            if col == COL_CODE:
                return record.code
            if col == COL_INPUT:
                return format_timestamp(record.input_time, self.datetime_format)
            if col == COL_OUTPUT:
                return format_timestamp(record.output_time, self.datetime_format)
            if col == COL_REMAINING:
                return record.remaining
            if col == COL_STATE:
                return record.state.value
        elif role == Qt.BackgroundRole and col == COL_STATE:
            return state_color(record.state, self.state_colors)
        return None
