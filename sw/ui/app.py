import sys
from datetime import datetime
from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QDialog,
    QHeaderView,
    QMainWindow,
    QMessageBox,
    QTableView,
    QToolBar,
)
from sw.common.logger import log
from sw.core import config
from sw.core.refresh import RefreshLoop
from sw.core.registry import SessionRegistry
from sw.core.seed import build_sample_records
from sw.ui.dialogs.session import SessionDialog
from sw.ui.table_model import COL_CODE, SessionTableModel

TITLE_PREFIX = "Main Form"


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------

# Main window of the application. Shows every session in a table whose Remaining and State columns are refreshed
# once per tick.
class MainWindow(QMainWindow):

    def __init__(self, settings=None, registry=None):
        super().__init__()
        self.setWindowTitle(TITLE_PREFIX)

        # -- Load settings --
        s = settings if settings is not None else config.load_settings()
        self.settings = s
        self.datetime_format = s["datetime_format"]
        self.always_on_top = s["always_on_top"]
        self.confirm_delete = s["confirm_delete"]

        if self.always_on_top:
            self.setWindowFlags(self.windowFlags() | Qt.WindowStaysOnTopHint)

        # -- Sessions --
        self.registry = registry if registry is not None else SessionRegistry()
        if registry is None and s["seed_sample_records"]:
            for record in build_sample_records():
                self.registry.add(record)

        # -- Table --
        self._model = SessionTableModel(self.registry, self.datetime_format, s["state_colors"], parent=self)
        self._table = QTableView(self)
        self._table.setModel(self._model)
        self._table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self._table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self._table.verticalHeader().setVisible(False)
        header = self._table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeToContents)
        header.setSectionResizeMode(COL_CODE, QHeaderView.Stretch)
        self.setCentralWidget(self._table)

        # -- Toolbar --
        toolbar = QToolBar("Sessions", self)
        toolbar.setMovable(False)
        toolbar.addAction("Add", self._on_add)
        toolbar.addAction("Remove", self._on_remove)
        self.addToolBar(toolbar)

        # -- Tick timer --
        self._loop = RefreshLoop(self.registry, parent=self)
        self._loop.ticked.connect(self._on_tick)
        # Evaluate once up front so the first paint isn't a second stale
        self._loop.on_tick()
        self._loop.start()
        self.resize(640, 240)

    @property
    def loop(self):
        return self._loop

    # ------------------------------------------------------------------ #
    #  Tick                                                                #
    # ------------------------------------------------------------------ #

    def _on_tick(self, now: datetime):
        self.setWindowTitle(f"{TITLE_PREFIX} - {now:%H:%M:%S}")

    # ------------------------------------------------------------------ #
    #  Button handlers                                                     #
    # ------------------------------------------------------------------ #

    def _on_add(self):
        dlg = SessionDialog(self, self.datetime_format, self.always_on_top)
        if dlg.exec() == QDialog.Accepted and dlg.record is not None:
            dlg.record.evaluate(datetime.now())
            self.registry.add(dlg.record)

    def _selected_records(self):
        rows = sorted({index.row() for index in self._table.selectionModel().selectedRows()})
        return [self.registry[row] for row in rows]

    def _on_remove(self):
        records = self._selected_records()
        if not records:
            return
        if self.confirm_delete:
            names = ", ".join(f"'{r.code}'" for r in records)
            if QMessageBox.question(
                    self, "Confirm Delete",
                    f"Delete {names}?"
            ) != QMessageBox.Yes:
                return
        for record in records:
            self.registry.remove(record)

    # ------------------------------------------------------------------ #
    #  Window close                                                        #
    # ------------------------------------------------------------------ #

    def closeEvent(self, event):
        self._loop.stop()
        self._model.detach()
        try:
            config.save_settings(self.settings)
        except OSError as e:
            log.warning("Failed to save settings on exit.", exc_info=True)
            QMessageBox.warning(self, "Save Error",
                                f"Failed to save settings:\n{e}")
        event.accept()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main():
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
