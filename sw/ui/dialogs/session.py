"""Dialog for entering a new session."""

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QVBoxLayout,
)
from sw.common.logger import log
from sw.core.record import Record
from sw.util import parse_timestamp

# Small modal form for a session's code and window. Both times may be left blank, which makes a FREE session.
class SessionDialog(QDialog):

    def __init__(self, parent, datetime_format, always_on_top=False):
        super().__init__(parent)
        self.setWindowTitle("Add Session")
        if always_on_top:
            self.setWindowFlags(self.windowFlags() | Qt.WindowStaysOnTopHint)
        self.setModal(True)
        self.datetime_format = datetime_format

        # Output attribute, read by MainWindow after the dialog closes
        self.record = None

        outer = QVBoxLayout(self)
        form = QFormLayout()
        self._code_input = QLineEdit()
        self._input_time = QLineEdit()
        self._output_time = QLineEdit()
        form.addRow("ID code:", self._code_input)
        form.addRow("Input time:", self._input_time)
        form.addRow("Output time:", self._output_time)
        outer.addLayout(form)

        hint = QLabel(f"Times use the format {datetime_format}, leave blank for an unset session.")
        hint.setWordWrap(True)
        outer.addWidget(hint)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        outer.addWidget(buttons)

    # Only closes the dialog when both times parse, otherwise tells the user what was wrong and stays open.
    def accept(self):
        try:
            input_time = parse_timestamp(self._input_time.text(), self.datetime_format)
            output_time = parse_timestamp(self._output_time.text(), self.datetime_format)
        except ValueError as e:
            log.warning(f"Rejected session entry: {e}")
            QMessageBox.warning(self, "Invalid Time", str(e))
            return
        self.record = Record(self._code_input.text().strip(), input_time=input_time, output_time=output_time)
        super().accept()
