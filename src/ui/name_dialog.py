"""Single-line name prompt used for New Folder and Rename.

A pre-filled name gets its base part selected so typing replaces the name
but keeps the extension:
  report.txt      -> "report"
  backup.tar.gz   -> "backup"
  README          -> whole name
  .profile        -> whole name
  .env.local      -> ".env"
"""
from __future__ import annotations

from typing import Optional

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QLabel, QLineEdit, QDialogButtonBox
)
from PyQt6.QtCore import Qt


def _selection_span(filename: str) -> tuple[int, int]:
    """(start, length) of the base name; a leading dot belongs to the base."""
    if not filename:
        return 0, 0
    stem_end = filename.find('.', 1 if filename[0] == '.' else 0)
    return 0, len(filename) if stem_end < 0 else stem_end


class NameInputDialog(QDialog):
    """OK stays disabled while the field holds only whitespace"""

    def __init__(self, prompt: str, title: str, prefill: str = "", parent=None):
        super().__init__(parent)
        self.setWindowTitle(title)

        layout = QVBoxLayout(self)
        layout.addWidget(QLabel(prompt))

        self.line_edit = QLineEdit(prefill)
        layout.addWidget(self.line_edit)

        self.buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)
        layout.addWidget(self.buttons)

        self.line_edit.textChanged.connect(self._update_ok_button)
        self._update_ok_button(prefill)

        self.resize(420, 110)
        self.line_edit.setFocus(Qt.FocusReason.ActiveWindowFocusReason)
        start, length = _selection_span(prefill)
        if length:
            self.line_edit.setSelection(start, length)

    def _update_ok_button(self, text):
        ok_button = self.buttons.button(QDialogButtonBox.StandardButton.Ok)
        if ok_button:
            ok_button.setEnabled(bool(text.strip()))

    @property
    def text_value(self) -> str:
        return self.line_edit.text().strip()


def get_name(parent, prompt: str, title: str, prefill: str = "") -> Optional[str]:
    """Show the dialog; the trimmed text, or None when cancelled."""
    dialog = NameInputDialog(prompt, title, prefill, parent=parent)
    if dialog.exec() != QDialog.DialogCode.Accepted:
        return None
    return dialog.text_value
