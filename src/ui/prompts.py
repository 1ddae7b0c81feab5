"""
Modal Qt prompts used by the controller for confirmations and names
"""
from typing import Optional

from PyQt6.QtWidgets import QMessageBox

from core.navigation_controller import PromptAnswer
from ui.name_dialog import get_name


class QtPromptProvider:
    """Blocking dialogs parented to the main window"""

    def __init__(self, parent=None):
        self.parent = parent

    def confirm(self, message: str, title: str = "Confirm", default_no: bool = True) -> PromptAnswer:
        dialog = QMessageBox(self.parent)
        dialog.setIcon(QMessageBox.Icon.Question)
        dialog.setWindowTitle(title)
        dialog.setText(message)
        dialog.setStandardButtons(QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No)
        dialog.setDefaultButton(
            QMessageBox.StandardButton.No if default_no else QMessageBox.StandardButton.Yes
        )

        try:
            # exec() hands back a plain int
            reply = QMessageBox.StandardButton(dialog.exec())
        except ValueError:
            return PromptAnswer.CANCELLED
        if reply == QMessageBox.StandardButton.Yes:
            return PromptAnswer.YES
        if reply == QMessageBox.StandardButton.No:
            return PromptAnswer.NO
        return PromptAnswer.CANCELLED

    def request_text(self, prompt: str, title: str, prefill: str = "") -> Optional[str]:
        return get_name(self.parent, prompt, title, prefill)
