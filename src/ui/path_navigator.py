"""
Path navigation widget - editable location bar with a parent-folder button
"""
from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLineEdit, QToolButton, QStyle
from PyQt6.QtCore import pyqtSignal, Qt


class PathNavigator(QWidget):
    """Shows the current directory and lets the user type a new one.

    The widget never decides whether a path is valid. It emits
    path_requested with the trimmed text and waits for set_path() to be
    called with whatever directory is current afterwards.
    """

    path_requested = pyqtSignal(str)
    up_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.current_path = ""
        self.setup_ui()

    def setup_ui(self):
        """Initialize the UI components"""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self.up_button = QToolButton()
        style = self.style()
        if style:
            self.up_button.setIcon(style.standardIcon(QStyle.StandardPixmap.SP_FileDialogToParent))
        self.up_button.setToolTip("Parent folder (Alt+Up)")
        self.up_button.clicked.connect(self.up_requested.emit)
        layout.addWidget(self.up_button)

        self.path_edit = QLineEdit()
        self.path_edit.setPlaceholderText("Type a folder path and press Enter")
        self.path_edit.returnPressed.connect(self.confirm_path_edit)
        layout.addWidget(self.path_edit, 1)

    def set_path(self, path):
        """Display path as the current directory"""
        self.current_path = str(path)
        self.path_edit.setText(self.current_path)

    def reset(self):
        """Throw away whatever was typed and show the current directory again"""
        self.path_edit.setText(self.current_path)

    def focus_edit(self):
        """Select the whole path for typing (Ctrl+L)"""
        self.path_edit.setFocus()
        self.path_edit.selectAll()

    def confirm_path_edit(self):
        new_path = self.path_edit.text().strip()
        if new_path:
            self.path_requested.emit(new_path)
        else:
            self.reset()

    def keyPressEvent(self, event):
        """Esc abandons an edit in progress"""
        if event.key() == Qt.Key.Key_Escape:
            self.reset()
        else:
            super().keyPressEvent(event)
