"""
Main window for Simple File Manager

The window only renders. Every menu entry, shortcut and mouse action calls
a NavigationController method and then shows the ActionOutcome it got back.
"""
import logging
import os
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QToolBar, QMessageBox, QMenu
from PyQt6.QtGui import QKeySequence, QAction

from core.directory_listing import DirectoryLister
from core.file_operations import FileOperations
from core.navigation_controller import ActionOutcome, NavigationController
from ui.file_list_view import FileListView
from ui.path_navigator import PathNavigator
from ui.prompts import QtPromptProvider
from utils.settings import Settings

logger = logging.getLogger(__name__)

STATUS_TIMEOUT_MS = 5000


class MainWindow(QMainWindow):
    """Main application window"""

    def __init__(self, initial_path=None, settings: Optional[Settings] = None,
                 controller: Optional[NavigationController] = None):
        super().__init__()
        self.settings = settings or Settings()
        self.prompts = QtPromptProvider(self)
        self.controller = controller or NavigationController(
            backend=FileOperations,
            lister=DirectoryLister(show_hidden=bool(self.settings.get("show_hidden", True))),
            prompts=self.prompts,
            launch=FileOperations.open_with_default,
        )

        self.setup_ui()
        self.create_actions()
        self.create_menus()
        self.create_toolbar()
        self.restore_settings()
        self.open_initial_directory(initial_path)

    def setup_ui(self):
        """Setup the main window UI"""
        self.setWindowTitle("Simple File Manager")
        self.setMinimumSize(800, 600)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.path_navigator = PathNavigator()
        self.path_navigator.path_requested.connect(self.navigate_to)
        self.path_navigator.up_requested.connect(self.navigate_up)

        self.file_list = FileListView(settings=self.settings)
        self.file_list.item_activated.connect(self.activate_entry)
        self.file_list.context_menu_requested.connect(self.show_context_menu)
        self.file_list.parent_navigation_requested.connect(self.navigate_up)
        layout.addWidget(self.file_list)

        self.statusBar()

    def _action(self, text, shortcut, slot):
        action = QAction(text, self)
        if shortcut is not None:
            action.setShortcut(QKeySequence(shortcut))
        action.triggered.connect(lambda _checked=False: slot())
        self.addAction(action)
        return action

    def create_actions(self):
        self.new_folder_action = self._action("New Folder", "Ctrl+Shift+N", self.create_new_folder)
        self.exit_action = self._action("Exit", QKeySequence.StandardKey.Quit, self.close)
        self.rename_action = self._action("Rename", "F2", self.rename_selected)
        self.delete_action = self._action("Delete", QKeySequence.StandardKey.Delete, self.delete_selected)
        self.copy_action = self._action("Copy", QKeySequence.StandardKey.Copy, self.copy_selected)
        self.cut_action = self._action("Cut", QKeySequence.StandardKey.Cut, self.cut_selected)
        self.paste_action = self._action("Paste", QKeySequence.StandardKey.Paste, self.paste_into_current)
        self.refresh_action = self._action("Refresh", QKeySequence.StandardKey.Refresh, self.refresh)
        self.up_action = self._action("Parent Folder", "Alt+Up", self.navigate_up)
        self.location_action = self._action("Location...", "Ctrl+L", self.path_navigator.focus_edit)

        self.show_hidden_action = QAction("Show Hidden Files", self)
        self.show_hidden_action.setCheckable(True)
        self.show_hidden_action.setShortcut(QKeySequence("Ctrl+H"))
        self.show_hidden_action.setChecked(bool(self.settings.get("show_hidden", True)))
        self.show_hidden_action.toggled.connect(self.set_show_hidden)

    def create_menus(self):
        menu_bar = self.menuBar()
        if menu_bar is None:
            return
        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.new_folder_action)
        file_menu.addSeparator()
        file_menu.addAction(self.exit_action)

        edit_menu = menu_bar.addMenu("&Edit")
        for action in (self.cut_action, self.copy_action, self.paste_action):
            edit_menu.addAction(action)
        edit_menu.addSeparator()
        edit_menu.addAction(self.rename_action)
        edit_menu.addAction(self.delete_action)

        view_menu = menu_bar.addMenu("&View")
        view_menu.addAction(self.refresh_action)
        view_menu.addAction(self.show_hidden_action)

        go_menu = menu_bar.addMenu("&Go")
        go_menu.addAction(self.up_action)
        go_menu.addAction(self.location_action)

    def create_toolbar(self):
        toolbar = QToolBar()
        toolbar.setMovable(False)
        self.addToolBar(toolbar)
        toolbar.addWidget(self.path_navigator)
        toolbar.addSeparator()
        toolbar.addAction(self.new_folder_action)
        toolbar.addAction(self.refresh_action)

    def open_initial_directory(self, initial_path):
        """Start in initial_path if it opens, otherwise in the controller's starting directory"""
        if initial_path:
            outcome = self.controller.navigate(initial_path)
            if outcome.success:
                self.render()
                return
            logger.warning("Could not open start directory %s", initial_path)
        self.controller.refresh()
        self.render()

    # ---- Rendering ----
    def render(self):
        """Sync the path bar and file list with the controller's state"""
        current = self.controller.current_directory
        self.setWindowTitle(f"{current} - Simple File Manager")
        self.path_navigator.set_path(current)
        self.file_list.set_entries(self.controller.entries)

    def show_outcome(self, outcome: Optional[ActionOutcome], title: str):
        """Re-render and report an outcome; None means the user backed out"""
        if outcome is None:
            return
        self.render()
        if outcome.success:
            if outcome.message:
                self.statusBar().showMessage(outcome.message, STATUS_TIMEOUT_MS)
        else:
            self.show_warning(title, outcome.message or "The operation failed.")

    def show_warning(self, title, message):
        dialog = QMessageBox(self)
        dialog.setIcon(QMessageBox.Icon.Warning)
        dialog.setWindowTitle(title)
        dialog.setText(message)
        dialog.exec()

    # ---- Navigation ----
    def navigate_to(self, path):
        outcome = self.controller.navigate(path)
        # A failed attempt re-renders the previous directory into the path bar
        self.show_outcome(outcome, "Cannot Open Folder")
        if outcome.success:
            self.file_list.setFocus()

    def navigate_up(self):
        previous = self.controller.current_directory
        outcome = self.controller.navigate_up()
        self.show_outcome(outcome, "Cannot Open Folder")
        if outcome.success:
            # Land on the folder we just came out of
            self.file_list.select_item_by_name(os.path.basename(previous))

    def activate_entry(self, name):
        self.show_outcome(self.controller.activate_entry(name), "Open Failed")

    def refresh(self):
        self.show_outcome(self.controller.refresh(), "Refresh")

    def set_show_hidden(self, show_hidden):
        self.settings.set("show_hidden", bool(show_hidden))
        lister = self.controller.lister
        if hasattr(lister, "show_hidden"):
            lister.show_hidden = bool(show_hidden)
        self.refresh()

    # ---- File operations ----
    def create_new_folder(self):
        self.show_outcome(self.controller.create_folder(), "Create Folder Failed")

    def rename_selected(self):
        self.show_outcome(self.controller.rename(self.file_list.selected_name()), "Rename Failed")

    def delete_selected(self):
        self.show_outcome(self.controller.delete(self.file_list.selected_name()), "Delete Failed")

    # ---- Copy/Cut/Paste ----
    def copy_selected(self):
        self.show_outcome(self.controller.copy(self.file_list.selected_name()), "Copy")

    def cut_selected(self):
        self.show_outcome(self.controller.cut(self.file_list.selected_name()), "Cut")

    def paste_into_current(self):
        self.show_outcome(self.controller.paste(), "Paste Failed")

    def show_context_menu(self, name, position):
        """Context menu for a row, or for the empty area when name is ''"""
        menu = QMenu(self)
        if name:
            open_action = menu.addAction("Open")
            open_action.triggered.connect(lambda: self.activate_entry(name))
            menu.addSeparator()
            menu.addAction(self.cut_action)
            menu.addAction(self.copy_action)
        menu.addAction(self.paste_action)
        self.paste_action.setEnabled(self.controller.clipboard_content is not None)
        if name:
            menu.addSeparator()
            menu.addAction(self.rename_action)
            menu.addAction(self.delete_action)
        menu.addSeparator()
        menu.addAction(self.new_folder_action)
        menu.addAction(self.refresh_action)
        menu.exec(position)
        self.paste_action.setEnabled(True)

    # ---- Settings ----
    def restore_settings(self):
        """Restore window settings"""
        geometry = self.settings.get("window_geometry")
        if geometry:
            self.restoreGeometry(geometry)

    def save_settings(self):
        """Save window settings"""
        self.settings.set("window_geometry", self.saveGeometry())

    def closeEvent(self, a0):  # type: ignore[override]
        """Handle window close event and persist settings."""
        self.save_settings()
        super().closeEvent(a0)
