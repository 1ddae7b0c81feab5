"""
Main window wiring tests: real filesystem in tmp_path, dialogs patched out
"""
from pathlib import Path

import pytest
from PyQt6.QtWidgets import QMessageBox, QDialog

from ui.main_window import MainWindow
from ui.name_dialog import NameInputDialog
from utils.settings import Settings


@pytest.fixture
def warnings_shown(monkeypatch):
    """Record every message box; answer Yes to confirmations"""
    shown = []

    def fake_exec(self):
        shown.append((self.windowTitle(), self.text()))
        return QMessageBox.StandardButton.Yes.value

    monkeypatch.setattr(QMessageBox, "exec", fake_exec)
    return shown


@pytest.fixture
def typed_name(monkeypatch):
    """Answer the next name dialog with whatever is stored in the returned list"""
    answers = []

    def fake_exec(self):
        if not answers:
            return QDialog.DialogCode.Rejected
        self.line_edit.setText(answers.pop(0))
        return QDialog.DialogCode.Accepted

    monkeypatch.setattr(NameInputDialog, "exec", fake_exec)
    return answers


@pytest.fixture
def browse_root(tmp_path):
    root = tmp_path / "root"
    (root / "reports").mkdir(parents=True)
    (root / "reports" / "q1.pdf").write_bytes(b"%PDF")
    (root / "draft.txt").write_text("draft")
    return root


@pytest.fixture
def window(qapp, tmp_path, browse_root):
    win = MainWindow(initial_path=str(browse_root), settings=Settings(tmp_path / "cfg"))
    yield win
    win.deleteLater()


def _shown_names(win):
    proxy = win.file_list.proxy_model
    return [proxy.data(proxy.index(r, 0)) for r in range(proxy.rowCount())]


def test_starts_in_requested_directory(window, browse_root):
    assert window.path_navigator.path_edit.text() == str(browse_root)
    assert _shown_names(window) == ["reports", "draft.txt"]
    assert str(browse_root) in window.windowTitle()


def test_bad_start_directory_falls_back_to_home(qapp, tmp_path):
    win = MainWindow(initial_path=str(tmp_path / "missing"), settings=Settings(tmp_path / "cfg"))

    assert win.controller.current_directory == str(Path.home())


def test_failed_navigation_warns_and_restores_path_bar(window, browse_root, warnings_shown):
    window.path_navigator.path_edit.setText(str(browse_root / "nope"))
    window.path_navigator.confirm_path_edit()

    assert warnings_shown == [("Cannot Open Folder", f"Could not open '{browse_root / 'nope'}'.")]
    assert window.path_navigator.path_edit.text() == str(browse_root)


def test_activating_folder_enters_it(window, browse_root):
    window.file_list.item_activated.emit("reports")

    assert window.controller.current_directory == str(browse_root / "reports")
    assert _shown_names(window) == ["q1.pdf"]


def test_navigate_up_selects_previous_folder(window, browse_root):
    window.navigate_to(str(browse_root / "reports"))

    window.navigate_up()

    assert window.controller.current_directory == str(browse_root)
    assert window.file_list.selected_name() == "reports"


def test_create_folder_reports_in_status_bar(window, browse_root, typed_name):
    typed_name.append("photos")

    window.create_new_folder()

    assert (browse_root / "photos").is_dir()
    assert "photos" in _shown_names(window)
    assert window.statusBar().currentMessage() == "Created folder 'photos'."


def test_cancelled_rename_changes_nothing(window, browse_root, typed_name, warnings_shown):
    window.file_list.select_item_by_name("draft.txt")

    window.rename_selected()

    assert (browse_root / "draft.txt").exists()
    assert warnings_shown == []


def test_delete_confirmed(window, browse_root, warnings_shown):
    window.file_list.select_item_by_name("draft.txt")

    window.delete_selected()

    assert warnings_shown[0][0] == "Delete Permanently"
    assert not (browse_root / "draft.txt").exists()
    assert _shown_names(window) == ["reports"]


def test_copy_then_paste_in_subfolder(window, browse_root):
    window.file_list.select_item_by_name("draft.txt")
    window.copy_selected()
    assert window.statusBar().currentMessage() == "Copied 'draft.txt'. Use Paste to place it."

    window.navigate_to(str(browse_root / "reports"))
    window.paste_into_current()

    assert (browse_root / "reports" / "draft.txt").read_text() == "draft"
    assert (browse_root / "draft.txt").exists()
    assert window.controller.clipboard_content is None


def test_paste_with_empty_clipboard_warns(window, warnings_shown):
    window.paste_into_current()

    assert warnings_shown == [("Paste Failed", "Nothing to paste.")]


def test_show_hidden_toggle_is_saved(window, browse_root, tmp_path):
    (browse_root / ".hidden").write_text("")
    window.refresh()
    assert ".hidden" in _shown_names(window)

    window.show_hidden_action.setChecked(False)

    assert ".hidden" not in _shown_names(window)
    assert Settings(tmp_path / "cfg").get("show_hidden") is False
