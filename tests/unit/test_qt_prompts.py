"""
Tests for the Qt prompt provider and the name input dialog
"""
import pytest
from PyQt6.QtWidgets import QMessageBox, QDialog, QDialogButtonBox

from core.navigation_controller import PromptAnswer
from ui.name_dialog import NameInputDialog, _selection_span, get_name
from ui.prompts import QtPromptProvider


@pytest.mark.parametrize("filename, span", [
    ("hello.txt", (0, 5)),
    ("hello.tar.gz", (0, 5)),
    ("Makefile", (0, 8)),
    (".bashrc", (0, 7)),
    (".config.json", (0, 7)),
    ("", (0, 0)),
])
def test_selection_span(filename, span):
    assert _selection_span(filename) == span


def test_dialog_prefills_and_selects_base_name(qapp):
    dialog = NameInputDialog("Rename 'hello.txt' to:", "Rename", "hello.txt")

    assert dialog.windowTitle() == "Rename"
    assert dialog.line_edit.text() == "hello.txt"
    assert dialog.line_edit.selectedText() == "hello"


def test_ok_disabled_for_blank_name(qapp):
    dialog = NameInputDialog("Folder name:", "New Folder", "")
    ok_button = dialog.buttons.button(QDialogButtonBox.StandardButton.Ok)

    assert not ok_button.isEnabled()
    dialog.line_edit.setText("   ")
    assert not ok_button.isEnabled()
    dialog.line_edit.setText("photos")
    assert ok_button.isEnabled()


def test_get_name_returns_trimmed_text_when_accepted(qapp, monkeypatch):
    def accept_with_text(self):
        self.line_edit.setText("  photos  ")
        return QDialog.DialogCode.Accepted

    monkeypatch.setattr(NameInputDialog, "exec", accept_with_text)

    assert get_name(None, "Folder name:", "New Folder") == "photos"


def test_get_name_returns_none_when_cancelled(qapp, monkeypatch):
    monkeypatch.setattr(NameInputDialog, "exec", lambda self: QDialog.DialogCode.Rejected)

    assert get_name(None, "Folder name:", "New Folder") is None


@pytest.mark.parametrize("button, answer", [
    (QMessageBox.StandardButton.Yes, PromptAnswer.YES),
    (QMessageBox.StandardButton.No, PromptAnswer.NO),
    (QMessageBox.StandardButton.Cancel, PromptAnswer.CANCELLED),
])
def test_confirm_maps_buttons(qapp, monkeypatch, button, answer):
    monkeypatch.setattr(QMessageBox, "exec", lambda self: button.value)

    assert QtPromptProvider().confirm("Delete?", "Delete Permanently") is answer


def test_confirm_defaults_to_no(qapp, monkeypatch):
    seen = {}

    def capture(self):
        seen['default'] = self.defaultButton()
        seen['no'] = self.button(QMessageBox.StandardButton.No)
        seen['text'] = self.text()
        return QMessageBox.StandardButton.No.value

    monkeypatch.setattr(QMessageBox, "exec", capture)

    QtPromptProvider().confirm("Replace 'a.txt'?", "Replace", default_no=True)

    assert seen['default'] == seen['no']
    assert seen['text'] == "Replace 'a.txt'?"


def test_request_text_passes_prefill(qapp, monkeypatch):
    seen = {}

    def capture(self):
        seen['text'] = self.line_edit.text()
        seen['title'] = self.windowTitle()
        return QDialog.DialogCode.Rejected

    monkeypatch.setattr(NameInputDialog, "exec", capture)

    assert QtPromptProvider().request_text("Rename 'a.txt' to:", "Rename", "a.txt") is None
    assert seen == {'text': "a.txt", 'title': "Rename"}
