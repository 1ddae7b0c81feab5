import os
import sys
import pytest
from pathlib import Path

# Add src directory to Python path for imports
PROJECT_ROOT = Path(__file__).parent.parent
SRC_DIR = PROJECT_ROOT / 'src'
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

# Force offscreen platform early for all tests before any Qt import to reduce GUI driver related crashes
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from core.directory_listing import DirectoryEntry, DirectoryListing
from core.navigation_controller import NavigationController


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Provide a single QApplication instance for the whole test session.

    Avoids creating/destroying multiple QApplication objects which can cause
    segmentation faults in some PyQt builds when tests are run collectively.
    """
    app = QApplication.instance() or QApplication([])
    yield app


class FakeLister:
    """In-memory directory tree: path -> entries. Unknown paths fail to open."""

    def __init__(self, tree=None):
        self.tree = dict(tree or {})
        self.calls = []

    def list_directory(self, path):
        self.calls.append(path)
        if path not in self.tree:
            return DirectoryListing(path, (), "No such file or directory")
        return DirectoryListing(path, tuple(self.tree[path]))


class FakeBackend:
    """Records every primitive call; operations named in `failing` report failure."""

    def __init__(self):
        self.calls = []
        self.exists_calls = []
        self.existing = set()
        self.failing = set()

    def _result(self, op, *args):
        self.calls.append((op,) + args)
        if op in self.failing:
            return False, f"{op} failed"
        return True, ""

    def create_directory(self, path):
        return self._result('create_directory', path)

    def rename(self, old_path, new_path):
        return self._result('rename', old_path, new_path)

    def delete_recursive(self, path):
        return self._result('delete_recursive', path)

    def copy(self, src, dest, overwrite=False, recursive=True):
        return self._result('copy', src, dest, overwrite, recursive)

    def move(self, src, dest, overwrite=False):
        return self._result('move', src, dest, overwrite)

    def exists(self, path):
        # Queries go to their own list so `calls` holds mutations only
        self.exists_calls.append(path)
        return path in self.existing


class FakePrompts:
    """Scripted answers; raises if a prompt nobody expected shows up."""

    def __init__(self):
        self.text_answers = []
        self.confirm_answers = []
        self.text_requests = []
        self.confirm_requests = []

    def request_text(self, prompt, title, prefill=""):
        self.text_requests.append((prompt, title, prefill))
        if not self.text_answers:
            raise AssertionError(f"Unexpected text prompt: {prompt}")
        return self.text_answers.pop(0)

    def confirm(self, message, title="Confirm", default_no=True):
        self.confirm_requests.append((message, title, default_no))
        if not self.confirm_answers:
            raise AssertionError(f"Unexpected confirmation: {message}")
        return self.confirm_answers.pop(0)


class FakeLauncher:
    def __init__(self):
        self.opened = []
        self.result = (True, "")

    def __call__(self, path):
        self.opened.append(path)
        return self.result


HOME_TREE = {
    "/home/u": [
        DirectoryEntry("archive", True),
        DirectoryEntry("reports", True),
        DirectoryEntry("draft.txt", False, 12),
        DirectoryEntry("notes", True),
    ],
    "/home/u/archive": [],
    "/home/u/reports": [DirectoryEntry("q1.pdf", False, 2048)],
    "/home/u/notes": [],
    "/": [DirectoryEntry("home", True)],
    "/home": [DirectoryEntry("u", True)],
}


@pytest.fixture
def fake_lister():
    return FakeLister(HOME_TREE)


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def fake_prompts():
    return FakePrompts()


@pytest.fixture
def fake_launcher():
    return FakeLauncher()


@pytest.fixture
def controller(fake_backend, fake_lister, fake_prompts, fake_launcher):
    """Controller sitting in /home/u with the listing already loaded"""
    ctl = NavigationController(fake_backend, fake_lister, fake_prompts, fake_launcher, initial_path="/home/u")
    assert ctl.navigate("/home/u").success
    fake_lister.calls.clear()
    return ctl

