"""Navigation and file-operation controller.

Owns the current directory and the clipboard slot and turns user actions
into filesystem calls. Every action returns an ActionOutcome for the UI to
display, or None when the user backed out of a prompt. Nothing raised by a
collaborator is expected here: the backend and the lister report failures as
values.

Collaborators are passed in explicitly:

  backend   create_directory, rename, delete_recursive, copy, move, exists
            (see core.file_operations.FileOperations)
  lister    list_directory(path) -> DirectoryListing
  prompts   confirm(message, title, default_no) -> PromptAnswer
            request_text(prompt, title, prefill) -> str | None
  launch    callable(path) -> (success, error), opens a file externally
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Tuple

from core.clipboard_manager import ClipboardContent, ClipboardManager, ClipboardMode
from core.directory_listing import DirectoryEntry, DirectoryListing
from core.paths import is_same_or_inside, is_valid_entry_name, join_path, normalize_path

logger = logging.getLogger(__name__)

NOTHING_SELECTED = "Nothing selected."
NOTHING_TO_PASTE = "Nothing to paste."


class PromptAnswer(Enum):
    YES = 'yes'
    NO = 'no'
    CANCELLED = 'cancelled'


@dataclass(frozen=True)
class ActionOutcome:
    success: bool
    message: Optional[str] = None
    current_directory: Optional[str] = None

    @classmethod
    def ok(cls, message: Optional[str] = None, current_directory: Optional[str] = None) -> 'ActionOutcome':
        return cls(True, message, current_directory)

    @classmethod
    def failed(cls, message: str, current_directory: Optional[str] = None) -> 'ActionOutcome':
        return cls(False, message, current_directory)


class NavigationController:
    """Plain controller object the main window calls into, one method per action."""

    def __init__(self, backend, lister, prompts,
                 launch: Callable[[str], Tuple[bool, str]],
                 initial_path: Optional[str] = None):
        self.backend = backend
        self.lister = lister
        self.prompts = prompts
        self.launch = launch
        self.clipboard = ClipboardManager()
        self._current_directory = normalize_path(initial_path or str(Path.home()))
        self._entries: Tuple[DirectoryEntry, ...] = ()

    # ---- State ----
    @property
    def current_directory(self) -> str:
        return self._current_directory

    @property
    def entries(self) -> Tuple[DirectoryEntry, ...]:
        """Entries of the most recent successful listing of the current directory"""
        return self._entries

    @property
    def clipboard_content(self) -> Optional[ClipboardContent]:
        return self.clipboard.content

    def full_path(self, name: str) -> str:
        return join_path(self._current_directory, name)

    def find_entry(self, name: str) -> Optional[DirectoryEntry]:
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def _reload(self) -> DirectoryListing:
        listing = self.lister.list_directory(self._current_directory)
        if listing.ok:
            self._entries = listing.entries
        else:
            # The directory vanished underneath us; keep the path, show nothing
            logger.warning("Refresh of %s failed: %s", self._current_directory, listing.error)
            self._entries = ()
        return listing

    # ---- Navigation ----
    def navigate(self, target_path: str) -> ActionOutcome:
        """Open target_path and make it the current directory on success."""
        if not target_path:
            return ActionOutcome.failed("No path given.", self._current_directory)

        normalized = normalize_path(target_path, self._current_directory)
        listing = self.lister.list_directory(normalized)
        if not listing.ok:
            logger.info("Navigation to %s failed: %s", normalized, listing.error)
            return ActionOutcome.failed(f"Could not open '{target_path}'.", self._current_directory)

        self._current_directory = listing.path
        self._entries = listing.entries
        logger.debug("Current directory is now %s", self._current_directory)
        return ActionOutcome.ok(current_directory=self._current_directory)

    def navigate_up(self) -> ActionOutcome:
        parent = str(Path(self._current_directory).parent)
        return self.navigate(parent)

    def activate_entry(self, entry_name: str) -> ActionOutcome:
        """Open an activated row: folders are entered, files are launched."""
        entry = self.find_entry(entry_name) if entry_name else None
        if entry is None:
            return ActionOutcome.failed(NOTHING_SELECTED)

        path = self.full_path(entry.name)
        if entry.is_directory:
            return self.navigate(path)

        success, error = self.launch(path)
        if not success:
            logger.warning("Launching %s failed: %s", path, error)
            return ActionOutcome.failed(f"Could not open '{entry.name}'.")
        return ActionOutcome.ok(f"Opened '{entry.name}'.")

    def refresh(self) -> ActionOutcome:
        self._reload()
        return ActionOutcome.ok("Refreshed.")

    # ---- File operations ----
    def create_folder(self) -> Optional[ActionOutcome]:
        name = self.prompts.request_text("Folder name:", "New Folder", "")
        name = name.strip() if name else ""
        if not name:
            return None

        failure = f"Failed to create folder '{name}'; it may already exist."
        if not is_valid_entry_name(name):
            return ActionOutcome.failed(failure)

        success, error = self.backend.create_directory(self.full_path(name))
        if not success:
            logger.warning("Create folder %s failed: %s", name, error)
            return ActionOutcome.failed(failure)

        self._reload()
        return ActionOutcome.ok(f"Created folder '{name}'.")

    def rename(self, selected_name: Optional[str]) -> Optional[ActionOutcome]:
        if not selected_name:
            return ActionOutcome.failed(NOTHING_SELECTED)

        new_name = self.prompts.request_text(f"Rename '{selected_name}' to:", "Rename", selected_name)
        new_name = new_name.strip() if new_name else ""
        if not new_name or new_name == selected_name:
            return None

        failure = f"Could not rename '{selected_name}' to '{new_name}'."
        if not is_valid_entry_name(new_name):
            return ActionOutcome.failed(failure)

        success, error = self.backend.rename(self.full_path(selected_name), self.full_path(new_name))
        if not success:
            logger.warning("Rename %s -> %s failed: %s", selected_name, new_name, error)
            return ActionOutcome.failed(failure)

        self._reload()
        return ActionOutcome.ok(f"Renamed '{selected_name}' to '{new_name}'.")

    def delete(self, selected_name: Optional[str]) -> Optional[ActionOutcome]:
        if not selected_name:
            return ActionOutcome.failed(NOTHING_SELECTED)

        answer = self.prompts.confirm(
            f"Are you sure you want to permanently delete '{selected_name}'?",
            "Delete Permanently",
            True,
        )
        if answer is not PromptAnswer.YES:
            return None

        success, error = self.backend.delete_recursive(self.full_path(selected_name))
        if not success:
            logger.warning("Delete %s failed: %s", selected_name, error)
            return ActionOutcome.failed(f"Could not delete '{selected_name}'.")

        self._reload()
        return ActionOutcome.ok(f"Deleted '{selected_name}'.")

    # ---- Copy/Cut/Paste ----
    def copy(self, selected_name: Optional[str]) -> ActionOutcome:
        return self._mark(selected_name, ClipboardMode.COPY)

    def cut(self, selected_name: Optional[str]) -> ActionOutcome:
        return self._mark(selected_name, ClipboardMode.CUT)

    def _mark(self, selected_name: Optional[str], mode: ClipboardMode) -> ActionOutcome:
        if not selected_name:
            return ActionOutcome.failed(NOTHING_SELECTED)
        path = self.full_path(selected_name)
        entry = self.find_entry(selected_name)
        is_directory = entry.is_directory if entry else Path(path).is_dir()
        content = self.clipboard.set_file(path, mode, is_directory)
        logger.debug("Clipboard now holds %s (%s)", content.path, mode.value)
        verb = "Copied" if mode is ClipboardMode.COPY else "Cut"
        return ActionOutcome.ok(f"{verb} '{selected_name}'. Use Paste to place it.")

    def paste(self) -> Optional[ActionOutcome]:
        content = self.clipboard.content
        if content is None:
            return ActionOutcome.failed(NOTHING_TO_PASTE)

        name = content.name
        destination = self.full_path(name)
        # Not into its own subtree, and not over a folder that holds the source
        if is_same_or_inside(destination, content.path) or is_same_or_inside(content.path, destination):
            return ActionOutcome.failed(f"Cannot paste '{name}' into itself.")

        overwrite = False
        if self.backend.exists(destination):
            answer = self.prompts.confirm(
                f"'{name}' already exists in this folder. Do you want to replace it?",
                "Replace Existing Item",
                True,
            )
            if answer is not PromptAnswer.YES:
                return None
            overwrite = True

        if content.mode is ClipboardMode.CUT:
            success, error = self.backend.move(content.path, destination, overwrite)
        else:
            success, error = self.backend.copy(content.path, destination, overwrite, content.is_directory)

        if not success:
            # Slot stays occupied so the user can retry
            logger.warning("Paste of %s into %s failed: %s", content.path, self._current_directory, error)
            return ActionOutcome.failed(f"Could not paste '{name}'.")

        self.clipboard.clear()
        self._reload()
        return ActionOutcome.ok(f"Pasted '{name}'.")
