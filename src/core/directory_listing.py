"""
Directory enumeration for the file list
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from core.paths import normalize_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    is_directory: bool
    # Display only; the controller never looks at these
    size: Optional[int] = None
    modified: Optional[datetime] = None


@dataclass(frozen=True)
class DirectoryListing:
    path: str
    entries: Tuple[DirectoryEntry, ...] = ()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DirectoryLister:
    """Lists one directory level, directories first then by name."""

    def __init__(self, show_hidden: bool = True):
        self.show_hidden = show_hidden

    def list_directory(self, path: str) -> DirectoryListing:
        """Open path and return its entries, or a listing carrying the error"""
        normalized = normalize_path(path)
        try:
            entries = []
            with os.scandir(normalized) as it:
                for item in it:
                    if not self.show_hidden and item.name.startswith('.'):
                        continue
                    entries.append(self._make_entry(item))
        except OSError as e:
            # NotADirectoryError and PermissionError land here too
            logger.info("Could not open directory %s: %s", normalized, e)
            return DirectoryListing(normalized, (), str(e) or "cannot open directory")

        entries.sort(key=lambda x: (not x.is_directory, x.name.lower()))
        return DirectoryListing(normalized, tuple(entries))

    @staticmethod
    def _make_entry(item: os.DirEntry) -> DirectoryEntry:
        try:
            is_dir = item.is_dir()
        except OSError:
            is_dir = False
        try:
            # Dangling symlinks fall back to the link's own stat
            try:
                stat_info = item.stat()
            except FileNotFoundError:
                stat_info = item.stat(follow_symlinks=False)
            size = None if is_dir else stat_info.st_size
            modified = datetime.fromtimestamp(stat_info.st_mtime)
        except OSError:
            size = None
            modified = None
        return DirectoryEntry(item.name, is_dir, size, modified)
