"""Single-slot clipboard for copy/cut of one file or folder."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import os


class ClipboardMode(Enum):
    COPY = 'copy'
    CUT = 'cut'


@dataclass(frozen=True)
class ClipboardContent:
    path: str
    mode: ClipboardMode
    is_directory: bool = False

    @property
    def name(self) -> str:
        return os.path.basename(self.path.rstrip(os.sep)) or self.path


class ClipboardManager:
    """Holds at most one pending item.

    A new copy or cut always replaces whatever was held. The slot is only
    emptied by clear(), which the controller calls after a successful paste.
    """

    def __init__(self):
        self._content: Optional[ClipboardContent] = None

    @property
    def content(self) -> Optional[ClipboardContent]:
        return self._content

    def is_empty(self) -> bool:
        return self._content is None

    def set_file(self, path: str, mode: ClipboardMode = ClipboardMode.COPY,
                 is_directory: bool = False) -> ClipboardContent:
        self._content = ClipboardContent(path, mode, is_directory)
        return self._content

    def clear(self) -> None:
        self._content = None
