"""Directory listing state: current path, entries, selection, scroll window."""

from __future__ import annotations

from pathlib import Path

from .fs import list_directory_entries, parent_directory
from .types import DirectoryEntry


def adjust_scroll(selected_index: int, scroll_offset: int, visible_height: int) -> int:
    """Return a scroll offset that keeps ``selected_index`` inside the window."""
    visible_height = max(1, visible_height)
    if selected_index < scroll_offset:
        return selected_index
    if selected_index >= scroll_offset + visible_height:
        return selected_index - visible_height + 1
    return scroll_offset


class DirectoryModel:
    """Listing of one directory with a selection cursor and scroll offset.

    Entries are rebuilt wholesale on every read. Moving into another directory
    resets selection and scroll; re-reading the same directory keeps them,
    clamped to the new listing.
    """

    def __init__(self, path: Path, visible_height: int = 1) -> None:
        self.current_path = path
        self.entries: list[DirectoryEntry] = []
        self.selected_index = 0
        self.scroll_offset = 0
        self.visible_height = max(1, visible_height)
        self.refresh(path)

    def refresh(self, path: Path | None = None) -> None:
        """Re-read ``path`` (default: the current directory)."""
        target = self.current_path if path is None else path
        same_directory = target == self.current_path
        self.current_path = target
        self.entries = list_directory_entries(target)
        if same_directory:
            self.selected_index = self._clamp_index(self.selected_index)
            self.scroll_offset = min(self.scroll_offset, self.selected_index)
        else:
            self.selected_index = 0
            self.scroll_offset = 0
        self._adjust_scroll()

    def _clamp_index(self, index: int) -> int:
        if not self.entries:
            return 0
        return max(0, min(index, len(self.entries) - 1))

    def _adjust_scroll(self) -> None:
        self.scroll_offset = adjust_scroll(self.selected_index, self.scroll_offset, self.visible_height)

    def set_visible_height(self, visible_height: int) -> None:
        """Record the listing viewport height and keep the selection visible."""
        self.visible_height = max(1, visible_height)
        self._adjust_scroll()

    def select(self, index: int) -> None:
        """Select ``index`` clamped into range; no-op when empty."""
        if not self.entries:
            return
        self.selected_index = self._clamp_index(index)
        self._adjust_scroll()

    def move_selection(self, delta: int) -> None:
        """Move the selection by ``delta`` rows, stopping at either end."""
        self.select(self.selected_index + delta)

    @property
    def selected_entry(self) -> DirectoryEntry | None:
        """The entry under the cursor, or ``None`` for an empty listing."""
        if not self.entries:
            return None
        return self.entries[self.selected_index]

    def activate(self, index: int | None = None) -> DirectoryEntry | None:
        """Activate the entry at ``index`` (default: the selection).

        Directories are entered immediately. The entry is returned so the caller
        can open files; ``None`` means there was nothing to activate.
        """
        if index is None:
            index = self.selected_index
        if not 0 <= index < len(self.entries):
            return None
        entry = self.entries[index]
        if entry.is_directory:
            self.refresh(entry.path)
        return entry

    def ascend(self) -> bool:
        """Move to the parent directory; ``False`` at a filesystem root."""
        parent = parent_directory(self.current_path)
        if parent is None:
            return False
        self.refresh(parent)
        return True

    def visible_entries(self) -> list[DirectoryEntry]:
        """Entries inside the current scroll window."""
        return self.entries[self.scroll_offset : self.scroll_offset + self.visible_height]
