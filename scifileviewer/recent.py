"""Most-recently-used list of opened files."""

from __future__ import annotations

from pathlib import Path

MAX_RECENT_FILES = 10


class RecentFilesRegistry:
    """Bounded MRU list, newest first, without duplicates.

    Lives for the process only; nothing here is persisted.
    """

    def __init__(self, limit: int = MAX_RECENT_FILES) -> None:
        self.limit = limit
        self.paths: list[Path] = []
        self.selected_index = 0

    def __len__(self) -> int:
        return len(self.paths)

    def record(self, path: Path) -> None:
        """Move ``path`` to the front, evicting the oldest entry past the limit."""
        self.paths = [existing for existing in self.paths if existing != path]
        self.paths.insert(0, path)
        del self.paths[self.limit :]
        self.selected_index = min(self.selected_index, len(self.paths) - 1)

    def select(self, index: int) -> None:
        """Select ``index`` wrapped into range; no-op when empty."""
        if not self.paths:
            return
        self.selected_index = index % len(self.paths)

    def move_selection(self, delta: int) -> None:
        """Move the selection by ``delta``, wrapping at both ends."""
        self.select(self.selected_index + delta)

    @property
    def selected_path(self) -> Path | None:
        """The highlighted path, or ``None`` when there is no history."""
        if not self.paths:
            return None
        return self.paths[self.selected_index]
