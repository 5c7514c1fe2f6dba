"""Loaded-file state: content lines, scroll offset, stats, and chart data."""

from __future__ import annotations

from pathlib import Path

from ..chart import DEFAULT_BOUNDS, ChartBounds, NumericSample, extract_series
from .stats import build_stats_text, read_metadata
from .text import read_text, split_lines

EMPTY_FILE_PLACEHOLDER = "(empty file)"
BINARY_FILE_PLACEHOLDER = "Binary file - no text content to display"
NO_FILE_STATS = "No file selected"
WELCOME_LINES: tuple[str, ...] = (
    "Welcome to Scientific File Viewer!",
    "",
    "Select a file and press Enter to view its contents.",
    "",
    "Supported formats: .txt, .dat, .cif, .xyz, .pdb",
)


class FileViewerModel:
    """Content pane model.

    ``content_lines`` is never empty and ``scroll_offset`` is kept within
    ``[0, max(0, len(content_lines) - visible_height)]`` by every mutator.
    """

    def __init__(self, visible_height: int = 1) -> None:
        self.path: Path | None = None
        self.content_lines: list[str] = list(WELCOME_LINES)
        self.scroll_offset = 0
        self.visible_height = max(1, visible_height)
        self.stats = NO_FILE_STATS
        self.samples: list[NumericSample] = []
        self.bounds: ChartBounds = DEFAULT_BOUNDS

    @property
    def has_chart_data(self) -> bool:
        return bool(self.samples)

    @property
    def max_scroll(self) -> int:
        return max(0, len(self.content_lines) - self.visible_height)

    def load(self, path: Path) -> None:
        """Load ``path``, degrading to a placeholder when it is not text."""
        self.path = path
        self.scroll_offset = 0
        self.samples = []
        self.bounds = DEFAULT_BOUNDS

        metadata = read_metadata(path)
        text = read_text(path)
        if text is None:
            self.content_lines = [BINARY_FILE_PLACEHOLDER]
            self.stats = build_stats_text(metadata)
            return

        self.content_lines = split_lines(text) or [EMPTY_FILE_PLACEHOLDER]
        self.samples, self.bounds = extract_series(text)
        self.stats = build_stats_text(
            metadata,
            line_count=len(self.content_lines),
            point_count=len(self.samples),
        )

    def set_visible_height(self, visible_height: int) -> bool:
        """Record the content viewport height; return whether scroll moved."""
        self.visible_height = max(1, visible_height)
        return self._set_scroll(self.scroll_offset)

    def _set_scroll(self, offset: int) -> bool:
        clamped = max(0, min(offset, self.max_scroll))
        changed = clamped != self.scroll_offset
        self.scroll_offset = clamped
        return changed

    def scroll(self, delta: int) -> bool:
        """Scroll by ``delta`` lines; return whether the offset moved."""
        return self._set_scroll(self.scroll_offset + delta)

    def page(self, direction: int) -> bool:
        """Scroll one viewport height; ``direction`` is ``1`` or ``-1``."""
        step = self.visible_height if direction >= 0 else -self.visible_height
        return self._set_scroll(self.scroll_offset + step)

    def to_start(self) -> bool:
        """Jump to the first line."""
        return self._set_scroll(0)

    def to_end(self) -> bool:
        """Jump so the last line sits at the bottom of the viewport."""
        return self._set_scroll(self.max_scroll)

    def visible_lines(self) -> list[tuple[int, str]]:
        """Return ``(line_number, text)`` rows for the viewport, 1-based."""
        window = self.content_lines[self.scroll_offset : self.scroll_offset + self.visible_height]
        return [(self.scroll_offset + idx + 1, line) for idx, line in enumerate(window)]
