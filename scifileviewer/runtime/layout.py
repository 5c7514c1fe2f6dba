"""Screen geometry for the three-column viewer.

Pure functions of terminal size and chart visibility. The event loop feeds
the resulting viewport heights to the state machine before handling keys and
hands the same layout to the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass

TREE_PERCENT = 20
CONTENT_PERCENT = 50
CHART_PERCENT = 60
POPUP_MAX_HEIGHT = 14
POPUP_EMPTY_HEIGHT = 5
POPUP_MIN_WIDTH = 30
POPUP_MAX_WIDTH = 60


@dataclass(frozen=True)
class Rect:
    """Cell rectangle; ``col``/``row`` are 0-based."""

    col: int
    row: int
    width: int
    height: int

    @property
    def inner_height(self) -> int:
        """Rows available inside a one-cell border."""
        return max(0, self.height - 2)

    @property
    def inner_width(self) -> int:
        return max(0, self.width - 2)


@dataclass(frozen=True)
class ViewportGeometry:
    """Visible row counts the state machine needs for scrolling decisions."""

    tree_rows: int
    content_rows: int
    popup_rows: int


@dataclass(frozen=True)
class FrameLayout:
    columns: int
    lines: int
    tree: Rect
    content: Rect
    chart: Rect | None
    stats: Rect
    path_bar: Rect
    status_bar: Rect

    @property
    def viewport(self) -> ViewportGeometry:
        return ViewportGeometry(
            tree_rows=max(1, self.tree.inner_height),
            content_rows=max(1, self.content.inner_height),
            popup_rows=max(1, min(POPUP_MAX_HEIGHT, self.lines) - 2),
        )


def compute_layout(columns: int, lines: int, chart_visible: bool) -> FrameLayout:
    """Split the terminal into file tree, content, chart/stats, and two bars."""
    columns = max(1, columns)
    lines = max(1, lines)
    main_height = max(0, lines - 2)

    tree_width = columns * TREE_PERCENT // 100
    content_width = columns * CONTENT_PERCENT // 100
    right_width = columns - tree_width - content_width
    right_col = tree_width + content_width

    tree = Rect(0, 0, tree_width, main_height)
    content = Rect(tree_width, 0, content_width, main_height)
    if chart_visible:
        chart_height = main_height * CHART_PERCENT // 100
        chart: Rect | None = Rect(right_col, 0, right_width, chart_height)
        stats = Rect(right_col, chart_height, right_width, main_height - chart_height)
    else:
        chart = None
        stats = Rect(right_col, 0, right_width, main_height)

    return FrameLayout(
        columns=columns,
        lines=lines,
        tree=tree,
        content=content,
        chart=chart,
        stats=stats,
        path_bar=Rect(0, main_height, columns, 1 if lines >= 2 else 0),
        status_bar=Rect(0, lines - 1, columns, 1),
    )


def popup_rect(columns: int, lines: int, entry_count: int) -> Rect:
    """Centered recent-files popup sized to its entries."""
    width = int(min(POPUP_MAX_WIDTH, max(POPUP_MIN_WIDTH, columns * 0.5)))
    width = min(width, columns)
    if entry_count == 0:
        height = POPUP_EMPTY_HEIGHT
    else:
        height = min(entry_count + 4, POPUP_MAX_HEIGHT)
    height = min(height, lines)
    return Rect((columns - width) // 2, (lines - height) // 2, width, height)
