"""Frame rendering for the file tree, content, chart, and stats panels.

Consumes a ``RenderSnapshot`` plus a ``FrameLayout`` and returns the complete
ANSI frame as a string. Nothing here mutates application state.
"""

from __future__ import annotations

from ..ansi import display_width, expand_tabs
from ..runtime.layout import FrameLayout, Rect, popup_rect
from ..runtime.snapshot import ChartSnapshot, RenderSnapshot
from ..ui_theme import DEFAULT_THEME, IconMode, UITheme, entry_kind_for, rgb_bg, style_for
from ..viewer import sanitize_terminal_text
from .canvas import Canvas
from .chart import braille_rows

CLEAR_SCREEN = "\033[2J"
CURSOR_HOME = "\033[H"

CHART_PLACEHOLDER_LINES: tuple[str, ...] = (
    "",
    "  No numeric data",
    "  detected.",
    "",
    "  Open a two-column",
    "  data file to see",
    "  a scatter plot.",
)

# (key label, description, key background)
STATUS_HINTS: tuple[tuple[str, str, str], ...] = (
    (" ↑↓ ", " Nav ", rgb_bg(97, 175, 239)),
    (" Enter ", " Open ", rgb_bg(152, 195, 121)),
    (" Bksp ", " Parent ", rgb_bg(229, 192, 123)),
    (" j/k ", " Scroll ", rgb_bg(86, 182, 194)),
    (" u/d ", " Page ", rgb_bg(86, 182, 194)),
    (" c ", " Chart ", rgb_bg(198, 120, 221)),
    (" h ", " History ", rgb_bg(229, 192, 123)),
    (" n ", "", rgb_bg(209, 154, 102)),
    (" q ", " Quit ", rgb_bg(224, 108, 117)),
)


def line_number_width(total_lines: int) -> int:
    """Digits needed for the largest line number."""
    return len(str(max(1, total_lines)))


def _range_title(label: str, start: int, visible: int, total: int) -> str:
    return f"{label} [{start + 1}-{min(start + visible, total)}/{total}]"


def draw_file_tree(canvas: Canvas, rect: Rect, snapshot: RenderSnapshot, theme: UITheme) -> None:
    listing = snapshot.directory
    visible = rect.inner_height
    title = _range_title("Files", listing.scroll_offset, visible, listing.total) if listing.total > visible else "Files"
    canvas.draw_box(rect, title, theme.cyan)
    for offset, entry in enumerate(listing.rows[:visible]):
        kind = entry_kind_for(entry.name, entry.path, entry.is_directory)
        glyph, color = style_for(kind, snapshot.icon_mode)
        selected = listing.scroll_offset + offset == listing.selected_index
        canvas.put(
            rect.col + 1,
            rect.row + 1 + offset,
            f"{glyph}{sanitize_terminal_text(entry.name)}",
            theme.selected if selected else color,
            max_cols=rect.inner_width,
        )


def draw_content(canvas: Canvas, rect: Rect, snapshot: RenderSnapshot, theme: UITheme) -> None:
    content = snapshot.content
    if content.total_lines > 0:
        title = f" {_range_title('Content', content.scroll_offset, rect.inner_height, content.total_lines)} "
    else:
        title = " Content Viewer "
    canvas.draw_box(rect, title, theme.green)
    number_width = line_number_width(content.total_lines)
    for offset, (line_number, text) in enumerate(content.rows[: rect.inner_height]):
        row = rect.row + 1 + offset
        used = canvas.put(rect.col + 1, row, f"{line_number:>{number_width}} │ ", theme.dark_gray, max_cols=rect.inner_width)
        canvas.put(
            rect.col + 1 + used,
            row,
            expand_tabs(sanitize_terminal_text(text)),
            max_cols=rect.inner_width - used,
        )


def draw_chart(canvas: Canvas, rect: Rect, chart: ChartSnapshot | None, theme: UITheme) -> None:
    if chart is None:
        canvas.draw_box(rect, " Chart ", theme.purple)
        for offset, line in enumerate(CHART_PLACEHOLDER_LINES[: rect.inner_height]):
            canvas.put(rect.col + 1, rect.row + 1 + offset, line, max_cols=rect.inner_width)
        return

    canvas.draw_box(rect, " Scatter Plot ", theme.purple)
    legend = f" {chart.total_points} pts "
    legend_col = rect.col + rect.width - 1 - display_width(legend)
    if legend_col > rect.col + 1 + display_width(" Scatter Plot "):
        canvas.put(legend_col, rect.row, legend, theme.cyan)

    label_width = max(display_width(label) for label in chart.y_labels)
    plot_col = rect.col + 1 + label_width + 1
    plot_width = rect.col + rect.width - 1 - plot_col
    plot_height = rect.inner_height - 2
    if plot_width <= 0 or plot_height <= 0:
        return
    top = rect.row + 1
    axis_row = top + plot_height

    y_min_label, y_mid_label, y_max_label = chart.y_labels
    for label, row in (
        (y_max_label, top),
        (y_mid_label, top + (plot_height - 1) // 2),
        (y_min_label, top + plot_height - 1),
    ):
        canvas.put(rect.col + 1 + label_width - display_width(label), row, label, theme.gray)
    for row in range(top, axis_row):
        canvas.put(plot_col - 1, row, "│", theme.gray)
    canvas.put(plot_col - 1, axis_row, "└" + "─" * plot_width, theme.gray)

    x_min_label, x_mid_label, x_max_label = chart.x_labels
    label_row = axis_row + 1
    canvas.put(plot_col, label_row, x_min_label, theme.gray, max_cols=plot_width)
    mid_col = plot_col + (plot_width - display_width(x_mid_label)) // 2
    if mid_col > plot_col + display_width(x_min_label):
        canvas.put(mid_col, label_row, x_mid_label, theme.gray)
    max_col = plot_col + plot_width - display_width(x_max_label)
    if max_col > mid_col + display_width(x_mid_label):
        canvas.put(max_col, label_row, x_max_label, theme.gray)

    for offset, line in enumerate(braille_rows(chart.points, chart.bounds, plot_width, plot_height)):
        canvas.put(plot_col, top + offset, line, theme.cyan)


def draw_stats(canvas: Canvas, rect: Rect, stats: str, theme: UITheme) -> None:
    canvas.draw_box(rect, " Info & Stats ", theme.yellow)
    for offset, line in enumerate(stats.splitlines()[: rect.inner_height]):
        canvas.put(rect.col + 1, rect.row + 1 + offset, line, theme.light_gray, max_cols=rect.inner_width)


def draw_path_bar(canvas: Canvas, rect: Rect, snapshot: RenderSnapshot, theme: UITheme) -> None:
    if rect.height <= 0:
        return
    canvas.fill(rect, theme.path_bar)
    path_text = sanitize_terminal_text(str(snapshot.display_path))
    canvas.put(rect.col, rect.row, f" {path_text}", theme.path_bar, max_cols=rect.width)


def draw_status_bar(canvas: Canvas, rect: Rect, icon_mode: IconMode, theme: UITheme) -> None:
    canvas.fill(rect, theme.status_bar)
    col = rect.col
    end = rect.col + rect.width
    for idx, (key_label, description, key_bg) in enumerate(STATUS_HINTS):
        if key_label == " n ":
            description = " Nerd✓ " if icon_mode is IconMode.GLYPH else " Emoji "
        if idx:
            col += canvas.put(col, rect.row, " ", theme.status_bar, max_cols=end - col)
        col += canvas.put(col, rect.row, key_label, theme.hint_text + key_bg, max_cols=end - col)
        col += canvas.put(col, rect.row, description, theme.light_gray + theme.status_bar, max_cols=end - col)


def draw_recent_popup(canvas: Canvas, snapshot: RenderSnapshot, theme: UITheme) -> None:
    popup = snapshot.popup
    rect = popup_rect(canvas.width, canvas.height, popup.total)
    canvas.fill(rect)
    canvas.draw_box(rect, " Recent Files ", theme.purple)
    if popup.total == 0:
        canvas.put(rect.col + 1, rect.row + 2, "  No history", theme.dark_gray, max_cols=rect.inner_width)
        return
    for offset, path in enumerate(popup.paths[: rect.inner_height]):
        selected = popup.scroll_offset + offset == popup.selected_index
        canvas.put(
            rect.col + 1,
            rect.row + 1 + offset,
            sanitize_terminal_text(path.name) or "Unknown",
            theme.selected if selected else theme.light_gray,
            max_cols=rect.inner_width,
        )


def compose_canvas(snapshot: RenderSnapshot, layout: FrameLayout, theme: UITheme = DEFAULT_THEME) -> Canvas:
    """Draw every panel for ``snapshot`` into a fresh canvas."""
    canvas = Canvas(layout.columns, layout.lines)
    draw_file_tree(canvas, layout.tree, snapshot, theme)
    draw_content(canvas, layout.content, snapshot, theme)
    if layout.chart is not None:
        draw_chart(canvas, layout.chart, snapshot.chart, theme)
    draw_stats(canvas, layout.stats, snapshot.stats, theme)
    draw_path_bar(canvas, layout.path_bar, snapshot, theme)
    draw_status_bar(canvas, layout.status_bar, snapshot.icon_mode, theme)
    if snapshot.popup.is_open:
        draw_recent_popup(canvas, snapshot, theme)
    return canvas


def render_frame(
    snapshot: RenderSnapshot,
    layout: FrameLayout,
    *,
    full_redraw: bool,
    theme: UITheme = DEFAULT_THEME,
) -> str:
    """Return the ANSI frame; ``full_redraw`` clears the screen first."""
    lines = compose_canvas(snapshot, layout, theme).to_lines(trim_last_cell=True)
    prefix = CLEAR_SCREEN + CURSOR_HOME if full_redraw else CURSOR_HOME
    return prefix + "\r\n".join(lines)


__all__ = [
    "CHART_PLACEHOLDER_LINES",
    "compose_canvas",
    "line_number_width",
    "render_frame",
]
