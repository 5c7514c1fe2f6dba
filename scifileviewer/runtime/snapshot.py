"""Read-only render snapshot built from ``AppState``.

Renderers receive only this view of the state; the chart series is
downsampled here for the point budget the renderer asks for.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..chart import ChartBounds, NumericSample, axis_labels, downsample
from ..file_tree_model import DirectoryEntry
from ..ui_theme import IconMode
from .state import AppState


@dataclass(frozen=True)
class DirectorySnapshot:
    current_path: Path
    rows: tuple[DirectoryEntry, ...]
    scroll_offset: int
    selected_index: int
    total: int
    visible_height: int


@dataclass(frozen=True)
class ContentSnapshot:
    path: Path | None
    rows: tuple[tuple[int, str], ...]
    scroll_offset: int
    total_lines: int
    visible_height: int


@dataclass(frozen=True)
class ChartSnapshot:
    points: tuple[NumericSample, ...]
    total_points: int
    bounds: ChartBounds
    x_labels: tuple[str, str, str]
    y_labels: tuple[str, str, str]


@dataclass(frozen=True)
class PopupSnapshot:
    is_open: bool
    paths: tuple[Path, ...]
    scroll_offset: int
    selected_index: int
    total: int


@dataclass(frozen=True)
class RenderSnapshot:
    directory: DirectorySnapshot
    content: ContentSnapshot
    stats: str
    chart_visible: bool
    chart: ChartSnapshot | None
    icon_mode: IconMode
    popup: PopupSnapshot

    @property
    def display_path(self) -> Path:
        """Opened file path, or the current directory before any file is opened."""
        if self.content.path is not None:
            return self.content.path
        return self.directory.current_path


def build_chart_snapshot(samples: list[NumericSample], bounds: ChartBounds, target_points: int) -> ChartSnapshot | None:
    if not samples:
        return None
    return ChartSnapshot(
        points=tuple(downsample(samples, target_points)),
        total_points=len(samples),
        bounds=bounds,
        x_labels=axis_labels(bounds.x_min, bounds.x_max),
        y_labels=axis_labels(bounds.y_min, bounds.y_max),
    )


def build_render_snapshot(state: AppState, chart_target_points: int) -> RenderSnapshot:
    directory = state.directory
    viewer = state.viewer
    recent = state.recent
    popup_start = state.popup_scroll_offset
    return RenderSnapshot(
        directory=DirectorySnapshot(
            current_path=directory.current_path,
            rows=tuple(directory.visible_entries()),
            scroll_offset=directory.scroll_offset,
            selected_index=directory.selected_index,
            total=len(directory.entries),
            visible_height=directory.visible_height,
        ),
        content=ContentSnapshot(
            path=viewer.path,
            rows=tuple(viewer.visible_lines()),
            scroll_offset=viewer.scroll_offset,
            total_lines=len(viewer.content_lines),
            visible_height=viewer.visible_height,
        ),
        stats=viewer.stats,
        chart_visible=state.chart_visible,
        chart=(
            build_chart_snapshot(viewer.samples, viewer.bounds, chart_target_points)
            if state.chart_visible
            else None
        ),
        icon_mode=state.icon_mode,
        popup=PopupSnapshot(
            is_open=state.popup_open,
            paths=tuple(recent.paths[popup_start : popup_start + state.popup_visible_height]),
            scroll_offset=popup_start,
            selected_index=recent.selected_index,
            total=len(recent.paths),
        ),
    )
