"""Application state machine.

Owns the modal split between normal mode and the recent-files popup, routes
key tokens to model operations, and tracks when the next frame must clear the
screen. Everything here is synchronous; filesystem reads complete before the
next key is accepted.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from .. import config
from ..file_tree_model import DirectoryModel, adjust_scroll
from ..input import NormalKeyActions, PopupKeyActions, handle_normal_key, handle_popup_key
from ..recent import RecentFilesRegistry
from ..viewer import FileViewerModel
from .layout import ViewportGeometry
from .snapshot import RenderSnapshot, build_render_snapshot
from .state import AppState


def home_directory() -> Path | None:
    """Return the user's home directory, or ``None`` when it cannot be resolved."""
    home = os.path.expanduser("~")
    if home == "~":
        return None
    return Path(home)


class AppStateMachine:
    """Key-driven controller over the directory, viewer and recent-files models."""

    def __init__(
        self,
        state: AppState,
        *,
        resolve_home: Callable[[], Path | None] = home_directory,
        save_last_directory: Callable[[Path], None] | None = None,
    ) -> None:
        self.state = state
        self._resolve_home = resolve_home
        self._save_last_directory = save_last_directory or config.save_last_directory

    @classmethod
    def create(
        cls,
        startup_directory: Path,
        start_directory: Path | None = None,
        **kwargs,
    ) -> AppStateMachine:
        """Build a machine listing ``start_directory`` (default: startup directory)."""
        state = AppState(
            directory=DirectoryModel(start_directory or startup_directory),
            viewer=FileViewerModel(),
            recent=RecentFilesRegistry(),
            startup_directory=startup_directory,
        )
        return cls(state, **kwargs)

    def update_viewport(self, geometry: ViewportGeometry) -> None:
        """Apply visible row counts reported by the layout."""
        state = self.state
        state.directory.set_visible_height(geometry.tree_rows)
        if state.viewer.set_visible_height(geometry.content_rows):
            state.dirty = True
        state.popup_visible_height = max(1, geometry.popup_rows)
        self._adjust_popup_scroll()

    def consume_dirty(self) -> bool:
        """Return and clear the full-redraw flag."""
        dirty = self.state.dirty
        self.state.dirty = False
        return dirty

    def snapshot(self, chart_target_points: int) -> RenderSnapshot:
        return build_render_snapshot(self.state, chart_target_points)

    def handle_key(self, key: str) -> bool:
        """Apply one key token; return ``True`` when the app should quit."""
        if self.state.popup_open:
            handle_popup_key(
                key,
                PopupKeyActions(
                    close_popup=self.close_popup,
                    move_popup_selection=self.move_popup_selection,
                    open_popup_selection=self.open_popup_selection,
                ),
            )
            return False
        return handle_normal_key(
            key,
            NormalKeyActions(
                move_selection=self.move_selection,
                activate_selection=self.activate_selection,
                ascend=self.ascend,
                scroll_content=self.scroll_content,
                page_content=self.page_content,
                content_to_start=self.content_to_start,
                content_to_end=self.content_to_end,
                go_startup_directory=self.go_startup_directory,
                go_home_directory=self.go_home_directory,
                toggle_chart=self.toggle_chart,
                toggle_icon_mode=self.toggle_icon_mode,
                refresh_directory=self.refresh_directory,
                open_recent_popup=self.open_recent_popup,
                persist_state=self.persist_state,
            ),
        )

    def move_selection(self, delta: int) -> None:
        """Move the directory cursor."""
        self.state.directory.move_selection(delta)

    def activate_selection(self) -> None:
        """Enter the selected directory or open the selected file."""
        entry = self.state.directory.activate()
        if entry is not None and not entry.is_directory:
            self.open_file(entry.path)

    def ascend(self) -> None:
        """Go to the parent directory."""
        self.state.directory.ascend()

    def change_directory(self, path: Path) -> None:
        """List ``path``; a different directory starts with the first entry selected."""
        self.state.directory.refresh(path)

    def go_startup_directory(self) -> None:
        """Return to the directory the viewer started in."""
        self.change_directory(self.state.startup_directory)

    def go_home_directory(self) -> None:
        """List the home directory when one can be resolved."""
        home = self._resolve_home()
        if home is not None:
            self.change_directory(home)

    def refresh_directory(self) -> None:
        """Re-read the current directory."""
        self.state.directory.refresh()

    def open_file(self, path: Path) -> None:
        """Load ``path`` into the viewer and record it as recent."""
        self.state.viewer.load(path)
        self.state.recent.record(path)
        self.state.dirty = True

    def _mark_if_scrolled(self, changed: bool) -> None:
        if changed:
            self.state.dirty = True

    def scroll_content(self, delta: int) -> None:
        self._mark_if_scrolled(self.state.viewer.scroll(delta))

    def page_content(self, direction: int) -> None:
        """Scroll the content by one viewport height."""
        self._mark_if_scrolled(self.state.viewer.page(direction))

    def content_to_start(self) -> None:
        """Jump the content to its first line."""
        self._mark_if_scrolled(self.state.viewer.to_start())

    def content_to_end(self) -> None:
        """Jump the content to its last page."""
        self._mark_if_scrolled(self.state.viewer.to_end())

    def toggle_chart(self) -> None:
        """Show or hide the chart panel."""
        self.state.chart_visible = not self.state.chart_visible
        self.state.dirty = True

    def toggle_icon_mode(self) -> None:
        """Switch between glyph and emoji icons."""
        self.state.icon_mode = self.state.icon_mode.toggled()
        self.state.dirty = True

    def _adjust_popup_scroll(self) -> None:
        state = self.state
        state.popup_scroll_offset = adjust_scroll(
            state.recent.selected_index,
            state.popup_scroll_offset,
            state.popup_visible_height,
        )

    def open_recent_popup(self) -> None:
        """Open the recent-files popup with the newest entry selected."""
        self.state.popup_open = True
        self.state.recent.selected_index = 0
        self.state.popup_scroll_offset = 0

    def close_popup(self) -> None:
        """Hide the recent-files popup."""
        self.state.popup_open = False
        self.state.dirty = True

    def move_popup_selection(self, delta: int) -> None:
        """Move the popup cursor, keeping it inside the scroll window."""
        self.state.recent.move_selection(delta)
        self._adjust_popup_scroll()

    def open_popup_selection(self) -> None:
        """Close the popup and open the highlighted file."""
        path = self.state.recent.selected_path
        if path is None:
            return
        self.close_popup()
        self.open_file(path)

    def persist_state(self) -> None:
        """Save the current directory for the next launch."""
        self._save_last_directory(self.state.directory.current_path)
