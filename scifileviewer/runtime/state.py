"""Top-level application state composed by the state machine."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..file_tree_model import DirectoryModel
from ..recent import RecentFilesRegistry
from ..ui_theme import IconMode
from ..viewer import FileViewerModel


@dataclass
class AppState:
    directory: DirectoryModel
    viewer: FileViewerModel
    recent: RecentFilesRegistry
    startup_directory: Path
    chart_visible: bool = True
    icon_mode: IconMode = IconMode.GLYPH
    popup_open: bool = False
    popup_scroll_offset: int = 0
    popup_visible_height: int = 1
    # Next render must clear the whole screen first.
    dirty: bool = True

    @property
    def popup_selected_index(self) -> int:
        return self.recent.selected_index
