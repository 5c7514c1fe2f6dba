"""UI palette, entry kinds, and icon selection.

Everything here is presentation-only: the state machine stores an
``IconMode`` flag but never looks at glyphs or colors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


def rgb(red: int, green: int, blue: int) -> str:
    """Return a 24-bit foreground SGR sequence."""
    return f"\033[38;2;{red};{green};{blue}m"


def rgb_bg(red: int, green: int, blue: int) -> str:
    """Return a 24-bit background SGR sequence."""
    return f"\033[48;2;{red};{green};{blue}m"


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    reset: str
    bold: str
    blue: str
    yellow: str
    purple: str
    green: str
    cyan: str
    orange: str
    red: str
    light_gray: str
    dark_gray: str
    gray: str
    selected: str
    path_bar: str
    status_bar: str
    hint_text: str


DEFAULT_THEME = UITheme(
    reset="\033[0m",
    bold="\033[1m",
    blue=rgb(97, 175, 239),
    yellow=rgb(229, 192, 123),
    purple=rgb(198, 120, 221),
    green=rgb(152, 195, 121),
    cyan=rgb(86, 182, 194),
    orange=rgb(209, 154, 102),
    red=rgb(224, 108, 117),
    light_gray=rgb(171, 178, 191),
    dark_gray=rgb(92, 99, 112),
    gray="\033[37m",
    selected=rgb(40, 44, 52) + rgb_bg(97, 175, 239) + "\033[1m",
    path_bar=rgb(171, 178, 191) + rgb_bg(40, 44, 52),
    status_bar=rgb_bg(33, 37, 43),
    hint_text=rgb(40, 44, 52),
)


class IconMode(Enum):
    """Icon set used in the file list."""

    GLYPH = "glyph"
    EMOJI = "emoji"

    def toggled(self) -> IconMode:
        return IconMode.EMOJI if self is IconMode.GLYPH else IconMode.GLYPH


class EntryKind(Enum):
    """Display category of a directory-listing row."""

    PARENT = "parent"
    DIRECTORY = "directory"
    MOLECULE = "molecule"
    DATA = "data"
    TEXT = "text"
    CODE = "code"
    OTHER = "other"


_EXTENSION_KINDS: dict[str, EntryKind] = {
    "xyz": EntryKind.MOLECULE,
    "pdb": EntryKind.MOLECULE,
    "cif": EntryKind.MOLECULE,
    "dat": EntryKind.DATA,
    "csv": EntryKind.DATA,
    "txt": EntryKind.TEXT,
    "log": EntryKind.TEXT,
    "rs": EntryKind.CODE,
    "py": EntryKind.CODE,
    "js": EntryKind.CODE,
    "ts": EntryKind.CODE,
}

# (nerd-font glyph, emoji, color)
_ENTRY_STYLES: dict[EntryKind, tuple[str, str, str]] = {
    EntryKind.PARENT: ("\uf062 ", "⬆️ ", DEFAULT_THEME.blue),
    EntryKind.DIRECTORY: ("\uf07b ", "📁 ", DEFAULT_THEME.yellow),
    EntryKind.MOLECULE: ("\uf0c3 ", "🔬 ", DEFAULT_THEME.purple),
    EntryKind.DATA: ("\uf0ce ", "📊 ", DEFAULT_THEME.green),
    EntryKind.TEXT: ("\uf0f6 ", "📄 ", DEFAULT_THEME.light_gray),
    EntryKind.CODE: ("\uf121 ", "💻 ", DEFAULT_THEME.cyan),
    EntryKind.OTHER: ("\uf016 ", "📄 ", DEFAULT_THEME.dark_gray),
}


def entry_kind_for(name: str, path: Path, is_directory: bool) -> EntryKind:
    """Classify a listing row by type and file extension."""
    if is_directory:
        return EntryKind.PARENT if name == ".." else EntryKind.DIRECTORY
    return _EXTENSION_KINDS.get(path.suffix[1:], EntryKind.OTHER)


def style_for(entry_kind: EntryKind, icon_mode: IconMode) -> tuple[str, str]:
    """Return ``(glyph, color)`` for one entry kind."""
    glyph, emoji, color = _ENTRY_STYLES[entry_kind]
    return (glyph if icon_mode is IconMode.GLYPH else emoji, color)


__all__ = [
    "DEFAULT_THEME",
    "EntryKind",
    "IconMode",
    "UITheme",
    "entry_kind_for",
    "rgb",
    "rgb_bg",
    "style_for",
]
