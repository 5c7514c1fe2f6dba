"""Filesystem scanning and ordering for directory listings."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from .types import PARENT_ENTRY_NAME, DirectoryEntry


def parent_directory(path: Path) -> Path | None:
    """Return the parent of ``path``, or ``None`` at a filesystem root."""
    parent = path.parent
    if parent == path:
        return None
    return parent


def sort_entries(entries: Iterable[DirectoryEntry]) -> list[DirectoryEntry]:
    """Order entries directories-first, then by case-insensitive name."""
    return sorted(entries, key=lambda entry: (not entry.is_directory, entry.name.lower()))


def _scan_children(directory: Path) -> list[DirectoryEntry]:
    children: list[DirectoryEntry] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    is_directory = child.is_dir()
                except OSError:
                    is_directory = False
                children.append(DirectoryEntry(name=child.name, path=Path(child.path), is_directory=is_directory))
    except OSError:
        return []
    return children


def list_directory_entries(directory: Path) -> list[DirectoryEntry]:
    """List ``directory`` as display rows.

    A synthetic ``..`` entry leads whenever the directory has a parent; the
    remaining rows are sorted with ``sort_entries``. Unreadable directories
    yield only the ``..`` row instead of raising.
    """
    rows: list[DirectoryEntry] = []
    parent = parent_directory(directory)
    if parent is not None:
        rows.append(DirectoryEntry(name=PARENT_ENTRY_NAME, path=parent, is_directory=True))
    rows.extend(sort_entries(_scan_children(directory)))
    return rows
