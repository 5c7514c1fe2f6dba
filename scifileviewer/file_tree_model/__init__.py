"""Directory listing domain model: entries, sorting, selection, and scroll."""

from __future__ import annotations

from .fs import list_directory_entries, parent_directory, sort_entries
from .model import DirectoryModel, adjust_scroll
from .types import PARENT_ENTRY_NAME, DirectoryEntry

__all__ = [
    "DirectoryEntry",
    "DirectoryModel",
    "PARENT_ENTRY_NAME",
    "adjust_scroll",
    "list_directory_entries",
    "parent_directory",
    "sort_entries",
]
