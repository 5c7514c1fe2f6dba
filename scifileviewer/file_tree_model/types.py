"""Domain datatypes for directory listings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

PARENT_ENTRY_NAME = ".."


@dataclass(frozen=True)
class DirectoryEntry:
    """One row of a directory listing."""

    name: str
    path: Path
    is_directory: bool

    @property
    def is_parent(self) -> bool:
        return self.name == PARENT_ENTRY_NAME


__all__ = [
    "DirectoryEntry",
    "PARENT_ENTRY_NAME",
]
