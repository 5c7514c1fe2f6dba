"""Loaded-file model: content lines, scroll position, stats, chart data."""

from __future__ import annotations

from .model import (
    BINARY_FILE_PLACEHOLDER,
    EMPTY_FILE_PLACEHOLDER,
    NO_FILE_STATS,
    WELCOME_LINES,
    FileViewerModel,
)
from .stats import FileMetadata, build_stats_text, format_size, format_timestamp, read_metadata
from .text import read_text, sanitize_terminal_text, split_lines

__all__ = [
    "BINARY_FILE_PLACEHOLDER",
    "EMPTY_FILE_PLACEHOLDER",
    "NO_FILE_STATS",
    "WELCOME_LINES",
    "FileMetadata",
    "FileViewerModel",
    "build_stats_text",
    "format_size",
    "format_timestamp",
    "read_metadata",
    "read_text",
    "sanitize_terminal_text",
    "split_lines",
]
