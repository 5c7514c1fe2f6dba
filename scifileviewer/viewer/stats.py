"""File metadata lookup and the stats summary shown beside the content."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

KB = 1024
MB = KB * 1024
GB = MB * 1024
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class FileMetadata:
    """Size and timestamps; each falls back to zero when unavailable."""

    size: int = 0
    created: float = 0.0
    modified: float = 0.0


def read_metadata(path: Path) -> FileMetadata:
    """Stat ``path`` without raising.

    Creation time comes from ``st_birthtime`` where the platform reports it
    (macOS, BSD, Windows). CPython on Linux does not expose the statx birth
    time through ``os.stat``, so ``created`` stays at the epoch sentinel there.
    """
    try:
        stat = os.stat(path)
    except OSError:
        return FileMetadata()
    created = getattr(stat, "st_birthtime", None)
    return FileMetadata(
        size=int(stat.st_size),
        created=float(created) if created is not None else 0.0,
        modified=float(stat.st_mtime),
    )


def format_size(num_bytes: int) -> str:
    """Human-readable size using 1024 thresholds."""
    if num_bytes >= GB:
        return f"{num_bytes / GB:.2f} GB"
    if num_bytes >= MB:
        return f"{num_bytes / MB:.2f} MB"
    if num_bytes >= KB:
        return f"{num_bytes / KB:.2f} KB"
    return f"{num_bytes} B"


def format_timestamp(timestamp: float) -> str:
    """Format a POSIX timestamp in UTC to second precision."""
    try:
        moment = datetime.fromtimestamp(int(timestamp), tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        moment = datetime.fromtimestamp(0, tz=timezone.utc)
    return moment.strftime(TIMESTAMP_FORMAT)


def build_stats_text(
    metadata: FileMetadata,
    line_count: int | None = None,
    point_count: int = 0,
) -> str:
    """Compose the stats summary.

    ``line_count`` is ``None`` for files that could not be decoded; those get
    size and timestamps only. ``Data points`` appears only for chart data.
    """
    rows = [
        f"Size: {format_size(metadata.size)}",
        f"Created: {format_timestamp(metadata.created)}",
        f"Modified: {format_timestamp(metadata.modified)}",
    ]
    if line_count is not None:
        rows.append(f"Lines: {line_count}")
        if point_count:
            rows.append(f"Data points: {point_count}")
    return "\n".join(rows)
