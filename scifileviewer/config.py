"""Persistent last-directory marker.

The only state kept between runs is the directory the user was in when they
quit. A missing or stale marker falls back to the launch directory; write
failures are ignored.
"""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "sci-file-viewer"
LAST_DIRECTORY_FILENAME = "last_dir.txt"
CONFIG_DIR = Path(user_config_dir(APP_NAME, appauthor=False))
LAST_DIRECTORY_PATH = CONFIG_DIR / LAST_DIRECTORY_FILENAME


def load_last_directory() -> Path | None:
    """Return the stored directory when it still exists, else ``None``."""
    try:
        lines = LAST_DIRECTORY_PATH.read_text(encoding="utf-8").splitlines()
    except Exception:
        return None
    if not lines or not lines[0]:
        return None
    path = Path(lines[0])
    try:
        return path if path.is_dir() else None
    except OSError:
        return None


def save_last_directory(path: Path) -> None:
    """Persist ``path`` as a single line; filesystem errors are ignored."""
    try:
        LAST_DIRECTORY_PATH.parent.mkdir(parents=True, exist_ok=True)
        LAST_DIRECTORY_PATH.write_text(f"{path}\n", encoding="utf-8")
    except Exception:
        pass


def resolve_start_directory(launch_directory: Path) -> Path:
    """Pick the stored directory when valid, otherwise ``launch_directory``."""
    stored = load_last_directory()
    return stored if stored is not None else launch_directory
