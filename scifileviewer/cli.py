"""Command-line front door for scifileviewer.

Parses the (option-free) command line and starts the interactive viewer.
Terminal setup failures end the process with a non-zero status.
"""

from __future__ import annotations

import argparse
import termios

from .runtime import run_viewer


def main() -> None:
    """Launch the viewer in the current working directory.

    The last directory visited in a previous session is reopened when it still
    exists.
    """
    parser = argparse.ArgumentParser(
        prog="sci-file-viewer",
        description="Browse files, view text, and plot two-column numeric data in the terminal.",
    )
    parser.parse_args()
    try:
        run_viewer()
    except (termios.error, OSError) as exc:
        raise SystemExit(f"Terminal error: {exc}") from exc


if __name__ == "__main__":
    main()
