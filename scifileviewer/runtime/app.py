"""Interactive viewer bootstrap.

Resolves the starting directory, builds the state machine, and runs the event
loop on the controlling terminal.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from ..config import resolve_start_directory
from .loop import run_main_loop
from .machine import AppStateMachine
from .terminal import TerminalController


def build_machine(launch_directory: Path | None = None) -> AppStateMachine:
    """Create the state machine for a session launched in ``launch_directory``.

    The stored last directory wins when it still exists; ``.`` always returns
    to the launch directory.
    """
    startup_directory = (launch_directory or Path.cwd()).resolve()
    return AppStateMachine.create(startup_directory, resolve_start_directory(startup_directory))


def run_viewer(launch_directory: Path | None = None) -> None:
    """Run the interactive viewer until the user quits."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd) or not os.isatty(stdout_fd):
        raise OSError("stdin and stdout must be connected to a terminal")
    terminal = TerminalController(stdin_fd, stdout_fd)
    machine = build_machine(launch_directory)
    run_main_loop(machine, terminal, stdin_fd)
