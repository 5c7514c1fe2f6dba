"""Main interactive event loop for the terminal UI.

One key at a time: layout, render when something changed, block for input,
apply the key. The loop is wiring only; behavior lives in the state machine.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable

from ..chart import chart_target_points
from ..input import read_key
from ..render import render_frame
from .layout import compute_layout
from .machine import AppStateMachine
from .terminal import TerminalController

# Poll interval so terminal resizes are noticed without a key press.
IDLE_POLL_MS = 200


def run_main_loop(
    machine: AppStateMachine,
    terminal: TerminalController,
    stdin_fd: int,
    get_terminal_size: Callable[[tuple[int, int]], os.terminal_size] = shutil.get_terminal_size,
) -> None:
    """Run the interactive loop until a quit key is handled."""
    last_size: tuple[int, int] | None = None
    needs_render = True
    skip_next_lf = False

    with terminal.raw_mode():
        while True:
            term = get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                machine.state.dirty = True
                needs_render = True

            layout = compute_layout(term.columns, term.lines, machine.state.chart_visible)
            machine.update_viewport(layout.viewport)

            if needs_render:
                chart_width = layout.chart.width if layout.chart is not None else 0
                snapshot = machine.snapshot(chart_target_points(chart_width))
                terminal.write(render_frame(snapshot, layout, full_redraw=machine.consume_dirty()))
                needs_render = False

            try:
                key = read_key(stdin_fd, timeout_ms=IDLE_POLL_MS)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue
            if skip_next_lf and key == "ENTER_LF":
                skip_next_lf = False
                continue

            if key == "ENTER_CR":
                key = "ENTER"
                skip_next_lf = True
            elif key == "ENTER_LF":
                key = "ENTER"
                skip_next_lf = False
            else:
                skip_next_lf = False

            if machine.handle_key(key):
                break
            needs_render = True
