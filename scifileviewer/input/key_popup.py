"""Recent-files popup keyboard handling.

The popup is modal: keys without a binding here are swallowed instead of
falling through to normal mode.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .keymap import KeyBinding, KeyMap


@dataclass(frozen=True)
class PopupKeyActions:
    """Operations bound to popup keys."""

    close_popup: Callable[[], None]
    move_popup_selection: Callable[[int], None]
    open_popup_selection: Callable[[], None]


def handle_popup_key(key: str, actions: PopupKeyActions) -> None:
    """Handle one key while the recent-files popup is open."""

    def move_up() -> None:
        actions.move_popup_selection(-1)

    def move_down() -> None:
        actions.move_popup_selection(1)

    keymap = KeyMap(
        KeyBinding(("ESC", "q", "h"), actions.close_popup),
        KeyBinding(("UP",), move_up),
        KeyBinding(("DOWN",), move_down),
        KeyBinding(("ENTER",), actions.open_popup_selection),
    )
    keymap.dispatch(key)
