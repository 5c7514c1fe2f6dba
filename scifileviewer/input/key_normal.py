"""Normal-mode keyboard handling."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .keymap import KeyBinding, KeyMap


@dataclass(frozen=True)
class NormalKeyActions:
    """Operations bound to normal-mode keys."""

    move_selection: Callable[[int], None]
    activate_selection: Callable[[], None]
    ascend: Callable[[], None]
    scroll_content: Callable[[int], None]
    page_content: Callable[[int], None]
    content_to_start: Callable[[], None]
    content_to_end: Callable[[], None]
    go_startup_directory: Callable[[], None]
    go_home_directory: Callable[[], None]
    toggle_chart: Callable[[], None]
    toggle_icon_mode: Callable[[], None]
    refresh_directory: Callable[[], None]
    open_recent_popup: Callable[[], None]
    persist_state: Callable[[], None]


def _action(callback: Callable[..., None], *args: int) -> Callable[[], bool]:
    def run() -> bool:
        callback(*args)
        return False

    return run


def build_normal_keymap(actions: NormalKeyActions) -> KeyMap:
    """Return the normal-mode key table; handlers return ``True`` to quit."""

    def quit_action() -> bool:
        actions.persist_state()
        return True

    return KeyMap(
        KeyBinding(("UP",), _action(actions.move_selection, -1)),
        KeyBinding(("DOWN",), _action(actions.move_selection, 1)),
        KeyBinding(("ENTER",), _action(actions.activate_selection)),
        KeyBinding(("BACKSPACE",), _action(actions.ascend)),
        KeyBinding(("j",), _action(actions.scroll_content, 1)),
        KeyBinding(("k",), _action(actions.scroll_content, -1)),
        KeyBinding(("u", "PAGE_UP"), _action(actions.page_content, -1)),
        KeyBinding(("d", "PAGE_DOWN"), _action(actions.page_content, 1)),
        KeyBinding(("HOME",), _action(actions.content_to_start)),
        KeyBinding(("END",), _action(actions.content_to_end)),
        KeyBinding((".",), _action(actions.go_startup_directory)),
        KeyBinding(("~",), _action(actions.go_home_directory)),
        KeyBinding(("c",), _action(actions.toggle_chart)),
        KeyBinding(("n",), _action(actions.toggle_icon_mode)),
        KeyBinding(("r",), _action(actions.refresh_directory)),
        KeyBinding(("h",), _action(actions.open_recent_popup)),
        KeyBinding(("q",), quit_action),
    )


def handle_normal_key(key: str, actions: NormalKeyActions) -> bool:
    """Handle one normal-mode key and return ``True`` when app should quit."""
    return bool(build_normal_keymap(actions).dispatch(key))
