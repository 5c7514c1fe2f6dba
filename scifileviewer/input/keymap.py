"""Key-token dispatch tables shared by the normal and popup modes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyBinding:
    """Key tokens that trigger one action; an action returns ``True`` to quit."""

    keys: tuple[str, ...]
    action: Callable[[], bool | None]


class KeyMap:
    """Exact-match table from key token to action."""

    def __init__(self, *bindings: KeyBinding) -> None:
        self._actions: dict[str, Callable[[], bool | None]] = {}
        for binding in bindings:
            self.bind(binding)

    def bind(self, binding: KeyBinding) -> None:
        # A key bound twice keeps the later action.
        for key in binding.keys:
            self._actions[key] = binding.action

    def __contains__(self, key: str) -> bool:
        return key in self._actions

    def dispatch(self, key: str) -> bool | None:
        """Run the action bound to ``key``; ``None`` when nothing is bound."""
        action = self._actions.get(key)
        return None if action is None else action()
