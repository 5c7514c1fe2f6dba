"""Input-layer public API for key decoding and mode handlers.

Exports are split between low-level terminal decoding (``read_key``) and the
mode handlers used by the state machine.
"""

from .key_normal import NormalKeyActions, build_normal_keymap, handle_normal_key
from .key_popup import PopupKeyActions, handle_popup_key
from .keymap import KeyBinding, KeyMap
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyBinding",
    "KeyMap",
    "NormalKeyActions",
    "PopupKeyActions",
    "build_normal_keymap",
    "handle_normal_key",
    "handle_popup_key",
]
