# File: hyprtune/tui/__init__.py
"""Terminal front end: key handling, rendering and the editor loop."""

from .app import run_editor
from .keys import KEY_BINDINGS, action_for_key, read_key
from .render import build_screen, current_values, describe_value
from .state import Action, SessionState, dispatch, move_selection

__all__ = [
    "Action",
    "SessionState",
    "dispatch",
    "move_selection",
    "KEY_BINDINGS",
    "action_for_key",
    "read_key",
    "build_screen",
    "current_values",
    "describe_value",
    "run_editor",
]
