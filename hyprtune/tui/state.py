# File: hyprtune/tui/state.py
"""
Menu/action state machine for the interactive editor.

The only in-memory state is the selected row. ``dispatch`` takes a state and
returns a new one; every value change is persisted before it returns.
"""

import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..config.fields import FIELD_SPECS, FieldSpec
from ..engine import apply_field, reset_fields

logger = logging.getLogger(__name__)


class Action(str, Enum):
    UP = "up"
    DOWN = "down"
    INCREASE = "increase"
    DECREASE = "decrease"
    RESET = "reset"
    QUIT = "quit"
    NOOP = "noop"


class SessionState(BaseModel):
    """Immutable snapshot of the editor session."""

    model_config = ConfigDict(frozen=True)

    selected: int = Field(default=0, ge=0, description="Index of the highlighted field.")
    running: bool = Field(default=True, description="False once the user quits.")
    status: str = Field(default="", description="Feedback for the last action.")


def move_selection(state: SessionState, step: int, count: int) -> SessionState:
    """Moves the selection by ``step`` rows, wrapping at both ends."""
    return state.model_copy(
        update={"selected": (state.selected + step) % count, "status": ""}
    )


def dispatch(
    state: SessionState,
    action: Action,
    config_path: Path,
    fields: tuple[FieldSpec, ...] = FIELD_SPECS,
) -> SessionState:
    """Applies one user action and returns the resulting state."""
    if action is Action.UP:
        return move_selection(state, -1, len(fields))
    if action is Action.DOWN:
        return move_selection(state, 1, len(fields))
    if action is Action.QUIT:
        return state.model_copy(update={"running": False, "status": ""})
    if action in (Action.INCREASE, Action.DECREASE):
        spec = fields[state.selected]
        direction = 1 if action is Action.INCREASE else -1
        written = apply_field(config_path, spec, direction)
        if written is None:
            status = f"{spec.label}: key '{spec.key}' not found in config"
        else:
            status = f"{spec.label} → {written}"
        logger.debug(f"{action.value} on {spec.field_id}: {status}")
        return state.model_copy(update={"status": status})
    if action is Action.RESET:
        written = reset_fields(config_path, fields)
        return state.model_copy(
            update={"status": f"Restored defaults ({written}/{len(fields)} fields)"}
        )
    return state
