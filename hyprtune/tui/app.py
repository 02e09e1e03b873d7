# File: hyprtune/tui/app.py
"""
Interactive editor loop.

Render the current file contents, wait for one key, dispatch it, repeat.
The cursor is hidden while the loop runs and restored on every exit path,
including Ctrl-C and SIGTERM.
"""

import logging
import signal
from collections.abc import Callable
from pathlib import Path

from rich.console import Console
from rich.live import Live

from ..config.fields import FIELD_SPECS, FieldSpec
from ..errors import ConfigNotFoundError, SessionTerminated
from .keys import action_for_key, read_key
from .render import build_screen
from .state import SessionState, dispatch

logger = logging.getLogger(__name__)


def _raise_terminated(signum, frame):
    raise SessionTerminated("Received SIGTERM")


def run_editor(
    config_path: Path,
    console: Console | None = None,
    read_key: Callable[[], str] = read_key,
    fields: tuple[FieldSpec, ...] = FIELD_SPECS,
    screen: bool = True,
) -> SessionState:
    """
    Runs the editor until the user quits and returns the final session state.

    Raises:
        ConfigNotFoundError: ``config_path`` does not exist at startup.
        KeyboardInterrupt: the user interrupted the session.
        SessionTerminated: the process received SIGTERM.
        ConfigWriteError: a change could not be persisted.
    """
    if not config_path.is_file():
        raise ConfigNotFoundError(config_path)
    console = console or Console()
    state = SessionState()
    previous_handler = signal.signal(signal.SIGTERM, _raise_terminated)
    logger.info(f"Editing {config_path} ({len(fields)} fields)")
    try:
        console.show_cursor(False)
        with Live(
            build_screen(state, config_path, fields),
            console=console,
            screen=screen,
            auto_refresh=False,
            transient=True,
        ) as live:
            while state.running:
                live.update(build_screen(state, config_path, fields), refresh=True)
                action = action_for_key(read_key())
                state = dispatch(state, action, config_path, fields)
    finally:
        console.show_cursor(True)
        signal.signal(signal.SIGTERM, previous_handler)
    logger.info("Editor session finished.")
    return state
