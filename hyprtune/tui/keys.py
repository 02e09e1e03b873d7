# File: hyprtune/tui/keys.py
"""
Terminal key input and the key-to-action table.

Arrow keys arrive as escape sequences (``ESC [ A``), while a bare ESC press is
the single byte ``\\x1b``. After an ESC the reader waits at most
``ESCAPE_TIMEOUT`` seconds for the rest of a sequence; if nothing follows, the
ESC is returned on its own so the next key press is never swallowed.
"""

import os
import select
import sys

import readchar

from .state import Action

if sys.platform != "win32":
    import termios
    import tty

ESCAPE = "\x1b"
ESCAPE_TIMEOUT = 0.1
# Introducers of CSI/SS3 sequences; both end on a byte in 0x40-0x7E.
_SEQUENCE_INTRODUCERS = ("[", "O")

KEY_BINDINGS: dict[str, Action] = {
    readchar.key.UP: Action.UP,
    "k": Action.UP,
    "K": Action.UP,
    readchar.key.DOWN: Action.DOWN,
    "j": Action.DOWN,
    "J": Action.DOWN,
    readchar.key.RIGHT: Action.INCREASE,
    "l": Action.INCREASE,
    "L": Action.INCREASE,
    " ": Action.INCREASE,
    readchar.key.LEFT: Action.DECREASE,
    "h": Action.DECREASE,
    "H": Action.DECREASE,
    "r": Action.RESET,
    "R": Action.RESET,
    "q": Action.QUIT,
    "Q": Action.QUIT,
}

HELP_TEXT = "[↑/↓/j/k] Nav  [←/→/h/l/Space] Adj  [r] Reset  [q] Quit"


def action_for_key(key: str) -> Action:
    return KEY_BINDINGS.get(key, Action.NOOP)


def _ready(fd: int, timeout: float) -> bool:
    readable, _, _ = select.select([fd], [], [], timeout)
    return bool(readable)


def _read_char(fd: int) -> str:
    """Reads one UTF-8 encoded character straight from ``fd``."""
    data = os.read(fd, 1)
    if not data:
        raise EOFError("Terminal input closed")
    lead = data[0]
    pending = 3 if lead >= 0xF0 else 2 if lead >= 0xE0 else 1 if lead >= 0xC0 else 0
    while pending and _ready(fd, ESCAPE_TIMEOUT):
        data += os.read(fd, 1)
        pending -= 1
    return data.decode("utf-8", errors="replace")


def _read_escape(fd: int) -> str:
    if not _ready(fd, ESCAPE_TIMEOUT):
        return ESCAPE
    sequence = ESCAPE + _read_char(fd)
    if sequence[-1] not in _SEQUENCE_INTRODUCERS:
        return sequence
    while _ready(fd, ESCAPE_TIMEOUT):
        char = _read_char(fd)
        sequence += char
        if "\x40" <= char <= "\x7e":
            break
    return sequence


def read_key(fd: int | None = None) -> str:
    """
    Blocks until one key press is available and returns it.

    Reads unbuffered bytes in cbreak mode, so ``select`` sees exactly what the
    terminal has delivered. Ctrl-C raises ``KeyboardInterrupt`` whether the
    terminal turns it into SIGINT or passes the raw byte through.
    """
    if sys.platform == "win32":
        return readchar.readkey()
    fd = sys.stdin.fileno() if fd is None else fd
    old_settings = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd, termios.TCSANOW)
        key = _read_char(fd)
        if key == readchar.key.CTRL_C:
            raise KeyboardInterrupt
        if key == ESCAPE:
            key = _read_escape(fd)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
    return key
