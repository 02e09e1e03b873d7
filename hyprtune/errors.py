# File: hyprtune/errors.py
"""Exception types raised by hyprtune."""

from pathlib import Path


class HyprtuneError(Exception):
    """Base class for all hyprtune errors."""


class ConfigNotFoundError(HyprtuneError):
    """The configuration document does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Config file not found: {path}")


class ConfigReadError(HyprtuneError):
    """The configuration document exists but could not be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Could not read {path}: {reason}")


class ConfigWriteError(HyprtuneError):
    """A mutation could not be persisted."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Could not write {path}: {reason}")


class InvalidValueError(HyprtuneError, ValueError):
    """A value cannot be written verbatim into a single assignment line."""


class SessionTerminated(HyprtuneError):
    """Raised from the SIGTERM handler to unwind the interactive loop."""

    exit_code = 143
