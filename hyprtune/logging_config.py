# File: hyprtune/logging_config.py
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from .config.app_config import APP_NAME, AppSettings

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class CustomFormatter(logging.Formatter):
    """Colours records by level and shortens ``hyprtune.*`` logger names."""

    reset = "\x1b[0m"
    LEVEL_COLORS = {
        logging.DEBUG: "\x1b[38;20m",
        logging.INFO: "\x1b[36;20m",
        logging.WARNING: "\x1b[33;20m",
        logging.ERROR: "\x1b[31;20m",
        logging.CRITICAL: "\x1b[31;1m",
    }

    def __init__(self, use_color: bool = True):
        super().__init__(datefmt=DATE_FORMAT)
        self.use_color = use_color

    def format(self, record):
        source = record.name.removeprefix(f"{APP_NAME}.")
        if record.levelno <= logging.DEBUG:
            source = f"{source}:{record.lineno}"
        line = (
            f"[{APP_NAME}] {self.formatTime(record, self.datefmt)} "
            f"[{record.levelname}] {source}: {record.getMessage()}"
        )
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        if not self.use_color:
            return line
        return f"{self.LEVEL_COLORS.get(record.levelno, '')}{line}{self.reset}"


def _console_handlers() -> list[logging.Handler]:
    return [
        h
        for h in logging.getLogger().handlers
        if isinstance(h.formatter, CustomFormatter)
    ]


def _open_log_file(log_file: Path, level: int) -> logging.FileHandler | None:
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as e:
        logging.getLogger(__name__).error(
            f"Failed to set up file logging at {log_file}: {e}"
        )
        return None
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(settings: AppSettings) -> logging.FileHandler | None:
    """
    Configures the root logger for one hyprtune invocation.

    Console records go to stderr so they never mix with values printed by
    ``hyprtune get``. Colour is only used when stderr is a terminal.

    Args:
        settings: Supplies the level name, the optional log file and the
            config path recorded in the startup message.

    Returns:
        The file handler, if a log file was requested and could be opened.
    """
    log_level = logging.getLevelName(settings.log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(CustomFormatter(use_color=sys.stderr.isatty()))
    root_logger.addHandler(console_handler)

    file_handler = None
    if settings.log_file:
        file_handler = _open_log_file(settings.log_file, log_level)
        if file_handler is not None:
            root_logger.addHandler(file_handler)

    # Rich pulls this in for markup rendering
    logging.getLogger("markdown_it").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        f"Logging at {logging.getLevelName(log_level)} for {settings.config_path}"
        f" (log file: {settings.log_file or 'none'})"
    )
    return file_handler


@contextmanager
def console_logging_muted() -> Iterator[None]:
    """
    Holds stderr logging back while the full-screen editor owns the terminal.

    File logging is unaffected. The editor's status line already reports
    every change and every missing key.
    """
    handlers = _console_handlers()
    levels = [h.level for h in handlers]
    for handler in handlers:
        handler.setLevel(logging.CRITICAL + 1)
    try:
        yield
    finally:
        for handler, level in zip(handlers, levels):
            handler.setLevel(level)
