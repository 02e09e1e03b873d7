# File: hyprtune/document/mutator.py
"""In-place rewriting of a single assignment's value."""

import logging
from pathlib import Path

from ..errors import InvalidValueError
from .locator import find_assignment
from .model import ConfigDocument

logger = logging.getLogger(__name__)


def check_value(value: str) -> str:
    """
    Ensures ``value`` can be written verbatim and read back unchanged.

    A value may not span lines, start a comment, or carry surrounding
    whitespace (lookups strip it).
    """
    if "\n" in value or "\r" in value:
        raise InvalidValueError(f"Value {value!r} spans more than one line.")
    if "#" in value:
        raise InvalidValueError(f"Value {value!r} contains a comment marker '#'.")
    if value != value.strip():
        raise InvalidValueError(f"Value {value!r} has surrounding whitespace.")
    return value


def set_value(
    path: Path, key: str, new_value: str | int | float, block: str | None = None
) -> bool:
    """
    Replaces the value of the first ``key`` assignment in scope and saves ``path``.

    Scoping matches :func:`hyprtune.document.locator.locate`. Indentation, the
    operator spacing and any trailing comment are preserved; every other line
    is left byte-identical. Returns False (and writes nothing) when the key is
    not present.

    Raises:
        ConfigNotFoundError: ``path`` does not exist.
        ConfigReadError: ``path`` could not be read or decoded.
        ConfigWriteError: the document could not be written.
        InvalidValueError: ``new_value`` cannot be stored verbatim.
    """
    text = check_value(str(new_value))
    document = ConfigDocument.load(path)
    index = find_assignment(document, key, block)
    scope = f"{block}.{key}" if block else key
    if index is None:
        logger.warning(f"Cannot set '{scope}': key not present in {path}.")
        return False
    document.replace_value(index, text)
    document.save(path)
    logger.info(f"Set {scope} = {text} (line {index + 1})")
    return True
