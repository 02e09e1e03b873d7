# File: hyprtune/document/locator.py
"""
Block-scoped lookup of scalar assignments.

Block scoping is purely textual. Brace depth is tracked line by line; a line
whose code starts with ``<block> {`` enters the target block, and the closing
brace at the same depth leaves it. The first matching assignment wins.
"""

import logging
import re
from pathlib import Path

from ..errors import ConfigNotFoundError
from .model import Assignment, ConfigDocument

logger = logging.getLogger(__name__)


def _opens_block(code: str, block: str) -> bool:
    return re.match(rf"{re.escape(block)}\s*\{{", code.lstrip()) is not None


def find_assignment(
    document: ConfigDocument, key: str, block: str | None = None
) -> int | None:
    """
    Returns the line index of the first assignment to ``key`` in scope.

    With ``block=None`` the whole document is in scope. Key and block names
    are compared as literal text.
    """
    depth = 0
    inside = False
    entry_depth = 0
    for index, record in enumerate(document.lines):
        code = record.code
        if "{" in code:
            depth += 1
            if block and _opens_block(code, block):
                inside = True
                entry_depth = depth
        if "}" in code:
            if inside and depth == entry_depth:
                inside = False
            depth -= 1
        if not isinstance(record, Assignment):
            continue
        if block and not inside:
            continue
        if record.key == key:
            return index
    return None


def locate_in(
    document: ConfigDocument, key: str, block: str | None = None
) -> str | None:
    """Same as :func:`locate` for an already parsed document."""
    index = find_assignment(document, key, block)
    if index is None:
        return None
    record = document.lines[index]
    assert isinstance(record, Assignment)
    return record.value


def locate(path: Path, key: str, block: str | None = None) -> str | None:
    """
    Reads the current value of ``key`` (optionally inside ``block``) from ``path``.

    Returns None when the file is missing or the key is not present, so callers
    can fall back to a default instead of aborting.
    """
    try:
        document = ConfigDocument.load(path)
    except ConfigNotFoundError:
        logger.debug(f"Config {path} missing while looking up '{key}'.")
        return None
    value = locate_in(document, key, block)
    if value is None:
        scope = f" in block '{block}'" if block else ""
        logger.debug(f"Key '{key}'{scope} not found in {path}.")
    return value
