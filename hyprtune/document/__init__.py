# File: hyprtune/document/__init__.py
"""Parsing, lookup and in-place mutation of the appearance config."""

from .locator import find_assignment, locate, locate_in
from .model import Assignment, ConfigDocument, RawLine, parse_line, split_comment
from .mutator import check_value, set_value

__all__ = [
    "Assignment",
    "ConfigDocument",
    "RawLine",
    "parse_line",
    "split_comment",
    "find_assignment",
    "locate",
    "locate_in",
    "check_value",
    "set_value",
]
