# File: hyprtune/engine/__init__.py
"""Typed adjustment engine."""

from .adjust import (
    adjust_float,
    adjust_int,
    apply_field,
    flip_bool,
    flip_color,
    parse_float,
    parse_int,
    reset_fields,
    step_float,
    step_int,
    toggle_bool,
    toggle_color,
)

__all__ = [
    "adjust_float",
    "adjust_int",
    "apply_field",
    "flip_bool",
    "flip_color",
    "parse_float",
    "parse_int",
    "reset_fields",
    "step_float",
    "step_int",
    "toggle_bool",
    "toggle_color",
]
