# File: hyprtune/engine/adjust.py
"""
Typed adjustments of config values.

Each adjustment reads the current value through the locator, computes the
new value, and persists it through the mutator. Missing or malformed values
never abort an adjustment; a kind-specific fallback is used as the base.
"""

import logging
import re
from pathlib import Path

from ..config.fields import (
    DYNAMIC_COLOR,
    FIELD_SPECS,
    FLOAT_STEP,
    INT_STEP,
    STATIC_COLOR,
    FieldKind,
    FieldSpec,
)
from ..document import locate, set_value

logger = logging.getLogger(__name__)

INT_FALLBACK = 0
FLOAT_FALLBACK = 1.0

_INT_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"-?[0-9]*\.?[0-9]+")


def _clamp(value, minimum, maximum):
    if value < minimum:
        value = minimum
    if maximum is not None and value > maximum:
        value = maximum
    return value


def parse_int(raw: str | None) -> int:
    """Parses an optionally signed integer, falling back to 0."""
    if raw is None or not _INT_RE.fullmatch(raw):
        logger.debug(f"Integer value {raw!r} unset or malformed, using 0.")
        return INT_FALLBACK
    return int(raw)


def parse_float(raw: str | None) -> float:
    """Parses a decimal number, falling back to 1.0."""
    if raw is None or not _FLOAT_RE.fullmatch(raw):
        logger.debug(f"Float value {raw!r} unset or malformed, using 1.0.")
        return FLOAT_FALLBACK
    return float(raw)


def step_int(
    current: str | None, delta: int, minimum: int = 0, maximum: int | None = None
) -> str:
    """Pure integer step: returns the new value as text."""
    value = _clamp(parse_int(current) + delta, int(minimum), maximum)
    return str(int(value))


def step_float(
    current: str | None,
    delta: float,
    minimum: float = 0.0,
    maximum: float | None = None,
) -> str:
    """Pure float step: the result always carries exactly two decimals."""
    value = _clamp(parse_float(current) + delta, minimum, maximum)
    return f"{value:.2f}"


def flip_bool(current: str | None) -> str:
    """Only the literal ``true`` turns off; anything else (including unset) turns on."""
    return "false" if current == "true" else "true"


def flip_color(current: str | None) -> str:
    """Switches between the dynamic ``$primary`` colour and the static fallback."""
    if current is not None and DYNAMIC_COLOR in current:
        return STATIC_COLOR
    return DYNAMIC_COLOR


def adjust_int(
    path: Path,
    key: str,
    delta: int,
    block: str | None = None,
    minimum: int = 0,
    maximum: int | None = None,
) -> str | None:
    new_value = step_int(locate(path, key, block), delta, minimum, maximum)
    if not set_value(path, key, new_value, block):
        return None
    return new_value


def adjust_float(
    path: Path,
    key: str,
    delta: float,
    block: str | None = None,
    minimum: float = 0.0,
    maximum: float | None = None,
) -> str | None:
    new_value = step_float(locate(path, key, block), delta, minimum, maximum)
    if not set_value(path, key, new_value, block):
        return None
    return new_value


def toggle_bool(path: Path, key: str, block: str | None = None) -> str | None:
    new_value = flip_bool(locate(path, key, block))
    if not set_value(path, key, new_value, block):
        return None
    return new_value


def toggle_color(
    path: Path, key: str = "color", block: str | None = "shadow"
) -> str | None:
    new_value = flip_color(locate(path, key, block))
    if not set_value(path, key, new_value, block):
        return None
    return new_value


def apply_field(path: Path, spec: FieldSpec, direction: int) -> str | None:
    """
    Applies one adjustment to ``spec`` in the direction of ``direction``'s sign.

    Integer fields move by 1 and float fields by 0.05; boolean and colour
    fields toggle regardless of direction. Returns the value written, or None
    when the key is not present in the document.
    """
    sign = -1 if direction < 0 else 1
    if spec.kind is FieldKind.INT:
        return adjust_int(
            path, spec.key, sign * INT_STEP, spec.block, spec.minimum, spec.maximum
        )
    if spec.kind is FieldKind.FLOAT:
        return adjust_float(
            path, spec.key, sign * FLOAT_STEP, spec.block, spec.minimum, spec.maximum
        )
    if spec.kind is FieldKind.BOOL:
        return toggle_bool(path, spec.key, spec.block)
    return toggle_color(path, spec.key, spec.block)


def reset_fields(path: Path, fields: tuple[FieldSpec, ...] = FIELD_SPECS) -> int:
    """Writes every field's default unconditionally. Returns how many were present."""
    written = 0
    for spec in fields:
        if set_value(path, spec.key, spec.default, spec.block):
            written += 1
    logger.info(f"Reset {written}/{len(fields)} fields to defaults in {path}")
    return written
