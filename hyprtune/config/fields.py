# File: hyprtune/config/fields.py
"""
The fixed table of editable appearance fields.

Every component (rendering, dispatch, reset) looks fields up here, so the
menu label, the underlying key, its block and its bounds are declared once.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

INT_STEP = 1
FLOAT_STEP = 0.05

# Shadow colour literals toggled by the colour field
DYNAMIC_COLOR = "$primary"
STATIC_COLOR = "rgba(1a1a1aee)"


class FieldKind(str, Enum):
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    COLOR = "color"


class FieldSpec(BaseModel):
    """Binds one menu entry to a config key, its optional block and its bounds."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Menu label shown to the user.")
    key: str = Field(..., description="Key name as written in the config file.")
    block: str | None = Field(
        default=None, description="Enclosing block name, or None for file-wide."
    )
    kind: FieldKind = Field(..., description="How the value is adjusted.")
    minimum: int | float | None = Field(
        default=None, description="Lower clamp for numeric fields."
    )
    maximum: int | float | None = Field(
        default=None, description="Upper clamp for numeric fields (None = unbounded)."
    )
    default: str = Field(..., description="Factory default written by reset.")

    @model_validator(mode="after")
    def check_bounds(self) -> "FieldSpec":
        numeric = self.kind in (FieldKind.INT, FieldKind.FLOAT)
        if numeric and self.minimum is None:
            raise ValueError(f"Numeric field '{self.label}' needs a minimum.")
        if not numeric and (self.minimum is not None or self.maximum is not None):
            raise ValueError(
                f"Field '{self.label}' of kind {self.kind.value} takes no bounds."
            )
        if (
            self.minimum is not None
            and self.maximum is not None
            and self.minimum > self.maximum
        ):
            raise ValueError(f"Field '{self.label}' has minimum above maximum.")
        return self

    @property
    def field_id(self) -> str:
        """Unique id, e.g. ``gaps_in`` or ``shadow_enabled``."""
        return f"{self.block}_{self.key}" if self.block else self.key

    @property
    def step(self) -> int | float | None:
        if self.kind is FieldKind.INT:
            return INT_STEP
        if self.kind is FieldKind.FLOAT:
            return FLOAT_STEP
        return None


def _int(
    label: str,
    key: str,
    default: str,
    minimum: int,
    maximum: int | None = None,
    block: str | None = None,
) -> FieldSpec:
    return FieldSpec(
        label=label,
        key=key,
        block=block,
        kind=FieldKind.INT,
        minimum=minimum,
        maximum=maximum,
        default=default,
    )


def _float(
    label: str,
    key: str,
    default: str,
    minimum: float,
    maximum: float | None = None,
    block: str | None = None,
) -> FieldSpec:
    return FieldSpec(
        label=label,
        key=key,
        block=block,
        kind=FieldKind.FLOAT,
        minimum=minimum,
        maximum=maximum,
        default=default,
    )


def _bool(label: str, key: str, default: str, block: str | None = None) -> FieldSpec:
    return FieldSpec(
        label=label, key=key, block=block, kind=FieldKind.BOOL, default=default
    )


FIELD_SPECS: tuple[FieldSpec, ...] = (
    # General
    _int("Gaps In", "gaps_in", "6", minimum=0),
    _int("Gaps Out", "gaps_out", "12", minimum=0),
    _int("Border Size", "border_size", "2", minimum=0),
    # Decoration
    _int("Rounding", "rounding", "6", minimum=0),
    _float("Rounding Power", "rounding_power", "6.0", minimum=0.0),
    _float("Active Opacity", "active_opacity", "1.0", minimum=0.0, maximum=1.0),
    _float("Inactive Opacity", "inactive_opacity", "1.0", minimum=0.0, maximum=1.0),
    _float("Fullscreen Opacity", "fullscreen_opacity", "1.0", minimum=0.0, maximum=1.0),
    _bool("Dim Inactive", "dim_inactive", "true"),
    _float("Dim Strength", "dim_strength", "0.2", minimum=0.0, maximum=1.0),
    _float("Dim Special", "dim_special", "0.8", minimum=0.0, maximum=1.0),
    # Shadow
    _bool("Shadow Enabled", "enabled", "false", block="shadow"),
    _int("Shadow Range", "range", "35", minimum=0, block="shadow"),
    _int("Shadow Power", "render_power", "2", minimum=1, maximum=4, block="shadow"),
    FieldSpec(
        label="Shadow Color",
        key="color",
        block="shadow",
        kind=FieldKind.COLOR,
        default=STATIC_COLOR,
    ),
    # Blur
    _bool("Blur Enabled", "enabled", "false", block="blur"),
    _int("Blur Size", "size", "4", minimum=1, block="blur"),
    _int("Blur Passes", "passes", "2", minimum=1, block="blur"),
    _bool("Blur Xray", "xray", "false", block="blur"),
    _bool("Blur Ignore Opacity", "ignore_opacity", "true", block="blur"),
    _float("Blur Vibrancy", "vibrancy", "0.1696", minimum=0.0, block="blur"),
)

DEFAULTS: dict[str, str] = {spec.field_id: spec.default for spec in FIELD_SPECS}


def get_field(
    name: str, fields: tuple[FieldSpec, ...] = FIELD_SPECS
) -> FieldSpec | None:
    """Finds a field by field id (``blur_size``) or menu label (``Blur Size``, any case)."""
    wanted = name.strip().lower()
    for spec in fields:
        if wanted in (spec.field_id.lower(), spec.label.lower()):
            return spec
    return None
