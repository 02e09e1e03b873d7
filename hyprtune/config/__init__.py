# File: hyprtune/config/__init__.py
from .app_config import APP_NAME, CONFIG_ENV_VAR, AppSettings, default_config_path
from .fields import (
    DEFAULTS,
    DYNAMIC_COLOR,
    FIELD_SPECS,
    FLOAT_STEP,
    INT_STEP,
    STATIC_COLOR,
    FieldKind,
    FieldSpec,
    get_field,
)

__all__ = [
    "APP_NAME",
    "CONFIG_ENV_VAR",
    "AppSettings",
    "default_config_path",
    "DEFAULTS",
    "DYNAMIC_COLOR",
    "FIELD_SPECS",
    "FLOAT_STEP",
    "INT_STEP",
    "STATIC_COLOR",
    "FieldKind",
    "FieldSpec",
    "get_field",
]
