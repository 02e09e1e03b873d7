# File: tests/config/test_fields.py
"""Tests for the field table and application settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from hyprtune.config import (
    CONFIG_ENV_VAR,
    DEFAULTS,
    FIELD_SPECS,
    AppSettings,
    FieldKind,
    FieldSpec,
    default_config_path,
    get_field,
)


class TestFieldTable:
    def test_twenty_one_unique_fields(self):
        assert len(FIELD_SPECS) == 21
        assert len({spec.field_id for spec in FIELD_SPECS}) == 21
        assert len({spec.label for spec in FIELD_SPECS}) == 21

    def test_defaults_table_matches_specs(self):
        assert DEFAULTS["gaps_in"] == "6"
        assert DEFAULTS["shadow_enabled"] == "false"
        assert DEFAULTS["blur_enabled"] == "false"
        assert DEFAULTS["shadow_color"] == "rgba(1a1a1aee)"
        assert DEFAULTS["blur_vibrancy"] == "0.1696"

    def test_shared_key_names_are_block_scoped(self):
        enabled = [spec for spec in FIELD_SPECS if spec.key == "enabled"]
        assert {spec.block for spec in enabled} == {"shadow", "blur"}

    def test_steps_by_kind(self):
        assert get_field("gaps_in").step == 1
        assert get_field("active_opacity").step == 0.05
        assert get_field("dim_inactive").step is None

    def test_shadow_power_bounds(self):
        spec = get_field("Shadow Power")
        assert (spec.minimum, spec.maximum) == (1, 4)
        assert spec.kind is FieldKind.INT

    def test_get_field_by_label_or_id(self):
        assert get_field("blur size") is get_field("blur_size")
        assert get_field("nope") is None

    def test_specs_are_immutable(self):
        with pytest.raises(ValidationError):
            FIELD_SPECS[0].key = "other"

    def test_numeric_field_requires_minimum(self):
        with pytest.raises(ValidationError):
            FieldSpec(label="X", key="x", kind=FieldKind.INT, default="0")

    def test_bool_field_rejects_bounds(self):
        with pytest.raises(ValidationError):
            FieldSpec(label="X", key="x", kind=FieldKind.BOOL, minimum=0, default="true")


class TestAppSettings:
    def test_env_var_overrides_default_path(self, monkeypatch, tmp_path):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "a.conf"))
        assert default_config_path() == tmp_path / "a.conf"
        assert AppSettings().config_path == tmp_path / "a.conf"

    def test_default_path_is_hyprland_source_dir(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert default_config_path().parts[-4:] == (
            ".config",
            "hypr",
            "source",
            "appearance.conf",
        )

    def test_log_level_is_normalized(self):
        assert AppSettings(config_path=Path("x"), log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(config_path=Path("x"), log_level="chatty")
