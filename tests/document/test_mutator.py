# File: tests/document/test_mutator.py
"""Tests for in-place value rewriting."""

import pytest

from hyprtune.document import locate, set_value
from hyprtune.errors import (
    ConfigNotFoundError,
    ConfigReadError,
    ConfigWriteError,
    InvalidValueError,
)


def _changed_lines(before: str, after: str) -> list[tuple[str, str]]:
    old_lines = before.splitlines(keepends=True)
    new_lines = after.splitlines(keepends=True)
    assert len(old_lines) == len(new_lines)
    return [(a, b) for a, b in zip(old_lines, new_lines) if a != b]


class TestSetValue:
    def test_only_target_line_changes(self, config_path, sample_text):
        assert set_value(config_path, "size", "8", "blur")
        after = config_path.read_text(encoding="utf-8")
        assert _changed_lines(sample_text, after) == [
            ("        size = 4\n", "        size = 8\n")
        ]

    def test_preserves_trailing_comment(self, config_path, sample_text):
        set_value(config_path, "inactive_opacity", "0.75")
        after = config_path.read_text(encoding="utf-8")
        assert _changed_lines(sample_text, after) == [
            (
                "    inactive_opacity = 0.9   # unfocused windows\n",
                "    inactive_opacity = 0.75   # unfocused windows\n",
            )
        ]

    def test_block_scope_does_not_cross_contaminate(self, config_path):
        set_value(config_path, "enabled", "true", "shadow")
        assert locate(config_path, "enabled", "shadow") == "true"
        assert locate(config_path, "enabled", "blur") == "true"

        set_value(config_path, "enabled", "false", "blur")
        assert locate(config_path, "enabled", "shadow") == "true"
        assert locate(config_path, "enabled", "blur") == "false"

    def test_unscoped_write_hits_first_occurrence(self, config_path):
        set_value(config_path, "enabled", "true")
        assert locate(config_path, "enabled", "shadow") == "true"
        assert locate(config_path, "enabled", "blur") == "true"

    @pytest.mark.parametrize(
        "key,block,value",
        [
            ("gaps_in", None, "-3"),
            ("rounding_power", None, "2.50"),
            ("dim_inactive", None, "false"),
            ("color", "shadow", "$primary"),
            ("color", "shadow", "rgba(00000000)"),
            ("color", "shadow", r"a\1&b|c"),
            ("vibrancy", "blur", "0.17"),
        ],
    )
    def test_round_trip(self, config_path, key, block, value):
        assert set_value(config_path, key, value, block)
        assert locate(config_path, key, block) == value

    def test_substitution_characters_are_written_verbatim(self, config_path):
        set_value(config_path, "color", r"\0&|$1", "shadow")
        assert "        color = \\0&|$1\n" in config_path.read_text(encoding="utf-8")

    def test_value_with_spaces_replaces_whole_value(self, write_config):
        path = write_config("col = rgb(1, 2, 3) # note\n")
        set_value(path, "col", "rgb(4, 5, 6)")
        assert path.read_text(encoding="utf-8") == "col = rgb(4, 5, 6) # note\n"

    def test_only_first_match_in_scope_changes(self, write_config):
        path = write_config("blur {\n  size = 1\n  size = 2\n}\n")
        set_value(path, "size", "7", "blur")
        assert path.read_text(encoding="utf-8") == "blur {\n  size = 7\n  size = 2\n}\n"

    def test_missing_key_is_a_no_op(self, config_path, sample_text):
        assert set_value(config_path, "no_such_key", "1") is False
        assert config_path.read_text(encoding="utf-8") == sample_text

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigNotFoundError):
            set_value(tmp_path / "missing.conf", "gaps_in", "1")

    @pytest.mark.parametrize("value", ["a\nb", "x # y", " padded ", "line\r"])
    def test_rejects_values_that_cannot_round_trip(self, config_path, value):
        with pytest.raises(InvalidValueError):
            set_value(config_path, "gaps_in", value)

    def test_numeric_value_is_stringified(self, config_path):
        set_value(config_path, "gaps_in", 10)
        assert locate(config_path, "gaps_in") == "10"

    def test_crlf_document_keeps_line_endings(self, write_config):
        path = write_config("gaps_in = 6\r\ngaps_out = 12\r\n")
        set_value(path, "gaps_out", "20")
        assert path.read_bytes() == b"gaps_in = 6\r\ngaps_out = 20\r\n"


class TestSetValueFailures:
    @pytest.fixture
    def failing_replace(self, monkeypatch):
        def _replace(src, dst):
            raise OSError(28, "No space left on device")

        monkeypatch.setattr("hyprtune.document.model.os.replace", _replace)

    def test_write_failure_propagates(
        self, config_path, sample_text, failing_replace
    ):
        with pytest.raises(ConfigWriteError) as excinfo:
            set_value(config_path, "gaps_in", "9")
        assert "No space left" in str(excinfo.value)
        assert config_path.read_text(encoding="utf-8") == sample_text

    def test_write_failure_leaves_no_temp_file(self, config_path, failing_replace):
        with pytest.raises(ConfigWriteError):
            set_value(config_path, "size", "9", "blur")
        assert list(config_path.parent.glob(".appearance.conf.*")) == []

    def test_undecodable_file_raises_read_error(self, tmp_path):
        path = tmp_path / "appearance.conf"
        path.write_bytes(b"gaps_in = 6\nname = \xff\xfe\n")
        with pytest.raises(ConfigReadError):
            set_value(path, "gaps_in", "9")
        assert path.read_bytes() == b"gaps_in = 6\nname = \xff\xfe\n"
