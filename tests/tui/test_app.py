# File: tests/tui/test_app.py
"""Tests for the interactive editor loop, driven by scripted key presses."""

import io
import os
import signal
import sys

import pytest
import readchar
from rich.console import Console

from hyprtune.document import locate
from hyprtune.errors import ConfigNotFoundError, ConfigWriteError, SessionTerminated
from hyprtune.tui import run_editor


def _scripted(*keys):
    """Returns a read_key callable that replays ``keys`` in order."""
    remaining = iter(keys)
    return lambda: next(remaining)


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=100, color_system=None)


class TestRunEditor:
    def test_quit_immediately_leaves_file_untouched(self, config_path, sample_text, console):
        state = run_editor(config_path, console, _scripted("q"), screen=False)
        assert state.running is False
        assert config_path.read_text(encoding="utf-8") == sample_text

    def test_navigate_and_adjust(self, config_path, console):
        keys = _scripted(
            readchar.key.RIGHT, "l", readchar.key.DOWN, "h", "x", "Q"
        )
        state = run_editor(config_path, console, keys, screen=False)
        assert state.selected == 1
        assert locate(config_path, "gaps_in") == "8"
        assert locate(config_path, "gaps_out") == "11"

    def test_wrap_to_last_field_and_toggle(self, config_path, console):
        run_editor(config_path, console, _scripted("k", " ", "q"), screen=False)
        assert locate(config_path, "vibrancy", "blur") == "0.22"

    def test_reset_key(self, config_path, console):
        run_editor(config_path, console, _scripted("l", "l", "r", "q"), screen=False)
        assert locate(config_path, "gaps_in") == "6"
        assert locate(config_path, "inactive_opacity") == "1.0"

    def test_missing_config_fails_before_loop(self, tmp_path, console):
        with pytest.raises(ConfigNotFoundError):
            run_editor(tmp_path / "missing.conf", console, _scripted("q"), screen=False)

    def test_write_failure_ends_session(self, config_path, sample_text, console, monkeypatch):
        def _replace(src, dst):
            raise OSError(30, "Read-only file system")

        monkeypatch.setattr("hyprtune.document.model.os.replace", _replace)
        with pytest.raises(ConfigWriteError):
            run_editor(config_path, console, _scripted("l", "q"), screen=False)
        assert config_path.read_text(encoding="utf-8") == sample_text

    def test_interrupt_propagates_and_restores_handler(self, config_path, console):
        previous = signal.getsignal(signal.SIGTERM)

        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            run_editor(config_path, console, interrupt, screen=False)
        assert signal.getsignal(signal.SIGTERM) == previous

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals only")
    def test_sigterm_unwinds_the_loop(self, config_path, console):
        def terminate():
            os.kill(os.getpid(), signal.SIGTERM)
            return "x"

        with pytest.raises(SessionTerminated):
            run_editor(config_path, console, terminate, screen=False)
