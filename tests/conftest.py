# File: tests/conftest.py
from pathlib import Path

import pytest

SAMPLE_CONFIG = """\
# Appearance settings (sourced from hyprland.conf)
$primary = rgba(89b4faff)

general {
    gaps_in = 6
    gaps_out = 12 # outer gaps
    border_size = 2
    col.active_border = $primary
}

decoration {
    rounding = 6
    rounding_power = 6.0
    active_opacity = 1.0
    inactive_opacity = 0.9   # unfocused windows
    fullscreen_opacity = 1.0
    dim_inactive = true
    dim_strength = 0.2
    dim_special = 0.8

    shadow {
        enabled = false
        range = 35
        render_power = 2
        color = rgba(1a1a1aee)
    }

    blur {
        enabled = true
        size = 4
        passes = 2
        xray = false
        ignore_opacity = true
        vibrancy = 0.1696
    }
}
"""


@pytest.fixture
def sample_text() -> str:
    """The raw text of a realistic appearance.conf."""
    return SAMPLE_CONFIG


@pytest.fixture
def config_path(tmp_path: Path, sample_text: str) -> Path:
    """Writes the sample config to a temporary appearance.conf."""
    path = tmp_path / "appearance.conf"
    path.write_text(sample_text, encoding="utf-8")
    return path


@pytest.fixture
def write_config(tmp_path: Path):
    """Factory fixture: writes arbitrary text to a temporary config file."""

    def _write(text: str, name: str = "custom.conf") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write
