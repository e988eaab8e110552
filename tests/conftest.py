"""
Pytest configuration and fixtures for pattern demo tests.
"""

import tempfile
from pathlib import Path

import pytest

from pattern_demos import DemoConfig, DemoRunner
from pattern_demos.shapes import DrawManager

_SHAPES_OUTPUT = ["Draw Square!", "Draw Circle!"]

_PHONES_OUTPUT = [
    "Manufacturer: Nokia",
    "Smarphone: Nokia Smartphone",
    "Basic phone: Nokia Basic Phone",
    "Manufacturer: Samsung",
    "Smarphone: Samsung Smartphone",
    "Basic phone: Samsung Basic Phone",
    "Manufacturer: HTC",
    "Smarphone: HTC Smartphone",
    "Basic phone: HTC Basic Phone",
]


@pytest.fixture
def default_config() -> DemoConfig:
    """Default configuration with all demos enabled."""
    return DemoConfig.default()


@pytest.fixture
def runner(default_config: DemoConfig) -> DemoRunner:
    """Runner with default configuration."""
    return DemoRunner(default_config)


@pytest.fixture
def manager() -> DrawManager:
    return DrawManager()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def stdout_lines(capsys):
    """Return the lines written to stdout since the last call."""

    def _lines() -> list[str]:
        return capsys.readouterr().out.splitlines()

    return _lines


@pytest.fixture
def shapes_output() -> list[str]:
    """Expected lines of the shapes demo."""
    return list(_SHAPES_OUTPUT)


@pytest.fixture
def phones_output() -> list[str]:
    """Expected lines of the phones demo."""
    return list(_PHONES_OUTPUT)
