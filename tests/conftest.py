"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from macprefs.api.config.MacprefsConfig import MacprefsConfig


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external tools")
    config.addinivalue_line("markers", "darwin: tests exercising the macOS backend with subprocess mocked")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.path):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid configuration dict for testing.

    Always uses the sandbox backend so tests never touch real preferences.
    """
    return {
        "system": {
            "type": "sandbox",
            "data": {
                "state_file": "sandbox.json",
                "elevation_available": True,
                "running": None,
            },
        },
        "plans": {"directory": "plans"},
        "log": {"level": "DEBUG", "file": "macprefs.log", "max_bytes": 65536, "backup_count": 1},
    }


def minimal_macprefs_config() -> MacprefsConfig:
    """Build a MacprefsConfig from the minimal config dict."""
    return MacprefsConfig(**minimal_config_dict())


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a fresh minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def macprefs_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up MACPREFS_HOME with a minimal config file.

    Returns:
        Path to the macprefs home directory
    """
    home = tmp_path / ".macprefs"
    home.mkdir()
    monkeypatch.setenv("MACPREFS_HOME", str(home))
    (home / "config.json").write_text(json.dumps(minimal_config_dict), encoding="utf-8")
    return home


def write_config(home: Path, config: dict) -> None:
    """Overwrite the config file under `home`."""
    (home / "config.json").write_text(json.dumps(config), encoding="utf-8")


def read_sandbox_state(home: Path) -> dict:
    """Return the sandbox backend's state file contents."""
    return json.loads((home / "sandbox.json").read_text(encoding="utf-8"))


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
