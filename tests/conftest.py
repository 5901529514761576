"""Shared pytest fixtures for encode_calc tests.

This module provides common fixtures used across all test modules,
most importantly an isolated configuration so no test reads or writes
the user's real config file.

Example:
    def test_with_config_file(config_file):
        assert not config_file.exists()
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from encode_calc.core.config import Config

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Redirect the configuration file into a temporary directory.

    Environment overrides are cleared and the Config singleton is reset
    around every test.

    Yields:
        Path: Location the configuration is read from and saved to.
    """
    path = tmp_path / "config" / "config.json"
    monkeypatch.setattr("encode_calc.core.config.DEFAULT_CONFIG_FILE", path)
    for name in list(os.environ):
        if name.startswith("ENCODE_CALC_"):
            monkeypatch.delenv(name)

    Config.reset()
    yield path
    Config.reset()


@pytest.fixture
def sample_config_data() -> dict:
    """Provide sample configuration data for testing."""
    return {
        "version": "0.1.0",
        "formatting": {"precision": 4},
        "shell": {"prompt": "calc> ", "show_intro": False, "history_size": 10},
        "logging": {"level": "INFO", "file_output": False},
    }


@pytest.fixture
def written_config_file(config_file: Path, sample_config_data: dict) -> Path:
    """Write the sample configuration to the isolated config location."""
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(json.dumps(sample_config_data, indent=2))
    return config_file
