"""CLI-specific test fixtures.

This module provides fixtures for testing CLI commands using Click's
CliRunner.
"""

from __future__ import annotations

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner.

    Returns:
        CliRunner: Configured CLI runner.
    """
    return CliRunner()
