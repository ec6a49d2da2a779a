"""Shared fixtures for CLI command tests."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep CLI invocations from attaching handlers to captured streams."""
    with patch("prometheus_mcp.config.server.ServerConfig.setup_logging") as setup_logging:
        yield setup_logging


@pytest.fixture
def run_stdio():
    with patch("prometheus_mcp.cli.commands.stdio.run_stdio") as mock_run:
        yield mock_run


@pytest.fixture
def run_http():
    with patch("prometheus_mcp.cli.commands.http.run_http") as mock_run:
        yield mock_run
