"""Shared fixtures for prometheus-mcp tests."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from prometheus_mcp.config import CAPABILITY_FLAG_ENV_VARS, CONFIG_FILE_ENV_VAR, ServerConfig

_ENV_VARS = (
    "PROMETHEUS_URL",
    "LOG_LEVEL",
    "PROMETHEUS_MCP_STRUCTURED_LOGGING",
    CONFIG_FILE_ENV_VAR,
    *CAPABILITY_FLAG_ENV_VARS.values(),
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the host environment from leaking into config loading."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_config():
    return ServerConfig(
        prometheus_url="http://localhost:9090",
        log_level="WARNING",
        server_version="0.0.0-test",
    )


@pytest.fixture
def mock_http_client():
    """Patch httpx.AsyncClient and yield the client used inside ``async with``."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=None)
        mock_client_class.return_value = mock_client
        yield mock_client


@pytest.fixture
def respond(mock_http_client):
    """Make the patched client answer the next GET(s) with *payload*.

    Usage::

        respond({"status": "success", "data": []})
        respond(None, status_code=500, reason_phrase="Internal Server Error")
    """

    def _respond(payload=None, status_code=200, reason_phrase="OK"):
        response = MagicMock()
        response.status_code = status_code
        response.reason_phrase = reason_phrase
        response.json.return_value = payload
        mock_http_client.get.return_value = response
        return response

    return _respond
