"""Shared fixtures for integration tests."""

import pytest
from starlette.testclient import TestClient

from prometheus_mcp.transport import create_http_app

MCP_HEADERS = {
    "Accept": "application/json, text/event-stream",
    "Content-Type": "application/json",
}


@pytest.fixture
def http_client(test_config):
    """Starlette test client for the HTTP transport app."""
    with TestClient(create_http_app(test_config)) as client:
        yield client


@pytest.fixture
def rpc(http_client):
    """POST a JSON-RPC request to /mcp and return the response."""

    def _rpc(method, params=None, request_id=1):
        body = {"jsonrpc": "2.0", "id": request_id, "method": method, "params": params or {}}
        return http_client.post("/mcp", json=body, headers=MCP_HEADERS)

    return _rpc
