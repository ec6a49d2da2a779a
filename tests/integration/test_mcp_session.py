"""
End-to-end tests over an in-memory MCP client session.

Verifies that the registered tools are advertised and invoked through the
protocol runtime exactly as the server shell produces them.
"""

import json

import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from prometheus_mcp.config import ServerConfig
from prometheus_mcp.server import create_server

pytestmark = pytest.mark.integration


@pytest.fixture
def mcp_server(test_config):
    return create_server(test_config)


class TestToolListing:
    @pytest.mark.asyncio
    async def test_all_tools_listed(self, mcp_server):
        async with create_connected_server_and_client_session(mcp_server.mcp) as session:
            result = await session.list_tools()

        assert [tool.name for tool in result.tools] == mcp_server.tool_names

    @pytest.mark.asyncio
    async def test_listing_respects_capabilities(self):
        server = create_server(ServerConfig(enable_discovery_tools=False, enable_info_tools=False))

        async with create_connected_server_and_client_session(server.mcp) as session:
            result = await session.list_tools()

        assert [tool.name for tool in result.tools] == ["prometheus_query", "prometheus_query_range"]

    @pytest.mark.asyncio
    async def test_input_schema_advertised(self, mcp_server):
        async with create_connected_server_and_client_session(mcp_server.mcp) as session:
            result = await session.list_tools()

        by_name = {tool.name: tool for tool in result.tools}
        schema = by_name["prometheus_query_range"].inputSchema
        assert schema["required"] == ["query", "start", "end", "step"]
        assert by_name["prometheus_query_range"].annotations.readOnlyHint is True


class TestToolCalls:
    @pytest.mark.asyncio
    async def test_successful_call(self, mcp_server, respond, mock_http_client):
        respond({"status": "success", "data": ["__name__", "job"]})

        async with create_connected_server_and_client_session(mcp_server.mcp) as session:
            result = await session.call_tool("prometheus_list_labels", {})

        assert result.isError is False
        assert json.loads(result.content[0].text) == ["__name__", "job"]
        assert mock_http_client.get.call_args.args[0] == "http://localhost:9090/api/v1/labels"

    @pytest.mark.asyncio
    async def test_backend_failure_is_tool_error(self, mcp_server, respond):
        respond({"status": "error", "errorType": "bad_data", "error": "invalid query"})

        async with create_connected_server_and_client_session(mcp_server.mcp) as session:
            result = await session.call_tool("prometheus_query", {"query": "up{"})

        assert result.isError is True
        assert result.content[0].text == "prometheus api error: invalid query"

    @pytest.mark.asyncio
    async def test_missing_arguments_are_tool_error(self, mcp_server, mock_http_client):
        async with create_connected_server_and_client_session(mcp_server.mcp) as session:
            result = await session.call_tool("prometheus_metric_metadata", {})

        assert result.isError is True
        assert "metric: required field is missing" in result.content[0].text
        mock_http_client.get.assert_not_called()
