"""MCP server shell for prometheus-mcp.

``PrometheusMcpServer`` turns a ServerConfig into a live set of registered
tools. It holds, by composition, the low-level MCP ``Server`` runtime, the one
PrometheusClient shared by every tool, and the capability-filtered tool list.

Construction is fail-fast: the config is validated before anything else, so
an invalid config never yields a partially registered server.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from mcp import types
from mcp.server.lowlevel import Server

from prometheus_mcp.config import ServerConfig
from prometheus_mcp.core.prometheus.client import PrometheusClient
from prometheus_mcp.core.responses import error_result, success_result
from prometheus_mcp.tools.param_schema import validate_arguments
from prometheus_mcp.tools.registry import ToolSpec, get_tools

logger = logging.getLogger(__name__)


class PrometheusMcpServer:
    """One MCP server instance bound to one Prometheus backend."""

    def __init__(self, config: ServerConfig):
        config.validate()

        self.config = config
        self.client = PrometheusClient(config.prometheus_url)
        self.tools: List[ToolSpec] = get_tools(config)
        self._tools_by_name: Dict[str, ToolSpec] = {tool.name: tool for tool in self.tools}

        self.mcp: Server = Server(config.server_name, version=config.server_version)
        self._register_handlers()

        logger.debug(
            "server created",
            extra={"prometheus_url": config.prometheus_url, "tools": list(self._tools_by_name)},
        )

    @property
    def tool_names(self) -> List[str]:
        return [tool.name for tool in self.tools]

    def list_tools(self) -> List[types.Tool]:
        return [tool.to_mcp_tool() for tool in self.tools]

    async def call_tool(
        self,
        name: str,
        arguments: Optional[Mapping[str, Any]] = None,
    ) -> types.CallToolResult:
        """Invoke a registered tool and wrap the outcome.

        Never raises: every failure, including unknown tools and invalid
        arguments, becomes an ``isError=True`` result. Failure detail is not
        logged here; the client has already logged backend failures.
        """
        tool = self._tools_by_name.get(name)
        if tool is None:
            logger.error(f"unknown tool requested: {name}")
            return error_result(f"unknown tool: {name}")

        logger.info(f"executing tool: {name}")
        try:
            args = validate_arguments(arguments, tool.input_schema, tool_name=name)
            result = await tool.handler(self.client, args)
        except Exception as e:
            logger.error(f"tool {name} execution failed")
            return error_result(e)

        logger.info(f"tool {name} executed successfully")
        return success_result(result)

    async def run(self, read_stream: Any, write_stream: Any, *, stateless: bool = False) -> None:
        """Serve one MCP session over the given streams until they close."""
        await self.mcp.run(
            read_stream,
            write_stream,
            self.mcp.create_initialization_options(),
            stateless=stateless,
        )

    def _register_handlers(self) -> None:
        """Attach the tool catalogue to the MCP runtime."""

        @self.mcp.list_tools()
        async def _handle_list_tools() -> List[types.Tool]:
            return self.list_tools()

        # Arguments are validated against the declared schema in call_tool.
        @self.mcp.call_tool(validate_input=False)
        async def _handle_call_tool(name: str, arguments: Dict[str, Any]) -> types.CallToolResult:
            return await self.call_tool(name, arguments)


def create_server(config: ServerConfig) -> PrometheusMcpServer:
    """Create a server instance for *config*.

    Raises:
        ConfigValidationError: if the config is invalid
    """
    return PrometheusMcpServer(config)
