"""prometheus-mcp: MCP tools for the Prometheus HTTP API."""

from prometheus_mcp.config import _PACKAGE_VERSION as __version__
from prometheus_mcp.config import ServerConfig
from prometheus_mcp.server import PrometheusMcpServer, create_server

__all__ = [
    "PrometheusMcpServer",
    "ServerConfig",
    "__version__",
    "create_server",
]
