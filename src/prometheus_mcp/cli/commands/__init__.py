"""CLI commands, one per transport."""

from prometheus_mcp.cli.commands.http import http_cmd
from prometheus_mcp.cli.commands.stdio import stdio_cmd

__all__ = [
    "http_cmd",
    "stdio_cmd",
]
