"""Serve prometheus-mcp over streamable HTTP."""

import click

from prometheus_mcp.cli.context import require_valid_config
from prometheus_mcp.transport import DEFAULT_HTTP_HOST, DEFAULT_HTTP_PORT, run_http


@click.command("http")
@click.option(
    "--port",
    type=click.IntRange(1, 65535),
    default=DEFAULT_HTTP_PORT,
    show_default=True,
    help="Port to listen on.",
)
@click.option(
    "--host",
    default=DEFAULT_HTTP_HOST,
    show_default=True,
    help="Interface to bind.",
)
@click.pass_context
def http_cmd(ctx: click.Context, port: int, host: str) -> None:
    """Start the Prometheus MCP server using Streamable HTTP."""
    config = require_valid_config(ctx)
    run_http(config, port=port, host=host)
