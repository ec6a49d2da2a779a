"""Serve prometheus-mcp over standard streams."""

import click

from prometheus_mcp.cli.context import require_valid_config
from prometheus_mcp.transport import run_stdio


@click.command("stdio")
@click.pass_context
def stdio_cmd(ctx: click.Context) -> None:
    """Start the Prometheus MCP server using stdio."""
    config = require_valid_config(ctx)
    run_stdio(config)
