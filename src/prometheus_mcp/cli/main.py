"""Entry point for the prometheus-mcp command."""

from pathlib import Path
from typing import Optional

import click

from prometheus_mcp.cli.commands import http_cmd, stdio_cmd
from prometheus_mcp.config import CONFIG_FILE_ENV_VAR, ServerConfig, _PACKAGE_VERSION


@click.group()
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help=f"TOML config file (default: ${CONFIG_FILE_ENV_VAR}).",
)
@click.version_option(version=_PACKAGE_VERSION, prog_name="prometheus-mcp")
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[Path]) -> None:
    """Prometheus MCP server."""
    config = ServerConfig.from_env(config_file)
    config.setup_logging()
    ctx.obj = config


cli.add_command(stdio_cmd)
cli.add_command(http_cmd)


if __name__ == "__main__":
    cli()
