"""Shared CLI context helpers."""

import click

from prometheus_mcp.config import ServerConfig
from prometheus_mcp.core.errors import ConfigValidationError


def get_config(ctx: click.Context) -> ServerConfig:
    """Return the ServerConfig built by the root command."""
    config = ctx.find_object(ServerConfig)
    if config is None:
        raise click.UsageError("configuration was not initialised")
    return config


def require_valid_config(ctx: click.Context) -> ServerConfig:
    """Return the config, failing the command if it does not validate.

    Servers validate again on construction; checking here reports a bad
    config at startup instead of on the first request.
    """
    config = get_config(ctx)
    try:
        config.validate()
    except ConfigValidationError as e:
        raise click.ClickException(f"invalid configuration: {e}") from e
    return config
