"""ServerConfig dataclass.

This module defines the ``ServerConfig`` class (field declarations and simple
accessor methods). Loading and validation logic lives in the
``_ServerConfigLoader`` mixin (``loader.py``) which ``ServerConfig`` inherits
from.

A ServerConfig is built once at process entry and passed down explicitly;
nothing below the CLI reads the environment.
"""

import json
import logging
import sys
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_package_version

from prometheus_mcp.config.loader import _ServerConfigLoader

DEFAULT_PROMETHEUS_URL = "http://localhost:9090"


def _get_version() -> str:
    """Get package version from metadata (single source of truth: pyproject.toml)."""
    try:
        return get_package_version("prometheus-mcp")
    except PackageNotFoundError:
        return "0.3.0"  # Fallback for dev without install


_PACKAGE_VERSION = _get_version()

LOG_HANDLER_NAME = "prometheus_mcp.stderr"

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object, including ``extra=`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                entry[key] = value
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


@dataclass(frozen=True)
class ServerConfig(_ServerConfigLoader):
    """Server configuration with support for env vars and TOML overrides."""

    # Backend
    prometheus_url: str = DEFAULT_PROMETHEUS_URL

    # Tool categories
    enable_discovery_tools: bool = True
    enable_info_tools: bool = True
    enable_query_tools: bool = True

    # Logging configuration
    log_level: str = "INFO"
    structured_logging: bool = True

    # Server identity reported during MCP initialization
    server_name: str = "prometheus-mcp"
    server_version: str = field(default_factory=lambda: _PACKAGE_VERSION)

    def setup_logging(self) -> None:
        """Configure logging based on settings.

        Logs always go to stderr: stdout carries the stdio protocol stream.
        Calling this again replaces the handler installed by a previous call.
        """
        level = getattr(logging, self.log_level, logging.INFO)

        formatter: logging.Formatter
        if self.structured_logging:
            formatter = JsonFormatter()
        else:
            formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(LOG_HANDLER_NAME)
        handler.setFormatter(formatter)

        root_logger = logging.getLogger("prometheus_mcp")
        root_logger.setLevel(level)
        for existing in list(root_logger.handlers):
            if existing.get_name() == LOG_HANDLER_NAME:
                root_logger.removeHandler(existing)
        root_logger.addHandler(handler)
