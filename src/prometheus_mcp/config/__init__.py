"""Configuration package for prometheus-mcp.

Callers use ``from prometheus_mcp.config import ServerConfig``.

Sub-modules:
    parsing – boolean / log level parsing helpers
    loader  – ServerConfig loading/validation mixin (_ServerConfigLoader)
    server  – ServerConfig dataclass
"""

from prometheus_mcp.config.loader import (  # noqa: F401
    CAPABILITY_FLAG_ENV_VARS,
    CONFIG_FILE_ENV_VAR,
    NO_CAPABILITY_MESSAGE,
)
from prometheus_mcp.config.server import (  # noqa: F401
    _PACKAGE_VERSION,
    DEFAULT_PROMETHEUS_URL,
    ServerConfig,
)
