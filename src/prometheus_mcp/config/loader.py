"""ServerConfig loading and validation logic.

Provides ``_ServerConfigLoader``, a mixin class whose methods are inherited by
``ServerConfig`` (defined in ``server.py``). ``ServerConfig`` is frozen, so the
loaders collect field overrides into a dict and build the instance once.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Union, cast

if TYPE_CHECKING:
    from prometheus_mcp.config.server import ServerConfig

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # Python < 3.11 fallback

from pydantic import AnyHttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from prometheus_mcp.config.parsing import (
    _normalize_log_level,
    _parse_bool,
    _parse_env_flag,
    _try_parse_bool,
)
from prometheus_mcp.core.errors import ConfigValidationError

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV_VAR = "PROMETHEUS_MCP_CONFIG_FILE"
PROMETHEUS_URL_ENV_VAR = "PROMETHEUS_URL"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
STRUCTURED_LOGGING_ENV_VAR = "PROMETHEUS_MCP_STRUCTURED_LOGGING"

# Capability flag field -> environment variable
CAPABILITY_FLAG_ENV_VARS: Dict[str, str] = {
    "enable_discovery_tools": "ENABLE_DISCOVERY_TOOLS",
    "enable_info_tools": "ENABLE_INFO_TOOLS",
    "enable_query_tools": "ENABLE_QUERY_TOOLS",
}

NO_CAPABILITY_MESSAGE = (
    "at least one tool category must be enabled "
    "(enable_query_tools, enable_discovery_tools, or enable_info_tools)"
)

_URL_ADAPTER = TypeAdapter(AnyHttpUrl)


class _ServerConfigLoader:
    """Mixin providing config-loading methods for ``ServerConfig``."""

    if TYPE_CHECKING:
        prometheus_url: str
        enable_discovery_tools: bool
        enable_info_tools: bool
        enable_query_tools: bool
        log_level: str
        structured_logging: bool

    @classmethod
    def from_env(
        cls,
        config_file: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ServerConfig":
        """
        Create configuration from environment variables and an optional TOML file.

        Priority (highest to lowest):
        1. Environment variables
        2. TOML config (explicit path, or $PROMETHEUS_MCP_CONFIG_FILE)
        3. Default values

        The result is not validated here; the server validates it at
        construction time so that every server instance re-checks it.
        """
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {}

        toml_path = config_file or env.get(CONFIG_FILE_ENV_VAR)
        if toml_path:
            values.update(cls._load_toml(Path(toml_path)))

        values.update(cls._load_env(env))
        return cast("ServerConfig", cls(**values))

    @classmethod
    def _load_toml(cls, path: Path) -> Dict[str, Any]:
        """Load field overrides from a TOML file."""
        if not path.exists():
            logger.warning(f"Config file not found: {path}")
            return {}

        with open(path, "rb") as f:
            data = tomllib.load(f)
        logger.debug(f"Loaded config from {path}")

        values: Dict[str, Any] = {}

        if "prometheus" in data:
            prom = data["prometheus"]
            if "url" in prom:
                values["prometheus_url"] = str(prom["url"])

        if "tools" in data:
            tools_cfg = data["tools"]
            for field_name in CAPABILITY_FLAG_ENV_VARS:
                if field_name in tools_cfg:
                    parsed = _try_parse_bool(tools_cfg[field_name])
                    if parsed is None:
                        logger.warning(
                            "Ignoring [tools] %s in %s: expected a boolean, got %r",
                            field_name,
                            path,
                            tools_cfg[field_name],
                        )
                        continue
                    values[field_name] = parsed

        if "logging" in data:
            log = data["logging"]
            if "level" in log:
                values["log_level"] = _normalize_log_level(str(log["level"]))
            if "structured" in log:
                values["structured_logging"] = _parse_bool(log["structured"])

        return values

    @classmethod
    def _load_env(cls, env: Mapping[str, str]) -> Dict[str, Any]:
        """Load field overrides from environment variables."""
        values: Dict[str, Any] = {}

        # An empty URL falls back to the default
        if url := env.get(PROMETHEUS_URL_ENV_VAR, "").strip():
            values["prometheus_url"] = url

        for field_name, env_var in CAPABILITY_FLAG_ENV_VARS.items():
            raw = env.get(env_var)
            if raw is not None:
                values[field_name] = _parse_env_flag(raw)

        if level := env.get(LOG_LEVEL_ENV_VAR):
            values["log_level"] = _normalize_log_level(level)

        if structured := env.get(STRUCTURED_LOGGING_ENV_VAR):
            values["structured_logging"] = _parse_bool(structured)

        return values

    def validation_errors(self) -> List[str]:
        """Return every configuration problem (empty when valid)."""
        errors: List[str] = []

        try:
            _URL_ADAPTER.validate_python(self.prometheus_url)
        except PydanticValidationError:
            errors.append(f"prometheus_url must be a valid url, got {self.prometheus_url!r}")

        if not any(getattr(self, field_name) for field_name in CAPABILITY_FLAG_ENV_VARS):
            errors.append(NO_CAPABILITY_MESSAGE)

        return errors

    def validate(self) -> None:
        """Raise ConfigValidationError listing every problem, if any."""
        errors = self.validation_errors()
        if errors:
            raise ConfigValidationError(errors)
