"""Desktop Extension (DXT) manifest generation.

The manifest lists the server entry point, the user-configurable settings
(bound to the environment variables the server reads) and one entry per tool
in the catalogue, so it cannot drift from the registry.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from prometheus_mcp.config import CAPABILITY_FLAG_ENV_VARS, DEFAULT_PROMETHEUS_URL, _PACKAGE_VERSION
from prometheus_mcp.tools.registry import CAPABILITY_FLAGS, TOOLS

DXT_VERSION = "0.1"
MANIFEST_NAME = "prometheus-mcp"
DISPLAY_NAME = "Prometheus MCP Server"
DESCRIPTION = "MCP server exposing read-only Prometheus HTTP API operations as tools"

LONG_DESCRIPTION = """\
A Model Context Protocol (MCP) server that provides tools for querying Prometheus metrics and time-series data. \
This extension lets an assistant interact with Prometheus instances to retrieve metrics, execute queries, \
and analyze monitoring data.

Features:
- Query Prometheus metrics with PromQL
- Retrieve metric metadata and labels
- Inspect scrape targets and server status
- Support for range and instant queries
- Tool categories can be enabled or disabled individually"""


def _user_config() -> Dict[str, Any]:
    user_config: Dict[str, Any] = {
        "PROMETHEUS_URL": {
            "type": "string",
            "title": "Prometheus URL",
            "description": f"The URL of your Prometheus instance (e.g., {DEFAULT_PROMETHEUS_URL})",
            "default": DEFAULT_PROMETHEUS_URL,
        },
    }
    for capability, flag in CAPABILITY_FLAGS.items():
        env_var = CAPABILITY_FLAG_ENV_VARS[flag]
        label = capability.value.capitalize()
        user_config[env_var] = {
            "type": "boolean",
            "title": f"Enable {label} Tools",
            "description": f"Enable {capability.value} tools for Prometheus",
            "default": True,
        }
    return user_config


def build_manifest(version: Optional[str] = None) -> Dict[str, Any]:
    """Build the DXT manifest dict.

    Args:
        version: Version to advertise (default: installed package version)
    """
    env = {"PROMETHEUS_URL": "${user_config.PROMETHEUS_URL}"}
    for env_var in CAPABILITY_FLAG_ENV_VARS.values():
        env[env_var] = f"${{user_config.{env_var}}}"

    return {
        "dxt_version": DXT_VERSION,
        "name": MANIFEST_NAME,
        "display_name": DISPLAY_NAME,
        "version": version or _PACKAGE_VERSION,
        "description": DESCRIPTION,
        "long_description": LONG_DESCRIPTION,
        "server": {
            "type": "python",
            "entry_point": "src/prometheus_mcp/__main__.py",
            "mcp_config": {
                "command": "python",
                "args": ["-m", "prometheus_mcp", "stdio"],
                "env": env,
            },
        },
        "tools": [{"name": tool.name, "description": tool.description} for tool in TOOLS],
        "tools_generated": False,
        "keywords": ["mcp", "prometheus", "monitoring", "promql", "observability"],
        "license": "MIT",
        "compatibility": {
            "platforms": ["darwin", "win32", "linux"],
            "runtimes": {"python": ">=3.10"},
        },
        "user_config": _user_config(),
    }


def write_manifest(path: Union[str, Path] = "manifest.json", version: Optional[str] = None) -> Path:
    """Write the manifest as indented JSON and return its path."""
    target = Path(path)
    target.write_text(json.dumps(build_manifest(version), indent=2) + "\n", encoding="utf-8")
    return target
