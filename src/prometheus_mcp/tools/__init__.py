"""Tool catalogue and argument schemas."""

from prometheus_mcp.tools.registry import (
    CAPABILITY_FLAGS,
    TOOLS,
    Capability,
    Mutability,
    ToolSpec,
    get_tools,
)

__all__ = [
    "CAPABILITY_FLAGS",
    "Capability",
    "Mutability",
    "TOOLS",
    "ToolSpec",
    "get_tools",
]
