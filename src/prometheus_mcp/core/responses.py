"""
Response builders for MCP tool invocations.

Provides success_result() and error_result(), the two constructors used to
wrap every tool outcome. Both always set ``isError`` explicitly and carry
exactly one text content block.
"""

import json
from typing import Any

from mcp import types

# Compact separators keep tool payloads small in the model context.
_JSON_SEPARATORS = (",", ":")


def success_result(data: Any) -> types.CallToolResult:
    """Wrap *data* as a successful tool result with JSON-serialized text.

    Args:
        data: JSON-compatible payload returned by a tool handler.

    Example:
        >>> success_result(["up", "go_goroutines"]).content[0].text
        '["up","go_goroutines"]'
    """
    return types.CallToolResult(
        isError=False,
        content=[types.TextContent(type="text", text=json.dumps(data, separators=_JSON_SEPARATORS))],
    )


def error_result(error: Any) -> types.CallToolResult:
    """Wrap a failure as an error tool result.

    Exceptions contribute their message (or their class name when the message
    is empty); anything else is rendered with ``str()``.
    """
    if isinstance(error, BaseException):
        message = str(error) or type(error).__name__
    else:
        message = str(error)
    return types.CallToolResult(
        isError=True,
        content=[types.TextContent(type="text", text=message)],
    )
