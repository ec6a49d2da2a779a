"""Error hierarchy for prometheus-mcp.

Usage:
    from prometheus_mcp.core.errors import BackendApiError, TransportError

    try:
        data = await client.query("up")
    except (TransportError, BackendApiError) as e:
        ...

Network failures raised by httpx (``httpx.RequestError`` and subclasses) are
not wrapped; they reach the caller unchanged.
"""

from typing import List, Optional, Sequence


class PrometheusMcpError(Exception):
    """Base exception for all prometheus-mcp errors."""


class ConfigValidationError(PrometheusMcpError, ValueError):
    """Raised when a ServerConfig fails validation.

    Attributes:
        errors: Every problem found, in the order they were detected
    """

    def __init__(self, errors: Sequence[str]):
        self.errors: List[str] = list(errors)
        super().__init__("; ".join(self.errors))


class TransportError(PrometheusMcpError):
    """Raised when the backend answers with a non-2xx HTTP status.

    Attributes:
        status_code: HTTP status code of the response
        reason: HTTP status text of the response
    """

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"http {status_code}: {reason}")


class BackendApiError(PrometheusMcpError):
    """Raised when the backend returns an envelope whose status is not success.

    Attributes:
        error: Error message reported by the backend
        error_type: Backend error category (``errorType``), if present
    """

    def __init__(self, error: str, error_type: Optional[str] = None):
        self.error = error
        self.error_type = error_type
        super().__init__(f"prometheus api error: {error}")


class ToolArgumentError(PrometheusMcpError, ValueError):
    """Raised when tool arguments do not match the tool's declared schema.

    Attributes:
        tool_name: Name of the tool being invoked
        errors: One entry per offending field
    """

    def __init__(self, tool_name: str, errors: Sequence[str]):
        self.tool_name = tool_name
        self.errors: List[str] = list(errors)
        super().__init__(f"invalid arguments for {tool_name}: " + "; ".join(self.errors))


__all__ = [
    "BackendApiError",
    "ConfigValidationError",
    "PrometheusMcpError",
    "ToolArgumentError",
    "TransportError",
]
