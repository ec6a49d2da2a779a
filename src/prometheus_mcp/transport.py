"""Transport adapters for prometheus-mcp.

stdio:
    One server instance for the lifetime of the process, bound to the
    process's stdin/stdout.

Streamable HTTP:
    A Starlette app with these routes:

    - ``POST /mcp``: builds a new server and a new stateless session transport
      for every request, so concurrent requests share no state. Both are torn
      down when the request completes.
    - ``GET /mcp``, ``DELETE /mcp``: 405 with a JSON-RPC error body (sessions
      are not supported, so there is no stream to open or close).
    - ``GET /healthy``, ``GET /ready``: 200 with an empty body.
"""

import logging
from typing import Any, Callable, Dict, Optional

import anyio
import uvicorn
from anyio.abc import TaskStatus
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http import StreamableHTTPServerTransport
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route
from starlette.types import Message, Receive, Scope, Send

from prometheus_mcp.config import ServerConfig
from prometheus_mcp.server import PrometheusMcpServer, create_server

logger = logging.getLogger(__name__)

MCP_PATH = "/mcp"
DEFAULT_HTTP_PORT = 3000
DEFAULT_HTTP_HOST = "0.0.0.0"

# JSON-RPC error codes
METHOD_NOT_ALLOWED_CODE = -32000
INTERNAL_ERROR_CODE = -32603


def _jsonrpc_error(code: int, message: str) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "error": {"code": code, "message": message}, "id": None}


# ---------------------------------------------------------------------------
# stdio
# ---------------------------------------------------------------------------


async def serve_stdio(config: ServerConfig) -> None:
    """Serve a single server instance over stdin/stdout until EOF."""
    server = create_server(config)
    logger.info("connecting to stdio transport")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream)


def run_stdio(config: ServerConfig) -> None:
    anyio.run(serve_stdio, config)


# ---------------------------------------------------------------------------
# Streamable HTTP
# ---------------------------------------------------------------------------


async def _run_session(
    server: PrometheusMcpServer,
    transport: StreamableHTTPServerTransport,
    *,
    task_status: TaskStatus[None] = anyio.TASK_STATUS_IGNORED,
) -> None:
    async with transport.connect() as (read_stream, write_stream):
        task_status.started()
        await server.run(read_stream, write_stream, stateless=True)


class StatelessMcpEndpoint:
    """ASGI endpoint serving each POST with a fresh server and transport.

    Any exception raised before a response has started is answered with a
    generic JSON-RPC internal error so the client always gets a reply.
    """

    def __init__(
        self,
        config: ServerConfig,
        server_factory: Optional[Callable[[ServerConfig], PrometheusMcpServer]] = None,
    ):
        self._config = config
        self._server_factory = server_factory

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response_started = False

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            factory = self._server_factory or create_server
            server = factory(self._config)
            transport = StreamableHTTPServerTransport(
                mcp_session_id=None,
                is_json_response_enabled=True,
            )
            async with anyio.create_task_group() as tg:
                await tg.start(_run_session, server, transport)
                await transport.handle_request(scope, receive, tracking_send)
                await transport.terminate()
            logger.info("request closed")
        except Exception:
            logger.exception("error handling mcp request")
            if not response_started:
                response = JSONResponse(
                    _jsonrpc_error(INTERNAL_ERROR_CODE, "internal server error"),
                    status_code=500,
                )
                await response(scope, receive, send)


async def _method_not_allowed(request: Request) -> Response:
    logger.info(f"received {request.method} mcp request")
    return JSONResponse(
        _jsonrpc_error(METHOD_NOT_ALLOWED_CODE, "method not allowed"),
        status_code=405,
    )


async def _ok(request: Request) -> Response:
    return Response(status_code=200)


def create_http_app(config: ServerConfig) -> Starlette:
    """Build the Starlette application for the streamable HTTP transport."""
    return Starlette(
        routes=[
            Route(MCP_PATH, endpoint=StatelessMcpEndpoint(config), methods=["POST"]),
            Route(MCP_PATH, endpoint=_method_not_allowed, methods=["GET", "DELETE"]),
            Route("/healthy", endpoint=_ok, methods=["GET"]),
            Route("/ready", endpoint=_ok, methods=["GET"]),
        ],
    )


def run_http(config: ServerConfig, port: int = DEFAULT_HTTP_PORT, host: str = DEFAULT_HTTP_HOST) -> None:
    """Serve the HTTP transport with uvicorn until interrupted."""
    app = create_http_app(config)
    logger.info(f"connecting to streamable http transport on port: {port}")
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=getattr(logging, config.log_level, logging.INFO),
        log_config=None,
    )
