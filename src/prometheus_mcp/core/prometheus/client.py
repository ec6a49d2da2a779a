"""Async client for the Prometheus HTTP API.

Every operation is a read-only GET against ``/api/v1``. Responses use the
standard envelope::

    {"status": "success" | "error", "data": ..., "error"?: ..., "warnings"?: [...]}

and the client returns ``data`` untouched on success.

Error Handling:
    - Non-2xx responses raise TransportError ("http <code>: <reason>")
    - Envelopes with status != "success" raise BackendApiError
    - httpx network failures (connection refused, DNS, ...) propagate as-is

    Every failure is logged at error level before it is re-raised. The client
    never retries, caches, or imposes its own timeout.

Example usage:
    client = PrometheusClient("http://localhost:9090")
    result = await client.query("up")
    series = await client.query_range("rate(http_requests_total[5m])", start, end, "1m")
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote as _url_quote
from urllib.parse import urlencode, urljoin

import httpx

from prometheus_mcp.core.errors import BackendApiError, TransportError
from prometheus_mcp.core.prometheus.types import (
    SUCCESS_STATUS,
    BuildInfo,
    Labels,
    LabelValues,
    MetricMetadata,
    QueryResult,
    RuntimeInfo,
    TargetsResult,
)

logger = logging.getLogger(__name__)

# Prometheus API endpoints
QUERY_ENDPOINT = "/api/v1/query"
QUERY_RANGE_ENDPOINT = "/api/v1/query_range"
METRIC_NAMES_ENDPOINT = "/api/v1/label/__name__/values"
METADATA_ENDPOINT = "/api/v1/metadata"
LABELS_ENDPOINT = "/api/v1/labels"
LABEL_VALUES_ENDPOINT = "/api/v1/label/{label}/values"
TARGETS_ENDPOINT = "/api/v1/targets"
RUNTIME_INFO_ENDPOINT = "/api/v1/status/runtimeinfo"
BUILD_INFO_ENDPOINT = "/api/v1/status/buildinfo"

DEFAULT_HEADERS = {"Content-Type": "application/json"}


class PrometheusClient:
    """Client for the Prometheus HTTP API.

    The base URL and headers are fixed at construction, so a single instance
    can be shared by concurrent tool invocations.

    Attributes:
        base_url: Prometheus server URL (e.g. http://localhost:9090)
        timeout: Request timeout in seconds; None waits indefinitely
    """

    def __init__(self, base_url: str, timeout: Optional[float] = None):
        self._base_url = base_url
        self._timeout = timeout
        self._headers: Dict[str, str] = dict(DEFAULT_HEADERS)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def query(self, query: str, time: Optional[str] = None) -> QueryResult:
        """Evaluate an instant query.

        Args:
            query: PromQL expression
            time: Evaluation timestamp (RFC3339 or unix timestamp). Omitted
                when empty, in which case the server uses its current time.
        """
        params = {"query": query}
        if time:
            params["time"] = time
        return await self._request(QUERY_ENDPOINT, params)

    async def query_range(self, query: str, start: str, end: str, step: str) -> QueryResult:
        """Evaluate a query over a time range.

        Args:
            query: PromQL expression
            start: Start timestamp (RFC3339 or unix timestamp)
            end: End timestamp (RFC3339 or unix timestamp)
            step: Resolution step width (e.g. "15s", "1m")
        """
        params = {"query": query, "start": start, "end": end, "step": step}
        return await self._request(QUERY_RANGE_ENDPOINT, params)

    async def list_metrics(self) -> LabelValues:
        """Return every metric name known to the server."""
        return await self._request(METRIC_NAMES_ENDPOINT)

    async def get_metric_metadata(self, metric: str) -> MetricMetadata:
        """Return type, help and unit metadata for *metric*."""
        return await self._request(METADATA_ENDPOINT, {"metric": metric})

    async def list_labels(self) -> Labels:
        """Return every label name known to the server."""
        return await self._request(LABELS_ENDPOINT)

    async def get_label_values(self, label: str) -> LabelValues:
        """Return all values for *label*.

        The label is percent-encoded as a single path segment, so names with
        reserved characters (``/``, ``?``, ...) are preserved.
        """
        endpoint = LABEL_VALUES_ENDPOINT.format(label=_url_quote(label, safe=""))
        return await self._request(endpoint)

    async def list_targets(self, scrape_pool: Optional[str] = None) -> TargetsResult:
        """Return active and dropped targets, optionally for one scrape pool."""
        params: Dict[str, str] = {}
        if scrape_pool:
            params["scrapePool"] = scrape_pool
        return await self._request(TARGETS_ENDPOINT, params)

    async def get_scrape_pool_targets(self, scrape_pool: str) -> TargetsResult:
        """Return the targets of a single scrape pool."""
        return await self.list_targets(scrape_pool)

    async def get_runtime_info(self) -> RuntimeInfo:
        return await self._request(RUNTIME_INFO_ENDPOINT)

    async def get_build_info(self) -> BuildInfo:
        return await self._request(BUILD_INFO_ENDPOINT)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _build_url(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> str:
        url = urljoin(self._base_url, endpoint)
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    async def _request(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> Any:
        """Issue a GET against *endpoint* and unwrap the response envelope."""
        url = self._build_url(endpoint, params)
        logger.debug("making prometheus request", extra={"endpoint": endpoint, "url": url})

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, headers=self._headers)

            if not 200 <= response.status_code < 300:
                raise TransportError(response.status_code, response.reason_phrase)

            payload = response.json()
            if not isinstance(payload, dict) or payload.get("status") != SUCCESS_STATUS:
                envelope = payload if isinstance(payload, dict) else {}
                raise BackendApiError(
                    envelope.get("error") or "unknown error",
                    error_type=envelope.get("errorType"),
                )
        except (TransportError, BackendApiError) as e:
            logger.error(
                "prometheus request failed: %s: %s",
                endpoint,
                e,
                extra={"endpoint": endpoint, "error": str(e)},
            )
            raise
        except Exception as e:
            detail = str(e) or type(e).__name__
            logger.error(
                "prometheus request failed: %s: %s",
                endpoint,
                detail,
                extra={"endpoint": endpoint, "error": detail},
            )
            raise

        for warning in payload.get("warnings") or []:
            logger.warning("prometheus warning: %s", warning, extra={"endpoint": endpoint})
        for info in payload.get("infos") or []:
            logger.info("prometheus info: %s", info, extra={"endpoint": endpoint})

        logger.debug("prometheus request successful", extra={"endpoint": endpoint})
        return payload.get("data")
