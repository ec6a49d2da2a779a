"""Static catalogue of Prometheus tools.

Each ToolSpec binds a capability tag, a declared argument schema, the name of
the payload shape it returns, and an async handler that calls the
PrometheusClient. The catalogue is built once at import time and never
mutated; servers select the subset enabled by their ServerConfig.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Sequence, Set, Tuple

from mcp import types

from prometheus_mcp.config import ServerConfig
from prometheus_mcp.core.prometheus.client import PrometheusClient
from prometheus_mcp.tools.param_schema import ArgumentSchema, Str, to_json_schema

ToolHandler = Callable[[PrometheusClient, Dict[str, Any]], Awaitable[Any]]


class Capability(str, Enum):
    """Functional category of a tool, used for enable/disable filtering."""

    DISCOVERY = "discovery"  # metrics, labels, targets
    INFO = "info"  # runtime and build information
    QUERY = "query"  # PromQL evaluation


class Mutability(str, Enum):
    READONLY = "readonly"
    DESTRUCTIVE = "destructive"


# Capability -> ServerConfig flag that enables it
CAPABILITY_FLAGS: Mapping[Capability, str] = {
    Capability.DISCOVERY: "enable_discovery_tools",
    Capability.INFO: "enable_info_tools",
    Capability.QUERY: "enable_query_tools",
}


def _check_capability_flags(flags: Mapping[Capability, str]) -> None:
    unmapped = set(Capability) - set(flags)
    if unmapped:
        raise RuntimeError(f"capabilities without a config flag: {sorted(c.value for c in unmapped)}")


_check_capability_flags(CAPABILITY_FLAGS)


@dataclass(frozen=True)
class ToolSpec:
    """Immutable description of one MCP tool."""

    capability: Capability
    name: str
    title: str
    description: str
    input_schema: ArgumentSchema
    result_shape: str
    handler: ToolHandler
    mutability: Mutability = Mutability.READONLY

    def is_enabled(self, config: ServerConfig) -> bool:
        return bool(getattr(config, CAPABILITY_FLAGS[self.capability]))

    def to_mcp_tool(self) -> types.Tool:
        """Render the MCP tool definition advertised by ``tools/list``."""
        return types.Tool(
            name=self.name,
            title=self.title,
            description=self.description,
            inputSchema=to_json_schema(self.input_schema),
            annotations=types.ToolAnnotations(
                title=self.title,
                readOnlyHint=self.mutability is Mutability.READONLY,
                destructiveHint=self.mutability is Mutability.DESTRUCTIVE,
                openWorldHint=False,
            ),
        )


# ---------------------------------------------------------------------------
# Argument schemas
# ---------------------------------------------------------------------------

_EMPTY_SCHEMA: ArgumentSchema = {}

_QUERY_SCHEMA: ArgumentSchema = {
    "query": Str(required=True, description="prometheus query expression"),
    "time": Str(description="optional time parameter for the query, in RFC3339 format"),
}

_QUERY_RANGE_SCHEMA: ArgumentSchema = {
    "query": Str(required=True, description="prometheus query expression"),
    "start": Str(required=True, description="start timestamp (RFC3339 or unix timestamp)"),
    "end": Str(required=True, description="end timestamp (RFC3339 or unix timestamp)"),
    "step": Str(required=True, description="query resolution step width"),
}

_METRIC_METADATA_SCHEMA: ArgumentSchema = {
    "metric": Str(required=True, description="metric name to get metadata for"),
}

_LABEL_VALUES_SCHEMA: ArgumentSchema = {
    "label": Str(required=True, description="label name to get values for"),
}

_LIST_TARGETS_SCHEMA: ArgumentSchema = {
    "scrapePool": Str(description="optional scrape pool name to filter targets"),
}

_SCRAPE_POOL_TARGETS_SCHEMA: ArgumentSchema = {
    "scrapePool": Str(required=True, description="scrape pool name"),
}


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


async def _list_metrics(client: PrometheusClient, args: Dict[str, Any]) -> Any:
    return await client.list_metrics()


async def _metric_metadata(client: PrometheusClient, args: Dict[str, Any]) -> Any:
    return await client.get_metric_metadata(args["metric"])


async def _list_labels(client: PrometheusClient, args: Dict[str, Any]) -> Any:
    return await client.list_labels()


async def _label_values(client: PrometheusClient, args: Dict[str, Any]) -> Any:
    return await client.get_label_values(args["label"])


async def _list_targets(client: PrometheusClient, args: Dict[str, Any]) -> Any:
    return await client.list_targets(args.get("scrapePool"))


async def _scrape_pool_targets(client: PrometheusClient, args: Dict[str, Any]) -> Any:
    return await client.get_scrape_pool_targets(args["scrapePool"])


async def _runtime_info(client: PrometheusClient, args: Dict[str, Any]) -> Any:
    return await client.get_runtime_info()


async def _build_info(client: PrometheusClient, args: Dict[str, Any]) -> Any:
    return await client.get_build_info()


async def _query(client: PrometheusClient, args: Dict[str, Any]) -> Any:
    return await client.query(args["query"], args.get("time"))


async def _query_range(client: PrometheusClient, args: Dict[str, Any]) -> Any:
    return await client.query_range(args["query"], args["start"], args["end"], args["step"])


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

TOOLS: Tuple[ToolSpec, ...] = (
    ToolSpec(
        capability=Capability.DISCOVERY,
        name="prometheus_list_metrics",
        title="List Prometheus Metrics",
        description="List all available Prometheus metrics",
        input_schema=_EMPTY_SCHEMA,
        result_shape="LabelValues",
        handler=_list_metrics,
    ),
    ToolSpec(
        capability=Capability.DISCOVERY,
        name="prometheus_metric_metadata",
        title="Get Metric Metadata",
        description="Get metadata for a specific Prometheus metric",
        input_schema=_METRIC_METADATA_SCHEMA,
        result_shape="MetricMetadata",
        handler=_metric_metadata,
    ),
    ToolSpec(
        capability=Capability.DISCOVERY,
        name="prometheus_list_labels",
        title="List Prometheus Labels",
        description="List all available Prometheus labels",
        input_schema=_EMPTY_SCHEMA,
        result_shape="Labels",
        handler=_list_labels,
    ),
    ToolSpec(
        capability=Capability.DISCOVERY,
        name="prometheus_label_values",
        title="Get Label Values",
        description="Get all values for a specific Prometheus label",
        input_schema=_LABEL_VALUES_SCHEMA,
        result_shape="LabelValues",
        handler=_label_values,
    ),
    ToolSpec(
        capability=Capability.DISCOVERY,
        name="prometheus_list_targets",
        title="List Prometheus Targets",
        description="List all Prometheus targets",
        input_schema=_LIST_TARGETS_SCHEMA,
        result_shape="TargetsResult",
        handler=_list_targets,
    ),
    ToolSpec(
        capability=Capability.DISCOVERY,
        name="prometheus_scrape_pool_targets",
        title="Get Scrape Pool Targets",
        description="Get targets for a specific scrape pool",
        input_schema=_SCRAPE_POOL_TARGETS_SCHEMA,
        result_shape="TargetsResult",
        handler=_scrape_pool_targets,
    ),
    ToolSpec(
        capability=Capability.INFO,
        name="prometheus_runtime_info",
        title="Get Runtime Info",
        description="Get Prometheus runtime information",
        input_schema=_EMPTY_SCHEMA,
        result_shape="RuntimeInfo",
        handler=_runtime_info,
    ),
    ToolSpec(
        capability=Capability.INFO,
        name="prometheus_build_info",
        title="Get Build Info",
        description="Get Prometheus build information",
        input_schema=_EMPTY_SCHEMA,
        result_shape="BuildInfo",
        handler=_build_info,
    ),
    ToolSpec(
        capability=Capability.QUERY,
        name="prometheus_query",
        title="Prometheus Query",
        description="Execute a Prometheus query",
        input_schema=_QUERY_SCHEMA,
        result_shape="QueryResult",
        handler=_query,
    ),
    ToolSpec(
        capability=Capability.QUERY,
        name="prometheus_query_range",
        title="Prometheus Query Range",
        description="Execute a Prometheus range query",
        input_schema=_QUERY_RANGE_SCHEMA,
        result_shape="QueryResult",
        handler=_query_range,
    ),
)


def _check_unique_names(tools: Sequence[ToolSpec]) -> None:
    seen: Set[str] = set()
    duplicates: Set[str] = set()
    for tool in tools:
        if tool.name in seen:
            duplicates.add(tool.name)
        seen.add(tool.name)
    if duplicates:
        raise RuntimeError(f"tool names must be unique, duplicated: {sorted(duplicates)}")


_check_unique_names(TOOLS)


def get_tools(config: ServerConfig) -> List[ToolSpec]:
    """Return the tools enabled by *config*, in catalogue order."""
    return [tool for tool in TOOLS if tool.is_enabled(config)]
