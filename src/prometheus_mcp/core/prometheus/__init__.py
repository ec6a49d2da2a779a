"""Prometheus HTTP API client and payload shapes."""

from prometheus_mcp.core.prometheus.client import PrometheusClient

__all__ = ["PrometheusClient"]
