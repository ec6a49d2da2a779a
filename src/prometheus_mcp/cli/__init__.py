"""Command line interface for prometheus-mcp."""
