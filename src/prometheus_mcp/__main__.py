"""Allow ``python -m prometheus_mcp``."""

from prometheus_mcp.cli.main import cli

if __name__ == "__main__":
    cli(prog_name="prometheus-mcp")
