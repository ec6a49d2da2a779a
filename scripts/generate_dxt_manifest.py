#!/usr/bin/env python3
"""Generate the Desktop Extension manifest for prometheus-mcp.

Usage:
    python scripts/generate_dxt_manifest.py [OUTPUT] [--version VERSION]

Writes manifest.json (or OUTPUT) from the installed package's tool catalogue.
"""
import click

from prometheus_mcp.manifest import write_manifest


@click.command()
@click.argument("output", default="manifest.json", type=click.Path(dir_okay=False))
@click.option("--version", "version", default=None, help="Version to advertise.")
def main(output: str, version: str) -> None:
    """Write the DXT manifest to OUTPUT."""
    path = write_manifest(output, version=version)
    click.echo(f"DXT {path} generated successfully")


if __name__ == "__main__":
    main()
