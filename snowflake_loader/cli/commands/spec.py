"""CLI command for showing the connector specification's host pattern."""

import sys

import click

from snowflake_loader.core.exceptions import SpecError
from snowflake_loader.models.spec import load_spec


@click.command("spec")
@click.option(
    "--spec",
    "spec_path",
    type=click.Path(exists=True),
    help="Connector specification file (default: packaged spec.json)",
)
def show_spec(spec_path: str | None):
    """Show the host pattern of the connector specification."""
    try:
        spec = load_spec(spec_path)
        click.echo(f"Host pattern: {spec.host_pattern()}")
        if spec.documentation_url:
            click.echo(f"Documentation: {spec.documentation_url}")
    except SpecError as e:
        click.echo(f"Specification error: {e}", err=True)
        sys.exit(2)
