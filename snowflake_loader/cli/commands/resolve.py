"""CLI command for resolving the loading strategy of a configuration."""

import json
import sys

import click

from snowflake_loader.core.exceptions import ConfigError
from snowflake_loader.core.logging import configure_logging
from snowflake_loader.core.strategy import get_type_from_config
from snowflake_loader.models.loader import load_config


@click.command()
@click.argument("config_path", type=click.Path(exists=True))
@click.option(
    "--vars",
    multiple=True,
    help="CLI variables in key=value format (can be used multiple times)",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output as JSON",
)
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Log level (default: WARNING)",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Use JSON format for logs",
)
def resolve(config_path: str, vars: tuple, json_output: bool, log_level: str, json_logs: bool):
    """Print the loading strategy selected by a destination configuration.

    Examples:

        snowflake-loader resolve config.json
        snowflake-loader resolve config.yaml --vars bucket=my-bucket --json
    """
    configure_logging(level=log_level, json_format=json_logs, config_path=config_path)

    try:
        cli_vars = {}
        for var in vars:
            if "=" not in var:
                click.echo(f"Error: Invalid variable format: {var}. Use key=value", err=True)
                sys.exit(1)
            key, value = var.split("=", 1)
            cli_vars[key] = value

        config = load_config(config_path, cli_vars=cli_vars if cli_vars else None)
        destination_type = get_type_from_config(config)

        if json_output:
            click.echo(json.dumps({"destination_type": destination_type.value}))
        else:
            click.echo(destination_type.value)

    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
