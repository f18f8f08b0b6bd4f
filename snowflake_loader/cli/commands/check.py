"""CLI commands for checking hosts and configurations."""

import sys

import click

from snowflake_loader.api import check_config
from snowflake_loader.core.exceptions import ConfigError, SpecError
from snowflake_loader.core.host_pattern import HostValidator
from snowflake_loader.core.logging import configure_logging
from snowflake_loader.core.strategy import get_type_from_config
from snowflake_loader.models.loader import load_config
from snowflake_loader.models.spec import load_spec


@click.command("check-host")
@click.argument("host")
@click.option(
    "--spec",
    "spec_path",
    type=click.Path(exists=True),
    help="Connector specification file (default: packaged spec.json)",
)
def check_host(host: str, spec_path: str | None):
    """Check a hostname against the specification's host pattern.

    Exits with status 0 when the host is accepted, 1 otherwise.

    Examples:

        snowflake-loader check-host ab12345.us-east-2.aws.snowflakecomputing.com
        snowflake-loader check-host myhost --spec spec.json
    """
    try:
        validator = HostValidator.from_spec(load_spec(spec_path))
    except SpecError as e:
        click.echo(f"Specification error: {e}", err=True)
        sys.exit(2)

    if validator(host):
        click.echo(f"✓ Host '{host}' is valid")
    else:
        click.echo(f"✗ Host '{host}' does not match {validator.pattern}", err=True)
        sys.exit(1)


@click.command()
@click.argument("config_path", type=click.Path(exists=True))
@click.option(
    "--spec",
    "spec_path",
    type=click.Path(exists=True),
    help="Connector specification file (default: packaged spec.json)",
)
@click.option(
    "--vars",
    multiple=True,
    help="CLI variables in key=value format (can be used multiple times)",
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
def check(config_path: str, spec_path: str | None, vars: tuple, log_level: str, json_logs: bool):
    """Check a destination configuration without connecting.

    Checks:
    - YAML/JSON syntax and template variables
    - Host against the specification's host pattern
    - Loading strategy selected by the loading method

    Examples:

        snowflake-loader check config.json
        snowflake-loader check config.yaml --vars env=prod
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
        status = check_config(config, load_spec(spec_path))

        click.echo(f"  Loading strategy: {get_type_from_config(config).value}")
        if status.succeeded:
            click.echo("✓ Configuration check succeeded")
        else:
            click.echo(f"✗ Configuration check failed: {status.message}", err=True)
            sys.exit(1)

    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except SpecError as e:
        click.echo(f"Specification error: {e}", err=True)
        sys.exit(2)
