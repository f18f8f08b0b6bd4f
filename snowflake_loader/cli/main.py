"""Main CLI entry point for snowflake_loader."""

import click

from snowflake_loader import __version__
from snowflake_loader.cli.commands.check import check, check_host
from snowflake_loader.cli.commands.resolve import resolve
from snowflake_loader.cli.commands.spec import show_spec


@click.group()
@click.version_option(version=__version__)
def main():
    """Snowflake Loader - loading strategy resolution for Snowflake destinations."""
    pass


main.add_command(resolve)
main.add_command(check)
main.add_command(check_host)
main.add_command(show_spec)


if __name__ == "__main__":
    main()
