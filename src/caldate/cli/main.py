#!/usr/bin/env python3
"""
Main CLI Entry Point for caldate

Groups the date commands and resolves the configuration they share.
"""

from dataclasses import replace

import click

from ..core.config import Config, Environment, get_config


def _resolve_config(config_env: str | None, debug: bool) -> Config:
    """Apply command-line overrides on top of the environment configuration."""
    config = get_config()
    if config_env:
        config = replace(config, environment=Environment(config_env))
    if debug:
        config = replace(config, debug=True, log_level="DEBUG")
        config.setup_logging()
    return config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice([env.value for env in Environment]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Show extra fields and the active settings")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    caldate - Calendar Date Value Type

    Parse, validate, compare and shift calendar dates.
    """
    config = _resolve_config(config_env, debug)
    ctx.obj = {"verbose": verbose, "config": config}

    if verbose:
        strict_state = "on" if config.strict else "off"
        click.echo(f"caldate ({config.environment.value} environment, strict input {strict_state})")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from caldate import __author__, __version__

    click.echo(f"caldate v{__version__} by {__author__}")


@main.command()
@click.pass_obj
def config(obj: dict) -> None:
    """Show current configuration."""
    click.echo("Current Configuration:")
    for name, value in obj["config"].to_dict().items():
        click.echo(f"  {name}: {value}")


# Import date commands
from .dates import compare, days_in_month, leap, parse, shift  # noqa: E402

for command in (parse, shift, compare, leap, days_in_month):
    main.add_command(command)


if __name__ == "__main__":
    main()
