#!/usr/bin/env python3
"""
Main CLI Entry Point for Pondo

Provides the unified command-line interface for the personal finance client.
"""

import logging
import os

import click

from ..core.config import get_config, reload_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Pondo - Personal Finance Client

    Track income and expenses against a remote ledger, with budgets and a
    saving goal kept on this machine.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Set environment if specified
    if config_env:
        os.environ["PONDO_ENV"] = config_env

    # Configure debug logging if requested
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    try:
        config = reload_config() if (config_env or debug) else get_config()
    except ValueError as e:
        raise click.ClickException(str(e))

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("pondo").setLevel(logging.DEBUG)

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Data directory: {config.data_dir}")
        click.echo(f"Ledger API: {config.ledger.base_url}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from pondo import __author__, __version__

    click.echo(f"Pondo v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  State Directory: {config_obj.storage.state_dir}")
    click.echo(f"  Ledger API: {config_obj.ledger.base_url}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


# Import command modules
from .auth import login, logout, register  # noqa: E402
from .budget import budget  # noqa: E402
from .goal import goal  # noqa: E402
from .ledger import dashboard, expense, income, summary  # noqa: E402
from .settings import settings  # noqa: E402

main.add_command(login)
main.add_command(register)
main.add_command(logout)
main.add_command(dashboard)
main.add_command(summary)
main.add_command(income)
main.add_command(expense)
main.add_command(budget)
main.add_command(goal)
main.add_command(settings)


if __name__ == "__main__":
    main()
