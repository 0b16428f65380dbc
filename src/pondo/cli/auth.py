#!/usr/bin/env python3
"""
Auth CLI - Session Management

Sign in, create an account or sign out. The access token is kept in the
local state directory for later commands.
"""

import click

from ..app import PondoApp
from .common import run_with_app


@click.command()
@click.option("--email", prompt=True, help="Account email")
@click.option("--password", prompt=True, hide_input=True, help="Account password")
@click.pass_context
def login(ctx: click.Context, email: str, password: str) -> None:
    """
    Sign in to the ledger.

    Example:
      pondo login --email me@example.com
    """

    async def action(app: PondoApp) -> str | None:
        ok = await app.auth.login(email.strip(), password)
        return None if ok else app.auth.error

    error = run_with_app(ctx, action)
    if error:
        raise click.ClickException(error)
    click.echo(f"Signed in as {email.strip()}")


@click.command()
@click.option("--email", prompt=True, help="Account email")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    help="Account password (at least 8 characters)",
)
@click.option("--confirm-password", prompt="Confirm password", hide_input=True, help="Repeat the password")
@click.pass_context
def register(ctx: click.Context, email: str, password: str, confirm_password: str) -> None:
    """Create an account and sign in."""

    async def action(app: PondoApp) -> str | None:
        ok = await app.auth.register(email.strip(), password, confirm_password)
        return None if ok else app.auth.error

    error = run_with_app(ctx, action)
    if error:
        raise click.ClickException(error)
    click.echo(f"Account created for {email.strip()}")


@click.command()
@click.pass_context
def logout(ctx: click.Context) -> None:
    """Sign out and forget the stored access token."""

    async def action(app: PondoApp) -> None:
        await app.auth.logout()

    run_with_app(ctx, action)
    click.echo("Signed out")
