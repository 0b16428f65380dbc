#!/usr/bin/env python3
"""
Settings CLI - Display Preferences
"""

import click

from ..app import PondoApp
from ..core.currency import CURRENCY_SYMBOLS
from ..views.settings import SettingsView
from .common import run_with_app


@click.group()
def settings() -> None:
    """Display settings."""
    pass


@settings.command()
@click.argument("code", required=False, type=click.Choice(sorted(CURRENCY_SYMBOLS), case_sensitive=False))
@click.pass_context
def currency(ctx: click.Context, code: str | None) -> None:
    """
    Show or change the display currency.

    Example:
      pondo settings currency USD
    """

    async def action(app: PondoApp) -> SettingsView:
        view = app.view(SettingsView)
        await view.activate()
        if code:
            view.change_currency(code)
        return view

    view = run_with_app(ctx, action)
    s = view.settings
    click.echo(f"Currency: {s.currency_code} ({s.currency_symbol})")
