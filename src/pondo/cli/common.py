#!/usr/bin/env python3
"""
Shared CLI Helpers

Running async controllers from click commands and printing their results.
"""

import asyncio
from collections.abc import Awaitable, Callable
from datetime import date
from typing import TypeVar

import click

from ..app import PondoApp, build_app
from ..core.models import Transaction
from ..ledger.client import Created
from ..ledger.forms import TransactionForm
from ..views.base import View

T = TypeVar("T")


def run_with_app(ctx: click.Context, action: Callable[[PondoApp], Awaitable[T]]) -> T:
    """
    Build a session from the context's configuration and run ``action`` in it.

    Tests may place an ``httpx`` transport under ``ctx.obj["transport"]``.
    """
    obj = ctx.find_root().obj

    async def runner() -> T:
        async with build_app(obj["config"], transport=obj.get("transport")) as app:
            return await action(app)

    return asyncio.run(runner())


def echo_transactions(view: View, transactions: list[Transaction], empty_message: str) -> None:
    """Print transactions as aligned rows, or a message if there are none."""
    if not transactions:
        click.echo(empty_message)
        return

    for tx in transactions:
        click.echo(f"  {tx.date:<10}  {tx.category:<16}  {view.format(tx.amount):>16}  {tx.description}")


async def submit_form(
    view: View,
    form: TransactionForm,
    submit: Callable[[], Awaitable[object]],
    date_str: str | None,
    description: str,
    category: str | None,
    amount: str,
) -> Transaction:
    """
    Fill a view's form from command options and submit it.

    Raises:
        click.ClickException: If validation fails or the ledger rejects it
    """
    await view.activate()
    form.date = date_str or date.today().isoformat()
    form.description = description
    if category is not None:
        form.category = category
    form.amount = amount

    result = await submit()
    if isinstance(result, Created):
        return result.transaction

    message = form.error.message if form.error else "Could not save the transaction."
    raise click.ClickException(message)
