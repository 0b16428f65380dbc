#!/usr/bin/env python3
"""
Budget CLI - Category Limits

List budgets with their spend and set a category's limit.
"""

import click

from ..app import PondoApp
from ..views.budget import BudgetView
from .common import run_with_app


@click.group()
def budget() -> None:
    """Budget tracking commands."""
    pass


@budget.command(name="list")
@click.pass_context
def budget_list(ctx: click.Context) -> None:
    """Show budgets, spend against them and the top spending categories."""

    async def action(app: PondoApp) -> None:
        view = app.view(BudgetView)
        await view.activate()

        click.echo("Budgets")
        click.echo("=" * 60)
        if not view.budgets:
            click.echo("No budgets set. Use 'pondo budget set' to add one.")
        for status in view.statuses:
            flag = "  OVER" if status.overspent else ""
            click.echo(
                f"  {status.category:<16} {view.format(status.spent):>14} of {view.format(status.limit):>14}"
                f"  ({status.percent_used}%){flag}"
            )

        click.echo(f"\nTotal spent: {view.format(view.total_spent)}")
        if view.top_categories:
            click.echo("\nTop categories:")
            for category, amount in view.top_categories:
                click.echo(f"  {category:<16} {view.format(amount):>14}")

    run_with_app(ctx, action)


@budget.command(name="set")
@click.argument("category")
@click.argument("limit")
@click.pass_context
def budget_set(ctx: click.Context, category: str, limit: str) -> None:
    """
    Set the limit for CATEGORY (matched ignoring case).

    Example:
      pondo budget set Food 5000
    """
    obj = ctx.find_root().obj

    async def action(app: PondoApp) -> BudgetView:
        view = app.view(BudgetView)
        # Local only: no ledger fetch needed to change a limit
        view.reload_local()
        view.set_budget(category, limit)
        return view

    view = run_with_app(ctx, action)
    if view.error:
        raise click.ClickException(view.error)

    if obj.get("verbose"):
        click.echo(f"Budgets stored in {obj['config'].storage.state_dir}")
    saved = next(b for b in view.budgets if b.category.casefold() == category.strip().casefold())
    click.echo(f"Budget for {saved.category} set to {view.format(saved.limit)}")
