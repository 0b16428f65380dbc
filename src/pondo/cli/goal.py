#!/usr/bin/env python3
"""
Goal CLI - Saving Goal

Start, inspect and clear the saving goal, add contributions, and retry
contributions whose ledger transaction was not recorded.
"""

from datetime import date

import click

from ..app import PondoApp
from ..views.savings import SavingsView
from .common import run_with_app


async def _savings(app: PondoApp) -> SavingsView:
    view = app.view(SavingsView)
    await view.activate()
    return view


@click.group()
def goal() -> None:
    """Saving goal commands."""
    pass


@goal.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Show the goal, its progress and contributions."""

    async def action(app: PondoApp) -> None:
        view = await _savings(app)
        g = view.goal
        if not g.is_set:
            click.echo("No saving goal. Use 'pondo goal create' to start one.")
            return

        progress = view.progress
        click.echo(f"Goal: {g.title}")
        click.echo(f"  Target: {view.format(g.target_amount)}" + (f" by {g.target_date}" if g.target_date else ""))
        click.echo(f"  Saved:  {view.format(progress.saved)} ({progress.percent_complete}%)")

        if g.contributions:
            click.echo("\nContributions:")
            for c in g.contributions:
                pending = "  (not yet in ledger)" if c.reconciliation_pending else ""
                click.echo(f"  {c.date:<10}  {view.format(c.amount):>14}  {c.description}{pending}")

    run_with_app(ctx, action)


@goal.command()
@click.option("--title", required=True, help="Goal name")
@click.option("--target", required=True, help="Target amount")
@click.option("--date", "target_date", default="", help="Target date (YYYY-MM-DD)")
@click.pass_context
def create(ctx: click.Context, title: str, target: str, target_date: str) -> None:
    """
    Start a new goal, replacing the current one and its contributions.

    Example:
      pondo goal create --title "Emergency fund" --target 50000 --date 2026-12-31
    """

    async def action(app: PondoApp) -> SavingsView:
        view = await _savings(app)
        view.create_goal(title, target, target_date)
        return view

    view = run_with_app(ctx, action)
    if view.error:
        raise click.ClickException(view.error)
    click.echo(f"Started goal '{view.goal.title}' with target {view.format(view.goal.target_amount)}")


@goal.command()
@click.option("--amount", required=True, help="Positive amount")
@click.option("--description", default="", help="Note for the contribution")
@click.option("--date", "date_str", help="Date (YYYY-MM-DD, default: today)")
@click.pass_context
def contribute(ctx: click.Context, amount: str, description: str, date_str: str | None) -> None:
    """Add a contribution and record it in the ledger as savings."""

    async def action(app: PondoApp) -> tuple[SavingsView, bool]:
        view = await _savings(app)
        contribution = await view.add_contribution(date_str or date.today().isoformat(), amount, description)
        pending = contribution is not None and any(c.ref == contribution.ref for c in view.goal.pending_contributions)
        return view, pending

    view, pending = run_with_app(ctx, action)
    if view.error:
        raise click.ClickException(view.error)

    click.echo(f"Saved {view.format(view.progress.saved)} ({view.progress.percent_complete}%)")
    if pending:
        click.echo("Could not record the savings transaction. Run 'pondo goal reconcile' to retry.")


@goal.command()
@click.confirmation_option(prompt="Remove the saving goal and all its contributions?")
@click.pass_context
def clear(ctx: click.Context) -> None:
    """Remove the goal and its contributions."""

    async def action(app: PondoApp) -> None:
        view = await _savings(app)
        view.clear_goal()

    run_with_app(ctx, action)
    click.echo("Saving goal cleared")


@goal.command()
@click.pass_context
def reconcile(ctx: click.Context) -> None:
    """Retry ledger writes for contributions not yet recorded."""

    async def action(app: PondoApp) -> tuple[int, int]:
        view = await _savings(app)
        reconciled = await view.reconcile_pending()
        return reconciled, len(view.goal.pending_contributions)

    reconciled, remaining = run_with_app(ctx, action)
    click.echo(f"Reconciled {reconciled} contributions, {remaining} still pending")
