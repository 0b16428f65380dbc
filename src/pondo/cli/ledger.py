#!/usr/bin/env python3
"""
Ledger CLI - Overview, Income and Expenses

Screens backed by the remote ledger. Reads that fail show whatever is
already known (zeros and empty lists on a fresh session); details are in the
log.
"""

import click

from ..app import PondoApp
from ..views.dashboard import DashboardView
from ..views.expense import DEFAULT_EXPENSE_CATEGORY, ExpenseView
from ..views.income import DEFAULT_INCOME_CATEGORY, INCOME_CATEGORIES, IncomeView
from ..views.summary import SummaryView
from .common import echo_transactions, run_with_app, submit_form


@click.command()
@click.pass_context
def dashboard(ctx: click.Context) -> None:
    """Show totals, budgets, goal progress and all transactions."""

    async def action(app: PondoApp) -> None:
        view = app.view(DashboardView)
        await view.activate()

        s = view.summary
        click.echo("Dashboard")
        click.echo("=" * 60)
        click.echo(f"  Income:   {view.format(s.total_income)}")
        click.echo(f"  Expenses: {view.format(s.total_expenses)}")
        click.echo(f"  Balance:  {view.format(s.balance)}")

        overview = view.budget_overview
        click.echo("\nBudgets:")
        click.echo(f"  Budgeted: {view.format(overview.total_budget)}")
        click.echo(f"  Spent:    {view.format(overview.total_spent)}")
        click.echo(f"  Left:     {view.format(overview.total_remaining)}")
        if overview.overspent_count:
            click.echo(f"  Over budget: {overview.overspent_count} categories")

        if view.goal.is_set:
            progress = view.goal_progress
            click.echo(f"\nGoal: {view.goal.title} - {progress.percent_complete}% of {view.format(view.goal.target_amount)}")

        click.echo("\nTransactions:")
        echo_transactions(view, view.transactions, "  No transactions yet.")

    run_with_app(ctx, action)


@click.command()
@click.pass_context
def summary(ctx: click.Context) -> None:
    """Show ledger totals and the 10 most recent transactions."""

    async def action(app: PondoApp) -> None:
        view = app.view(SummaryView)
        await view.activate()

        s = view.summary
        click.echo("Summary")
        click.echo("=" * 60)
        click.echo(f"  Total income:   {view.format(s.total_income)}")
        click.echo(f"  Total expenses: {view.format(s.total_expenses)}")
        click.echo(f"  Balance:        {view.format(s.balance)}")
        click.echo("\nRecent transactions:")
        echo_transactions(view, view.recent, "  No transactions yet.")

    run_with_app(ctx, action)


@click.group()
def income() -> None:
    """Income transactions."""
    pass


@income.command(name="list")
@click.pass_context
def income_list(ctx: click.Context) -> None:
    """List income and its total."""

    async def action(app: PondoApp) -> None:
        view = app.view(IncomeView)
        await view.activate()
        echo_transactions(view, view.entries, "No income recorded.")
        click.echo(f"\nTotal income: {view.format(view.total)}")

    run_with_app(ctx, action)


@income.command(name="add")
@click.option("--amount", required=True, help="Positive amount")
@click.option("--description", required=True, help="What the income is for")
@click.option(
    "--category",
    type=click.Choice(INCOME_CATEGORIES),
    default=DEFAULT_INCOME_CATEGORY,
    show_default=True,
)
@click.option("--date", "date_str", help="Date (YYYY-MM-DD, default: today)")
@click.pass_context
def income_add(ctx: click.Context, amount: str, description: str, category: str, date_str: str | None) -> None:
    """
    Record income.

    Example:
      pondo income add --amount 25000 --description "March pay"
    """

    async def action(app: PondoApp) -> None:
        view = app.view(IncomeView)
        tx = await submit_form(view, view.form, view.submit, date_str, description, category, amount)
        click.echo(f"{view.form.success} #{tx.id}: {tx.category} {view.format(tx.amount)}")

    run_with_app(ctx, action)


@click.group()
def expense() -> None:
    """Expense transactions."""
    pass


@expense.command(name="list")
@click.pass_context
def expense_list(ctx: click.Context) -> None:
    """List expenses and the total spent."""

    async def action(app: PondoApp) -> None:
        view = app.view(ExpenseView)
        await view.activate()
        echo_transactions(view, view.entries, "No expenses recorded.")
        click.echo(f"\nTotal expenses: {view.format(view.total)}")

    run_with_app(ctx, action)


@expense.command(name="add")
@click.option("--amount", required=True, help="Positive amount (recorded as spending)")
@click.option("--description", required=True, help="What the money was spent on")
@click.option("--category", default=DEFAULT_EXPENSE_CATEGORY, show_default=True)
@click.option("--date", "date_str", help="Date (YYYY-MM-DD, default: today)")
@click.pass_context
def expense_add(ctx: click.Context, amount: str, description: str, category: str, date_str: str | None) -> None:
    """
    Record an expense.

    Example:
      pondo expense add --amount 150 --description Jeepney --category Transportation
    """

    async def action(app: PondoApp) -> None:
        view = app.view(ExpenseView)
        tx = await submit_form(view, view.form, view.submit, date_str, description, category, amount)
        click.echo(f"{view.form.success} #{tx.id}: {tx.category} {view.format(tx.amount)}")

    run_with_app(ctx, action)
