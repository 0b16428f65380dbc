#!/usr/bin/env python3
"""
Aggregation Functions

Derived figures computed from a ledger snapshot and the locally owned
entities: spend per category, budget status, goal progress and simple
totals.

Every function here is pure. Inputs are never mutated and no I/O happens,
so views can recompute freely whenever the cache or the store changes.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal

from ..core.currency import percent_of, round_half_away
from ..core.models import BudgetItem, SavingGoalState, Transaction, TransactionType


@dataclass(frozen=True)
class BudgetStatus:
    """Spend against a single budget."""

    category: str
    limit: int
    spent: int
    remaining: int
    percent_used: int
    overspent: bool


@dataclass(frozen=True)
class BudgetOverview:
    """Totals across every budget plus the per-budget statuses."""

    total_budget: int
    total_spent: int
    total_remaining: int
    overspent_count: int
    statuses: list[BudgetStatus] = field(default_factory=list)


@dataclass(frozen=True)
class GoalProgress:
    """How far the saving goal has come."""

    saved: int
    progress: float
    percent_complete: int


def category_spend(transactions: Iterable[Transaction]) -> dict[str, int]:
    """
    Total expense magnitude per category.

    Only negative amounts count; income contributes nothing. Categories
    appear in the order they are first seen.

    Example:
        [-500 Food, -300 Food, +1000 Salary] -> {"Food": 800}
    """
    totals: dict[str, int] = {}
    for tx in transactions:
        if tx.amount < 0:
            totals[tx.category] = totals.get(tx.category, 0) + abs(tx.amount)
    return totals


def budget_status(budget: BudgetItem, spend_by_category: dict[str, int]) -> BudgetStatus:
    """
    Compare one budget with what has been spent in its category.

    The spend lookup uses the exact category spelling.

    Args:
        budget: Budget entry
        spend_by_category: Output of ``category_spend``

    Returns:
        BudgetStatus; ``percent_used`` is 0 when the limit is not positive
    """
    spent = spend_by_category.get(budget.category, 0)
    return BudgetStatus(
        category=budget.category,
        limit=budget.limit,
        spent=spent,
        remaining=budget.limit - spent,
        percent_used=percent_of(spent, budget.limit),
        overspent=spent > budget.limit,
    )


def budget_overview(budgets: Iterable[BudgetItem], spend_by_category: dict[str, int]) -> BudgetOverview:
    """Status of every budget and the aggregate totals shown on the dashboard."""
    statuses = [budget_status(b, spend_by_category) for b in budgets]
    total_budget = sum(s.limit for s in statuses)
    total_spent = sum(s.spent for s in statuses)
    return BudgetOverview(
        total_budget=total_budget,
        total_spent=total_spent,
        total_remaining=total_budget - total_spent,
        overspent_count=sum(1 for s in statuses if s.overspent),
        statuses=statuses,
    )


def goal_progress(goal: SavingGoalState) -> GoalProgress:
    """
    Progress toward the saving goal, clamped to [0, 1].

    A goal without a positive target has zero progress regardless of how
    much has been contributed.
    """
    saved = sum(c.amount for c in goal.contributions)
    if goal.target_amount > 0:
        ratio = min(Decimal(1), Decimal(saved) / Decimal(goal.target_amount))
        ratio = max(Decimal(0), ratio)
    else:
        ratio = Decimal(0)
    return GoalProgress(
        saved=saved,
        progress=float(ratio),
        percent_complete=round_half_away(ratio * 100),
    )


def top_categories(spend_by_category: dict[str, int], n: int) -> list[tuple[str, int]]:
    """
    Largest spending categories, biggest first.

    ``sorted`` is stable, so equal totals keep first-seen order.
    """
    ordered = sorted(spend_by_category.items(), key=lambda item: item[1], reverse=True)
    return ordered[: max(0, n)]


def income_transactions(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Transactions with a positive amount, in ledger order."""
    return [tx for tx in transactions if tx.transaction_type is TransactionType.INCOME]


def expense_transactions(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Transactions with a negative amount, in ledger order."""
    return [tx for tx in transactions if tx.transaction_type is TransactionType.EXPENSE]


def total_income(transactions: Iterable[Transaction]) -> int:
    """Sum of positive amounts."""
    return sum(tx.amount for tx in income_transactions(transactions))


def total_expenses(transactions: Iterable[Transaction]) -> int:
    """Sum of expense magnitudes (always non-negative)."""
    return sum(abs(tx.amount) for tx in expense_transactions(transactions))


def recent_transactions(transactions: Iterable[Transaction], n: int) -> list[Transaction]:
    """The first ``n`` transactions in ledger order (the ledger sends newest first)."""
    return list(transactions)[: max(0, n)]
