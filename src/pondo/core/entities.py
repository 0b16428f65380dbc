#!/usr/bin/env python3
"""
Local Entity Operations

Pure update functions for the locally owned budget list and saving goal.
Each returns a new value and leaves its input untouched; persisting the
result is up to the caller.
"""

from dataclasses import replace

from .models import BudgetItem, Contribution, SavingGoalState


def find_budget(budgets: list[BudgetItem], category: str) -> BudgetItem | None:
    """Find a budget by case-insensitive category match."""
    wanted = category.casefold()
    for item in budgets:
        if item.category.casefold() == wanted:
            return item
    return None


def upsert_budget(budgets: list[BudgetItem], category: str, limit: int) -> list[BudgetItem]:
    """
    Set the limit for a category.

    An existing entry whose category matches ignoring case keeps its position
    and original spelling and gets the new limit. Otherwise a new entry is
    appended.

    Args:
        budgets: Current budget collection
        category: Category name as entered
        limit: New positive limit

    Returns:
        The updated collection
    """
    existing = find_budget(budgets, category)
    if existing is None:
        return [*budgets, BudgetItem(category=category, limit=limit)]
    return [replace(item, limit=limit) if item is existing else item for item in budgets]


def replace_goal(title: str, target_amount: int, target_date: str) -> SavingGoalState:
    """
    Start a new goal.

    The previous goal and all of its contributions are discarded.
    """
    if target_amount < 0:
        raise ValueError("Goal target must be non-negative")
    return SavingGoalState(title=title, target_amount=target_amount, target_date=target_date, contributions=())


def add_contribution(goal: SavingGoalState, contribution: Contribution) -> SavingGoalState:
    """Prepend a contribution so the newest appears first."""
    return replace(goal, contributions=(contribution, *goal.contributions))


def set_reconciliation_pending(goal: SavingGoalState, ref: str, pending: bool) -> SavingGoalState:
    """
    Flag or unflag the contribution with the given ref.

    Returns the goal unchanged when no contribution has that ref (for example
    after the goal was replaced while a ledger write was in flight).
    """
    contributions = tuple(
        replace(c, reconciliation_pending=pending) if c.ref == ref else c for c in goal.contributions
    )
    return replace(goal, contributions=contributions)


def cleared_goal() -> SavingGoalState:
    """The zero goal stored when the user removes their goal."""
    return SavingGoalState.empty()
