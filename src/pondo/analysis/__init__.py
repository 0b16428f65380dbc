"""
Analysis Package

Pure derivations over ledger snapshots and local entities.
"""

from .aggregator import (
    BudgetOverview,
    BudgetStatus,
    GoalProgress,
    budget_overview,
    budget_status,
    category_spend,
    expense_transactions,
    goal_progress,
    income_transactions,
    recent_transactions,
    top_categories,
    total_expenses,
    total_income,
)

__all__ = [
    "BudgetOverview",
    "BudgetStatus",
    "GoalProgress",
    "budget_overview",
    "budget_status",
    "category_spend",
    "expense_transactions",
    "goal_progress",
    "income_transactions",
    "recent_transactions",
    "top_categories",
    "total_expenses",
    "total_income",
]
