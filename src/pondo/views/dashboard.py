#!/usr/bin/env python3
"""
Dashboard View

Ledger totals, every transaction, the budget overview and goal progress on
one screen, plus a quick-entry form that accepts any non-zero amount.
"""

from ..analysis.aggregator import (
    BudgetOverview,
    GoalProgress,
    budget_overview,
    category_spend,
    goal_progress,
)
from ..core.models import BudgetItem, DashboardSummary, SavingGoalState
from ..ledger.client import CreateResult
from ..ledger.forms import AmountRule, TransactionForm
from .base import View


class DashboardView(View):
    name = "dashboard"
    uses_summary = True

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.form = TransactionForm(rule=AmountRule.NON_ZERO)
        self.budgets: list[BudgetItem] = []
        self.goal = SavingGoalState.empty()

    def load_local(self) -> None:
        self.budgets = self.store.load_budgets()
        self.goal = self.store.load_goal()

    @property
    def summary(self) -> DashboardSummary:
        return self.sync.summary

    @property
    def budget_overview(self) -> BudgetOverview:
        return budget_overview(self.budgets, category_spend(self.transactions))

    @property
    def goal_progress(self) -> GoalProgress:
        return goal_progress(self.goal)

    async def submit(self) -> CreateResult | None:
        """Submit the quick-entry form."""
        return await self.sync.submit(self.form)
