#!/usr/bin/env python3
"""
Budget View

Spending per category against the locally stored budgets, and the form for
setting a category's limit.
"""

import logging

from ..analysis.aggregator import BudgetStatus, budget_status, category_spend, top_categories
from ..core.currency import parse_amount
from ..core.entities import upsert_budget
from ..core.models import BudgetItem
from .base import View

logger = logging.getLogger(__name__)

TOP_CATEGORY_COUNT = 5
INVALID_BUDGET_MESSAGE = "Enter a category and a positive limit."


class BudgetView(View):
    name = "budget"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.budgets: list[BudgetItem] = []
        self.error: str | None = None

    def load_local(self) -> None:
        self.budgets = self.store.load_budgets()

    @property
    def spend_by_category(self) -> dict[str, int]:
        return category_spend(self.transactions)

    @property
    def top_categories(self) -> list[tuple[str, int]]:
        """The five categories with the most spending."""
        return top_categories(self.spend_by_category, TOP_CATEGORY_COUNT)

    @property
    def total_spent(self) -> int:
        """Spending across every category, budgeted or not."""
        return sum(self.spend_by_category.values())

    @property
    def statuses(self) -> list[BudgetStatus]:
        spend = self.spend_by_category
        return [budget_status(b, spend) for b in self.budgets]

    def set_budget(self, category: str, limit_text: str) -> bool:
        """
        Create or update the budget for a category and persist all budgets.

        Args:
            category: Category as typed; matched to existing budgets ignoring case
            limit_text: Limit as typed; must parse to a positive integer

        Returns:
            True if the budget was saved, False with ``error`` set otherwise
        """
        category = category.strip()
        limit = parse_amount(limit_text)
        if not category or limit <= 0:
            self.error = INVALID_BUDGET_MESSAGE
            return False

        self.error = None
        self.budgets = upsert_budget(self.budgets, category, limit)
        self.store.save_budgets(self.budgets)
        logger.info("Set budget for %s to %d", category, limit)
        return True
