#!/usr/bin/env python3
"""
Expense View

Negative-amount transactions and their total magnitude. The entry form takes
a positive amount and sends it negated.
"""

from ..analysis.aggregator import expense_transactions, total_expenses
from ..core.models import Transaction
from ..ledger.client import CreateResult
from ..ledger.forms import AmountRule, TransactionForm
from .base import View

DEFAULT_EXPENSE_CATEGORY = "Transportation"


class ExpenseView(View):
    name = "expense"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.form = TransactionForm(rule=AmountRule.EXPENSE, default_category=DEFAULT_EXPENSE_CATEGORY)

    @property
    def entries(self) -> list[Transaction]:
        return expense_transactions(self.transactions)

    @property
    def total(self) -> int:
        """Total spent, as a non-negative number."""
        return total_expenses(self.transactions)

    async def submit(self) -> CreateResult | None:
        return await self.sync.submit(self.form)
