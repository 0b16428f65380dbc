#!/usr/bin/env python3
"""
Income View

Positive-amount transactions and their total, with an entry form whose
amount must be positive.
"""

from ..analysis.aggregator import income_transactions, total_income
from ..core.models import Transaction
from ..ledger.client import CreateResult
from ..ledger.forms import AmountRule, TransactionForm
from .base import View

INCOME_CATEGORIES = ("Salary", "Freelance", "Investment")
DEFAULT_INCOME_CATEGORY = "Salary"


class IncomeView(View):
    name = "income"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.form = TransactionForm(
            rule=AmountRule.INCOME,
            default_category=DEFAULT_INCOME_CATEGORY,
        )

    @property
    def entries(self) -> list[Transaction]:
        return income_transactions(self.transactions)

    @property
    def total(self) -> int:
        return total_income(self.transactions)

    async def submit(self) -> CreateResult | None:
        return await self.sync.submit(self.form)
