#!/usr/bin/env python3
"""
Summary View

The ledger's own totals next to the most recent transactions.
"""

from ..analysis.aggregator import recent_transactions
from ..core.models import DashboardSummary, Transaction
from .base import View

RECENT_COUNT = 10


class SummaryView(View):
    name = "summary"
    uses_summary = True

    @property
    def summary(self) -> DashboardSummary:
        return self.sync.summary

    @property
    def recent(self) -> list[Transaction]:
        return recent_transactions(self.transactions, RECENT_COUNT)
