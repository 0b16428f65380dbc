"""
Views Package

Screen controllers. Each view reads ledger data through the shared cache and
its own entities from the local store.
"""

from .base import View
from .budget import BudgetView
from .dashboard import DashboardView
from .expense import ExpenseView
from .income import IncomeView
from .savings import SavingsView
from .settings import SettingsView
from .summary import SummaryView

__all__ = [
    "BudgetView",
    "DashboardView",
    "ExpenseView",
    "IncomeView",
    "SavingsView",
    "SettingsView",
    "SummaryView",
    "View",
]
