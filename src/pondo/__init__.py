"""
Pondo - Personal Finance Client

Client engine for a remote transaction ledger: it fetches and records
transactions, and keeps budgets, a saving goal and display settings locally.

Key Features:
- Shared cache of ledger data observed by every live view
- Server-confirmed transaction creation with per-form single-flight
- Budget status and saving-goal progress computed locally
- Saving contributions mirrored to the ledger, with retry of failed writes
- Auth session state driven by the ledger's auth service

Domain Packages:
- core: Currency display, data models, configuration, local store
- analysis: Pure aggregation over transactions and local entities
- ledger: HTTP client, shared cache, forms and sync controller
- auth: Session state machine
- views: Screen controllers
- cli: Command-line interface

Example Usage:
    from pondo.core.currency import format_currency
    from pondo.analysis import category_spend, budget_status
    from pondo.app import build_app
"""

__version__ = "0.1.0"
__author__ = "Pondo Developers"

# Export core utilities for easy access
from .core.currency import format_currency, parse_amount

# Export key domain functionality
from .core.models import BudgetItem, Contribution, SavingGoalState, Transaction
from .core.config import get_config, Environment

__all__ = [
    # Core currency functions
    "format_currency",
    "parse_amount",

    # Core models
    "Transaction",
    "BudgetItem",
    "Contribution",
    "SavingGoalState",

    # Configuration
    "get_config",
    "Environment",
]
