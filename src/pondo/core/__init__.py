"""
Core Utilities Package

Data models, currency display, configuration and local persistence shared by
the ledger client, the analysis functions and the views.

This package provides:
- Integer currency formatting and form amount parsing
- Data models for ledger transactions and locally owned entities
- Configuration management for environment-specific settings
- The local config store and its key/value backends
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_data_dir,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import (
    CURRENCY_SYMBOLS,
    DEFAULT_CURRENCY_CODE,
    currency_symbol_for,
    format_currency,
    format_with_commas,
    parse_amount,
    percent_of,
)
from .models import (
    SAVINGS_CATEGORY,
    AppSettings,
    BudgetItem,
    Contribution,
    DashboardSummary,
    SavingGoalState,
    Transaction,
    TransactionDraft,
    TransactionType,
)
from .store import (
    FileKeyValueBackend,
    KeyValueBackend,
    LocalConfigStore,
    MemoryKeyValueBackend,
)

__all__ = [
    "CURRENCY_SYMBOLS",
    "DEFAULT_CURRENCY_CODE",
    "SAVINGS_CATEGORY",
    "AppSettings",
    "BudgetItem",
    # Configuration
    "Config",
    "Contribution",
    "DashboardSummary",
    "Environment",
    "FileKeyValueBackend",
    "KeyValueBackend",
    # Local persistence
    "LocalConfigStore",
    "MemoryKeyValueBackend",
    "SavingGoalState",
    # Data models
    "Transaction",
    "TransactionDraft",
    "TransactionType",
    # Currency utilities
    "currency_symbol_for",
    "format_currency",
    "format_with_commas",
    "get_config",
    "get_data_dir",
    "is_development",
    "is_production",
    "is_test",
    "parse_amount",
    "percent_of",
    "reload_config",
]
