"""
Ledger Package

Communication with the remote transaction ledger.

This package provides:
- LedgerClient: async HTTP access to transactions and the dashboard summary
- ResourceCache: last-known values shared by every live view
- SyncController: fetch orchestration and server-confirmed creates
- TransactionForm: create-form validation and the single-flight gate
"""

from .cache import DASHBOARD_SUMMARY, TRANSACTIONS, ResourceCache
from .client import (
    Created,
    CreateResult,
    LedgerClient,
    LedgerError,
    LedgerReadError,
    Rejected,
    build_http_client,
)
from .forms import AmountRule, FormError, TransactionForm
from .sync import SyncController

__all__ = [
    "DASHBOARD_SUMMARY",
    "TRANSACTIONS",
    "AmountRule",
    "CreateResult",
    "Created",
    "FormError",
    "LedgerClient",
    "LedgerError",
    "LedgerReadError",
    "Rejected",
    "ResourceCache",
    "SyncController",
    "TransactionForm",
    "build_http_client",
]
