#!/usr/bin/env python3
"""
Ledger Synchronization

Coordinates reads and writes against the remote ledger and keeps the shared
resource cache in step with it.

Read failures are logged and leave the cached value untouched. Creates are
server-confirmed: nothing is added locally until the ledger returns the new
transaction with its id, after which it is prepended to the cached list and
the summary is refreshed.
"""

import asyncio
import logging

from ..core.models import DashboardSummary, Transaction, TransactionDraft
from .cache import DASHBOARD_SUMMARY, TRANSACTIONS, ResourceCache
from .client import Created, CreateResult, LedgerClient, LedgerReadError
from .forms import SAVED_MESSAGE, FormError, TransactionForm

logger = logging.getLogger(__name__)


class SyncController:
    """
    Fetch and create operations shared by all views.

    Args:
        client: Ledger client used for every request
        cache: Shared cache the results are written into
    """

    def __init__(self, client: LedgerClient, cache: ResourceCache):
        self.client = client
        self.cache = cache

    @property
    def transactions(self) -> list[Transaction]:
        """Last-known transaction list (empty before the first fetch)."""
        return self.cache.get(TRANSACTIONS, [])

    @property
    def summary(self) -> DashboardSummary:
        """Last-known dashboard summary (zeros before the first fetch)."""
        return self.cache.get(DASHBOARD_SUMMARY, DashboardSummary())

    async def refresh_transactions(self) -> bool:
        """
        Refetch the transaction list into the cache.

        Returns:
            True if the cache was updated, False if the read failed
        """
        try:
            transactions = await self.client.fetch_transactions()
        except LedgerReadError as e:
            logger.warning("Keeping previous transactions: %s", e)
            return False
        self.cache.put(TRANSACTIONS, transactions)
        return True

    async def refresh_summary(self) -> bool:
        """
        Refetch the dashboard summary into the cache.

        Returns:
            True if the cache was updated, False if the read failed
        """
        try:
            summary = await self.client.fetch_summary(fallback=self.summary)
        except LedgerReadError as e:
            logger.warning("Keeping previous dashboard summary: %s", e)
            return False
        self.cache.put(DASHBOARD_SUMMARY, summary)
        return True

    async def refresh(self, transactions: bool = True, summary: bool = False) -> None:
        """Run the requested fetches concurrently and wait for all of them."""
        tasks = []
        if transactions:
            tasks.append(self.refresh_transactions())
        if summary:
            tasks.append(self.refresh_summary())
        await asyncio.gather(*tasks)

    async def create(self, draft: TransactionDraft) -> CreateResult:
        """
        Send a validated draft to the ledger and record the confirmed result.

        On success the returned transaction is prepended to the cached list
        (or the list is invalidated if it was never fetched) and the summary
        is refetched when something has already loaded it.
        """
        result = await self.client.create_transaction(draft)
        if isinstance(result, Created):
            await self._record_created(result.transaction)
        return result

    async def _record_created(self, transaction: Transaction) -> None:
        if not self.cache.update(TRANSACTIONS, lambda existing: [transaction, *existing]):
            self.cache.invalidate(TRANSACTIONS)

        self.cache.invalidate(DASHBOARD_SUMMARY)
        if self.cache.has(DASHBOARD_SUMMARY):
            await self.refresh_summary()

    async def submit(self, form: TransactionForm) -> CreateResult | None:
        """
        Validate and submit a form.

        Returns None without touching the network when the form is already
        saving or fails validation. Otherwise returns the create result, with
        the form reset on success or carrying the rejection message.
        """
        if form.saving:
            logger.debug("Ignoring submit while a save is in flight")
            return None

        draft = form.validate()
        if draft is None:
            return None

        form.success = None
        form.saving = True
        try:
            result = await self.create(draft)
        finally:
            form.saving = False

        if isinstance(result, Created):
            form.reset()
            form.success = SAVED_MESSAGE
        else:
            form.error = FormError(field=None, message=result.reason)
        return result
