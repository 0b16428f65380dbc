#!/usr/bin/env python3
"""
View Controller Base

A view owns the state one screen shows: a loading flag, the display
settings and whatever it derives from the shared cache and the local store.

Views never hold their own copy of ledger data. While active they subscribe
to the cache keys they read, so a transaction created from any other view
shows up here without a refetch.
"""

import logging
from collections.abc import Callable
from typing import Any

from ..core.currency import format_currency
from ..core.models import AppSettings, Transaction
from ..core.store import LocalConfigStore
from ..ledger.cache import DASHBOARD_SUMMARY, TRANSACTIONS
from ..ledger.sync import SyncController

logger = logging.getLogger(__name__)


class View:
    """
    Base class for the screen controllers.

    Subclasses set ``uses_summary`` when the screen shows the ledger's
    dashboard totals, and override ``load_local`` to read their entities from
    the store.

    Args:
        sync: Shared sync controller (and through it, the shared cache)
        store: Local store for settings, budgets and the goal
        on_change: Optional callback run whenever observed data changes
    """

    name = "view"
    uses_transactions = True
    uses_summary = False

    def __init__(
        self,
        sync: SyncController,
        store: LocalConfigStore,
        on_change: Callable[[], None] | None = None,
    ):
        self.sync = sync
        self.store = store
        self.on_change = on_change
        self.settings: AppSettings = AppSettings.default()
        self.loading = False
        self.active = False
        self.revision = 0
        self._unsubscribers: list[Callable[[], None]] = []

    @property
    def watched_keys(self) -> tuple[str, ...]:
        keys = []
        if self.uses_transactions:
            keys.append(TRANSACTIONS)
        if self.uses_summary:
            keys.append(DASHBOARD_SUMMARY)
        return tuple(keys)

    @property
    def transactions(self) -> list[Transaction]:
        return self.sync.transactions

    def load_local(self) -> None:
        """Read locally owned entities. Runs on every activation."""

    def reload_local(self) -> None:
        """Reread the settings and this view's entities from the store."""
        self.settings = self.store.load_settings()
        self.load_local()

    async def activate(self) -> None:
        """
        Show the view: reload local state, start observing the cache and
        fetch the remote resources this view needs.

        ``loading`` is cleared once every fetch has finished, whether or not
        it succeeded.
        """
        if not self.active:
            self._unsubscribers = [self.sync.cache.subscribe(key, self._cache_changed) for key in self.watched_keys]
            self.active = True

        self.reload_local()

        if self.watched_keys:
            self.loading = True
            try:
                await self.sync.refresh(transactions=self.uses_transactions, summary=self.uses_summary)
            finally:
                self.loading = False
        logger.debug("Activated %s view", self.name)

    def deactivate(self) -> None:
        """Stop observing the cache. Fetches still in flight land in the cache."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self.active = False

    def _cache_changed(self, value: Any) -> None:
        self.revision += 1
        if self.on_change is not None:
            self.on_change()

    def format(self, amount: int) -> str:
        """Format an amount in the user's currency."""
        return format_currency(amount, self.settings.currency_symbol)
