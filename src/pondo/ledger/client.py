#!/usr/bin/env python3
"""
Remote Ledger Client

Async HTTP access to the transaction ledger and the dashboard summary.

Every request carries the bearer token from the local store when one is
present. Session cookies set by the auth service live in the shared
``httpx.AsyncClient`` cookie jar and are sent along automatically.

Reads raise ``LedgerReadError`` for any failure (network, status, decoding)
so callers can keep their previous state. Creates never raise for expected
failures; they return a ``Created`` or ``Rejected`` result decoded once here.
Retries and timeouts are left to httpx defaults.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx

from ..core.models import DashboardSummary, Transaction, TransactionDraft

logger = logging.getLogger(__name__)

TRANSACTIONS_PATH = "/transactions"
SUMMARY_PATH = "/dashboard/summary"

SAVE_FAILED_MESSAGE = "Could not save the transaction."
UNREADABLE_RESPONSE_MESSAGE = "Could not read the saved transaction."
NETWORK_ERROR_MESSAGE = "Network error"


class LedgerError(Exception):
    """Base class for ledger communication failures."""


class LedgerReadError(LedgerError):
    """A read from the ledger failed or returned something unusable."""


@dataclass(frozen=True)
class Created:
    """The ledger accepted a new transaction and returned it with its id."""

    transaction: Transaction


@dataclass(frozen=True)
class Rejected:
    """The ledger did not confirm a create. ``reason`` is shown to the user."""

    reason: str
    status_code: int | None = None


CreateResult = Created | Rejected


class LedgerClient:
    """
    Client for the ledger endpoints.

    Args:
        http: Shared async HTTP client whose ``base_url`` points at the API root
        token_provider: Returns the current bearer token, or None
    """

    def __init__(self, http: httpx.AsyncClient, token_provider: Callable[[], str | None]):
        self.http = http
        self.token_provider = token_provider

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "LedgerClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def auth_headers(self) -> dict[str, str]:
        """Authorization header for the current token, if any."""
        token = self.token_provider()
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    async def _get_json(self, path: str) -> Any:
        try:
            response = await self.http.get(path, headers=self.auth_headers())
        except httpx.HTTPError as e:
            raise LedgerReadError(f"GET {path} failed: {e}") from e

        if not response.is_success:
            raise LedgerReadError(f"GET {path} returned HTTP {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise LedgerReadError(f"GET {path} returned invalid JSON: {e}") from e

    async def fetch_transactions(self) -> list[Transaction]:
        """
        Fetch the full transaction list in ledger order.

        Raises:
            LedgerReadError: On network failure, non-success status, or a
                             body that is not a list of transactions
        """
        data = await self._get_json(TRANSACTIONS_PATH)
        if not isinstance(data, list):
            raise LedgerReadError(f"GET {TRANSACTIONS_PATH} did not return a list")
        try:
            transactions = [Transaction.from_dict(item) for item in data]
        except ValueError as e:
            raise LedgerReadError(f"GET {TRANSACTIONS_PATH} returned a malformed transaction: {e}") from e

        logger.debug("Fetched %d transactions", len(transactions))
        return transactions

    async def fetch_summary(self, fallback: DashboardSummary | None = None) -> DashboardSummary:
        """
        Fetch the dashboard totals computed by the ledger.

        Fields missing from the response keep their value from ``fallback``.

        Raises:
            LedgerReadError: On network failure, non-success status or a
                             body that is not a JSON object
        """
        data = await self._get_json(SUMMARY_PATH)
        try:
            return DashboardSummary.from_dict(data, fallback)
        except ValueError as e:
            raise LedgerReadError(f"GET {SUMMARY_PATH} returned a malformed summary: {e}") from e

    async def create_transaction(self, draft: TransactionDraft) -> CreateResult:
        """
        Create a transaction on the ledger.

        Args:
            draft: Validated request body

        Returns:
            Created with the ledger's copy of the transaction, or Rejected
            with a user-facing reason
        """
        try:
            response = await self.http.post(
                TRANSACTIONS_PATH, json=draft.to_payload(), headers=self.auth_headers()
            )
        except httpx.HTTPError as e:
            logger.warning("Create transaction failed: %s", e)
            return Rejected(reason=SAVE_FAILED_MESSAGE)

        if not response.is_success:
            logger.warning("Create transaction rejected with HTTP %d", response.status_code)
            return Rejected(reason=SAVE_FAILED_MESSAGE, status_code=response.status_code)

        try:
            created = Transaction.from_dict(response.json())
        except ValueError as e:
            logger.warning("Create transaction response unreadable: %s", e)
            return Rejected(reason=UNREADABLE_RESPONSE_MESSAGE, status_code=response.status_code)

        logger.info("Created transaction %s (%s, %d)", created.id, created.category, created.amount)
        return Created(transaction=created)


def build_http_client(base_url: str, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """
    Build the shared HTTP client for ledger and auth calls.

    Args:
        base_url: API root, e.g. ``http://localhost:5000/api``
        transport: Optional transport override (tests pass ``httpx.MockTransport``)
    """
    return httpx.AsyncClient(base_url=base_url, transport=transport)
