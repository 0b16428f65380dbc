#!/usr/bin/env python3
"""Tests for the ledger HTTP client."""

import json

import httpx
import pytest

from pondo.core.models import DashboardSummary, Transaction, TransactionDraft
from pondo.ledger.client import (
    SAVE_FAILED_MESSAGE,
    UNREADABLE_RESPONSE_MESSAGE,
    Created,
    LedgerClient,
    LedgerReadError,
    Rejected,
    build_http_client,
)
from tests.fixtures.ledger import TEST_API_BASE_URL

DRAFT = TransactionDraft(date="2026-03-06", description="Taxi", category="Transportation", amount=-150)


@pytest.fixture
def token():
    return {"value": None}


@pytest.fixture
def client(fake_ledger, token):
    http = build_http_client(TEST_API_BASE_URL, transport=fake_ledger.transport())
    return LedgerClient(http, token_provider=lambda: token["value"])


@pytest.mark.ledger
class TestReads:
    """Test transaction and summary reads."""

    @pytest.mark.asyncio
    async def test_fetch_transactions_in_ledger_order(self, client, fake_ledger):
        transactions = await client.fetch_transactions()

        assert [t.id for t in transactions] == [3, 2, 1]
        assert isinstance(transactions[0], Transaction)
        assert fake_ledger.requests[0].url == httpx.URL("http://ledger.test/api/transactions")

    @pytest.mark.asyncio
    async def test_bearer_token_sent_when_present(self, client, fake_ledger, token):
        await client.fetch_transactions()
        assert "authorization" not in fake_ledger.requests[-1].headers

        token["value"] = "abc"
        await client.fetch_summary()
        assert fake_ledger.requests[-1].headers["authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_fetch_summary(self, client):
        summary = await client.fetch_summary()
        assert summary == DashboardSummary(total_income=1000, total_expenses=800, balance=200)

    @pytest.mark.asyncio
    async def test_http_error_raises_read_error(self, client, fake_ledger):
        fake_ledger.fail_reads = True
        with pytest.raises(LedgerReadError):
            await client.fetch_transactions()
        with pytest.raises(LedgerReadError):
            await client.fetch_summary()

    @pytest.mark.asyncio
    async def test_network_error_raises_read_error(self, client, fake_ledger):
        fake_ledger.network_down = True
        with pytest.raises(LedgerReadError):
            await client.fetch_transactions()

    @pytest.mark.asyncio
    async def test_malformed_list_raises_read_error(self, client, fake_ledger):
        fake_ledger.transactions.append({"id": 9, "amount": "lots"})
        with pytest.raises(LedgerReadError):
            await client.fetch_transactions()

    @pytest.mark.asyncio
    async def test_non_json_body_raises_read_error(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))
        client = LedgerClient(build_http_client(TEST_API_BASE_URL, transport=transport), lambda: None)
        with pytest.raises(LedgerReadError):
            await client.fetch_transactions()


@pytest.mark.ledger
class TestCreate:
    """Test the tagged create result."""

    @pytest.mark.asyncio
    async def test_created_carries_ledger_id(self, client, fake_ledger):
        result = await client.create_transaction(DRAFT)

        assert isinstance(result, Created)
        assert result.transaction == Transaction(
            id=100, date="2026-03-06", description="Taxi", category="Transportation", amount=-150
        )
        sent = fake_ledger.requests_to("POST", "/transactions")[0]
        assert json.loads(sent.content) == DRAFT.to_payload()

    @pytest.mark.asyncio
    async def test_server_error_is_rejected(self, client, fake_ledger):
        fake_ledger.fail_creates = True
        result = await client.create_transaction(DRAFT)
        assert result == Rejected(reason=SAVE_FAILED_MESSAGE, status_code=500)

    @pytest.mark.asyncio
    async def test_network_error_is_rejected(self, client, fake_ledger):
        fake_ledger.network_down = True
        result = await client.create_transaction(DRAFT)
        assert result == Rejected(reason=SAVE_FAILED_MESSAGE)

    @pytest.mark.asyncio
    async def test_unreadable_response_is_rejected(self, client, fake_ledger):
        fake_ledger.create_response = {"ok": True}
        result = await client.create_transaction(DRAFT)
        assert isinstance(result, Rejected)
        assert result.reason == UNREADABLE_RESPONSE_MESSAGE
