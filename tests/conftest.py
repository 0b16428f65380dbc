"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio

from pondo.app import build_app
from pondo.core import config as config_module
from pondo.core.config import Config
from pondo.core.store import LocalConfigStore, MemoryKeyValueBackend
from pondo.ledger.cache import ResourceCache
from pondo.ledger.client import LedgerClient, build_http_client
from pondo.ledger.sync import SyncController
from tests.fixtures.ledger import TEST_API_BASE_URL, FakeLedger


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def sample_transactions() -> list[dict[str, Any]]:
    """Ledger transactions in ledger order (newest first)."""
    return [
        {"id": 3, "date": "2026-03-05", "description": "Groceries", "category": "Food", "amount": -500},
        {"id": 2, "date": "2026-03-03", "description": "Lunch", "category": "Food", "amount": -300},
        {"id": 1, "date": "2026-03-01", "description": "March pay", "category": "Salary", "amount": 1000},
    ]


@pytest.fixture
def fake_ledger(sample_transactions) -> FakeLedger:
    """Fake ledger preloaded with the sample transactions."""
    return FakeLedger(sample_transactions)


@pytest.fixture
def memory_store() -> LocalConfigStore:
    """Local store backed by an in-memory dict."""
    return LocalConfigStore(MemoryKeyValueBackend())


@pytest_asyncio.fixture
async def sync(fake_ledger, memory_store):
    """Sync controller talking to the fake ledger."""
    http = build_http_client(TEST_API_BASE_URL, transport=fake_ledger.transport())
    client = LedgerClient(http, token_provider=memory_store.get_access_token)
    yield SyncController(client, ResourceCache())
    await http.aclose()


@pytest_asyncio.fixture
async def app(fake_ledger, memory_store):
    """Fully wired app against the fake ledger and the in-memory store."""
    pondo_app = build_app(Config.from_environment(), transport=fake_ledger.transport(), backend=memory_store.backend)
    yield pondo_app
    await pondo_app.aclose()


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables."""
    # Ensure tests don't touch real data or a real ledger
    monkeypatch.setenv("PONDO_ENV", "test")
    monkeypatch.setenv("PONDO_DATA_DIR", str(tmp_path / "pondo_data"))
    monkeypatch.setenv("PONDO_API_BASE_URL", TEST_API_BASE_URL)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.delenv("DEBUG", raising=False)

    # Each test loads configuration from its own environment
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for currency formatting and parsing"
    )
    config.addinivalue_line(
        "markers", "ledger: Tests for ledger communication and sync"
    )
    config.addinivalue_line(
        "markers", "store: Tests for local persistence"
    )
