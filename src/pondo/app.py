#!/usr/bin/env python3
"""
Application Wiring

Builds the object graph every entry point shares: one local store, one HTTP
client (and cookie jar), one resource cache and the controllers on top.
"""

import logging
from dataclasses import dataclass
from typing import TypeVar

import httpx

from .auth.session import AuthSession
from .core.config import Config
from .core.store import FileKeyValueBackend, KeyValueBackend, LocalConfigStore
from .ledger.cache import ResourceCache
from .ledger.client import LedgerClient, build_http_client
from .ledger.sync import SyncController
from .views.base import View

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=View)


@dataclass
class PondoApp:
    """Shared services for one session."""

    config: Config
    store: LocalConfigStore
    http: httpx.AsyncClient
    ledger: LedgerClient
    cache: ResourceCache
    sync: SyncController
    auth: AuthSession

    def view(self, view_class: type[V]) -> V:
        """Create a view bound to the shared services."""
        return view_class(self.sync, self.store)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "PondoApp":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def build_app(
    config: Config,
    transport: httpx.AsyncBaseTransport | None = None,
    backend: KeyValueBackend | None = None,
) -> PondoApp:
    """
    Wire up the services for a configuration.

    Args:
        config: Loaded configuration
        transport: Optional HTTP transport override
        backend: Optional storage backend (defaults to files under the state dir)
    """
    store = LocalConfigStore(backend or FileKeyValueBackend(config.storage.state_dir))
    http = build_http_client(config.ledger.base_url, transport=transport)
    ledger = LedgerClient(http, token_provider=store.get_access_token)
    cache = ResourceCache()

    logger.debug("Built app against %s with state in %s", config.ledger.base_url, config.storage.state_dir)
    return PondoApp(
        config=config,
        store=store,
        http=http,
        ledger=ledger,
        cache=cache,
        sync=SyncController(ledger, cache),
        auth=AuthSession(http, store),
    )
