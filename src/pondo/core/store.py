#!/usr/bin/env python3
"""
Local Configuration Store

Persistence for the entities that live only on this client: display settings,
the budget list and the saving goal, plus the raw access token handed out by
the auth service.

Storage is a plain key/value backend holding strings. Three keys hold JSON
documents (``settings``, ``budgets``, ``saving_goal``); ``access_token`` holds
the raw token text.

Reads never fail: an absent key, unreadable storage or a value that does not
decode into the expected model all yield the documented default. Writes are
best-effort: storage errors are logged and swallowed so that a broken state
directory never blocks the views.
"""

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any, Protocol, TypeVar

from .json_utils import format_json, parse_json
from .models import (
    AppSettings,
    BudgetItem,
    SavingGoalState,
    budgets_from_list,
    budgets_to_list,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

SETTINGS_KEY = "settings"
BUDGETS_KEY = "budgets"
SAVING_GOAL_KEY = "saving_goal"
ACCESS_TOKEN_KEY = "access_token"

DEFAULT_GOAL_TITLE = "New Goal"


class KeyValueBackend(Protocol):
    """
    Protocol for the client-resident string store.

    Implementations may raise ``OSError`` from any method; the config store
    treats that as absence on read and ignores it on write.
    """

    def get_item(self, key: str) -> str | None:
        """Return the stored string, or None when the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store a string under ``key``, replacing any previous value."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove ``key``. Removing an absent key is not an error."""
        ...


class MemoryKeyValueBackend:
    """In-process backend, used by tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileKeyValueBackend:
    """
    Backend storing one file per key inside a state directory.

    JSON keys are stored as ``<key>.json`` and the token as a bare ``<key>``
    file. Writes go to a temporary sibling first and are renamed into place,
    so a crash mid-write leaves the previous value intact.
    """

    def __init__(self, state_dir: Path):
        """
        Initialize the file backend.

        Args:
            state_dir: Directory holding the key files (created on first write)
        """
        self.state_dir = state_dir

    def path_for(self, key: str) -> Path:
        """Get the file path used for a key."""
        if key == ACCESS_TOKEN_KEY:
            return self.state_dir / key
        return self.state_dir / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(path.name + ".tmp")
        tmp_path.write_text(value, encoding="utf-8")
        os.replace(tmp_path, path)

    def remove_item(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)


class LocalConfigStore:
    """
    Typed access to locally owned entities over a ``KeyValueBackend``.

    The store is passed explicitly to every controller that needs it; there is
    no module-level instance. Each key is loaded and defaulted independently
    and there is no consistency rule between keys. Saves are last-writer-wins
    per key.
    """

    def __init__(self, backend: KeyValueBackend):
        self.backend = backend

    # Generic load/save

    def load(self, key: str, decode: Callable[[Any], T], default: Callable[[], T]) -> T:
        """
        Load and decode the JSON value stored under ``key``.

        Args:
            key: Storage key
            decode: Converts parsed JSON into the model, raising ValueError
                    (or KeyError/TypeError) when the structure is wrong
            default: Factory for the value returned when the key is absent or
                     its contents cannot be decoded

        Returns:
            The decoded value or the default
        """
        try:
            raw = self.backend.get_item(key)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read '%s' from local storage: %s", key, e)
            return default()

        if raw is None:
            logger.debug("No stored value for '%s', using default", key)
            return default()

        try:
            return decode(parse_json(raw))
        except (ValueError, KeyError, TypeError, RecursionError) as e:
            logger.warning("Stored value for '%s' is unreadable, using default: %s", key, e)
            return default()

    def save(self, key: str, value: Any) -> None:
        """
        Encode ``value`` as JSON and store it under ``key``.

        Storage failures are logged and ignored.
        """
        try:
            self.backend.set_item(key, format_json(value))
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Could not save '%s' to local storage: %s", key, e)

    # Settings

    def load_settings(self) -> AppSettings:
        """Load display settings, defaulting to PHP/₱."""
        return self.load(SETTINGS_KEY, AppSettings.from_dict, AppSettings.default)

    def save_settings(self, settings: AppSettings) -> None:
        self.save(SETTINGS_KEY, settings.to_dict())

    # Budgets

    def load_budgets(self) -> list[BudgetItem]:
        """Load the budget collection, defaulting to an empty list."""
        return self.load(BUDGETS_KEY, budgets_from_list, list)

    def save_budgets(self, budgets: list[BudgetItem]) -> None:
        """Persist the whole budget collection."""
        self.save(BUDGETS_KEY, budgets_to_list(budgets))

    # Saving goal

    def load_goal(self) -> SavingGoalState:
        """Load the saving goal, defaulting to an unstarted goal with zero target."""
        return self.load(
            SAVING_GOAL_KEY,
            SavingGoalState.from_dict,
            lambda: SavingGoalState.empty(title=DEFAULT_GOAL_TITLE),
        )

    def save_goal(self, goal: SavingGoalState) -> None:
        self.save(SAVING_GOAL_KEY, goal.to_dict())

    # Access token (raw string, not JSON)

    def get_access_token(self) -> str | None:
        """Return the stored bearer token, or None when there is none."""
        try:
            token = self.backend.get_item(ACCESS_TOKEN_KEY)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read access token: %s", e)
            return None
        return token or None

    def set_access_token(self, token: str) -> None:
        try:
            self.backend.set_item(ACCESS_TOKEN_KEY, token)
        except OSError as e:
            logger.warning("Could not store access token: %s", e)

    def clear_access_token(self) -> None:
        try:
            self.backend.remove_item(ACCESS_TOKEN_KEY)
        except OSError as e:
            logger.warning("Could not remove access token: %s", e)
