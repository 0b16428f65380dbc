#!/usr/bin/env python3
"""
Core Data Models for Pondo

Data structures shared by the local store, the ledger client and the views.

Transactions and the dashboard summary are owned by the remote ledger.
Budgets, the saving goal and display settings are owned by this client and
persisted locally as JSON.

Every model decodes strictly through ``from_dict``: a missing field or a
value of the wrong type raises ``ValueError`` so callers can fall back to a
default instead of carrying half-decoded state around.
"""

import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from .currency import DEFAULT_CURRENCY_CODE, currency_symbol_for

SAVINGS_CATEGORY = "Savings"


class TransactionType(Enum):
    """Types of ledger transactions, by sign of the amount."""

    EXPENSE = "expense"
    INCOME = "income"
    NEUTRAL = "neutral"


def _require_mapping(data: Any, model: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{model} must be a JSON object, got {type(data).__name__}")
    return data


def _require_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"Field '{key}' must be a string")
    return value


def _require_int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    # bool is an int subclass; JSON true/false is not an amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Field '{key}' must be an integer")
    return value


def _require_list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if not isinstance(value, list):
        raise ValueError(f"Field '{key}' must be a list")
    return value


@dataclass(frozen=True)
class Transaction:
    """
    A single signed monetary event owned by the remote ledger.

    Positive amounts are income, negative amounts are expenses. The ``id`` is
    assigned by the ledger on create; this client never invents one.
    """

    id: int | None
    date: str
    description: str
    category: str
    amount: int

    @property
    def transaction_type(self) -> TransactionType:
        """Determine transaction type based on amount."""
        if self.amount < 0:
            return TransactionType.EXPENSE
        elif self.amount > 0:
            return TransactionType.INCOME
        else:
            return TransactionType.NEUTRAL

    @classmethod
    def from_dict(cls, data: Any) -> "Transaction":
        """Decode a ledger transaction. Unknown fields are ignored."""
        data = _require_mapping(data, "Transaction")
        raw_id = data.get("id")
        if raw_id is not None and (isinstance(raw_id, bool) or not isinstance(raw_id, int)):
            raise ValueError("Field 'id' must be an integer or null")
        return cls(
            id=raw_id,
            date=_require_str(data, "date"),
            description=_require_str(data, "description"),
            category=_require_str(data, "category"),
            amount=_require_int(data, "amount"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "date": self.date,
            "description": self.description,
            "category": self.category,
            "amount": self.amount,
        }


@dataclass(frozen=True)
class TransactionDraft:
    """Body of a create request. The ledger answers with a full Transaction."""

    date: str
    description: str
    category: str
    amount: int

    def to_payload(self) -> dict[str, Any]:
        """Request body for ``POST /transactions``."""
        return {
            "date": self.date,
            "description": self.description,
            "category": self.category,
            "amount": self.amount,
        }


@dataclass(frozen=True)
class DashboardSummary:
    """
    Pre-aggregated totals computed by the ledger.

    These are trusted as-is and never derived locally.
    """

    total_income: int = 0
    total_expenses: int = 0
    balance: int = 0

    @classmethod
    def from_dict(cls, data: Any, fallback: "DashboardSummary | None" = None) -> "DashboardSummary":
        """
        Decode a summary response field by field.

        Each field that is missing or not an integer keeps the value from
        ``fallback`` (zero when no fallback is given).
        """
        data = _require_mapping(data, "DashboardSummary")
        base = fallback or cls()
        values = {}
        for name in ("total_income", "total_expenses", "balance"):
            value = data.get(name)
            if isinstance(value, int) and not isinstance(value, bool):
                values[name] = value
        return replace(base, **values)

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary for JSON serialization."""
        return {
            "total_income": self.total_income,
            "total_expenses": self.total_expenses,
            "balance": self.balance,
        }


@dataclass(frozen=True)
class BudgetItem:
    """A monthly spending cap for one category."""

    category: str
    limit: int

    @classmethod
    def from_dict(cls, data: Any) -> "BudgetItem":
        data = _require_mapping(data, "BudgetItem")
        return cls(category=_require_str(data, "category"), limit=_require_int(data, "limit"))

    def to_dict(self) -> dict[str, Any]:
        return {"category": self.category, "limit": self.limit}


def budgets_from_list(data: Any) -> list[BudgetItem]:
    """Decode the persisted budget collection."""
    if not isinstance(data, list):
        raise ValueError("Budget collection must be a JSON array")
    return [BudgetItem.from_dict(item) for item in data]


def budgets_to_list(budgets: list[BudgetItem]) -> list[dict[str, Any]]:
    """Encode the budget collection for persistence."""
    return [item.to_dict() for item in budgets]


def _new_ref() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Contribution:
    """
    A single deposit toward the saving goal.

    Each contribution is mirrored to the ledger as a negative "Savings"
    transaction. When that remote write fails the contribution keeps
    ``reconciliation_pending`` set until a later retry succeeds. ``ref`` is a
    local handle used to find the contribution again; it is not a ledger id.
    """

    date: str
    description: str
    amount: int
    reconciliation_pending: bool = False
    ref: str = field(default_factory=_new_ref)

    @classmethod
    def from_dict(cls, data: Any) -> "Contribution":
        data = _require_mapping(data, "Contribution")
        pending = data.get("reconciliation_pending", False)
        if not isinstance(pending, bool):
            raise ValueError("Field 'reconciliation_pending' must be a boolean")
        ref = data.get("ref")
        if ref is not None and not isinstance(ref, str):
            raise ValueError("Field 'ref' must be a string")
        return cls(
            date=_require_str(data, "date"),
            description=_require_str(data, "description"),
            amount=_require_int(data, "amount"),
            reconciliation_pending=pending,
            ref=ref or _new_ref(),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "description": self.description,
            "amount": self.amount,
            "reconciliation_pending": self.reconciliation_pending,
            "ref": self.ref,
        }

    def companion_draft(self, description: str) -> TransactionDraft:
        """The ledger transaction that records this deposit as a savings outflow."""
        return TransactionDraft(
            date=self.date,
            description=description,
            category=SAVINGS_CATEGORY,
            amount=-self.amount,
        )


@dataclass(frozen=True)
class SavingGoalState:
    """
    The single saving goal and its contributions, newest first.

    A goal with an empty title, zero target and no contributions is the
    "no goal" state; the two are not distinguished.
    """

    title: str
    target_amount: int
    target_date: str
    contributions: tuple[Contribution, ...] = ()

    @classmethod
    def empty(cls, title: str = "") -> "SavingGoalState":
        """The zero goal: no target and no contributions."""
        return cls(title=title, target_amount=0, target_date="", contributions=())

    @property
    def is_set(self) -> bool:
        """Whether the goal carries anything beyond the zero value."""
        return bool(self.title) or self.target_amount > 0 or bool(self.contributions)

    @property
    def pending_contributions(self) -> list[Contribution]:
        """Contributions whose ledger transaction has not been confirmed."""
        return [c for c in self.contributions if c.reconciliation_pending]

    @classmethod
    def from_dict(cls, data: Any) -> "SavingGoalState":
        data = _require_mapping(data, "SavingGoalState")
        target = _require_int(data, "target_amount")
        if target < 0:
            raise ValueError("Field 'target_amount' must be non-negative")
        return cls(
            title=_require_str(data, "title"),
            target_amount=target,
            target_date=_require_str(data, "target_date"),
            contributions=tuple(Contribution.from_dict(c) for c in _require_list(data, "contributions")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "target_amount": self.target_amount,
            "target_date": self.target_date,
            "contributions": [c.to_dict() for c in self.contributions],
        }


@dataclass(frozen=True)
class AppSettings:
    """Display settings. The symbol always follows from the code."""

    currency_code: str
    currency_symbol: str

    @classmethod
    def for_code(cls, code: str) -> "AppSettings":
        """Build settings for a currency code, deriving its symbol."""
        return cls(currency_code=code, currency_symbol=currency_symbol_for(code))

    @classmethod
    def default(cls) -> "AppSettings":
        return cls.for_code(DEFAULT_CURRENCY_CODE)

    @classmethod
    def from_dict(cls, data: Any) -> "AppSettings":
        data = _require_mapping(data, "AppSettings")
        return cls(
            currency_code=_require_str(data, "currency_code"),
            currency_symbol=_require_str(data, "currency_symbol"),
        )

    def to_dict(self) -> dict[str, str]:
        return {"currency_code": self.currency_code, "currency_symbol": self.currency_symbol}
