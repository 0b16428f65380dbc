#!/usr/bin/env python3
"""
Transaction Entry Forms

Form state for creating ledger transactions: the raw field text, the
validation rule for the amount, the user-facing error or success message,
and the single-flight ``saving`` gate.

Each view owns its own form instance; the gate only blocks a second submit
from the same form.
"""

from dataclasses import dataclass
from enum import Enum

from ..core.currency import parse_amount
from ..core.models import TransactionDraft

COMPLETE_ALL_FIELDS = "Please complete all fields."
NON_ZERO_AMOUNT = "Amount must be a non-zero number."
POSITIVE_AMOUNT = "Amount must be a positive number."
SAVED_MESSAGE = "Transaction saved."

REQUIRED_FIELDS = ("date", "description", "category", "amount")


class AmountRule(Enum):
    """How the amount field is validated and signed before sending."""

    NON_ZERO = "non_zero"  # any non-zero amount, sent as entered
    INCOME = "income"  # positive, sent as entered
    EXPENSE = "expense"  # positive, sent negated


@dataclass(frozen=True)
class FormError:
    """A validation or submission error tied to the field that caused it."""

    field: str | None
    message: str


@dataclass
class TransactionForm:
    """Editable state of one create-transaction form."""

    rule: AmountRule = AmountRule.NON_ZERO
    default_category: str = ""
    date: str = ""
    description: str = ""
    category: str = ""
    amount: str = ""
    error: FormError | None = None
    success: str | None = None
    saving: bool = False

    def __post_init__(self) -> None:
        if not self.category:
            self.category = self.default_category

    def validate(self) -> TransactionDraft | None:
        """
        Check the fields and build the request body.

        Sets ``error`` and returns None when validation fails. On success the
        error is cleared and the draft carries the trimmed text and the
        signed amount.
        """
        values = {
            "date": self.date.strip(),
            "description": self.description.strip(),
            "category": self.category.strip(),
            "amount": self.amount.strip(),
        }
        for name in REQUIRED_FIELDS:
            if not values[name]:
                self.error = FormError(field=name, message=COMPLETE_ALL_FIELDS)
                return None

        amount = parse_amount(values["amount"])
        if self.rule is AmountRule.NON_ZERO:
            if amount == 0:
                self.error = FormError(field="amount", message=NON_ZERO_AMOUNT)
                return None
        elif amount <= 0:
            self.error = FormError(field="amount", message=POSITIVE_AMOUNT)
            return None

        if self.rule is AmountRule.EXPENSE:
            amount = -amount

        self.error = None
        return TransactionDraft(
            date=values["date"],
            description=values["description"],
            category=values["category"],
            amount=amount,
        )

    def clear(self) -> None:
        """Clear what the user typed, keeping the selected category."""
        self.date = ""
        self.description = ""
        self.amount = ""

    def reset(self) -> None:
        """Return every field to its initial value after a successful save."""
        self.clear()
        self.category = self.default_category
