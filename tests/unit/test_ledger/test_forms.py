#!/usr/bin/env python3
"""Tests for transaction form validation."""

import pytest

from pondo.core.models import TransactionDraft
from pondo.ledger.forms import (
    COMPLETE_ALL_FIELDS,
    NON_ZERO_AMOUNT,
    POSITIVE_AMOUNT,
    AmountRule,
    TransactionForm,
)


def filled(rule: AmountRule, amount: str, /, **overrides) -> TransactionForm:
    values = {"date": "2026-03-01", "description": "Lunch", "category": "Food", "amount": amount}
    values.update(overrides)
    return TransactionForm(rule=rule, **values)


@pytest.mark.unit
class TestRequiredFields:
    """Test that every field must be filled in."""

    @pytest.mark.parametrize("field", ["date", "description", "category", "amount"])
    def test_blank_field(self, field):
        form = filled(AmountRule.NON_ZERO, "5", **{field: "   "})
        assert form.validate() is None
        assert form.error.field == field
        assert form.error.message == COMPLETE_ALL_FIELDS

    def test_values_are_trimmed(self):
        form = filled(AmountRule.NON_ZERO, " 5 ", description="  Lunch  ")
        assert form.validate() == TransactionDraft("2026-03-01", "Lunch", "Food", 5)
        assert form.error is None


@pytest.mark.unit
class TestAmountRules:
    """Test amount validation and sign handling per form."""

    @pytest.mark.parametrize("amount", ["0", "abc", "1.5"])
    def test_non_zero_rule_rejects_zero(self, amount):
        form = filled(AmountRule.NON_ZERO, amount)
        assert form.validate() is None
        assert form.error.field == "amount"
        assert form.error.message == NON_ZERO_AMOUNT

    def test_non_zero_rule_keeps_sign(self):
        assert filled(AmountRule.NON_ZERO, "-250").validate().amount == -250

    @pytest.mark.parametrize("rule", [AmountRule.INCOME, AmountRule.EXPENSE])
    @pytest.mark.parametrize("amount", ["0", "-5", "x"])
    def test_positive_rules_reject_non_positive(self, rule, amount):
        form = filled(rule, amount)
        assert form.validate() is None
        assert form.error.message == POSITIVE_AMOUNT

    def test_income_sent_as_entered(self):
        assert filled(AmountRule.INCOME, "2500").validate().amount == 2500

    def test_expense_sent_negated(self):
        assert filled(AmountRule.EXPENSE, "150").validate().amount == -150


@pytest.mark.unit
class TestFormState:
    """Test default category handling."""

    def test_default_category_applied(self):
        form = TransactionForm(rule=AmountRule.INCOME, default_category="Salary")
        assert form.category == "Salary"

    def test_clear_keeps_category(self):
        form = filled(AmountRule.INCOME, "5", category="Freelance")
        form.default_category = "Salary"
        form.clear()
        assert (form.date, form.description, form.amount, form.category) == ("", "", "", "Freelance")

    def test_reset_restores_default_category(self):
        form = TransactionForm(rule=AmountRule.EXPENSE, default_category="Transportation")
        form.category = "Food"
        form.amount = "5"
        form.reset()
        assert form.category == "Transportation"
        assert form.amount == ""
