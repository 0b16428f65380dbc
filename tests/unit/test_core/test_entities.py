#!/usr/bin/env python3
"""Tests for local entity update functions."""

import pytest

from pondo.core import entities
from pondo.core.models import BudgetItem, Contribution, SavingGoalState


@pytest.mark.unit
class TestUpsertBudget:
    """Test create-or-update of budgets."""

    @pytest.mark.parametrize("spelling", ["Food", "food", "FOOD", "fOoD"])
    def test_existing_category_any_casing_replaces_limit(self, spelling):
        budgets = [BudgetItem("Rent", 8000), BudgetItem("Food", 1000)]
        updated = entities.upsert_budget(budgets, spelling, 1500)

        assert len(updated) == len(budgets)
        assert updated[1] == BudgetItem("Food", 1500)
        assert updated[0] == BudgetItem("Rent", 8000)

    def test_new_category_appends(self):
        budgets = [BudgetItem("Food", 1000)]
        updated = entities.upsert_budget(budgets, "Transport", 600)

        assert len(updated) == len(budgets) + 1
        assert updated[-1] == BudgetItem("Transport", 600)

    def test_input_not_mutated(self):
        budgets = [BudgetItem("Food", 1000)]
        entities.upsert_budget(budgets, "food", 5)
        assert budgets == [BudgetItem("Food", 1000)]

    def test_find_budget(self):
        budgets = [BudgetItem("Food", 1000)]
        assert entities.find_budget(budgets, "FOOD") == BudgetItem("Food", 1000)
        assert entities.find_budget(budgets, "Rent") is None


@pytest.mark.unit
class TestGoalUpdates:
    """Test saving goal replacement and contributions."""

    def test_replace_goal_discards_contributions(self):
        goal = entities.replace_goal("Car", 200000, "2027-01-01")
        assert goal == SavingGoalState("Car", 200000, "2027-01-01", ())

    def test_replace_goal_rejects_negative_target(self):
        with pytest.raises(ValueError):
            entities.replace_goal("Car", -1, "")

    def test_add_contribution_prepends(self):
        first = Contribution("2026-03-01", "First", 100)
        second = Contribution("2026-03-02", "Second", 200)
        goal = entities.add_contribution(entities.replace_goal("Car", 1000, ""), first)
        goal = entities.add_contribution(goal, second)

        assert goal.contributions == (second, first)

    def test_set_reconciliation_pending(self):
        c = Contribution("2026-03-01", "First", 100)
        goal = entities.add_contribution(entities.replace_goal("Car", 1000, ""), c)

        flagged = entities.set_reconciliation_pending(goal, c.ref, True)
        assert flagged.pending_contributions == [flagged.contributions[0]]

        cleared = entities.set_reconciliation_pending(flagged, c.ref, False)
        assert cleared.pending_contributions == []

    def test_set_reconciliation_pending_unknown_ref(self):
        goal = entities.replace_goal("Car", 1000, "")
        assert entities.set_reconciliation_pending(goal, "missing", True) == goal

    def test_cleared_goal_is_zero_goal(self):
        assert entities.cleared_goal() == SavingGoalState("", 0, "", ())
