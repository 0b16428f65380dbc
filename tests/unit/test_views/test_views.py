#!/usr/bin/env python3
"""Tests for the ledger-backed view controllers."""

import pytest

from pondo.app import build_app
from pondo.core.config import Config
from pondo.core.models import AppSettings, BudgetItem, Contribution, DashboardSummary, SavingGoalState
from pondo.core.store import FileKeyValueBackend
from pondo.views import BudgetView, DashboardView, ExpenseView, IncomeView, SettingsView, SummaryView
from pondo.views.budget import INVALID_BUDGET_MESSAGE


@pytest.mark.unit
class TestActivation:
    """Test the fetch lifecycle shared by all views."""

    @pytest.mark.asyncio
    async def test_activate_fetches_and_clears_loading(self, app, fake_ledger):
        view = app.view(SummaryView)

        await view.activate()

        assert view.loading is False
        assert view.active is True
        assert len(fake_ledger.requests_to("GET", "/transactions")) == 1
        assert len(fake_ledger.requests_to("GET", "/dashboard/summary")) == 1

    @pytest.mark.asyncio
    async def test_loading_cleared_when_reads_fail(self, app, fake_ledger):
        fake_ledger.fail_reads = True
        view = app.view(DashboardView)

        await view.activate()

        assert view.loading is False
        assert view.transactions == []
        assert view.summary == DashboardSummary()

    @pytest.mark.asyncio
    async def test_views_without_summary_do_not_fetch_it(self, app, fake_ledger):
        await app.view(IncomeView).activate()
        assert fake_ledger.requests_to("GET", "/dashboard/summary") == []

    @pytest.mark.asyncio
    async def test_unreadable_token_file_does_not_break_reads(self, fake_ledger, temp_dir):
        (temp_dir / "access_token").write_bytes(b"\xfftoken")
        pondo_app = build_app(
            Config.from_environment(), transport=fake_ledger.transport(), backend=FileKeyValueBackend(temp_dir)
        )
        view = pondo_app.view(ExpenseView)

        try:
            await view.activate()
        finally:
            await pondo_app.aclose()

        assert len(view.entries) == 2
        assert "authorization" not in fake_ledger.requests_to("GET", "/transactions")[0].headers

    @pytest.mark.asyncio
    async def test_create_in_one_view_reaches_another(self, app):
        dashboard = app.view(DashboardView)
        expenses = app.view(ExpenseView)
        await dashboard.activate()
        await expenses.activate()
        revision = dashboard.revision

        expenses.form.date = "2026-03-06"
        expenses.form.description = "Taxi"
        expenses.form.amount = "150"
        await expenses.submit()

        assert dashboard.revision > revision
        assert dashboard.transactions[0].description == "Taxi"
        assert dashboard.summary.total_expenses == 950

    @pytest.mark.asyncio
    async def test_deactivated_view_stops_observing(self, app):
        dashboard = app.view(DashboardView)
        await dashboard.activate()
        dashboard.deactivate()
        revision = dashboard.revision

        await app.sync.refresh()

        assert dashboard.revision == revision
        assert app.cache.subscriber_count("transactions") == 0

    @pytest.mark.asyncio
    async def test_amounts_use_stored_currency(self, app, memory_store):
        memory_store.save_settings(AppSettings.for_code("USD"))
        view = app.view(SummaryView)
        await view.activate()
        assert view.format(-1234567) == "-$ 1,234,567.00"


@pytest.mark.unit
class TestDashboardView:
    """Test dashboard derivations."""

    @pytest.mark.asyncio
    async def test_budget_overview_and_goal(self, app, memory_store):
        memory_store.save_budgets([BudgetItem("Food", 500)])
        memory_store.save_goal(
            SavingGoalState("Trip", 10000, "", (Contribution("2026-03-01", "c", 3000),))
        )
        view = app.view(DashboardView)
        await view.activate()

        assert view.budget_overview.total_spent == 800
        assert view.budget_overview.overspent_count == 1
        assert view.goal_progress.percent_complete == 30

    @pytest.mark.asyncio
    async def test_form_accepts_negative_amounts(self, app):
        view = app.view(DashboardView)
        await view.activate()
        view.form.date = "2026-03-06"
        view.form.description = "Refund"
        view.form.category = "Shopping"
        view.form.amount = "-40"

        await view.submit()

        assert view.transactions[0].amount == -40


@pytest.mark.unit
class TestBudgetView:
    """Test budget screen."""

    @pytest.mark.asyncio
    async def test_spend_figures(self, app, fake_ledger):
        fake_ledger.transactions.append(
            {"id": 0, "date": "2026-02-28", "description": "Bus", "category": "Transport", "amount": -100}
        )
        view = app.view(BudgetView)
        await view.activate()

        assert view.top_categories == [("Food", 800), ("Transport", 100)]
        assert view.total_spent == 900

    @pytest.mark.asyncio
    async def test_set_budget_upserts_and_persists(self, app, memory_store):
        view = app.view(BudgetView)
        await view.activate()

        assert view.set_budget("Food", "1000") is True
        assert view.set_budget("  food ", "1200") is True
        assert view.set_budget("Rent", "8000") is True

        assert memory_store.load_budgets() == [BudgetItem("Food", 1200), BudgetItem("Rent", 8000)]
        assert [s.percent_used for s in view.statuses] == [67, 0]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("category,limit", [("", "100"), ("Food", "0"), ("Food", "-5"), ("Food", "ten")])
    async def test_invalid_budget(self, app, memory_store, category, limit):
        view = app.view(BudgetView)

        assert view.set_budget(category, limit) is False
        assert view.error == INVALID_BUDGET_MESSAGE
        assert memory_store.load_budgets() == []


@pytest.mark.unit
class TestIncomeAndExpenseViews:
    """Test sign-filtered views and their forms."""

    @pytest.mark.asyncio
    async def test_income_view(self, app):
        view = app.view(IncomeView)
        await view.activate()

        assert [t.id for t in view.entries] == [1]
        assert view.total == 1000
        assert view.form.category == "Salary"

    @pytest.mark.asyncio
    async def test_expense_view(self, app):
        view = app.view(ExpenseView)
        await view.activate()

        assert [t.id for t in view.entries] == [3, 2]
        assert view.total == 800
        assert view.form.category == "Transportation"

    @pytest.mark.asyncio
    async def test_expense_form_sends_negative_amount(self, app, fake_ledger):
        view = app.view(ExpenseView)
        await view.activate()
        view.form.date = "2026-03-06"
        view.form.description = "Taxi"
        view.form.amount = "150"

        await view.submit()

        assert fake_ledger.transactions[0]["amount"] == -150
        assert view.entries[0].amount == -150
        assert view.total == 950


@pytest.mark.unit
class TestSummaryAndSettings:
    """Test summary listing and currency changes."""

    @pytest.mark.asyncio
    async def test_recent_limited_to_ten(self, app, fake_ledger):
        fake_ledger.transactions = [
            {"id": i, "date": "2026-03-01", "description": "x", "category": "Food", "amount": -i}
            for i in range(20, 0, -1)
        ]
        view = app.view(SummaryView)
        await view.activate()

        assert [t.id for t in view.recent] == list(range(20, 10, -1))

    @pytest.mark.asyncio
    async def test_change_currency(self, app, fake_ledger, memory_store):
        view = app.view(SettingsView)
        await view.activate()

        settings = view.change_currency("gbp")

        assert settings == AppSettings(currency_code="GBP", currency_symbol="£")
        assert memory_store.load_settings() == settings
        assert fake_ledger.requests == []
