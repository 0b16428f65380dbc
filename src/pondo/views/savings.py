#!/usr/bin/env python3
"""
Savings View

The single saving goal: its target, progress and contributions.

Adding a contribution is a two-step write. The contribution is stored
locally first and always stays. A companion "Savings" transaction is then
sent to the ledger so the deposit shows up as an outflow in the totals. If
that second write is rejected the contribution is flagged
``reconciliation_pending`` and persisted again; ``reconcile_pending`` retries
every flagged contribution later.
"""

import logging

from ..analysis.aggregator import GoalProgress, goal_progress
from ..core import entities
from ..core.currency import parse_amount
from ..core.models import Contribution, SavingGoalState
from ..ledger.client import Created
from .base import View

logger = logging.getLogger(__name__)

DEFAULT_CONTRIBUTION_DESCRIPTION = "Contribution"
DEFAULT_COMPANION_DESCRIPTION = "Savings"

GOAL_FIELDS_REQUIRED = "Enter a goal title and a target amount."
GOAL_TARGET_NEGATIVE = "Target amount must be zero or more."
CONTRIBUTION_NOT_POSITIVE = "Contribution amount must be a positive number."


def companion_description(contribution: Contribution) -> str:
    """Description sent with the ledger copy of a contribution."""
    if contribution.description == DEFAULT_CONTRIBUTION_DESCRIPTION:
        return DEFAULT_COMPANION_DESCRIPTION
    return contribution.description


class SavingsView(View):
    name = "savings"
    uses_transactions = False

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.goal = SavingGoalState.empty()
        self.error: str | None = None
        self.reconciling = False

    def load_local(self) -> None:
        self.goal = self.store.load_goal()

    @property
    def progress(self) -> GoalProgress:
        return goal_progress(self.goal)

    def _persist(self, goal: SavingGoalState) -> None:
        self.goal = goal
        self.store.save_goal(goal)

    def create_goal(self, title: str, target_text: str, target_date: str = "") -> bool:
        """
        Replace the current goal, discarding its contributions.

        Returns:
            True if the new goal was saved, False with ``error`` set otherwise
        """
        title = title.strip()
        target_text = target_text.strip()
        if not title or not target_text:
            self.error = GOAL_FIELDS_REQUIRED
            return False

        target = parse_amount(target_text)
        if target < 0:
            self.error = GOAL_TARGET_NEGATIVE
            return False

        self.error = None
        self._persist(entities.replace_goal(title, target, target_date.strip()))
        logger.info("Started saving goal '%s' with target %d", title, target)
        return True

    def clear_goal(self) -> None:
        """Reset to the zero goal."""
        self.error = None
        self._persist(entities.cleared_goal())

    async def add_contribution(self, date: str, amount_text: str, description: str = "") -> Contribution | None:
        """
        Record a deposit locally, then mirror it to the ledger.

        Returns:
            The stored contribution (check ``reconciliation_pending`` on
            ``self.goal`` for the ledger outcome), or None if the amount was
            not positive
        """
        amount = parse_amount(amount_text)
        if amount <= 0:
            self.error = CONTRIBUTION_NOT_POSITIVE
            return None

        self.error = None
        description = description.strip()
        contribution = Contribution(
            date=date.strip(),
            description=description or DEFAULT_CONTRIBUTION_DESCRIPTION,
            amount=amount,
        )
        self._persist(entities.add_contribution(self.goal, contribution))

        draft = contribution.companion_draft(description or DEFAULT_COMPANION_DESCRIPTION)
        result = await self.sync.create(draft)
        if not isinstance(result, Created):
            logger.warning("Savings transaction not recorded, marking contribution pending: %s", result.reason)
            self._persist(entities.set_reconciliation_pending(self.goal, contribution.ref, True))
        return contribution

    async def reconcile_pending(self) -> int:
        """
        Retry the ledger write for every pending contribution.

        A call made while another reconcile is running returns 0 without
        posting anything.

        Returns:
            Number of contributions that were reconciled
        """
        if self.reconciling:
            logger.debug("Ignoring reconcile while one is in flight")
            return 0

        reconciled = 0
        self.reconciling = True
        try:
            for contribution in self.goal.pending_contributions:
                result = await self.sync.create(contribution.companion_draft(companion_description(contribution)))
                if isinstance(result, Created):
                    self._persist(entities.set_reconciliation_pending(self.goal, contribution.ref, False))
                    reconciled += 1
                else:
                    logger.warning("Contribution %s still pending: %s", contribution.ref, result.reason)
        finally:
            self.reconciling = False
        return reconciled
