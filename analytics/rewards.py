"""Streak tracking and reward points for staying within the daily limit."""

from __future__ import annotations

import logging

from core.models import Alert, AlertCategory, RewardState

__all__ = ["RewardTracker"]

logger = logging.getLogger(__name__)


class RewardTracker:
    """Counts in-budget evaluations and awards points every ``cadence`` of them.

    An over-limit evaluation leaves the streak untouched rather than resetting it.
    """

    def __init__(self, cadence: int = 3, points_per_award: int = 10) -> None:
        self.cadence = cadence
        self.points_per_award = points_per_award
        self._points = 0
        self._streak = 0

    @property
    def state(self) -> RewardState:
        return RewardState(points=self._points, consecutive_in_budget_days=self._streak)

    def evaluate(self, today_spending: int, daily_limit: int) -> Alert | None:
        if today_spending > daily_limit:
            return None

        self._streak += 1
        if self._streak % self.cadence != 0:
            return None

        self._points += self.points_per_award
        logger.info("Streak of %d reached, awarding %d points", self._streak, self.points_per_award)
        return Alert(
            (
                f"🎉 Great job! You stayed within budget for {self._streak} days! "
                f"+{self.points_per_award} points"
            ),
            AlertCategory.REWARD,
        )
