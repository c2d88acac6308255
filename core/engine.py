"""Stateful budget and behavioural alert engine."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable

import numpy as np

from analytics.allocation import allocate_budget
from analytics.report import generate_report
from analytics.rewards import RewardTracker
from analytics.rules import DEFAULT_RULES, Rule, RuleContext, emergency_alert, evaluate_rules
from analytics.tips import make_tip_rng, pick_micro_saving_tip
from config.settings import DEFAULT_CURRENCY_SYMBOL, Settings
from core.errors import InvalidAmount, InvalidBudget, InvalidExpense, coerce_money
from core.ledger import ExpenseLedger
from core.models import (
    Alert,
    BudgetAllocation,
    Category,
    EmergencyOutcome,
    ExpenseOutcome,
    ExpenseRecord,
    LedgerState,
    Mood,
    ReportSnapshot,
    RewardState,
)

__all__ = ["BudgetEngine"]

logger = logging.getLogger(__name__)

DEFAULT_MONTHLY_BUDGET = 5000


def _parse_enum(enum_type: type, value: Any, label: str):
    try:
        return enum_type(value)
    except ValueError as exc:
        raise InvalidExpense(f"Unknown {label}: {value!r}") from exc


class BudgetEngine:
    """Single owner of the budget allocation, ledger, rewards and alert list.

    Operations run to completion and are not reentrant; hosts must serialise
    calls, including the day-boundary signal from the scheduler. Every
    operation validates its input before touching state, so a rejected call
    leaves the engine exactly as it was.
    """

    def __init__(
        self,
        monthly_budget: int = DEFAULT_MONTHLY_BUDGET,
        *,
        savings_rate: float = 0.10,
        usable_rate: float = 0.90,
        days_per_month: int = 30,
        reward_cadence: int = 3,
        reward_points: int = 10,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
        rng: np.random.Generator | None = None,
        clock: Callable[[], date] = date.today,
        rules: tuple[Rule, ...] = DEFAULT_RULES,
    ) -> None:
        self.savings_rate = savings_rate
        self.usable_rate = usable_rate
        self.days_per_month = days_per_month
        self.currency_symbol = currency_symbol
        self._rng = rng if rng is not None else make_tip_rng()
        self._clock = clock
        self._rules = rules

        self._ledger = ExpenseLedger()
        self._rewards = RewardTracker(cadence=reward_cadence, points_per_award=reward_points)
        self._alerts: list[Alert] = []
        self._allocation = self._allocate(coerce_money(monthly_budget, InvalidBudget))

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "BudgetEngine":
        kwargs.setdefault("rng", make_tip_rng(settings.tip_seed))
        return cls(
            settings.default_monthly_budget,
            savings_rate=settings.savings_rate,
            usable_rate=settings.usable_rate,
            days_per_month=settings.days_per_month,
            reward_cadence=settings.reward_cadence,
            reward_points=settings.reward_points,
            currency_symbol=settings.currency_symbol,
            **kwargs,
        )

    # -- read-only views -------------------------------------------------

    @property
    def allocation(self) -> BudgetAllocation:
        return self._allocation

    @property
    def alerts(self) -> tuple[Alert, ...]:
        return tuple(self._alerts)

    @property
    def ledger_state(self) -> LedgerState:
        return self._ledger.snapshot()

    @property
    def reward_state(self) -> RewardState:
        return self._rewards.state

    @property
    def remaining_budget(self) -> int:
        return self._allocation.usable - self._ledger.total_spending

    # -- operations ------------------------------------------------------

    def set_monthly_budget(self, amount: Any) -> BudgetAllocation:
        try:
            budget = coerce_money(amount, InvalidBudget)
        except InvalidBudget as exc:
            logger.warning("Rejected monthly budget: %s", exc)
            raise

        self._allocation = self._allocate(budget)
        logger.info(
            "Monthly budget set to %d (savings=%d, usable=%d, daily_limit=%d)",
            budget,
            self._allocation.savings,
            self._allocation.usable,
            self._allocation.daily_limit,
        )
        return self._allocation

    def record_expense(self, amount: Any, category: Category | str, mood: Mood | str) -> ExpenseOutcome:
        try:
            value = coerce_money(amount, InvalidAmount)
            category = _parse_enum(Category, category, "category")
            mood = _parse_enum(Mood, mood, "mood")
            if category is Category.EMERGENCY:
                raise InvalidExpense("Emergency spending must go through record_emergency_expense")
        except InvalidAmount as exc:
            logger.warning("Rejected expense amount: %s", exc)
            raise
        except InvalidExpense as exc:
            logger.warning("Rejected expense: %s", exc)
            raise

        record = ExpenseRecord(amount=value, category=category, mood=mood, timestamp=self._clock())
        previous = tuple(self._ledger.recent(2))
        prior_total = self._ledger.total_spending
        prior_count = len(self._ledger)
        prior_remaining = self.remaining_budget

        self._ledger.append(record)

        daily_limit = self._allocation.daily_limit
        today_spending = self._ledger.today_spending
        context = RuleContext(
            record=record,
            previous=previous,
            today_spending=today_spending,
            daily_limit=daily_limit,
            prior_total=prior_total,
            prior_count=prior_count,
            prior_remaining=prior_remaining,
            days_per_month=self.days_per_month,
            currency=self.currency_symbol,
        )
        new_alerts = evaluate_rules(context, self._rules)

        reward_alert = self._rewards.evaluate(today_spending, daily_limit)
        if reward_alert is not None:
            new_alerts.append(reward_alert)

        self._alerts.extend(new_alerts)
        logger.debug("Expense of %d produced %d alert(s)", value, len(new_alerts))
        return ExpenseOutcome(
            alerts=tuple(new_alerts),
            ledger_state=self._ledger.snapshot(),
            reward_state=self._rewards.state,
        )

    def record_emergency_expense(self, amount: Any) -> EmergencyOutcome:
        try:
            value = coerce_money(amount, InvalidAmount)
        except InvalidAmount as exc:
            logger.warning("Rejected emergency amount: %s", exc)
            raise

        record = ExpenseRecord(
            amount=value,
            category=Category.EMERGENCY,
            mood=Mood.NEUTRAL,
            timestamp=self._clock(),
            is_emergency=True,
        )
        self._ledger.append(record)

        alert = emergency_alert(value, self.currency_symbol)
        self._alerts.append(alert)
        logger.info("Emergency expense of %d recorded", value)
        return EmergencyOutcome(alerts=(alert,), ledger_state=self._ledger.snapshot())

    def request_micro_saving_tip(self) -> Alert:
        alert = pick_micro_saving_tip(self._rng, currency=self.currency_symbol)
        self._alerts.append(alert)
        return alert

    def clear_alerts(self) -> None:
        self._alerts.clear()

    def on_day_boundary(self) -> None:
        logger.info("Day boundary reached, resetting today's spending")
        self._ledger.reset_today()

    def get_report(self) -> ReportSnapshot:
        return generate_report(
            self._allocation,
            self._ledger,
            self._rewards.state,
            days_per_month=self.days_per_month,
        )

    def _allocate(self, budget: int) -> BudgetAllocation:
        return allocate_budget(
            budget,
            savings_rate=self.savings_rate,
            usable_rate=self.usable_rate,
            days_per_month=self.days_per_month,
        )
