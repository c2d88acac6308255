"""Behavioural and financial alert rules evaluated on each new expense."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from core.models import Alert, AlertCategory, Category, ExpenseRecord, Mood

__all__ = [
    "DEFAULT_RULES",
    "Rule",
    "RuleContext",
    "daily_limit_rule",
    "emergency_alert",
    "emotional_purchase_rule",
    "evaluate_rules",
    "rising_trend_rule",
    "runway_projection_rule",
]

EMOTIONAL_MOODS = frozenset({Mood.STRESSED, Mood.SAD})
ESSENTIAL_CATEGORIES = frozenset({Category.STUDY, Category.MEDICINE})
EXPENSES_PER_DAY = 3


@dataclass(frozen=True)
class RuleContext:
    """Snapshot handed to every rule.

    ``today_spending`` already includes the new expense. The running total,
    expense count and remaining budget describe the history *before* it.
    """

    record: ExpenseRecord
    previous: tuple[ExpenseRecord, ...]
    today_spending: int
    daily_limit: int
    prior_total: int
    prior_count: int
    prior_remaining: int
    days_per_month: int = 30
    currency: str = "₹"


Rule = Callable[[RuleContext], Optional[Alert]]


def emotional_purchase_rule(ctx: RuleContext) -> Alert | None:
    if ctx.record.mood in EMOTIONAL_MOODS and ctx.record.category not in ESSENTIAL_CATEGORIES:
        return Alert(
            "⚠️ Avoid emotional shopping! This is a stressful purchase.",
            AlertCategory.EMOTIONAL,
        )
    return None


def daily_limit_rule(ctx: RuleContext) -> Alert | None:
    if ctx.today_spending > ctx.daily_limit:
        return Alert(
            (
                f"⚠️ Daily limit exceeded! You've spent {ctx.currency}{ctx.today_spending} today "
                f"(limit: {ctx.currency}{ctx.daily_limit})"
            ),
            AlertCategory.LIMIT,
        )
    return None


def rising_trend_rule(ctx: RuleContext) -> Alert | None:
    if len(ctx.previous) != 2:
        return None
    first, second = ctx.previous
    if first.amount < second.amount < ctx.record.amount:
        return Alert(
            "📈 Increasing expenses detected! Your spending is rising consecutively.",
            AlertCategory.TREND,
        )
    return None


def runway_projection_rule(ctx: RuleContext) -> Alert | None:
    days_remaining = ctx.days_per_month - math.ceil(ctx.prior_count / EXPENSES_PER_DAY)
    avg_daily = ctx.prior_total / max(1, ctx.prior_count)
    if avg_daily <= 0:
        return None
    if avg_daily * days_remaining > ctx.prior_remaining:
        days_left = math.ceil(ctx.prior_remaining / avg_daily)
        return Alert(
            f"⚠️ Budget Alert: At this rate, you'll run out of money in {days_left} days!",
            AlertCategory.PROJECTION,
        )
    return None


DEFAULT_RULES: tuple[Rule, ...] = (
    emotional_purchase_rule,
    daily_limit_rule,
    rising_trend_rule,
    runway_projection_rule,
)


def evaluate_rules(ctx: RuleContext, rules: Sequence[Rule] = DEFAULT_RULES) -> list[Alert]:
    """Run every rule in order and collect all alerts that fire."""

    alerts: list[Alert] = []
    for rule in rules:
        alert = rule(ctx)
        if alert is not None:
            alerts.append(alert)
    return alerts


def emergency_alert(amount: int, currency: str = "₹") -> Alert:
    return Alert(
        f"✅ Emergency expense ({currency}{amount}) deducted from savings without penalty.",
        AlertCategory.EMERGENCY,
    )
