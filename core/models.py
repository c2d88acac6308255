"""Shared data model definitions for the PocketGuard engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import TypedDict


class Category(str, Enum):
    FOOD = "food"
    ENTERTAINMENT = "entertainment"
    TRANSPORT = "transport"
    STUDY = "study"
    MEDICINE = "medicine"
    PERSONAL = "personal"
    OTHER = "other"
    EMERGENCY = "emergency"


class Mood(str, Enum):
    NEUTRAL = "neutral"
    HAPPY = "happy"
    STRESSED = "stressed"
    SAD = "sad"


class AlertCategory(str, Enum):
    """Alert kinds; the host uses them for styling only."""

    EMOTIONAL = "emotional"
    LIMIT = "limit"
    TREND = "trend"
    PROJECTION = "projection"
    REWARD = "reward"
    EMERGENCY = "emergency"
    TIP = "tip"


# Categories a user may pick for a regular expense.
SPENDING_CATEGORIES: tuple[Category, ...] = tuple(c for c in Category if c is not Category.EMERGENCY)


@dataclass(frozen=True)
class BudgetAllocation:
    monthly_budget: int
    savings: int
    usable: int
    daily_limit: int


@dataclass(frozen=True)
class ExpenseRecord:
    amount: int
    category: Category
    mood: Mood
    timestamp: date
    is_emergency: bool = False


@dataclass(frozen=True)
class LedgerState:
    records: tuple[ExpenseRecord, ...]
    today_spending: int
    total_spending: int

    @property
    def count(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class Alert:
    text: str
    category: AlertCategory


@dataclass(frozen=True)
class RewardState:
    points: int = 0
    consecutive_in_budget_days: int = 0


@dataclass(frozen=True)
class ExpenseOutcome:
    alerts: tuple[Alert, ...]
    ledger_state: LedgerState
    reward_state: RewardState


@dataclass(frozen=True)
class EmergencyOutcome:
    alerts: tuple[Alert, ...]
    ledger_state: LedgerState


class ReportSnapshot(TypedDict):
    total_spending: int
    total_savings: int
    remaining_budget: int
    overspending_days: int
    reward_points: int
    category_totals: dict[str, int]
    on_track: bool


__all__ = [
    "Alert",
    "AlertCategory",
    "BudgetAllocation",
    "Category",
    "EmergencyOutcome",
    "ExpenseOutcome",
    "ExpenseRecord",
    "LedgerState",
    "Mood",
    "ReportSnapshot",
    "RewardState",
    "SPENDING_CATEGORIES",
]
