"""Read-only report projections over the engine state."""

from __future__ import annotations

from typing import Iterable, Mapping

import pandas as pd

from core.ledger import ExpenseLedger
from core.models import BudgetAllocation, ExpenseRecord, ReportSnapshot, RewardState

__all__ = ["build_category_frame", "build_ledger_frame", "generate_report"]


def generate_report(
    allocation: BudgetAllocation,
    ledger: ExpenseLedger,
    rewards: RewardState,
    days_per_month: int = 30,
) -> ReportSnapshot:
    """Compile the monthly report card from current state.

    ``total_savings`` folds unspent usable funds back into savings, and
    ``overspending_days`` counts daily-limit multiples beyond the month length.
    """

    total_spending = ledger.total_spending
    remaining_budget = allocation.usable - total_spending
    limit_multiples = -(-total_spending // max(1, allocation.daily_limit))
    overspending_days = max(0, limit_multiples - days_per_month)
    total_savings = allocation.savings + (allocation.usable - total_spending)

    return {
        "total_spending": total_spending,
        "total_savings": total_savings,
        "remaining_budget": remaining_budget,
        "overspending_days": overspending_days,
        "reward_points": rewards.points,
        "category_totals": ledger.category_totals(),
        "on_track": remaining_budget > 0,
    }


def build_category_frame(category_totals: Mapping[str, int]) -> pd.DataFrame:
    """Return category spend as a frame with value and share columns, largest first."""

    if not category_totals:
        return pd.DataFrame(columns=["Category", "CurrentValue", "Share"])

    df = pd.DataFrame(
        {"Category": list(category_totals.keys()), "CurrentValue": list(category_totals.values())}
    )
    total = float(df["CurrentValue"].sum())
    df["Share"] = df["CurrentValue"] / total if total else 0.0
    return df.sort_values("CurrentValue", ascending=False, kind="stable").reset_index(drop=True)


def build_ledger_frame(records: Iterable[ExpenseRecord]) -> pd.DataFrame:
    """Return recorded expenses newest first for tabular display."""

    rows = [
        {
            "Category": record.category.value,
            "Amount": record.amount,
            "Mood": record.mood.value,
            "Date": pd.Timestamp(record.timestamp),
            "Emergency": record.is_emergency,
        }
        for record in records
    ]
    df = pd.DataFrame(rows, columns=["Category", "Amount", "Mood", "Date", "Emergency"])
    return df.iloc[::-1].reset_index(drop=True)
