"""Monthly budget allocation into savings, usable and daily-limit buckets."""

from __future__ import annotations

import math
from fractions import Fraction

from core.models import BudgetAllocation

__all__ = ["allocate_budget"]


def _exact(rate: float) -> Fraction:
    # Decimal-style conversion keeps 0.1 as 1/10 rather than its binary approximation.
    return Fraction(str(rate))


def allocate_budget(
    monthly_budget: int,
    *,
    savings_rate: float = 0.10,
    usable_rate: float = 0.90,
    days_per_month: int = 30,
) -> BudgetAllocation:
    """Split ``monthly_budget`` into auto-savings, usable funds and a daily limit.

    Each bucket is floored independently, so ``savings + usable`` can fall one
    unit short of the budget (999 -> 99 + 899).
    """

    savings = math.floor(monthly_budget * _exact(savings_rate))
    usable = math.floor(monthly_budget * _exact(usable_rate))
    daily_limit = usable // days_per_month
    return BudgetAllocation(
        monthly_budget=monthly_budget,
        savings=savings,
        usable=usable,
        daily_limit=daily_limit,
    )
