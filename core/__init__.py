"""Core domain package for the PocketGuard budget engine.

The engine facade lives in :mod:`core.engine`; it depends on :mod:`analytics`,
which in turn imports the models exported here.
"""

from .errors import InvalidAmount, InvalidBudget, InvalidExpense, PocketGuardError
from .ledger import ExpenseLedger
from .models import (
    SPENDING_CATEGORIES,
    Alert,
    AlertCategory,
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
from .scheduler import DayResetScheduler

__all__ = [
    "Alert",
    "AlertCategory",
    "BudgetAllocation",
    "Category",
    "DayResetScheduler",
    "EmergencyOutcome",
    "ExpenseLedger",
    "ExpenseOutcome",
    "ExpenseRecord",
    "InvalidAmount",
    "InvalidBudget",
    "InvalidExpense",
    "LedgerState",
    "Mood",
    "PocketGuardError",
    "ReportSnapshot",
    "RewardState",
    "SPENDING_CATEGORIES",
]
