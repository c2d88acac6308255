"""Append-only expense ledger with derived spending aggregates."""

from __future__ import annotations

import logging
from typing import Iterator

from core.errors import InvalidAmount
from core.models import ExpenseRecord, LedgerState

__all__ = ["ExpenseLedger"]

logger = logging.getLogger(__name__)


class ExpenseLedger:
    """Ordered history of expenses plus running totals.

    ``today_spending`` covers non-emergency records appended since the last
    :meth:`reset_today`; ``total_spending`` covers every record.
    """

    def __init__(self) -> None:
        self._records: list[ExpenseRecord] = []
        self._today_spending = 0
        self._total_spending = 0

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ExpenseRecord]:
        return iter(self._records)

    @property
    def records(self) -> tuple[ExpenseRecord, ...]:
        return tuple(self._records)

    @property
    def today_spending(self) -> int:
        return self._today_spending

    @property
    def total_spending(self) -> int:
        return self._total_spending

    def append(self, record: ExpenseRecord) -> None:
        if record.amount <= 0:
            raise InvalidAmount(f"Ledger rejects non-positive amount {record.amount}")

        self._records.append(record)
        self._total_spending += record.amount
        if not record.is_emergency:
            self._today_spending += record.amount
        logger.debug(
            "Appended %s expense of %d (today=%d, total=%d)",
            record.category.value,
            record.amount,
            self._today_spending,
            self._total_spending,
        )

    def reset_today(self) -> None:
        logger.debug("Resetting today's spending from %d", self._today_spending)
        self._today_spending = 0

    def category_totals(self) -> dict[str, int]:
        """Return spend per category across the full history, in first-seen order."""

        totals: dict[str, int] = {}
        for record in self._records:
            key = record.category.value
            totals[key] = totals.get(key, 0) + record.amount
        return totals

    def recent(self, n: int) -> list[ExpenseRecord]:
        if n <= 0:
            return []
        return self._records[-n:]

    def recomputed_total(self) -> int:
        return sum(record.amount for record in self._records)

    def snapshot(self) -> LedgerState:
        return LedgerState(
            records=tuple(self._records),
            today_spending=self._today_spending,
            total_spending=self._total_spending,
        )
