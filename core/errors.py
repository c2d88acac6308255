"""Input validation errors raised by the PocketGuard engine."""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from numbers import Integral, Real
from typing import Any

__all__ = [
    "MAX_AMOUNT",
    "InvalidAmount",
    "InvalidBudget",
    "InvalidExpense",
    "PocketGuardError",
    "coerce_money",
]

# Largest accepted amount in the smallest currency unit.
MAX_AMOUNT_DIGITS = 15
MAX_AMOUNT = 10**MAX_AMOUNT_DIGITS


class PocketGuardError(ValueError):
    """Base class for caller-correctable input errors."""


class InvalidAmount(PocketGuardError):
    """Raised when an expense amount is not a positive, finite whole number."""


class InvalidBudget(PocketGuardError):
    """Raised when a monthly budget is not a positive, finite whole number."""


class InvalidExpense(PocketGuardError):
    """Raised when an expense names an unknown category or mood."""


def coerce_money(value: Any, error: type[PocketGuardError]) -> int:
    """Return ``value`` as a positive integer amount or raise ``error``.

    Integers and integer-valued strings (raw form input) are accepted. Booleans,
    fractional values, NaN, infinities and anything above ``MAX_AMOUNT`` are
    rejected. The bound is checked before the value becomes an ``int``.
    """

    if isinstance(value, bool):
        raise error(f"Expected a monetary amount, got {value!r}")

    if isinstance(value, str):
        try:
            parsed = Decimal(value.strip())
        except InvalidOperation as exc:
            raise error(f"Amount is not numeric: {value!r}") from exc
        if not parsed.is_finite() or parsed != parsed.to_integral_value():
            raise error(f"Amount must be a finite whole number: {value!r}")
        if parsed.adjusted() > MAX_AMOUNT_DIGITS:
            raise error(f"Amount exceeds the maximum of {MAX_AMOUNT}")
        amount = int(parsed)
    elif isinstance(value, Integral):
        amount = int(value)
    elif isinstance(value, Real):
        number = float(value)
        if not math.isfinite(number) or not number.is_integer():
            raise error(f"Amount must be a finite whole number: {value!r}")
        if abs(number) > MAX_AMOUNT:
            raise error(f"Amount exceeds the maximum of {MAX_AMOUNT}")
        amount = int(number)
    else:
        raise error(f"Expected a monetary amount, got {type(value).__name__}")

    if abs(amount) > MAX_AMOUNT:
        raise error(f"Amount exceeds the maximum of {MAX_AMOUNT}")
    if amount <= 0:
        raise error(f"Amount must be greater than zero, got {amount}")
    return amount
