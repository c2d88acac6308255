"""Micro-saving suggestions drawn from a fixed catalog."""

from __future__ import annotations

from typing import Sequence, TypeVar

import numpy as np

from core.models import Alert, AlertCategory

__all__ = ["MICRO_SAVING_TIPS", "make_tip_rng", "pick_micro_saving_tip"]

T = TypeVar("T")

MICRO_SAVING_TIPS: tuple[str, ...] = (
    "Save {currency}20 this week by reducing coffee purchases",
    "You can save {currency}50 by reducing 10% spending",
    "Skip one meal out and save {currency}100 this week",
    "Cut entertainment by 20% to save {currency}30",
    "Track snacks – you could save {currency}15 daily",
)


def make_tip_rng(seed: int | None = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def _rng_choice(options: Sequence[T], rng: np.random.Generator) -> T:
    if not options:
        raise ValueError("Cannot choose from an empty sequence")
    idx = int(rng.integers(0, len(options)))
    return options[idx]


def pick_micro_saving_tip(
    rng: np.random.Generator,
    catalog: Sequence[str] = MICRO_SAVING_TIPS,
    currency: str = "₹",
) -> Alert:
    """Return a uniformly chosen tip from ``catalog`` as a tip alert.

    Catalog entries may reference ``{currency}`` for the host's currency symbol.
    """

    tip = _rng_choice(catalog, rng).format(currency=currency)
    return Alert(f"💡 {tip}", AlertCategory.TIP)
