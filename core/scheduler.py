"""Day-boundary signalling for the engine's daily spending counter."""

from __future__ import annotations

import logging
from typing import Callable

import pandas as pd

__all__ = ["DayResetScheduler"]

logger = logging.getLogger(__name__)


class DayResetScheduler:
    """Fire ``callback`` once each time a fixed interval has elapsed.

    The scheduler owns no thread. Hosts call :meth:`poll` between user
    operations (a Streamlit host polls at the start of every rerun), so a reset
    never interrupts an engine call in progress. If several intervals elapsed
    since the last poll the callback still fires once, because resetting the
    daily counter twice is the same as resetting it once.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        interval: pd.Timedelta = pd.Timedelta(hours=24),
        clock: Callable[[], pd.Timestamp] = pd.Timestamp.now,
    ) -> None:
        if interval <= pd.Timedelta(0):
            raise ValueError("interval must be positive")
        self._callback = callback
        self.interval = interval
        self._clock = clock
        self._anchor = clock()

    @property
    def next_fire(self) -> pd.Timestamp:
        return self._anchor + self.interval

    def poll(self) -> bool:
        """Invoke the callback if an interval boundary has passed; return whether it fired."""

        now = self._clock()
        if now < self.next_fire:
            return False

        elapsed = (now - self._anchor) // self.interval
        self._anchor = self._anchor + elapsed * self.interval
        logger.info("Day reset due (%d interval(s) elapsed)", elapsed)
        self._callback()
        return True
