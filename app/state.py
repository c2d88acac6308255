"""Session-scoped engine and scheduler for the Streamlit host."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from config import Settings
from core.engine import BudgetEngine
from core.scheduler import DayResetScheduler

ENGINE_KEY = "pocketguard_engine"
SCHEDULER_KEY = "pocketguard_scheduler"

__all__ = ["get_engine", "poll_day_reset"]


def get_engine(settings: Settings) -> BudgetEngine:
    """Return the engine for this browser session, creating it on first use."""

    if ENGINE_KEY not in st.session_state:
        st.session_state[ENGINE_KEY] = BudgetEngine.from_settings(settings)
    return st.session_state[ENGINE_KEY]


def poll_day_reset(engine: BudgetEngine, settings: Settings) -> bool:
    """Reset today's spending if a day interval elapsed since the last reset."""

    scheduler = st.session_state.get(SCHEDULER_KEY)
    if scheduler is None:
        scheduler = DayResetScheduler(
            engine.on_day_boundary,
            interval=pd.Timedelta(hours=settings.day_reset_interval_hours),
        )
        st.session_state[SCHEDULER_KEY] = scheduler
    return scheduler.poll()
