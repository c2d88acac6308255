"""Centralised configuration handling for PocketGuard."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

import streamlit as st
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CURRENCY_SYMBOL = "₹"
SECRETS_SECTION = "pocketguard"


def _streamlit_section(name: str) -> Mapping[str, Any] | None:
    """Return a mapping from Streamlit secrets for the given section."""

    try:
        if hasattr(st, "secrets") and name in st.secrets:
            section = st.secrets[name]
            if isinstance(section, Mapping):
                return section
            return dict(section)
    except Exception:  # pragma: no cover - accessing secrets may fail in tests
        return None
    return None


class Settings(BaseSettings):
    """Engine tunables sourced from env vars and Streamlit secrets."""

    savings_rate: float = Field(default=0.10, gt=0, lt=1)
    usable_rate: float = Field(default=0.90, gt=0, le=1)
    days_per_month: int = Field(default=30, gt=0)
    reward_cadence: int = Field(default=3, gt=0)
    reward_points: int = Field(default=10, ge=0)
    default_monthly_budget: int = Field(default=5000, gt=0)
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    day_reset_interval_hours: float = Field(default=24.0, gt=0)
    tip_seed: int | None = None
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="POCKETGUARD_", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    overrides: dict[str, Any] = {}
    secrets_section = _streamlit_section(SECRETS_SECTION)
    if secrets_section:
        overrides = {key: secrets_section.get(key) for key in Settings.model_fields}

    return Settings(**{k: v for k, v in overrides.items() if v is not None})
