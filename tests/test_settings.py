"""Tests for environment and Streamlit-secrets driven settings."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import streamlit as st
from pydantic import ValidationError

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import Settings, get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.setattr(st, "secrets", {}, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_match_engine_constants():
    settings = get_settings()

    assert settings.savings_rate == pytest.approx(0.10)
    assert settings.usable_rate == pytest.approx(0.90)
    assert settings.days_per_month == 30
    assert settings.reward_cadence == 3
    assert settings.reward_points == 10
    assert settings.default_monthly_budget == 5000
    assert settings.currency_symbol == "₹"


def test_env_vars_override_defaults(monkeypatch):
    monkeypatch.setenv("POCKETGUARD_CURRENCY_SYMBOL", "$")
    monkeypatch.setenv("POCKETGUARD_REWARD_POINTS", "25")

    settings = get_settings()

    assert settings.currency_symbol == "$"
    assert settings.reward_points == 25


def test_streamlit_secrets_override_env(monkeypatch):
    monkeypatch.setenv("POCKETGUARD_REWARD_CADENCE", "4")
    monkeypatch.setattr(st, "secrets", {"pocketguard": {"reward_cadence": 5}}, raising=False)

    assert get_settings().reward_cadence == 5


def test_invalid_values_are_rejected():
    with pytest.raises(ValidationError):
        Settings(days_per_month=0)
