"""Expense form submission on the dashboard page."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest
import streamlit as st

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from analytics.tips import make_tip_rng
from app.pages.dashboard import submit_expense
from core.engine import BudgetEngine
from core.models import Category, Mood


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)


@pytest.fixture()
def ui_calls(monkeypatch):
    calls: list[tuple[str, str]] = []
    monkeypatch.setattr(st, "rerun", lambda: calls.append(("rerun", "")))
    monkeypatch.setattr(st, "error", lambda message: calls.append(("error", message)))
    return calls


@pytest.fixture()
def engine() -> BudgetEngine:
    return BudgetEngine(3000, rng=make_tip_rng(1), clock=lambda: date(2024, 3, 1))


def test_submitted_expense_triggers_rerun(engine, ui_calls):
    assert submit_expense(engine, "120", Category.FOOD, Mood.HAPPY) is True

    assert ui_calls == [("rerun", "")]
    assert engine.ledger_state.total_spending == 120
    assert engine.ledger_state.today_spending == 120


def test_submitted_emergency_triggers_rerun_without_touching_today(engine, ui_calls):
    assert submit_expense(engine, "500", Category.FOOD, Mood.SAD, emergency=True) is True

    assert ui_calls == [("rerun", "")]
    assert engine.ledger_state.total_spending == 500
    assert engine.ledger_state.today_spending == 0


@pytest.mark.parametrize("amount", ["", "abc", "-5", "1e5000"])
def test_invalid_submission_shows_error_without_rerun(engine, ui_calls, amount):
    before = engine.ledger_state

    assert submit_expense(engine, amount, Category.FOOD, Mood.HAPPY) is False

    assert ui_calls == [("error", "Please enter a valid amount")]
    assert engine.ledger_state == before
