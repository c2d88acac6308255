"""Dashboard page: budget setup, expense capture, alerts and rewards."""

from __future__ import annotations

import streamlit as st

from analytics.report import build_ledger_frame
from app.layout import alert_markup, card
from core.engine import BudgetEngine
from core.errors import PocketGuardError
from core.models import SPENDING_CATEGORIES, Category, Mood
from visualization import build_budget_chart

CATEGORY_LABELS: dict[Category, str] = {
    Category.FOOD: "🍔 Food",
    Category.ENTERTAINMENT: "🎬 Entertainment",
    Category.TRANSPORT: "🚌 Transport",
    Category.STUDY: "📚 Study",
    Category.MEDICINE: "💊 Medicine",
    Category.PERSONAL: "💅 Personal Care",
    Category.OTHER: "📦 Other",
}

MOOD_LABELS: dict[Mood, str] = {
    Mood.NEUTRAL: "😐 Neutral",
    Mood.HAPPY: "😊 Happy",
    Mood.STRESSED: "😰 Stressed",
    Mood.SAD: "😢 Sad",
}

RECENT_ROWS = 20


def _render_budget_card(engine: BudgetEngine, currency: str) -> None:
    allocation = engine.allocation
    budget = st.number_input(
        f"Monthly Budget ({currency})",
        min_value=1,
        step=500,
        value=allocation.monthly_budget,
        key="monthly_budget_input",
    )
    if budget != allocation.monthly_budget:
        try:
            allocation = engine.set_monthly_budget(budget)
        except PocketGuardError as exc:
            st.error(str(exc))

    cols = st.columns(3)
    cols[0].metric("Auto-Saved", f"{currency}{allocation.savings:,}")
    cols[1].metric("Usable Amount", f"{currency}{allocation.usable:,}")
    cols[2].metric("Safe Daily Limit", f"{currency}{allocation.daily_limit:,}")
    st.plotly_chart(
        build_budget_chart(allocation, engine.ledger_state.total_spending, currency),
        use_container_width=True,
        key="budget-bar",
    )


def _render_expense_form(engine: BudgetEngine, currency: str) -> None:
    with st.form("expense_form", clear_on_submit=True):
        amount = st.text_input(f"Amount ({currency})", placeholder="0")
        cols = st.columns(2)
        category = cols[0].selectbox(
            "Category",
            SPENDING_CATEGORIES,
            format_func=lambda value: CATEGORY_LABELS[value],
        )
        mood = cols[1].selectbox("Mood", list(Mood), format_func=lambda value: MOOD_LABELS[value])
        submit_cols = st.columns(2)
        add_clicked = submit_cols[0].form_submit_button("Add Expense", type="primary")
        emergency_clicked = submit_cols[1].form_submit_button("🚨 Emergency (Study/Medicine)")

    if add_clicked or emergency_clicked:
        submit_expense(engine, amount, category, mood, emergency=emergency_clicked)


def submit_expense(
    engine: BudgetEngine,
    amount: str,
    category: Category,
    mood: Mood,
    *,
    emergency: bool = False,
) -> bool:
    """Record a submitted expense and rerun so cards drawn above the form refresh."""

    try:
        if emergency:
            engine.record_emergency_expense(amount)
        else:
            engine.record_expense(amount, category, mood)
    except PocketGuardError:
        st.error("Please enter a valid amount")
        return False

    st.rerun()
    return True


def _render_alerts_card(engine: BudgetEngine) -> None:
    alerts = engine.alerts
    if not alerts:
        st.caption("No alerts yet. Keep it up!")
        return

    st.markdown(
        "".join(alert_markup(alert.text, alert.category) for alert in alerts),
        unsafe_allow_html=True,
    )
    if st.button("Clear Alerts", key="clear-alerts"):
        engine.clear_alerts()
        st.rerun()


def _render_rewards_card(engine: BudgetEngine) -> None:
    rewards = engine.reward_state
    cols = st.columns(2)
    cols[0].metric("Reward Points", rewards.points)
    cols[1].metric("In-budget streak", rewards.consecutive_in_budget_days)
    st.caption("Keep staying within your daily budget to earn more rewards!")
    if st.button("💡 Get Micro-Saving Tip", key="micro-tip"):
        engine.request_micro_saving_tip()
        st.rerun()


def _render_spending_card(engine: BudgetEngine, currency: str) -> None:
    ledger = engine.ledger_state
    daily_limit = engine.allocation.daily_limit
    remaining = engine.remaining_budget

    cols = st.columns(3)
    cols[0].metric("Total Spending", f"{currency}{ledger.total_spending:,}")
    cols[1].metric(
        "Remaining",
        f"{currency}{remaining:,}",
        "On track" if remaining >= 0 else "Over budget",
        delta_color="normal" if remaining >= 0 else "inverse",
    )
    cols[2].metric(
        "Today's Spending",
        f"{currency}{ledger.today_spending:,} / {currency}{daily_limit:,}",
    )

    if ledger.records:
        st.caption("Recent expenses")
        frame = build_ledger_frame(ledger.records).head(RECENT_ROWS)
        st.dataframe(frame, hide_index=True, use_container_width=True)


def render_page(engine: BudgetEngine, currency: str = "₹") -> None:
    """Render the main budgeting dashboard."""

    left, right = st.columns([1, 1], gap="medium")
    with left:
        with card("📋 Monthly Budget Setup"):
            _render_budget_card(engine, currency)
        with card("➕ Add Expense"):
            _render_expense_form(engine, currency)
    with right:
        with card("🔔 Alerts & Notifications", suffix=f"{len(engine.alerts)}"):
            _render_alerts_card(engine)
        with card("🏆 Rewards"):
            _render_rewards_card(engine)

    with card("💸 Spending Overview"):
        _render_spending_card(engine, currency)


__all__ = ["render_page", "submit_expense"]
