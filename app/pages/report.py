"""Monthly report card page."""

from __future__ import annotations

import streamlit as st

from analytics.report import build_category_frame
from app.layout import card
from core.engine import BudgetEngine
from visualization import build_category_chart


def render_page(engine: BudgetEngine, currency: str = "₹") -> None:
    """Render the report card computed from the engine's current state."""

    st.title("📊 Monthly Report Card")
    report = engine.get_report()

    with card("Summary"):
        cols = st.columns(3)
        cols[0].metric("Total Spending", f"{currency}{report['total_spending']:,}")
        cols[1].metric("Total Savings", f"{currency}{report['total_savings']:,}")
        cols[2].metric("Remaining Budget", f"{currency}{report['remaining_budget']:,}")
        cols = st.columns(3)
        cols[0].metric("Overspending Days", report["overspending_days"])
        cols[1].metric("Reward Points", report["reward_points"])
        if report["on_track"]:
            st.success("✅ Great performance! You're on track.")
        else:
            st.warning("⚠️ Budget exceeded. Plan better next month.")

    with card("Spending by Category"):
        category_df = build_category_frame(report["category_totals"])
        if category_df.empty:
            st.info("No expenses recorded yet")
            return
        st.plotly_chart(
            build_category_chart(category_df, currency),
            use_container_width=True,
            key="category-donut",
        )


__all__ = ["render_page"]
