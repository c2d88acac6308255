"""PocketGuard budget assistant with responsive card layout."""

from __future__ import annotations

import streamlit as st

from app.layout import NAV_LINKS, determine_active_page, inject_css, render_navbar
from app.pages import render_dashboard_page, render_report_page
from app.state import get_engine, poll_day_reset
from config import configure_logging, get_settings


def main() -> None:
    """Application entrypoint for the PocketGuard dashboard."""

    st.set_page_config(
        page_title="PocketGuard",
        page_icon="💰",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    settings = get_settings()
    configure_logging(settings.log_level)

    engine = get_engine(settings)
    if poll_day_reset(engine, settings):
        st.toast("A new day started. Today's spending was reset.")

    inject_css()
    valid_pages = [link.slug for link in NAV_LINKS if link.enabled]
    active_page = determine_active_page(valid_pages)
    render_navbar(active_page)

    if active_page == "report":
        render_report_page(engine, settings.currency_symbol)
    else:
        render_dashboard_page(engine, settings.currency_symbol)


if __name__ == "__main__":
    main()
