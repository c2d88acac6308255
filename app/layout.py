"""Shared layout primitives for the PocketGuard Streamlit app."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable

import streamlit as st
from streamlit.components.v1 import html as components_html

from core.models import AlertCategory


@dataclass(frozen=True)
class NavigationLink:
    slug: str
    label: str
    enabled: bool = True


NAV_LINKS: tuple[NavigationLink, ...] = (
    NavigationLink("dashboard", "Dashboard", True),
    NavigationLink("report", "Report Card", True),
)

ALERT_STYLES: dict[AlertCategory, str] = {
    AlertCategory.EMOTIONAL: "is-warning",
    AlertCategory.LIMIT: "is-danger",
    AlertCategory.TREND: "is-warning",
    AlertCategory.PROJECTION: "is-danger",
    AlertCategory.REWARD: "is-success",
    AlertCategory.EMERGENCY: "is-success",
    AlertCategory.TIP: "is-info",
}


def inject_css() -> None:
    """Inject global CSS tokens and component styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 12px;
            --card-bg: #FFFFFF;
            --border: #E6EAF2;
            --shadow: 0 1px 2px rgba(16, 24, 40, 0.05), 0 1px 3px rgba(16, 24, 40, 0.06);
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #F4F6FB;
          }

          .block-container {
            max-width: 1100px;
            padding-top: 2.5rem;
            padding-bottom: 4rem;
          }

          .pg-nav {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 2rem;
            padding: 0.9rem 0;
          }

          .pg-nav__brand {
            font-size: 1.5rem;
            font-weight: 700;
            color: #0B3FD6;
          }

          .pg-nav__tagline {
            font-size: 0.85rem;
            font-weight: 500;
            color: #5C6478;
          }

          .pg-nav__links {
            display: flex;
            align-items: center;
            gap: 1.8rem;
          }

          .pg-nav__link,
          .pg-nav__link:visited {
            position: relative;
            font-weight: 600;
            color: #5C6478;
            text-decoration: none;
          }

          .pg-nav__link.is-active {
            color: #1D4ED8;
          }

          .pg-nav__link.is-active::after {
            content: "";
            position: absolute;
            left: 0;
            right: 0;
            bottom: -8px;
            height: 3px;
            border-radius: 999px;
            background: linear-gradient(90deg, #1D4ED8, #0EA5E9);
          }

          .pg-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .pg-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            box-shadow: var(--shadow);
            padding: 16px;
            margin-bottom: var(--gap);
            gap: 12px;
          }

          .pg-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            font-weight: 600;
            color: #111827;
          }

          .pg-chip {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 999px;
            border: 1px solid #D6DEFF;
            background: #F0F4FF;
            color: #3346FF;
          }

          .pg-alert {
            padding: 0.6rem 0.9rem;
            border-radius: 8px;
            border-left: 4px solid #94A3B8;
            background: #F8FAFC;
            margin-bottom: 0.5rem;
          }

          .pg-alert.is-warning { border-color: #F97316; background: #FFF7ED; }
          .pg-alert.is-danger { border-color: #FF3B30; background: #FEF2F2; }
          .pg-alert.is-success { border-color: #22C55E; background: #F0FDF4; }
          .pg-alert.is-info { border-color: #2563EB; background: #EFF6FF; }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable PocketGuard card."""

    chip_html = f'<span class="pg-chip">{suffix}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="pg-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="pg-card__head"><span>{title}</span>{chip_html}</div>',
            unsafe_allow_html=True,
        )
        yield


def alert_markup(text: str, category: AlertCategory) -> str:
    css_class = ALERT_STYLES.get(category, "")
    return f'<div class="pg-alert {css_class}">{text}</div>'


def render_navbar(active_page: str) -> None:
    """Render the navigation bar with active state."""

    link_markup: list[str] = []
    for link in NAV_LINKS:
        if not link.enabled:
            continue
        css_class = "pg-nav__link"
        aria_current = ""
        if link.slug == active_page:
            css_class += " is-active"
            aria_current = ' aria-current="page"'
        link_markup.append(
            f'<a class="{css_class}" href="?page={link.slug}"{aria_current} target="_self">{link.label}</a>'
        )

    st.markdown(
        f"""
        <nav class="pg-nav">
            <div>
                <div class="pg-nav__brand">💰 PocketGuard</div>
                <div class="pg-nav__tagline">Smart Finance Assistant for Students</div>
            </div>
            <div class="pg-nav__links">{''.join(link_markup)}</div>
        </nav>
        """,
        unsafe_allow_html=True,
    )
    _enforce_same_tab_navigation()


def _enforce_same_tab_navigation() -> None:
    """Ensure navigation links stay within the same browser tab."""

    components_html(
        """
        <script>
        (function() {
          if (window.parent && !window.parent.__pgNavSameTab) {
            window.parent.__pgNavSameTab = true;
            const enforce = () => {
              const anchors = window.parent.document.querySelectorAll('a.pg-nav__link');
              anchors.forEach((anchor) => {
                if (anchor.target && anchor.target.toLowerCase() !== '_self') {
                  anchor.target = '_self';
                }
              });
            };
            enforce();
            const observer = new MutationObserver(enforce);
            observer.observe(window.parent.document.body, { childList: true, subtree: true });
          }
        })();
        </script>
        """,
        height=0,
        width=0,
    )


def determine_active_page(valid_pages: Iterable[str]) -> str:
    """Determine the active page from the query params or session state."""

    params = st.query_params
    default_page = st.session_state.get("active_page", "dashboard")
    raw_page = params.get("page", default_page)
    if isinstance(raw_page, list):
        raw_page = raw_page[0]

    page = raw_page if raw_page in set(valid_pages) else "dashboard"

    if st.session_state.get("active_page") != page:
        st.session_state["active_page"] = page

    current_param = params.get("page")
    if isinstance(current_param, list):
        current_param = current_param[0]

    if current_param != page:
        st.query_params["page"] = page

    return page


__all__ = [
    "ALERT_STYLES",
    "NavigationLink",
    "NAV_LINKS",
    "alert_markup",
    "card",
    "determine_active_page",
    "inject_css",
    "render_navbar",
]
