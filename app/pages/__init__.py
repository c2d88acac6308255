"""Page modules for the PocketGuard Streamlit application."""

from .dashboard import render_page as render_dashboard_page
from .report import render_page as render_report_page

__all__ = [
    "render_dashboard_page",
    "render_report_page",
]
