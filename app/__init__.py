"""Streamlit host for the PocketGuard budget engine."""

from .main import main

__all__ = ["main"]
