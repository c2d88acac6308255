"""Shared Plotly theme tokens for PocketGuard visualizations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeTokens:
    label_color: str = "#475569"
    label_font: str = "Inter"
    label_size: int = 12
    grid_color: str = "#EEF2FF"
    brand_blue: str = "#2563EB"
    accent_green: str = "#22C55E"
    accent_red: str = "#FF3B30"
    accent_orange: str = "#F97316"
    neutral_grey: str = "#94A3B8"
    neutral_white: str = "#FFFFFF"
    category_palette: tuple[str, ...] = (
        "#0C6FFD",
        "#5DA9FF",
        "#FF3B30",
        "#F97316",
        "#22C55E",
        "#7C3AED",
        "#F59E0B",
        "#FACC15",
    )


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens."""

    return _TOKENS
