"""Plotly chart builders for the PocketGuard dashboard."""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from core.models import BudgetAllocation

from .theme import theme_tokens

TOKENS = theme_tokens()

__all__ = [
    "build_budget_chart",
    "build_category_chart",
]


def _empty_plotly_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_category_chart(category_df: pd.DataFrame, currency_symbol: str = "₹") -> go.Figure:
    """Render a donut chart for category spend distribution using Plotly."""

    if category_df.empty:
        return _empty_plotly_figure("No expenses recorded yet.")

    palette = list(TOKENS.category_palette)
    data = category_df.sort_values("CurrentValue", ascending=False).reset_index(drop=True)
    if len(data) > len(palette):
        repeats = (len(data) // len(palette)) + 1
        color_sequence = (palette * repeats)[: len(data)]
    else:
        color_sequence = palette[: len(data)]

    fig = px.pie(
        data,
        names="Category",
        values="CurrentValue",
        hole=0.55,
        color="Category",
        color_discrete_sequence=color_sequence,
    )

    fig.update_traces(
        textposition="inside",
        texttemplate="%{label}<br>%{percent:.1%}",
        customdata=data[["CurrentValue", "Share"]],
        hovertemplate=(
            "%{label}<br>"
            f"Spend: {currency_symbol}" "%{customdata[0]:,.0f}<br>"
            "Share: %{customdata[1]:.1%}<extra></extra>"
        ),
        marker=dict(line=dict(color=TOKENS.neutral_white, width=2)),
    )

    fig.update_layout(
        margin=dict(l=0, r=0, t=0, b=0),
        legend=dict(
            title="",
            orientation="v",
            yanchor="middle",
            y=0.5,
            xanchor="left",
            x=1.05,
            font=dict(color=TOKENS.label_color, family=TOKENS.label_font, size=TOKENS.label_size),
        ),
        showlegend=True,
    )

    return fig


def build_budget_chart(
    allocation: BudgetAllocation,
    total_spending: int,
    currency_symbol: str = "₹",
) -> go.Figure:
    """Render a horizontal stacked bar splitting the budget into savings, spent and remaining."""

    spent = min(total_spending, allocation.usable)
    remaining = max(allocation.usable - total_spending, 0)
    overspent = max(total_spending - allocation.usable, 0)

    segments = [
        ("Auto-saved", allocation.savings, TOKENS.brand_blue),
        ("Spent", spent, TOKENS.accent_orange),
        ("Remaining", remaining, TOKENS.accent_green),
        ("Over budget", overspent, TOKENS.accent_red),
    ]

    fig = go.Figure()
    for label, value, color in segments:
        if value <= 0:
            continue
        fig.add_trace(
            go.Bar(
                x=[value],
                y=["Budget"],
                orientation="h",
                name=label,
                marker=dict(color=color, line=dict(color=TOKENS.neutral_white, width=1.5)),
                hovertemplate=f"{label}: {currency_symbol}" "%{x:,.0f}<extra></extra>",
            )
        )

    if not fig.data:
        return _empty_plotly_figure("Set a monthly budget to see the breakdown.")

    fig.update_layout(
        barmode="stack",
        height=140,
        margin=dict(l=0, r=0, t=10, b=0),
        xaxis=dict(gridcolor=TOKENS.grid_color, tickprefix=currency_symbol),
        yaxis=dict(visible=False),
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=1.02,
            font=dict(color=TOKENS.label_color, family=TOKENS.label_font, size=TOKENS.label_size),
        ),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig
