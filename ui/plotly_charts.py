# ui/plotly_charts.py

from __future__ import annotations

from typing import List, Sequence, Tuple

import plotly.graph_objects as go

# ---------- Minimal Plotly config ----------
PLOTLY_CONFIG_MINIMAL = {
    "displayModeBar": False,
    "scrollZoom": False,
    "doubleClick": "reset",
    "responsive": True,
}

AGING_COLORS = ["#94a3b8", "#f59e0b", "#ef4444", "#991b1b"]
BUSINESS_TYPE_COLORS = ["#6b21a8", "#9333ea", "#c084fc", "#db2777", "#f472b6", "#7c3aed", "#be185d", "#4c1d95"]
STATUS_COLORS = ["#7e22ce", "#db2777", "#64748b", "#e11d48", "#a855f7"]


# ---------- Theme ----------
def apply_d7_plotly_theme(fig: go.Figure) -> go.Figure:
    fig.update_layout(
        font=dict(family="Sarabun, Inter, system-ui, -apple-system, Segoe UI, Roboto, Arial", size=12, color="#1F2937"),
        paper_bgcolor="#fdf2f8",
        plot_bgcolor="#fdf2f8",
        margin=dict(l=10, r=10, t=20, b=10),
        height=300,
        showlegend=False,
        hoverlabel=dict(font=dict(size=14)),
    )

    fig.update_xaxes(
        showgrid=False,
        zeroline=False,
        tickfont=dict(color="#64748B"),
        linecolor="#fce7f3",
        mirror=False,
    )
    fig.update_yaxes(
        showgrid=True,
        gridcolor="#fce7f3",
        zeroline=False,
        tickfont=dict(color="#64748B"),
        linecolor="#fce7f3",
        mirror=False,
    )
    return fig


def _cycle(colors: Sequence[str], n: int) -> List[str]:
    return [colors[i % len(colors)] for i in range(n)]


# ---------- Aging bins ----------
def fig_aging_distribution(bins: Sequence[Tuple[str, int]]) -> go.Figure:
    names = [name for name, _ in bins]
    counts = [count for _, count in bins]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=names,
        y=counts,
        marker=dict(color=_cycle(AGING_COLORS, len(names))),
        hovertemplate="%{x}<br>%{y:,} รายการ<extra></extra>",
    ))
    fig.update_layout(bargap=0.45)
    return apply_d7_plotly_theme(fig)


# ---------- Business type (top N, horizontal) ----------
def fig_business_type(counts: Sequence[Tuple[str, int]]) -> go.Figure:
    if not counts:
        return apply_d7_plotly_theme(go.Figure())

    names = [name for name, _ in counts]
    values = [count for _, count in counts]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=values,
        y=names,
        orientation="h",
        marker=dict(color=_cycle(BUSINESS_TYPE_COLORS, len(names))),
        hovertemplate="%{y}<br>%{x:,} รายการ<extra></extra>",
    ))
    fig.update_xaxes(visible=False)
    # Largest bar on top
    fig.update_yaxes(autorange="reversed", showgrid=False)
    return apply_d7_plotly_theme(fig)


# ---------- Status donut ----------
def fig_status_pie(counts: Sequence[Tuple[str, int]]) -> go.Figure:
    if not counts:
        return apply_d7_plotly_theme(go.Figure())

    fig = go.Figure()
    fig.add_trace(go.Pie(
        labels=[name for name, _ in counts],
        values=[count for _, count in counts],
        hole=0.6,
        marker=dict(colors=_cycle(STATUS_COLORS, len(counts))),
        textinfo="none",
        hovertemplate="%{label}<br>%{value:,} รายการ<extra></extra>",
    ))
    fig = apply_d7_plotly_theme(fig)
    fig.update_layout(
        showlegend=True,
        legend=dict(orientation="h", yanchor="top", y=-0.05, xanchor="center", x=0.5, font=dict(size=11)),
    )
    return fig
