# src/sortscope/plotting.py
from __future__ import annotations

from typing import List, Optional

import numpy as np
import plotly.graph_objects as go

from .utils import human_count, human_time

# one color per ordering: sorted, shuffled, reversed
ORDERING_COLORS = ['#34a853', '#4285f4', '#ea4335']


def _style_layout(fig: go.Figure, title: str, yaxis_title: str, log_y: bool) -> go.Figure:
    fig.update_layout(
        title=dict(
            text=title,
            font=dict(size=22, color='#1e293b', family="Inter, sans-serif"),
            x=0.5,
        ),
        xaxis_title="Input ordering",
        yaxis_title=yaxis_title,
        template="plotly_white",
        plot_bgcolor='rgba(0,0,0,0)',
        paper_bgcolor='rgba(0,0,0,0)',
        showlegend=False,
        margin=dict(l=90, r=40, t=90, b=70),
        height=480,
        font=dict(family="Inter, sans-serif", size=13, color='#374151'),
    )
    fig.update_xaxes(
        linecolor='rgba(66, 133, 244, 0.3)',
        tickfont=dict(size=13, color='#64748b', family="Inter, sans-serif"),
        showline=True,
        linewidth=2,
    )
    fig.update_yaxes(
        type="log" if log_y else "linear",
        gridcolor='rgba(66, 133, 244, 0.1)',
        linecolor='rgba(66, 133, 244, 0.3)',
        showgrid=True,
        zeroline=False,
        showline=True,
        linewidth=2,
    )
    return fig


def timing_figure(
    orderings: List[str],
    seconds: List[Optional[float]],
    title: str,
    log_y: bool = False,
) -> go.Figure:
    """Bar chart of elapsed seconds per ordering. Missing timings plot as gaps."""
    y = np.array([np.nan if s is None else float(s) for s in seconds], dtype=float)
    labels = [human_time(s) for s in seconds]
    fig = go.Figure(go.Bar(
        x=orderings,
        y=y,
        text=labels,
        textposition="outside",
        marker=dict(color=ORDERING_COLORS[: len(orderings)], line=dict(width=1, color='white')),
        hovertemplate="<b>%{x}</b><br>Time: %{y:.6f}s<extra></extra>",
    ))
    return _style_layout(fig, title + " — Elapsed Time", "Time (seconds)", log_y)


def count_figure(
    orderings: List[str],
    counts: List[Optional[int]],
    title: str,
) -> go.Figure:
    y = np.array([np.nan if c is None else float(c) for c in counts], dtype=float)
    fig = go.Figure(go.Bar(
        x=orderings,
        y=y,
        text=[human_count(c) for c in counts],
        textposition="outside",
        marker=dict(color=ORDERING_COLORS[: len(orderings)], line=dict(width=1, color='white')),
        hovertemplate="<b>%{x}</b><br>Count: %{y:,.0f}<extra></extra>",
    ))
    return _style_layout(fig, title + " — Operation Count", "Count", log_y=False)
