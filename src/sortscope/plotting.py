# src/sortscope/plotting.py
from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

import numpy as np
import plotly.graph_objects as go

COLORS = [
    '#4285f4',  # Blue
    '#ea4335',  # Red
    '#34a853',  # Green
    '#fbbc04',  # Yellow
    '#9c27b0',  # Purple
    '#00bcd4',  # Cyan
]

# Matches the efficiency badge colours of the HTML report.
EFFICIENCY_COLORS = {
    "Excellent": '#34a853',
    "Good": '#4285f4',
    "Fair": '#f59e0b',
    "Poor": '#ef4444',
}


def _reference_funcs():
    return {
        "1": lambda n: np.ones_like(n, dtype=float),
        "logn": lambda n: np.log2(np.maximum(n, 2)),
        "n": lambda n: n.astype(float),
        "nlogn": lambda n: n.astype(float) * np.log2(np.maximum(n, 2)),
        "n**2": lambda n: n.astype(float) ** 2,
    }


def build_reference_curves(
    ns: List[int],
    ref_specs: Tuple[str, ...],
    y_anchor: float,
    normalize_at: str = "max",
) -> Dict[str, np.ndarray]:
    """
    Returns dict: name -> np.ndarray of reference values scaled so that each
    curve meets ``y_anchor`` at the first (``normalize_at="min"``) or last size.
    """
    funcs = _reference_funcs()
    unknown = [s for s in ref_specs if s not in funcs]
    if unknown:
        raise ValueError(f"Unknown reference curves {unknown}; expected any of {sorted(funcs)}")

    n_arr = np.array(ns, dtype=float)
    if not np.isfinite(y_anchor) or y_anchor <= 0:
        y_anchor = 1.0

    idx = 0 if normalize_at == "min" else len(n_arr) - 1
    curves = {}
    for spec in ref_specs:
        raw = np.maximum(funcs[spec](n_arr), 1e-12)
        curves[spec] = raw * (y_anchor / raw[idx])
    return curves


def _base_layout(fig: go.Figure, title: str, x_title: str, y_title: str) -> None:
    fig.update_layout(
        title=dict(
            text=title,
            font=dict(size=22, color='#1e293b', family="Inter, sans-serif"),
            x=0.5,
        ),
        xaxis_title=x_title,
        yaxis_title=y_title,
        template="plotly_white",
        plot_bgcolor='rgba(0,0,0,0)',
        paper_bgcolor='rgba(0,0,0,0)',
        margin=dict(l=80, r=40, t=90, b=70),
        height=480,
        font=dict(family="Inter, sans-serif", size=13, color='#374151'),
    )


def steps_figure(
    labels: Sequence[str],
    step_counts: Sequence[int],
    tiers: Sequence[str],
    title: str,
) -> go.Figure:
    """Bar chart of step counts, one bar per algorithm, coloured by efficiency tier."""
    fig = go.Figure(go.Bar(
        x=list(labels),
        y=list(step_counts),
        text=[f"{c} · {t}" for c, t in zip(step_counts, tiers)],
        textposition="outside",
        marker=dict(
            color=[EFFICIENCY_COLORS.get(t, COLORS[0]) for t in tiers],
            line=dict(width=2, color='white'),
        ),
        hovertemplate="<b>%{x}</b><br>Steps: %{y}<extra></extra>",
    ))
    _base_layout(fig, title + " — Steps per Algorithm", "Algorithm", "Recorded steps")
    fig.update_yaxes(rangemode="tozero", gridcolor='rgba(66, 133, 244, 0.1)')
    return fig


def scaling_figure(
    ns: List[int],
    step_counts: Dict[str, List[int]],
    reference_curves: Dict[str, np.ndarray],
    title: str,
) -> go.Figure:
    fig = go.Figure()
    for i, (label, counts) in enumerate(step_counts.items()):
        color = COLORS[i % len(COLORS)]
        fig.add_trace(go.Scatter(
            x=ns, y=counts, mode="lines+markers", name=label,
            marker=dict(size=8, color=color, line=dict(width=2, color='white')),
            line=dict(width=3, color=color),
            hovertemplate=f"<b>{label}</b><br>n: %{{x}}<br>Steps: %{{y}}<extra></extra>",
        ))

    ref_colors = ['#64748b', '#94a3b8', '#cbd5e1', '#e2e8f0']
    for i, (rname, ry) in enumerate(reference_curves.items()):
        fig.add_trace(go.Scatter(
            x=ns, y=list(ry), mode="lines", name=f"O({rname})",
            line=dict(dash="dot", width=2, color=ref_colors[i % len(ref_colors)]),
            opacity=0.7,
        ))

    _base_layout(fig, title, "Input Size (n)", "Recorded steps")
    # log scale cannot show zero-step runs (insertion sort on sorted input)
    fig.update_yaxes(type="log", gridcolor='rgba(66, 133, 244, 0.1)')
    fig.update_xaxes(gridcolor='rgba(66, 133, 244, 0.1)')
    return fig
