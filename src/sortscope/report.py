# src/sortscope/report.py
from __future__ import annotations

import importlib.resources as pkg_resources
from typing import Any, Dict, List, Optional, Sequence

import plotly.io as pio
from jinja2 import BaseLoader, Environment
from markupsafe import Markup, escape

from .utils import format_number

TABLE_HEADERS = ("Original Index", "Value", "Compared With", "Decision")

EFFICIENCY_CSS = {
    "Excellent": "var(--secondary)",
    "Good": "var(--accent)",
    "Fair": "#f59e0b",
    "Poor": "#ef4444",
}


def load_template_text() -> str:
    """Load the Jinja2 report template shipped in ``sortscope/templates``."""
    tmpl = pkg_resources.files("sortscope").joinpath("templates/report.html.j2")
    return tmpl.read_text(encoding="utf-8")


def step_heading(algorithm_name: str, step: int) -> str:
    return f"{algorithm_name} – Step {step}"


def step_rows(report) -> List[Dict[str, Any]]:
    """Flatten a run's records into display rows for the step tables."""
    return [
        {
            "heading": step_heading(report.name, rec.step),
            "index": rec.index,
            "value": format_number(rec.value),
            "compare": format_number(rec.compare),
            "decision": rec.decision.value,
        }
        for rec in report.result.steps
    ]


def efficiency_badge(tier: str) -> Markup:
    color = EFFICIENCY_CSS.get(tier, "inherit")
    return Markup(f'<span class="stat-value" style="color: {color}">{escape(tier)}</span>')


def build_report_html(
    title: str,
    notes: Optional[str],
    values: Sequence[Any],
    reports: Sequence[Any],
    comparison_rows: List[Dict[str, Any]],
    steps_fig=None,
    theme: str = "light",
    html_path: Optional[str] = None,
) -> str:
    """
    Render the comparison report: one step-table section per algorithm, the
    comparison cards, and the step-count chart. Plotly JS comes from the CDN
    referenced in the template.
    """
    env = Environment(loader=BaseLoader(), autoescape=True)
    env.filters["number"] = format_number
    env.filters["efficiency_badge"] = efficiency_badge

    tpl = env.from_string(load_template_text())

    sections = [
        {
            "key": rep.key,
            "name": rep.name,
            "icon": rep.info.icon,
            "rows": step_rows(rep),
            "sorted_values": [format_number(v) for v in rep.result.sorted_values],
            "errors": rep.errors,
        }
        for rep in reports
    ]

    steps_div = pio.to_html(steps_fig, include_plotlyjs=False, full_html=False) if steps_fig is not None else ""

    return tpl.render(
        title=title,
        notes=notes,
        theme=theme,
        n=len(values),
        input_values=[format_number(v) for v in values],
        headers=TABLE_HEADERS,
        sections=sections,
        comparison_rows=comparison_rows,
        steps_div=Markup(steps_div),
        html_path=html_path,
    )
