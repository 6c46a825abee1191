# src/sortscope/report.py
from __future__ import annotations

import importlib.resources as pkg_resources
import json
from typing import TYPE_CHECKING, Any, Dict, List, Optional
from jinja2 import Environment, BaseLoader
from markupsafe import Markup
import plotly.io as pio

from .io import result_to_dict
from .plotting import count_figure, timing_figure
from .utils import human_count, human_time

if TYPE_CHECKING:
    from .runner import RunResult

COMPLEXITY_NOTES: Dict[str, str] = {
    "bubble": "O(n^2) average/worst, O(n) on sorted input (single pass, n-1 comparisons).",
    "transposition": "O(n^2) passes worst case; count shown is the number of odd/even passes.",
    "merge": "O(n log n) in every case, O(n) auxiliary buffer per merge, stable.",
    "quick": "O(n log n) average; last-element pivot makes sorted and reversed input O(n^2).",
    "heap": "O(n log n) in every case, in place, not stable.",
}


def load_template_text() -> str:
    """Load the Jinja2 template text shipped inside the package."""
    tmpl = pkg_resources.files("sortscope.templates").joinpath("report.html.j2")
    return tmpl.read_text(encoding="utf-8")


def fig_to_div(fig) -> Markup:
    # plotly.js comes from the CDN script tag in the template
    return Markup(pio.to_html(fig, include_plotlyjs=False, full_html=False, default_width="100%"))


def build_report_html(result: "RunResult", title: Optional[str] = None) -> str:
    """
    Render a single-run report: one table row and one bar per ordering.
    """
    env = Environment(loader=BaseLoader(), autoescape=True)
    env.filters["human_time"] = human_time
    env.filters["human_count"] = human_count
    tpl = env.from_string(load_template_text())

    title = title or f"{result.algorithm} sort benchmark"
    orderings = [c.input_type for c in result.cases]

    timing_div = fig_to_div(timing_figure(orderings, [c.elapsed for c in result.cases], title))
    count_div = Markup("")
    if any(c.count is not None for c in result.cases):
        count_div = fig_to_div(count_figure(orderings, [c.count for c in result.cases], title))

    rows: List[Dict[str, Any]] = [
        {
            "input_type": c.input_type,
            "size": len(c.items),
            "elapsed": c.elapsed,
            "count": c.count,
            "metric_lines": [m.to_line() for m in c.metrics],
        }
        for c in result.cases
    ]

    note = COMPLEXITY_NOTES.get(result.algorithm)
    if note is None:
        note = f"Unrecognized algorithm '{result.algorithm}': inputs were written unsorted and no metrics were recorded."

    return tpl.render(
        title=title,
        algorithm=result.algorithm,
        dataset=result.dataset,
        n=result.n,
        rows=rows,
        note=note,
        timing_div=timing_div,
        count_div=count_div,
        sorted_out=result.sorted_out,
        analysis_out=result.analysis_out,
        # inline <script> payload; "</" must not appear verbatim
        result_json=Markup(json.dumps(result_to_dict(result), default=str).replace("</", "<\\/")),
    )
