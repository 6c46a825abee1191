# src/sortscope/io.py
from __future__ import annotations
import json
from typing import TYPE_CHECKING, Any
from pathlib import Path
from .utils import human_time

if TYPE_CHECKING:
    from .runner import RunResult


def result_to_dict(result: "RunResult") -> dict[str, Any]:
    data: dict[str, Any] = {
        "algorithm": result.algorithm,
        "dataset": result.dataset,
        "n": result.n,
        "sorted_out": result.sorted_out,
        "analysis_out": result.analysis_out,
        "html_path": result.html_path,
        "cases": [],
    }
    for case in result.cases:
        data["cases"].append({
            "input_type": case.input_type,
            "size": len(case.items),
            "elapsed": case.elapsed,
            "elapsed_human": human_time(case.elapsed) if case.elapsed is not None else None,
            "count": case.count,
            "metrics": [m.to_line() for m in case.metrics],
        })
    return data


def export_results_json(result: "RunResult", out_path: str | Path) -> None:
    """
    Write the run as JSON (per-case timings, counts and the exact metric
    lines that went to the analysis log) for external tooling.
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(result_to_dict(result), indent=2, default=str), encoding="utf-8")
