# src/sortscope/runner.py
from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from .algorithms import bubble_sort, heap_sort, merge_sort, quick_sort, transposition_sort
from .dataset import Orderings, prepare_orderings
from .io import export_results_json
from .records import read_dataset
from .report import build_report_html
from .sinks import COMPARISONS, TIME_SEC, BenchmarkMetric, MetricSink, SequenceSink
from .utils import human_count, human_time, recursion_headroom


@dataclass(frozen=True)
class SortAlgorithm:
    name: str
    run: Callable[[List[Any]], Optional[int]]  # sorts in place, returns a count or None
    metric_order: Tuple[str, ...]


ALGORITHMS: Dict[str, SortAlgorithm] = {
    "bubble": SortAlgorithm(
        "bubble", lambda seq: bubble_sort(seq, len(seq)), (TIME_SEC, COMPARISONS)
    ),
    "transposition": SortAlgorithm(
        "transposition", lambda seq: transposition_sort(seq, len(seq)), (COMPARISONS, TIME_SEC)
    ),
    "merge": SortAlgorithm("merge", lambda seq: merge_sort(seq, 0, len(seq) - 1), (TIME_SEC,)),
    "quick": SortAlgorithm("quick", lambda seq: quick_sort(seq, 0, len(seq) - 1), (TIME_SEC,)),
    "heap": SortAlgorithm("heap", lambda seq: heap_sort(seq, 0, len(seq) - 1), (TIME_SEC,)),
}


def get_algorithm(name: str) -> Optional[SortAlgorithm]:
    """Case-insensitive lookup; unknown names return None."""
    return ALGORITHMS.get(name.lower())


@dataclass
class CaseResult:
    input_type: str
    items: List[Any]
    elapsed: Optional[float] = None  # seconds; None when no sort ran
    count: Optional[int] = None
    metrics: List[BenchmarkMetric] = field(default_factory=list)


@dataclass
class RunResult:
    algorithm: str
    dataset: Optional[str]
    n: int
    cases: List[CaseResult]
    sorted_out: Optional[str] = None
    analysis_out: Optional[str] = None
    html: Optional[str] = None
    html_path: Optional[str] = None

    def case(self, input_type: str) -> CaseResult:
        for c in self.cases:
            if c.input_type == input_type:
                return c
        raise KeyError(input_type)

    def _repr_html_(self) -> str:  # Jupyter-friendly
        return self.html or ""


def run_case(
    algorithm: str,
    input_type: str,
    items: List[Any],
    n: int,
    metric_sink: Optional[MetricSink] = None,
    sequence_sink: Optional[SequenceSink] = None,
) -> CaseResult:
    """
    Sort a private copy of `items` with `algorithm`, emit its metrics and the
    resulting sequence. An unknown algorithm sorts nothing and emits no
    metrics, but its (unsorted) block is still written.
    """
    name = algorithm.lower()
    work = list(items)
    result = CaseResult(input_type=input_type, items=work)

    algo = get_algorithm(name)
    if algo is not None:
        with recursion_headroom(len(work)):
            t0 = time.perf_counter()
            count = algo.run(work)
            t1 = time.perf_counter()
        result.elapsed = t1 - t0
        result.count = count

        values = {TIME_SEC: result.elapsed, COMPARISONS: count}
        for metric in algo.metric_order:
            m = BenchmarkMetric(name, input_type, n, metric, values[metric])
            result.metrics.append(m)
            if metric_sink is not None:
                metric_sink.write(m)
    # unrecognized names fall through here: no sort, no metrics

    if sequence_sink is not None:
        sequence_sink.write_block(name, input_type, n, work)
    return result


def run_orderings(
    algorithm: str,
    orderings: Orderings,
    n: int,
    metric_sink: Optional[MetricSink] = None,
    sequence_sink: Optional[SequenceSink] = None,
    verbose: bool = False,
) -> List[CaseResult]:
    cases: List[CaseResult] = []
    for input_type, items in orderings:
        case = run_case(algorithm, input_type, items, n, metric_sink, sequence_sink)
        cases.append(case)
        if verbose:
            line = f"   • {input_type:<15} {human_time(case.elapsed)}"
            if case.count is not None:
                line += f"  ({human_count(case.count)} {COMPARISONS})"
            if case.elapsed is None:
                line += "  (unknown algorithm, left unsorted)"
            print(line)
    return cases


def run_benchmark(
    dataset: str | Path,
    algorithm: str,
    n: int,
    sorted_out: str | Path = "sorted.txt",
    analysis_out: str | Path = "analysis.txt",
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    html_out: Optional[str | Path] = None,
    json_out: Optional[str | Path] = None,
    title: Optional[str] = None,
    verbose: bool = True,
) -> RunResult:
    """
    Read the first `n` records of `dataset`, run `algorithm` on the sorted,
    shuffled and reversed orderings, append metrics to `analysis_out` and
    write the three resulting sequences to `sorted_out`.

    Optional outputs: an HTML report (`html_out`) and a JSON dump
    (`json_out`) of this single run.
    """
    name = algorithm.lower()
    base = read_dataset(dataset, n)
    orderings = prepare_orderings(base, rng=rng, seed=seed)

    if verbose:
        print(f"🔍 Running {name} on {len(base)} records from {dataset} (N={n}) ⏳")

    with SequenceSink(sorted_out) as seq_sink, MetricSink(analysis_out) as metric_sink:
        cases = run_orderings(name, orderings, n, metric_sink, seq_sink, verbose=verbose)

    result = RunResult(
        algorithm=name,
        dataset=str(dataset),
        n=n,
        cases=cases,
        sorted_out=os.path.abspath(sorted_out),
        analysis_out=os.path.abspath(analysis_out),
    )

    if html_out:
        result.html_path = os.path.abspath(html_out)
        result.html = build_report_html(result, title=title)
        with open(html_out, "w", encoding="utf-8") as f:
            f.write(result.html)

    if json_out:
        export_results_json(result, json_out)

    if verbose:
        print(f"✅ Done. Sorted output: {result.sorted_out}; metrics appended to: {result.analysis_out}")
        if result.html_path:
            print(f"   Report saved to: {result.html_path}")

    return result
