from .algorithms import (
    bubble_sort,
    heap_sort,
    heapify,
    merge,
    merge_sort,
    partition,
    quick_sort,
    transposition_sort,
)
from .dataset import ALREADY_SORTED, REVERSED, SHUFFLED, Orderings, prepare_orderings
from .records import InsuranceRecord, read_dataset
from .runner import ALGORITHMS, CaseResult, RunResult, get_algorithm, run_benchmark, run_case
from .sinks import BenchmarkMetric, MetricSink, SequenceSink

__all__ = [
    "bubble_sort",
    "heap_sort",
    "heapify",
    "merge",
    "merge_sort",
    "partition",
    "quick_sort",
    "transposition_sort",
    "ALREADY_SORTED",
    "SHUFFLED",
    "REVERSED",
    "Orderings",
    "prepare_orderings",
    "InsuranceRecord",
    "read_dataset",
    "ALGORITHMS",
    "CaseResult",
    "RunResult",
    "get_algorithm",
    "run_benchmark",
    "run_case",
    "BenchmarkMetric",
    "MetricSink",
    "SequenceSink",
]
