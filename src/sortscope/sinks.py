# src/sortscope/sinks.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional, TextIO

ANALYSIS_COMMENT = "# Sorting Performance Data"
ANALYSIS_COLUMNS = "algorithm,inputType,N,metric,value"

TIME_SEC = "timeSec"
COMPARISONS = "comparisons"


@dataclass(frozen=True)
class BenchmarkMetric:
    algorithm: str
    input_type: str
    n: int
    metric: str  # TIME_SEC or COMPARISONS
    value: float | int

    def to_line(self) -> str:
        return f"{self.algorithm},{self.input_type},{self.n},{self.metric},{self.value}"


class MetricSink:
    """
    Append-only analysis log. The two header lines are written only when the
    file did not exist before this sink opened it.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._fh: Optional[TextIO] = None

    def open(self) -> "MetricSink":
        existed = self.path.exists()
        self._fh = open(self.path, "a", encoding="utf-8")
        if not existed:
            self._fh.write(ANALYSIS_COMMENT + "\n")
            self._fh.write(ANALYSIS_COLUMNS + "\n")
        return self

    def write(self, metric: BenchmarkMetric) -> None:
        if self._fh is None:
            raise RuntimeError("MetricSink is not open")
        self._fh.write(metric.to_line() + "\n")

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def __enter__(self) -> "MetricSink":
        return self.open()

    def __exit__(self, *exc: Any) -> None:
        self.close()


class SequenceSink:
    """Dump of the final sequence for every case; truncated when opened."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._fh: Optional[TextIO] = None

    def open(self) -> "SequenceSink":
        self._fh = open(self.path, "w", encoding="utf-8")
        return self

    def write_block(self, algorithm: str, input_type: str, n: int, items: Iterable[Any]) -> None:
        if self._fh is None:
            raise RuntimeError("SequenceSink is not open")
        self._fh.write(block_header(algorithm, input_type, n) + "\n")
        for item in items:
            self._fh.write(f"{item}\n")
        self._fh.write("\n")

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def __enter__(self) -> "SequenceSink":
        return self.open()

    def __exit__(self, *exc: Any) -> None:
        self.close()


def block_header(algorithm: str, input_type: str, n: int) -> str:
    return f"=== {algorithm} / {input_type} / N={n} ==="
