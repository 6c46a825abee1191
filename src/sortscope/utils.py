# src/sortscope/utils.py
from __future__ import annotations

import math
import sys
from contextlib import contextmanager
from typing import Iterator


def human_time(seconds: float) -> str:
    if seconds is None or not (isinstance(seconds, (int, float)) and math.isfinite(seconds)):
        return "—"
    if seconds < 1e-6:
        return f"{seconds*1e9:.2f} ns"
    if seconds < 1e-3:
        return f"{seconds*1e6:.2f} µs"
    if seconds < 1.0:
        return f"{seconds*1e3:.2f} ms"
    return f"{seconds:.3f} s"


def human_count(value: int) -> str:
    if value is None:
        return "—"
    return f"{int(value):,}"


@contextmanager
def recursion_headroom(depth: int, margin: int = 200) -> Iterator[None]:
    """
    Temporarily raise the interpreter recursion limit so a recursion `depth`
    frames deep fits. Quick sort on sorted input recurses n-1 levels.
    """
    previous = sys.getrecursionlimit()
    needed = depth + margin
    if needed > previous:
        sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)
