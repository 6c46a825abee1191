# src/sortscope/dataset.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple

import numpy as np

ALREADY_SORTED = "already-sorted"
SHUFFLED = "shuffled"
REVERSED = "reversed"

ORDERING_NAMES: Tuple[str, ...] = (ALREADY_SORTED, SHUFFLED, REVERSED)


@dataclass
class Orderings:
    already_sorted: List[Any]
    shuffled: List[Any]
    reversed: List[Any]

    def __iter__(self) -> Iterator[Tuple[str, List[Any]]]:
        # fixed benchmark order: sorted -> shuffled -> reversed
        yield ALREADY_SORTED, self.already_sorted
        yield SHUFFLED, self.shuffled
        yield REVERSED, self.reversed


def shuffled_copy(items: List[Any], rng: np.random.Generator) -> List[Any]:
    order = rng.permutation(len(items))
    return [items[int(i)] for i in order]


def prepare_orderings(
    base: List[Any],
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> Orderings:
    """
    Build the three benchmark inputs from one base sequence. Each list is a
    separate object; `base` itself is left as it was.

    The shuffled list is a permutation of the sorted one drawn from `rng`
    (or `np.random.default_rng(seed)` when no generator is passed).
    """
    if rng is None:
        rng = np.random.default_rng(seed)
    ordered = sorted(base)
    return Orderings(
        already_sorted=ordered,
        shuffled=shuffled_copy(ordered, rng),
        reversed=sorted(ordered, reverse=True),
    )
