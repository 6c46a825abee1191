# src/sortscope/records.py
from __future__ import annotations

import csv
import math
from dataclasses import dataclass, field
from itertools import islice
from pathlib import Path
from typing import List, Sequence, Tuple

FIELD_COUNT = 7


def charges_key(value: float) -> Tuple[bool, float, bool]:
    """
    Total order over floats: NaN after every number (all NaNs equal) and
    -0.0 before 0.0.
    """
    if math.isnan(value):
        return (True, 0.0, True)
    return (False, value, math.copysign(1.0, value) > 0)


@dataclass(frozen=True, order=True)
class InsuranceRecord:
    """
    One row of the insurance dataset. Only `charges` takes part in equality
    and ordering (through `charges_key`); the remaining columns are carried
    along untouched.
    """
    age: int = field(compare=False)
    sex: str = field(compare=False)
    bmi: float = field(compare=False)
    children: int = field(compare=False)
    smoker: str = field(compare=False)
    region: str = field(compare=False)
    charges: float = field(compare=False)
    sort_key: Tuple[bool, float, bool] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sort_key", charges_key(self.charges))

    def __str__(self) -> str:
        return ",".join(
            str(v) for v in (self.age, self.sex, self.bmi, self.children, self.smoker, self.region, self.charges)
        )

    @classmethod
    def from_fields(cls, parts: Sequence[str]) -> "InsuranceRecord":
        if len(parts) < FIELD_COUNT:
            raise ValueError(f"expected {FIELD_COUNT} fields, got {len(parts)}: {list(parts)!r}")
        parts = [p.strip() for p in parts]
        return cls(
            age=int(parts[0]),
            sex=parts[1],
            bmi=float(parts[2]),
            children=int(parts[3]),
            smoker=parts[4],
            region=parts[5],
            charges=float(parts[6]),
        )


def read_dataset(path: str | Path, n: int) -> List[InsuranceRecord]:
    """
    Read at most `n` records after the header line. A file with fewer data
    lines just yields fewer records; malformed lines raise ValueError.
    """
    records: List[InsuranceRecord] = []
    with open(path, "r", encoding="utf-8", newline="") as fh:
        reader = csv.reader(fh)
        next(reader, None)  # header
        for lineno, parts in enumerate(islice(reader, max(0, n)), start=2):
            try:
                records.append(InsuranceRecord.from_fields(parts))
            except ValueError as e:
                raise ValueError(f"{path}:{lineno}: {e}") from e
    return records
