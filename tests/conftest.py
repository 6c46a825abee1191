from __future__ import annotations

from typing import List

import pytest

HEADER = "age,sex,bmi,children,smoker,region,charges"


def make_rows(charges: List[float]) -> List[str]:
    regions = ["southwest", "southeast", "northwest", "northeast"]
    rows = []
    for i, c in enumerate(charges):
        rows.append(f"{18 + i},{'female' if i % 2 else 'male'},{27.5 + i},{i % 3},{'yes' if i % 2 else 'no'},{regions[i % 4]},{c}")
    return rows


@pytest.fixture
def write_dataset(tmp_path):
    def _write(charges: List[float], name: str = "insurance.csv"):
        path = tmp_path / name
        path.write_text("\n".join([HEADER] + make_rows(charges)) + "\n", encoding="utf-8")
        return path
    return _write
