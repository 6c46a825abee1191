from __future__ import annotations

import numpy as np
import pytest

from sortscope.dataset import ORDERING_NAMES, prepare_orderings
from sortscope.records import InsuranceRecord, read_dataset


def test_read_dataset_skips_header_and_parses(write_dataset):
    path = write_dataset([500.0, 100.0, 300.0])
    records = read_dataset(path, 3)
    assert [r.charges for r in records] == [500.0, 100.0, 300.0]
    first = records[0]
    assert first.age == 18
    assert first.sex == "male"
    assert first.bmi == 27.5
    assert first.region == "southwest"
    assert str(first) == "18,male,27.5,0,no,southwest,500.0"


def test_read_dataset_reads_prefix_only(write_dataset):
    path = write_dataset([float(x) for x in range(10)])
    assert len(read_dataset(path, 4)) == 4


def test_read_dataset_short_file_is_not_an_error(write_dataset):
    path = write_dataset([1.0, 2.0])
    assert len(read_dataset(path, 50)) == 2
    assert read_dataset(path, 0) == []


def test_read_dataset_malformed_line(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("h\n19,female,27.9,0,yes,southwest,abc\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_dataset(path, 5)


def test_read_dataset_missing_fields(tmp_path):
    path = tmp_path / "short.csv"
    path.write_text("h\n19,female,27.9\n", encoding="utf-8")
    with pytest.raises(ValueError, match="expected 7 fields"):
        read_dataset(path, 5)


def test_read_dataset_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_dataset(tmp_path / "nope.csv", 5)


def test_record_ordering_uses_charges_only():
    a = InsuranceRecord(60, "male", 40.0, 3, "yes", "northeast", 100.0)
    b = InsuranceRecord(18, "female", 20.0, 0, "no", "southwest", 200.0)
    c = InsuranceRecord(30, "female", 22.0, 1, "no", "southeast", 100.0)
    assert a < b
    assert b > c
    assert a == c
    assert a <= c


def test_prepare_orderings_shapes():
    base = [5, 3, 9, 1, 7]
    o = prepare_orderings(base, seed=3)
    assert o.already_sorted == [1, 3, 5, 7, 9]
    assert o.reversed == [9, 7, 5, 3, 1]
    assert sorted(o.shuffled) == o.already_sorted
    assert base == [5, 3, 9, 1, 7]
    assert [name for name, _ in o] == list(ORDERING_NAMES)


def test_prepare_orderings_lists_are_independent():
    o = prepare_orderings([2, 1, 3], seed=0)
    assert o.already_sorted is not o.shuffled
    assert o.already_sorted is not o.reversed
    o.shuffled.append(99)
    assert 99 not in o.already_sorted


def test_prepare_orderings_seeded_shuffle_is_reproducible():
    base = list(range(40))
    a = prepare_orderings(base, seed=42).shuffled
    b = prepare_orderings(base, rng=np.random.default_rng(42)).shuffled
    assert a == b


def test_prepare_orderings_empty():
    o = prepare_orderings([], seed=1)
    assert o.already_sorted == [] and o.shuffled == [] and o.reversed == []
