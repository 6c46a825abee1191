from __future__ import annotations

import pytest

from sortscope.cli import build_parser, main


@pytest.mark.parametrize("argv", [["data.csv", "merge"], ["data.csv", "merge", "3", "extra"], []])
def test_wrong_argument_count_prints_usage_and_touches_nothing(tmp_path, monkeypatch, capsys, argv):
    monkeypatch.chdir(tmp_path)
    assert main(argv) == 0
    assert "usage: sortscope" in capsys.readouterr().out
    assert not (tmp_path / "sorted.txt").exists()
    assert not (tmp_path / "analysis.txt").exists()


def test_non_numeric_n_aborts(tmp_path, monkeypatch, write_dataset):
    path = write_dataset([1.0, 2.0])
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ValueError):
        main([str(path), "merge", "three", "--quiet"])
    assert not (tmp_path / "sorted.txt").exists()


def test_algorithm_argument_is_lowercased():
    args = build_parser().parse_args(["d.csv", "QuIcK", "10"])
    assert args.algorithm == "quick"
    assert args.n == "10"


def test_main_writes_default_outputs(tmp_path, monkeypatch, write_dataset, capsys):
    path = write_dataset([500.0, 100.0, 300.0])
    monkeypatch.chdir(tmp_path)
    assert main([str(path), "MERGE", "3", "--seed", "4"]) == 0
    assert "Done." in capsys.readouterr().out
    sorted_text = (tmp_path / "sorted.txt").read_text(encoding="utf-8")
    assert sorted_text.startswith("=== merge / already-sorted / N=3 ===\n")
    assert len((tmp_path / "analysis.txt").read_text(encoding="utf-8").splitlines()) == 5


def test_main_quiet_with_custom_paths(tmp_path, write_dataset, capsys):
    path = write_dataset([3.0, 2.0, 1.0])
    out_sorted = tmp_path / "out" / "s.txt"
    out_sorted.parent.mkdir()
    main([
        str(path), "heap", "3",
        "--sorted-out", str(out_sorted),
        "--analysis-out", str(tmp_path / "a.txt"),
        "--quiet",
    ])
    assert capsys.readouterr().out == ""
    assert out_sorted.exists()
    assert (tmp_path / "a.txt").exists()


def test_main_missing_dataset_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "missing.csv"), "merge", "3", "--quiet",
              "--sorted-out", str(tmp_path / "s.txt"), "--analysis-out", str(tmp_path / "a.txt")])
