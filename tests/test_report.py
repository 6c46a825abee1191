from __future__ import annotations

import json

from sortscope.runner import run_benchmark


def _run(tmp_path, dataset, algorithm, **kwargs):
    return run_benchmark(
        dataset,
        algorithm,
        4,
        sorted_out=tmp_path / "sorted.txt",
        analysis_out=tmp_path / "analysis.txt",
        verbose=False,
        **kwargs,
    )


def test_html_report_for_counting_algorithm(tmp_path, write_dataset):
    path = write_dataset([4.0, 1.0, 3.0, 2.0])
    out = tmp_path / "report.html"
    res = _run(tmp_path, path, "bubble", html_out=out, title="Bubble Report")
    assert out.exists()
    html = out.read_text(encoding="utf-8")
    assert html == res.html
    assert "Bubble Report" in html
    assert "Results per Ordering" in html
    assert "Elapsed Time" in html
    assert "Operation Count" in html
    assert "bubble,reversed,4,comparisons,6" in html
    assert res._repr_html_() == html


def test_html_report_without_counts(tmp_path, write_dataset):
    path = write_dataset([4.0, 1.0, 3.0, 2.0])
    res = _run(tmp_path, path, "merge", html_out=tmp_path / "r.html")
    assert "Elapsed Time" in res.html
    assert "Operation Count" not in res.html


def test_html_report_unknown_algorithm(tmp_path, write_dataset):
    path = write_dataset([4.0, 1.0, 3.0, 2.0])
    res = _run(tmp_path, path, "selection", html_out=tmp_path / "r.html")
    assert "Unrecognized algorithm" in res.html


def test_json_export(tmp_path, write_dataset):
    path = write_dataset([4.0, 1.0, 3.0, 2.0])
    out = tmp_path / "nested" / "run.json"
    _run(tmp_path, path, "transposition", json_out=out, seed=2)
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["algorithm"] == "transposition"
    assert data["n"] == 4
    assert [c["input_type"] for c in data["cases"]] == ["already-sorted", "shuffled", "reversed"]
    first = data["cases"][0]
    assert first["size"] == 4
    assert first["count"] == 2
    assert first["metrics"][0] == "transposition,already-sorted,4,comparisons,2"
    assert first["elapsed_human"]
