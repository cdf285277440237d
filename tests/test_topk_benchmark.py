import numpy as np
import pytest

import topk_benchmark
from topk_benchmark import format_report, main, run_benchmark, time_selector
from topk_selector import SELECTORS, select_top_k_sort


def test_time_selector_returns_result_and_duration():
    result, seconds = time_selector(select_top_k_sort, [3, 1, 2], 2, repeat=3)
    assert result.tolist() == [3, 2]
    assert seconds >= 0.0


def test_time_selector_rejects_zero_repeat():
    with pytest.raises(ValueError):
        time_selector(select_top_k_sort, [1], 1, repeat=0)


def test_run_benchmark_covers_all_methods():
    report = run_benchmark(n=500, k=10, seed=42)
    assert list(report) == list(SELECTORS)
    first = report["heap"]["result"]
    for entry in report.values():
        assert np.array_equal(entry["result"], first)
        assert entry["seconds"] >= 0.0


def test_run_benchmark_subset_and_unknown_method():
    report = run_benchmark(n=100, k=5, seed=1, methods=["quickselect"])
    assert list(report) == ["quickselect"]
    with pytest.raises(ValueError):
        run_benchmark(n=100, k=5, methods=["bogus"])


def test_run_benchmark_detects_disagreement(monkeypatch):
    def broken(values, k):
        return np.zeros(k, dtype=np.int64)

    monkeypatch.setitem(topk_benchmark.SELECTORS, "heap", broken)
    with pytest.raises(RuntimeError):
        run_benchmark(n=100, k=5, seed=1, methods=["heap"])


def test_format_report():
    report = {
        "heap": {"seconds": 0.5, "result": np.array([9, 8])},
        "sort": {"seconds": 0.25, "result": np.array([9, 8])},
    }
    text = format_report(report, show_result=True)
    lines = text.splitlines()
    assert lines[0].startswith("Method 1 (Heap)")
    assert "0.500000 seconds" in lines[0]
    assert lines[1] == "Result: [9, 8]"
    assert lines[2].startswith("Method 2 (Sort)")


def test_main_runs(capsys):
    assert main(["--n", "300", "--k", "7", "--seed", "5", "--show-result"]) == 0
    out = capsys.readouterr().out
    assert "Method 3 (Quickselect)" in out
    assert "RAM:" in out


def test_main_rejects_bad_k(capsys):
    assert main(["--n", "3", "--k", "5"]) == 2
    assert "[TopK WARN]" in capsys.readouterr().out


def test_run_benchmark_with_tied_kth_value(monkeypatch):
    tied = np.array([1, 1, 1, 5, 1, 7, 1, 1, 9, 1], dtype=np.int64)
    monkeypatch.setattr(topk_benchmark, "generate_numbers", lambda n, seed=None: tied)
    report = run_benchmark(n=10, k=5, seed=0)
    for entry in report.values():
        assert entry["result"].tolist() == [9, 7, 5, 1, 1]
