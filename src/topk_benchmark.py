import argparse
import sys
import time
import warnings

import numpy as np
import psutil

from config import DEFAULT_N, DEFAULT_K, SAFE_LIMIT_MB
from random_input import generate_numbers
from topk_selector import SELECTORS

METHOD_LABELS = {
    "heap": "Heap",
    "sort": "Sort",
    "quickselect": "Quickselect",
}

_warmed_up = False

proc = psutil.Process()


def ram_mb():
    return proc.memory_info().rss / (1024 * 1024)


def warmup():
    global _warmed_up
    if _warmed_up:
        return

    dummy = np.arange(8, dtype=np.int64)
    try:
        for fn in SELECTORS.values():
            fn(dummy, 3)
    finally:
        _warmed_up = True


def time_selector(fn, values, k, repeat=1):
    if repeat < 1:
        raise ValueError("repeat must be >= 1")

    best = None
    result = None
    for _ in range(repeat):
        t = time.perf_counter()
        result = fn(values, k)
        elapsed = time.perf_counter() - t
        if best is None or elapsed < best:
            best = elapsed
    return result, best


def run_benchmark(n=DEFAULT_N, k=DEFAULT_K, seed=None, repeat=1, methods=None):
    if methods is None:
        methods = list(SELECTORS)
    for m in methods:
        if m not in SELECTORS:
            raise ValueError(f"Unknown method {m!r}, expected one of {tuple(SELECTORS)}")

    numbers = generate_numbers(n, seed=seed)
    if numbers.nbytes / (1024 * 1024) + ram_mb() > SAFE_LIMIT_MB:
        warnings.warn(
            f"input of {n:,} values pushes RSS past {SAFE_LIMIT_MB} MB",
            RuntimeWarning
        )

    warmup()

    truth = SELECTORS["sort"](numbers, k)
    report = {}
    for m in methods:
        result, seconds = time_selector(SELECTORS[m], numbers, k, repeat=repeat)
        if not np.array_equal(result, truth):
            raise RuntimeError(f"{m} selector disagrees with sort-based result")
        report[m] = {"seconds": seconds, "result": result}
    return report


def format_report(report, show_result=False):
    lines = []
    for i, (m, entry) in enumerate(report.items(), start=1):
        label = f"Method {i} ({METHOD_LABELS.get(m, m)})"
        lines.append(f"{label:<24} Time: {entry['seconds']:.6f} seconds")
        if show_result:
            lines.append(f"Result: {entry['result'].tolist()}")
    return "\n".join(lines)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Compare heap, sort and quickselect top-K selection"
    )
    parser.add_argument("--n", type=int, default=DEFAULT_N, help=f"Number of values (default: {DEFAULT_N})")
    parser.add_argument("--k", type=int, default=DEFAULT_K, help=f"Values to select (default: {DEFAULT_K})")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed (default: random)")
    parser.add_argument("--repeat", type=int, default=1, help="Timed runs per method, best is kept (default: 1)")
    parser.add_argument(
        "--method",
        action="append",
        choices=list(SELECTORS),
        default=None,
        help="Method to run, may be given more than once (default: all)",
    )
    parser.add_argument("--show-result", action="store_true", help="Print each selected sequence")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    if args.n < 1 or not 1 <= args.k <= args.n:
        print(f"[TopK WARN] need 1 <= k <= n, got n={args.n}, k={args.k}")
        return 2

    print(f"Start — RAM: {ram_mb():.1f} MB")
    print(f"Generating {args.n:,} numbers...")
    report = run_benchmark(args.n, args.k, seed=args.seed, repeat=args.repeat, methods=args.method)
    print("Done.\n")
    print(format_report(report, show_result=args.show_result))
    print(f"\nEnd — RAM: {ram_mb():.1f} MB")
    return 0


if __name__ == "__main__":
    sys.exit(main())
