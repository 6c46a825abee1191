# src/sortscope/cli.py
from __future__ import annotations

import argparse
from typing import List, Optional

from .runner import ALGORITHMS, run_benchmark


class UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    # report bad invocations to main() instead of exiting with status 2
    def error(self, message: str) -> None:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="sortscope",
        description="Benchmark one sorting algorithm on sorted, shuffled and reversed copies of a dataset.",
        epilog=f"Algorithms: {', '.join(ALGORITHMS)} (case-insensitive).",
    )
    parser.add_argument("dataset", help="CSV file with a header line followed by data lines")
    parser.add_argument("algorithm", type=str.lower, help="algorithm to run")
    # converted in main(): a non-numeric N is a fault, not a usage error
    parser.add_argument("n", metavar="N", help="number of records to read")
    parser.add_argument("--sorted-out", default="sorted.txt", help="sorted sequence dump (default: %(default)s)")
    parser.add_argument("--analysis-out", default="analysis.txt", help="append-only metric log (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None, help="seed for the shuffled ordering")
    parser.add_argument("--html", dest="html_out", default=None, help="also write an HTML report")
    parser.add_argument("--json", dest="json_out", default=None, help="also write the run as JSON")
    parser.add_argument("--quiet", action="store_true", help="no progress output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage()
        print(f"{parser.prog}: {e}")
        return 0
    run_benchmark(
        args.dataset,
        args.algorithm,
        int(args.n),
        sorted_out=args.sorted_out,
        analysis_out=args.analysis_out,
        seed=args.seed,
        html_out=args.html_out,
        json_out=args.json_out,
        verbose=not args.quiet,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
