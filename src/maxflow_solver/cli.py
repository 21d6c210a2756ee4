"""Command-line entry point: solve network files and print their reports.

Usage:
    maxflow examples/match0.txt examples/match1.txt
    maxflow examples/match0.txt --json match0_solution.json
    maxflow examples/match2.txt --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .exceptions import MaxFlowError
from .io import format_report
from .solver import load_network, save_result, solve_max_flow


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maxflow",
        description="Compute maximum flow (vertex 0 to vertex N-1) with Edmonds-Karp",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="Network files: vertex count followed by 'tail head capacity' triples",
    )
    parser.add_argument(
        "--json",
        type=Path,
        metavar="OUT",
        help="Write the result as JSON (only with a single input file)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.json is not None and len(args.files) > 1:
        parser.error("--json accepts a single input file")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    for path in args.files:
        try:
            network = load_network(path)
            result = solve_max_flow(network)
        except (MaxFlowError, OSError) as exc:
            print(f"Error: {path}: {exc}", file=sys.stderr)
            return 1
        print(format_report(network, result))
        if args.json is not None:
            save_result(args.json, result, name=network.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
