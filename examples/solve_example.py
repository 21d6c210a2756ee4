"""Example script demonstrating usage of the Edmonds-Karp max-flow solver."""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from maxflow_solver import format_report, load_network, save_result, solve_max_flow  # noqa: E402


def main() -> None:
    base_dir = Path(__file__).resolve().parent
    for name in ("match0.txt", "match1.txt", "match2.txt", "match3.txt"):
        network = load_network(base_dir / name)
        result = solve_max_flow(network)
        print(format_report(network, result))
        print(f"Solved {name}: status={result.status}, max flow={result.value}")

    # Persist the first network's result for downstream tooling
    network = load_network(base_dir / "match0.txt")
    result = solve_max_flow(network)
    save_result(base_dir / "match0_solution.json", result, name=network.name)


if __name__ == "__main__":
    main()
