"""
Demonstrates utility functions for analyzing max-flow solutions.

This example shows how to:
- Validate a flow for capacity respect and conservation
- Certify maximality with a minimum cut
- Follow progress while the solver runs
"""

from maxflow_solver import (
    ProgressInfo,
    build_network,
    compute_min_cut,
    solve_max_flow,
    validate_flow,
)


def main():
    """Demonstrate utility functions on the textbook six-vertex network."""

    edges = [
        (0, 1, 16),
        (0, 2, 13),
        (1, 2, 10),
        (2, 1, 4),
        (1, 3, 12),
        (3, 2, 9),
        (2, 4, 14),
        (4, 3, 7),
        (3, 5, 20),
        (4, 5, 4),
    ]
    network = build_network(6, edges, name="textbook")

    print("=" * 80)
    print("MAX-FLOW UTILITY FUNCTIONS DEMONSTRATION")
    print("=" * 80)
    print()

    def report_progress(info: ProgressInfo) -> None:
        print(f"  augmentation {info.augmentation}: {info.last_path} -> total {info.flow_value}")

    result = solve_max_flow(network, progress_callback=report_progress)
    print()
    print(f"Status: {result.status}")
    print(f"Maximum flow: {result.value}")
    print()

    validation = validate_flow(network, result)
    print(f"Flow valid: {validation.is_valid}")
    for error in validation.errors:
        print(f"  - {error}")
    print()

    cut = compute_min_cut(network)
    print(f"Minimum cut: S={cut.source_side} T={cut.sink_side}")
    for tail, head in cut.edges:
        print(f"  {tail}->{head} capacity {network.capacity[tail, head]}")
    print(f"Cut capacity {cut.capacity} == max flow {result.value}: {cut.capacity == result.value}")


if __name__ == "__main__":
    main()
