#!/usr/bin/env python
"""
NetworkX Comparison Example

Compares maxflow_solver with NetworkX's maximum_flow on random layered
networks. Both libraries must agree on the flow value; maxflow_solver also
reports the sequence of augmenting paths it applied.
"""

import random
import time

import networkx as nx

from maxflow_solver import build_network, solve_max_flow


def random_edges(vertex_count: int, density: float, seed: int) -> list[tuple[int, int, int]]:
    rng = random.Random(seed)
    edges = []
    for tail in range(vertex_count):
        for head in range(vertex_count):
            if tail != head and rng.random() < density:
                edges.append((tail, head, rng.randint(1, 20)))
    return edges


def main() -> None:
    print("=" * 80)
    print("  maxflow_solver vs NetworkX maximum_flow")
    print("=" * 80 + "\n")
    print(f"{'vertices':>8} {'edges':>6} {'value':>6} {'paths':>6} {'ours (ms)':>10} {'nx (ms)':>9}")

    for vertex_count in (10, 25, 50, 100):
        edges = random_edges(vertex_count, density=0.15, seed=vertex_count)

        network = build_network(vertex_count, edges)
        start = time.perf_counter()
        result = solve_max_flow(network)
        ours = (time.perf_counter() - start) * 1000

        G = nx.DiGraph()
        G.add_nodes_from(range(vertex_count))
        for tail, head, capacity in edges:
            G.add_edge(tail, head, capacity=capacity)
        start = time.perf_counter()
        nx_value = nx.maximum_flow_value(G, 0, vertex_count - 1)
        theirs = (time.perf_counter() - start) * 1000

        assert nx_value == result.value, (nx_value, result.value)
        print(
            f"{vertex_count:>8} {len(edges):>6} {result.value:>6} "
            f"{result.augmentations:>6} {ours:>10.2f} {theirs:>9.2f}"
        )


if __name__ == "__main__":
    main()
