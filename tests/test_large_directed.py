import random
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from maxflow_solver.network import build_network  # noqa: E402
from maxflow_solver.solver import solve_max_flow  # noqa: E402
from maxflow_solver.utils import compute_min_cut, validate_flow  # noqa: E402

# These integration-style unit tests stress larger directed graphs without the CLI overhead.


def test_large_chain_bottleneck():
    vertex_count = 120
    edges = [(i, i + 1, 50 + (i % 9)) for i in range(vertex_count - 1)]

    network = build_network(vertex_count, edges)
    result = solve_max_flow(network)

    assert result.status == "optimal"
    assert result.value == 50
    assert len(result.paths) == 1
    assert result.paths[0].vertices == tuple(range(vertex_count))
    assert len(result.flows) == vertex_count - 1
    assert all(flow == 50 for flow in result.flows.values())


def test_parallel_lanes_each_saturate():
    # Source fans out to many disjoint two-hop lanes into the sink.
    lanes = 60
    vertex_count = lanes + 2
    sink = vertex_count - 1
    edges = []
    for lane in range(1, lanes + 1):
        edges.append((0, lane, lane))
        edges.append((lane, sink, 2 * lane))

    network = build_network(vertex_count, edges)
    result = solve_max_flow(network)

    assert result.value == sum(range(1, lanes + 1))
    assert [path.vertices for path in result.paths] == [
        (0, lane, sink) for lane in range(1, lanes + 1)
    ]


def test_random_layered_network_is_consistent():
    rng = random.Random(7)
    layers = [[0]] + [list(range(1 + 10 * k, 11 + 10 * k)) for k in range(5)] + [[51]]
    edges = []
    for upper, lower in zip(layers, layers[1:]):
        for tail in upper:
            for head in lower:
                if rng.random() < 0.4 or len(upper) == 1 or len(lower) == 1:
                    edges.append((tail, head, rng.randint(1, 30)))

    network = build_network(52, edges)
    first = solve_max_flow(network)
    second = solve_max_flow(network)

    assert first.paths == second.paths
    assert validate_flow(network, first).is_valid
    assert compute_min_cut(network).capacity == first.value
