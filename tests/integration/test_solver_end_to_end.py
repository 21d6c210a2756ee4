import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from maxflow_solver.solver import load_network, save_result, solve_max_flow  # noqa: E402
from maxflow_solver.utils import compute_min_cut, validate_flow  # noqa: E402

EXAMPLES_DIR = PROJECT_ROOT / "examples"


def test_solver_end_to_end(tmp_path: Path):
    # Exercise the public solver facade by round-tripping a small text instance.
    problem_path = tmp_path / "chain.txt"
    problem_path.write_text("4\n0 1 4\n1 2 4\n2 3 4\n0 3 2\n", encoding="utf-8")

    network = load_network(problem_path)
    result = solve_max_flow(network)

    assert result.status == "optimal"
    assert result.value == 6
    # The direct edge is the shortest path and is found first
    assert [str(path) for path in result.paths] == [
        "Path 0 3 (flow 2)",
        "Path 0 1 2 3 (flow 4)",
    ]
    assert result.flows == {(0, 1): 4, (0, 3): 2, (1, 2): 4, (2, 3): 4}

    output_path = tmp_path / "solution.json"
    save_result(output_path, result, name=network.name)
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["name"] == "chain.txt"
    assert payload["value"] == 6


def test_bundled_examples_solve_to_known_values():
    expected = {"match0.txt": 4, "match1.txt": 23, "match2.txt": 2, "match3.txt": 0}
    for name, value in expected.items():
        network = load_network(EXAMPLES_DIR / name)
        result = solve_max_flow(network)

        assert result.value == value, name
        assert validate_flow(network, result).is_valid, name
        assert compute_min_cut(network).capacity == value, name
