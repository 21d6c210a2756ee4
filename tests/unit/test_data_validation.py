"""Tests for dataclass validation in maxflow_solver.data."""

import sys
from pathlib import Path

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from maxflow_solver.data import AugmentingPath, Edge, MaxFlowResult, SolverOptions  # noqa: E402
from maxflow_solver.exceptions import InvalidEdgeError, SolverConfigurationError  # noqa: E402


class TestEdgeValidation:
    """Edges reject self-loops and invalid capacities at construction."""

    def test_valid_edge(self):
        edge = Edge(tail=0, head=1, capacity=3)
        assert (edge.tail, edge.head, edge.capacity) == (0, 1, 3)

    def test_zero_capacity_allowed(self):
        assert Edge(tail=0, head=1, capacity=0).capacity == 0

    def test_numpy_integers_allowed(self):
        edge = Edge(tail=np.int64(0), head=np.int32(2), capacity=np.int64(7))
        assert edge.capacity == 7

    def test_self_loop_rejected(self):
        with pytest.raises(InvalidEdgeError, match="Self-loop"):
            Edge(tail=2, head=2, capacity=1)

    def test_negative_capacity_rejected(self):
        with pytest.raises(InvalidEdgeError, match="negative capacity") as exc_info:
            Edge(tail=0, head=1, capacity=-1)
        assert exc_info.value.capacity == -1

    @pytest.mark.parametrize("capacity", [1.0, "3", None, True])
    def test_non_integer_capacity_rejected(self, capacity):
        with pytest.raises(InvalidEdgeError, match="non-integer capacity"):
            Edge(tail=0, head=1, capacity=capacity)

    def test_non_integer_endpoint_rejected(self):
        with pytest.raises(InvalidEdgeError, match="integer vertex indices"):
            Edge(tail="a", head=1, capacity=1)

    def test_edge_is_frozen(self):
        edge = Edge(tail=0, head=1, capacity=3)
        with pytest.raises(AttributeError):
            edge.capacity = 4


class TestAugmentingPath:
    def test_str_matches_report_format(self):
        assert str(AugmentingPath(vertices=(0, 2, 5), flow=7)) == "Path 0 2 5 (flow 7)"

    def test_edges_follow_vertex_order(self):
        path = AugmentingPath(vertices=(0, 2, 5), flow=7)
        assert path.edges == [(0, 2), (2, 5)]


class TestMaxFlowResult:
    def test_defaults(self):
        result = MaxFlowResult(value=0)
        assert result.paths == []
        assert result.flows == {}
        assert result.status == "optimal"
        assert result.augmentations == 0


class TestSolverOptions:
    def test_defaults(self):
        options = SolverOptions()
        assert options.max_augmentations is None
        assert options.progress_interval == 1

    @pytest.mark.parametrize("limit", [0, -5, 2.5])
    def test_invalid_max_augmentations(self, limit):
        with pytest.raises(SolverConfigurationError, match="max_augmentations"):
            SolverOptions(max_augmentations=limit)

    @pytest.mark.parametrize("interval", [0, -1, "2"])
    def test_invalid_progress_interval(self, interval):
        with pytest.raises(SolverConfigurationError, match="progress_interval"):
            SolverOptions(progress_interval=interval)
