"""Tests for custom exception hierarchy."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from maxflow_solver import (  # noqa: E402
    EmptyQueueError,
    InvalidEdgeError,
    InvalidNetworkError,
    MaxFlowError,
    NetworkParseError,
    SolverConfigurationError,
)
from maxflow_solver.io import parse_network  # noqa: E402
from maxflow_solver.network import FlowNetwork  # noqa: E402


def test_all_exceptions_inherit_from_base():
    """Test that all custom exceptions inherit from MaxFlowError."""
    assert issubclass(InvalidNetworkError, MaxFlowError)
    assert issubclass(InvalidEdgeError, MaxFlowError)
    assert issubclass(NetworkParseError, MaxFlowError)
    assert issubclass(EmptyQueueError, MaxFlowError)
    assert issubclass(SolverConfigurationError, MaxFlowError)


def test_construction_errors_share_network_base():
    """Edge and parse failures are both construction errors."""
    assert issubclass(InvalidEdgeError, InvalidNetworkError)
    assert issubclass(NetworkParseError, InvalidNetworkError)


def test_base_exception_is_exception():
    """Test that MaxFlowError inherits from Exception."""
    assert issubclass(MaxFlowError, Exception)


def test_invalid_edge_carries_edge_fields():
    """Test InvalidEdgeError exposes the rejected edge."""
    network = FlowNetwork(3)
    with pytest.raises(InvalidEdgeError) as exc_info:
        network.add_edge(5, 1, 2)

    assert exc_info.value.tail == 5
    assert exc_info.value.head == 1
    assert exc_info.value.capacity == 2
    assert "tail outside [0, 3)" in str(exc_info.value)


def test_parse_error_reports_token_position():
    """Test NetworkParseError points at the offending token."""
    with pytest.raises(NetworkParseError) as exc_info:
        parse_network("three 0 1 2")

    assert exc_info.value.token_index == 0
    assert "'three'" in str(exc_info.value)


def test_catch_all_with_base_class():
    """Test that one except clause covers every construction failure."""
    for text in ("", "1", "3 0 0 1", "3 0 1 -2", "3 0 1"):
        with pytest.raises(MaxFlowError):
            parse_network(text)


def test_exception_messages_are_informative():
    """Test that exception messages contain the offending values."""
    with pytest.raises(InvalidNetworkError) as exc_info:
        FlowNetwork(1)
    assert "at least 2" in str(exc_info.value)
    assert "1" in str(exc_info.value)
