"""High-level entrypoints for the Edmonds-Karp max-flow solver library."""

from .data import (
    AugmentingPath,
    Edge,
    MaxFlowResult,
    ProgressCallback,
    ProgressInfo,
    SolverOptions,
)
from .exceptions import (
    EmptyQueueError,
    InvalidEdgeError,
    InvalidNetworkError,
    MaxFlowError,
    NetworkParseError,
    SolverConfigurationError,
)
from .fifo import FifoQueue
from .io import format_report, parse_network
from .network import FlowNetwork, build_network
from .solver import load_network, save_result, solve_max_flow
from .utils import MinCut, ValidationResult, compute_min_cut, validate_flow

__version__ = "0.1.0"

__all__ = [
    # Main API
    "build_network",
    "parse_network",
    "load_network",
    "solve_max_flow",
    "save_result",
    "format_report",
    "FlowNetwork",
    "FifoQueue",
    # Data
    "Edge",
    "AugmentingPath",
    "MaxFlowResult",
    # Configuration
    "SolverOptions",
    # Progress tracking
    "ProgressCallback",
    "ProgressInfo",
    # Utilities
    "validate_flow",
    "compute_min_cut",
    "ValidationResult",
    "MinCut",
    # Exceptions
    "MaxFlowError",
    "InvalidNetworkError",
    "InvalidEdgeError",
    "NetworkParseError",
    "EmptyQueueError",
    "SolverConfigurationError",
    # Version
    "__version__",
]
