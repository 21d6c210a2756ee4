"""Public solver entrypoints."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from .data import MaxFlowResult, ProgressCallback, SolverOptions
from .io import load_network as load_network_file
from .io import save_result as save_result_file
from .network import FlowNetwork


def solve_max_flow(
    network: FlowNetwork,
    options: SolverOptions | None = None,
    max_augmentations: int | None = None,
    progress_callback: ProgressCallback | None = None,
) -> MaxFlowResult:
    """Compute the maximum flow from vertex 0 to vertex N-1 with Edmonds-Karp.

    This is the main entry point for solving max-flow problems. Each augmenting
    path is a shortest path (fewest edges) in the residual graph, found by
    breadth-first search with neighbors explored in vertex-index order, so the
    sequence of paths is fully determined by the capacities.

    Args:
        network: The network to solve. Its residual matrix and path log are
                 reset at the start of the run.
        options: Solver configuration options. If None, uses defaults.
        max_augmentations: Maximum number of augmenting paths to apply.
                           Overrides options.max_augmentations if provided.
        progress_callback: Optional callback function to receive progress updates.
                           Called every options.progress_interval augmentations.

    Returns:
        MaxFlowResult containing:
        - value: Total flow from source to sink
        - paths: Augmenting paths with their bottleneck flows, in order found
        - flows: Flow on each edge carrying positive flow
        - status: 'optimal' or 'augmentation_limit'
        - augmentations: Number of augmenting paths applied

    Raises:
        SolverConfigurationError: If max_augmentations is not a positive integer.

    Time Complexity:
        O(V * E) augmentations, each an O(V^2) scan of the residual matrix.

    Space Complexity:
        O(V^2) for the capacity and residual matrices.

    Examples:
        >>> from maxflow_solver import build_network, solve_max_flow
        >>> network = build_network(4, [(0, 1, 3), (0, 2, 2), (1, 3, 2), (2, 3, 3)])
        >>> result = solve_max_flow(network)
        >>> result.value
        4
        >>> [str(path) for path in result.paths]
        ['Path 0 1 3 (flow 2)', 'Path 0 2 3 (flow 2)']

    See Also:
        - FlowNetwork.max_flow(): The underlying algorithm.
        - compute_min_cut(): Certify the result via max-flow/min-cut duality.
    """
    options = options if options is not None else SolverOptions()
    if max_augmentations is not None:
        options = replace(options, max_augmentations=max_augmentations)
    return network.max_flow(options=options, progress_callback=progress_callback)


def load_network(path: str | Path) -> FlowNetwork:
    """Load a network from a text file of whitespace-separated integers.

    Args:
        path: Path to a file holding the vertex count followed by
              ``tail head capacity`` triples.

    Returns:
        FlowNetwork named after the file, ready to solve.

    Raises:
        FileNotFoundError: If file does not exist.
        NetworkParseError: If the text is malformed.
        InvalidEdgeError: If any triple is an invalid edge.

    Examples:
        >>> from maxflow_solver import load_network, solve_max_flow
        >>> network = load_network("examples/match0.txt")
        >>> result = solve_max_flow(network)
    """
    return load_network_file(path)


def save_result(path: str | Path, result: MaxFlowResult, name: str | None = None) -> None:
    """Save a max-flow result to a JSON file.

    Args:
        path: Path where JSON file will be written.
        result: MaxFlowResult from solve_max_flow().
        name: Optional network name recorded in the file.

    Raises:
        OSError: If file cannot be written.
    """
    save_result_file(path, result, name=name)
