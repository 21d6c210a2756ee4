"""Core data structures for maximum-flow computations."""

from __future__ import annotations

import numbers
from collections.abc import Callable
from dataclasses import dataclass, field

from .exceptions import InvalidEdgeError, SolverConfigurationError


def _is_integer(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class Edge:
    """Represents a directed edge with an integer capacity.

    Attributes:
        tail: Index of the vertex the edge leaves.
        head: Index of the vertex the edge enters.
        capacity: Maximum flow the edge can carry. Must be a non-negative integer.

    Examples:
        >>> edge = Edge(tail=0, head=1, capacity=3)

        >>> # Zero capacity is accepted and means "no edge"
        >>> Edge(tail=1, head=2, capacity=0)
        Edge(tail=1, head=2, capacity=0)

    Raises:
        InvalidEdgeError: If tail == head (self-loops not supported).
        InvalidEdgeError: If capacity is negative or not an integer.

    Note:
        Endpoint ranges depend on the network's vertex count and are checked
        by FlowNetwork.add_edge().
    """

    tail: int
    head: int
    capacity: int

    def __post_init__(self) -> None:
        if not _is_integer(self.tail) or not _is_integer(self.head):
            raise InvalidEdgeError(
                f"Edge endpoints must be integer vertex indices, got {self.tail!r} -> {self.head!r}.",
                tail=self.tail,
                head=self.head,
                capacity=self.capacity,
            )
        if self.tail == self.head:
            raise InvalidEdgeError(
                f"Self-loop detected on vertex {self.tail}. Self-loops cannot carry "
                f"source-to-sink flow and are rejected.",
                tail=self.tail,
                head=self.head,
                capacity=self.capacity,
            )
        if not _is_integer(self.capacity):
            raise InvalidEdgeError(
                f"Edge {self.tail} -> {self.head} has non-integer capacity {self.capacity!r}. "
                f"Capacities must be integers so that augmentation terminates.",
                tail=self.tail,
                head=self.head,
                capacity=self.capacity,
            )
        if self.capacity < 0:
            raise InvalidEdgeError(
                f"Edge {self.tail} -> {self.head} has negative capacity ({self.capacity}). "
                f"Capacities must be >= 0.",
                tail=self.tail,
                head=self.head,
                capacity=self.capacity,
            )


@dataclass(frozen=True)
class AugmentingPath:
    """An augmenting path found during a max-flow run.

    Attributes:
        vertices: Vertex indices from source to sink.
        flow: Bottleneck residual capacity, i.e. the flow pushed along the path.

    Examples:
        >>> path = AugmentingPath(vertices=(0, 1, 3), flow=2)
        >>> str(path)
        'Path 0 1 3 (flow 2)'
    """

    vertices: tuple[int, ...]
    flow: int

    @property
    def edges(self) -> list[tuple[int, int]]:
        return list(zip(self.vertices, self.vertices[1:]))

    def __str__(self) -> str:
        return f"Path {' '.join(str(v) for v in self.vertices)} (flow {self.flow})"


@dataclass
class MaxFlowResult:
    """Represents the output of a maximum-flow computation.

    Attributes:
        value: Total flow leaving the source.
        paths: Augmenting paths in the order they were found.
        flows: Dictionary mapping edge (tail, head) tuples to the flow they carry.
               Only edges with positive flow are listed.
        status: Solution status:
                - 'optimal': No augmenting path remains; value is the maximum flow
                - 'augmentation_limit': Stopped by SolverOptions.max_augmentations
        augmentations: Number of augmenting paths applied.
        elapsed_time: Wall-clock seconds spent in the run.

    Examples:
        >>> from maxflow_solver import build_network, solve_max_flow
        >>> network = build_network(2, [(0, 1, 5)])
        >>> result = solve_max_flow(network)
        >>> result.value, result.status
        (5, 'optimal')
        >>> result.flows
        {(0, 1): 5}
    """

    value: int
    paths: list[AugmentingPath] = field(default_factory=list)
    flows: dict[tuple[int, int], int] = field(default_factory=dict)
    status: str = "optimal"
    augmentations: int = 0
    elapsed_time: float = 0.0


@dataclass(frozen=True)
class ProgressInfo:
    """Progress information provided during a max-flow run.

    Attributes:
        augmentation: Number of augmenting paths applied so far.
        max_augmentations: Configured limit, or None when unlimited.
        flow_value: Flow pushed so far.
        last_path: Most recently applied augmenting path.
        elapsed_time: Elapsed time in seconds since the run started.
    """

    augmentation: int
    max_augmentations: int | None
    flow_value: int
    last_path: AugmentingPath
    elapsed_time: float


# Type alias for progress callback function
ProgressCallback = Callable[[ProgressInfo], None]


@dataclass
class SolverOptions:
    """Configuration options for the Edmonds-Karp solver.

    Attributes:
        max_augmentations: Stop after this many augmenting paths (default: None = no limit).
                           A stopped run reports status 'augmentation_limit' and a
                           feasible but possibly non-maximum flow.
        progress_interval: Number of augmentations between progress callbacks (default: 1).

    Examples:
        >>> options = SolverOptions()
        >>> options = SolverOptions(max_augmentations=10, progress_interval=5)
    """

    max_augmentations: int | None = None
    progress_interval: int = 1

    def __post_init__(self) -> None:
        if self.max_augmentations is not None and (
            not _is_integer(self.max_augmentations) or self.max_augmentations <= 0
        ):
            raise SolverConfigurationError(
                f"max_augmentations must be a positive integer or None, got {self.max_augmentations!r}."
            )
        if not _is_integer(self.progress_interval) or self.progress_interval <= 0:
            raise SolverConfigurationError(
                f"progress_interval must be a positive integer, got {self.progress_interval!r}."
            )
