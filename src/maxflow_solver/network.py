"""Edmonds-Karp maximum flow on an adjacency-matrix network."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from .data import (
    AugmentingPath,
    Edge,
    MaxFlowResult,
    ProgressCallback,
    ProgressInfo,
    SolverOptions,
    _is_integer,
)
from .exceptions import InvalidEdgeError, InvalidNetworkError
from .fifo import FifoQueue

NO_PREDECESSOR = -1  # Predecessor sentinel for the source and unreached vertices.
CAPACITY_DTYPE = np.int64
MAX_CAPACITY = int(np.iinfo(CAPACITY_DTYPE).max)


@dataclass
class _SearchState:
    """Scratch state of one breadth-first search, discarded after the call."""

    visited: np.ndarray
    predecessor: np.ndarray

    @classmethod
    def rooted_at(cls, vertex_count: int, source: int) -> _SearchState:
        visited = np.zeros(vertex_count, dtype=bool)
        predecessor = np.full(vertex_count, NO_PREDECESSOR, dtype=np.int64)
        visited[source] = True
        return cls(visited=visited, predecessor=predecessor)

    def chain(self, source: int, sink: int) -> list[tuple[int, int]]:
        # Edges (w, v) of the found path, walked from the sink back to the source.
        edges = []
        v = sink
        while v != source:
            w = int(self.predecessor[v])
            edges.append((w, v))
            v = w
        return edges


class FlowNetwork:
    """Directed capacitated network solved with the Edmonds-Karp algorithm.

    Capacities live in a dense ``vertex_count x vertex_count`` integer matrix;
    ``capacity[i, j] == 0`` means there is no edge i -> j. The source is vertex 0
    and the sink is vertex ``vertex_count - 1``.

    Each call to max_flow() resets the residual matrix from the capacities, so
    repeated runs on the same network are independent and produce identical
    path logs.

    Attributes:
        vertex_count: Number of vertices, fixed at construction.
        name: Optional label used in reports (typically the source file name).
        source: Source vertex index (0).
        sink: Sink vertex index (vertex_count - 1).
        path_log: Augmenting paths found by the latest run, in order.

    Examples:
        >>> network = FlowNetwork(4)
        >>> network.add_edge(0, 1, 3)
        >>> network.add_edge(0, 2, 2)
        >>> network.add_edge(1, 3, 2)
        >>> network.add_edge(2, 3, 3)
        >>> network.max_flow().value
        4
        >>> [str(path) for path in network.path_log]
        ['Path 0 1 3 (flow 2)', 'Path 0 2 3 (flow 2)']
    """

    def __init__(self, vertex_count: int, name: str | None = None) -> None:
        if not _is_integer(vertex_count) or vertex_count < 2:
            raise InvalidNetworkError(
                f"Network needs an integer vertex count of at least 2 so that source "
                f"and sink differ, got {vertex_count!r}."
            )
        self.logger = logging.getLogger(__name__)
        self.vertex_count = int(vertex_count)
        self.name = name
        self.source = 0
        self.sink = self.vertex_count - 1
        shape = (self.vertex_count, self.vertex_count)
        self._capacity = np.zeros(shape, dtype=CAPACITY_DTYPE)
        self._residual = np.zeros(shape, dtype=CAPACITY_DTYPE)
        self.path_log: list[AugmentingPath] = []
        self._solved = False

    def __repr__(self) -> str:
        return (
            f"FlowNetwork(vertex_count={self.vertex_count}, "
            f"edges={self.edge_count}, name={self.name!r})"
        )

    @property
    def capacity(self) -> np.ndarray:
        """Read-only view of the capacity matrix."""
        view = self._capacity.view()
        view.flags.writeable = False
        return view

    @property
    def residual(self) -> np.ndarray:
        """Read-only view of the residual matrix left by the latest run."""
        view = self._residual.view()
        view.flags.writeable = False
        return view

    @property
    def solved(self) -> bool:
        """True once max_flow() has run and no edge was changed since."""
        return self._solved

    @property
    def edge_count(self) -> int:
        return int(np.count_nonzero(self._capacity))

    def edges(self) -> list[Edge]:
        """Return the edges with positive capacity in (tail, head) order."""
        tails, heads = np.nonzero(self._capacity)
        return [
            Edge(tail=int(t), head=int(h), capacity=int(self._capacity[t, h]))
            for t, h in zip(tails, heads)
        ]

    def add_edge(self, source: int, destination: int, capacity: int) -> None:
        """Set the capacity of edge ``source -> destination``.

        A later call for the same ordered pair overwrites the earlier capacity;
        parallel edges are not summed.

        Raises:
            InvalidEdgeError: If an endpoint is outside [0, vertex_count), the edge
                is a self-loop, or the capacity is negative, non-integer, or too
                large for the capacity matrix. The network is left unchanged.
        """
        edge = Edge(tail=source, head=destination, capacity=capacity)
        for role, vertex in (("tail", edge.tail), ("head", edge.head)):
            if not 0 <= vertex < self.vertex_count:
                raise InvalidEdgeError(
                    f"Edge {edge.tail} -> {edge.head} has {role} outside "
                    f"[0, {self.vertex_count}).",
                    tail=edge.tail,
                    head=edge.head,
                    capacity=edge.capacity,
                )
        # Pushing flow moves capacity between the two directions of a pair, so the
        # pair total bounds every residual entry.
        reverse = int(self._capacity[edge.head, edge.tail])
        if edge.capacity + reverse > MAX_CAPACITY:
            raise InvalidEdgeError(
                f"Edge {edge.tail} -> {edge.head} capacity {edge.capacity} plus reverse "
                f"capacity {reverse} exceeds the supported maximum {MAX_CAPACITY}.",
                tail=edge.tail,
                head=edge.head,
                capacity=edge.capacity,
            )
        self._capacity[edge.tail, edge.head] = edge.capacity
        self._solved = False

    def add_edges(self, edges: Iterable[Edge | tuple[int, int, int]]) -> None:
        """Insert edges in order, stopping at the first invalid one."""
        for edge in edges:
            if isinstance(edge, Edge):
                self.add_edge(edge.tail, edge.head, edge.capacity)
            else:
                tail, head, capacity = edge
                self.add_edge(tail, head, capacity)

    def find_augmenting_path(self) -> _SearchState | None:
        """Breadth-first search for a shortest source-sink path in the residual graph.

        Neighbors are explored in increasing vertex order and the search stops as
        soon as the sink is reached, so the chosen path depends only on the
        residual matrix.

        Returns:
            The search state holding the predecessor chain when a path exists,
            None otherwise.
        """
        state = _SearchState.rooted_at(self.vertex_count, self.source)
        queue: FifoQueue[int] = FifoQueue([self.source])
        while not queue.is_empty():
            v = queue.dequeue()
            for i in np.flatnonzero(self._residual[v] > 0).tolist():
                if state.visited[i]:
                    continue
                state.visited[i] = True
                state.predecessor[i] = v
                if i == self.sink:
                    return state
                queue.enqueue(i)
        return None

    def augment(self, state: _SearchState) -> AugmentingPath:
        """Push the bottleneck flow along the path recorded in ``state``."""
        chain = state.chain(self.source, self.sink)
        w, v = chain[0]
        bottleneck = int(self._residual[w, v])
        for w, v in chain[1:]:
            bottleneck = min(bottleneck, int(self._residual[w, v]))

        vertices = [self.sink] + [w for w, _ in chain]
        path = AugmentingPath(vertices=tuple(reversed(vertices)), flow=bottleneck)
        self.path_log.append(path)

        for w, v in chain:
            self._residual[w, v] -= bottleneck
            self._residual[v, w] += bottleneck
        return path

    def max_flow(
        self,
        options: SolverOptions | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> MaxFlowResult:
        """Compute the maximum source-sink flow.

        Args:
            options: Solver configuration. If None, uses defaults (no augmentation limit).
            progress_callback: Optional function receiving ProgressInfo every
                options.progress_interval augmentations.

        Returns:
            MaxFlowResult with the flow value, path log and per-edge flows.

        Time Complexity:
            O(V * E) augmentations, each an O(V^2) matrix BFS.
        """
        options = options if options is not None else SolverOptions()
        start_time = time.time()
        np.copyto(self._residual, self._capacity)
        self.path_log = []
        self._solved = False

        self.logger.info(
            "Starting Edmonds-Karp max flow",
            extra={
                "network": self.name,
                "vertices": self.vertex_count,
                "edges": self.edge_count,
                "max_augmentations": options.max_augmentations,
            },
        )

        value = 0
        status = "optimal"
        while True:
            state = self.find_augmenting_path()
            if state is None:
                break
            if (
                options.max_augmentations is not None
                and len(self.path_log) >= options.max_augmentations
            ):
                status = "augmentation_limit"
                self.logger.warning(
                    "Augmentation limit reached before the flow was proven maximal",
                    extra={"augmentations": len(self.path_log), "flow_value": value},
                )
                break
            path = self.augment(state)
            value += path.flow

            if self.logger.isEnabledFor(logging.DEBUG):
                self.logger.debug(
                    f"Augmenting path: {path}",
                    extra={"vertices": path.vertices, "bottleneck": path.flow},
                )
            if progress_callback is not None and len(self.path_log) % options.progress_interval == 0:
                progress_callback(
                    ProgressInfo(
                        augmentation=len(self.path_log),
                        max_augmentations=options.max_augmentations,
                        flow_value=value,
                        last_path=path,
                        elapsed_time=time.time() - start_time,
                    )
                )

        self._solved = True
        elapsed = time.time() - start_time
        self.logger.info(
            "Edmonds-Karp max flow finished",
            extra={
                "status": status,
                "flow_value": value,
                "augmentations": len(self.path_log),
                "elapsed_ms": elapsed * 1000,
            },
        )
        return MaxFlowResult(
            value=value,
            paths=list(self.path_log),
            flows=self.edge_flows(),
            status=status,
            augmentations=len(self.path_log),
            elapsed_time=elapsed,
        )

    def flow_matrix(self) -> np.ndarray:
        """Flow carried on each original edge after the latest run.

        ``capacity - residual`` is the net flow i -> j (negative when flow runs
        j -> i). Clipping at zero keeps each pair's flow on the direction that
        carries it, which also covers pairs with capacity in both directions.
        All zeros until max_flow() has run.
        """
        if not self._solved:
            return np.zeros_like(self._capacity)
        return np.maximum(self._capacity - self._residual, 0)

    def edge_flows(self) -> dict[tuple[int, int], int]:
        """Map each edge with positive flow to that flow.

        Entries are ordered by unordered vertex pair (min(i, j), max(i, j)).
        """
        flows = self.flow_matrix()
        tails, heads = np.nonzero(flows)
        keys = sorted(
            zip(tails.tolist(), heads.tolist()),
            key=lambda edge: (min(edge), max(edge), edge[0]),
        )
        return {(t, h): int(flows[t, h]) for t, h in keys}

    def flow_value(self) -> int:
        """Net flow leaving the source after the latest run."""
        flows = self.flow_matrix()
        # Python ints so the totals cannot wrap at the int64 limit
        return sum(flows[self.source].tolist()) - sum(flows[:, self.source].tolist())


def build_network(
    vertex_count: int,
    edges: Iterable[Edge | tuple[int, int, int]],
    name: str | None = None,
) -> FlowNetwork:
    """Factory helper used by the IO layer to assemble a FlowNetwork.

    Raises:
        InvalidNetworkError: If vertex_count is below 2.
        InvalidEdgeError: On the first invalid edge; no network is returned.
    """
    network = FlowNetwork(vertex_count, name=name)
    network.add_edges(edges)
    return network
