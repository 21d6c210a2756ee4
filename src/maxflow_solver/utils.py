"""Utility functions for analyzing and validating max-flow solutions."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .data import MaxFlowResult
from .fifo import FifoQueue
from .network import FlowNetwork


@dataclass
class ValidationResult:
    """Results from validating a flow solution.

    Attributes:
        is_valid: True if the flow satisfies all constraints.
        errors: List of validation error messages (empty if valid).
        flow_balance: Dict mapping vertex index to net inflow (inflow - outflow).
        capacity_violations: List of edges whose flow exceeds capacity.
    """

    is_valid: bool
    errors: list[str]
    flow_balance: dict[int, int]
    capacity_violations: list[tuple[int, int]]


@dataclass
class MinCut:
    """A source-sink cut of a network.

    Attributes:
        source_side: Vertices reachable from the source in the final residual graph.
        sink_side: All other vertices.
        edges: Original edges crossing from source_side to sink_side.
        capacity: Total capacity of the crossing edges.
    """

    source_side: list[int]
    sink_side: list[int]
    edges: list[tuple[int, int]]
    capacity: int


def validate_flow(network: FlowNetwork, result: MaxFlowResult) -> ValidationResult:
    """Validate that a flow solution satisfies all network constraints.

    Checks:
    - Capacity constraints (0 <= flow <= capacity for each edge)
    - Flow conservation at every vertex other than source and sink
    - Net outflow of the source and net inflow of the sink equal result.value

    Args:
        network: Network the result was computed on.
        result: Solution to validate.

    Returns:
        ValidationResult with detailed information about any violations.
    """
    errors: list[str] = []
    capacity_violations: list[tuple[int, int]] = []
    flow_balance = {vertex: 0 for vertex in range(network.vertex_count)}
    capacity = network.capacity

    for (tail, head), flow in result.flows.items():
        if not (0 <= tail < network.vertex_count and 0 <= head < network.vertex_count):
            errors.append(f"Edge ({tail}, {head}) is not part of the network")
            continue
        flow_balance[tail] -= flow
        flow_balance[head] += flow

        limit = int(capacity[tail, head])
        if flow < 0:
            errors.append(f"Edge ({tail}, {head}): negative flow {flow}")
        if flow > limit:
            capacity_violations.append((tail, head))
            errors.append(f"Edge ({tail}, {head}): flow {flow} exceeds capacity {limit}")

    for vertex, balance in flow_balance.items():
        if vertex in (network.source, network.sink):
            continue
        if balance != 0:
            errors.append(f"Vertex {vertex}: flow imbalance {balance} (should be zero)")

    if -flow_balance[network.source] != result.value:
        errors.append(
            f"Source outflow {-flow_balance[network.source]} does not match flow value {result.value}"
        )
    if flow_balance[network.sink] != result.value:
        errors.append(
            f"Sink inflow {flow_balance[network.sink]} does not match flow value {result.value}"
        )

    return ValidationResult(
        is_valid=not errors,
        errors=errors,
        flow_balance=flow_balance,
        capacity_violations=capacity_violations,
    )


def compute_min_cut(network: FlowNetwork) -> MinCut:
    """Derive a minimum source-sink cut from a solved network.

    Once no augmenting path remains, the vertices reachable from the source
    through positive residual capacity form the source side of a cut whose
    capacity equals the maximum flow.

    Raises:
        ValueError: If max_flow() has not run on the network since its last edit.
    """
    if not network.solved:
        raise ValueError("Network has not been solved; call max_flow() first")

    residual = network.residual
    reachable = np.zeros(network.vertex_count, dtype=bool)
    reachable[network.source] = True
    queue: FifoQueue[int] = FifoQueue([network.source])
    while queue:
        v = queue.dequeue()
        for i in np.flatnonzero(residual[v] > 0).tolist():
            if not reachable[i]:
                reachable[i] = True
                queue.enqueue(i)

    source_side = np.flatnonzero(reachable).tolist()
    sink_side = np.flatnonzero(~reachable).tolist()
    capacity = network.capacity
    edges = [
        (tail, head)
        for tail in source_side
        for head in sink_side
        if capacity[tail, head] > 0
    ]
    return MinCut(
        source_side=source_side,
        sink_side=sink_side,
        edges=edges,
        capacity=sum(int(capacity[tail, head]) for tail, head in edges),
    )
