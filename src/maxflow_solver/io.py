"""File I/O helpers for max-flow networks and results."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from .data import MaxFlowResult
from .exceptions import NetworkParseError
from .network import FlowNetwork, build_network

CELL_WIDTH = 5
INTEGER_TOKEN = re.compile(r"-?[0-9]+")


def _parse_int(token: str, index: int) -> int:
    # Plain ASCII decimal only; int() would also accept "1_000", "+3" and non-ASCII digits.
    if not INTEGER_TOKEN.fullmatch(token):
        raise NetworkParseError(
            f"Expected an integer at token {index}, got {token!r}.", token_index=index
        )
    return int(token)


def parse_network(text: str, name: str | None = None) -> FlowNetwork:
    """Build a network from whitespace-separated integers.

    The first integer is the vertex count; the rest are ``tail head capacity``
    triples, one per edge. A repeated (tail, head) pair overwrites the earlier
    capacity.

    Raises:
        NetworkParseError: If a token is not an integer, the vertex count is
            missing, or the edge stream ends mid-triple.
        InvalidEdgeError: If a triple describes an invalid edge.
    """
    tokens = text.split()
    if not tokens:
        raise NetworkParseError("Network description is empty; expected a vertex count.")
    values = [_parse_int(token, index) for index, token in enumerate(tokens)]
    vertex_count, stream = values[0], values[1:]
    if len(stream) % 3:
        raise NetworkParseError(
            f"Edge list has {len(stream)} integers, which is not a whole number of "
            f"(tail, head, capacity) triples.",
            token_index=len(tokens) - len(stream) % 3,
        )
    triples = [tuple(stream[i : i + 3]) for i in range(0, len(stream), 3)]
    # Defer to the core builder so validation rules remain centralized in one place.
    return build_network(vertex_count, triples, name=name)


def load_network(path: str | Path) -> FlowNetwork:
    """Load a network from a text file; the file name becomes the network name."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    return parse_network(text, name=path.name)


def format_capacity_matrix(network: FlowNetwork) -> str:
    rows = []
    for row in network.capacity.tolist():
        rows.append("".join(f"{value:{CELL_WIDTH}d}" for value in row))
    return "\n".join(rows)


def format_report(network: FlowNetwork, result: MaxFlowResult) -> str:
    """Render the capacity matrix, path log and final edge flows as text."""
    lines = [f"The Graph {network.name or ''}".rstrip(), format_capacity_matrix(network), ""]
    lines.append("Paths found in order")
    lines.extend(str(path) for path in result.paths)
    lines.append("")
    lines.append("Final flow on each edge")
    lines.extend(f"Flow {tail}->{head}({flow})" for (tail, head), flow in result.flows.items())
    return "\n".join(lines) + "\n"


def result_to_dict(result: MaxFlowResult, name: str | None = None) -> dict[str, Any]:
    # Sort flow entries by unordered pair for deterministic output that is easy to diff.
    flows = sorted(result.flows.items(), key=lambda item: (min(item[0]), max(item[0]), item[0]))
    return {
        "name": name,
        "status": result.status,
        "value": result.value,
        "augmentations": result.augmentations,
        "paths": [{"vertices": list(path.vertices), "flow": path.flow} for path in result.paths],
        "flows": [{"tail": tail, "head": head, "flow": flow} for (tail, head), flow in flows],
    }


def save_result(path: str | Path, result: MaxFlowResult, name: str | None = None) -> None:
    """Persist a max-flow result to JSON."""
    data = result_to_dict(result, name=name)
    with Path(path).open("w", encoding="utf-8") as fh:
        json.dump(data, fh, indent=2, sort_keys=False)
