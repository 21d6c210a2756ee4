"""Custom exceptions for the max-flow solver library."""

from __future__ import annotations


class MaxFlowError(Exception):
    """Base exception for all max-flow solver errors.

    All custom exceptions in the maxflow_solver package inherit from this class,
    allowing users to catch all solver-related errors with a single except clause.

    Example:
        try:
            network = load_network("match0.txt")
        except MaxFlowError as e:
            print(f"Solver error: {e}")
    """


class InvalidNetworkError(MaxFlowError):
    """Raised when a network definition is invalid.

    This includes:
    - Vertex counts below 2 (source and sink would coincide)
    - Invalid edges (see InvalidEdgeError)
    - Malformed text input (see NetworkParseError)

    Example:
        InvalidNetworkError("Network needs at least 2 vertices, got 1")
    """


class InvalidEdgeError(InvalidNetworkError):
    """Raised when an edge cannot be inserted into a network.

    The network is left unchanged when this is raised. Causes:
    - An endpoint outside [0, vertex_count)
    - A self-loop (tail == head)
    - A negative or non-integer capacity

    Example:
        InvalidEdgeError(
            "Edge 0 -> 4 has head outside [0, 4)",
            tail=0,
            head=4,
            capacity=3,
        )
    """

    def __init__(
        self,
        message: str,
        tail: object = None,
        head: object = None,
        capacity: object = None,
    ):
        """Initialize with message and the offending edge."""
        super().__init__(message)
        self.tail = tail
        self.head = head
        self.capacity = capacity


class NetworkParseError(InvalidNetworkError):
    """Raised when a textual network description cannot be parsed.

    Example:
        NetworkParseError("Expected an integer, got 'x'", token_index=4)
    """

    def __init__(self, message: str, token_index: int | None = None):
        """Initialize with message and optional position of the bad token."""
        super().__init__(message)
        self.token_index = token_index


class EmptyQueueError(MaxFlowError):
    """Raised when dequeuing from an empty FifoQueue.

    Correct search code always checks is_empty() first, so this signals a
    programming error rather than a property of the input network.
    """


class SolverConfigurationError(MaxFlowError):
    """Raised when solver options are invalid.

    Example:
        SolverConfigurationError("max_augmentations must be positive, got 0")
    """
