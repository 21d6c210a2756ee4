"""FIFO queue driving the breadth-first augmenting path search."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from .exceptions import EmptyQueueError

T = TypeVar("T")


class FifoQueue(Generic[T]):
    """Unbounded first-in first-out queue.

    Examples:
        >>> queue = FifoQueue([0])
        >>> queue.enqueue(3)
        >>> queue.dequeue()
        0
        >>> queue.is_empty()
        False
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    def enqueue(self, item: T) -> None:
        """Append ``item`` at the tail."""
        self._items.append(item)

    def dequeue(self) -> T:
        """Remove and return the head item.

        Raises:
            EmptyQueueError: If the queue holds no items.
        """
        if not self._items:
            raise EmptyQueueError("Cannot dequeue from an empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        # Pending items, head first; does not consume them.
        return iter(self._items)

    def __repr__(self) -> str:
        return f"FifoQueue({list(self._items)!r})"
