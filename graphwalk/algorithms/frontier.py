"""Frontier containers holding the pending work of a traversal.

The removal policy of the frontier is the only difference between
depth-first (`StackFrontier`), breadth-first (`QueueFrontier`) and
best-first (`HeapFrontier`) search. A frontier belongs to exactly one
traversal at a time and is not thread-safe.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from functools import cmp_to_key
from heapq import heappop, heappush
from itertools import count
from typing import Any, Callable, Deque, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class Frontier(ABC, Generic[T]):
    """Pending-work container with a policy-defined removal order."""

    @abstractmethod
    def put(self, item: T) -> None:
        """Insert an item."""

    @abstractmethod
    def take_next(self) -> T:
        """Remove and return the next item.

        Raises:
            IndexError: If the frontier is empty.
        """

    @abstractmethod
    def clear(self) -> None:
        """Discard all pending items."""

    @abstractmethod
    def __len__(self) -> int: ...

    def count(self) -> int:
        """Return the number of pending items."""
        return len(self)

    def __bool__(self) -> bool:
        return len(self) > 0


class StackFrontier(Frontier[T]):
    """LIFO frontier; yields depth-first order."""

    def __init__(self) -> None:
        self._items: List[T] = []

    def put(self, item: T) -> None:
        self._items.append(item)

    def take_next(self) -> T:
        if not self._items:
            raise IndexError("take_next() from an empty StackFrontier")
        return self._items.pop()

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class QueueFrontier(Frontier[T]):
    """FIFO frontier; yields breadth-first order."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()

    def put(self, item: T) -> None:
        self._items.append(item)

    def take_next(self) -> T:
        if not self._items:
            raise IndexError("take_next() from an empty QueueFrontier")
        return self._items.popleft()

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class HeapFrontier(Frontier[T]):
    """Min-heap frontier; yields best-first order.

    Ordering comes from either a ``key`` function or a three-way
    ``comparator(a, b)`` returning a negative, zero or positive number. Keys
    are computed when an item is put. Items with equal keys come out in
    insertion order, and the items themselves are never compared.

    Args:
        key: Maps an item to a sortable priority. Lower comes out first.
        comparator: Classic comparison function, adapted with ``cmp_to_key``.
            Mutually exclusive with ``key``.
    """

    def __init__(
        self,
        key: Optional[Callable[[T], Any]] = None,
        comparator: Optional[Callable[[T, T], int]] = None,
    ) -> None:
        if key is not None and comparator is not None:
            raise ValueError("Pass either key or comparator, not both.")
        if comparator is not None:
            key = cmp_to_key(comparator)
        self._key: Callable[[T], Any] = key if key is not None else _identity
        self._heap: List[Tuple[Any, int, T]] = []
        self._counter = count()

    def put(self, item: T) -> None:
        heappush(self._heap, (self._key(item), next(self._counter), item))

    def take_next(self) -> T:
        if not self._heap:
            raise IndexError("take_next() from an empty HeapFrontier")
        return heappop(self._heap)[2]

    def peek(self) -> T:
        """Return the next item without removing it."""
        if not self._heap:
            raise IndexError("peek() on an empty HeapFrontier")
        return self._heap[0][2]

    def clear(self) -> None:
        self._heap.clear()
        self._counter = count()

    def __len__(self) -> int:
        return len(self._heap)


def _identity(item: Any) -> Any:
    return item
