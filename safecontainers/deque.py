"""A thread-safe double-ended queue."""

from __future__ import annotations

import operator
import threading
from collections import deque as _deque
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


class EmptyQueueError(IndexError):
    """Raised when an element is requested from an empty deque."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}: queue is empty")
        self.operation = operation


class Deque(Generic[T]):
    """A double-ended queue whose operations are safe to call from many threads."""

    def __init__(self) -> None:
        self._items: _deque[T] = _deque()
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def __repr__(self) -> str:
        return f"Deque({self.to_list()!r})"

    def is_empty(self) -> bool:
        """Return True if the deque holds no elements."""
        with self._lock:
            return not self._items

    def push_front(self, *args: T) -> None:
        """Add values to the front, keeping their given order at the front."""
        with self._lock:
            self._items.extendleft(reversed(args))

    def push_back(self, *args: T) -> None:
        """Append values to the back in the given order."""
        with self._lock:
            self._items.extend(args)

    def pop_front(self) -> T:
        """Remove and return the first element."""
        with self._lock:
            if not self._items:
                raise EmptyQueueError("pop_front")
            return self._items.popleft()

    def pop_back(self) -> T:
        """Remove and return the last element."""
        with self._lock:
            if not self._items:
                raise EmptyQueueError("pop_back")
            return self._items.pop()

    def front(self) -> T:
        """Return the first element without removing it."""
        with self._lock:
            if not self._items:
                raise EmptyQueueError("front")
            return self._items[0]

    def back(self) -> T:
        """Return the last element without removing it."""
        with self._lock:
            if not self._items:
                raise EmptyQueueError("back")
            return self._items[-1]

    def clear(self) -> int:
        """Remove every element and return how many were removed."""
        with self._lock:
            removed = len(self._items)
            self._items.clear()
            return removed

    def to_list(self) -> list[T]:
        """Return the contents from front to back as a new list."""
        with self._lock:
            return list(self._items)

    def get(self, index: int, default: Any = None) -> Any:
        """Return the element at index, or default when index is out of range.

        Negative indices are treated as out of range.
        """
        with self._lock:
            if 0 <= index < len(self._items):
                return self._items[index]
            return default

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        with self._lock:
            self._items.reverse()

    def count(
        self, target: T, equal: Callable[[T, T], bool] = operator.eq
    ) -> int:
        """Count the elements that equal target according to equal."""
        with self._lock:
            return sum(1 for item in self._items if equal(item, target))

    def iterator(self) -> Iterator[tuple[int, T]]:
        """Yield (index, value) pairs from front to back."""
        yield from enumerate(self.to_list())

    def descending_iterator(self) -> Iterator[tuple[int, T]]:
        """Yield (index, value) pairs; the traversal runs from front to back."""
        yield from enumerate(self.to_list())

    def rotate(self, n: int) -> None:
        """Rotate by n steps: positive n moves elements toward the back."""
        with self._lock:
            length = len(self._items)
            if length <= 1 or n == 0:
                return
            self._items.rotate(n % length)