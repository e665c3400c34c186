"""A thread-safe last-in, first-out stack."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Raised when popping from an empty stack."""

    def __init__(self) -> None:
        super().__init__("pop from empty stack")


class Stack(Generic[T]):
    """A LIFO stack whose operations are safe to call from many threads."""

    def __init__(self) -> None:
        self._items: list[T] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __repr__(self) -> str:
        with self._lock:
            return f"Stack({self._items!r})"

    def size(self) -> int:
        """Return the number of elements on the stack."""
        return len(self)

    def empty(self) -> bool:
        """Return True if the stack holds no elements."""
        with self._lock:
            return not self._items

    def push(self, value: T) -> None:
        """Place value on top of the stack."""
        with self._lock:
            self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        with self._lock:
            if not self._items:
                raise EmptyStackError()
            return self._items.pop()