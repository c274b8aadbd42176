"""A stack of values kept as a singly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


class StackUnderflowError(IndexError):
    """Raised when a value is taken from an empty stack."""


@dataclass
class _Node:
    value: Any
    next: Optional[_Node] = None


class LinkedStack:
    """Last-in, first-out stack backed by linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("pop from an empty stack")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackUnderflowError("peek at an empty stack")
        return self._top.value

    def is_empty(self) -> bool:
        """Tell whether the stack holds no values."""
        return self._top is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield values from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next