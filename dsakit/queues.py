"""Bounded and unbounded FIFO queues."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "QueueEmptyError",
    "QueueFullError",
    "CircularQueue",
    "ArrayQueue",
    "LinkedQueue",
]


class QueueEmptyError(IndexError):
    """Raised when taking from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has no room left."""


class CircularQueue:
    """A fixed-capacity queue whose slots wrap around."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._slots: list[Optional[int]] = [None] * capacity
        self._front = -1
        self._rear = -1

    def enqueue(self, value: int) -> None:
        """Add value at the rear; raise QueueFullError when every slot is taken."""
        last = self._capacity - 1
        if (self._front == 0 and self._rear == last) or (
            self._front > 0 and self._rear == self._front - 1
        ):
            raise QueueFullError("circular queue is full")
        if self._front == -1:
            self._front = self._rear = 0
        elif self._rear == last:
            self._rear = 0
        else:
            self._rear += 1
        self._slots[self._rear] = value

    def dequeue(self) -> int:
        """Remove and return the front value; raise QueueEmptyError when empty."""
        if self._front == -1:
            raise QueueEmptyError("circular queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        elif self._front == self._capacity - 1:
            self._front = 0
        else:
            self._front += 1
        return value


class ArrayQueue:
    """A queue over a fixed array that resets to the start once drained.

    Storage is not reused until the queue empties, and it reports full once
    the rear index reaches the last slot.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._slots: list[Optional[int]] = [None] * capacity
        self._front = 0
        self._rear = 0

    def enqueue(self, value: int) -> None:
        """Add value at the rear; raise QueueFullError when no room is left."""
        if self._rear == self._capacity - 1:
            raise QueueFullError("queue is full")
        self._slots[self._rear] = value
        self._rear += 1

    def dequeue(self) -> int:
        """Remove and return the front value; raise QueueEmptyError when empty."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        if self._front == self._rear:
            self._front = self._rear = 0
        return value

    def front(self) -> int:
        """Return the front value without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return self._front == self._rear

    def __iter__(self) -> Iterator[int]:
        return iter(self._slots[self._front:self._rear])


@dataclass
class _Node:
    data: int
    next: Optional["_Node"] = None


class LinkedQueue:
    """An unbounded queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None

    def enqueue(self, value: int) -> None:
        """Add value at the tail."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node

    def dequeue(self) -> int:
        """Remove and return the head value; raise QueueEmptyError when empty."""
        if self._head is None:
            raise QueueEmptyError("queue is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        return node.data

    def front(self) -> int:
        """Return the head value without removing it."""
        if self._head is None:
            raise QueueEmptyError("queue is empty")
        return self._head.data

    def is_empty(self) -> bool:
        return self._head is None

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next