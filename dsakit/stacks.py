"""A bounded array stack and string reversal through a stack."""

from __future__ import annotations

from typing import Any

__all__ = ["StackOverflowError", "StackUnderflowError", "Stack", "reverse_string"]


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


class Stack:
    """A last-in first-out stack holding at most ``size`` elements."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._items: list[Any] = []

    def push(self, element: Any) -> None:
        """Place element on top; raise StackOverflowError when full."""
        if len(self._items) >= self.size:
            raise StackOverflowError("stack overflow")
        self._items.append(element)

    def pop(self) -> Any:
        """Remove and return the top element; raise StackUnderflowError when empty."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element; raise StackUnderflowError when empty."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


def reverse_string(text: str) -> str:
    """Return text reversed by pushing its characters and popping them off."""
    stack = Stack(len(text))
    for ch in text:
        stack.push(ch)
    chars = []
    while not stack.is_empty():
        chars.append(stack.pop())
    return "".join(chars)