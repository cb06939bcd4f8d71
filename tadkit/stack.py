"""A bounded last-in, first-out stack of keyed elements."""

from __future__ import annotations

from collections.abc import Iterator

from tadkit.element import Element

DEFAULT_CAPACITY = 10


class StackFullError(Exception):
    """Raised when an element is pushed onto a full stack."""


class Stack:
    """Stack with a fixed maximum number of elements."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Element] = []

    def push(self, element: Element) -> None:
        """Place an element on top of the stack."""
        if self.is_full():
            raise StackFullError(f"stack is full ({self.capacity} elements)")
        self._items.append(element)

    def pop(self) -> Element:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Element:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Element]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(list(self._items))

    def render(self) -> str:
        """Return the stack's keys, top first, as a one-line description."""
        if self.is_empty():
            return "PILA VACIA !!! "
        return "Contenido de la pila: " + "".join(f"{item.key} " for item in self)