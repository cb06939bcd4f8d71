"""A bounded list of keyed elements addressed by 1-based positions."""

from __future__ import annotations

from collections.abc import Iterator

from tadkit.element import Element

DEFAULT_CAPACITY = 100


class ListFullError(Exception):
    """Raised when an element is added to a list that is already full."""


class LinkedList:
    """Ordered collection of elements with a fixed maximum size."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Element] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Element]:
        return iter(list(self._items))

    def _ensure_room(self) -> None:
        if self.is_full():
            raise ListFullError(f"list is full ({self.capacity} elements)")

    def append(self, element: Element) -> None:
        """Add an element at the end of the list."""
        self._ensure_room()
        self._items.append(element)

    def remove_key(self, key: int) -> bool:
        """Remove every element with the given key; report whether any was removed."""
        kept = [item for item in self._items if item.key != key]
        removed = len(kept) != len(self._items)
        self._items = kept
        return removed

    def find(self, key: int) -> Element | None:
        """Return the first element with the given key, or None."""
        return next((item for item in self._items if item.key == key), None)

    def insert(self, element: Element, position: int) -> bool:
        """Insert at a 1-based position.

        A position past the end appends the element instead and returns False;
        an insertion at the requested position returns True.
        """
        self._ensure_room()
        if position < 1:
            raise IndexError("position must be at least 1")
        if position > len(self._items):
            self._items.append(element)
            return False
        self._items.insert(position - 1, element)
        return True

    def delete_at(self, position: int) -> bool:
        """Delete the element at a 1-based position; report whether one was deleted."""
        if 1 <= position <= len(self._items):
            del self._items[position - 1]
            return True
        return False

    def get(self, position: int) -> Element | None:
        """Return the element at a 1-based position, or None when out of range."""
        if 1 <= position <= len(self._items):
            return self._items[position - 1]
        return None

    def render(self) -> str:
        """Return the list's keys as a one-line description."""
        return "Contenido de la lista: " + "".join(f"{item.key} " for item in self._items)