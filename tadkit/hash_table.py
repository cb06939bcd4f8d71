"""Hash tables of keyed elements with two collision strategies."""

from __future__ import annotations

from collections.abc import Callable

from tadkit.element import Element
from tadkit.linked_list import LinkedList

HashFunction = Callable[[int], int]


class _HashTableBase:
    def __init__(self, capacity: int, hash_function: HashFunction) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.hash_function = hash_function
        self._slots: list[Element | None] = [None] * capacity

    def _position(self, key: int) -> int:
        position = self.hash_function(key)
        if not 0 <= position < self.capacity:
            raise ValueError(
                f"hash of {key} is {position}, outside 0..{self.capacity - 1}"
            )
        return position


class ChainedHashTable(_HashTableBase):
    """Hash table whose collisions go into a list attached to each slot.

    A full collision list raises ListFullError on insertion.
    """

    def __init__(self, capacity: int, hash_function: HashFunction) -> None:
        super().__init__(capacity, hash_function)
        self._chains = [LinkedList() for _ in range(capacity)]

    def insert(self, element: Element) -> bool:
        """Store an element; return False if its key is already present."""
        position = self._position(element.key)
        home = self._slots[position]
        if home is None:
            self._slots[position] = element
            return True
        chain = self._chains[position]
        if home.key == element.key or chain.find(element.key) is not None:
            return False
        chain.append(element)
        return True

    def delete(self, key: int) -> bool:
        """Remove the element with the given key; report whether it was present."""
        position = self._position(key)
        home = self._slots[position]
        if home is None:
            return False
        chain = self._chains[position]
        if home.key != key:
            return chain.remove_key(key)
        if chain.is_empty():
            self._slots[position] = None
        else:
            self._slots[position] = chain.get(1)
            chain.delete_at(1)
        return True

    def get(self, key: int) -> Element | None:
        """Return the element with the given key, or None."""
        position = self._position(key)
        home = self._slots[position]
        if home is None:
            return None
        if home.key == key:
            return home
        return self._chains[position].find(key)

    def render(self, only_occupied: bool = False) -> str:
        """Describe every slot and its collision chain, one line per slot."""
        lines = ["Contenido de la tabla hash:\n"]
        for index, (home, chain) in enumerate(zip(self._slots, self._chains)):
            if home is not None:
                chained = "".join(f" -> {item.key} " for item in chain)
                lines.append(f"  tabla[{index}] [ocupado] {home.key}{chained}\n")
            elif not only_occupied:
                lines.append(f"  tabla[{index}] [ libre ]\n")
        lines.append("\n")
        return "".join(lines)


class OverflowHashTable(_HashTableBase):
    """Hash table whose collisions go into a shared overflow zone of equal size."""

    def __init__(self, capacity: int, hash_function: HashFunction) -> None:
        super().__init__(capacity, hash_function)
        self._overflow: list[Element | None] = [None] * capacity

    def insert(self, element: Element) -> bool:
        """Store an element; return False if the key exists or no room is left."""
        position = self._position(element.key)
        home = self._slots[position]
        if home is None:
            self._slots[position] = element
            return True
        if home.key == element.key:
            return False
        for index, occupant in enumerate(self._overflow):
            if occupant is None:
                self._overflow[index] = element
                return True
            if occupant.key == element.key:
                return False
        return False

    def delete(self, key: int) -> bool:
        """Remove the element with the given key; report whether it was present."""
        position = self._position(key)
        home = self._slots[position]
        if home is not None and home.key == key:
            self._slots[position] = None
            return True
        for index, occupant in enumerate(self._overflow):
            if occupant is not None and occupant.key == key:
                self._overflow[index] = None
                return True
        return False

    def get(self, key: int) -> Element | None:
        """Return the element with the given key, or None."""
        position = self._position(key)
        home = self._slots[position]
        if home is not None and home.key == key:
            return home
        return next(
            (item for item in self._overflow if item is not None and item.key == key),
            None,
        )

    def render(self, only_occupied: bool = False) -> str:
        """Describe the main table and then the overflow zone."""
        lines = ["Contenido de la tabla hash:\n"]
        for index, home in enumerate(self._slots):
            if home is not None:
                lines.append(f"  tabla[{index}] [ocupado] {home.key}\n")
            elif not only_occupied:
                lines.append(f"  tabla[{index}] [ libre ]\n")
        lines.append(" Zona de overflow:\n")
        for index, occupant in enumerate(self._overflow):
            if occupant is not None:
                lines.append(f"  zo[{index}] [ocupado] {occupant.key}\n")
            elif not only_occupied:
                lines.append(f"  zo[{index}] [ libre ]\n")
        lines.append("\n")
        return "".join(lines)