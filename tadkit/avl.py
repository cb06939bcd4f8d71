"""A self-balancing binary search tree of keyed elements."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from tadkit.element import Element

MAX_SIZE = 1000


@dataclass(eq=False)
class AVLNode:
    """A tree node; a leaf has height 0 and a missing child counts as -1."""

    element: Element
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 0

    @property
    def key(self) -> int:
        return self.element.key


def _height(node: AVLNode | None) -> int:
    return -1 if node is None else node.height


def _update_height(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: AVLNode) -> int:
    return _height(node.left) - _height(node.right)


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def _minimum(node: AVLNode) -> AVLNode:
    while node.left is not None:
        node = node.left
    return node


def _insert(node: AVLNode | None, element: Element) -> tuple[AVLNode, bool]:
    if node is None:
        return AVLNode(element), True
    if element.key < node.key:
        node.left, inserted = _insert(node.left, element)
    elif element.key > node.key:
        node.right, inserted = _insert(node.right, element)
    else:
        return node, False

    _update_height(node)
    balance = _balance(node)
    if balance > 1:
        assert node.left is not None
        if element.key >= node.left.key:
            node.left = _rotate_left(node.left)
        return _rotate_right(node), inserted
    if balance < -1:
        assert node.right is not None
        if element.key <= node.right.key:
            node.right = _rotate_right(node.right)
        return _rotate_left(node), inserted
    return node, inserted


def _delete(node: AVLNode | None, key: int) -> tuple[AVLNode | None, bool]:
    if node is None:
        return None, False
    if key < node.key:
        node.left, deleted = _delete(node.left, key)
    elif key > node.key:
        node.right, deleted = _delete(node.right, key)
    else:
        deleted = True
        if node.left is None and node.right is None:
            return None, True
        if node.left is None:
            node = node.right
        elif node.right is None:
            node = node.left
        else:
            successor = _minimum(node.right)
            node.element = successor.element
            node.right, _ = _delete(node.right, successor.key)
    assert node is not None

    _update_height(node)
    balance = _balance(node)
    if balance > 1:
        assert node.left is not None
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node), deleted
    if balance < -1:
        assert node.right is not None
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node), deleted
    return node, deleted


class AVLTree:
    """Height-balanced search tree with unique integer keys and a size limit."""

    def __init__(self) -> None:
        self._root: AVLNode | None = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._root is None

    def is_full(self) -> bool:
        return self._size == MAX_SIZE

    def __len__(self) -> int:
        return self._size

    def root(self) -> AVLNode | None:
        """Return the root node, or None for an empty tree."""
        return self._root

    def insert(self, element: Element) -> bool:
        """Insert an element; return False if the tree is full or the key exists."""
        if self.is_full():
            return False
        self._root, inserted = _insert(self._root, element)
        if inserted:
            self._size += 1
        return inserted

    def delete(self, key: int) -> bool:
        """Delete the element with the given key; report whether it was present."""
        self._root, deleted = _delete(self._root, key)
        if deleted:
            self._size -= 1
        return deleted

    def search(self, key: int) -> Element | None:
        """Return the element with the given key, or None."""
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node.element
        return None

    def __iter__(self) -> Iterator[Element]:
        """Iterate over the elements in ascending key order."""
        stack: list[AVLNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.element
            node = node.right