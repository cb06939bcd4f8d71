"""Exercises on stacks; every function leaves its argument stacks as it found them."""

from __future__ import annotations

from tadkit.element import Element
from tadkit.stack import Stack


def _drain(stack: Stack) -> list[Element]:
    """Pop every element, returning them top first."""
    return [stack.pop() for _ in range(len(stack))]


def _refill(stack: Stack, top_first: list[Element]) -> None:
    for element in reversed(top_first):
        stack.push(element)


def contains_key(stack: Stack, key: int) -> bool:
    """Return True if some element of the stack has the given key."""
    return any(element.key == key for element in stack)


def remove_first(stack: Stack, key: int) -> bool:
    """Remove the occurrence of ``key`` nearest the top; report whether one was found."""
    items = _drain(stack)
    index = next((i for i, element in enumerate(items) if element.key == key), None)
    if index is not None:
        del items[index]
    _refill(stack, items)
    return index is not None


def duplicate(stack: Stack) -> Stack:
    """Return a second stack holding the same elements.

    The elements are moved over one pop at a time, so the copy's top is the
    original's bottom.
    """
    copy = Stack(stack.capacity)
    for element in stack:
        copy.push(element)
    return copy


def count(stack: Stack) -> int:
    """Return the number of elements in the stack."""
    return len(stack)


def are_equal(first: Stack, second: Stack) -> bool:
    """Report whether the stacks hold the same key at some depth, counted from the top.

    Only the depths present in both stacks are compared.
    """
    return any(a.key == b.key for a, b in zip(first, second))


def reversed_copy(stack: Stack) -> Stack:
    """Return a new stack with the elements in the opposite order."""
    result = Stack(stack.capacity)
    for element in stack:
        result.push(element)
    return result


def common_elements(first: Stack, second: Stack) -> Stack:
    """Return a stack of the keys found in both stacks, each key once.

    Elements are taken from ``first`` top to bottom and pushed in that order.
    """
    second_keys = {element.key for element in second}
    result = Stack(first.capacity)
    seen: set[int] = set()
    for element in first:
        if element.key in second_keys and element.key not in seen:
            seen.add(element.key)
            result.push(element)
    return result