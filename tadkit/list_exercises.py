"""Exercises on bounded lists of keyed elements."""

from __future__ import annotations

import random
from collections.abc import Callable

from tadkit.element import Element
from tadkit.linked_list import LinkedList, ListFullError

RANDOM_LOW = -10000
RANDOM_HIGH = 10000

_RULE = "-" * 100 + "\n"


def missing_from(first: LinkedList, second: LinkedList) -> LinkedList:
    """Return the elements of ``first`` whose keys do not appear in ``second``."""
    result = LinkedList()
    for element in first:
        if second.find(element.key) is None:
            result.append(element)
    return result


def common_values(first: LinkedList, second: LinkedList) -> LinkedList:
    """Return the elements of ``first`` whose keys also appear in ``second``."""
    result = LinkedList()
    for element in first:
        if second.find(element.key) is not None:
            result.append(element)
    return result


def _extreme_with_position(
    values: LinkedList, better: Callable[[int, int], bool]
) -> tuple[int, int]:
    iterator = iter(values)
    best = next(iterator, None)
    if best is None:
        raise ValueError("the list is empty")
    best_position = 1
    for position, element in enumerate(iterator, start=2):
        if better(element.key, best.key):
            best, best_position = element, position
    return best.key, best_position


def max_with_position(values: LinkedList) -> tuple[int, int]:
    """Return the largest key and its 1-based position (first occurrence)."""
    return _extreme_with_position(values, lambda new, old: new > old)


def min_with_position(values: LinkedList) -> tuple[int, int]:
    """Return the smallest key and its 1-based position (first occurrence)."""
    return _extreme_with_position(values, lambda new, old: new < old)


def multiples(values: LinkedList, factor: int) -> LinkedList:
    """Return a new list whose keys are those of ``values`` times ``factor``."""
    result = LinkedList()
    for element in values:
        result.append(Element(element.key * factor))
    return result


def fill_random_unique(
    values: LinkedList, count: int, rng: random.Random | None = None
) -> LinkedList:
    """Append ``count`` random keys in [-10000, 10000] not already in the list.

    Raises ListFullError if the list runs out of room. Returns ``values``.
    """
    rng = rng if rng is not None else random.Random()
    remaining = count
    while remaining > 0:
        key = rng.randint(RANDOM_LOW, RANDOM_HIGH)
        if values.find(key) is None:
            values.append(Element(key))
            remaining -= 1
    return values


def compare_lists(first: LinkedList, second: LinkedList) -> int:
    """Compare two lists position by position, in the direction first -> second.

    Each position where ``first`` has the larger key counts for it, and the
    other way round; positions beyond the shorter list are ignored. Returns
    1 if ``first`` wins, -1 if ``second`` wins and 0 on a tie.
    """
    first_wins = second_wins = 0
    for a, b in zip(first, second):
        if a.key > b.key:
            first_wins += 1
        elif a.key < b.key:
            second_wins += 1
    if first_wins > second_wins:
        return 1
    if first_wins < second_wins:
        return -1
    return 0


def polynomial_value(coefficients: LinkedList, x: int) -> int:
    """Evaluate a polynomial whose coefficients are listed from highest degree down."""
    result = 0
    for element in coefficients:
        result = result * x + element.key
    return result


def is_sublist(first: LinkedList, second: LinkedList) -> bool:
    """Return True if every key of ``second`` is found in ``first``.

    A ``second`` longer than ``first`` is never a sublist.
    """
    if len(first) < len(second):
        return False
    return all(first.find(element.key) is not None for element in second)


def _conditions(values: LinkedList) -> str:
    lines = []
    if values.is_empty():
        lines.append("La lista esta vacia...\n")
    if values.is_full():
        lines.append("La lista esta llena...\n")
    if not values.is_full() and not values.is_empty():
        lines.append("La lista todavia no esta llena...\n")
    return "".join(lines)


def _length_line(values: LinkedList) -> str:
    return f"La lista tiene una longitud de: {len(values)} elementos.\n"


def basic_operations_report() -> str:
    """Exercise the list operations on the keys 1..100 and describe each step."""
    out = ["\n", _RULE, "Se creo la lista correctamente!\n", _RULE]
    values = LinkedList()
    for key in range(1, 101):
        values.append(Element(key))
    out.append(values.render() + "\n")
    out.append(_length_line(values))
    out.append(_conditions(values))
    out.append(_RULE)

    found = values.find(30)
    if found is None:
        out.append("El elemento no se encuentra en la lista.")
    else:
        out.append(f"El elemento ({found.key}) se encuentra en la lista.\n")
    out.append(_RULE)

    to_insert = Element(1050)
    try:
        inserted = values.insert(to_insert, 13)
    except ListFullError:
        inserted = False
    if inserted:
        out.append(f"El elemento ({to_insert.key}) se agrego correctamente.\n")
        out.append(values.render() + "\n")
    else:
        out.append("No se pudo insertar el elemento, ya que la lista esta llena.\n")
    out.append(_RULE)

    if values.delete_at(13):
        out.append("Se elimino el elemento en la posicion indicada.\n")
        out.append(values.render() + "\n")
        out.append(_length_line(values))
    else:
        out.append("No se pudo eliminar el elemento de la lista\n")
    out.append(_conditions(values))
    out.append(_RULE)

    if values.remove_key(15):
        out.append("El elemento se borro correctamente.\n")
        out.append(values.render() + "\n")
        out.append(_length_line(values))
    out.append(_conditions(values))
    out.append(_RULE)

    recovered = values.get(13)
    if recovered is None:
        out.append("No se pudo recuperar el elemento.\n")
    else:
        out.append(f"El elemento recuperado es el numero: {recovered.key}.\n")
    out.append(_RULE + "\n")
    return "".join(out)