import pytest

from tadkit.element import Element
from tadkit.linked_list import LinkedList, ListFullError


def keys(lst):
    return [e.key for e in lst]


def make(*values, capacity=100):
    lst = LinkedList(capacity)
    for v in values:
        lst.append(Element(v))
    return lst


def test_new_list_is_empty():
    lst = LinkedList()
    assert lst.is_empty()
    assert not lst.is_full()
    assert len(lst) == 0


def test_default_capacity_is_one_hundred():
    lst = make(*range(1, 101))
    assert lst.is_full()
    with pytest.raises(ListFullError):
        lst.append(Element(101))
    assert len(lst) == 100


def test_append_keeps_order():
    lst = make(5, 1, 9)
    assert keys(lst) == [5, 1, 9]


def test_find_returns_first_match():
    first = Element(4, "first")
    lst = LinkedList()
    lst.append(first)
    lst.append(Element(4, "second"))
    assert lst.find(4) is first
    assert lst.find(99) is None


def test_remove_key_removes_all_occurrences():
    lst = make(2, 2, 3, 2, 4, 2)
    assert lst.remove_key(2) is True
    assert keys(lst) == [3, 4]
    assert len(lst) == 2


def test_remove_key_missing_or_empty():
    assert LinkedList().remove_key(1) is False
    lst = make(1, 2)
    assert lst.remove_key(5) is False
    assert keys(lst) == [1, 2]


def test_insert_at_position():
    lst = make(1, 2, 3)
    assert lst.insert(Element(10), 1) is True
    assert lst.insert(Element(20), 3) is True
    assert keys(lst) == [10, 1, 20, 2, 3]


def test_insert_past_end_appends_and_reports_false():
    lst = make(1, 2)
    assert lst.insert(Element(9), 5) is False
    assert keys(lst) == [1, 2, 9]


def test_insert_into_full_list_raises():
    lst = make(1, 2, capacity=2)
    with pytest.raises(ListFullError):
        lst.insert(Element(3), 1)


def test_insert_non_positive_position_raises():
    with pytest.raises(IndexError):
        make(1).insert(Element(2), 0)


def test_delete_at():
    lst = make(1, 2, 3, 4)
    assert lst.delete_at(1) is True
    assert lst.delete_at(2) is True
    assert keys(lst) == [2, 4]
    assert lst.delete_at(3) is False
    assert lst.delete_at(0) is False
    assert LinkedList().delete_at(1) is False


def test_insert_then_delete_round_trip():
    lst = make(*range(1, 21))
    lst.insert(Element(1050), 13)
    assert lst.get(13).key == 1050
    lst.delete_at(13)
    assert keys(lst) == list(range(1, 21))


def test_get():
    lst = make(7, 8, 9)
    assert lst.get(1).key == 7
    assert lst.get(3).key == 9
    assert lst.get(4) is None
    assert lst.get(0) is None


def test_render():
    assert make(1, 2, 3).render() == "Contenido de la lista: 1 2 3 "
    assert LinkedList().render() == "Contenido de la lista: "


def test_iteration_is_a_snapshot():
    lst = make(1, 2, 3)
    seen = []
    for element in lst:
        seen.append(element.key)
        lst.remove_key(element.key)
    assert seen == [1, 2, 3]
    assert lst.is_empty()