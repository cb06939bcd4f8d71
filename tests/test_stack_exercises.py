import pytest

from tadkit.element import Element
from tadkit.stack import Stack
from tadkit.stack_exercises import (
    are_equal,
    common_elements,
    contains_key,
    count,
    duplicate,
    remove_first,
    reversed_copy,
)


def make_stack(keys, capacity=10):
    """Build a stack by pushing keys in order; the last key ends on top."""
    stack = Stack(capacity)
    for key in keys:
        stack.push(Element(key))
    return stack


def keys_of(stack):
    return [element.key for element in stack]


def test_contains_key_found_and_preserved():
    stack = make_stack([4, 8, 15])
    assert contains_key(stack, 8) is True
    assert keys_of(stack) == [15, 8, 4]


def test_contains_key_missing():
    assert contains_key(make_stack([4, 8, 15]), 16) is False
    assert contains_key(make_stack([]), 1) is False


def test_remove_first_removes_occurrence_nearest_top():
    stack = make_stack([1, 7, 2, 7, 3])
    first_seven_from_bottom = list(stack)[3]
    assert remove_first(stack, 7) is True
    assert keys_of(stack) == [3, 2, 7, 1]
    assert list(stack)[2] is first_seven_from_bottom


def test_remove_first_missing_key_leaves_stack():
    stack = make_stack([1, 2, 3])
    assert remove_first(stack, 9) is False
    assert keys_of(stack) == [3, 2, 1]


def test_duplicate_keeps_original_and_copies_elements():
    stack = make_stack([1, 2, 3])
    copy = duplicate(stack)
    assert keys_of(stack) == [3, 2, 1]
    assert sorted(keys_of(copy)) == sorted(keys_of(stack))
    assert keys_of(copy) == list(reversed(keys_of(stack)))
    assert copy is not stack


def test_count_matches_pushes_and_keeps_stack():
    stack = make_stack([5, 6, 7, 8])
    assert count(stack) == 4
    assert keys_of(stack) == [8, 7, 6, 5]
    assert count(make_stack([])) == 0


def test_are_equal_identical_stacks():
    first = make_stack([1, 2, 3])
    second = make_stack([1, 2, 3])
    assert are_equal(first, second) is True
    assert keys_of(first) == [3, 2, 1]
    assert keys_of(second) == [3, 2, 1]


def test_are_equal_no_aligned_match():
    assert are_equal(make_stack([1, 2, 3]), make_stack([3, 1, 2])) is False


def test_are_equal_empty_stack():
    assert are_equal(make_stack([]), make_stack([1])) is False


def test_reversed_copy_reverses_and_preserves():
    stack = make_stack([10, 20, 30])
    result = reversed_copy(stack)
    assert keys_of(result) == list(reversed(keys_of(stack)))
    assert keys_of(stack) == [30, 20, 10]


def test_reversed_copy_twice_restores_order():
    stack = make_stack([3, 1, 4, 1, 5])
    assert keys_of(reversed_copy(reversed_copy(stack))) == keys_of(stack)


def test_common_elements_unique_and_ordered():
    first = make_stack([1, 2, 2, 3, 4])
    second = make_stack([2, 4, 6, 2])
    result = common_elements(first, second)
    assert sorted(keys_of(result)) == [2, 4]
    # top of first (4) was pushed first, so it ends at the bottom
    assert keys_of(result) == [2, 4]
    assert keys_of(first) == [4, 3, 2, 2, 1]
    assert keys_of(second) == [2, 6, 4, 2]


def test_common_elements_disjoint():
    assert common_elements(make_stack([1, 3]), make_stack([2, 4])).is_empty()


@pytest.mark.parametrize("keys", [[1], [1, 2, 3], [9, 9, 9]])
def test_common_elements_with_itself_has_each_key_once(keys):
    stack = make_stack(keys)
    result = common_elements(stack, stack)
    assert sorted(keys_of(result)) == sorted(set(keys))