import pytest

from tadkit.element import Element
from tadkit.stack import Stack, StackFullError


def make(*values, capacity=10):
    stack = Stack(capacity)
    for v in values:
        stack.push(Element(v))
    return stack


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty()
    assert not stack.is_full()
    assert len(stack) == 0


def test_push_pop_is_lifo():
    stack = make(1, 2, 3)
    assert [stack.pop().key for _ in range(3)] == [3, 2, 1]
    assert stack.is_empty()


def test_peek_does_not_remove():
    stack = make(4, 5)
    assert stack.peek().key == 5
    assert len(stack) == 2


def test_pop_and_peek_on_empty_raise():
    with pytest.raises(IndexError):
        Stack().pop()
    with pytest.raises(IndexError):
        Stack().peek()


def test_default_capacity_is_ten():
    stack = make(*range(10))
    assert stack.is_full()
    with pytest.raises(StackFullError):
        stack.push(Element(10))
    assert len(stack) == 10
    assert stack.peek().key == 9


def test_custom_capacity():
    stack = make(1, 2, capacity=2)
    assert stack.is_full()
    stack.pop()
    stack.push(Element(3))
    assert [e.key for e in stack] == [3, 1]


def test_iteration_is_top_to_bottom_and_non_destructive():
    stack = make(1, 2, 3)
    assert [e.key for e in stack] == [3, 2, 1]
    assert len(stack) == 3
    assert stack.peek().key == 3


def test_pop_returns_pushed_object():
    element = Element(8, "payload")
    stack = Stack()
    stack.push(element)
    assert stack.pop() is element


def test_render():
    assert make(1, 2, 3).render() == "Contenido de la pila: 3 2 1 "
    assert Stack().render() == "PILA VACIA !!! "


def test_render_leaves_stack_unchanged():
    stack = make(6, 7)
    stack.render()
    assert [e.key for e in stack] == [7, 6]