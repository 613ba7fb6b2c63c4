"""Unit tests for Stack implementation."""

import pytest
from generic_containers.components.stack import Stack
from generic_containers.core.errors import ContainerError, EmptyStackError, StackOverflowError
from generic_containers.interfaces import SupportsStack


@pytest.fixture
def stack():
    """Create empty stack for tests."""
    return Stack[int]()


def test_push_pop_lifo(stack):
    """Items come back in reverse order of pushing."""
    for i in range(3):
        stack.push(i)

    assert len(stack) == 3
    assert stack.pop() == 2
    assert stack.pop() == 1
    assert stack.pop() == 0
    assert stack.is_empty()


def test_peek_does_not_remove(stack):
    stack.push(7)
    assert stack.peek() == 7
    assert len(stack) == 1


def test_pop_empty_raises(stack):
    with pytest.raises(EmptyStackError):
        stack.pop()
    with pytest.raises(EmptyStackError):
        stack.peek()


def test_empty_error_is_index_error(stack):
    """Callers catching IndexError (as for list.pop) still work."""
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(ContainerError):
        stack.pop()


def test_initial_items_and_iteration():
    s = Stack(["a", "b", "c"])
    assert s.peek() == "c"
    assert list(s) == ["c", "b", "a"]  # top to bottom
    assert repr(s) == "Stack(['a', 'b', 'c'])"


def test_max_size():
    s = Stack(max_size=2)
    s.push(1)
    s.push(2)
    with pytest.raises(StackOverflowError):
        s.push(3)
    assert s.pop() == 2
    s.push(3)
    assert list(s) == [3, 1]
    assert s.max_size == 2


def test_max_size_applies_to_initial_items():
    with pytest.raises(StackOverflowError):
        Stack([1, 2, 3], max_size=2)


def test_negative_max_size_rejected():
    with pytest.raises(ValueError):
        Stack(max_size=-1)


def test_satisfies_protocol(stack):
    def drain(s: SupportsStack[int]) -> list[int]:
        out = []
        while not s.is_empty():
            out.append(s.pop())
        return out

    stack.push(1)
    stack.push(2)
    assert drain(stack) == [2, 1]
