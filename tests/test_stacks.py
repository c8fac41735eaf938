import pytest

from dsakit.stacks import Stack, StackOverflowError, StackUnderflowError, reverse_string


def test_stack_walkthrough():
    s = Stack(5)
    for v in (1, 2, 3, 4):
        s.push(v)
    assert s.peek() == 4
    assert [s.pop() for _ in range(4)] == [4, 3, 2, 1]
    assert s.is_empty()
    with pytest.raises(StackUnderflowError):
        s.peek()


def test_stack_overflow():
    s = Stack(2)
    s.push(1)
    s.push(2)
    with pytest.raises(StackOverflowError):
        s.push(3)
    assert s.peek() == 2


def test_stack_underflow_on_pop():
    s = Stack(3)
    with pytest.raises(StackUnderflowError):
        s.pop()


def test_stack_not_empty_after_push():
    s = Stack(1)
    s.push(9)
    assert not s.is_empty()
    assert len(s) == 1


def test_reverse_string_example():
    assert reverse_string("abhishek") == "kehsihba"


@pytest.mark.parametrize("text", ["", "a", "racecar", "hello world"])
def test_reverse_string_round_trip(text):
    once = reverse_string(text)
    assert len(once) == len(text)
    assert reverse_string(once) == text
    assert sorted(once) == sorted(text)