"""Tests for terminal operations."""

from collections.abc import Iterable, Iterator

import pytest

import reviter as rv


class _Counted(rv.ReversibleIterable[int]):
    """Reversible iterable recording how it is traversed."""

    def __init__(self, *values: int) -> None:
        self.values = values
        self.pulled = 0
        self.reversed = 0

    def __iter__(self) -> Iterator[int]:
        for value in self.values:
            self.pulled += 1
            yield value

    def reverse(self) -> Iterable[int]:
        self.reversed += 1
        return self.values[::-1]


def test_for_each_visits_in_order() -> None:
    """Test that the action sees every element, in order."""
    seen: list[int] = []
    rv.for_each([1, 2, 3], seen.append)
    assert seen == [1, 2, 3]


def test_for_each_stops_on_error() -> None:
    """Test that an action error propagates and stops the iteration."""
    seen: list[int] = []

    def _action(x: int) -> None:
        if x == 2:
            msg = "stop"
            raise RuntimeError(msg)
        seen.append(x)

    with pytest.raises(RuntimeError, match="stop"):
        rv.for_each([1, 2, 3], _action)
    assert seen == [1]


class TestEveryAndSome:
    """Test `every()` and `some()`."""

    def test_every(self) -> None:
        """Test `every()` results."""
        assert rv.every([11, 22, 33], lambda x: x > 10)
        assert not rv.every([11, 22, 33], lambda x: x > 11)

    def test_every_empty_is_true(self) -> None:
        """Test vacuous truth."""
        assert rv.every([], lambda _: False)

    def test_every_short_circuits(self) -> None:
        """Test that `every()` stops at the first failing element."""
        source = _Counted(1, 2, 3)
        assert not rv.every(source, lambda x: x < 2)
        assert source.pulled == 2

    def test_some(self) -> None:
        """Test `some()` results."""
        assert rv.some([11, 22, 33], lambda x: x > 30)
        assert not rv.some([11, 22, 33], lambda x: x > 33)

    def test_some_empty_is_false(self) -> None:
        """Test that an empty iterable has no passing element."""
        assert not rv.some([], lambda _: True)

    def test_some_short_circuits(self) -> None:
        """Test that `some()` stops at the first passing element."""
        source = _Counted(1, 2, 3)
        assert rv.some(source, lambda x: x == 1)
        assert source.pulled == 1


class TestReduceIt:
    """Test `reduce_it()`."""

    def test_reduces(self) -> None:
        """Test folding from left to right."""
        assert rv.reduce_it([1, 2, 3], lambda acc, x: f"{acc}{x}", ">") == ">123"

    def test_empty_returns_initial(self) -> None:
        """Test that the initial value is returned untouched."""
        initial: list[int] = []
        assert rv.reduce_it([], lambda acc, x: [*acc, x], initial) is initial


class TestFirstLast:
    """Test `first()`, `last()` and `is_empty()`."""

    def test_first(self) -> None:
        """Test first element, and None on empty."""
        assert rv.first(iter([1, 2])) == 1
        assert rv.first([]) is None

    def test_last_of_array(self) -> None:
        """Test last element of an indexable sequence."""
        assert rv.last((1, 2, 3)) == 3
        assert rv.last([]) is None

    def test_last_of_generator(self) -> None:
        """Test last element of a plain iterator."""
        assert rv.last(x for x in range(4)) == 3
        assert rv.last(x for x in ()) is None

    def test_last_uses_reverse(self) -> None:
        """Test that a reversible source is reversed instead of traversed."""
        source = _Counted(1, 2, 3)
        assert rv.last(source) == 3
        assert source.reversed == 1
        assert source.pulled == 0

    def test_last_of_facade_uses_reverse(self) -> None:
        """Test `last()` on a `RevIter` built over a reversible source."""
        source = _Counted(1, 2, 3)
        assert rv.RevIter.from_(source).map(lambda x: x * 10).last() == 30
        assert source.reversed == 1
        assert source.pulled == 0

    def test_is_empty(self) -> None:
        """Test emptiness, pulling at most one element."""
        source = _Counted(1, 2)
        assert not rv.is_empty(source)
        assert source.pulled == 1
        assert rv.is_empty(())
        assert not rv.is_empty([None])
