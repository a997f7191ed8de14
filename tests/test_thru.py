"""Tests for transformation chains."""

from collections.abc import Iterator

import pytest

import reviter as rv


def test_transforms_elements() -> None:
    """Test a single pass."""
    assert list(rv.thru_it([11, 22, 33], lambda n: n + 1)) == [12, 23, 34]


def test_chains_passes() -> None:
    """Test that each pass receives the previous result."""
    result = rv.thru_it([1, 2, 3], lambda n: n * n, str, lambda s: s + "!")
    assert list(result) == ["1!", "4!", "9!"]


def test_transforms_elements_to_tuples() -> None:
    """Test that tuple results are plain values, not argument lists."""
    result = rv.thru_it([1, 2, 3], lambda n: (n, str(n) * n))
    assert list(result) == [(1, "1"), (2, "22"), (3, "333")]


def test_skips_elements() -> None:
    """Test that skipped elements don't reach later passes."""
    seen: list[int] = []

    def _record(n: int) -> int:
        seen.append(n)
        return n + 1

    result = rv.thru_it([11, 22, 33], lambda n: n if n > 20 else rv.SKIP, _record)
    assert list(result) == [23, 34]
    assert seen == [22, 33]


def test_skips_in_last_pass() -> None:
    """Test skipping from the last pass."""
    assert list(rv.thru_it([1, 2, 3], lambda n: rv.SKIP if n == 2 else n)) == [1, 3]


def test_pass_if() -> None:
    """Test the conditional pass helper."""
    result = rv.thru_it([1, 2, 3], rv.pass_if(lambda n: n > 1), lambda n: n * n)
    assert list(result) == [4, 9]


class TestNextIterate:
    """Test fanning elements out."""

    def test_iterates_over_elements(self) -> None:
        """Test that each expanded element continues through later passes."""
        result = rv.thru_it(
            [1, 2, 3, 4],
            lambda n: rv.next_iterate([n] * n),
            lambda n: n if n < 4 else rv.SKIP,
        )
        assert list(result) == [1, 2, 2, 3, 3, 3]

    def test_expands_from_last_pass(self) -> None:
        """Test that expanded elements are emitted as they are."""
        result = rv.thru_it([1, 2], lambda n: rv.next_iterate(range(n)))
        assert list(result) == [0, 0, 1]

    def test_expands_to_nothing(self) -> None:
        """Test that an empty expansion drops the element."""
        result = rv.thru_it([1, 2], lambda n: rv.next_iterate([]), str)
        assert list(result) == []

    def test_nested_expansion(self) -> None:
        """Test expansions within expansions, depth first."""
        result = rv.thru_it(
            ["ab", "c"],
            lambda s: rv.next_iterate(s),
            lambda c: rv.next_iterate([c, c.upper()]),
            lambda c: f"<{c}>",
        )
        assert list(result) == ["<a>", "<A>", "<b>", "<B>", "<c>", "<C>"]

    def test_treats_signals_as_values(self) -> None:
        """Test that expanded signals are handed to the next pass as values."""
        result = rv.thru_it(
            [1, 2, 3],
            lambda n: rv.next_iterate([rv.next_args(n * 2)]),
            lambda call: call,
        )
        assert list(result) == [(2,), (4,), (6,)]

    def test_expansion_is_lazy(self) -> None:
        """Test that expanded elements are produced on demand."""
        pulled: list[int] = []

        def _values(n: int) -> Iterator[int]:
            for i in range(n):
                pulled.append(i)
                yield i

        it = iter(rv.thru_it([1_000_000], lambda n: rv.next_iterate(_values(n))))
        assert next(it) == 0
        assert next(it) == 1
        assert pulled == [0, 1]


class TestNextArgs:
    """Test passing several arguments."""

    def test_passes_arguments(self) -> None:
        """Test calling the next pass with several arguments."""
        result = rv.thru_it(
            [(1, 2), (3, 4)],
            lambda pair: rv.next_args(*pair),
            lambda a, b: a * b,
        )
        assert list(result) == [2, 12]

    def test_emits_arguments_from_last_pass(self) -> None:
        """Test that arguments returned by the last pass are emitted as a tuple."""
        assert list(rv.thru_it([1], lambda n: rv.next_args(n, n + 1))) == [(1, 2)]


def test_without_passes() -> None:
    """Test that elements are emitted unchanged without passes."""
    assert list(rv.thru_it([1, 2, 3])) == [1, 2, 3]


def test_is_lazy_and_reiterable() -> None:
    """Test that passes run on demand, once per traversal."""
    calls: list[int] = []

    def _record(n: int) -> int:
        calls.append(n)
        return n

    result = rv.thru_it([1, 2], _record)
    assert calls == []
    assert list(result) == [1, 2]
    assert list(result) == [1, 2]
    assert calls == [1, 2, 1, 2]


def test_error_propagates_on_pull() -> None:
    """Test that a pass error surfaces when the affected element is pulled."""

    def _fail_on_two(n: int) -> int:
        if n == 2:
            msg = "two"
            raise KeyError(msg)
        return n

    it = iter(rv.thru_it([1, 2, 3], _fail_on_two, lambda n: n * 10))
    assert next(it) == 10
    with pytest.raises(KeyError, match="two"):
        next(it)


def test_rev_iter_thru() -> None:
    """Test the facade method, and its buffered reverse."""
    result = rv.RevIter.from_([11, 22, 33]).thru(
        rv.pass_if(lambda n: n > 20),
        lambda n: n + 1,
    )
    assert isinstance(result, rv.RevIter)
    assert list(result) == [23, 34]
    assert list(result.reverse()) == [34, 23]
