from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Iterable, Iterator, Reversible
from typing import Any, Self, overload


class ReversibleIterable[T](Reversible[T]):
    """An `Iterable` able to produce its own elements back-to-front, without buffering them.

    This is the interface every wrapper of `reviter` implements.

    Unlike `__reversed__`, which returns a single-use `Iterator`, `reverse()` returns a new `Iterable`, which may be traversed any number of times, and reversed again.

    Subclasses must implement `__iter__` and `reverse`. `__reversed__` is derived from `reverse`, so the builtin `reversed()` accepts any `ReversibleIterable`.

    Example:
    ```python
    >>> import reviter as rv
    >>> class Countdown(rv.ReversibleIterable[int]):
    ...     def __init__(self, start: int) -> None:
    ...         self.start = start
    ...     def __iter__(self):
    ...         return iter(range(self.start, 0, -1))
    ...     def reverse(self):
    ...         return range(1, self.start + 1)
    >>> list(Countdown(3))
    [3, 2, 1]
    >>> list(reversed(Countdown(3)))
    [1, 2, 3]
    >>> rv.is_reversible(Countdown(3))
    True

    ```
    """

    __slots__ = ()

    @abstractmethod
    def __iter__(self) -> Iterator[T]: ...

    @abstractmethod
    def reverse(self) -> Iterable[T]:
        """Return an `Iterable` over the same elements, in reverse order."""
        ...

    def __reversed__(self) -> Iterator[T]:
        return iter(self.reverse())


class _MadeIt[T](Iterable[T]):
    __slots__ = ("_iterate",)

    def __init__(self, iterate: Callable[[], Iterator[T]]) -> None:
        self._iterate = iterate

    def __iter__(self) -> Iterator[T]:
        return self._iterate()


class _MadeRevIt[T](ReversibleIterable[T]):
    __slots__ = ("_iterate", "_reverse")

    def __init__(
        self,
        iterate: Callable[[], Iterator[T]],
        reverse: Callable[[], Iterable[T]],
    ) -> None:
        self._iterate = iterate
        self._reverse = reverse

    def __iter__(self) -> Iterator[T]:
        return self._iterate()

    def reverse(self) -> Iterable[T]:
        return self._reverse()


@overload
def make_it[T](
    iterate: Callable[[], Iterator[T]], reverse: None = None
) -> Iterable[T]: ...
@overload
def make_it[T](
    iterate: Callable[[], Iterator[T]], reverse: Callable[[], Iterable[T]]
) -> ReversibleIterable[T]: ...
def make_it[T](
    iterate: Callable[[], Iterator[T]],
    reverse: Callable[[], Iterable[T]] | None = None,
) -> Iterable[T] | ReversibleIterable[T]:
    """Build an `Iterable` from a function returning a fresh `Iterator` on each traversal.

    If **reverse** is given, the result is a `ReversibleIterable`, whose `reverse()` calls it.

    Otherwise the result is a plain `Iterable`, which `is_reversible()` rejects.

    Args:
        iterate (Callable[[], Iterator[T]]): Called once per traversal.
        reverse (Callable[[], Iterable[T]] | None): Called by `reverse()`. Defaults to None.

    Returns:
        Iterable[T] | ReversibleIterable[T]: The new iterable.

    Example:
    ```python
    >>> import reviter as rv
    >>> data = [1, 2, 3]
    >>> plain = rv.make_it(lambda: iter(data))
    >>> list(plain), list(plain)
    ([1, 2, 3], [1, 2, 3])
    >>> rv.is_reversible(plain)
    False
    >>> both_ways = rv.make_it(lambda: iter(data), lambda: data[::-1])
    >>> list(both_ways.reverse())
    [3, 2, 1]

    ```
    """
    if reverse is None:
        return _MadeIt(iterate)
    return _MadeRevIt(iterate, reverse)


class _NoneIt(ReversibleIterable[Any]):
    __slots__ = ()

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def reverse(self) -> Self:
        return self


_NONE_IT = _NoneIt()


def over_none[T]() -> ReversibleIterable[T]:
    """Return the shared empty `ReversibleIterable`, which is its own reverse.

    Example:
    ```python
    >>> import reviter as rv
    >>> list(rv.over_none())
    []
    >>> rv.over_none().reverse() is rv.over_none()
    True

    ```
    """
    return _NONE_IT


def iterate_it[T](iterable: Iterable[T]) -> Iterator[T]:
    """Return a generator over **iterable**, hiding whatever type the source is."""
    yield from iterable
