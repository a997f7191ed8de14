from __future__ import annotations

import functools
from collections.abc import Callable, Iterable
from typing import Any

import more_itertools as mit

from ._reverse import is_reversible, reverse_it

_MISSING: Any = object()


def for_each[T](source: Iterable[T], action: Callable[[T], object]) -> None:
    """Call **action** on each element of **source**, in order.

    Example:
    ```python
    >>> import reviter as rv
    >>> rv.for_each([1, 2], print)
    1
    2

    ```
    """
    for element in source:
        action(element)


def every[T](source: Iterable[T], test: Callable[[T], bool]) -> bool:
    """Check whether every element of **source** satisfies **test**.

    Stops at the first failing element. An empty **source** returns True.

    Example:
    ```python
    >>> import reviter as rv
    >>> rv.every([2, 4], lambda x: x % 2 == 0)
    True
    >>> rv.every([], lambda x: False)
    True

    ```
    """
    return all(test(element) for element in source)


def some[T](source: Iterable[T], test: Callable[[T], bool]) -> bool:
    """Check whether at least one element of **source** satisfies **test**.

    Stops at the first passing element. An empty **source** returns False.

    Example:
    ```python
    >>> import reviter as rv
    >>> rv.some([1, 2], lambda x: x % 2 == 0)
    True
    >>> rv.some([], lambda x: True)
    False

    ```
    """
    return any(test(element) for element in source)


def reduce_it[T, R](
    source: Iterable[T], reducer: Callable[[R, T], R], initial: R
) -> R:
    """Fold **source** from left to right, starting from **initial**.

    Example:
    ```python
    >>> import reviter as rv
    >>> rv.reduce_it([1, 2, 3], lambda acc, x: acc + x, 10)
    16
    >>> rv.reduce_it([], lambda acc, x: acc + x, "init")
    'init'

    ```
    """
    return functools.reduce(reducer, source, initial)


def first[T](source: Iterable[T]) -> T | None:
    """Return the first element of **source**, or None if it is empty."""
    return mit.first(source, None)


def last[T](source: Iterable[T]) -> T | None:
    """Return the last element of **source**, or None if it is empty.

    A reversible **source** (see `is_reversible()`) returns the first element of its reverse, without a full traversal.

    Anything else is scanned to the end.

    Example:
    ```python
    >>> import reviter as rv
    >>> rv.last([1, 2, 3])
    3
    >>> rv.last(x for x in "abc")
    'c'
    >>> rv.last([]) is None
    True

    ```
    """
    if is_reversible(source):
        return first(reverse_it(source))
    return mit.last(source, None)


def is_empty(source: Iterable[object]) -> bool:
    """Check whether **source** has no elements, pulling at most one.

    Example:
    ```python
    >>> import reviter as rv
    >>> rv.is_empty([])
    True
    >>> rv.is_empty(iter([None]))
    False

    ```
    """
    return mit.first(source, _MISSING) is _MISSING
