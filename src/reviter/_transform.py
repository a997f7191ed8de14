from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeIs, overload

import cytoolz as cz

from ._make import make_it


@overload
def filter_it[T, U](source: Iterable[T], test: Callable[[T], TypeIs[U]]) -> Iterable[U]: ...
@overload
def filter_it[T](source: Iterable[T], test: Callable[[T], bool]) -> Iterable[T]: ...
def filter_it[T](source: Iterable[T], test: Callable[[T], bool]) -> Iterable[T]:
    """Lazily keep the elements of **source** for which **test** is true.

    **test** is only called when an element is pulled, so its exceptions surface at iteration time.

    Args:
        source (Iterable[T]): The iterable to filter.
        test (Callable[[T], bool]): Predicate deciding whether to keep an element.

    Returns:
        Iterable[T]: A re-iterable over the kept elements, in source order.

    Example:
    ```python
    >>> import reviter as rv
    >>> list(rv.filter_it([11, 22, 33], lambda x: x > 11))
    [22, 33]

    ```
    """
    return make_it(lambda: filter(test, source))


def map_it[T, R](source: Iterable[T], convert: Callable[[T], R]) -> Iterable[R]:
    """Lazily convert each element of **source** with **convert**.

    Example:
    ```python
    >>> import reviter as rv
    >>> list(rv.map_it([11, 22, 33], str))
    ['11', '22', '33']

    ```
    """
    return make_it(lambda: map(convert, source))


@overload
def flat_map_it[T](source: Iterable[Iterable[T]]) -> Iterable[T]: ...
@overload
def flat_map_it[T, R](
    source: Iterable[T], convert: Callable[[T], Iterable[R]]
) -> Iterable[R]: ...
def flat_map_it(
    source: Iterable[Any],
    convert: Callable[[Any], Iterable[Any]] = cz.functoolz.identity,
) -> Iterable[Any]:
    """Lazily concatenate the iterables **convert** returns for each element of **source**.

    Without **convert**, flattens an iterable of iterables.

    Args:
        source (Iterable[Any]): The outer iterable.
        convert (Callable[[Any], Iterable[Any]]): Function producing the inner iterable of an element. Defaults to identity.

    Returns:
        Iterable[Any]: A re-iterable over the elements of all inner iterables, group after group.

    Example:
    ```python
    >>> import reviter as rv
    >>> list(rv.flat_map_it([11, 22, 33], lambda n: [n, n + 1]))
    [11, 12, 22, 23, 33, 34]
    >>> list(rv.flat_map_it([[1], [], [2, 3]]))
    [1, 2, 3]

    ```
    """
    return make_it(lambda: iter(cz.itertoolz.mapcat(convert, source)))
