from __future__ import annotations

from collections.abc import Iterable, Iterator

from ._core import SupportsArrayAccess, has_reversed, is_array_like
from ._make import ReversibleIterable, make_it


def is_reversible(source: Iterable[object]) -> bool:
    """Check whether **source** can be traversed backwards without buffering.

    The check is structural: it looks for a `reverse()` from a `ReversibleIterable`, a `__reversed__` method, or random access by position.

    Args:
        source (Iterable[object]): The iterable to check.

    Returns:
        bool: True if `reverse_it()` would not buffer **source**.

    Example:
    ```python
    >>> import reviter as rv
    >>> rv.is_reversible([1, 2])
    True
    >>> rv.is_reversible("abc")
    True
    >>> rv.is_reversible({"a": 1})
    True
    >>> rv.is_reversible(x for x in range(3))
    False

    ```
    """
    return (
        isinstance(source, ReversibleIterable)
        or has_reversed(source)
        or is_array_like(source)
    )


def _forward[T](array: SupportsArrayAccess[T]) -> Iterator[T]:
    # len() is read on each step, so the walk follows an array changing meanwhile
    i = 0
    while i < len(array):
        yield array[i]
        i += 1


def _backward[T](array: SupportsArrayAccess[T]) -> Iterator[T]:
    i = len(array) - 1
    while i >= 0:
        yield array[i]
        i -= 1


def over_array[T](array: SupportsArrayAccess[T]) -> ReversibleIterable[T]:
    """Traverse a random-access sequence by index, from first to last.

    Example:
    ```python
    >>> import reviter as rv
    >>> it = rv.over_array("abc")
    >>> list(it)
    ['a', 'b', 'c']
    >>> list(it.reverse())
    ['c', 'b', 'a']

    ```
    """
    return make_it(lambda: _forward(array), lambda: reverse_array(array))


def reverse_array[T](array: SupportsArrayAccess[T]) -> ReversibleIterable[T]:
    """Traverse a random-access sequence by index, from last to first.

    The array itself is left untouched, unlike `list.reverse()`.

    Args:
        array (SupportsArrayAccess[T]): Anything with `__len__` and positional `__getitem__`.

    Returns:
        ReversibleIterable[T]: A reversible iterable, whose reverse walks **array** forward again.

    Example:
    ```python
    >>> import reviter as rv
    >>> data = [1, 2, 3]
    >>> list(rv.reverse_array(data))
    [3, 2, 1]
    >>> data
    [1, 2, 3]
    >>> list(rv.reverse_array(data).reverse())
    [1, 2, 3]

    ```
    """
    return make_it(lambda: _backward(array), lambda: over_array(array))


def reverse_it[T](source: Iterable[T]) -> Iterable[T]:
    """Return an `Iterable` over the elements of **source**, in reverse order.

    The strategy depends on what **source** supports:

    - a `ReversibleIterable` is asked for its own `reverse()`.
    - an object with `__reversed__` is traversed with the builtin `reversed()`.
    - a random-access sequence without `__reversed__`, such as `tuple` or `str`, is walked backwards by index.
    - anything else is **buffered** into a `tuple`, which is then walked backwards.

    The last case is the only one where memory grows with the length of **source**, and it consumes **source** immediately.

    **source** is never mutated.

    Args:
        source (Iterable[T]): The iterable to reverse.

    Returns:
        Iterable[T]: A re-iterable over the reversed elements.

    Example:
    ```python
    >>> import reviter as rv
    >>> list(rv.reverse_it([1, 2, 3]))
    [3, 2, 1]
    >>> list(rv.reverse_it({"a": 1, "b": 2}))
    ['b', 'a']
    >>> reversed_gen = rv.reverse_it(x * 2 for x in range(3))
    >>> list(reversed_gen), list(reversed_gen)
    ([4, 2, 0], [4, 2, 0])

    ```
    """
    match source:
        case ReversibleIterable():
            return source.reverse()
        case _ if has_reversed(source):
            return make_it(lambda: reversed(source), lambda: source)
        case _ if is_array_like(source):
            return reverse_array(source)
        case _:
            return reverse_array(tuple(source))
