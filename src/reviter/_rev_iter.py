from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Final, Self, TypeIs, overload

import cytoolz as cz

from . import _termination as term
from ._core import Pipeable, get_config
from ._make import ReversibleIterable
from ._reverse import reverse_array, reverse_it
from ._thru import Pass, thru_it
from ._transform import filter_it, flat_map_it, map_it

ARRAY_LIKE_METHODS: Final = (
    "every",
    "filter",
    "flat_map",
    "for_each",
    "map",
    "reduce",
    "reverse",
    "some",
)
"""Methods an iterable must expose to be accepted as is by `RevIter.of()`."""


def _convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    if more_data or not cz.itertoolz.isiterable(data):
        return (data, *more_data)  # type: ignore[return-value]
    return data  # type: ignore[return-value]


class RevIter[T](Pipeable, ReversibleIterable[T]):
    """A reversible, lazy `Iterable` with array-like operations.

    Wraps any `Iterable`, and exposes `every`, `filter`, `flat_map`, `for_each`, `map`, `reduce`, `reverse` and `some` over it.

    - Transforming methods (`filter`, `map`, `flat_map`, `reverse`, `thru`) return a new `RevIter`, and never touch the receiver.
    - Nothing is computed until the result is iterated, and each traversal walks the whole chain again.
    - `reverse()` stays lazy through `filter`, `map` and `flat_map`: the reverse of a transformation is the transformation of the reversed source.

    A source is only ever buffered when it can't be reversed otherwise: see `reverse_it()`.

    Instantiate with `RevIter.from_()` or `RevIter.of()`; `RevIter` itself is abstract.

    Example:
    ```python
    >>> import reviter as rv
    >>> numbers = rv.RevIter.from_([1, 2, 3, 4])
    >>> evens = numbers.filter(lambda x: x % 2 == 0).map(lambda x: x * 10)
    >>> evens
    RevIter(20, 40)
    >>> evens.reverse()
    RevIter(40, 20)
    >>> evens.reverse().reverse() is evens
    True

    ```
    """

    __slots__ = ()

    @staticmethod
    def none() -> RevIter[Any]:
        """Return the shared empty `RevIter`, which is its own reverse.

        Example:
        ```python
        >>> import reviter as rv
        >>> rv.RevIter.none()
        RevIter()
        >>> rv.RevIter.none().reverse() is rv.RevIter.none()
        True

        ```
        """
        return _NONE

    @staticmethod
    def is_compatible(source: Iterable[Any]) -> bool:
        """Check whether **source** already exposes every array-like method.

        The check is structural: any object with methods named as in `ARRAY_LIKE_METHODS` qualifies, whatever its type.

        Example:
        ```python
        >>> import reviter as rv
        >>> rv.RevIter.is_compatible(rv.RevIter.from_([1]))
        True
        >>> rv.RevIter.is_compatible([1])
        False

        ```
        """
        return all(hasattr(source, name) for name in ARRAY_LIKE_METHODS)

    @overload
    @staticmethod
    def of[U: RevIter[Any]](source: U) -> U: ...
    @overload
    @staticmethod
    def of[U](source: Iterable[U]) -> RevIter[U]: ...
    @staticmethod
    def of[U](source: Iterable[U]) -> Any:
        """Wrap **source** into a `RevIter`, unless it is compatible already.

        Args:
            source (Iterable[U]): The iterable to wrap.

        Returns:
            Any: **source** itself if `RevIter.is_compatible()` accepts it, or a new `RevIter` otherwise.

        Example:
        ```python
        >>> import reviter as rv
        >>> wrapped = rv.RevIter.of([1, 2])
        >>> rv.RevIter.of(wrapped) is wrapped
        True

        ```
        """
        if RevIter.is_compatible(source):
            return source
        return RevIter.from_(source)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> RevIter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> RevIter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> RevIter[U]:
        """Always wrap **data** into a new `RevIter`.

        The reverse of the result delegates to **data** when it is reversible (see `is_reversible()`), and buffers it otherwise.

        Unpacked values are accepted too, like the convenience of `[x, y, z]`.

        Args:
            data (Iterable[U] | U): The iterable to wrap, or a first value.
            *more_data (U): Other values, when not wrapping an iterable.

        Returns:
            RevIter[U]: A new `RevIter`.

        Example:
        ```python
        >>> import reviter as rv
        >>> data = [1, 2, 3]
        >>> wrapped = rv.RevIter.from_(data)
        >>> wrapped is data
        False
        >>> list(wrapped.reverse())
        [3, 2, 1]
        >>> rv.RevIter.from_(1, 2, 3)
        RevIter(1, 2, 3)

        ```
        """
        source = _convert_data(data, *more_data)
        return _LazyRevIter(lambda: source, lambda: reverse_it(source))

    @abstractmethod
    def __iter__(self) -> Iterator[T]: ...

    def __repr__(self) -> str:
        return f"RevIter({get_config().iter_repr(self)})"

    def every(self, test: Callable[[T], bool]) -> bool:
        """Check whether every element satisfies **test**. True if empty.

        Example:
        ```python
        >>> import reviter as rv
        >>> rv.RevIter.from_([11, 22, 33]).every(lambda x: x > 10)
        True

        ```
        """
        return term.every(self, test)

    def some(self, test: Callable[[T], bool]) -> bool:
        """Check whether at least one element satisfies **test**. False if empty.

        Example:
        ```python
        >>> import reviter as rv
        >>> rv.RevIter.from_([11, 22, 33]).some(lambda x: x > 30)
        True

        ```
        """
        return term.some(self, test)

    @overload
    def filter[U](self, test: Callable[[T], TypeIs[U]]) -> RevIter[U]: ...
    @overload
    def filter(self, test: Callable[[T], bool]) -> RevIter[T]: ...
    def filter(self, test: Callable[[T], bool]) -> RevIter[Any]:
        """Keep the elements for which **test** is true.

        The reverse of the result filters the reverse of `self`.

        Example:
        ```python
        >>> import reviter as rv
        >>> kept = rv.RevIter.from_([11, 22, 33]).filter(lambda x: x > 11)
        >>> kept
        RevIter(22, 33)
        >>> kept.reverse()
        RevIter(33, 22)

        ```
        """
        return _LazyRevIter(
            lambda: filter_it(self, test),
            lambda: filter_it(reverse_it(self), test),
        )

    @overload
    def flat_map[U](self: RevIter[Iterable[U]]) -> RevIter[U]: ...
    @overload
    def flat_map[R](self, convert: Callable[[T], Iterable[R]]) -> RevIter[R]: ...
    def flat_map(
        self,
        convert: Callable[[Any], Iterable[Any]] = cz.functoolz.identity,
    ) -> RevIter[Any]:
        """Concatenate the iterables **convert** returns for each element.

        The reverse of the result walks the reverse of `self`, and reverses each converted group too.

        **convert** is then called once per element on each traversal; it should not rely on being called a fixed number of times.

        Args:
            convert (Callable[[Any], Iterable[Any]]): Function producing the group of an element. Defaults to identity.

        Returns:
            RevIter[Any]: The concatenated groups.

        Example:
        ```python
        >>> import reviter as rv
        >>> pairs = rv.RevIter.from_([11, 22, 33]).flat_map(lambda n: [n, n + 1])
        >>> pairs
        RevIter(11, 12, 22, 23, 33, 34)
        >>> pairs.reverse()
        RevIter(34, 33, 23, 22, 12, 11)

        ```
        """
        return _LazyRevIter(
            lambda: flat_map_it(self, convert),
            lambda: flat_map_it(
                reverse_it(self), lambda element: reverse_it(convert(element))
            ),
        )

    def for_each(self, action: Callable[[T], object]) -> None:
        """Call **action** on each element, in order.

        Example:
        ```python
        >>> import reviter as rv
        >>> rv.RevIter.from_(["a", "b"]).reverse().for_each(print)
        b
        a

        ```
        """
        term.for_each(self, action)

    def map[R](self, convert: Callable[[T], R]) -> RevIter[R]:
        """Convert each element with **convert**.

        The reverse of the result converts the reverse of `self`.

        Example:
        ```python
        >>> import reviter as rv
        >>> rv.RevIter.from_([1, 2, 3]).map(str).reverse()
        RevIter('3', '2', '1')

        ```
        """
        return _LazyRevIter(
            lambda: map_it(self, convert),
            lambda: map_it(reverse_it(self), convert),
        )

    def reduce[R](self, reducer: Callable[[R, T], R], initial: R) -> R:
        """Fold the elements from first to last, starting from **initial**.

        Example:
        ```python
        >>> import reviter as rv
        >>> rv.RevIter.from_("abc").reduce(lambda acc, c: acc + c.upper(), ">")
        '>ABC'
        >>> rv.RevIter.none().reduce(lambda acc, c: acc + c, ">")
        '>'

        ```
        """
        return term.reduce_it(self, reducer, initial)

    def reverse(self) -> RevIter[T]:
        """Return a `RevIter` over the same elements, last to first.

        This fallback drains `self` into a `tuple` on each traversal of the result.

        The facades built by the transforming methods override it with a lazy reverse.

        Reversing the result returns `self`.
        """
        return _OppositeRevIter(lambda: reverse_array(tuple(self)), self)

    def thru(self, *passes: Pass) -> RevIter[Any]:
        """Pass each element through a chain of functions. See `thru_it()`.

        The result has no lazy reverse: reversing it buffers the transformed elements.

        Example:
        ```python
        >>> import reviter as rv
        >>> rv.RevIter.from_([1, 2, 3, 4]).thru(
        ...     lambda n: rv.next_iterate([str(n)] * n),
        ...     lambda s: s if s != "4" else rv.SKIP,
        ... )
        RevIter('1', '2', '2', '3', '3', '3')

        ```
        """
        return _LazyRevIter(lambda: thru_it(self, *passes))

    def first(self) -> T | None:
        """Return the first element, or None if empty.

        Example:
        ```python
        >>> import reviter as rv
        >>> rv.RevIter.from_([7, 8, 9]).first()
        7

        ```
        """
        return term.first(self)

    def last(self) -> T | None:
        """Return the last element, or None if empty.

        Computed as the first element of `reverse()`, so a reversible source is not traversed.

        Example:
        ```python
        >>> import reviter as rv
        >>> rv.RevIter.from_([7, 8, 9]).map(lambda x: x + 1).last()
        10

        ```
        """
        return term.last(self)

    def is_empty(self) -> bool:
        """Check whether there is no element, pulling at most one."""
        return term.is_empty(self)

    def collect[C](self, collector: Callable[[Iterable[T]], C] = tuple) -> C:
        """Consume the elements into a collection built by **collector**.

        Args:
            collector (Callable[[Iterable[T]], C]): Collection factory. Defaults to `tuple`.

        Returns:
            C: The collected elements.

        Example:
        ```python
        >>> import reviter as rv
        >>> rv.RevIter.from_([3, 1, 2]).collect()
        (3, 1, 2)
        >>> rv.RevIter.from_([3, 1, 2]).reverse().collect(list)
        [2, 1, 3]

        ```
        """
        return collector(self)


class _LazyRevIter[T](RevIter[T]):
    __slots__ = ("_iterate", "_reverse")

    def __init__(
        self,
        iterate: Callable[[], Iterable[T]],
        reverse: Callable[[], Iterable[T]] | None = None,
    ) -> None:
        self._iterate = iterate
        self._reverse = reverse

    def __iter__(self) -> Iterator[T]:
        return iter(self._iterate())

    def reverse(self) -> RevIter[T]:
        if self._reverse is None:
            return super().reverse()
        return _OppositeRevIter(self._reverse, self)


class _OppositeRevIter[T](RevIter[T]):
    """The reverse of another `RevIter`, reversing back into it."""

    __slots__ = ("_iterate", "_origin")

    def __init__(self, iterate: Callable[[], Iterable[T]], origin: RevIter[T]) -> None:
        self._iterate = iterate
        self._origin = origin

    def __iter__(self) -> Iterator[T]:
        return iter(self._iterate())

    def reverse(self) -> RevIter[T]:
        return self._origin


class _NoneRevIter(RevIter[Any]):
    __slots__ = ()

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def reverse(self) -> Self:
        return self


_NONE: Final[RevIter[Any]] = _NoneRevIter()


def _lacks(cls: type, name: str) -> bool:
    if name == "reverse":
        # `list.reverse()` and the like reorder in place and return None
        return not issubclass(cls, ReversibleIterable)
    return not hasattr(cls, name)


def with_array_methods[C: type](cls: C) -> C:
    """Derive a subclass of an iterable class, with the array-like methods of `RevIter` it lacks.

    Methods **cls** already defines are kept as they are, except `reverse`: unless **cls** is a `ReversibleIterable`, it is replaced by `RevIter.reverse`, which never mutates the instance.

    Instances of the result pass `RevIter.is_compatible()`.

    Args:
        cls (C): An iterable class.

    Returns:
        C: A new subclass of **cls**, with the same name.

    Raises:
        TypeError: If instances of **cls** are not iterable.

    Example:
    ```python
    >>> import reviter as rv
    >>> class Countdown:
    ...     def __init__(self, start: int) -> None:
    ...         self.start = start
    ...     def __iter__(self):
    ...         return iter(range(self.start, 0, -1))
    >>> ArrayCountdown = rv.with_array_methods(Countdown)
    >>> ArrayCountdown(3).map(lambda x: x * 2).reverse().collect()
    (2, 4, 6)
    >>> rv.RevIter.is_compatible(ArrayCountdown(3))
    True
    >>> data = rv.with_array_methods(list)([1, 2, 3])
    >>> data.reverse()
    RevIter(3, 2, 1)
    >>> data
    [1, 2, 3]

    ```
    """
    if not hasattr(cls, "__iter__"):
        msg = f"{cls.__name__} instances are not iterable"
        raise TypeError(msg)
    added: dict[str, Any] = {
        name: getattr(RevIter, name)
        for name in (*ARRAY_LIKE_METHODS, "thru", "__reversed__")
        if _lacks(cls, name)
    }
    namespace: dict[str, Any] = {
        "__module__": cls.__module__,
        "__qualname__": cls.__qualname__,
        "__slots__": (),
        **added,
    }
    return type(cls)(cls.__name__, (cls,), namespace)
