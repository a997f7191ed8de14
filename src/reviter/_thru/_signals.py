from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Final


@dataclass(slots=True, frozen=True)
class NextSkip:
    """Signal returned by a pass to drop the current element.

    Use the `SKIP` singleton rather than instantiating it.
    """

    def __repr__(self) -> str:
        return "SKIP"


SKIP: Final = NextSkip()
"""Return this from a pass of `thru_it()` to drop the current element."""


@dataclass(slots=True, frozen=True)
class NextIterate[T]:
    """Signal returned by a pass to fan the current element out.

    See `next_iterate()`.
    """

    values: Iterable[T]


@dataclass(slots=True, frozen=True)
class NextArgs:
    """Signal returned by a pass to call the next pass with several arguments.

    See `next_args()`.
    """

    args: tuple[Any, ...]


def next_iterate[T](values: Iterable[T]) -> NextIterate[T]:
    """Continue the chain once per element of **values**.

    Each element goes through the remaining passes on its own, in order, before the next source element is processed.

    Returned from the last pass, the elements are emitted as they are.

    Args:
        values (Iterable[T]): Elements replacing the current one. May be empty.

    Returns:
        NextIterate[T]: The signal to return from a pass.

    Example:
    ```python
    >>> import reviter as rv
    >>> list(rv.thru_it([1, 2, 3], lambda n: rv.next_iterate([n] * n), lambda n: n * 10))
    [10, 20, 20, 30, 30, 30]

    ```
    """
    return NextIterate(values)


def next_args(*args: Any) -> NextArgs:
    """Call the next pass with **args** as positional arguments.

    Returned from the last pass, **args** is emitted as a `tuple`.

    Example:
    ```python
    >>> import reviter as rv
    >>> list(rv.thru_it([(1, 2), (3, 4)], lambda pair: rv.next_args(*pair), lambda a, b: a * b))
    [2, 12]
    >>> list(rv.thru_it([1, 2], lambda n: rv.next_args(n, -n)))
    [(1, -1), (2, -2)]

    ```
    """
    return NextArgs(args)


def pass_if[T](test: Callable[[T], bool]) -> Callable[[T], T | NextSkip]:
    """Build a pass forwarding its argument when **test** holds, and skipping it otherwise.

    Example:
    ```python
    >>> import reviter as rv
    >>> list(rv.thru_it([1, 2, 3], rv.pass_if(lambda n: n > 1), lambda n: n * n))
    [4, 9]

    ```
    """

    def _pass(value: T) -> T | NextSkip:
        return value if test(value) else SKIP

    return _pass
