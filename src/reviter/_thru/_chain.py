from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

from .._make import make_it
from ._signals import NextArgs, NextIterate, NextSkip

type Pass = Callable[..., Any]
"""A transformer in a chain: any callable, returning a value or a signal."""


def _run(passes: Sequence[Pass], index: int, args: tuple[Any, ...]) -> Iterator[Any]:
    result = passes[index](*args)
    following = index + 1
    last = following == len(passes)
    match result:
        case NextSkip():
            return
        case NextIterate(values=values):
            for value in values:
                if last:
                    yield value
                else:
                    yield from _run(passes, following, (value,))
        case NextArgs(args=forwarded):
            if last:
                yield forwarded
            else:
                yield from _run(passes, following, forwarded)
        case _:
            if last:
                yield result
            else:
                yield from _run(passes, following, (result,))


def _thru(source: Iterable[Any], passes: Sequence[Pass]) -> Iterator[Any]:
    if not passes:
        yield from source
        return
    for element in source:
        yield from _run(passes, 0, (element,))


def thru_it(source: Iterable[Any], *passes: Pass) -> Iterable[Any]:
    """Pass each element of **source** through a chain of functions.

    The first pass receives a source element; each following pass receives what the previous one returned, and the last result is emitted.

    A pass may also return a signal instead of a value:

    - `SKIP` drops the element.
    - `next_iterate(values)` continues the chain with each of **values**, depth first.
    - `next_args(*args)` calls the next pass with several arguments.

    The chain is lazy: elements are computed when pulled, and memory only grows with the nesting depth of `next_iterate()` in flight.

    An exception raised by a pass propagates to the consumer pulling the affected element.

    Without passes, the elements of **source** are emitted unchanged.

    Args:
        source (Iterable[Any]): The elements to transform.
        *passes (Pass): The chain, in application order.

    Returns:
        Iterable[Any]: A re-iterable over the emitted elements.

    Example:
    ```python
    >>> import reviter as rv
    >>> list(rv.thru_it([11, 22, 33], lambda n: n + 1))
    [12, 23, 34]
    >>> list(rv.thru_it([11, 22, 33], lambda n: n if n > 20 else rv.SKIP, lambda n: n + 1))
    [23, 34]

    ```
    """
    return make_it(lambda: _thru(source, passes))
