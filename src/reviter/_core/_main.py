from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    """Mixin letting a facade end or tap a chain of method calls."""

    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Hand the facade to **func** and return whatever it returns.

        Extra arguments are forwarded after the facade.

        Example:
        ```python
        >>> import reviter as rv
        >>> rv.RevIter.from_([3, 1, 2]).map(lambda x: x * 10).into(sorted)
        [10, 20, 30]
        >>> rv.RevIter.from_("ab").reverse().into("".join)
        'ba'

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Call **func** on the facade, discard its result, and keep chaining on the same facade.

        Handy to log or assert in the middle of a chain. Since facades are lazy, **func** triggers a traversal only if it iterates.

        Example:
        ```python
        >>> import reviter as rv
        >>> rv.RevIter.from_([1, 2, 3]).inspect(print).last()
        RevIter(1, 2, 3)
        3

        ```
        """
        func(self, *args, **kwargs)
        return self
