from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import cytoolz as cz


@dataclass(slots=True)
class Config:
    """Process-wide settings of `reviter`.

    Get the live instance with `get_config()` and assign its attributes to change them.

    Args:
        repr_limit (int): Number of elements rendered by `repr()` before the output is elided.

    Example:
    ```python
    >>> import reviter as rv
    >>> cfg = rv.get_config()
    >>> previous = cfg.repr_limit
    >>> cfg.repr_limit = 3
    >>> rv.RevIter.from_(range(10))
    RevIter(0, 1, 2, ...)
    >>> cfg.repr_limit = previous

    ```
    """

    repr_limit: int = 20

    def iter_repr(self, data: Iterable[Any]) -> str:
        # one extra element tells whether to elide
        shown = tuple(cz.itertoolz.take(self.repr_limit + 1, data))
        body = ", ".join(repr(item) for item in shown[: self.repr_limit])
        if len(shown) > self.repr_limit:
            return f"{body}, ..." if body else "..."
        return body


_CONFIG = Config()


def get_config() -> Config:
    """Return the process-wide `Config` instance."""
    return _CONFIG
