from __future__ import annotations

from collections.abc import Iterable
from typing import Any, NamedTuple

from ._core import SupportsKeysAndGetItem
from ._make import ReversibleIterable, make_it
from ._reverse import over_array
from ._transform import map_it


class Entry[K, V](NamedTuple):
    """A key and its value, as yielded by `over_entries()`."""

    key: K
    """The key."""
    value: V
    """The value associated with the key."""

    def __repr__(self) -> str:
        return f"({self.key!r}, {self.value!r})"


def _own_keys(target: object) -> tuple[Any, ...]:
    if isinstance(target, SupportsKeysAndGetItem):
        return tuple(target.keys())
    return tuple(vars(target))


def _lookup(target: object, key: Any) -> Any:
    if isinstance(target, SupportsKeysAndGetItem):
        return target[key]
    return getattr(target, key)


def over_keys(target: object) -> ReversibleIterable[Any]:
    """Iterate over the keys of a mapping, or over the attribute names of an object.

    The keys are read once, when called.

    Args:
        target (object): A mapping, or any object with a `__dict__`.

    Returns:
        ReversibleIterable[Any]: The keys, in insertion order.

    Raises:
        TypeError: If **target** is neither a mapping nor has a `__dict__`.

    Example:
    ```python
    >>> import reviter as rv
    >>> keys = rv.over_keys({"a": 1, "b": 2})
    >>> list(keys)
    ['a', 'b']
    >>> list(keys.reverse())
    ['b', 'a']

    ```
    """
    return over_array(_own_keys(target))


def over_entries(target: object) -> ReversibleIterable[Entry[Any, Any]]:
    """Iterate over `(key, value)` entries of a mapping, or over the attributes of an object.

    Values are looked up when the entries are pulled.

    Example:
    ```python
    >>> import reviter as rv
    >>> class Point:
    ...     def __init__(self) -> None:
    ...         self.x = 1
    ...         self.y = 2
    >>> list(rv.over_entries(Point()))
    [('x', 1), ('y', 2)]
    >>> list(rv.over_entries({"a": 1, "b": 2}).reverse())
    [('b', 2), ('a', 1)]

    ```
    """
    keys = over_keys(target)

    def _to_entries(_keys: Iterable[Any]) -> Iterable[Entry[Any, Any]]:
        return map_it(_keys, lambda key: Entry(key, _lookup(target, key)))

    return make_it(
        lambda: iter(_to_entries(keys)), lambda: _to_entries(keys.reverse())
    )
