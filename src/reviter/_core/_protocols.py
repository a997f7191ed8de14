from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Protocol, TypeIs, runtime_checkable


class SupportsArrayAccess[T](Protocol):
    """Random access by position, like `list`, `tuple` or `str`."""

    def __len__(self) -> int: ...
    def __getitem__(self, index: int, /) -> T: ...


class SupportsReversed[T](Protocol):
    """Anything the builtin `reversed()` accepts through `__reversed__`."""

    def __reversed__(self) -> Iterator[T]: ...


@runtime_checkable
class SupportsKeysAndGetItem[K, V](Protocol):
    def keys(self) -> Any: ...
    def __getitem__(self, key: K, /) -> V: ...


def is_array_like[T](data: object) -> TypeIs[SupportsArrayAccess[T]]:
    # mappings are indexed by key, not by position
    return (
        hasattr(data, "__getitem__")
        and hasattr(data, "__len__")
        and not isinstance(data, SupportsKeysAndGetItem)
    )


def has_reversed[T](data: object) -> TypeIs[SupportsReversed[T]]:
    return getattr(data, "__reversed__", None) is not None
