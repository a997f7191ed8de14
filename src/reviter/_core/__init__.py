from ._config import Config, get_config
from ._main import Pipeable
from ._protocols import (
    SupportsArrayAccess,
    SupportsKeysAndGetItem,
    SupportsReversed,
    has_reversed,
    is_array_like,
)

__all__ = [
    "Config",
    "Pipeable",
    "SupportsArrayAccess",
    "SupportsKeysAndGetItem",
    "SupportsReversed",
    "get_config",
    "has_reversed",
    "is_array_like",
]
