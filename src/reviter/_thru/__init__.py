from ._chain import Pass, thru_it
from ._signals import (
    SKIP,
    NextArgs,
    NextIterate,
    NextSkip,
    next_args,
    next_iterate,
    pass_if,
)

__all__ = [
    "SKIP",
    "NextArgs",
    "NextIterate",
    "NextSkip",
    "Pass",
    "next_args",
    "next_iterate",
    "pass_if",
    "thru_it",
]
