"""Unique token generation for class and animation names."""

from __future__ import annotations

import itertools
import uuid
from typing import Callable

TokenGenerator = Callable[[], str]


def random_token(length: int = 5) -> str:
    """Return a short random lowercase hex token."""
    return uuid.uuid4().hex[:length]


def counter_tokens(start: int = 0) -> TokenGenerator:
    """Return a deterministic generator yielding ``"0"``, ``"1"``, ...

    Useful for snapshot-style tests and reproducible builds.
    """
    counter = itertools.count(start)

    def token() -> str:
        return str(next(counter))

    return token
