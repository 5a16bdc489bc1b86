"""Error hierarchy for the flcss compiler."""
from __future__ import annotations

from typing import Any


class FlcssError(Exception):
    """Base error for all flcss errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class InvalidIdentifierError(FlcssError):
    """A logical style name cannot be used as a class name prefix."""

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(f"{name!r} is not a valid classname", **kwargs)
        self.name = name


class UnresolvedExtendError(FlcssError):
    """A style extends another style that is not in the same sheet."""

    def __init__(self, name: str, target: str, **kwargs: Any) -> None:
        super().__init__(
            f"can't extend {name!r} with {target!r} because {target!r} does not exist",
            **kwargs,
        )
        self.name = name
        self.target = target


class ValueShapeError(FlcssError):
    """A style tree contains a value that is neither a declaration nor a block."""

    def __init__(
        self,
        path: tuple[str, ...],
        value: object,
        *,
        reason: str = "",
        **kwargs: Any,
    ) -> None:
        location = " > ".join(path) or "<root>"
        detail = reason or f"unsupported value of type {type(value).__name__}"
        super().__init__(f"{location}: {detail}", **kwargs)
        self.path = path
        self.value = value
