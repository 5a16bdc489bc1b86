"""Property name normalization and declaration formatting."""

from __future__ import annotations

import re
from collections.abc import Iterable

from flcss.model import Declaration, Scalar

__all__ = ["normalize_property", "format_value", "join_declarations"]

_UPPER_RE = re.compile(r"[A-Z]")


def normalize_property(name: str) -> str:
    """Turn a camelCase property name into a CSS property name.

    A leading capital marks a vendor prefix::

        >>> normalize_property("backgroundColor")
        'background-color'
        >>> normalize_property("MozAppearance")
        '-moz-appearance'

    Names that are already kebab-case pass through unchanged.
    """
    if name[:1].isupper():
        name = f"-{name[0].lower()}{name[1:]}"
    return _UPPER_RE.sub(lambda m: f"-{m.group(0).lower()}", name)


def format_value(value: Scalar) -> str:
    """Render a scalar as CSS value text."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def join_declarations(declarations: Iterable[Declaration]) -> str:
    """Join declarations as ``a: 1; b: 2;`` (empty string for none)."""
    parts = [str(d) for d in declarations]
    if not parts:
        return ""
    return "; ".join(parts) + ";"
