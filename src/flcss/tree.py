"""Tagged style tree nodes.

A style tree arrives as a plain mapping whose values are either CSS values
(strings and numbers) or nested mappings (nested selectors and at-rules).
``build_tree`` checks every value once and produces ``Value`` and ``Nested``
nodes so the flattener never has to guess what a value is.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from flcss.errors import ValueShapeError
from flcss.model import Scalar

__all__ = ["Value", "Nested", "Node", "build_tree", "is_scalar"]


@dataclass(frozen=True)
class Value:
    """A declaration candidate: property name and raw CSS value."""

    key: str
    value: Scalar


@dataclass(frozen=True)
class Nested:
    """A nested block: selector fragment or at-rule, and its children."""

    key: str
    children: tuple[Node, ...]

    @property
    def values(self) -> list[Value]:
        return [c for c in self.children if isinstance(c, Value)]

    @property
    def blocks(self) -> list[Nested]:
        return [c for c in self.children if isinstance(c, Nested)]


Node = Value | Nested


def is_scalar(value: object) -> bool:
    """Return True for values that can be written as a CSS value."""
    # bool is an int subclass; True is not a CSS value.
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def build_tree(
    key: str, tree: object, path: tuple[str, ...] = ()
) -> Nested:
    """Build a ``Nested`` node from a plain mapping, checking every value.

    Raises:
        ValueShapeError: if *tree* is not a mapping, a key is not a string,
            or a value is neither a scalar nor a mapping.
    """
    if not isinstance(tree, Mapping):
        raise ValueShapeError(path, tree, reason="style tree must be a mapping")

    children: list[Node] = []
    for child_key, child in tree.items():
        child_path = path + (str(child_key),)
        if not isinstance(child_key, str):
            raise ValueShapeError(
                child_path, child_key, reason="property names must be strings"
            )
        if is_scalar(child):
            children.append(Value(key=child_key, value=child))
        elif isinstance(child, Mapping):
            children.append(build_tree(child_key, child, child_path))
        else:
            raise ValueShapeError(child_path, child)
    return Nested(key=key, children=tuple(children))
