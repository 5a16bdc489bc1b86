"""Rule flattener: turns a nested style tree into flat CSS rules.

Nested blocks are discovered while the tree is walked. Each discovery is
queued with the scope it composes to and processed later in the same pass,
so rules come out breadth-first: a block's own declarations first, then its
nested selectors and media queries in the order they were written.

Selector composition is plain string concatenation. ``{"&:hover": ...}``
under ``.btn`` becomes ``.btn&:hover`` and ``{" span": ...}`` becomes
``.btn span``.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping

from flcss.model import Declaration, Rule, Scalar, Scope
from flcss.properties import format_value, join_declarations, normalize_property
from flcss.tree import Nested, build_tree

__all__ = ["flatten", "flatten_tree"]

logger = logging.getLogger(__name__)

MEDIA = "@media"


def flatten(root_selector: str, tree: Mapping[str, object]) -> list[Rule]:
    """Flatten *tree* under *root_selector* into an ordered list of rules.

    Raises:
        ValueShapeError: if the tree contains a value that is neither a
            scalar nor a mapping.
    """
    return flatten_tree(root_selector, build_tree(root_selector, tree))


def flatten_tree(root_selector: str, root: Nested) -> list[Rule]:
    """Flatten an already-built tree. See ``flatten``."""
    rules: list[Rule] = []
    queue: deque[tuple[Scope, Nested]] = deque([(Scope(root_selector), root)])

    while queue:
        scope, node = queue.popleft()

        for block in node.blocks:
            child = _compose(scope, block.key)
            if child is not None:
                queue.append((child, block))

        declarations = tuple(_declaration(v.key, v.value) for v in node.values)
        if not declarations:
            continue
        rules.append(_emit(scope, declarations))

    return rules


def _compose(scope: Scope, key: str) -> Scope | None:
    """Return the scope a nested block composes to, or None to drop it."""
    if key.startswith("@"):
        if not key.startswith(MEDIA):
            logger.debug("Dropping unsupported at-rule %r under %r", key, scope.selector)
            return None
        return scope.within(key[len(MEDIA):].strip())
    return scope.descend(key)


def _declaration(name: str, value: Scalar) -> Declaration:
    return Declaration(property=normalize_property(name), value=format_value(value))


def _at_media(condition: str) -> str:
    return f"{MEDIA} {condition}" if condition else MEDIA


def _emit(scope: Scope, declarations: tuple[Declaration, ...]) -> Rule:
    block = join_declarations(declarations)
    if not scope.media:
        return Rule(selector=scope.selector, block=block, declarations=declarations)

    outer, *inner = scope.media
    block = f"{scope.selector} {{ {block} }}"
    for condition in reversed(inner):
        block = f"{_at_media(condition)} {{ {block} }}"
    return Rule(selector=_at_media(outer), block=block, declarations=declarations)
