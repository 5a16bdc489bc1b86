"""Style compiler: turns a map of named style trees into a stylesheet."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from functools import partial
from types import MappingProxyType

from flcss.config import CompilerConfig
from flcss.errors import InvalidIdentifierError, UnresolvedExtendError, ValueShapeError
from flcss.flattener import flatten
from flcss.model import StyleBundle
from flcss.tokens import TokenGenerator, random_token

__all__ = ["compile_style_sheet", "resolve_extend", "EXTEND"]

logger = logging.getLogger(__name__)

EXTEND = "extend"

# Letter first; the rest must keep the generated class name a single token.
_IDENTIFIER_RE = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")


def resolve_extend(
    name: str, sheet: Mapping[str, Mapping[str, object]]
) -> dict[str, object]:
    """Return the style tree for *name* with its ``extend`` merged in.

    The extended tree is used as a base and the style's own entries win.
    Only one level is followed: the base's own ``extend`` is dropped.
    Neither tree is modified.

    Raises:
        UnresolvedExtendError: if the extended name is not in *sheet*.
        ValueShapeError: if ``extend`` is not a string.
    """
    tree = sheet[name]
    if not isinstance(tree, Mapping):
        raise ValueShapeError((name,), tree, reason="style tree must be a mapping")
    if EXTEND not in tree:
        return dict(tree)

    target = tree[EXTEND]
    if not isinstance(target, str):
        raise ValueShapeError(
            (name, EXTEND), target, reason="extend must name another style"
        )
    if target not in sheet:
        raise UnresolvedExtendError(name, target)

    base = sheet[target]
    if not isinstance(base, Mapping):
        raise ValueShapeError((target,), base, reason="style tree must be a mapping")

    merged = {k: v for k, v in base.items() if k != EXTEND}
    merged.update((k, v) for k, v in tree.items() if k != EXTEND)
    return merged


def compile_style_sheet(
    sheet: Mapping[str, Mapping[str, object]],
    *,
    config: CompilerConfig | None = None,
    token: TokenGenerator | None = None,
) -> StyleBundle:
    """Compile a style sheet map into generated class names and CSS text.

    Every logical name gets a class ``<prefix>-<name>-<token>``. Rules are
    written one per line, grouped by logical name in map order.

    Raises:
        InvalidIdentifierError: if a logical name is not class-name safe.
        UnresolvedExtendError: if a style extends a missing name.
        ValueShapeError: if a style tree holds an unsupported value.
    """
    config = config or CompilerConfig()
    if token is None:
        token = partial(random_token, config.token_length)

    names: dict[str, str] = {}
    lines: list[str] = []

    for name in sheet:
        if not isinstance(name, str) or not _IDENTIFIER_RE.fullmatch(name):
            raise InvalidIdentifierError(str(name))

        class_name = f"{config.class_prefix}-{name}-{token()}"
        names[name] = class_name
        logger.debug("Generated class %s for %s", class_name, name)

        tree = resolve_extend(name, sheet)
        lines.extend(str(rule) for rule in flatten(f".{class_name}", tree))

    return StyleBundle(names=MappingProxyType(names), bundle="\n".join(lines))
