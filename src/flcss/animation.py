"""Animation compiler: builds ``@keyframes`` blocks and animation shorthands."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import partial

from flcss.config import CompilerConfig
from flcss.errors import ValueShapeError
from flcss.model import Animation, AnimationBundle, Declaration
from flcss.properties import format_value, join_declarations, normalize_property
from flcss.tokens import TokenGenerator, random_token
from flcss.tree import is_scalar

__all__ = ["compile_animation", "animation_from_mapping"]

logger = logging.getLogger(__name__)

# CSS initial values for the animation sub-properties, in shorthand order.
DEFAULT_DURATION = "0s"
DEFAULT_TIMING_FUNCTION = "ease"
DEFAULT_DELAY = "0s"
DEFAULT_ITERATION_COUNT = "1"
DEFAULT_DIRECTION = "normal"
DEFAULT_FILL_MODE = "none"

_FIELD_ALIASES = {
    "keyframes": "keyframes",
    "duration": "duration",
    "timingFunction": "timing_function",
    "timing_function": "timing_function",
    "delay": "delay",
    "iterationCount": "iteration_count",
    "iteration_count": "iteration_count",
    "direction": "direction",
    "fillMode": "fill_mode",
    "fill_mode": "fill_mode",
}


def animation_from_mapping(data: Mapping[str, object]) -> Animation:
    """Build an ``Animation`` from a plain mapping (camelCase or snake_case).

    Unknown keys are ignored.
    """
    kwargs = {
        _FIELD_ALIASES[key]: value
        for key, value in data.items()
        if key in _FIELD_ALIASES
    }
    return Animation(**kwargs)


def _keyframe(selector: str, step: object) -> str:
    if not isinstance(step, Mapping):
        raise ValueShapeError(
            ("keyframes", selector), step, reason="keyframe must be a mapping"
        )
    declarations = []
    for prop, value in step.items():
        if not isinstance(prop, str):
            raise ValueShapeError(
                ("keyframes", selector, str(prop)),
                prop,
                reason="property names must be strings",
            )
        if not is_scalar(value):
            raise ValueShapeError(
                ("keyframes", selector, str(prop)),
                value,
                reason="keyframe values must be strings or numbers",
            )
        declarations.append(
            Declaration(property=normalize_property(prop), value=format_value(value))
        )
    block = join_declarations(declarations)
    if not block:
        return f"{selector} {{ }}"
    return f"{selector} {{ {block} }}"


def _or_default(value: object, default: str) -> str:
    return default if value is None else format_value(value)


def compile_animation(
    animation: Animation | Mapping[str, object],
    *,
    config: CompilerConfig | None = None,
    token: TokenGenerator | None = None,
) -> AnimationBundle:
    """Compile *animation* into a ``@keyframes`` block and a usable name.

    When any timing parameter is given, the returned ``name`` is a complete
    ``animation`` shorthand value (missing parameters take CSS defaults);
    otherwise it is just the generated animation name.
    """
    config = config or CompilerConfig()
    if isinstance(animation, Mapping):
        animation = animation_from_mapping(animation)
    if not isinstance(animation.keyframes, Mapping):
        raise ValueShapeError(
            ("keyframes",), animation.keyframes, reason="keyframes must be a mapping"
        )

    if token is None:
        token = partial(random_token, config.token_length)

    animation_name = f"{config.class_prefix}-animation-{token()}"
    logger.debug("Generated animation %s", animation_name)

    keyframes = [_keyframe(str(sel), step) for sel, step in animation.keyframes.items()]
    bundle = f"@keyframes {animation_name} {{ {' '.join(keyframes)} }}"

    if not animation.has_timing:
        return AnimationBundle(name=animation_name, bundle=bundle)

    shorthand = " ".join(
        [
            animation_name,
            _or_default(animation.duration, DEFAULT_DURATION),
            _or_default(animation.timing_function, DEFAULT_TIMING_FUNCTION),
            _or_default(animation.delay, DEFAULT_DELAY),
            _or_default(animation.iteration_count, DEFAULT_ITERATION_COUNT),
            _or_default(animation.direction, DEFAULT_DIRECTION),
            _or_default(animation.fill_mode, DEFAULT_FILL_MODE),
        ]
    )
    return AnimationBundle(name=shorthand, bundle=bundle)
