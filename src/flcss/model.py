"""Compilation model: declarations, scopes, rules, and compile results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

Scalar = str | int | float


@dataclass(frozen=True)
class Declaration:
    """A normalized ``property: value`` pair."""

    property: str
    value: str

    def __str__(self) -> str:
        return f"{self.property}: {self.value}"


@dataclass(frozen=True)
class Scope:
    """Where a block of declarations applies.

    ``selector`` is the composed selector (e.g. ``.flcss-btn-a1b2c:hover``)
    and ``media`` the media query texts wrapping it, outermost first.
    """

    selector: str
    media: tuple[str, ...] = ()

    def descend(self, fragment: str) -> Scope:
        """Append a nested selector fragment, keeping the media conditions."""
        return Scope(selector=self.selector + fragment, media=self.media)

    def within(self, condition: str) -> Scope:
        """Wrap this scope in one more media condition.

        Each condition renders as its own nested ``@media`` block.
        """
        return Scope(selector=self.selector, media=self.media + (condition,))


@dataclass(frozen=True)
class Rule:
    """A flat rule ready to be written to a stylesheet.

    For a plain rule ``block`` holds the joined declarations. For a rule
    under ``@media`` the selector is the at-rule and ``block`` holds the
    complete inner rule.
    """

    selector: str
    block: str
    declarations: tuple[Declaration, ...] = ()

    def __str__(self) -> str:
        return f"{self.selector} {{ {self.block} }}"


@dataclass(frozen=True)
class StyleBundle:
    """Result of compiling a style sheet map.

    ``names`` is a read-only mapping of logical name to generated class.
    """

    names: Mapping[str, str]
    bundle: str


@dataclass(frozen=True)
class Animation:
    """A keyframe animation with optional timing parameters.

    Timing parameters left as ``None`` are filled with CSS defaults when the
    ``animation`` shorthand is built.
    """

    keyframes: dict[str, dict[str, Scalar]] = field(default_factory=dict)
    duration: Scalar | None = None
    timing_function: str | None = None
    delay: Scalar | None = None
    iteration_count: Scalar | None = None
    direction: str | None = None
    fill_mode: str | None = None

    @property
    def has_timing(self) -> bool:
        """Return True if any timing parameter was given explicitly."""
        return any(
            value is not None
            for value in (
                self.duration,
                self.timing_function,
                self.delay,
                self.iteration_count,
                self.direction,
                self.fill_mode,
            )
        )


@dataclass(frozen=True)
class AnimationBundle:
    """Result of compiling an animation.

    ``name`` is either the bare generated animation name or, when timing
    parameters were given, a full ``animation`` shorthand value.
    """

    name: str
    bundle: str
