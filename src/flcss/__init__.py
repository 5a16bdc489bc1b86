"""flcss: compile nested style trees into flat, uniquely-named CSS."""

from flcss.animation import compile_animation
from flcss.compiler import compile_style_sheet
from flcss.config import CompilerConfig
from flcss.errors import (
    FlcssError,
    InvalidIdentifierError,
    UnresolvedExtendError,
    ValueShapeError,
)
from flcss.flattener import flatten
from flcss.model import Animation, AnimationBundle, Declaration, Rule, StyleBundle
from flcss.properties import normalize_property
from flcss.tokens import counter_tokens, random_token

__version__ = "0.1.0"

# Aliases for callers used to the createStyle / createAnimation names.
create_style = compile_style_sheet
create_animation = compile_animation

__all__ = [
    "__version__",
    "compile_style_sheet",
    "compile_animation",
    "create_style",
    "create_animation",
    "flatten",
    "normalize_property",
    "CompilerConfig",
    "Animation",
    "AnimationBundle",
    "Declaration",
    "Rule",
    "StyleBundle",
    "FlcssError",
    "InvalidIdentifierError",
    "UnresolvedExtendError",
    "ValueShapeError",
    "counter_tokens",
    "random_token",
]
