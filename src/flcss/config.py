from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompilerConfig:
    class_prefix: str = "flcss"
    token_length: int = 5  # characters of random token per generated name
