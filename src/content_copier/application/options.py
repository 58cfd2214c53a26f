"""Typed option objects shared across copy use-cases."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BUFFER_SIZE = 1024


@dataclass(frozen=True)
class CopyOptions:
    """Copy transfer configuration."""

    buffer_size: int = DEFAULT_BUFFER_SIZE
