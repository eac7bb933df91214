"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - The greeting constant and its builder
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    build_greeting,
)

__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
]
