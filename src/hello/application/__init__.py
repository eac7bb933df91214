"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    EmitGreeting,
    GetConfig,
    InitLogging,
)

__all__ = [
    "EmitGreeting",
    "GetConfig",
    "InitLogging",
]
