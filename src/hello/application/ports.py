"""Application ports - callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Module-level functions and
bound methods satisfy these protocols via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  ``Config`` is imported under
    ``TYPE_CHECKING`` only so the runtime import graph stays layered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self) -> Config: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class EmitGreeting(Protocol):
    """Write one line of greeting text to the program's output stream."""

    def __call__(self, text: str) -> None: ...


__all__ = [
    "EmitGreeting",
    "GetConfig",
    "InitLogging",
]
