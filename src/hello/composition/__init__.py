"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.loader import get_config

# Output services
from ..adapters.console.writer import emit_greeting

# Logging services
from ..adapters.logging.setup import init_logging

# pyright checks that each production adapter satisfies its Protocol.
if TYPE_CHECKING:
    from ..adapters.memory.console import GreetingSpy
    from ..application.ports import EmitGreeting, GetConfig, InitLogging

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_emit_greeting: EmitGreeting = emit_greeting


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    init_logging: InitLogging
    emit_greeting: EmitGreeting


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
        emit_greeting=emit_greeting,
    )


def build_testing(*, spy: GreetingSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional GreetingSpy that records emitted greetings. A fresh
            spy is created when None; pass your own to assert on it.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        GreetingSpy,
        get_config_in_memory,
        init_logging_in_memory,
    )

    greeting_spy = spy if spy is not None else GreetingSpy()

    return AppServices(
        get_config=get_config_in_memory,
        init_logging=init_logging_in_memory,
        emit_greeting=greeting_spy.emit_greeting,
    )


__all__ = [
    "get_config",
    "init_logging",
    "emit_greeting",
    "AppServices",
    "build_production",
    "build_testing",
]
