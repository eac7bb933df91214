"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no stdout, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapter
    * :mod:`.console` - Greeting capture (GreetingSpy class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .console import GreetingSpy
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from hello.application.ports import GetConfig, InitLogging

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "GreetingSpy",
    "get_config_in_memory",
    "init_logging_in_memory",
]
