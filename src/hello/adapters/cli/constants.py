"""Shared CLI constants.

Contents:
    * :data:`PASSTHROUGH_CONTEXT_SETTINGS` - Click settings that accept any argument list.
    * :data:`TRACEBACK_SUMMARY_LIMIT` - Character budget for truncated tracebacks.
    * :data:`TRACEBACK_VERBOSE_LIMIT` - Character budget for verbose tracebacks.
"""

from __future__ import annotations

from typing import Any, Final

#: Context settings for a command that accepts and ignores every token.
#: help_option_names: Empty, so ``-h``/``--help`` are plain arguments
#: ignore_unknown_options: Tokens that look like options are kept as arguments
#: allow_extra_args: Surplus positional arguments are not an error
#: allow_interspersed_args: Option parsing stops at the first positional
PASSTHROUGH_CONTEXT_SETTINGS: Final[dict[str, Any]] = {
    "help_option_names": [],
    "ignore_unknown_options": True,
    "allow_extra_args": True,
    "allow_interspersed_args": False,
}

#: Character budget used when printing truncated tracebacks.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Character budget used when verbose tracebacks are enabled.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "PASSTHROUGH_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
