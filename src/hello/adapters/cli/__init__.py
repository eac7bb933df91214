"""CLI package providing the command-line interface.

Contents:
    * Traceback state helpers from :mod:`.context`
    * The ``hello`` command from :mod:`.root`
    * Entry point from :mod:`.main`
    * Exit codes from :mod:`.exit_codes`
"""

from __future__ import annotations

from .constants import PASSTHROUGH_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    # Constants
    "PASSTHROUGH_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    # Exit codes
    "ExitCode",
    # Traceback management
    "TracebackState",
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
    # Command
    "cli",
    # Entry point
    "main",
]
