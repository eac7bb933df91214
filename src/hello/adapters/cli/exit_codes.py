"""Exit status of a normal run.

Failure codes are not listed here: ``lib_cli_exit_tools`` derives them from
the exception that ended the run (for example 141 for a broken pipe).

Contents:
    * :class:`ExitCode` - IntEnum with the status :func:`main` returns on success.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes the CLI boundary returns on its own.

    Example:
        >>> int(ExitCode.SUCCESS)
        0
    """

    SUCCESS = 0


__all__ = ["ExitCode"]
