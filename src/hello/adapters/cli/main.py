"""Process boundary for the ``hello`` command.

``python -m hello`` and the ``hello`` console script both end up in
:func:`main`, which turns whatever the command does into one integer exit
status.

Contents:
    * :func:`main` - Run the command once and return its exit status.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from hello import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .exit_codes import ExitCode
from .root import cli

if TYPE_CHECKING:
    from hello.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print a short account of ``exc`` on stderr and map it to an exit status."""
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    # Click runs non-standalone so that ctx.obj can carry the factory;
    # lib_cli_exit_tools.run_cli has no hook for that.
    try:
        result = cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # KeyboardInterrupt and SystemExit included
        return _report_failure(exc)
    # A ctx.exit(n) inside the command comes back as a return value here.
    return result if isinstance(result, int) else int(ExitCode.SUCCESS)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the command once and return the exit status.

    ``argv`` defaults to ``sys.argv[1:]``; its contents never change the
    outcome of a normal run, which prints the greeting and returns ``0``.
    The traceback flags on ``lib_cli_exit_tools.config`` are put back as
    they were unless ``restore_traceback`` is false, and a logging runtime
    started by the command is shut down before returning.

    Raises:
        ValueError: When ``services_factory`` is missing. Outside the
            adapters, pass ``hello.composition.build_production``.

    Example:
        >>> from hello.composition import build_production
        >>> main(["--anything"], services_factory=build_production)  # doctest: +SKIP
        Hello World
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    saved = snapshot_traceback_state()
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        # The runtime belongs to the main thread; worker threads leave it alone.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
