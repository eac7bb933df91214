"""The ``hello`` command.

A single Click command with no options. Every token on the command line,
including ones that look like ``--help`` or ``--version``, is collected as
an unprocessed argument and ignored.

Configuration and logging wrap the greeting but never decide whether it is
printed: if either cannot be set up, the command greets without them.

Contents:
    * :func:`cli` - Emit the canonical greeting.
"""

from __future__ import annotations

import contextlib
import logging
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from hello import __init__conf__
from hello.domain.behaviors import build_greeting

from .constants import PASSTHROUGH_CONTEXT_SETTINGS

if TYPE_CHECKING:
    from hello.composition import AppServices

logger = logging.getLogger(__name__)


def _load_config(services: AppServices) -> Config:
    """Return the layered configuration, or an empty one if any layer is unreadable."""
    try:
        return services.get_config()
    except Exception:
        # Debug only: stderr must stay empty even when a layer is broken.
        logger.debug("Configuration unavailable, continuing without it", exc_info=True)
        return Config({}, {})


def _start_logging(services: AppServices, config: Config) -> bool:
    """Start the logging runtime; report whether it is running."""
    try:
        services.init_logging(config)
    except Exception:
        logger.debug("Logging runtime not started", exc_info=True)
    return lib_log_rich.runtime.is_initialised()


def _log_scope(logging_ready: bool) -> AbstractContextManager[object]:
    if not logging_ready:
        return contextlib.nullcontext()
    return lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": __init__conf__.shell_command})


@click.command(
    __init__conf__.shell_command,
    help=__init__conf__.title,
    context_settings=PASSTHROUGH_CONTEXT_SETTINGS,
    add_help_option=False,
)
@click.argument("ignored_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, ignored_args: tuple[str, ...]) -> None:
    """Print the canonical greeting, whatever the arguments.

    Builds services from the factory stored in ``ctx.obj``, sets up
    configuration and logging on a best-effort basis, and hands the
    greeting to the output port. Nothing is logged on this path, so stderr
    stays empty at any console level.

    Example:
        >>> from click.testing import CliRunner
        >>> from hello.composition import build_production
        >>> result = CliRunner().invoke(cli, ["--verbose", "x"], obj=build_production)
        >>> result.exit_code
        0
        >>> result.stdout
        'Hello World\\n'
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    logging_ready = _start_logging(services, _load_config(services))

    with _log_scope(logging_ready):
        services.emit_greeting(build_greeting())


__all__ = ["cli"]
