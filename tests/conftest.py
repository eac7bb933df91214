"""Shared pytest fixtures for CLI and module-entry tests.

All shared fixtures live here and are picked up through pytest's conftest
discovery. Fixture names read as plain English.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from hello.adapters.memory.console import GreetingSpy
    from hello.composition import AppServices

_COVERAGE_BASENAME = ".coverage.hello"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database in a local temp directory.

    Runs before ``pytest-cov`` creates its ``Coverage()`` object, so the
    ``COVERAGE_FILE`` value applies however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    ``result.stdout`` and ``result.stderr`` are captured separately, so
    tests can compare stdout byte-for-byte.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory.

    Example:
        def test_greets(cli_runner: CliRunner, production_factory: Callable[[], AppServices]) -> None:
            result = cli_runner.invoke(cli, [], obj=production_factory)
            assert result.stdout == "Hello World\\n"
    """
    from hello.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test.

    Only clears before, not after, so a monkeypatched loader does not
    break teardown.
    """
    from hello.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def greeting_spy() -> GreetingSpy:
    """Provide a fresh GreetingSpy that records emitted greetings."""
    from hello.adapters.memory.console import GreetingSpy

    return GreetingSpy()


@pytest.fixture
def inject_greeting_spy(
    clear_config_cache: None,
) -> Callable[[GreetingSpy], Callable[[], AppServices]]:
    """Return a factory wiring production config and logging around a GreetingSpy.

    Only the output boundary is replaced, so the command still loads real
    configuration and starts the real logging runtime.

    Example:
        def test_capture(
            cli_runner: CliRunner,
            greeting_spy: GreetingSpy,
            inject_greeting_spy: Callable[[GreetingSpy], Callable[[], AppServices]],
        ) -> None:
            cli_runner.invoke(cli, ["x"], obj=inject_greeting_spy(greeting_spy))
            assert greeting_spy.emitted == ["Hello World"]
    """
    from hello.composition import AppServices, build_production

    def _inject(spy: GreetingSpy) -> Callable[[], AppServices]:
        prod = build_production()
        test_services = AppServices(
            get_config=prod.get_config,
            init_logging=prod.init_logging,
            emit_greeting=spy.emit_greeting,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides production services with an injected Config.

    Replaces only the ``get_config`` I/O boundary.
    """
    from hello.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_fake_get_config,
            init_logging=prod.init_logging,
            emit_greeting=prod.emit_greeting,
        )
        return lambda: test_services

    return _inject
