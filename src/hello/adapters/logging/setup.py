"""Logging runtime initialization shared by every entry point.

``python -m hello``, the ``hello`` console script, and the tests all call
:func:`init_logging` through the composition root, so the runtime is
configured once and in one place.

Contents:
    * :class:`LoggingConfigModel` - validates the ``[lib_log_rich]`` section.
    * :func:`init_logging` - idempotent ``lib_log_rich`` runtime setup.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from hello import __init__conf__


class LoggingConfigModel(BaseModel):
    """Typed view of the ``[lib_log_rich]`` configuration section.

    Only ``service`` and ``environment`` are interpreted here. Any other key
    (``console_level``, ``backend_level`` and friends) is kept as an extra
    field and forwarded to ``RuntimeConfig`` untouched.

    Example:
        >>> LoggingConfigModel(console_level="ERROR").model_dump(exclude_none=True)
        {'environment': 'prod', 'console_level': 'ERROR'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Translate the layered configuration into a ``RuntimeConfig``.

    An empty or missing ``service`` falls back to the package name.
    """
    section: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialize the ``lib_log_rich`` runtime unless it is already running.

    On the first call this starts the runtime from the ``[lib_log_rich]``
    section and bridges stdlib :mod:`logging` into it. The process
    environment is read but never modified, so ``.env`` files are not
    loaded into ``os.environ``. Later calls return
    immediately; :func:`hello.adapters.cli.main.main` shuts the runtime
    down when a run finishes.

    Args:
        config: Loaded layered configuration.

    Raises:
        ValueError: If the section or a ``LOG_*`` variable holds an
            invalid runtime setting. The runtime stays uninitialised.

    Example:
        >>> from lib_layered_config import Config
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
