"""Layered configuration for the greeting program.

Only the logging runtime reads configuration. The merged result is read
once per process and reused.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import Config, read_config

from hello import __init__conf__


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the ``defaultconfig.toml`` shipped next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Merge the bundled defaults with the app, host, user, dotenv and env layers.

    Later layers win. Platform directories come from the vendor, app and
    slug constants in :mod:`hello.__init__conf__`. Call
    ``get_config.cache_clear()`` to force a reread.

    Raises:
        Whatever ``read_config`` raises for an unreadable layer; the
        command treats that as "use no configuration".
    """
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        default_file=get_default_config_path(),
    )


__all__ = [
    "get_config",
    "get_default_config_path",
]
