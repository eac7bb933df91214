"""Static package metadata surfaced to CLI commands and documentation.

Values here must stay in sync with ``pyproject.toml``; the metadata tests
compare both sources so drift is caught before release.

Contents:
    * Module-level constants describing the distribution.
    * :func:`print_info` - renders the constants as a readable block.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "hello"
#: Human-readable summary shown in CLI help output.
title = "Print the canonical greeting and exit"
#: Release version kept in sync with ``pyproject.toml``.
version = "1.0.0"
#: Author attribution.
author = "bitranox"
#: Console-script name published by the package.
shell_command = "hello"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "bitranox"
#: Application name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "Hello"
#: Configuration slug for lib_layered_config Linux paths and environment variables.
LAYEREDCONF_SLUG: str = "hello"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for hello:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
