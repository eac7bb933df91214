"""Standard-output writer for the greeting line."""

from __future__ import annotations

import rich_click as click


def emit_greeting(text: str) -> None:
    """Write ``text`` followed by a single newline to standard output.

    Write failures such as ``BrokenPipeError`` propagate to the CLI
    boundary unchanged.

    Example:
        >>> emit_greeting("Hello World")
        Hello World
    """
    click.echo(text)


__all__ = ["emit_greeting"]
