"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

CANONICAL_GREETING = "Hello World"


def build_greeting() -> str:
    """Return the greeting the program prints.

    The text is fixed and independent of arguments, configuration, and
    environment. Line termination is left to the output adapter.

    Returns:
        The canonical greeting string, without a trailing newline.

    Example:
        >>> build_greeting()
        'Hello World'
        >>> build_greeting().endswith("\\n")
        False
    """
    return CANONICAL_GREETING


__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
]
