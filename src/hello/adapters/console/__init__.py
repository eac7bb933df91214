"""Console adapter - writes program output to standard output.

Contents:
    * :func:`.writer.emit_greeting` - Echo the greeting line via Click
"""

from __future__ import annotations

from .writer import emit_greeting

__all__ = ["emit_greeting"]
