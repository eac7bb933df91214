"""Greeting capture for tests that must not write to stdout."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GreetingSpy:
    """Records every greeting instead of printing it.

    Set ``raise_exception`` to simulate a failing output stream.

    Example:
        >>> spy = GreetingSpy()
        >>> spy.emit_greeting("Hello World")
        >>> spy.emitted
        ['Hello World']
    """

    emitted: list[str] = field(default_factory=list)
    raise_exception: BaseException | None = None

    def emit_greeting(self, text: str) -> None:
        if self.raise_exception is not None:
            raise self.raise_exception
        self.emitted.append(text)

    def clear(self) -> None:
        self.emitted.clear()
        self.raise_exception = None


__all__ = ["GreetingSpy"]
