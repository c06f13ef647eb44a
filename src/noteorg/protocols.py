"""Protocols for the collaborators of the interactive search."""

from collections.abc import Sequence
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Protocol, runtime_checkable

from rich.text import Text

from noteorg.interactive.keys import KeyEvent


@runtime_checkable
class EditorProtocol(Protocol):
    """Protocol for external editors."""

    def launch(self, paths: Sequence[Path]) -> int:
        """Open ``paths`` and block until the editor exits; return its exit code."""
        ...


@runtime_checkable
class TerminalProtocol(Protocol):
    """Protocol for the terminal driven by the interactive search.

    Entering the terminal as a context manager acquires raw input and the
    alternate screen; leaving it releases both.
    """

    def __enter__(self) -> "TerminalProtocol": ...

    def __exit__(self, *exc_info: object) -> None: ...

    def poll_key(self, timeout: float) -> KeyEvent | None:
        """Wait up to ``timeout`` seconds for a key press."""
        ...

    def draw(self, lines: Sequence[Text], *, cursor: tuple[int, int] | None = None) -> None:
        """Replace the screen contents with ``lines``."""
        ...

    def suspended(self) -> AbstractContextManager[None]:
        """Temporarily hand the terminal back to a foreground process."""
        ...
