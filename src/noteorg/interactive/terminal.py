"""Raw-mode terminal backed by termios and a rich console."""

import codecs
import os
import select
import sys
import termios
import tty
from collections import deque
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from rich.console import Console
from rich.control import Control
from rich.text import Text

from noteorg.config import ESCAPE_TIMEOUT
from noteorg.interactive.keys import KeyEvent, decode_keys, ends_in_partial_escape

_READ_SIZE = 64


class RawTerminal:
    """Exclusive terminal for the interactive search.

    Entering the context switches the input to raw mode and the console to the
    alternate screen; leaving restores both, whatever the exit path.

    Input is read from ``fd`` (stdin by default). ESC is reported as a key
    only when nothing follows it within ``escape_timeout`` seconds, so arrow
    keys split across reads still decode as arrows.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        fd: int | None = None,
        escape_timeout: float = ESCAPE_TIMEOUT,
    ) -> None:
        self.console = console or Console(highlight=False)
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._escape_timeout = escape_timeout
        # Multi-byte characters may be split across reads.
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._saved_attrs: list | None = None
        self._pending: deque[KeyEvent] = deque()

    def __enter__(self) -> "RawTerminal":
        self._acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._release()

    def _acquire(self) -> None:
        self._saved_attrs = termios.tcgetattr(self._fd)
        tty.setraw(self._fd)
        self.console.set_alt_screen(True)

    def _release(self) -> None:
        if self._saved_attrs is None:
            return
        try:
            self.console.set_alt_screen(False)
        finally:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None

    @contextmanager
    def suspended(self) -> Iterator[None]:
        """Give the terminal back in cooked mode, then take it again."""
        self._release()
        try:
            yield
        finally:
            self._acquire()

    def _wait(self, timeout: float) -> bool:
        ready, _, _ = select.select([self._fd], [], [], timeout)
        return bool(ready)

    def poll_key(self, timeout: float) -> KeyEvent | None:
        if self._pending:
            return self._pending.popleft()
        if not self._wait(timeout):
            return None
        data = os.read(self._fd, _READ_SIZE)
        text = self._decoder.decode(data)
        while data and ends_in_partial_escape(text) and self._wait(self._escape_timeout):
            data = os.read(self._fd, _READ_SIZE)
            text += self._decoder.decode(data)
        self._pending.extend(decode_keys(text))
        return self._pending.popleft() if self._pending else None

    def draw(self, lines: Sequence[Text], *, cursor: tuple[int, int] | None = None) -> None:
        # Raw mode disables newline translation, so every line is placed explicitly.
        self.console.control(Control.home(), Control.clear())
        for row, line in enumerate(lines):
            self.console.control(Control.move_to(0, row))
            self.console.print(line, end="", no_wrap=True, overflow="ellipsis")
        if cursor is not None:
            self.console.control(Control.move_to(*cursor))
        self.console.file.flush()
