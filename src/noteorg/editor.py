"""Launch an external editor on notes."""

import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path

from loguru import logger

from noteorg.config import resolve_editor_command


class SubprocessEditor:
    """Run the configured editor in the foreground and wait for it."""

    def __init__(self, command: Sequence[str] | None = None) -> None:
        self.command = list(command) if command else resolve_editor_command()

    def launch(self, paths: Sequence[Path]) -> int:
        """Open ``paths`` in the editor, blocking until it exits.

        The exit code is returned as-is and not interpreted.

        Raises:
            ValueError: ``paths`` is empty.
            OSError: The editor could not be started.
        """
        if not paths:
            msg = "No files provided to editor"
            raise ValueError(msg)

        cmd = [*self.command, *(str(p) for p in paths)]
        logger.debug("Running: {}", " ".join(map(shlex.quote, cmd)))
        result = subprocess.run(cmd, check=False)
        return result.returncode
