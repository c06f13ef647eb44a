"""Configuration constants for noteorg."""

import os
import shlex
from pathlib import Path

# Notes directory. NOTEORG_ROOT wins, otherwise the first existing candidate.
NOTES_DIRECTORIES: list[Path] = [
    Path("~/Notes").expanduser(),
    Path("~/notes").expanduser(),
    Path("~/Documents/Notes").expanduser(),
]

# Environment variables checked, in order, for the editor command.
EDITOR_ENV_VARS: tuple[str, ...] = ("NOTEORG_EDITOR", "VISUAL", "EDITOR")
DEFAULT_EDITOR = "nvim"

# Only files with this exact suffix take part in a search.
NOTE_SUFFIX = ".md"

# Interactive search
POLL_INTERVAL: float = 0.05
# How long to wait for the rest of an escape sequence before treating ESC as a key.
ESCAPE_TIMEOUT: float = 0.025
MAX_VISIBLE_RESULTS = 10
SEPARATOR_WIDTH = 50


def resolve_notes_directory() -> Path:
    """Return the notes root: $NOTEORG_ROOT, else the first existing candidate.

    Falls back to the first candidate even if it does not exist, so callers
    report a sensible path in their error message.
    """
    env_root = os.environ.get("NOTEORG_ROOT")
    if env_root:
        return Path(env_root).expanduser()
    for candidate in NOTES_DIRECTORIES:
        if candidate.is_dir():
            return candidate
    return NOTES_DIRECTORIES[0]


def resolve_editor_command() -> list[str]:
    """Return the editor command as an argv prefix."""
    for var in EDITOR_ENV_VARS:
        value = os.environ.get(var, "").strip()
        if value:
            return shlex.split(value)
    return [DEFAULT_EDITOR]
