"""Recursive enumeration of the files under a notes root."""

import os
from pathlib import Path

from loguru import logger


def list_files(root: str | Path) -> list[Path]:
    """Return every regular file reachable from ``root``.

    If ``root`` is itself a file, the result is ``[root]``. Subdirectories that
    cannot be read contribute nothing and the walk carries on with their
    siblings; only a failure to read ``root`` itself propagates.

    The order of the result is unspecified.

    Raises:
        OSError: ``root`` is neither a file nor a readable directory.
    """
    root = Path(root)
    if root.is_file():
        return [root]

    with os.scandir(root) as entries:
        children = [Path(entry.path) for entry in entries]

    files: list[Path] = []
    for child in children:
        files.extend(_list_files_lenient(child))
    return files


def _list_files_lenient(path: Path) -> list[Path]:
    try:
        return list_files(path)
    except OSError as exc:
        logger.debug("Skipping unreadable entry {}: {}", path, exc)
        return []
