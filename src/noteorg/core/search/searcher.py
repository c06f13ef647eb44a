"""Regex search over the notes under a root."""

import re
from datetime import timezone, tzinfo
from pathlib import Path

from loguru import logger

from noteorg.config import NOTE_SUFFIX
from noteorg.core.reader.note_reader import read_note
from noteorg.core.traversal.files import list_files
from noteorg.errors import InvalidPatternError, NoteorgError
from noteorg.models.note import Note


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a user pattern, translating failures to InvalidPatternError."""
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidPatternError(pattern, exc) from exc


def is_note_file(path: Path) -> bool:
    """True when the final path segment has exactly the ``.md`` extension."""
    return path.suffix == NOTE_SUFFIX


def searchable_text(note: Note) -> str:
    """Join filename, title, tags, category and content with single spaces."""
    meta = note.metadata
    return " ".join(
        [
            meta.filename,
            meta.title,
            " ".join(meta.tags),
            " ".join(meta.category),
            note.content,
        ]
    )


def _read_notes(paths: list[Path], root: Path, tz: tzinfo) -> list[Note]:
    notes: list[Note] = []
    for path in paths:
        if not is_note_file(path):
            continue
        try:
            notes.append(read_note(path, root, tz))
        except (NoteorgError, OSError, UnicodeDecodeError) as exc:
            logger.debug("Skipping unreadable note {}: {}", path, exc)
    return notes


def load_notes(root: str | Path, tz: tzinfo = timezone.utc) -> list[Note]:
    """Read every ``.md`` note under ``root``, skipping the unreadable ones.

    Raises:
        OSError: ``root`` itself cannot be read.
    """
    root = Path(root)
    return _read_notes(list_files(root), root, tz)


def search_files(
    pattern: str,
    root: str | Path,
    tz: tzinfo = timezone.utc,
) -> list[Path]:
    """Return the paths of notes whose searchable text matches ``pattern``.

    The match is an unanchored, case-sensitive ``re.search``. Every call reads
    the whole corpus; nothing is cached between calls. Results keep the
    enumeration order of :func:`list_files`.

    Raises:
        InvalidPatternError: ``pattern`` is not a valid regular expression.
        OSError: ``root`` itself cannot be read.
    """
    regex = compile_pattern(pattern)
    notes = load_notes(root, tz)
    return [note.path for note in notes if regex.search(searchable_text(note))]
