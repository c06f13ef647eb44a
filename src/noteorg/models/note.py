"""Domain models for markdown notes."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class FrontMatter:
    """Validated YAML preamble of a note.

    A missing key is None. ``date`` is accepted but never applied to metadata.
    """

    title: str | None = None
    tags: tuple[str, ...] | None = None
    date: str | None = None


@dataclass(frozen=True)
class NoteMetadata:
    """Metadata derived from the filesystem, possibly overridden by front matter."""

    filename: str
    title: str
    tags: tuple[str, ...]
    category: tuple[str, ...]
    created: datetime
    last_modified: datetime


@dataclass(frozen=True)
class Note:
    """A single markdown note."""

    path: Path
    metadata: NoteMetadata
    content: str
