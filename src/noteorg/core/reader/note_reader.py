"""Read markdown notes from disk into domain models."""

import dataclasses
import os
from datetime import datetime, timezone, tzinfo
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from noteorg.errors import NotAFileError
from noteorg.models.note import FrontMatter, Note, NoteMetadata

_YAML_HANDLER = frontmatter.YAMLHandler()


def _created_timestamp(stat: os.stat_result) -> float:
    # st_birthtime is missing on most Linux builds; ctime is the closest we get.
    birthtime = getattr(stat, "st_birthtime", None)
    return birthtime if birthtime is not None else stat.st_ctime


def derive_category(path: Path, root: Path) -> tuple[str, ...]:
    """Path segments between ``root`` and ``path``, without dotted segments."""
    return tuple(part for part in path.parts[len(root.parts) :] if "." not in part)


def read_note_metadata(
    path: str | Path,
    root: str | Path,
    tz: tzinfo = timezone.utc,
) -> NoteMetadata:
    """Derive note metadata from the filesystem alone.

    ``created`` is the file's birth time where the platform records one.
    Elsewhere (most Linux builds) it falls back to ``st_ctime``, the inode
    change time, which moves on chmod, rename and every write.

    Args:
        path: The note file.
        root: The notes root ``path`` lives under; it decides the category.
        tz: Timezone both timestamps are converted into.

    Raises:
        NotAFileError: ``path`` is not a regular file.
        OSError: The file could not be stat'ed.
    """
    path = Path(path)
    if not path.is_file():
        msg = f"{path} is not a file"
        raise NotAFileError(msg)

    stat = path.stat()
    filename = path.name or "Empty"
    return NoteMetadata(
        filename=filename,
        title=filename,
        tags=(),
        category=derive_category(path, Path(root)),
        created=datetime.fromtimestamp(_created_timestamp(stat), tz=tz),
        last_modified=datetime.fromtimestamp(stat.st_mtime, tz=tz),
    )


def _validate_front_matter(data: Any) -> FrontMatter | None:
    if not isinstance(data, dict):
        return None

    title = data.get("title")
    if title is not None and not isinstance(title, str):
        return None

    tags = data.get("tags")
    if tags is not None:
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            return None
        tags = tuple(tags)

    # YAML turns unquoted dates into date objects; keep the text form.
    date = data.get("date")
    if date is not None:
        date = str(date)

    return FrontMatter(title=title, tags=tags, date=date)


def parse_front_matter(content: str) -> FrontMatter | None:
    """Parse the YAML block at the start of ``content``.

    Best effort: a missing, empty, malformed or wrongly typed block all give
    None, meaning "no front matter".
    """
    if not _YAML_HANDLER.detect(content):
        return None
    try:
        raw, _body = _YAML_HANDLER.split(content)
        data = _YAML_HANDLER.load(raw)
    except (ValueError, yaml.YAMLError):
        return None
    return _validate_front_matter(data)


def read_note(
    path: str | Path,
    root: str | Path,
    tz: tzinfo = timezone.utc,
) -> Note:
    """Read a note: filesystem metadata, content and front matter overrides.

    When front matter is present its ``title`` and ``tags`` replace the derived
    values, even when absent from the block (they become empty). The content
    is returned verbatim, front matter included.

    Raises:
        NotAFileError: ``path`` is not a regular file.
        OSError: The file could not be stat'ed or read.
        UnicodeDecodeError: The file is not valid UTF-8.
    """
    path = Path(path)
    metadata = read_note_metadata(path, root, tz)
    # Decode by hand so line endings survive untranslated.
    content = path.read_bytes().decode("utf-8")

    front = parse_front_matter(content)
    if front is not None:
        metadata = dataclasses.replace(
            metadata,
            title=front.title or "",
            tags=front.tags or (),
        )

    return Note(path=path, metadata=metadata, content=content)
