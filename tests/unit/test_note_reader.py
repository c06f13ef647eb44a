"""Tests for reading notes and their front matter."""

import os
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from noteorg.core.reader.note_reader import (
    derive_category,
    parse_front_matter,
    read_note,
    read_note_metadata,
)
from noteorg.errors import NotAFileError
from noteorg.models.note import FrontMatter


def test_metadata_category_from_directories(notes_root: Path) -> None:
    meta = read_note_metadata(notes_root / "A" / "B" / "note.md", notes_root)
    assert meta.category == ("A", "B")
    assert meta.filename == "note.md"
    assert meta.title == "note.md"
    assert meta.tags == ()


def test_metadata_root_level_note_has_no_category(notes_root: Path) -> None:
    assert read_note_metadata(notes_root / "top.md", notes_root).category == ()


def test_derive_category_drops_dotted_segments() -> None:
    path = Path("/n/work/v1.2/notes/today.md")
    assert derive_category(path, Path("/n")) == ("work", "notes")


def test_metadata_rejects_directory(notes_root: Path) -> None:
    with pytest.raises(NotAFileError):
        read_note_metadata(notes_root / "A", notes_root)


def test_metadata_rejects_missing_file(notes_root: Path) -> None:
    with pytest.raises(NotAFileError):
        read_note(notes_root / "missing.md", notes_root)


def test_metadata_timestamps_use_requested_timezone(notes_root: Path) -> None:
    tz = timezone(timedelta(hours=5))
    meta = read_note_metadata(notes_root / "top.md", notes_root, tz)
    assert meta.last_modified.utcoffset() == timedelta(hours=5)
    assert meta.created.utcoffset() == timedelta(hours=5)
    utc = read_note_metadata(notes_root / "top.md", notes_root)
    assert meta.last_modified == utc.last_modified


def test_read_note_without_front_matter_keeps_derived_fields(notes_root: Path) -> None:
    note = read_note(notes_root / "top.md", notes_root)
    assert note.metadata.title == "top.md"
    assert note.metadata.tags == ()
    assert note.content == "Top level note\n"


def test_read_note_front_matter_overrides_title_and_tags(notes_root: Path) -> None:
    note = read_note(notes_root / "A" / "a1.md", notes_root)
    assert note.metadata.title == "Alpha"
    assert note.metadata.tags == ("python", "cli")
    assert note.metadata.category == ("A",)


def test_read_note_partial_front_matter_clears_title(notes_root: Path) -> None:
    """Tags without a title: the title becomes empty, not the filename."""
    note = read_note(notes_root / "C" / "c.md", notes_root)
    assert note.metadata.tags == ("x", "y")
    assert note.metadata.title == ""


def test_read_note_malformed_front_matter_is_ignored(notes_root: Path) -> None:
    note = read_note(notes_root / "C" / "bad.md", notes_root)
    assert note.metadata.title == "bad.md"
    assert note.metadata.tags == ()


def test_read_note_content_keeps_front_matter(notes_root: Path) -> None:
    note = read_note(notes_root / "A" / "a1.md", notes_root)
    assert note.content.startswith("---\ntitle: Alpha\n")
    assert note.content.endswith("First body\n")


def test_read_note_keeps_crlf_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "dos.md"
    path.write_bytes(b"line one\r\nline two\r\n")
    assert read_note(path, tmp_path).content == "line one\r\nline two\r\n"


def test_read_note_date_is_not_applied(notes_root: Path) -> None:
    """The front matter date (2024-01-02) never replaces the filesystem date."""
    path = notes_root / "A" / "a1.md"
    modified = datetime(2021, 3, 4, 5, 6, 7, tzinfo=timezone.utc)
    os.utime(path, (modified.timestamp(), modified.timestamp()))
    note = read_note(path, notes_root)
    assert note.metadata.last_modified == modified


def test_read_note_twice_is_equal(notes_root: Path) -> None:
    path = notes_root / "A" / "a1.md"
    first = read_note(path, notes_root)
    second = read_note(path, notes_root)
    assert first == second
    assert first is not second


def test_read_note_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "binary.md"
    path.write_bytes(b"\xff\xfe\x00garbage")
    with pytest.raises(UnicodeDecodeError):
        read_note(path, tmp_path)


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("no front matter", None),
        ("---\n---\nempty block\n", None),
        ("---\n- a\n- b\n---\nlist instead of mapping\n", None),
        ("---\ntitle: 42\n---\n", None),
        ("---\ntags: not-a-list\n---\n", None),
        ("---\ntags: [a, 1]\n---\n", None),
        ("---\nother: value\n---\n", FrontMatter()),
        (
            "---\ntitle: T\ntags: [a, a]\ndate: '2020-05-06'\n---\n",
            FrontMatter(title="T", tags=("a", "a"), date="2020-05-06"),
        ),
        ("---\ndate: 2020-05-06\n---\n", FrontMatter(date="2020-05-06")),
    ],
)
def test_parse_front_matter(content: str, expected: FrontMatter | None) -> None:
    assert parse_front_matter(content) == expected


def test_unknown_keys_still_count_as_front_matter(tmp_path: Path) -> None:
    path = tmp_path / "x.md"
    path.write_text("---\nauthor: me\n---\nbody\n")
    note = read_note(path, tmp_path)
    assert note.metadata.title == ""
    assert note.metadata.tags == ()


def test_metadata_created_falls_back_to_ctime(notes_root: Path) -> None:
    path = notes_root / "top.md"
    stat = path.stat()
    expected = getattr(stat, "st_birthtime", None)
    if expected is None:
        expected = stat.st_ctime
    meta = read_note_metadata(path, notes_root)
    assert meta.created == datetime.fromtimestamp(expected, tz=timezone.utc)
