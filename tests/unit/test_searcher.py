"""Tests for regex search across notes."""

from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import patch

import pytest

from noteorg.core.search.searcher import (
    compile_pattern,
    is_note_file,
    load_notes,
    search_files,
    searchable_text,
)
from noteorg.errors import InvalidPatternError
from noteorg.models.note import Note, NoteMetadata
from tests.unit.conftest import build_tree


def _rel(paths: list[Path], root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in paths}


def test_search_matches_content_only(notes_root: Path) -> None:
    assert _rel(search_files("unique_token_xyz", notes_root), notes_root) == {"A/B/note.md"}


def test_search_matches_title(notes_root: Path) -> None:
    assert _rel(search_files("Alpha", notes_root), notes_root) == {"A/a1.md"}


def test_search_matches_category(notes_root: Path) -> None:
    """Category names are part of the searchable text."""
    found = _rel(search_files(r"\bB\b", notes_root), notes_root)
    assert "A/B/note.md" in found


def test_search_no_match_returns_empty(notes_root: Path) -> None:
    assert search_files("nothing-matches-this", notes_root) == []


def test_search_is_case_sensitive(notes_root: Path) -> None:
    assert search_files("ALPHA", notes_root) == []


def test_search_supports_regex(notes_root: Path) -> None:
    found = _rel(search_files(r"^Top level", notes_root), notes_root)
    # Unanchored against the joined text: "^" only matches at its start.
    assert found == set()
    assert _rel(search_files(r"Top\s+level", notes_root), notes_root) == {"top.md"}


def test_search_only_considers_md_files(notes_root: Path) -> None:
    assert search_files("never searched", notes_root) == []


def test_search_invalid_pattern_raises_before_traversal(notes_root: Path) -> None:
    with patch("noteorg.core.search.searcher.list_files") as list_files:
        with pytest.raises(InvalidPatternError) as exc_info:
            search_files("(unclosed", notes_root)
    list_files.assert_not_called()
    assert exc_info.value.pattern == "(unclosed"


def test_search_skips_unreadable_notes(tmp_path: Path) -> None:
    root = build_tree(tmp_path / "n", {"good.md": "hello"})
    (root / "bad.md").write_bytes(b"\xff\xfehello")
    assert _rel(search_files("hello", root), root) == {"good.md"}


def test_search_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        search_files("x", tmp_path / "missing")


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("note.md", True),
        ("archive.tar.md", True),
        ("NOTE.MD", False),
        ("note.md.bak", False),
        ("notes.markdown", False),
        (".md", False),
        ("md", False),
    ],
)
def test_is_note_file(name: str, expected: bool) -> None:
    assert is_note_file(Path(name)) is expected


def test_searchable_text_field_order() -> None:
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    note = Note(
        path=Path("/n/a/b/f.md"),
        metadata=NoteMetadata(
            filename="f.md",
            title="Title",
            tags=("t1", "t2"),
            category=("a", "b"),
            created=now,
            last_modified=now,
        ),
        content="body",
    )
    assert searchable_text(note) == "f.md Title t1 t2 a b body"


def test_compile_pattern_returns_regex() -> None:
    assert compile_pattern("a+").search("caab")


def test_load_notes_reads_only_markdown(notes_root: Path) -> None:
    notes = load_notes(notes_root)
    names = {n.metadata.filename for n in notes}
    assert names == {"top.md", "a1.md", "note.md", "c.md", "bad.md"}
