"""Shared test fixtures."""

from pathlib import Path

import pytest

NOTES_TREE = {
    "top.md": "Top level note\n",
    "README.txt": "plain text, never searched\n",
    "A/a1.md": "---\ntitle: Alpha\ntags: [python, cli]\ndate: 2024-01-02\n---\nFirst body\n",
    "A/B/note.md": "deep content with unique_token_xyz\n",
    "C/c.md": "---\ntags: [x, y]\n---\nTagged only\n",
    "C/bad.md": "---\ntitle: [unclosed\n---\nBroken front matter\n",
}

# Every directory in NOTES_TREE, root included.
NOTES_DIRS = {"Notes", "A", "B", "C", "empty"}


def build_tree(root: Path, files: dict[str, str]) -> Path:
    """Write ``files`` (relative path -> contents) below ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for rel, contents in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")
    return root


@pytest.fixture
def notes_root(tmp_path: Path) -> Path:
    """Return a small notes directory with nested categories."""
    root = build_tree(tmp_path / "Notes", NOTES_TREE)
    (root / "empty").mkdir()
    return root
