"""Category tree: a snapshot of the directory hierarchy under a notes root."""

import os
from dataclasses import dataclass
from pathlib import Path

from noteorg.errors import CategoryNotFoundError


@dataclass(frozen=True)
class CategoryTree:
    """One node per directory. Files are never nodes."""

    name: str
    children: tuple["CategoryTree", ...] = ()

    def child(self, name: str) -> "CategoryTree | None":
        """Return the immediate child called ``name``, if any."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def count(self) -> int:
        """Number of nodes in the tree, root included."""
        return 1 + sum(child.count() for child in self.children)

    def get_categories(self, path: str | Path) -> list[str]:
        """Resolve ``path`` to the list of categories leading to it.

        Segments of ``path`` up to and including the one equal to the root's
        name are skipped; every remaining segment must match a child at the
        corresponding level. A file path resolves to its parent directory.

        Raises:
            CategoryNotFoundError: ``path`` does not belong to this tree.
        """
        path = Path(path)
        if path.is_file():
            path = path.parent

        parts = path.parts
        if self.name not in parts:
            msg = f"{path} is not below category root {self.name!r}"
            raise CategoryNotFoundError(msg)

        result: list[str] = []
        node = self
        for part in parts[parts.index(self.name) + 1 :]:
            child = node.child(part)
            if child is None:
                msg = f"The path {path} does not match the category tree"
                raise CategoryNotFoundError(msg)
            result.append(part)
            node = child
        return result

    def render(self) -> str:
        """Draw the tree with box-drawing connectors, root first."""
        lines = [f"{self.name}/"]
        self._render_children("", lines)
        return "\n".join(lines)

    def _render_children(self, prefix: str, lines: list[str]) -> None:
        last = len(self.children) - 1
        for i, child in enumerate(self.children):
            connector = "└── " if i == last else "├── "
            lines.append(f"{prefix}{connector}{child.name}")
            extension = "    " if i == last else "│   "
            child._render_children(prefix + extension, lines)


def build_category_tree(root: str | Path) -> CategoryTree:
    """Build the category tree rooted at ``root``.

    Unlike :func:`noteorg.core.traversal.files.list_files`, any directory that
    cannot be read aborts the whole build.

    Raises:
        OSError: ``root`` or one of its subdirectories cannot be read.
    """
    root = Path(root)
    name = root.name or root.resolve().name

    with os.scandir(root) as entries:
        subdirs = sorted(Path(entry.path) for entry in entries if entry.is_dir())

    return CategoryTree(
        name=name,
        children=tuple(build_category_tree(subdir) for subdir in subdirs),
    )
