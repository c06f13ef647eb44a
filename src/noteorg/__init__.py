"""Organize, list and search markdown notes."""

from noteorg.core.reader.note_reader import read_note, read_note_metadata
from noteorg.core.search.searcher import search_files
from noteorg.core.traversal.files import list_files
from noteorg.core.tree.categories import CategoryTree, build_category_tree
from noteorg.models.note import Note, NoteMetadata

__all__ = [
    "CategoryTree",
    "Note",
    "NoteMetadata",
    "build_category_tree",
    "list_files",
    "read_note",
    "read_note_metadata",
    "search_files",
]
