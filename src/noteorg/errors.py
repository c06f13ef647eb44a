"""Exceptions raised by noteorg."""

import re


class NoteorgError(Exception):
    """Base class for all noteorg errors."""


class NotAFileError(NoteorgError):
    """A path that must name a regular file does not."""


class InvalidPatternError(NoteorgError):
    """A search pattern failed to compile as a regular expression."""

    def __init__(self, pattern: str, error: re.error) -> None:
        self.pattern = pattern
        self.error = error
        super().__init__(f"Invalid regex {pattern!r}: {error}")


class NotFoundError(NoteorgError):
    """No note matched a search."""


class CategoryNotFoundError(NoteorgError):
    """A path does not belong to a category tree."""
