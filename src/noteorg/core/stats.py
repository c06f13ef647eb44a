"""Corpus statistics."""

from collections import Counter
from dataclasses import dataclass

from noteorg.models.note import Note


@dataclass(frozen=True)
class NoteStats:
    """Summary counts over a set of notes."""

    notes: int
    tags: int
    categories: int
    top_tags: tuple[tuple[str, int], ...] = ()


def collect_stats(notes: list[Note], *, top: int = 5) -> NoteStats:
    """Count notes, distinct tags and distinct category paths."""
    tag_counts: Counter[str] = Counter()
    categories: set[tuple[str, ...]] = set()
    for note in notes:
        tag_counts.update(note.metadata.tags)
        categories.add(note.metadata.category)

    return NoteStats(
        notes=len(notes),
        tags=len(tag_counts),
        categories=len(categories),
        top_tags=tuple(tag_counts.most_common(top)),
    )
