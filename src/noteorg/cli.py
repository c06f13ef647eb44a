"""CLI for noteorg (list, edit, search, tree, stats)."""

from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from noteorg.config import resolve_notes_directory
from noteorg.core.search.searcher import load_notes, search_files
from noteorg.core.stats import collect_stats
from noteorg.core.tree.categories import build_category_tree
from noteorg.editor import SubprocessEditor
from noteorg.errors import NoteorgError, NotFoundError
from noteorg.logging_config import configure_logging
from noteorg.models.note import Note
from noteorg.protocols import EditorProtocol

app = typer.Typer(
    help="noteorg - organize and search your markdown notes.\n\n"
    "List notes with their metadata, search titles, tags, categories and "
    "content, and open matches in your editor."
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _resolve_root(path: Path | None) -> Path:
    root = (path or resolve_notes_directory()).expanduser()
    if not root.exists():
        logger.error("Notes directory not found: {}", root)
        raise typer.Exit(1)
    return root


def format_note_line(note: Note) -> str:
    """Format a note as ``[category/path] Title #tags (YYYY-MM-DD)``."""
    meta = note.metadata
    category = "/".join(meta.category) or "root"
    modified = f"{meta.last_modified:%Y-%m-%d}"
    if meta.tags:
        tags = "#" + " #".join(meta.tags)
        return f"[{category}] {meta.title} {tags} ({modified})"
    return f"[{category}] {meta.title} ({modified})"


@app.command(name="list")
def list_cmd(
    path: Annotated[
        Path | None,
        typer.Argument(help="Notes directory (default: ~/Notes)"),
    ] = None,
) -> None:
    """List all notes with their metadata (title, tags, category, date)."""
    root = _resolve_root(path)
    try:
        notes = load_notes(root)
    except OSError as exc:
        logger.error("Cannot read {}: {}", root, exc)
        raise typer.Exit(1) from exc

    for note in sorted(notes, key=lambda n: n.path):
        typer.echo(format_note_line(note))


def run_edit(pattern: str, root: Path, editor: EditorProtocol) -> list[Path]:
    """Open every note matching ``pattern`` in ``editor``.

    Raises:
        InvalidPatternError: ``pattern`` is not a valid regex.
        NotFoundError: No note matches.
    """
    matches = search_files(pattern, root)
    if not matches:
        msg = f"No file found matching regex: {pattern}"
        raise NotFoundError(msg)
    editor.launch(matches)
    return matches


@app.command()
def edit(
    pattern: str = typer.Argument(
        ..., help="Regex matched against note content, title, tags and filename"
    ),
    root: Annotated[
        Path | None,
        typer.Option("--root", "-r", help="Notes directory (default: ~/Notes)"),
    ] = None,
) -> None:
    """Edit notes matching a regex pattern."""
    notes_root = _resolve_root(root)
    try:
        run_edit(pattern, notes_root, SubprocessEditor())
    except (NoteorgError, OSError) as exc:
        logger.error("{}", exc)
        raise typer.Exit(1) from exc


@app.command()
def search(
    root: Annotated[
        Path | None,
        typer.Option("--root", "-r", help="Notes directory (default: ~/Notes)"),
    ] = None,
) -> None:
    """Interactive search through all notes with real-time results."""
    from noteorg.interactive.loop import run_interactive_search
    from noteorg.interactive.terminal import RawTerminal

    notes_root = _resolve_root(root)
    try:
        run_interactive_search(notes_root, RawTerminal(), SubprocessEditor())
    except OSError as exc:
        logger.error("{}", exc)
        raise typer.Exit(1) from exc


@app.command()
def tree(
    path: Annotated[
        Path | None,
        typer.Argument(help="Notes directory (default: ~/Notes)"),
    ] = None,
) -> None:
    """Show the category tree (directories only)."""
    root = _resolve_root(path)
    try:
        categories = build_category_tree(root)
    except OSError as exc:
        logger.error("Cannot build category tree for {}: {}", root, exc)
        raise typer.Exit(1) from exc
    typer.echo(categories.render())


@app.command()
def stats(
    path: Annotated[
        Path | None,
        typer.Argument(help="Notes directory (default: ~/Notes)"),
    ] = None,
) -> None:
    """Show statistics about your notes."""
    root = _resolve_root(path)
    try:
        summary = collect_stats(load_notes(root))
    except OSError as exc:
        logger.error("Cannot read {}: {}", root, exc)
        raise typer.Exit(1) from exc

    typer.echo(f"Notes:      {summary.notes}")
    typer.echo(f"Tags:       {summary.tags}")
    typer.echo(f"Categories: {summary.categories}")
    if summary.top_tags:
        typer.echo("Top tags:")
        for tag, count in summary.top_tags:
            typer.echo(f"  #{tag} ({count})")
