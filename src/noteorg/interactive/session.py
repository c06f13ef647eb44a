"""State of an interactive search and the transitions key presses cause."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from loguru import logger

from noteorg.core.search.searcher import search_files
from noteorg.errors import InvalidPatternError
from noteorg.interactive.keys import KeyCode, KeyEvent

SearchFn = Callable[[str, Path], list[Path]]


@dataclass
class SearchSession:
    """Mutable state owned by the interactive loop.

    ``results`` is recomputed on every query change and ``selection`` is reset
    to 0 whenever they are replaced. ``dirty`` starts True so the first loop
    iteration always renders.
    """

    root: Path
    search: SearchFn = search_files
    query: str = ""
    results: list[Path] = field(default_factory=list)
    selection: int = 0
    error: bool = False
    dirty: bool = True

    def set_query(self, query: str) -> None:
        """Replace the query and re-run the search synchronously."""
        if query == self.query:
            return
        self.query = query
        self.dirty = True
        self.error = False

        if not query:
            self.results = []
            self.selection = 0
            return

        try:
            results = self.search(query, self.root)
        except InvalidPatternError:
            self.error = True
            self.results = []
            return
        except OSError as exc:
            logger.debug("Search under {} failed: {}", self.root, exc)
            results = []

        self.results = results
        self.selection = 0

    def insert_char(self, char: str) -> None:
        self.set_query(self.query + char)

    def delete_char(self) -> None:
        self.set_query(self.query[:-1])

    def move_up(self) -> None:
        if self.selection > 0:
            self.selection -= 1
            self.dirty = True

    def move_down(self) -> None:
        if self.selection < len(self.results) - 1:
            self.selection += 1
            self.dirty = True

    def selected(self) -> Path | None:
        """The path under the cursor, or None when nothing is selectable."""
        if 0 <= self.selection < len(self.results):
            return self.results[self.selection]
        return None

    def request_redraw(self) -> None:
        self.dirty = True

    def mark_rendered(self) -> None:
        self.dirty = False


class ActionKind(Enum):
    CONTINUE = "continue"
    EXIT = "exit"
    OPEN_EDITOR = "open_editor"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    ADD_CHAR = "add_char"
    DELETE_CHAR = "delete_char"


@dataclass(frozen=True)
class SearchAction:
    """What a key press asks the loop to do."""

    kind: ActionKind
    char: str = ""
    path: Path | None = None


def handle_key(key: KeyEvent, session: SearchSession) -> SearchAction:
    """Translate a key press into an action, given the current session."""
    if key.code is KeyCode.CHAR:
        if key.ctrl:
            if key.char == "c":
                return SearchAction(ActionKind.EXIT)
            return SearchAction(ActionKind.CONTINUE)
        return SearchAction(ActionKind.ADD_CHAR, char=key.char)
    if key.code is KeyCode.ESC:
        return SearchAction(ActionKind.EXIT)
    if key.code is KeyCode.UP:
        return SearchAction(ActionKind.MOVE_UP)
    if key.code is KeyCode.DOWN:
        return SearchAction(ActionKind.MOVE_DOWN)
    if key.code is KeyCode.BACKSPACE:
        return SearchAction(ActionKind.DELETE_CHAR)
    if key.code is KeyCode.ENTER:
        path = session.selected()
        if path is not None:
            return SearchAction(ActionKind.OPEN_EDITOR, path=path)
    return SearchAction(ActionKind.CONTINUE)


def apply_action(action: SearchAction, session: SearchSession) -> None:
    """Apply the state-only actions; EXIT and OPEN_EDITOR belong to the loop."""
    if action.kind is ActionKind.MOVE_UP:
        session.move_up()
    elif action.kind is ActionKind.MOVE_DOWN:
        session.move_down()
    elif action.kind is ActionKind.ADD_CHAR:
        session.insert_char(action.char)
    elif action.kind is ActionKind.DELETE_CHAR:
        session.delete_char()
