"""The interactive search loop: poll a key, update state, redraw when dirty."""

from pathlib import Path

from noteorg.config import MAX_VISIBLE_RESULTS, POLL_INTERVAL
from noteorg.core.search.searcher import search_files
from noteorg.interactive.render import prompt_cursor, render_session
from noteorg.interactive.session import (
    ActionKind,
    SearchFn,
    SearchSession,
    apply_action,
    handle_key,
)
from noteorg.protocols import EditorProtocol, TerminalProtocol


def run_interactive_search(
    root: Path,
    terminal: TerminalProtocol,
    editor: EditorProtocol,
    *,
    poll_interval: float = POLL_INTERVAL,
    max_visible: int = MAX_VISIBLE_RESULTS,
    search: SearchFn = search_files,
) -> SearchSession:
    """Run the search UI until the user exits.

    Each iteration renders if the session is dirty, then waits at most
    ``poll_interval`` seconds for a key. Choosing a result suspends the
    terminal, runs the editor to completion and forces a redraw; query,
    results and selection are kept.

    Returns:
        The final session state.
    """
    session = SearchSession(root=root, search=search)
    with terminal:
        while True:
            if session.dirty:
                terminal.draw(
                    render_session(session, max_visible=max_visible),
                    cursor=prompt_cursor(session),
                )
                session.mark_rendered()

            key = terminal.poll_key(poll_interval)
            if key is None:
                continue

            action = handle_key(key, session)
            if action.kind is ActionKind.EXIT:
                break
            if action.kind is ActionKind.OPEN_EDITOR and action.path is not None:
                with terminal.suspended():
                    editor.launch([action.path])
                session.request_redraw()
            else:
                apply_action(action, session)
    return session
