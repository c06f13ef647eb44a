"""Turn a search session into the lines shown on screen."""

from rich.text import Text

from noteorg.config import MAX_VISIBLE_RESULTS, SEPARATOR_WIDTH
from noteorg.interactive.session import SearchSession

PROMPT = "Search: "
PLACEHOLDER = "Start typing to search..."
INVALID_PATTERN = "Invalid regex pattern"
NO_MATCHES = "No matches"


def render_session(
    session: SearchSession,
    *,
    max_visible: int = MAX_VISIBLE_RESULTS,
    separator_width: int = SEPARATOR_WIDTH,
) -> list[Text]:
    """Render the prompt, a separator and the result list.

    At most ``max_visible`` results are listed. The window scrolls so the
    selected result stays on screen; it is drawn in cyan with a ``▶`` marker.
    Rows keep their position in the full result list as their number.
    """
    lines = [Text(PROMPT + session.query), Text("─" * separator_width)]

    if not session.query:
        lines.append(Text(PLACEHOLDER))
    elif session.error:
        lines.append(Text(INVALID_PATTERN))
    elif not session.results:
        lines.append(Text(NO_MATCHES))
    else:
        lines.append(
            Text(f"Found {len(session.results)} matches (↑↓ to select, Enter to edit):")
        )
        start = max(0, session.selection - max_visible + 1)
        window = session.results[start : start + max_visible]
        for i, path in enumerate(window, start=start):
            name = path.name or "unknown"
            if i == session.selection:
                lines.append(Text(f"▶ {i + 1}. {name}", style="cyan"))
            else:
                lines.append(Text(f"  {i + 1}. {name}"))
    return lines


def prompt_cursor(session: SearchSession) -> tuple[int, int]:
    """Screen position right after the typed query."""
    return len(PROMPT) + len(session.query), 0
