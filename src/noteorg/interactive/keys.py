"""Key events and decoding of raw terminal input."""

from dataclasses import dataclass
from enum import Enum


class KeyCode(Enum):
    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    ESC = "esc"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press. ``char`` is set for KeyCode.CHAR only."""

    code: KeyCode
    char: str = ""
    ctrl: bool = False

    @classmethod
    def of(cls, char: str, *, ctrl: bool = False) -> "KeyEvent":
        return cls(KeyCode.CHAR, char, ctrl)


_ESCAPE_SEQUENCES: dict[str, KeyCode] = {
    "\x1b[A": KeyCode.UP,
    "\x1b[B": KeyCode.DOWN,
    "\x1b[C": KeyCode.RIGHT,
    "\x1b[D": KeyCode.LEFT,
    "\x1bOA": KeyCode.UP,
    "\x1bOB": KeyCode.DOWN,
    "\x1bOC": KeyCode.RIGHT,
    "\x1bOD": KeyCode.LEFT,
}


def ends_in_partial_escape(text: str) -> bool:
    """True when ``text`` ends with an escape sequence that may still be arriving.

    That is a lone ESC, ``ESC [`` or ``ESC O``, or a CSI sequence whose final
    byte has not been seen yet.
    """
    start = text.rfind("\x1b")
    if start == -1:
        return False
    seq = text[start:]
    if len(seq) == 1:
        return True
    if seq[1] == "O":
        return len(seq) == 2
    if seq[1] == "[":
        return not any("@" <= ch <= "~" for ch in seq[2:])
    return False


def decode_keys(text: str) -> list[KeyEvent]:
    """Split text read from a raw-mode terminal into key events.

    Several keys can arrive in one read (pasted text, fast typing), so the
    whole text is decoded. Unrecognised escape sequences become a single
    KeyCode.UNKNOWN event. A trailing partial escape sequence is decoded as
    if complete; callers wait for the rest first, see
    :func:`ends_in_partial_escape`.
    """
    events: list[KeyEvent] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\x1b":
            seq = text[i : i + 3]
            if seq in _ESCAPE_SEQUENCES:
                events.append(KeyEvent(_ESCAPE_SEQUENCES[seq]))
                i += 3
                continue
            if len(seq) == 1:
                events.append(KeyEvent(KeyCode.ESC))
                i += 1
                continue
            if seq[1] in "[O":
                # Skip the rest of a CSI/SS3 sequence up to its final byte.
                end = i + 2
                while end < len(text) and not ("@" <= text[end] <= "~"):
                    end += 1
                events.append(KeyEvent(KeyCode.UNKNOWN))
                i = end + 1
                continue
            events.append(KeyEvent(KeyCode.ESC))
            i += 1
        elif ch in "\r\n":
            events.append(KeyEvent(KeyCode.ENTER))
            i += 1
        elif ch in "\x7f\x08":
            events.append(KeyEvent(KeyCode.BACKSPACE))
            i += 1
        elif ord(ch) < 0x20:
            events.append(KeyEvent.of(chr(ord(ch) + 0x60), ctrl=True))
            i += 1
        else:
            events.append(KeyEvent.of(ch))
            i += 1
    return events
