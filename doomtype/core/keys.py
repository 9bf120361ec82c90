"""Key events read from the terminal and their classification.

Terminal input is noisy: besides real keystrokes it carries cursor-key escape
sequences, modified keys and, on some emulators, capability responses echoed
back into stdin. :func:`decode_keys` splits raw input into :class:`KeyEvent`
values and :func:`classify_key` reduces each one to the four actions a typing
session understands.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

ESC = "\x1b"

_FIRST_PRINTABLE = 32
_LAST_PRINTABLE = 126

_CSI_FINAL_NAMES = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
    "Z": "tab",
}
_CSI_TILDE_NAMES = {
    "1": "home",
    "2": "insert",
    "3": "delete",
    "4": "end",
    "5": "pageup",
    "6": "pagedown",
}


@dataclass(frozen=True)
class KeyEvent:
    """One key press as delivered by the input source."""

    sequence: str = ""
    name: str = ""
    ctrl: bool = False
    meta: bool = False
    option: bool = False
    shift: bool = False
    raw: str = ""


class KeyKind(Enum):
    RESET = "reset"
    BACKSPACE = "backspace"
    PRINTABLE = "printable"
    IGNORE = "ignore"


@dataclass(frozen=True)
class KeyAction:
    """Classified key event. ``char`` is only set for printable actions."""

    kind: KeyKind
    char: str = ""

    @classmethod
    def printable(cls, char: str) -> "KeyAction":
        return cls(KeyKind.PRINTABLE, char)


RESET = KeyAction(KeyKind.RESET)
BACKSPACE = KeyAction(KeyKind.BACKSPACE)
IGNORE = KeyAction(KeyKind.IGNORE)


def is_printable_key(event: Any, *, reject_escape_prefixed: bool = True) -> bool:
    """Return True if *event* is a single unmodified printable ASCII character."""
    sequence = getattr(event, "sequence", None)
    if not isinstance(sequence, str) or len(sequence) != 1:
        return False

    if getattr(event, "ctrl", False) or getattr(event, "meta", False) or getattr(event, "option", False):
        return False

    raw = getattr(event, "raw", None)
    if reject_escape_prefixed and isinstance(raw, str) and raw.startswith(ESC):
        return False

    return _FIRST_PRINTABLE <= ord(sequence) <= _LAST_PRINTABLE


def classify_key(event: Any, *, reject_escape_prefixed: bool = True) -> KeyAction:
    """Map a key event to RESET, BACKSPACE, a printable character or IGNORE.

    Total over every input: events of an unexpected shape are ignored rather
    than rejected.
    """
    name = getattr(event, "name", None)
    if getattr(event, "ctrl", False) and name == "r":
        return RESET
    if name == "backspace":
        return BACKSPACE
    if is_printable_key(event, reject_escape_prefixed=reject_escape_prefixed):
        return KeyAction.printable(event.sequence)
    return IGNORE


def _decode_char(ch: str) -> KeyEvent:
    """Decode a single character that is not part of an escape sequence."""
    if ch in ("\x7f", "\x08"):
        return KeyEvent(sequence=ch, name="backspace", raw=ch)
    if ch == "\r":
        return KeyEvent(sequence=ch, name="return", raw=ch)
    if ch == "\n":
        return KeyEvent(sequence=ch, name="linefeed", raw=ch)
    if ch == "\t":
        return KeyEvent(sequence=ch, name="tab", raw=ch)
    if ch == ESC:
        return KeyEvent(sequence=ch, name="escape", raw=ch)
    if ch == " ":
        return KeyEvent(sequence=ch, name="space", raw=ch)

    code = ord(ch)
    if code == 0:
        return KeyEvent(sequence=ch, name="space", ctrl=True, raw=ch)
    if 1 <= code <= 26:
        # Ctrl+A .. Ctrl+Z
        return KeyEvent(sequence=ch, name=chr(code + 96), ctrl=True, raw=ch)
    if code < _FIRST_PRINTABLE:
        return KeyEvent(sequence=ch, name="", ctrl=True, raw=ch)
    return KeyEvent(sequence=ch, name=ch.lower(), shift=ch.isupper(), raw=ch)


def _csi_name(sequence: str) -> str:
    final = sequence[-1]
    if final == "~":
        params = sequence[2:-1].split(";")[0]
        return _CSI_TILDE_NAMES.get(params, "")
    return _CSI_FINAL_NAMES.get(final, "")


def decode_partial(data: str) -> tuple[list[KeyEvent], str]:
    """Split a chunk of terminal input into key events and an unfinished tail.

    ``ESC [ ... final`` sequences stay together as one multi-character event,
    so cursor keys and capability responses never leak into the typed text as
    separate printable characters. A sequence cut off at the end of the chunk
    (lone ESC, ``ESC O`` or a CSI without its final byte) is returned as the
    tail to be prepended to the next read.
    """
    events: list[KeyEvent] = []
    i = 0
    n = len(data)
    while i < n:
        ch = data[i]
        if ch != ESC:
            events.append(_decode_char(ch))
            i += 1
            continue
        if i + 1 >= n:
            return events, data[i:]

        nxt = data[i + 1]
        if nxt == "[":
            j = i + 2
            while j < n and not ("\x40" <= data[j] <= "\x7e"):
                j += 1
            if j >= n:
                return events, data[i:]
            sequence = data[i : j + 1]
            events.append(KeyEvent(sequence=sequence, name=_csi_name(sequence), raw=sequence))
            i = j + 1
        elif nxt == "O":
            if i + 2 >= n:
                return events, data[i:]
            sequence = data[i : i + 3]
            events.append(KeyEvent(sequence=sequence, name=_CSI_FINAL_NAMES.get(sequence[2], ""), raw=sequence))
            i += 3
        else:
            inner = _decode_char(nxt)
            sequence = ch + nxt
            events.append(
                KeyEvent(
                    sequence=sequence,
                    name=inner.name,
                    ctrl=inner.ctrl,
                    meta=True,
                    option=True,
                    shift=inner.shift,
                    raw=sequence,
                )
            )
            i += 2
    return events, ""


def decode_keys(data: str) -> list[KeyEvent]:
    """Decode a complete chunk; an unfinished escape sequence becomes one event."""
    events, tail = decode_partial(data)
    if tail == ESC:
        events.append(_decode_char(ESC))
    elif tail:
        events.append(KeyEvent(sequence=tail, name="", raw=tail))
    return events
