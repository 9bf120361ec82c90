from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from doomtype.core.session import SessionState

CHARS_PER_WORD = 5
MS_PER_MINUTE = 60_000


@dataclass(frozen=True)
class SessionMetrics:
    """Live statistics derived from a session state.

    Speed follows the usual convention of five characters per word, counting
    every typed character (gross WPM).
    """

    elapsed_ms: float
    correct_count: int
    typed_count: int
    accuracy: float
    wpm: float
    position: int
    total: int


def elapsed_ms(state: SessionState, now: float) -> float:
    """Milliseconds since the first keystroke, frozen once the session finishes."""
    if state.start_time is None:
        return 0.0
    end = state.end_time if state.end_time is not None else now
    return max(0.0, end - state.start_time)


def correct_count(state: SessionState) -> int:
    return sum(1 for typed, expected in zip(state.typed, state.target) if typed == expected)


def accuracy(state: SessionState) -> float:
    """Percentage of typed characters that match the target (100 before typing)."""
    if not state.typed:
        return 100.0
    return 100.0 * correct_count(state) / len(state.typed)


def words_per_minute(typed_count: int, elapsed: float) -> float:
    if typed_count == 0 or elapsed == 0:
        return 0.0
    minutes = max(elapsed, 1) / MS_PER_MINUTE
    return max(0.0, (typed_count / CHARS_PER_WORD) / minutes)


def position(state: SessionState) -> int:
    """1-based index of the cursor, clamped to the target length."""
    return min(len(state.typed) + 1, len(state.target))


def compute_metrics(state: SessionState, now: float) -> SessionMetrics:
    elapsed = elapsed_ms(state, now)
    typed_count = len(state.typed)
    return SessionMetrics(
        elapsed_ms=elapsed,
        correct_count=correct_count(state),
        typed_count=typed_count,
        accuracy=accuracy(state),
        wpm=words_per_minute(typed_count, elapsed),
        position=position(state),
        total=len(state.target),
    )


def format_seconds(milliseconds: float) -> str:
    """Format a duration in milliseconds as seconds with one decimal, e.g. ``"12.3"``."""
    return f"{milliseconds / 1000:.1f}"


def describe_char(char: Optional[str]) -> str:
    """Human-readable name for the next character to type."""
    if not char:
        return "done"
    if char == " ":
        return "space"
    if char == "\n":
        return "line break"
    return char
