"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from doomtype.core.metrics import SessionMetrics, compute_metrics, describe_char, format_seconds
from doomtype.core.session import Phase, SessionState

STATUS_IDLE = "Start typing to kick off the timer."
STATUS_IN_PROGRESS = "Keep going, accuracy matters more than speed."
STATUS_FINISHED = "All done in {seconds}s. Press Ctrl+R for a new prompt."
HELP_LINE = "Backspace fixes mistakes • Ctrl+R refreshes • Ctrl+C exits"


class CharStatus(Enum):
    UNTYPED = "untyped"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    CURRENT = "current"


@dataclass(frozen=True)
class Cell:
    """One prompt character and how it should be drawn."""

    char: str
    status: CharStatus


def build_cells(state: SessionState) -> List[Cell]:
    cells: List[Cell] = []
    finished = state.finished
    for index, char in enumerate(state.target):
        if index < len(state.typed):
            status = CharStatus.CORRECT if state.typed[index] == char else CharStatus.INCORRECT
        elif index == len(state.typed) and not finished:
            status = CharStatus.CURRENT
        else:
            status = CharStatus.UNTYPED
        cells.append(Cell(char=char, status=status))
    return cells


def status_message(state: SessionState, metrics: SessionMetrics) -> str:
    phase = state.phase
    if phase is Phase.FINISHED:
        return STATUS_FINISHED.format(seconds=format_seconds(metrics.elapsed_ms))
    if phase is Phase.IN_PROGRESS:
        return STATUS_IN_PROGRESS
    return STATUS_IDLE


def build_stats(state: SessionState, metrics: SessionMetrics) -> List[Tuple[str, str]]:
    return [
        ("Timer", f"{format_seconds(metrics.elapsed_ms)}s"),
        ("Speed", f"{metrics.wpm:.1f} WPM"),
        ("Accuracy", f"{metrics.accuracy:.0f}%"),
        ("Position", f"{metrics.position} / {metrics.total}"),
        ("Current", describe_char(state.current_char)),
    ]


@dataclass(frozen=True)
class SessionView:
    """Everything the renderer needs to draw one frame."""

    phase: Phase
    cells: List[Cell]
    stats: List[Tuple[str, str]]
    status: str
    metrics: SessionMetrics

    @classmethod
    def build(cls, state: SessionState, now: float) -> "SessionView":
        metrics = compute_metrics(state, now)
        return cls(
            phase=state.phase,
            cells=build_cells(state),
            stats=build_stats(state, metrics),
            status=status_message(state, metrics),
            metrics=metrics,
        )
