from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from doomtype.core.errors import PromptError
from doomtype.core.keys import KeyAction, KeyKind

PromptFactory = Callable[[], str]


class Phase(Enum):
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


@dataclass(frozen=True)
class SessionState:
    """One attempt at typing a prompt.

    Timestamps are milliseconds from the controller's clock. ``start_time`` is
    set by the first accepted character and ``end_time`` by the character
    that completes the prompt; neither changes again until a reset replaces
    the whole state.
    """

    target: str
    typed: str = ""
    start_time: Optional[float] = None
    end_time: Optional[float] = None

    @property
    def finished(self) -> bool:
        """True once every target character has been typed (never for an empty target)."""
        return len(self.typed) >= len(self.target) and len(self.target) > 0

    @property
    def phase(self) -> Phase:
        if self.end_time is not None or self.finished:
            return Phase.FINISHED
        if self.start_time is not None:
            return Phase.IN_PROGRESS
        return Phase.IDLE

    @property
    def current_char(self) -> Optional[str]:
        """The next character to type, or None when nothing is left."""
        if len(self.typed) < len(self.target):
            return self.target[len(self.typed)]
        return None


def new_session(prompt: str) -> SessionState:
    """Build a fresh idle session for *prompt*."""
    if not isinstance(prompt, str) or not prompt:
        raise PromptError(f"Prompt provider returned an unusable prompt: {prompt!r}")
    return SessionState(target=prompt)


def apply(state: SessionState, action: KeyAction, now: float, new_prompt: PromptFactory) -> SessionState:
    """Return the state that results from applying *action* at time *now*.

    *new_prompt* is only called for a reset; a :class:`PromptError` it raises
    propagates to the caller and the current state is left untouched.
    """
    if action.kind is KeyKind.RESET:
        return new_session(new_prompt())

    if action.kind is KeyKind.BACKSPACE:
        if not state.typed or state.finished:
            return state
        return replace(state, typed=state.typed[:-1])

    if action.kind is KeyKind.PRINTABLE:
        return _type_char(state, action.char, now)

    return state


def _type_char(state: SessionState, char: str, now: float) -> SessionState:
    if state.finished or state.end_time is not None:
        return state

    start_time = state.start_time if state.start_time is not None else now
    typed = state.typed
    # Cap at the target length even if the same key arrives twice.
    if len(typed) < len(state.target):
        typed += char

    end_time = state.end_time
    if len(typed) == len(state.target) and len(state.target) > 0:
        end_time = now

    return replace(state, typed=typed, start_time=start_time, end_time=end_time)
