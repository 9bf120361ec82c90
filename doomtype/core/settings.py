"""Code-level constants for a typing session."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_WORD_COUNT = 28


@dataclass(frozen=True)
class Settings:
    """Tunable constants shared by the controller, prompt provider and app.

    ``reject_escape_prefixed`` drops keys whose raw bytes start with ESC; some
    terminals (iTerm2 in particular) echo capability responses into stdin and
    this keeps them out of the typed text.
    """

    word_count: int = DEFAULT_WORD_COUNT
    tick_interval_ms: int = 80
    input_guard_ms: int = 100
    reject_escape_prefixed: bool = True
    debug_key_log_limit: int = 5
    log_level: str = "WARNING"
