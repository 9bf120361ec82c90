"""Owns the live session state and applies key events to it."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from doomtype.core.errors import PromptError
from doomtype.core.keys import KeyAction, KeyKind, classify_key
from doomtype.core.session import Phase, PromptFactory, SessionState, apply, new_session
from doomtype.core.settings import Settings
from doomtype.ui.models import SessionView

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class SessionController(QObject):
    """Serialises key events into session transitions.

    The refresh ticker only runs while the session is in progress; it is
    re-synchronised after every transition so finishing or resetting always
    stops it.
    """

    changed = Signal()

    def __init__(
        self,
        new_prompt: PromptFactory,
        settings: Optional[Settings] = None,
        clock: Clock = monotonic_ms,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or Settings()
        self._new_prompt = new_prompt
        self._clock = clock
        self._state = new_session(new_prompt())
        self._ready = False
        self._logged_keys = 0

        self._ticker = QTimer(self)
        self._ticker.setInterval(self._settings.tick_interval_ms)
        self._ticker.timeout.connect(self.changed.emit)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def ticking(self) -> bool:
        return self._ticker.isActive()

    def start(self) -> None:
        """Begin accepting keys once the start-up guard window has passed."""
        if self._settings.input_guard_ms > 0:
            QTimer.singleShot(self._settings.input_guard_ms, self._mark_ready)
        else:
            self._mark_ready()
        self.changed.emit()

    def stop(self) -> None:
        self._ticker.stop()

    def view(self) -> SessionView:
        return SessionView.build(self._state, self._clock())

    def handle_key(self, event: object) -> None:
        """Classify and apply one raw key event."""
        action = classify_key(event, reject_escape_prefixed=self._settings.reject_escape_prefixed)
        if self._logged_keys < self._settings.debug_key_log_limit:
            self._logged_keys += 1
            logger.debug("key %r -> %s", event, action.kind.value)
        if not self._ready:
            return
        self.dispatch(action)

    def dispatch(self, action: KeyAction) -> None:
        """Apply an already classified action and notify listeners."""
        previous = self._state
        try:
            state = apply(previous, action, self._clock(), self._new_prompt)
        except PromptError:
            logger.exception("Could not generate a new prompt, keeping the current one")
            return
        if state is previous:
            return

        self._state = state
        if action.kind is KeyKind.RESET:
            logger.info("Session reset with a %d character prompt", len(state.target))
        elif previous.phase is not state.phase:
            logger.info("Session %s", state.phase.value)
        self._sync_ticker()
        self.changed.emit()

    def _mark_ready(self) -> None:
        self._ready = True

    def _sync_ticker(self) -> None:
        if self._state.phase is Phase.IN_PROGRESS:
            if not self._ticker.isActive():
                self._ticker.start()
        else:
            self._ticker.stop()
