"""Keyboard input from a terminal, delivered through the Qt event loop."""

from __future__ import annotations

import codecs
import logging
import os
import termios
import tty
from typing import Optional, TextIO

from PySide6.QtCore import QCoreApplication, QObject, QSocketNotifier, Signal

from doomtype.core.keys import KeyEvent, decode_keys, decode_partial

logger = logging.getLogger(__name__)

READ_SIZE = 1024
# An escape sequence still unterminated after this many characters is flushed.
MAX_PENDING = 64


class TerminalInput(QObject):
    """Puts a tty into cbreak mode and emits one ``key_pressed`` per key.

    cbreak keeps signal generation on, so Ctrl+C still raises SIGINT while
    every other key (including Ctrl+R and Backspace) arrives unbuffered.
    """

    key_pressed = Signal(object)

    def __init__(self, stream: TextIO, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._fd = stream.fileno()
        if not os.isatty(self._fd):
            raise OSError(f"stdin (fd {self._fd}) is not a terminal")
        self._saved_attrs = termios.tcgetattr(self._fd)
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._notifier: Optional[QSocketNotifier] = None
        self._pending = ""

    @property
    def reading(self) -> bool:
        """True while the notifier is watching the tty for input."""
        return self._notifier is not None and self._notifier.isEnabled()

    def open(self) -> None:
        tty.setcbreak(self._fd)
        self._notifier = QSocketNotifier(self._fd, QSocketNotifier.Type.Read, self)
        self._notifier.activated.connect(self._on_readable)
        logger.debug("Terminal input opened on fd %d", self._fd)

    def close(self) -> None:
        if self._notifier is not None:
            self._notifier.setEnabled(False)
            self._notifier.deleteLater()
            self._notifier = None
        try:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
        except termios.error as e:
            logger.warning("Could not restore tty settings on fd %d: %s", self._fd, e)
            return
        logger.debug("Terminal input closed, tty settings restored")

    def __enter__(self) -> "TerminalInput":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _on_readable(self, *_args) -> None:
        try:
            data = os.read(self._fd, READ_SIZE)
        except BlockingIOError:
            return
        except OSError as e:
            # EIO once the other end of the tty hangs up
            logger.info("Terminal input failed (%s), quitting", e)
            self._stop_reading()
            return
        if not data:
            logger.info("Terminal input reached end of file, quitting")
            self._stop_reading()
            return
        for event in self.feed(data):
            self.key_pressed.emit(event)

    def _stop_reading(self) -> None:
        if self._notifier is not None:
            self._notifier.setEnabled(False)
        app = QCoreApplication.instance()
        if app is not None:
            app.quit()

    def feed(self, data: bytes) -> list[KeyEvent]:
        """Decode raw bytes into key events.

        Split multi-byte characters and escape sequences cut off at the end of
        a read are held back and completed by the next chunk.
        """
        text = self._pending + self._decoder.decode(data)
        if not text:
            return []
        events, self._pending = decode_partial(text)
        if len(self._pending) > MAX_PENDING:
            events.extend(decode_keys(self._pending))
            self._pending = ""
        return events
