"""Application entry point and setup for the doomtype typing trainer."""

import logging
import signal
import sys
from typing import Optional

from PySide6.QtCore import QCoreApplication, QTimer

from doomtype.core.errors import DoomtypeError
from doomtype.core.settings import Settings
from doomtype.core.words import WordRepository
from doomtype.ui.controller import SessionController
from doomtype.ui.renderer import TerminalRenderer
from doomtype.ui.terminal import TerminalInput

logger = logging.getLogger("doomtype")

# Python only runs signal handlers between bytecodes; the Qt loop needs a
# periodic wake-up for Ctrl+C to be noticed.
SIGNAL_POLL_MS = 200


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure application-wide logging with a standard format."""
    settings = settings or Settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def install_interrupt_handler(app: QCoreApplication) -> QTimer:
    """Quit the event loop on SIGINT; returns the wake-up timer keeping it responsive."""
    signal.signal(signal.SIGINT, lambda *_: app.quit())
    wakeup = QTimer(app)
    wakeup.timeout.connect(lambda: None)
    wakeup.start(SIGNAL_POLL_MS)
    return wakeup


def run(settings: Optional[Settings] = None) -> int:
    """Start a session and run until interrupted. Returns the process exit code."""
    settings = settings or Settings()
    configure_logging(settings)
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    app.setApplicationName("doomtype")

    try:
        words = WordRepository()
        controller = SessionController(
            new_prompt=lambda: words.generate_prompt(settings.word_count),
            settings=settings,
        )
        terminal_input = TerminalInput(sys.stdin)
        renderer = TerminalRenderer()
    except (DoomtypeError, OSError) as e:
        logger.error("Error starting doomtype: %s", e)
        return 1

    install_interrupt_handler(app)
    with terminal_input, renderer:
        terminal_input.key_pressed.connect(controller.handle_key)
        controller.changed.connect(lambda: renderer.render(controller.view()))
        controller.start()
        app.exec()
        controller.stop()
    logger.info("Exiting")
    return 0


def main() -> None:
    """Console script entrypoint."""
    sys.exit(run())
