"""Draws a :class:`SessionView` to the terminal with rich."""

from __future__ import annotations

import logging
from typing import List, Optional

from rich.console import Console, Group, RenderableType
from rich.constrain import Constrain
from rich.live import Live
from rich.logging import RichHandler
from rich.padding import Padding
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from doomtype.ui.colors import Theme, accuracy_color
from doomtype.ui.models import HELP_LINE, CharStatus, SessionView

TITLE = "Your clanker is slow. You don't need to be."
MAX_WIDTH = 110

_CELL_STYLES = {
    CharStatus.CORRECT: Style(color=Theme.SUCCESS),
    CharStatus.INCORRECT: Style(color=Theme.ERROR),
    CharStatus.CURRENT: Style(color=Theme.CURSOR_TEXT, bgcolor=Theme.ACCENT, bold=True, underline=True),
    CharStatus.UNTYPED: Style(color=Theme.TEXT_DIM),
}


def prompt_text(view: SessionView) -> Text:
    text = Text()
    for cell in view.cells:
        text.append(cell.char, style=_CELL_STYLES[cell.status])
    return text


def stats_table(view: SessionView) -> Table:
    table = Table.grid(expand=True, padding=(0, 2))
    table.add_column(ratio=1)
    table.add_column(ratio=1)
    cells = []
    for label, value in view.stats:
        if label == "Speed":
            value_style = Style(color=Theme.ACCENT)
        elif label == "Accuracy":
            value_style = Style(color=accuracy_color(view.metrics.accuracy))
        else:
            value_style = Style(color=Theme.TEXT)
        cell = Text()
        cell.append(f"{label}\n", style=Style(color=Theme.TEXT_DIM, dim=True))
        cell.append(value, style=value_style)
        cells.append(cell)
    for i in range(0, len(cells), 2):
        row = cells[i : i + 2]
        if len(row) < 2:
            row.append(Text())
        table.add_row(*row)
    return table


def build_frame(view: SessionView) -> RenderableType:
    """Compose the full screen for one view."""
    title = Text(TITLE, style=Style(color=Theme.TEXT, bold=True), justify="center")
    prompt_panel = Panel(
        prompt_text(view),
        title="Prompt",
        title_align="left",
        border_style=Style(color=Theme.BORDER),
        style=Style(bgcolor=Theme.PANEL),
        padding=(1, 2),
    )
    stats_panel = Panel(
        Group(
            Text(view.status, style=Style(color=Theme.TEXT_DIM)),
            Text(),
            stats_table(view),
            Text(),
            Text(HELP_LINE, style=Style(color=Theme.TEXT_DIM, dim=True)),
        ),
        border_style=Style(color=Theme.BORDER),
        style=Style(bgcolor=Theme.PANEL_MUTED),
        padding=(1, 2),
    )
    return Group(Text(), title, Text(), prompt_panel, stats_panel)


class TerminalRenderer:
    """Owns the alternate screen and redraws it on demand.

    While the screen is open, root logging goes through the rich console so
    records are drawn above the live frame instead of over it.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console or Console(highlight=False)
        if not self._console.is_terminal:
            raise OSError("stdout is not a terminal")
        self._live = Live(
            console=self._console,
            screen=True,
            auto_refresh=False,
            transient=True,
            redirect_stdout=False,
            redirect_stderr=False,
        )
        self._log_handler = RichHandler(console=self._console, show_path=False)
        self._saved_handlers: List[logging.Handler] = []

    @property
    def console(self) -> Console:
        return self._console

    @property
    def width(self) -> int:
        """Frame width for the current terminal size."""
        return min(self._console.width, MAX_WIDTH)

    def open(self) -> None:
        root = logging.getLogger()
        self._saved_handlers = list(root.handlers)
        for handler in self._saved_handlers:
            root.removeHandler(handler)
        self._log_handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(self._log_handler)
        self._live.start()

    def close(self) -> None:
        self._live.stop()
        root = logging.getLogger()
        root.removeHandler(self._log_handler)
        for handler in self._saved_handlers:
            root.addHandler(handler)
        self._saved_handlers = []

    def __enter__(self) -> "TerminalRenderer":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def render(self, view: SessionView) -> None:
        frame = Padding(build_frame(view), (0, 2), style=Style(bgcolor=Theme.BACKGROUND))
        self._live.update(Constrain(frame, width=self.width), refresh=True)
