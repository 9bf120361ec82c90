"""Tests for doomtype.ui.renderer – frame composition."""

from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console

from doomtype.core.session import SessionState
from doomtype.ui.models import HELP_LINE, SessionView
from doomtype.ui.renderer import MAX_WIDTH, TITLE, TerminalRenderer, build_frame, prompt_text


def _render(renderable) -> str:
    console = Console(file=io.StringIO(), width=100, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


class TestBuildFrame:
    def test_contains_prompt_stats_and_help(self):
        state = SessionState(target="cat dog", typed="ca", start_time=0.0)
        out = _render(build_frame(SessionView.build(state, now=1000.0)))
        assert TITLE in out
        assert "cat dog" in out
        assert "Accuracy" in out
        assert "3 / 7" in out
        assert HELP_LINE in out

    def test_prompt_text_keeps_characters(self):
        view = SessionView.build(SessionState(target="hi there"), now=0.0)
        assert prompt_text(view).plain == "hi there"


class TestTerminalRenderer:
    def test_refuses_non_terminal(self):
        console = Console(file=io.StringIO(), force_terminal=False)
        with pytest.raises(OSError):
            TerminalRenderer(console)

    def test_width_follows_terminal_resize(self):
        console = Console(file=io.StringIO(), force_terminal=True, width=200)
        renderer = TerminalRenderer(console)
        assert renderer.width == MAX_WIDTH
        console.width = 80
        assert renderer.width == 80


class TestLoggingWhileLive:
    def test_records_go_through_console_and_handlers_restored(self):
        console = Console(file=io.StringIO(), force_terminal=True, width=120)
        renderer = TerminalRenderer(console)
        root = logging.getLogger()
        before = list(root.handlers)
        with renderer:
            assert root.handlers == [renderer._log_handler]
            logging.getLogger("doomtype.ui.controller").error("Could not generate a new prompt")
        assert root.handlers == before
        assert "Could not generate a new prompt" in console.file.getvalue()
