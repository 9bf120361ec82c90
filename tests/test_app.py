"""Tests for doomtype.app – start-up failures and logging setup."""

from __future__ import annotations

import io
import logging

import pytest

from doomtype import app as app_module
from doomtype.core.errors import PromptError
from doomtype.core.settings import Settings


class TestRunStartupFailures:
    def test_prompt_provider_failure_exits_non_zero(self, qapp, monkeypatch, caplog):
        def broken(*_args, **_kwargs):
            raise PromptError("Word list not found: /nowhere/words.yaml")

        monkeypatch.setattr(app_module, "WordRepository", broken)
        with caplog.at_level(logging.ERROR, logger="doomtype"):
            assert app_module.run(Settings(input_guard_ms=0)) == 1
        assert "Error starting doomtype" in caplog.text

    def test_non_terminal_stdin_exits_non_zero(self, qapp, monkeypatch):
        monkeypatch.setattr(app_module.sys, "stdin", io.StringIO())
        assert app_module.run(Settings(input_guard_ms=0)) == 1

    def test_main_raises_system_exit(self, monkeypatch):
        monkeypatch.setattr(app_module, "run", lambda: 0)
        with pytest.raises(SystemExit) as excinfo:
            app_module.main()
        assert excinfo.value.code == 0


class TestInterruptHandler:
    def test_wakeup_timer_running(self, qapp, monkeypatch):
        installed = {}
        monkeypatch.setattr(app_module.signal, "signal", lambda sig, handler: installed.setdefault(sig, handler))
        wakeup = app_module.install_interrupt_handler(qapp)
        try:
            assert wakeup.isActive()
            assert app_module.signal.SIGINT in installed
        finally:
            wakeup.stop()
