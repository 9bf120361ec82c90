"""Tests for doomtype.ui.models – the session view-model."""

from __future__ import annotations

from doomtype.core.session import Phase, SessionState
from doomtype.ui.models import (
    STATUS_IDLE,
    STATUS_IN_PROGRESS,
    CharStatus,
    SessionView,
    build_cells,
)


# ===========================================================================
# build_cells
# ===========================================================================

class TestBuildCells:
    def test_idle_cursor_on_first_char(self):
        cells = build_cells(SessionState(target="ab"))
        assert [c.status for c in cells] == [CharStatus.CURRENT, CharStatus.UNTYPED]

    def test_correct_incorrect_and_cursor(self):
        cells = build_cells(SessionState(target="abcd", typed="ax", start_time=0.0))
        assert [c.status for c in cells] == [
            CharStatus.CORRECT,
            CharStatus.INCORRECT,
            CharStatus.CURRENT,
            CharStatus.UNTYPED,
        ]
        assert "".join(c.char for c in cells) == "abcd"

    def test_no_cursor_when_finished(self):
        cells = build_cells(SessionState(target="ab", typed="ab", start_time=0.0, end_time=1.0))
        assert CharStatus.CURRENT not in {c.status for c in cells}


# ===========================================================================
# SessionView.build
# ===========================================================================

class TestSessionView:
    def test_idle(self):
        view = SessionView.build(SessionState(target="hi"), now=0.0)
        assert view.phase is Phase.IDLE
        assert view.status == STATUS_IDLE
        assert dict(view.stats) == {
            "Timer": "0.0s",
            "Speed": "0.0 WPM",
            "Accuracy": "100%",
            "Position": "1 / 2",
            "Current": "h",
        }

    def test_in_progress(self):
        state = SessionState(target="cat dog", typed="cat", start_time=1000.0)
        view = SessionView.build(state, now=3000.0)
        assert view.status == STATUS_IN_PROGRESS
        stats = dict(view.stats)
        assert stats["Timer"] == "2.0s"
        assert stats["Position"] == "4 / 7"
        assert stats["Current"] == "space"

    def test_finished(self):
        state = SessionState(target="hi", typed="hx", start_time=0.0, end_time=1500.0)
        view = SessionView.build(state, now=9999.0)
        assert view.phase is Phase.FINISHED
        assert view.status == "All done in 1.5s. Press Ctrl+R for a new prompt."
        stats = dict(view.stats)
        assert stats["Accuracy"] == "50%"
        assert stats["Current"] == "done"

    def test_stat_order(self):
        view = SessionView.build(SessionState(target="hi"), now=0.0)
        assert [label for label, _ in view.stats] == ["Timer", "Speed", "Accuracy", "Position", "Current"]
