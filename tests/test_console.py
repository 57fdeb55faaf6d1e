"""Tests for the console front end."""

import pytest

from focusring.__main__ import build_parser, format_time, render
from focusring.timer.engine import TimerSnapshot, TimerState
from focusring.timer.sequencer import SessionType


class TestFormatTime:

    @pytest.mark.parametrize("seconds, text", [
        (1500, "25:00"),
        (1430, "23:50"),
        (59, "00:59"),
        (0, "00:00"),
        (-4, "00:00"),
    ])
    def test_format(self, seconds, text):
        assert format_time(seconds) == text


class TestRender:

    def test_render_line(self):
        snap = TimerSnapshot(
            session_type=SessionType.SHORT_BREAK,
            timer_state=TimerState.RUNNING,
            time_left=150,
            completed_work_sessions=3,
            work_sessions_in_cycle=3,
            auto_advance=True,
            duration=300,
        )
        line = render(snap)
        assert line.startswith("Short Break")
        assert "02:30" in line
        assert "50%" in line
        assert "3 done" in line


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.settings is None
        assert args.no_auto_advance is False
        assert args.continuous is False

    def test_flags(self):
        args = build_parser().parse_args(
            ["--settings", "s.json", "--no-auto-advance", "--continuous", "-v"]
        )
        assert args.settings == "s.json"
        assert args.no_auto_advance is True
        assert args.continuous is True
        assert args.verbose is True
