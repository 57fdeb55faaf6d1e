"""Session sequencing: which session follows which.

Work → short break → work → ... → 4th work → long break → work.

The decision is pure; :class:`~focusring.timer.engine.TimerEngine`
applies it (immediately for the bookkeeping, after the settle delay for
the session switch).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SessionType(Enum):
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_DURATIONS: dict[SessionType, int] = {
    SessionType.WORK: 25 * 60,
    SessionType.SHORT_BREAK: 5 * 60,
    SessionType.LONG_BREAK: 15 * 60,
}

SESSION_LABELS: dict[SessionType, str] = {
    SessionType.WORK: "Work",
    SessionType.SHORT_BREAK: "Short Break",
    SessionType.LONG_BREAK: "Long Break",
}

SESSIONS_BEFORE_LONG_BREAK = 4


@dataclass(frozen=True)
class Advance:
    """Outcome of a finished session."""

    next_session: SessionType
    work_sessions_in_cycle: int
    work_completed: bool


def plan_next(
    completed: SessionType,
    work_sessions_in_cycle: int,
    threshold: int = SESSIONS_BEFORE_LONG_BREAK,
) -> Advance:
    """Decide the session after *completed*.

    The threshold check uses the count *after* counting a finished work
    session, so the 4th work session of a cycle earns the long break.
    The cycle counter wraps to 0 at that point and never reaches
    *threshold*.
    """
    if completed != SessionType.WORK:
        return Advance(SessionType.WORK, work_sessions_in_cycle, False)

    count = max(0, work_sessions_in_cycle) + 1
    if count >= threshold:
        return Advance(SessionType.LONG_BREAK, 0, True)
    return Advance(SessionType.SHORT_BREAK, count, True)
