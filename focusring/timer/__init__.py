"""Timer package."""

from .engine import (
    TimerEngine,
    TimerState,
    TimerSnapshot,
)
from .sequencer import (
    Advance,
    SessionType,
    DEFAULT_DURATIONS,
    SESSION_LABELS,
    SESSIONS_BEFORE_LONG_BREAK,
    plan_next,
)

__all__ = [
    "TimerEngine",
    "TimerState",
    "TimerSnapshot",
    "Advance",
    "SessionType",
    "DEFAULT_DURATIONS",
    "SESSION_LABELS",
    "SESSIONS_BEFORE_LONG_BREAK",
    "plan_next",
]
