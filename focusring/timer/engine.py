"""Timer state machine for FocusRing.

States
------
IDLE      Not counting down: waiting for start, or a session just ended.
RUNNING   Countdown active; the one-second driver is ticking.
PAUSED    Countdown frozen at the remaining time.

Transitions
-----------
IDLE → RUNNING                 (start)
RUNNING → PAUSED               (pause)
PAUSED → RUNNING               (resume)
RUNNING | PAUSED | IDLE → IDLE (reset)
RUNNING → IDLE                 (countdown reaches 0)

On completion the sequencer decides the next session.  With auto-advance
on, the switch happens after a short settle delay so the finished
session's 00:00 stays on screen for a moment.  Switching never starts
the clock; whoever renders the timer decides whether to call ``start``.

Intents that aren't legal in the current state are silently ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from ..settings import DEFAULT_SETTINGS, Settings
from .sequencer import SESSION_LABELS, SessionType, plan_next

logger = logging.getLogger(__name__)


# ── state ─────────────────────────────────────────────────────────────────


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass(frozen=True)
class TimerSnapshot:
    """Everything a view needs to render the timer."""

    session_type: SessionType
    timer_state: TimerState
    time_left: int
    completed_work_sessions: int
    work_sessions_in_cycle: int
    auto_advance: bool
    duration: int

    def __post_init__(self) -> None:
        if not 0 <= self.time_left <= self.duration:
            raise ValueError(
                f"time_left {self.time_left} outside 0..{self.duration}"
            )

    @property
    def label(self) -> str:
        return SESSION_LABELS[self.session_type]

    @property
    def progress(self) -> float:
        """0.0 → 1.0 progress through the current session."""
        if self.duration <= 0:
            return 0.0
        elapsed = self.duration - self.time_left
        return max(0.0, min(1.0, elapsed / self.duration))


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based Pomodoro timer.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted every second while running, and once with 0 on completion.
    state_changed(new_state: TimerState)
        Emitted on every state transition.
    session_changed(session_type: SessionType)
        Emitted when the session type is switched (manually or by
        auto-advance).  The new session is IDLE at full duration.
    session_completed(session_type: SessionType)
        Emitted when a countdown reaches zero.
    snapshot_changed(snapshot: TimerSnapshot)
        Emitted after every mutation.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    session_changed = pyqtSignal(object)
    session_completed = pyqtSignal(object)
    snapshot_changed = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        settings: Settings | None = None,
        notify: Callable[[], None] | None = None,
        auto_advance: bool | None = None,
    ) -> None:
        super().__init__(parent)
        settings = (settings or DEFAULT_SETTINGS).validate()

        # ── configuration (fixed for the engine's lifetime) ───────────
        self._durations: dict[SessionType, int] = {
            SessionType.WORK: settings.work_duration,
            SessionType.SHORT_BREAK: settings.short_break_duration,
            SessionType.LONG_BREAK: settings.long_break_duration,
        }
        self._threshold: int = settings.sessions_before_long_break
        self._notify = notify

        # ── session / cycle state ─────────────────────────────────────
        self._state: TimerState = TimerState.IDLE
        self._session_type: SessionType = SessionType.WORK
        self._remaining: int = self._durations[SessionType.WORK]
        self._completed_work: int = 0
        self._work_in_cycle: int = 0
        self._auto_advance: bool = (
            settings.auto_advance if auto_advance is None else auto_advance
        )
        self._pending: SessionType | None = None

        # ── Qt timers ─────────────────────────────────────────────────
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(settings.tick_interval_ms)
        self._qt_timer.timeout.connect(self._on_tick)

        self._settle_timer = QTimer(self)
        self._settle_timer.setSingleShot(True)
        self._settle_timer.setInterval(settings.settle_delay_ms)
        self._settle_timer.timeout.connect(self._on_settle)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def session_type(self) -> SessionType:
        return self._session_type

    @property
    def remaining(self) -> int:
        """Seconds left on the clock."""
        return self._remaining

    @property
    def total_duration(self) -> int:
        return self._durations[self._session_type]

    @property
    def percent_complete(self) -> float:
        return self.snapshot().progress

    @property
    def completed_work_sessions(self) -> int:
        """Lifetime count of finished work sessions."""
        return self._completed_work

    @property
    def work_sessions_in_cycle(self) -> int:
        return self._work_in_cycle

    @property
    def sessions_before_long_break(self) -> int:
        return self._threshold

    @property
    def is_running(self) -> bool:
        return self._state == TimerState.RUNNING

    @property
    def advance_pending(self) -> bool:
        """True while an auto-advance switch is waiting out the settle delay."""
        return self._pending is not None

    @property
    def auto_advance(self) -> bool:
        return self._auto_advance

    @auto_advance.setter
    def auto_advance(self, value: bool) -> None:
        self.set_auto_advance(value)

    def duration_for(self, session_type: SessionType) -> int:
        return self._durations[session_type]

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            session_type=self._session_type,
            timer_state=self._state,
            time_left=self._remaining,
            completed_work_sessions=self._completed_work,
            work_sessions_in_cycle=self._work_in_cycle,
            auto_advance=self._auto_advance,
            duration=self._durations[self._session_type],
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Run the current session.  Only valid from IDLE.

        A session that already ran out (auto-advance off) starts over
        at its full duration.
        """
        if self._state != TimerState.IDLE:
            logger.debug("start ignored while %s", self._state.value)
            return
        self._cancel_pending_advance()
        if self._remaining <= 0:
            self._remaining = self._durations[self._session_type]
        self._run()

    def pause(self) -> None:
        """Freeze the countdown.  Only valid while RUNNING."""
        if self._state != TimerState.RUNNING:
            logger.debug("pause ignored while %s", self._state.value)
            return
        self._qt_timer.stop()
        self._set_state(TimerState.PAUSED)

    def resume(self) -> None:
        """Continue from the preserved remaining time.  Only valid while PAUSED."""
        if self._state != TimerState.PAUSED:
            logger.debug("resume ignored while %s", self._state.value)
            return
        self._run()

    def toggle_pause(self) -> None:
        """The single start/pause button."""
        if self._state == TimerState.RUNNING:
            self.pause()
        elif self._state == TimerState.PAUSED:
            self.resume()
        else:
            self.start()

    def reset(self) -> None:
        """Stop and refill the current session.  Counters are kept."""
        self._qt_timer.stop()
        self._cancel_pending_advance()
        self._remaining = self._durations[self._session_type]
        self._set_state(TimerState.IDLE)

    def select_session(self, session_type: SessionType) -> None:
        """Switch to *session_type*.  Only valid from IDLE."""
        if self._state != TimerState.IDLE:
            logger.debug(
                "select_session(%s) ignored while %s",
                session_type.value, self._state.value,
            )
            return
        self._cancel_pending_advance()
        self._switch_to(session_type)

    def set_auto_advance(self, flag: bool) -> None:
        """Doesn't touch the countdown or an already scheduled switch."""
        self._auto_advance = bool(flag)
        self._emit_snapshot()

    def shutdown(self) -> None:
        """Stop every timer.  Call before dropping the engine."""
        self._qt_timer.stop()
        self._settle_timer.stop()
        self._pending = None

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _run(self) -> None:
        self._state = TimerState.RUNNING
        # QTimer.start() on an active timer restarts it; never run two.
        if not self._qt_timer.isActive():
            self._qt_timer.start()
        self.state_changed.emit(TimerState.RUNNING)
        self._emit_snapshot()

    def _on_tick(self) -> None:
        if self._state != TimerState.RUNNING:
            # late delivery after pause/reset
            self._qt_timer.stop()
            return

        if self._remaining > 1:
            self._remaining -= 1
            self.tick.emit(self._remaining)
            self._emit_snapshot()
            return

        self._finish_session()

    def _finish_session(self) -> None:
        # All fields settle before any signal goes out: slots may call
        # back into the engine.
        self._qt_timer.stop()
        completed = self._session_type
        self._remaining = 0
        self._state = TimerState.IDLE

        # ── cycle bookkeeping ─────────────────────────────────────────
        advance = plan_next(completed, self._work_in_cycle, self._threshold)
        if advance.work_completed:
            self._completed_work += 1
        self._work_in_cycle = advance.work_sessions_in_cycle
        logger.info(
            "%s complete (total work sessions %d, cycle %d/%d), next: %s",
            SESSION_LABELS[completed], self._completed_work,
            self._work_in_cycle, self._threshold,
            SESSION_LABELS[advance.next_session],
        )

        # ── auto-advance or wait for the user ─────────────────────────
        if self._auto_advance:
            self._pending = advance.next_session
            self._settle_timer.start()

        self.tick.emit(0)
        self.state_changed.emit(TimerState.IDLE)
        self._emit_snapshot()
        self._notify_completion(completed)

    def _notify_completion(self, completed: SessionType) -> None:
        self.session_completed.emit(completed)
        if self._notify is None:
            return
        try:
            self._notify()
        except Exception:
            logger.exception("Completion notifier failed")

    def _on_settle(self) -> None:
        self._settle_timer.stop()
        target, self._pending = self._pending, None
        if target is None:
            return
        logger.info("Auto-advancing to %s", SESSION_LABELS[target])
        self._switch_to(target)

    def _cancel_pending_advance(self) -> None:
        if self._pending is not None:
            logger.debug("Pending switch to %s cancelled", self._pending.value)
        self._settle_timer.stop()
        self._pending = None

    def _switch_to(self, session_type: SessionType) -> None:
        self._session_type = session_type
        self._remaining = self._durations[session_type]
        self._state = TimerState.IDLE
        self.state_changed.emit(TimerState.IDLE)
        self._emit_snapshot()
        # last, so a slot that starts the new session isn't overwritten
        self.session_changed.emit(session_type)

    def _set_state(self, new_state: TimerState) -> None:
        self._state = new_state
        self.state_changed.emit(new_state)
        self._emit_snapshot()

    def _emit_snapshot(self) -> None:
        self.snapshot_changed.emit(self.snapshot())
