"""Allow running FocusRing as a module: python -m focusring.

A minimal console view over :class:`~focusring.timer.TimerEngine`:
one countdown line per second, a terminal bell when a session ends.
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys

from PyQt6.QtCore import QCoreApplication, QTimer

from .settings import SettingsError, load_settings
from .timer import TimerEngine, TimerSnapshot, TimerState


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("focusring")


def format_time(seconds: int) -> str:
    """``MM:SS`` for a countdown display."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def render(snapshot: TimerSnapshot) -> str:
    return (
        f"{snapshot.label:<11} {format_time(snapshot.time_left)}  "
        f"{snapshot.progress:4.0%}  "
        f"[{snapshot.work_sessions_in_cycle} in cycle, "
        f"{snapshot.completed_work_sessions} done]"
    )


def bell() -> None:
    print("\a", end="", flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="focusring", description="Pomodoro timer")
    parser.add_argument("--settings", metavar="PATH", help="JSON settings file")
    parser.add_argument(
        "--no-auto-advance", action="store_true",
        help="stay on a finished session instead of switching to the next one",
    )
    parser.add_argument(
        "--continuous", action="store_true",
        help="start each session as soon as it is switched to",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logger = setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        settings = load_settings(args.settings)
    except SettingsError as exc:
        logger.error("Invalid settings: %s", exc)
        sys.exit(2)

    app = QCoreApplication(sys.argv[:1])
    app.setApplicationName("FocusRing")

    engine = TimerEngine(
        settings=settings,
        notify=bell,
        auto_advance=False if args.no_auto_advance else None,
    )
    engine.snapshot_changed.connect(lambda snap: print(render(snap), flush=True))
    if args.continuous:
        engine.session_changed.connect(lambda _session: engine.start())

    def quit_app(*_args) -> None:
        engine.shutdown()
        app.quit()

    signal.signal(signal.SIGINT, quit_app)
    signal.signal(signal.SIGTERM, quit_app)
    # Let the interpreter see signals while Qt's loop is running.
    heartbeat = QTimer()
    heartbeat.timeout.connect(lambda: None)
    heartbeat.start(250)

    engine.start()
    logger.info("FocusRing ready! Ctrl+C to quit.")

    status = app.exec()
    if engine.state != TimerState.IDLE:
        logger.info("Stopped at %s", format_time(engine.remaining))
    sys.exit(status)


if __name__ == "__main__":
    main()
