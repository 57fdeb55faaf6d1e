"""FocusRing: a Pomodoro timer engine."""

__version__ = "0.1.0"
