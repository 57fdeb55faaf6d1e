"""Timer configuration for FocusRing.

The defaults are the classic Pomodoro constants.  A JSON file can
override them at startup (``python -m focusring --settings path``);
once an engine is built from a ``Settings`` the values are fixed for
its lifetime.

Example file::

    {
      "work_duration": 1500,
      "short_break_duration": 300,
      "auto_advance": false
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)


class SettingsError(ValueError):
    """A settings value is out of range."""


@dataclass(frozen=True)
class Settings:
    """All timer constants."""

    # ── durations (seconds) ───────────────────────────────────────────
    work_duration: int = 25 * 60
    short_break_duration: int = 5 * 60
    long_break_duration: int = 15 * 60

    # ── cycle ─────────────────────────────────────────────────────────
    sessions_before_long_break: int = 4
    auto_advance: bool = True

    # ── clock (milliseconds) ──────────────────────────────────────────
    settle_delay_ms: int = 1000
    tick_interval_ms: int = 1000

    def validate(self) -> Settings:
        """Raise :class:`SettingsError` on any wrong-typed or out-of-range value."""
        minimums = {
            "work_duration": 1,
            "short_break_duration": 1,
            "long_break_duration": 1,
            "sessions_before_long_break": 1,
            "tick_interval_ms": 1,
            "settle_delay_ms": 0,
        }
        for name, minimum in minimums.items():
            value = getattr(self, name)
            # bool is an int subclass; true/false in JSON isn't a number here
            if not isinstance(value, int) or isinstance(value, bool):
                raise SettingsError(f"{name} must be an integer, got {value!r}")
            if value < minimum:
                raise SettingsError(f"{name} must be >= {minimum}, got {value!r}")
        if not isinstance(self.auto_advance, bool):
            raise SettingsError(
                f"auto_advance must be true or false, got {self.auto_advance!r}"
            )
        return self


DEFAULT_SETTINGS = Settings()


def load_settings(path: Path | str | None = None) -> Settings:
    """Load settings from a JSON file, falling back to defaults.

    Unknown keys are ignored.  A file that can't be read or parsed
    yields the defaults; a file with out-of-range values raises
    :class:`SettingsError`.
    """
    if path is None:
        return DEFAULT_SETTINGS

    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read settings from %s (%s); using defaults", path, exc)
        return DEFAULT_SETTINGS

    if not isinstance(data, dict):
        logger.warning("Settings file %s is not a JSON object; using defaults", path)
        return DEFAULT_SETTINGS

    # Only use keys that exist in the dataclass
    valid_keys = {f.name for f in fields(Settings)}
    ignored = sorted(set(data) - valid_keys)
    if ignored:
        logger.debug("Ignoring unknown settings keys: %s", ", ".join(ignored))
    filtered = {k: v for k, v in data.items() if k in valid_keys}
    return Settings(**filtered).validate()
