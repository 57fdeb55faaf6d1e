"""Tests for settings loading and validation."""

import json

import pytest

from focusring.settings import DEFAULT_SETTINGS, Settings, SettingsError, load_settings


class TestLoadSettings:

    def test_no_path_gives_defaults(self):
        assert load_settings() == DEFAULT_SETTINGS
        assert DEFAULT_SETTINGS.auto_advance is True
        assert DEFAULT_SETTINGS.settle_delay_ms == 1000
        assert DEFAULT_SETTINGS.tick_interval_ms == 1000

    def test_file_overrides(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"work_duration": 600, "auto_advance": False}))

        s = load_settings(path)
        assert s.work_duration == 600
        assert s.auto_advance is False
        assert s.short_break_duration == 300

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"sound_volume": 70, "long_break_duration": 1200}))

        s = load_settings(path)
        assert s.long_break_duration == 1200

    def test_missing_file_gives_defaults(self, tmp_path, caplog):
        assert load_settings(tmp_path / "nope.json") == DEFAULT_SETTINGS
        assert "using defaults" in caplog.text

    def test_malformed_json_gives_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        assert load_settings(path) == DEFAULT_SETTINGS

    def test_non_object_gives_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2, 3]")
        assert load_settings(path) == DEFAULT_SETTINGS

    def test_invalid_value_raises(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"work_duration": 0}))
        with pytest.raises(SettingsError):
            load_settings(path)


class TestValidate:

    @pytest.mark.parametrize("kwargs", [
        {"work_duration": -1},
        {"short_break_duration": 0},
        {"long_break_duration": "15"},
        {"sessions_before_long_break": 0},
        {"tick_interval_ms": 0},
        {"settle_delay_ms": -5},
        {"sessions_before_long_break": "4"},
        {"tick_interval_ms": "1000"},
        {"settle_delay_ms": 1.5},
        {"work_duration": True},
        {"short_break_duration": False},
        {"auto_advance": "yes"},
        {"auto_advance": 1},
    ])
    def test_rejects(self, kwargs):
        with pytest.raises(SettingsError):
            Settings(**kwargs).validate()

    def test_settings_error_is_value_error(self):
        assert issubclass(SettingsError, ValueError)

    def test_zero_settle_delay_allowed(self):
        assert Settings(settle_delay_ms=0).validate().settle_delay_ms == 0

    def test_settings_are_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_SETTINGS.work_duration = 1

    def test_wrong_typed_file_value_raises_settings_error(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"sessions_before_long_break": "4"}))
        with pytest.raises(SettingsError, match="sessions_before_long_break"):
            load_settings(path)
