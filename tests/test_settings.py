"""Tests for schedule settings loading and overrides."""

from __future__ import annotations

import datetime as dt
import json
from pathlib import Path

import pytest

from fixture_planner.errors import ConfigError
from fixture_planner.settings import (
    DEFAULT_SETTINGS_PATH,
    START_DATE_ENV,
    ScheduleSettings,
    load_settings,
    parse_date,
)


@pytest.fixture(autouse=True)
def clear_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(START_DATE_ENV, raising=False)


class TestDefaults:
    def test_defaults(self):
        s = ScheduleSettings()
        assert s.start_date == dt.date(2024, 11, 23)
        assert s.round_interval_days == 7
        assert s.circle_gap_days == 7
        assert s.date_format == "%d %B %Y"
        assert s.labels.home == "Home"

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        assert load_settings(tmp_path / "absent.json") == ScheduleSettings()

    def test_repo_config_loads(self):
        settings = load_settings(DEFAULT_SETTINGS_PATH)
        assert settings.start_date == dt.date(2024, 11, 23)


class TestLoadSettings:
    def test_file_values(self, tmp_path: Path):
        path = tmp_path / "schedule.json"
        path.write_text(json.dumps({
            "start_date": "2025-08-16",
            "round_interval_days": 14,
            "labels": {"round": "Matchweek"},
        }))
        s = load_settings(path)
        assert s.start_date == dt.date(2025, 8, 16)
        assert s.round_interval_days == 14
        assert s.labels.round == "Matchweek"
        assert s.labels.home == "Home"

    def test_malformed_json(self, tmp_path: Path):
        path = tmp_path / "schedule.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_non_utf8_file(self, tmp_path: Path):
        path = tmp_path / "schedule.json"
        path.write_bytes(b'{"date_format": "\xff\xfe"}')
        with pytest.raises(ConfigError, match="Invalid settings"):
            load_settings(path)

    def test_unreadable_path(self, tmp_path: Path):
        # A directory exists but cannot be opened as a file
        with pytest.raises(ConfigError, match="Cannot read"):
            load_settings(tmp_path)

    def test_invalid_values(self, tmp_path: Path):
        path = tmp_path / "schedule.json"
        path.write_text(json.dumps({"round_interval_days": 0}))
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(START_DATE_ENV, "2026-01-03")
        s = load_settings(tmp_path / "absent.json")
        assert s.start_date == dt.date(2026, 1, 3)

    def test_bad_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(START_DATE_ENV, "03/01/2026")
        with pytest.raises(ConfigError):
            load_settings(tmp_path / "absent.json")


class TestParseDate:
    def test_iso(self):
        assert parse_date(" 2024-11-23 ") == dt.date(2024, 11, 23)

    def test_invalid(self):
        with pytest.raises(ConfigError, match="YYYY-MM-DD"):
            parse_date("tomorrow")
