"""Schedule settings: round dates, date format and report labels.

Loads settings from config/schedule.json. A missing file means defaults;
the FIXTURE_PLANNER_START_DATE environment variable overrides the anchor
date from the file.
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from fixture_planner.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path(__file__).parent.parent.parent / "config" / "schedule.json"
START_DATE_ENV = "FIXTURE_PLANNER_START_DATE"


class ReportLabels(BaseModel):
    """Headings used by the HTML and text renderers."""
    circle: str = "Circle"
    round: str = "Round"
    date: str = "Date"
    home: str = "Home"
    away: str = "Away"
    resting: str = "Rest"


class ScheduleSettings(BaseModel):
    """Date policy and presentation settings for a schedule run."""
    start_date: dt.date = Field(
        default=dt.date(2024, 11, 23),
        description="Anchor date; round 1 of the first circle is one interval later",
    )
    round_interval_days: int = Field(default=7, ge=1, description="Days between rounds")
    circle_gap_days: int = Field(
        default=7, ge=0, description="Extra days between the two circles",
    )
    date_format: str = Field(default="%d %B %Y", description="strftime format for round dates")
    labels: ReportLabels = Field(default_factory=ReportLabels)

    def with_start_date(self, start_date: dt.date) -> "ScheduleSettings":
        return self.model_copy(update={"start_date": start_date})


def parse_date(value: str) -> dt.date:
    """Parse an ISO date (YYYY-MM-DD), raising ConfigError on bad input."""
    try:
        return dt.date.fromisoformat(value.strip())
    except ValueError as exc:
        raise ConfigError(f"Invalid date {value!r}, expected YYYY-MM-DD") from exc


def load_settings(path: str | Path | None = None) -> ScheduleSettings:
    """Load schedule settings from JSON.

    Args:
        path: Settings file. Defaults to config/schedule.json; a missing
            file yields the built-in defaults.

    Returns:
        ScheduleSettings with the environment override applied.

    Raises:
        ConfigError: If the file cannot be read, is not valid UTF-8 JSON, or
            fails validation.
    """
    settings_path = Path(path) if path else DEFAULT_SETTINGS_PATH

    if settings_path.exists():
        try:
            with open(settings_path, encoding="utf-8") as f:
                raw = json.load(f)
            settings = ScheduleSettings.model_validate(raw)
        except OSError as exc:
            raise ConfigError(f"Cannot read settings file {settings_path}: {exc}") from exc
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as exc:
            raise ConfigError(f"Invalid settings file {settings_path}: {exc}") from exc
        logger.debug("Loaded schedule settings from %s", settings_path)
    else:
        logger.debug("No settings file at %s, using defaults", settings_path)
        settings = ScheduleSettings()

    env_start = os.environ.get(START_DATE_ENV)
    if env_start:
        settings = settings.with_start_date(parse_date(env_start))
        logger.debug("Start date overridden by %s: %s", START_DATE_ENV, settings.start_date)

    return settings
