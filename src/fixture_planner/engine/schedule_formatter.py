"""Schedule formatter — groups raw fixtures into circles and dated rounds.

Date policy: round r of the first circle is played r intervals after the
anchor date. The second circle resumes one circle gap after the last
first-circle round, then again advances one interval per round.
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Sequence

from fixture_planner.engine.fixture_generator import fixtures_by_round
from fixture_planner.models.fixture import CircleGroup, Fixture, RoundGroup
from fixture_planner.models.team import Team
from fixture_planner.settings import ScheduleSettings

logger = logging.getLogger(__name__)


def round_date(
    circle_start: dt.date, round_number: int, interval_days: int = 7,
) -> dt.date:
    """Date of a round counted from the start of its circle."""
    return circle_start + dt.timedelta(days=interval_days * round_number)


def _teams_in_order(schedule: Sequence[Fixture]) -> list[Team]:
    """Every team in the schedule, in order of first appearance."""
    seen: dict[Team, None] = {}
    for fixture in schedule:
        seen.setdefault(fixture.home)
        seen.setdefault(fixture.away)
    return list(seen)


def format_schedule(
    schedule: Sequence[Fixture],
    start_date: dt.date | None = None,
    settings: ScheduleSettings | None = None,
) -> list[CircleGroup]:
    """Group fixtures into circles of dated rounds.

    Args:
        schedule: Fixtures as produced by ``generate_schedule``.
        start_date: Anchor date. Overrides ``settings.start_date``.
        settings: Date policy. Defaults to ``ScheduleSettings()``.

    Returns:
        One CircleGroup per circle, ascending, each holding its rounds in
        ascending order with round numbers restarting at 1.
    """
    settings = settings or ScheduleSettings()
    anchor = start_date or settings.start_date
    interval = settings.round_interval_days

    all_teams = _teams_in_order(schedule)
    grouped = fixtures_by_round(schedule)

    circles: list[CircleGroup] = []
    circle_start = anchor
    matchday = 0

    for circle in sorted({c for c, _ in grouped}):
        round_keys = sorted(r for c, r in grouped if c == circle)
        if circles:
            previous_last = circles[-1].last_date or anchor
            circle_start = previous_last + dt.timedelta(days=settings.circle_gap_days)

        rounds: list[RoundGroup] = []
        for round_number in round_keys:
            matches = grouped[(circle, round_number)]
            playing = {t for m in matches for t in (m.home, m.away)}
            matchday += 1
            rounds.append(
                RoundGroup(
                    round_number=round_number,
                    matchday=matchday,
                    date=round_date(circle_start, round_number, interval),
                    matches=list(matches),
                    resting=[t for t in all_teams if t not in playing],
                )
            )

        circles.append(CircleGroup(circle=circle, rounds=rounds))
        logger.debug(
            "Circle %d: %d rounds, %s to %s",
            circle, len(rounds),
            rounds[0].date if rounds else None,
            rounds[-1].date if rounds else None,
        )

    return circles
