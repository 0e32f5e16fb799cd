"""Fixture generator — double round-robin scheduling for a league season.

Uses the circle method: slot N-1 stays fixed while the other N-1 slots
rotate one step per round, so every team meets every other team once per
circle. A per-slot home/away tracker flips after each fixture to keep
home and away games alternating for each team across rounds.
"""

from __future__ import annotations

import logging
import random
from collections import defaultdict
from collections.abc import Sequence

from fixture_planner.errors import InvalidInputError
from fixture_planner.models.fixture import Fixture
from fixture_planner.models.team import Team

logger = logging.getLogger(__name__)

HOME = "home"
AWAY = "away"
CIRCLES = (1, 2)


def _initial_sides(num_slots: int) -> list[str]:
    """Even slots start at home, odd slots away."""
    return [HOME if i % 2 == 0 else AWAY for i in range(num_slots)]


def _flip(side: str) -> str:
    return AWAY if side == HOME else HOME


def _pairing_indices(circle: int, round_idx: int, i: int, num_slots: int) -> tuple[int, int]:
    """Slot indices for the i-th pairing of a round.

    Pairing 0 always involves the fixed anchor slot (num_slots - 1).
    The return leg swaps the two indices.
    """
    rotating = num_slots - 1
    home_index = (round_idx + i) % rotating
    if i == 0:
        away_index = rotating
    else:
        away_index = (rotating - i + round_idx) % rotating

    if circle == 2:
        home_index, away_index = away_index, home_index
    return home_index, away_index


def generate_schedule(
    teams: Sequence[Team],
    shuffle: bool = True,
    rng: random.Random | None = None,
) -> list[Fixture]:
    """Generate a full double round-robin schedule.

    Args:
        teams: Teams entered into the league, in any order.
        shuffle: Randomize team order before generating fixtures.
        rng: Random source used for the shuffle. Pass a seeded
            ``random.Random`` for a reproducible schedule; defaults to the
            module-level generator.

    Returns:
        Fixtures ordered by circle, then round, then pairing. For an even
        team count that is N*(N-1) fixtures; for an odd count one team
        rests each round and the total is N*(N-1) as well.

    Raises:
        InvalidInputError: If fewer than 2 teams are given or a team is
            listed twice.
    """
    if len(teams) < 2:
        raise InvalidInputError(f"Need at least 2 teams, got {len(teams)}")
    if len(set(teams)) != len(teams):
        raise InvalidInputError("Team list contains duplicates")

    slots: list[Team | None] = list(teams)
    if shuffle:
        (rng or random).shuffle(slots)

    # Pad to an even number with a bye slot; its opponent rests that round
    if len(slots) % 2 != 0:
        slots.append(None)

    n = len(slots)
    sides = _initial_sides(n)
    schedule: list[Fixture] = []

    for circle in CIRCLES:
        for round_idx in range(n - 1):
            for i in range(n // 2):
                home_index, away_index = _pairing_indices(circle, round_idx, i, n)

                if sides[home_index] == HOME:
                    home, away = slots[home_index], slots[away_index]
                else:
                    home, away = slots[away_index], slots[home_index]

                sides[home_index] = _flip(sides[home_index])
                sides[away_index] = _flip(sides[away_index])

                if home is None or away is None:
                    continue
                schedule.append(
                    Fixture(home=home, away=away, round=round_idx + 1, circle=circle)
                )

    logger.info(
        "Generated %d fixtures for %d teams (%d rounds per circle)",
        len(schedule), len(teams), n - 1,
    )
    return schedule


def fixtures_by_round(schedule: Sequence[Fixture]) -> dict[tuple[int, int], list[Fixture]]:
    """Group fixtures by (circle, round), keeping their original order."""
    grouped: dict[tuple[int, int], list[Fixture]] = defaultdict(list)
    for fixture in schedule:
        grouped[(fixture.circle, fixture.round)].append(fixture)
    return dict(grouped)


def home_away_counts(schedule: Sequence[Fixture]) -> dict[Team, tuple[int, int]]:
    """Return (home games, away games) per team."""
    home: dict[Team, int] = defaultdict(int)
    away: dict[Team, int] = defaultdict(int)
    for fixture in schedule:
        home[fixture.home] += 1
        away[fixture.away] += 1
    return {team: (home[team], away[team]) for team in set(home) | set(away)}


def matches_per_season(num_teams: int) -> int:
    """Calculate total matches per team in a double round-robin."""
    return (num_teams - 1) * 2


def total_rounds(num_teams: int) -> int:
    """Rounds per circle, counting the bye round for odd team counts."""
    n = num_teams if num_teams % 2 == 0 else num_teams + 1
    return n - 1
