"""Model exports for fixture-planner."""

from fixture_planner.models.fixture import CircleGroup, Fixture, RoundGroup
from fixture_planner.models.team import Team

__all__ = [
    "CircleGroup",
    "Fixture",
    "RoundGroup",
    "Team",
]
