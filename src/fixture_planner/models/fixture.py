"""Fixture and schedule grouping models for fixture-planner."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fixture_planner.models.team import Team


class Fixture(BaseModel):
    """A single scheduled match. Produced by the generator, never mutated."""
    model_config = ConfigDict(frozen=True)

    home: Team
    away: Team
    round: int = Field(ge=1, description="Round number within the circle")
    circle: int = Field(ge=1, le=2, description="1 = first leg, 2 = return leg")

    @model_validator(mode="after")
    def teams_must_differ(self) -> "Fixture":
        if self.home == self.away:
            raise ValueError(f"{self.home.title} cannot play itself")
        return self

    @property
    def pairing(self) -> frozenset[Team]:
        """Unordered pair of teams, ignoring home/away."""
        return frozenset((self.home, self.away))

    def involves(self, team: Team) -> bool:
        return team == self.home or team == self.away

    def __str__(self) -> str:
        return f"{self.circle}.{self.round}: {self.home.title} vs {self.away.title}"


class RoundGroup(BaseModel):
    """All fixtures of one round, with the date the round is played."""
    model_config = ConfigDict(frozen=True)

    round_number: int = Field(ge=1, description="Round number within the circle")
    matchday: int = Field(ge=1, description="Round position across the whole season")
    date: dt.date
    matches: list[Fixture] = Field(default_factory=list)
    resting: list[Team] = Field(default_factory=list, description="Teams without a match")


class CircleGroup(BaseModel):
    """One leg of the season: its rounds in ascending order."""
    model_config = ConfigDict(frozen=True)

    circle: int = Field(ge=1, le=2)
    rounds: list[RoundGroup] = Field(default_factory=list)

    @property
    def match_count(self) -> int:
        return sum(len(r.matches) for r in self.rounds)

    @property
    def last_date(self) -> dt.date | None:
        return self.rounds[-1].date if self.rounds else None
