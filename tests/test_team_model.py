"""Tests for Team, Fixture, RoundGroup and CircleGroup models."""

from __future__ import annotations

import datetime as dt

import pytest
from pydantic import ValidationError

from fixture_planner.models import CircleGroup, Fixture, RoundGroup, Team


class TestTeam:
    def test_creation(self):
        t = Team(id=1, title="Liverpool")
        assert t.title == "Liverpool"
        assert t.id == 1
        assert t.code == "LIV"

    def test_explicit_code_kept(self):
        t = Team(title="Liverpool", code="lfc")
        assert t.code == "LFC"

    def test_id_optional(self):
        assert Team(title="Chelsea").id is None

    def test_string_id(self):
        assert Team(id="che", title="Chelsea").id == "che"

    def test_title_normalized(self):
        assert Team(title="  Stoke   City ").title == "Stoke City"

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            Team(title="")

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            Team(title="   ")

    def test_long_code_truncated(self):
        assert Team(title="Liverpool", code="liverpool").code == "LIVER"

    def test_blank_code_derived(self):
        assert Team(title="Liverpool", code="  ").code == "LIV"

    def test_frozen(self):
        t = Team(title="Liverpool")
        with pytest.raises(ValidationError):
            t.title = "Everton"

    def test_hashable_and_equal(self):
        assert Team(id=1, title="Fulham") == Team(id=1, title="Fulham")
        assert len({Team(id=1, title="Fulham"), Team(id=1, title="Fulham")}) == 1

    def test_str(self):
        assert str(Team(title="Burnley")) == "Burnley"


class TestFixture:
    @pytest.fixture
    def teams(self):
        return Team(id=1, title="Liverpool"), Team(id=2, title="Chelsea")

    def test_creation(self, teams):
        home, away = teams
        f = Fixture(home=home, away=away, round=1, circle=1)
        assert f.home == home
        assert f.involves(away)
        assert not f.involves(Team(title="Everton"))

    def test_pairing_ignores_side(self, teams):
        home, away = teams
        first = Fixture(home=home, away=away, round=1, circle=1)
        second = Fixture(home=away, away=home, round=1, circle=2)
        assert first.pairing == second.pairing

    def test_same_team_rejected(self, teams):
        home, _ = teams
        with pytest.raises(ValidationError):
            Fixture(home=home, away=home, round=1, circle=1)

    @pytest.mark.parametrize("circle", [0, 3])
    def test_circle_range(self, teams, circle):
        home, away = teams
        with pytest.raises(ValidationError):
            Fixture(home=home, away=away, round=1, circle=circle)

    def test_round_positive(self, teams):
        home, away = teams
        with pytest.raises(ValidationError):
            Fixture(home=home, away=away, round=0, circle=1)

    def test_str(self, teams):
        home, away = teams
        assert str(Fixture(home=home, away=away, round=2, circle=1)) == "1.2: Liverpool vs Chelsea"


class TestGroups:
    def test_circle_group_properties(self):
        home, away = Team(title="Leeds"), Team(title="Hull")
        rounds = [
            RoundGroup(
                round_number=i, matchday=i, date=dt.date(2025, 1, i),
                matches=[Fixture(home=home, away=away, round=i, circle=1)],
            )
            for i in (1, 2)
        ]
        group = CircleGroup(circle=1, rounds=rounds)
        assert group.match_count == 2
        assert group.last_date == dt.date(2025, 1, 2)

    def test_empty_circle_group(self):
        group = CircleGroup(circle=2)
        assert group.match_count == 0
        assert group.last_date is None
