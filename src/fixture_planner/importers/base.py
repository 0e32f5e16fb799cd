"""Base team loader — abstract provider for the league's team list.

Every loader turns its source into the same payload shape and hands it to
``parse_teams``, so the schedule generator never sees malformed data:

    {"teams": [{"id": 1, "title": "Liverpool"}, ...]}

A bare list of team objects is accepted as well.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, TypedDict

from pydantic import ValidationError

from fixture_planner.errors import LoadError
from fixture_planner.models.team import Team

logger = logging.getLogger(__name__)


class RawTeamRecord(TypedDict, total=False):
    """Team entry as it appears in source JSON."""
    id: int | str
    title: str
    code: str


def parse_teams(payload: Any, source: str) -> list[Team]:
    """Validate a decoded payload into an ordered list of teams.

    Raises:
        LoadError: If the payload has no team list or an entry is invalid.
    """
    if isinstance(payload, dict):
        if "teams" not in payload:
            raise LoadError(f"No 'teams' key in {source}", source=source)
        records: list[RawTeamRecord] = payload["teams"]
    else:
        records = payload

    if not isinstance(records, list):
        raise LoadError(f"'teams' in {source} must be a list", source=source)

    teams: list[Team] = []
    for idx, record in enumerate(records):
        if not isinstance(record, dict):
            raise LoadError(f"Team #{idx} in {source} is not an object", source=source)
        if "title" not in record:
            raise LoadError(f"Team #{idx} in {source} has no 'title'", source=source)
        try:
            teams.append(Team.model_validate(record))
        except ValidationError as exc:
            raise LoadError(f"Team #{idx} in {source} is invalid: {exc}", source=source) from exc

    logger.debug("Parsed %d teams from %s", len(teams), source)
    return teams


class BaseTeamLoader(ABC):
    """Abstract base for all team sources.

    Subclasses implement load() and fail with LoadError for anything that
    goes wrong: unreadable source, malformed JSON, missing fields.
    """

    source_name: str = "unknown"

    @abstractmethod
    def load(self) -> list[Team]:
        """Load the ordered team list from the source."""
        ...

    def describe(self) -> str:
        return self.source_name
