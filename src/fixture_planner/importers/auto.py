"""Pick a team loader from a source string."""

from __future__ import annotations

from pathlib import Path

from fixture_planner.importers.base import BaseTeamLoader
from fixture_planner.importers.json_source import JsonFileLoader, JsonTeamLoader
from fixture_planner.importers.url import UrlTeamLoader
from fixture_planner.models.team import Team


def loader_for(source: str | Path) -> BaseTeamLoader:
    """Return the loader for a URL, an existing file, or inline JSON."""
    if isinstance(source, Path):
        return JsonFileLoader(source)

    text = source.strip()
    if text.startswith(("http://", "https://")):
        return UrlTeamLoader(text)
    if text.startswith(("{", "[")):
        return JsonTeamLoader(text)
    return JsonFileLoader(text)


def load_teams(source: str | Path) -> list[Team]:
    """Load teams from any supported source; raises LoadError on failure."""
    return loader_for(source).load()
