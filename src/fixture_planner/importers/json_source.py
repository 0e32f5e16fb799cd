"""JSON team loaders for inline payloads and local files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from fixture_planner.errors import LoadError
from fixture_planner.importers.base import BaseTeamLoader, parse_teams
from fixture_planner.models.team import Team


class JsonTeamLoader(BaseTeamLoader):
    """Load teams from a JSON string, bytes, or an already decoded object."""

    source_name = "inline JSON"

    def __init__(self, payload: str | bytes | dict | list):
        self.payload = payload

    def load(self) -> list[Team]:
        data: Any = self.payload
        if isinstance(data, (str, bytes)):
            try:
                data = json.loads(data)
            except json.JSONDecodeError as exc:
                raise LoadError(f"Malformed {self.source_name}: {exc}", source=self.source_name) from exc
        return parse_teams(data, self.source_name)


class JsonFileLoader(BaseTeamLoader):
    """Load teams from a JSON file on disk."""

    source_name = "file"

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def describe(self) -> str:
        return str(self.path)

    def load(self) -> list[Team]:
        source = self.describe()
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as exc:
            raise LoadError(f"Teams file not found: {source}", source=source) from exc
        except OSError as exc:
            raise LoadError(f"Cannot read teams file {source}: {exc}", source=source) from exc
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise LoadError(f"Malformed JSON in {source}: {exc}", source=source) from exc
        return parse_teams(data, source)
