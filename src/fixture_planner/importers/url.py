"""URL team loader — fetches the team list over HTTP(S) with requests."""

from __future__ import annotations

import logging

import requests

from fixture_planner.errors import LoadError
from fixture_planner.importers.base import BaseTeamLoader, parse_teams
from fixture_planner.models.team import Team

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class UrlTeamLoader(BaseTeamLoader):
    """Fetch a JSON team list from a URL.

    Args:
        url: HTTP(S) address of the JSON document.
        session: Optional requests.Session (or compatible object) used to
            make the request; a plain ``requests.get`` is used otherwise.
        timeout: Request timeout in seconds.
    """

    source_name = "url"

    def __init__(
        self,
        url: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.url = url
        self.session = session
        self.timeout = timeout

    def describe(self) -> str:
        return self.url

    def load(self) -> list[Team]:
        getter = self.session.get if self.session is not None else requests.get
        logger.info("Fetching teams from %s", self.url)
        try:
            response = getter(self.url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.JSONDecodeError as exc:
            raise LoadError(f"Malformed JSON from {self.url}: {exc}", source=self.url) from exc
        except requests.RequestException as exc:
            raise LoadError(f"Cannot fetch teams from {self.url}: {exc}", source=self.url) from exc
        except ValueError as exc:
            raise LoadError(f"Malformed JSON from {self.url}: {exc}", source=self.url) from exc
        return parse_teams(data, self.url)
