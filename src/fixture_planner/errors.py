"""Exception hierarchy for fixture-planner.

Callers catch ``FixturePlannerError`` to handle every failure raised by
the package; the subclasses name which stage failed.
"""

from __future__ import annotations


class FixturePlannerError(Exception):
    """Base class for all fixture-planner errors."""


class InvalidInputError(FixturePlannerError, ValueError):
    """Schedule generation was given a team list it cannot pair up."""


class LoadError(FixturePlannerError):
    """A team source could not be read, fetched or parsed."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


class ConfigError(FixturePlannerError):
    """The schedule settings file is malformed."""
