"""Runtime validation helpers for the schedule CLI."""

from __future__ import annotations

import importlib.util
import sys
from collections.abc import Sequence

MIN_PYTHON = (3, 10)
REQUIRED_MODULES = ("pydantic", "requests", "unidecode")
INSTALL_HINT = 'Install the project with `python -m pip install -e ".[dev]"`.'


def missing_modules(modules: Sequence[str] = REQUIRED_MODULES) -> list[str]:
    """Names of modules that cannot be imported, sorted."""
    return sorted(m for m in modules if importlib.util.find_spec(m) is None)


def validate_runtime(
    min_python: tuple[int, int] = MIN_PYTHON,
    required_modules: Sequence[str] = REQUIRED_MODULES,
    python_version: tuple[int, int] | None = None,
) -> None:
    """Raise RuntimeError if the interpreter is too old or a dependency is missing."""
    current = python_version or sys.version_info[:2]
    if current < min_python:
        wanted = ".".join(map(str, min_python))
        found = ".".join(map(str, current))
        raise RuntimeError(
            f"fixture-planner requires Python >={wanted}, found {found}. {INSTALL_HINT}"
        )

    missing = missing_modules(required_modules)
    if missing:
        raise RuntimeError(f"Missing required Python modules: {', '.join(missing)}. {INSTALL_HINT}")
