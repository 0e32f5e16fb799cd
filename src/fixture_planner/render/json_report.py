"""JSON schedule renderer for other tools."""

from __future__ import annotations

import json
from collections.abc import Sequence

from fixture_planner.models.fixture import CircleGroup


def render_json(circles: Sequence[CircleGroup], indent: int | None = 2) -> str:
    """Serialize formatted circles; dates are ISO strings."""
    payload = {"circles": [c.model_dump(mode="json") for c in circles]}
    return json.dumps(payload, ensure_ascii=False, indent=indent)
