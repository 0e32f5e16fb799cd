"""Plain-text schedule renderer for terminal output."""

from __future__ import annotations

from collections.abc import Sequence

from fixture_planner.models.fixture import CircleGroup
from fixture_planner.settings import ScheduleSettings

RULE_WIDTH = 60


def render_text(
    circles: Sequence[CircleGroup],
    settings: ScheduleSettings | None = None,
) -> str:
    """Render formatted circles as fixed-width text blocks."""
    settings = settings or ScheduleSettings()
    labels = settings.labels

    width = max(
        [len(labels.home)]
        + [len(m.home.title) for c in circles for r in c.rounds for m in r.matches]
    )

    lines: list[str] = []
    for circle in circles:
        lines.append("=" * RULE_WIDTH)
        lines.append(f"  {labels.circle} {circle.circle}")
        lines.append("=" * RULE_WIDTH)
        for round_group in circle.rounds:
            date_text = round_group.date.strftime(settings.date_format)
            lines.append(f"  {labels.round} {round_group.round_number} ({date_text})")
            lines.append("  " + "-" * (RULE_WIDTH - 2))
            lines.append(f"  {labels.home:<{width}}   {labels.away}")
            for match in round_group.matches:
                lines.append(f"  {match.home.title:<{width}} - {match.away.title}")
            if round_group.resting:
                names = ", ".join(t.title for t in round_group.resting)
                lines.append(f"  {labels.resting}: {names}")
            lines.append("")
    return "\n".join(lines)
