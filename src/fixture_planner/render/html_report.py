"""HTML schedule renderer.

Produces a self-contained fragment: one <h2> per circle, one <h3> and
table per round. Every team title and label is escaped.
"""

from __future__ import annotations

from collections.abc import Sequence
from html import escape

from fixture_planner.models.fixture import CircleGroup, RoundGroup
from fixture_planner.settings import ReportLabels, ScheduleSettings


def _round_table(round_group: RoundGroup, labels: ReportLabels, date_format: str) -> list[str]:
    date_text = escape(round_group.date.strftime(date_format))
    lines = [
        f"<h3>{escape(labels.round)} {round_group.round_number}</h3>",
        '<table border="1" cellpadding="5" cellspacing="0">',
        "<thead>",
        "<tr>",
        f"<th>{escape(labels.date)}</th>",
        f"<th>{escape(labels.home)}</th>",
        f"<th>{escape(labels.away)}</th>",
        "</tr>",
        "</thead>",
        "<tbody>",
    ]
    for match in round_group.matches:
        lines.extend([
            "<tr>",
            f"<td>{date_text}</td>",
            f"<td>{escape(match.home.title)}</td>",
            f"<td>{escape(match.away.title)}</td>",
            "</tr>",
        ])
    lines.extend(["</tbody>", "</table>"])

    if round_group.resting:
        names = ", ".join(escape(t.title) for t in round_group.resting)
        lines.append(f'<p class="resting">{escape(labels.resting)}: {names}</p>')

    lines.append("<br>")
    return lines


def render_html(
    circles: Sequence[CircleGroup],
    settings: ScheduleSettings | None = None,
) -> str:
    """Render formatted circles as an HTML fragment."""
    settings = settings or ScheduleSettings()
    labels = settings.labels

    lines = ['<div class="schedule">']
    for circle in circles:
        lines.append(f"<h2>{escape(labels.circle)} {circle.circle}</h2>")
        for round_group in circle.rounds:
            lines.extend(_round_table(round_group, labels, settings.date_format))
    lines.append("</div>")
    return "\n".join(lines)
