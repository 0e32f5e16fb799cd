#!/usr/bin/env python3
"""generate_schedule.py — Build a double round-robin season schedule.

Usage:
    python scripts/generate_schedule.py
    python scripts/generate_schedule.py --teams data/teams.json --format text
    python scripts/generate_schedule.py --teams https://example.com/teams.json --seed 7
    python scripts/generate_schedule.py --start-date 2025-08-16 --output schedule.html

Environment Variables:
    FIXTURE_PLANNER_START_DATE   Anchor date (YYYY-MM-DD), overrides config
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT_DIR / "src"))

from fixture_planner.utils.runtime import validate_runtime  # noqa: E402

logger = logging.getLogger("schedule")

DEFAULT_TEAMS = ROOT_DIR / "data" / "teams.json"
DEFAULT_CONFIG = ROOT_DIR / "config" / "schedule.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="fixture-planner — Double round-robin schedule")
    parser.add_argument(
        "--teams", default=str(DEFAULT_TEAMS),
        help="Team source: JSON file, http(s) URL, or inline JSON (default: data/teams.json)",
    )
    parser.add_argument("--config", default=str(DEFAULT_CONFIG), help="Path to schedule.json")
    parser.add_argument("--start-date", help="Anchor date YYYY-MM-DD (overrides config)")
    parser.add_argument("--seed", type=int, help="Seed for the team shuffle")
    parser.add_argument("--no-shuffle", action="store_true", help="Keep the input team order")
    parser.add_argument(
        "--format", choices=("html", "text", "json"), default="html",
        help="Output format (default: html)",
    )
    parser.add_argument("--output", "-o", help="Write to this file instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        stream=sys.stderr,
    )

    try:
        validate_runtime()
    except RuntimeError as exc:
        logger.error(str(exc))
        return 1

    from fixture_planner.engine.fixture_generator import generate_schedule
    from fixture_planner.engine.schedule_formatter import format_schedule
    from fixture_planner.errors import FixturePlannerError
    from fixture_planner.importers.auto import load_teams
    from fixture_planner.render.html_report import render_html
    from fixture_planner.render.json_report import render_json
    from fixture_planner.render.text_report import render_text
    from fixture_planner.settings import load_settings, parse_date

    try:
        settings = load_settings(args.config)
        if args.start_date:
            settings = settings.with_start_date(parse_date(args.start_date))

        teams = load_teams(args.teams)
        logger.info("Loaded %d teams", len(teams))

        rng = random.Random(args.seed) if args.seed is not None else None
        schedule = generate_schedule(teams, shuffle=not args.no_shuffle, rng=rng)
        circles = format_schedule(schedule, settings=settings)
    except FixturePlannerError as exc:
        logger.error(str(exc))
        return 1

    if args.format == "text":
        rendered = render_text(circles, settings)
    elif args.format == "json":
        rendered = render_json(circles)
    else:
        rendered = render_html(circles, settings)

    if args.output:
        try:
            Path(args.output).write_text(rendered + "\n", encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot write schedule to %s: %s", args.output, exc)
            return 1
        logger.info("Schedule written to %s", args.output)
    else:
        sys.stdout.write(rendered + "\n")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
