"""
learning-journey: a family learning activity heatmap

Entry point for the application.
"""

import argparse
import json
from datetime import date

from learning_journey.cli import (
    display_cell,
    display_heatmap,
    display_next_topics,
    display_start_date,
    display_timeline,
)
from learning_journey.config import LEARNING_DATA_PATH, get_days_back, validate_config
from learning_journey.date_keys import MalformedDateError, coerce_date
from learning_journey.heatmap_calculator import InvalidWindowError, build_heatmap, describe_cell
from learning_journey.learning_data import LearningDataError, load_learning_data
from learning_journey.timeline import (
    ALL_MEMBERS,
    build_next_topics,
    build_timeline,
    format_start_date,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="learning-journey",
        description="Show the family learning heatmap, timeline and next topics.",
    )
    parser.add_argument("--data", help="Path to learning.json (default: LEARNING_DATA_PATH)")
    parser.add_argument("--days-back", type=int, help="Days of history to show (default: HEATMAP_DAYS_BACK)")
    parser.add_argument("--today", help="Override today's date (YYYY-MM-DD)")
    parser.add_argument("--member", default=ALL_MEMBERS, help="Member id to show, or 'all'")
    parser.add_argument("--day", help="Describe a single day in the heatmap (YYYY-MM-DD)")
    parser.add_argument("--json", action="store_true", help="Print the computed views as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Validate configuration
    try:
        validate_config(check_days_back=args.days_back is None)
    except ValueError as e:
        print(f"\nConfiguration Error:\n{e}")
        return 1

    data_path = args.data or LEARNING_DATA_PATH
    days_back = args.days_back if args.days_back is not None else get_days_back()

    try:
        data = load_learning_data(data_path)
        today = coerce_date(args.today) if args.today else date.today()
        day = coerce_date(args.day) if args.day else None
        grid = build_heatmap(data.activity_log, today, days_back)
    except (LearningDataError, MalformedDateError, InvalidWindowError) as e:
        print(f"\nError: {e}")
        return 1

    started = format_start_date(data.started)
    members = data.member_lookup()
    timeline = build_timeline(data.topics, members, args.member)
    next_topics = build_next_topics(data.suggested_next, members, args.member)
    show_member = args.member == ALL_MEMBERS

    if args.json:
        print(json.dumps({
            "started": started,
            "heatmap": grid.to_dict(),
            "timeline": timeline,
            "next": next_topics,
        }, indent=2, ensure_ascii=False))
        return 0

    display_start_date(started)
    display_heatmap(grid)

    if day is not None:
        cell = grid.find(day)
        if cell is None:
            print(f"   {args.day} is outside the heatmap window.\n")
        else:
            display_cell(describe_cell(cell, members))

    display_timeline(timeline, show_member)
    display_next_topics(next_topics, show_member)

    return 0


if __name__ == "__main__":
    exit(main())
