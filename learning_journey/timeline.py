"""
Timeline and next-topic listings for the learning journey.

The selected member is always passed in by the caller; "all" shows
everyone.
"""

from logging import getLogger

from learning_journey.categories import get_category_class
from learning_journey.date_keys import (
    MalformedDateError,
    long_month_name,
    month_name,
    parse_date,
)
from learning_journey.learning_data import Suggestion, Topic, member_label

logger = getLogger(__name__)

ALL_MEMBERS = "all"


def filter_by_member(items: list, active_member: str = ALL_MEMBERS) -> list:
    """Keep only the items belonging to the active member."""
    if active_member == ALL_MEMBERS:
        return list(items)
    return [item for item in items if item.member == active_member]


def build_timeline(
    topics: list,
    members: dict,
    active_member: str = ALL_MEMBERS,
) -> list[dict]:
    """
    Build timeline entries, newest first.

    Args:
        topics: Topic models (or dicts in the JSON shape)
        members: Member id -> Member mapping
        active_member: Member id to show, or "all"

    Returns:
        List of dicts with:
        - date: topic date (YYYY-MM-DD)
        - display_date: short date such as "Feb 7"
        - title, category, member
        - category_class: style tag for the category
        - member_label: emoji and name of the member
    """
    topics = [t if isinstance(t, Topic) else Topic.model_validate(t) for t in topics]

    dated = []
    for topic in filter_by_member(topics, active_member):
        try:
            topic_date = parse_date(topic.date)
        except MalformedDateError as e:
            logger.warning("Skipping timeline topic %r: %s", topic.title, e)
            continue
        dated.append((topic_date, topic))

    # sort is stable, so topics on the same day keep their file order
    dated.sort(key=lambda pair: pair[0], reverse=True)

    return [
        {
            "date": topic.date,
            "display_date": f"{month_name(topic_date)} {topic_date.day}",
            "title": topic.title,
            "category": topic.category,
            "category_class": get_category_class(topic.category),
            "member": topic.member,
            "member_label": member_label(topic.member, members),
        }
        for topic_date, topic in dated
    ]


def build_next_topics(
    suggestions: list,
    members: dict,
    active_member: str = ALL_MEMBERS,
) -> list[dict]:
    """
    Build the suggested-next list for the active member.

    Args:
        suggestions: Suggestion models (or dicts in the JSON shape)
        members: Member id -> Member mapping
        active_member: Member id to show, or "all"

    Returns:
        List of dicts with title, summary (first sentence of the
        description), member and member_emoji
    """
    suggestions = [
        s if isinstance(s, Suggestion) else Suggestion.model_validate(s)
        for s in suggestions
    ]

    entries = []
    for suggestion in filter_by_member(suggestions, active_member):
        member = members.get(suggestion.member)
        entries.append({
            "title": suggestion.title,
            "summary": suggestion.description.split(".")[0].strip(),
            "member": suggestion.member,
            "member_emoji": member.emoji if member else "",
        })
    return entries


def format_start_date(started: str | None) -> str:
    """Format the journey start date as e.g. "February 2026", or "" if unusable."""
    if not started:
        return ""

    try:
        start = parse_date(started)
    except MalformedDateError as e:
        logger.warning("Ignoring start date: %s", e)
        return ""

    return f"{long_month_name(start)} {start.year}"
