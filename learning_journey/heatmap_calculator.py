"""
Heatmap calculator for the learning activity calendar.

Turns the sparse activity log into a dense, week-aligned grid of day
cells (Sunday to Saturday columns) with month labels anchored to the
column where each month first appears.
"""

import math
from dataclasses import dataclass

from learning_journey.activity_index import ActivityIndex
from learning_journey.date_keys import (
    DAY_NAMES,
    add_days,
    coerce_date,
    day_of_week,
    format_date,
    month_name,
    week_end,
    week_start,
)
from learning_journey.learning_data import member_label

DEFAULT_DAYS_BACK = 90
YEAR_DAYS_BACK = 363

# Extra days past the window that may still receive a month label
LABEL_PADDING_DAYS = 14

DAYS_PER_WEEK = 7


class InvalidWindowError(ValueError):
    """Raised when the requested window is not a positive number of days."""

    pass


@dataclass(frozen=True)
class HeatmapCell:
    """One calendar day in the heatmap."""

    date: str
    count: int
    topics: tuple[str, ...]
    members: tuple[str, ...]
    level: int
    is_future: bool

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "count": self.count,
            "topics": list(self.topics),
            "members": list(self.members),
            "level": self.level,
            "isFuture": self.is_future,
        }


@dataclass(frozen=True)
class MonthLabel:
    """Month name anchored to the grid column where that month starts."""

    column_index: int
    name: str


@dataclass(frozen=True)
class HeatmapGrid:
    """Cells in chronological order plus month labels."""

    cells: tuple[HeatmapCell, ...]
    months: tuple[MonthLabel, ...]
    total_columns: int
    start: str
    end: str

    def columns(self) -> list[tuple[HeatmapCell, ...]]:
        """Split the cells into weeks, Sunday first."""
        return [
            self.cells[i:i + DAYS_PER_WEEK]
            for i in range(0, len(self.cells), DAYS_PER_WEEK)
        ]

    def find(self, day) -> HeatmapCell | None:
        """Return the cell for a date or date key, if it's in the grid."""
        key = format_date(coerce_date(day))
        for cell in self.cells:
            if cell.date == key:
                return cell
        return None

    def to_dict(self) -> dict:
        return {
            "cells": [cell.to_dict() for cell in self.cells],
            "months": [
                {"columnIndex": label.column_index, "name": label.name}
                for label in self.months
            ],
            "totalColumns": self.total_columns,
            "start": self.start,
            "end": self.end,
        }


def build_heatmap(
    activity_log,
    today,
    days_back: int = DEFAULT_DAYS_BACK,
) -> HeatmapGrid:
    """
    Build the heatmap grid for a trailing window ending today.

    The window starts days_back days before today, rolled back to a
    Sunday, and ends on the Saturday on or after today, so the grid is
    always made of complete weeks.

    Args:
        activity_log: ActivityRecord models or dicts with 'date', 'count',
            'topics' and optional 'members'
        today: Reference date (date, datetime or YYYY-MM-DD string)
        days_back: Number of days to look back (default 90)

    Returns:
        HeatmapGrid with one cell per day and month labels

    Raises:
        InvalidWindowError: If days_back is not a positive integer
    """
    if isinstance(days_back, bool) or not isinstance(days_back, int) or days_back <= 0:
        raise InvalidWindowError(
            f"days_back must be a positive integer, got {days_back!r}"
        )

    today = coerce_date(today)
    index = ActivityIndex.from_records(activity_log)

    start_date = week_start(add_days(today, -days_back))
    end_date = week_end(today)
    label_cap = _label_cap(days_back)

    cells: list[HeatmapCell] = []
    months: list[MonthLabel] = []
    last_month = None

    current = start_date
    while current <= end_date:
        activity = index.get(current)

        month_key = (current.year, current.month)
        if month_key != last_month and len(cells) < label_cap:
            months.append(MonthLabel(
                column_index=len(cells) // DAYS_PER_WEEK,
                name=month_name(current),
            ))
            last_month = month_key

        cells.append(HeatmapCell(
            date=format_date(current),
            count=activity.count,
            topics=activity.topics,
            members=activity.members,
            level=calculate_level(activity.count),
            is_future=current > today,
        ))
        current = add_days(current, 1)

    return HeatmapGrid(
        cells=tuple(cells),
        months=tuple(months),
        total_columns=math.ceil(len(cells) / DAYS_PER_WEEK),
        start=format_date(start_date),
        end=format_date(end_date),
    )


def _label_cap(days_back: int) -> int:
    """Number of leading cells that may start a month label."""
    weeks = math.ceil((days_back + LABEL_PADDING_DAYS) / DAYS_PER_WEEK)
    return weeks * DAYS_PER_WEEK


def calculate_level(count: int) -> int:
    """
    Calculate intensity level for heatmap coloring.

    Args:
        count: Number of topics covered that day

    Returns:
        Level from 0-4:
            0: Nothing logged
            1: 1 topic
            2: 2 topics
            3: 3-4 topics
            4: 5+ topics

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count == 0:
        return 0
    elif count == 1:
        return 1
    elif count == 2:
        return 2
    elif count <= 4:
        return 3
    else:
        return 4


def describe_cell(cell: HeatmapCell, members: dict | None = None) -> list[str]:
    """
    Describe a day the way the heatmap hover text does.

    Args:
        cell: The heatmap cell
        members: Optional member id -> Member mapping for display names

    Returns:
        Lines of text: the count and date, up to three topics, and who
        was learning that day
    """
    day = coerce_date(cell.date)
    plural = "topic" if cell.count == 1 else "topics"
    when = f"{DAY_NAMES[day_of_week(day)]}, {month_name(day)} {day.day}, {day.year}"
    lines = [f"{cell.count} {plural} on {when}"]

    if cell.topics:
        lines.append(", ".join(cell.topics[:3]))

    if cell.members:
        lines.append(", ".join(member_label(m, members or {}) for m in cell.members))

    return lines
