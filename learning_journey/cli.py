"""
CLI display functions for learning-journey.
"""

from learning_journey.date_keys import DAY_NAMES
from learning_journey.heatmap_calculator import HeatmapGrid

# One glyph per intensity level, 0-4
LEVEL_GLYPHS = ["·", "░", "▒", "▓", "█"]
FUTURE_GLYPH = " "

CELL_WIDTH = 2
ROW_LABEL_WIDTH = 4


def format_month_header(grid: HeatmapGrid) -> str:
    """
    Build the month label row above the heatmap.

    Each label starts over its anchor column. A label that would overlap
    the previous one is dropped.

    Args:
        grid: Heatmap grid from build_heatmap()

    Returns:
        Header line, without trailing spaces
    """
    width = grid.total_columns * CELL_WIDTH
    header = [" "] * width
    next_free = 0

    for label in grid.months:
        position = label.column_index * CELL_WIDTH
        if position < next_free:
            continue
        for offset, char in enumerate(label.name):
            if position + offset < width:
                header[position + offset] = char
        next_free = position + len(label.name) + 1

    return (" " * ROW_LABEL_WIDTH + "".join(header)).rstrip()


def format_heatmap_rows(grid: HeatmapGrid) -> list[str]:
    """
    Render the grid as seven weekday rows, Sunday first.

    Args:
        grid: Heatmap grid from build_heatmap()

    Returns:
        One string per weekday
    """
    weeks = grid.columns()
    rows = []
    for weekday in range(7):
        row = f"{DAY_NAMES[weekday]:<{ROW_LABEL_WIDTH}}"
        for week in weeks:
            cell = week[weekday]
            glyph = FUTURE_GLYPH if cell.is_future else LEVEL_GLYPHS[cell.level]
            row += glyph.ljust(CELL_WIDTH)
        rows.append(row.rstrip())
    return rows


def display_heatmap(grid: HeatmapGrid) -> None:
    """Display the activity heatmap with month labels and a legend."""
    print("🗓️  Learning Activity:")
    print(format_month_header(grid))
    for row in format_heatmap_rows(grid):
        print(row)
    print(f"    Less {' '.join(LEVEL_GLYPHS)} More")
    print()


def display_cell(lines: list[str]) -> None:
    """Display the description of a single day."""
    for line in lines:
        print(f"   {line}")
    print()


def display_start_date(started: str) -> None:
    """Display when the learning journey began."""
    if started:
        print(f"🌱 Learning since {started}")
        print()


def display_timeline(entries: list[dict], show_member: bool = True) -> None:
    """
    Display timeline entries.

    Args:
        entries: List from build_timeline()
        show_member: Whether to include the member column (off when a
            single member is selected)
    """
    print("📚 Timeline:")
    if not entries:
        print("   No topics yet.")
        print()
        return

    for entry in entries:
        line = f"   {entry['display_date']:<7} {entry['title']:<40} [{entry['category']}]"
        if show_member:
            line += f"  {entry['member_label']}"
        print(line)
    print()


def display_next_topics(entries: list[dict], show_member: bool = True) -> None:
    """
    Display the suggested next topics.

    Args:
        entries: List from build_next_topics()
        show_member: Whether to show each member's emoji
    """
    print("🔭 Up Next:")
    if not entries:
        print("   Nothing suggested yet.")
        print()
        return

    for entry in entries:
        line = f"   {entry['title']}"
        if entry["summary"]:
            line += f" - {entry['summary']}"
        if show_member and entry["member_emoji"]:
            line += f" {entry['member_emoji']}"
        print(line)
    print()
