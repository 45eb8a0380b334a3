"""
learning-journey: calendar heatmap, timeline and next topics for a
family learning log.
"""

from learning_journey.activity_index import ActivityIndex, DayActivity
from learning_journey.categories import get_category_class
from learning_journey.date_keys import MalformedDateError, add_days, format_date, parse_date
from learning_journey.heatmap_calculator import (
    HeatmapCell,
    HeatmapGrid,
    InvalidWindowError,
    MonthLabel,
    build_heatmap,
    calculate_level,
)

__version__ = "0.1.0"
