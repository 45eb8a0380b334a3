"""
Date-keyed lookup of daily learning activity.
"""

from dataclasses import dataclass
from logging import getLogger

from learning_journey.date_keys import MalformedDateError, coerce_date, format_date, parse_date
from learning_journey.learning_data import ActivityRecord

logger = getLogger(__name__)


@dataclass(frozen=True)
class DayActivity:
    """Activity resolved for a single day."""

    count: int = 0
    topics: tuple[str, ...] = ()
    members: tuple[str, ...] = ()


EMPTY_DAY = DayActivity()


class ActivityIndex:
    """Maps date keys to the activity logged for that day."""

    def __init__(self, days: dict[str, DayActivity] | None = None):
        self._days = dict(days or {})

    @classmethod
    def from_records(cls, records) -> "ActivityIndex":
        """
        Build an index from activity records.

        Records whose date doesn't parse are skipped with a warning so one
        bad entry doesn't blank the whole heatmap. When several records
        share a date, the later one wins.

        Args:
            records: ActivityRecord models or plain dicts in the JSON shape

        Returns:
            ActivityIndex over the valid records
        """
        days: dict[str, DayActivity] = {}

        for position, record in enumerate(records):
            if not isinstance(record, ActivityRecord):
                record = ActivityRecord.model_validate(record)

            try:
                key = format_date(parse_date(record.date))
            except MalformedDateError as e:
                logger.warning("Skipping activity record %d: %s", position, e)
                continue

            days[key] = DayActivity(
                count=record.count,
                topics=tuple(record.topics),
                # Member ids are a set; keep first-seen order for display
                members=tuple(dict.fromkeys(record.members)),
            )

        return cls(days)

    def lookup(self, key) -> DayActivity | None:
        """Activity for a date or date key, or None if nothing was logged."""
        return self._days.get(_as_key(key))

    def get(self, key) -> DayActivity:
        """Activity for a date or date key, empty if nothing was logged."""
        return self._days.get(_as_key(key), EMPTY_DAY)

    def __contains__(self, key) -> bool:
        return _as_key(key) in self._days

    def __len__(self) -> int:
        return len(self._days)


def _as_key(value) -> str:
    return format_date(coerce_date(value))
