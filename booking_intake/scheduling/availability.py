"""
Calendar date bookability.

The date picker renders the calendar; this module only answers whether a
given day can be chosen. A day is blocked when it is in the past or when it
appears in the static exclusion list.
"""

import logging
from datetime import date, datetime
from typing import Callable, Iterable, Optional, Union

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


def _as_date(value: DateLike) -> date:
    """Drop the time-of-day from a datetime; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


class AvailabilityFilter:
    """Decides whether a calendar date may be selected."""

    def __init__(
        self,
        unavailable_dates: Iterable[DateLike],
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self._excluded: frozenset[date] = frozenset(_as_date(d) for d in unavailable_dates)
        self._today = today or date.today

    @property
    def min_selectable(self) -> date:
        """Earliest selectable day; today is selectable."""
        return self._today()

    @property
    def unavailable_dates(self) -> list[date]:
        return sorted(self._excluded)

    def is_excluded(self, value: DateLike) -> bool:
        """True when the day (year, month, day) is on the exclusion list."""
        return _as_date(value) in self._excluded

    def is_past(self, value: DateLike) -> bool:
        return _as_date(value) < self.min_selectable

    def is_selectable(self, value: DateLike) -> bool:
        """True when the day is neither past nor excluded."""
        day = _as_date(value)
        selectable = not self.is_past(day) and not self.is_excluded(day)
        if not selectable:
            logger.debug("Date %s is not selectable", day.isoformat())
        return selectable
