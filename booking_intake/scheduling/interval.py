"""
Appointment interval derivation.

Turns a calendar date, a slot label and a service duration into concrete
start/end datetimes. Slot labels come in 12-hour form (``"04:00 PM"``) but
a bare 24-hour ``"16:00"`` is accepted too.

Usage:
    interval = derive_interval(date(2025, 7, 10), "10:00 AM", 120)
    interval.end_label  # "12:00"
"""

import logging
import math
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import NamedTuple, Optional

from booking_intake.exceptions import PreconditionError
from booking_intake.utils import format_clock

logger = logging.getLogger(__name__)

_CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")
_MERIDIEMS = ("AM", "PM")


class SlotTime(NamedTuple):
    """Wall-clock time of a slot in 24-hour form."""
    hour: int
    minute: int


@dataclass(frozen=True)
class BookingInterval:
    """Derived appointment interval.

    ``end_label`` carries only the wall-clock end time. When the service
    runs past midnight the day change is visible through
    ``crosses_midnight`` and ``end`` but not through the label.
    """
    start_label: str
    end_label: str
    start: datetime
    end: datetime

    @property
    def crosses_midnight(self) -> bool:
        return self.end.date() != self.start.date()


def parse_slot_label(label: Optional[str]) -> SlotTime:
    """
    Parse ``"HH:MM"`` with an optional ``AM``/``PM`` designator.

    Raises:
        PreconditionError: If the label is empty or malformed.
    """
    if not label or not label.strip():
        raise PreconditionError("Time slot is missing")

    tokens = label.split()
    if len(tokens) > 2:
        raise PreconditionError(f"Unrecognised time slot: {label!r}")

    match = _CLOCK_PATTERN.match(tokens[0])
    if not match:
        raise PreconditionError(f"Unrecognised time slot: {label!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    if minute > 59:
        raise PreconditionError(f"Unrecognised time slot: {label!r}")

    if len(tokens) == 1:
        if hour > 23:
            raise PreconditionError(f"Unrecognised time slot: {label!r}")
        return SlotTime(hour, minute)

    meridiem = tokens[1].upper()
    if meridiem not in _MERIDIEMS or not 1 <= hour <= 12:
        raise PreconditionError(f"Unrecognised time slot: {label!r}")

    if meridiem == "PM" and hour < 12:
        hour += 12
    elif meridiem == "AM" and hour == 12:
        hour = 0
    return SlotTime(hour, minute)


def _check_duration(duration_minutes: Optional[float]) -> float:
    if (
        duration_minutes is None
        or isinstance(duration_minutes, bool)
        or not isinstance(duration_minutes, (int, float))
        or not math.isfinite(duration_minutes)
        or duration_minutes < 0
    ):
        raise PreconditionError(f"Invalid service duration: {duration_minutes!r}")
    return duration_minutes


def derive_interval(
    selected_date: date, slot_label: str, duration_minutes: Optional[float]
) -> BookingInterval:
    """
    Combine a date, a slot label and a duration into a booking interval.

    Args:
        selected_date: Calendar day of the appointment. A datetime's
            time-of-day is ignored.
        slot_label: Slot label, preserved verbatim as ``start_label``.
        duration_minutes: Service length; adding it may roll over
            hours and days.

    Raises:
        PreconditionError: On a malformed slot label, a duration that is
            missing, non-finite or negative, or an end past the last
            representable day.
    """
    duration = _check_duration(duration_minutes)
    slot = parse_slot_label(slot_label)

    day = selected_date.date() if isinstance(selected_date, datetime) else selected_date
    start = datetime.combine(day, time(slot.hour, slot.minute))
    try:
        end = start + timedelta(minutes=duration)
    except OverflowError as e:
        raise PreconditionError("Booking interval is out of range") from e

    interval = BookingInterval(
        start_label=slot_label,
        end_label=format_clock(end.hour, end.minute),
        start=start,
        end=end,
    )
    logger.debug(
        "Derived interval %s -> %s (%s min)",
        start.isoformat(), end.isoformat(), duration,
    )
    return interval
