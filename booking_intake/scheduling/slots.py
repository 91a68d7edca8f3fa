"""Fixed catalog of bookable time slots for a business day."""

# Business hours, inclusive on both ends
BUSINESS_OPEN_HOUR = 9
BUSINESS_CLOSE_HOUR = 17
SLOT_STEP_HOURS = 1

AM = "AM"
PM = "PM"


def format_slot_label(hour: int) -> str:
    """Render a whole 24-hour clock hour as a 12-hour slot label.

    Examples:
        >>> format_slot_label(9)
        '09:00 AM'
        >>> format_slot_label(12)
        '12:00 PM'
        >>> format_slot_label(17)
        '05:00 PM'
    """
    display_hour = hour % 12 or 12
    meridiem = AM if hour < 12 else PM
    return f"{display_hour:02d}:00 {meridiem}"


def generate_time_slots() -> list[str]:
    """Return the ordered slot labels offered every day, ``09:00 AM`` to ``05:00 PM``."""
    return [
        format_slot_label(hour)
        for hour in range(BUSINESS_OPEN_HOUR, BUSINESS_CLOSE_HOUR + 1, SLOT_STEP_HOURS)
    ]
