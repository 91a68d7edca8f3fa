from booking_intake.scheduling.availability import AvailabilityFilter
from booking_intake.scheduling.interval import (
    BookingInterval,
    SlotTime,
    derive_interval,
    parse_slot_label,
)
from booking_intake.scheduling.slots import generate_time_slots

__all__ = [
    "AvailabilityFilter",
    "BookingInterval",
    "SlotTime",
    "derive_interval",
    "parse_slot_label",
    "generate_time_slots",
]
