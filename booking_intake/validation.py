"""
Booking form validation.

Every rule runs on every pass, so one call reports all problems at once.
The result maps draft field names to messages; an empty dict means the
draft can be submitted.

Usage:
    errors = validate_draft(draft)
    if not errors:
        ...  # derive the interval and submit
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional

from booking_intake.schemas.draft_schema import BookingDraft
from booking_intake.utils import is_blank

logger = logging.getLogger(__name__)

OCCASION_TYPES: tuple[str, ...] = (
    "Birthday",
    "Anniversary",
    "Engagement",
    "Family Gathering",
    "Corporate",
    "Other",
)

# One "@", no whitespace anywhere, a dot inside the domain part
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def _check_name(draft: BookingDraft) -> Optional[str]:
    if is_blank(draft.name):
        return "Name is required"
    return None


def _check_email(draft: BookingDraft) -> Optional[str]:
    if is_blank(draft.email):
        return "Email is required"
    if not EMAIL_PATTERN.fullmatch(draft.email.strip()):
        return "Email is invalid"
    return None


def _check_phone(draft: BookingDraft) -> Optional[str]:
    if is_blank(draft.phone):
        return "Phone number is required"
    return None


def _check_service(draft: BookingDraft) -> Optional[str]:
    if is_blank(draft.selected_service):
        return "Please select a service"
    return None


def _check_date(draft: BookingDraft) -> Optional[str]:
    if draft.selected_date is None:
        return "Please select a date"
    return None


def _check_time(draft: BookingDraft) -> Optional[str]:
    if is_blank(draft.selected_time):
        return "Please select a time slot"
    return None


def _check_occasion(draft: BookingDraft) -> Optional[str]:
    if is_blank(draft.occasion):
        return "Please select an occasion type"
    if draft.occasion not in OCCASION_TYPES:
        return "Please select a valid occasion type"
    return None


@dataclass(frozen=True)
class FieldRule:
    """Validation rule bound to one draft field."""

    field_name: str
    check: Callable[[BookingDraft], Optional[str]]


FIELD_RULES: list[FieldRule] = [
    FieldRule("name", _check_name),
    FieldRule("email", _check_email),
    FieldRule("phone", _check_phone),
    FieldRule("selected_service", _check_service),
    FieldRule("selected_date", _check_date),
    FieldRule("selected_time", _check_time),
    FieldRule("occasion", _check_occasion),
]


def validate_draft(draft: BookingDraft) -> dict[str, str]:
    """Run every field rule and collect the failures by field name."""
    errors: dict[str, str] = {}
    for rule in FIELD_RULES:
        message = rule.check(draft)
        if message:
            errors[rule.field_name] = message
    if errors:
        logger.debug("Draft failed validation on: %s", ", ".join(errors))
    return errors
