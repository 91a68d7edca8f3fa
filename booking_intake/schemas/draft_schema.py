"""Per-form booking draft state."""

from dataclasses import dataclass, fields
from datetime import date
from typing import Optional


@dataclass
class BookingDraft:
    """
    Mutable booking form state for one form session.

    Created empty, edited field by field, cleared after a successful
    submission. A failed submission leaves it untouched for correction.
    """
    name: str = ""
    email: str = ""
    phone: str = ""
    selected_service: str = ""
    selected_date: Optional[date] = None
    selected_time: str = ""
    occasion: str = ""
    notes: str = ""

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def clear(self) -> None:
        """Reset every field to its empty value."""
        for f in fields(self):
            setattr(self, f.name, f.default)

    def is_empty(self) -> bool:
        return self == BookingDraft()
