"""Booking request and response wire models."""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class BookingRequest(BaseModel):
    """Payload sent to ``POST /bookings``.

    Python attribute names are snake_case; the JSON names are the remote
    service's camelCase field names.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    email: str
    phone: str
    service_id: str = Field(alias="serviceId")
    booking_date: date = Field(alias="bookingDate")
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    occasion: str
    notes: str = ""

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready body with wire field names and an ISO booking date."""
        return self.model_dump(mode="json", by_alias=True)


class BookingReply(BaseModel):
    """Successful booking service response."""
    model_config = ConfigDict(extra="allow")

    message: Optional[str] = None
