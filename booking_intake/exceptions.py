"""Booking intake exceptions.

Field validation problems are not exceptions; they travel as the
field-keyed error dict returned by the form validator.
"""

from typing import Optional


class BookingIntakeError(Exception):
    """Base exception for booking intake errors."""


class PreconditionError(BookingIntakeError):
    """Raised when a submission cannot be built from otherwise valid input.

    Covers a service missing from the catalog, a malformed service duration
    and an unparseable time-slot label.
    """


class TransportError(BookingIntakeError):
    """Raised when the booking service call fails (network, timeout, non-2xx)."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        server_message: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.server_message = server_message

    @property
    def display_message(self) -> str:
        """Most specific message available: server, then transport."""
        return self.server_message or self.message
