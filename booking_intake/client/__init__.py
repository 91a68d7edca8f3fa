from booking_intake.client.booking_client import BookingClient
from booking_intake.client.credentials import (
    CredentialProvider,
    SessionFileCredentialProvider,
    StaticCredentialProvider,
)

__all__ = [
    "BookingClient",
    "CredentialProvider",
    "SessionFileCredentialProvider",
    "StaticCredentialProvider",
]
