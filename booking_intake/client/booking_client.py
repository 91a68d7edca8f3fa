"""HTTP client for the remote booking service."""

import logging
from typing import Any, Optional

import httpx

from booking_intake.client.credentials import CredentialProvider, StaticCredentialProvider
from booking_intake.config import settings
from booking_intake.exceptions import TransportError
from booking_intake.schemas.booking_schema import BookingReply, BookingRequest

logger = logging.getLogger(__name__)

BOOKINGS_PATH = "/bookings"


def _message_from(body: Any) -> Optional[str]:
    """Pull a non-empty ``message`` string out of a decoded JSON body."""
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return None


def _decode(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


class BookingClient:
    """Posts booking requests, attaching a bearer token when one is available."""

    def __init__(
        self,
        credentials: Optional[CredentialProvider] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._credentials = credentials or StaticCredentialProvider()
        self._base_url = base_url or settings.api.base_url
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout or settings.api.timeout_sec,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "BookingClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _auth_headers(self) -> dict[str, str]:
        token = self._credentials.current_token()
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    async def create_booking(self, request: BookingRequest) -> BookingReply:
        """
        Submit a booking request.

        Returns:
            The parsed reply; ``message`` is None when the service sent none.

        Raises:
            TransportError: On network failure, timeout or a non-2xx status.
                ``server_message`` holds the service's own error message
                when the body carried one.
        """
        try:
            response = await self._client.post(
                BOOKINGS_PATH, json=request.to_payload(), headers=self._auth_headers()
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            server_message = _message_from(_decode(e.response))
            logger.warning(
                "Booking service rejected request: HTTP %s (%s)",
                e.response.status_code, server_message or "no message",
            )
            raise TransportError(
                str(e),
                status_code=e.response.status_code,
                server_message=server_message,
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Booking service unreachable: %r", e)
            raise TransportError(str(e)) from e

        body = _decode(response)
        extra = body if isinstance(body, dict) else {}
        reply = BookingReply.model_validate({**extra, "message": _message_from(body)})
        logger.info("Booking accepted by service (HTTP %s)", response.status_code)
        return reply
