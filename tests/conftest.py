"""Shared test fixtures and helpers."""

import json
from datetime import date
from typing import Optional

import httpx
import pytest

from booking_intake.catalog import SERVICE_CATALOG
from booking_intake.client.booking_client import BookingClient
from booking_intake.client.credentials import StaticCredentialProvider
from booking_intake.controller.state_machine import SubmissionStateMachine
from booking_intake.controller.submission import BookingSubmissionController
from booking_intake.scheduling.availability import AvailabilityFilter
from booking_intake.schemas.draft_schema import BookingDraft
from booking_intake.schemas.service_schema import Service

TODAY = date(2025, 7, 15)
EXCLUDED = [date(2025, 7, 20), date(2025, 7, 25), date(2025, 8, 1)]

SVC1 = Service(id="svc1", name="Portrait Session", price=15000, duration_minutes=120)
BROKEN_SVC = Service(id="broken", name="Mystery Shoot", price=1000, duration_minutes=None)


class RecordingBackend:
    """MockTransport handler that records requests and replays a canned response."""

    def __init__(self, status_code: int = 201, body: Optional[object] = None) -> None:
        self.status_code = status_code
        self.body = {"message": "Booking created"} if body is None else body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=str(self.body))

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


def make_client(
    backend: RecordingBackend, token: Optional[str] = None
) -> BookingClient:
    """Booking client wired to an in-memory backend."""
    return BookingClient(
        credentials=StaticCredentialProvider(token),
        base_url="http://booking.test/api",
        transport=httpx.MockTransport(backend),
    )


def make_draft(**overrides) -> BookingDraft:
    """Fully valid draft; override any field."""
    values = {
        "name": "A",
        "email": "a@b.com",
        "phone": "123",
        "selected_service": "svc1",
        "selected_date": date(2025, 7, 10),
        "selected_time": "10:00 AM",
        "occasion": "Birthday",
        "notes": "",
    }
    values.update(overrides)
    return BookingDraft(**values)


def make_controller(
    backend: RecordingBackend, catalog: Optional[list[Service]] = None, token: Optional[str] = None
) -> BookingSubmissionController:
    return BookingSubmissionController(
        make_client(backend, token),
        catalog=catalog if catalog is not None else [SVC1, BROKEN_SVC, *SERVICE_CATALOG],
        availability=AvailabilityFilter(EXCLUDED, today=lambda: TODAY),
        session_id="FORM-test",
    )


@pytest.fixture
def state_machine():
    return SubmissionStateMachine()


@pytest.fixture
def availability():
    return AvailabilityFilter(EXCLUDED, today=lambda: TODAY)


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def controller(backend):
    return make_controller(backend)
