"""
Booking submission controller: owns one form's draft, errors and status.

Implements the full submit lifecycle:
Validate -> Look up service -> Derive interval -> Submit -> Report.
Nothing raised along the way escapes ``submit()``; every outcome ends as
a ``SubmissionStatus`` with the form back in the idle state.
"""

from datetime import date
from typing import Any, Iterable, Optional, Protocol

from booking_intake.catalog import find_service, get_all_services
from booking_intake.config import settings
from booking_intake.controller.state_machine import (
    SubmissionState,
    SubmissionStateMachine,
    SubmissionTrigger,
)
from booking_intake.exceptions import PreconditionError, TransportError
from booking_intake.logging_context import get_session_logger, new_session_id, set_session_id
from booking_intake.scheduling.availability import AvailabilityFilter
from booking_intake.scheduling.interval import BookingInterval, derive_interval
from booking_intake.scheduling.slots import generate_time_slots
from booking_intake.schemas.booking_schema import BookingReply, BookingRequest
from booking_intake.schemas.draft_schema import BookingDraft
from booking_intake.schemas.service_schema import Service
from booking_intake.schemas.status_schema import SubmissionStatus
from booking_intake.validation import validate_draft

logger = get_session_logger(__name__)

SERVICE_NOT_FOUND_MESSAGE = "Selected service not found."
INVALID_DURATION_MESSAGE = "Invalid service duration. Please select a valid service."
DEFAULT_SUCCESS_MESSAGE = "Booking request sent successfully!"
DEFAULT_FAILURE_MESSAGE = "Something went wrong."
DATE_UNAVAILABLE_MESSAGE = "This date is not available. Please choose another date."


class BookingGateway(Protocol):
    async def create_booking(self, request: BookingRequest) -> BookingReply: ...


class BookingSubmissionController:
    """Drives one booking form from first edit to submitted request."""

    _EDITABLE_FIELDS: frozenset[str] = frozenset(BookingDraft.field_names())

    def __init__(
        self,
        gateway: BookingGateway,
        catalog: Optional[Iterable[Service]] = None,
        availability: Optional[AvailabilityFilter] = None,
        session_id: Optional[str] = None,
    ) -> None:
        self._gateway = gateway
        self._catalog: list[Service] = list(catalog) if catalog is not None else get_all_services()
        self._availability = availability or AvailabilityFilter(
            settings.schedule.unavailable_dates
        )
        self._sm = SubmissionStateMachine()
        self._discarded = False

        self.session_id = session_id or new_session_id()
        self.draft = BookingDraft()
        self.errors: dict[str, str] = {}
        self.status = SubmissionStatus.idle()
        self.last_request: Optional[BookingRequest] = None

    # ------------------------------------------------------------------ #
    # Read-only views for the form front-end
    # ------------------------------------------------------------------ #

    @property
    def state(self) -> SubmissionState:
        return self._sm.current_state

    @property
    def state_machine(self) -> SubmissionStateMachine:
        return self._sm

    @property
    def services(self) -> list[Service]:
        return list(self._catalog)

    @property
    def availability(self) -> AvailabilityFilter:
        return self._availability

    @property
    def time_slots(self) -> list[str]:
        return generate_time_slots()

    @property
    def can_submit(self) -> bool:
        """False while a submission is in flight or after the form was discarded."""
        return not self._discarded and not self._sm.is_busy()

    # ------------------------------------------------------------------ #
    # Draft editing
    # ------------------------------------------------------------------ #

    def update_field(self, field_name: str, value: Any) -> None:
        """Set one draft field, as typed or picked by the user."""
        if field_name not in self._EDITABLE_FIELDS:
            raise ValueError(f"Unknown field: {field_name}")
        setattr(self.draft, field_name, value)

    def on_date_selected(self, selected: date) -> bool:
        """
        Date-picker callback.

        Returns:
            True if the date was taken into the draft. Past or excluded
            dates are refused and reported as a date error.
        """
        if not self._availability.is_selectable(selected):
            self.errors["selected_date"] = DATE_UNAVAILABLE_MESSAGE
            return False
        self.draft.selected_date = selected
        self.errors.pop("selected_date", None)
        return True

    def discard(self) -> None:
        """Stop caring about this form; a pending submission result is dropped."""
        self._discarded = True
        logger.debug("Form %s discarded", self.session_id)

    # ------------------------------------------------------------------ #
    # Submission
    # ------------------------------------------------------------------ #

    def _finish(self, trigger: SubmissionTrigger, status: SubmissionStatus) -> SubmissionStatus:
        """Record the outcome, then return the form to idle."""
        self._sm.transition(trigger)
        self.status = status
        self._sm.transition(SubmissionTrigger.RESET)
        return self.status

    def _resolve_service(self) -> Service:
        service = find_service(self.draft.selected_service, self._catalog)
        if service is None:
            raise PreconditionError(SERVICE_NOT_FOUND_MESSAGE)
        if not service.has_valid_duration:
            raise PreconditionError(INVALID_DURATION_MESSAGE)
        return service

    def build_request(self, service: Service) -> tuple[BookingRequest, BookingInterval]:
        """Derive the interval for the current draft and assemble the payload."""
        if self.draft.selected_date is None:
            raise PreconditionError("Booking date is missing")
        interval = derive_interval(
            self.draft.selected_date, self.draft.selected_time, service.duration_minutes
        )
        request = BookingRequest(
            name=self.draft.name,
            email=self.draft.email.strip(),
            phone=self.draft.phone,
            service_id=service.id,
            booking_date=interval.start.date(),
            start_time=interval.start_label,
            end_time=interval.end_label,
            occasion=self.draft.occasion,
            notes=self.draft.notes,
        )
        return request, interval

    async def submit(self) -> SubmissionStatus:
        """
        Run one submit attempt.

        A call made while another attempt is in flight is ignored and the
        current status is returned unchanged.
        """
        set_session_id(self.session_id)
        if not self.can_submit:
            logger.warning(
                "Submit ignored: form is %s",
                "discarded" if self._discarded else self._sm.current_state.value,
            )
            return self.status

        self.status = SubmissionStatus.idle()
        self._sm.transition(SubmissionTrigger.SUBMIT_REQUESTED)

        self.errors = validate_draft(self.draft)
        if self.errors:
            logger.info("Submission blocked by %d field error(s)", len(self.errors))
            return self._finish(SubmissionTrigger.VALIDATION_FAILED, SubmissionStatus.idle())
        self._sm.transition(SubmissionTrigger.VALIDATION_PASSED)

        try:
            service = self._resolve_service()
            request, interval = self.build_request(service)
        except PreconditionError as e:
            logger.warning("Submission precondition failed: %s", e)
            return self._finish(
                SubmissionTrigger.PRECONDITION_FAILED, SubmissionStatus.error(str(e))
            )

        if interval.crosses_midnight:
            logger.warning(
                "Booking ends on %s but endTime %s carries no date",
                interval.end.date().isoformat(), interval.end_label,
            )

        self.last_request = request
        self._sm.transition(SubmissionTrigger.INTERVAL_DERIVED)
        logger.info(
            "Submitting booking for %s on %s %s-%s",
            service.name, request.booking_date.isoformat(),
            request.start_time, request.end_time,
        )

        try:
            reply = await self._gateway.create_booking(request)
        except TransportError as e:
            if self._discarded:
                logger.debug("Dropping failure for discarded form")
                return self.status
            message = e.display_message or DEFAULT_FAILURE_MESSAGE
            logger.error("Booking failed: %s", message)
            return self._finish(
                SubmissionTrigger.SUBMISSION_FAILED,
                SubmissionStatus.error(f"Booking failed: {message}"),
            )
        except Exception as e:
            if self._discarded:
                logger.debug("Dropping failure for discarded form")
                return self.status
            logger.exception("Unexpected error while submitting booking")
            message = str(e) or DEFAULT_FAILURE_MESSAGE
            return self._finish(
                SubmissionTrigger.SUBMISSION_FAILED,
                SubmissionStatus.error(f"Booking failed: {message}"),
            )

        if self._discarded:
            logger.debug("Dropping result for discarded form")
            return self.status

        self.draft.clear()
        self.errors = {}
        return self._finish(
            SubmissionTrigger.SUBMISSION_SUCCEEDED,
            SubmissionStatus.success(reply.message or DEFAULT_SUCCESS_MESSAGE),
        )
