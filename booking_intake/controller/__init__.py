from booking_intake.controller.state_machine import (
    InvalidTransitionError,
    SubmissionState,
    SubmissionStateMachine,
    SubmissionTrigger,
)
from booking_intake.controller.submission import BookingSubmissionController

__all__ = [
    "BookingSubmissionController",
    "SubmissionStateMachine",
    "SubmissionState",
    "SubmissionTrigger",
    "InvalidTransitionError",
]
