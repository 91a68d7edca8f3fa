"""
Finite state machine for one booking form's submission lifecycle.

Each submit attempt walks idle -> validating -> deriving -> submitting and
ends in invalid, failed or succeeded before returning to idle. Transitions
are explicit; anything not in the table is rejected.

Usage:
    sm = SubmissionStateMachine()
    sm.transition(SubmissionTrigger.SUBMIT_REQUESTED)
    assert sm.current_state == SubmissionState.VALIDATING
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    """All possible states of a submission attempt."""
    IDLE = "idle"
    VALIDATING = "validating"
    INVALID = "invalid"
    DERIVING = "deriving"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SubmissionTrigger(str, Enum):
    """Events that cause state transitions."""
    SUBMIT_REQUESTED = "submit_requested"
    VALIDATION_FAILED = "validation_failed"
    VALIDATION_PASSED = "validation_passed"
    PRECONDITION_FAILED = "precondition_failed"
    INTERVAL_DERIVED = "interval_derived"
    SUBMISSION_SUCCEEDED = "submission_succeeded"
    SUBMISSION_FAILED = "submission_failed"
    RESET = "reset"


@dataclass
class Transition:
    """A single valid state transition."""
    from_state: SubmissionState
    to_state: SubmissionState
    trigger: SubmissionTrigger


@dataclass
class StateEntry:
    """Recorded history entry for a state visit."""
    state: SubmissionState
    entered_at: datetime
    trigger: Optional[SubmissionTrigger] = None


class InvalidTransitionError(Exception):
    """Raised when a transition is not valid from the current state."""


class SubmissionStateMachine:
    """Deterministic state machine gating validation and network calls."""

    TRANSITIONS: list[Transition] = [
        # --- Submit trigger ---
        Transition(SubmissionState.IDLE, SubmissionState.VALIDATING,
                   SubmissionTrigger.SUBMIT_REQUESTED),

        # --- Validation ---
        Transition(SubmissionState.VALIDATING, SubmissionState.INVALID,
                   SubmissionTrigger.VALIDATION_FAILED),
        Transition(SubmissionState.VALIDATING, SubmissionState.DERIVING,
                   SubmissionTrigger.VALIDATION_PASSED),

        # --- Service lookup and interval derivation ---
        Transition(SubmissionState.DERIVING, SubmissionState.FAILED,
                   SubmissionTrigger.PRECONDITION_FAILED),
        Transition(SubmissionState.DERIVING, SubmissionState.SUBMITTING,
                   SubmissionTrigger.INTERVAL_DERIVED),

        # --- Network result ---
        Transition(SubmissionState.SUBMITTING, SubmissionState.SUCCEEDED,
                   SubmissionTrigger.SUBMISSION_SUCCEEDED),
        Transition(SubmissionState.SUBMITTING, SubmissionState.FAILED,
                   SubmissionTrigger.SUBMISSION_FAILED),

        # --- Back to interactive ---
        Transition(SubmissionState.INVALID, SubmissionState.IDLE,
                   SubmissionTrigger.RESET),
        Transition(SubmissionState.FAILED, SubmissionState.IDLE,
                   SubmissionTrigger.RESET),
        Transition(SubmissionState.SUCCEEDED, SubmissionState.IDLE,
                   SubmissionTrigger.RESET),
    ]

    def __init__(self) -> None:
        self._current_state = SubmissionState.IDLE
        self._history: list[StateEntry] = [
            StateEntry(state=SubmissionState.IDLE, entered_at=datetime.now(timezone.utc))
        ]
        self._attempt_count: int = 0
        self._failure_count: int = 0

    @property
    def current_state(self) -> SubmissionState:
        return self._current_state

    @property
    def attempt_count(self) -> int:
        return self._attempt_count

    @property
    def failure_count(self) -> int:
        return self._failure_count

    def transition(self, trigger: SubmissionTrigger) -> SubmissionState:
        """
        Execute a state transition.

        Args:
            trigger: The event triggering the transition.

        Returns:
            The new submission state.

        Raises:
            InvalidTransitionError: If no valid transition exists.
        """
        for t in self.TRANSITIONS:
            if t.from_state == self._current_state and t.trigger == trigger:
                old_state = self._current_state
                self._current_state = t.to_state

                self._history.append(StateEntry(
                    state=self._current_state,
                    entered_at=datetime.now(timezone.utc),
                    trigger=trigger,
                ))

                if t.to_state == SubmissionState.VALIDATING:
                    self._attempt_count += 1
                elif t.to_state == SubmissionState.FAILED:
                    self._failure_count += 1

                logger.debug(
                    "State transition: %s -> %s (trigger: %s)",
                    old_state.value, self._current_state.value, trigger.value,
                )
                return self._current_state

        valid = [t.value for t in self.get_valid_triggers()]
        raise InvalidTransitionError(
            f"No valid transition from '{self._current_state.value}' "
            f"with trigger '{trigger.value}'. Valid triggers: {valid}"
        )

    def get_valid_triggers(self) -> list[SubmissionTrigger]:
        """Return all triggers valid from the current state."""
        return [t.trigger for t in self.TRANSITIONS if t.from_state == self._current_state]

    def get_history(self) -> list[StateEntry]:
        """Return the full state transition history."""
        return list(self._history)

    def get_state_trace(self) -> list[str]:
        """Return ordered list of state names visited."""
        return [entry.state.value for entry in self._history]

    def is_busy(self) -> bool:
        """True while an attempt is between the submit trigger and its outcome."""
        return self._current_state in (
            SubmissionState.VALIDATING,
            SubmissionState.DERIVING,
            SubmissionState.SUBMITTING,
        )
