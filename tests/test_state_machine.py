"""Tests for the submission state machine."""

import pytest

from booking_intake.controller.state_machine import (
    InvalidTransitionError,
    SubmissionState,
    SubmissionStateMachine,
    SubmissionTrigger,
)


def _walk(sm: SubmissionStateMachine, *triggers: SubmissionTrigger) -> SubmissionState:
    state = sm.current_state
    for trigger in triggers:
        state = sm.transition(trigger)
    return state


class TestInitialState:
    def test_starts_idle(self, state_machine):
        assert state_machine.current_state == SubmissionState.IDLE

    def test_initial_history_has_one_entry(self, state_machine):
        assert len(state_machine.get_history()) == 1

    def test_not_busy_at_start(self, state_machine):
        assert not state_machine.is_busy()

    def test_only_submit_is_valid_from_idle(self, state_machine):
        assert state_machine.get_valid_triggers() == [SubmissionTrigger.SUBMIT_REQUESTED]


class TestValidation:
    def test_submit_goes_to_validating(self, state_machine):
        new = state_machine.transition(SubmissionTrigger.SUBMIT_REQUESTED)
        assert new == SubmissionState.VALIDATING
        assert state_machine.is_busy()
        assert state_machine.attempt_count == 1

    def test_validation_failed_goes_to_invalid(self, state_machine):
        new = _walk(state_machine, SubmissionTrigger.SUBMIT_REQUESTED,
                    SubmissionTrigger.VALIDATION_FAILED)
        assert new == SubmissionState.INVALID
        assert not state_machine.is_busy()

    def test_invalid_resets_to_idle(self, state_machine):
        new = _walk(state_machine, SubmissionTrigger.SUBMIT_REQUESTED,
                    SubmissionTrigger.VALIDATION_FAILED, SubmissionTrigger.RESET)
        assert new == SubmissionState.IDLE


class TestSubmissionPath:
    def test_happy_path(self, state_machine):
        new = _walk(
            state_machine,
            SubmissionTrigger.SUBMIT_REQUESTED,
            SubmissionTrigger.VALIDATION_PASSED,
            SubmissionTrigger.INTERVAL_DERIVED,
            SubmissionTrigger.SUBMISSION_SUCCEEDED,
        )
        assert new == SubmissionState.SUCCEEDED
        assert state_machine.transition(SubmissionTrigger.RESET) == SubmissionState.IDLE

    def test_precondition_failure(self, state_machine):
        new = _walk(state_machine, SubmissionTrigger.SUBMIT_REQUESTED,
                    SubmissionTrigger.VALIDATION_PASSED,
                    SubmissionTrigger.PRECONDITION_FAILED)
        assert new == SubmissionState.FAILED
        assert state_machine.failure_count == 1

    def test_submission_failure(self, state_machine):
        new = _walk(state_machine, SubmissionTrigger.SUBMIT_REQUESTED,
                    SubmissionTrigger.VALIDATION_PASSED,
                    SubmissionTrigger.INTERVAL_DERIVED,
                    SubmissionTrigger.SUBMISSION_FAILED)
        assert new == SubmissionState.FAILED
        assert state_machine.transition(SubmissionTrigger.RESET) == SubmissionState.IDLE

    def test_submitting_is_busy(self, state_machine):
        _walk(state_machine, SubmissionTrigger.SUBMIT_REQUESTED,
              SubmissionTrigger.VALIDATION_PASSED, SubmissionTrigger.INTERVAL_DERIVED)
        assert state_machine.current_state == SubmissionState.SUBMITTING
        assert state_machine.is_busy()


class TestInvalidTransitions:
    def test_cannot_submit_twice(self, state_machine):
        state_machine.transition(SubmissionTrigger.SUBMIT_REQUESTED)
        with pytest.raises(InvalidTransitionError, match="validating"):
            state_machine.transition(SubmissionTrigger.SUBMIT_REQUESTED)

    def test_cannot_skip_validation(self, state_machine):
        with pytest.raises(InvalidTransitionError):
            state_machine.transition(SubmissionTrigger.INTERVAL_DERIVED)

    def test_cannot_reset_while_idle(self, state_machine):
        with pytest.raises(InvalidTransitionError):
            state_machine.transition(SubmissionTrigger.RESET)

    def test_cannot_reset_mid_submission(self, state_machine):
        _walk(state_machine, SubmissionTrigger.SUBMIT_REQUESTED,
              SubmissionTrigger.VALIDATION_PASSED, SubmissionTrigger.INTERVAL_DERIVED)
        with pytest.raises(InvalidTransitionError):
            state_machine.transition(SubmissionTrigger.RESET)


class TestHistory:
    def test_state_trace(self, state_machine):
        _walk(state_machine, SubmissionTrigger.SUBMIT_REQUESTED,
              SubmissionTrigger.VALIDATION_FAILED, SubmissionTrigger.RESET)
        assert state_machine.get_state_trace() == ["idle", "validating", "invalid", "idle"]

    def test_history_records_triggers(self, state_machine):
        state_machine.transition(SubmissionTrigger.SUBMIT_REQUESTED)
        last = state_machine.get_history()[-1]
        assert last.trigger == SubmissionTrigger.SUBMIT_REQUESTED
        assert last.state == SubmissionState.VALIDATING

    def test_attempts_counted_per_submit(self, state_machine):
        for _ in range(3):
            _walk(state_machine, SubmissionTrigger.SUBMIT_REQUESTED,
                  SubmissionTrigger.VALIDATION_FAILED, SubmissionTrigger.RESET)
        assert state_machine.attempt_count == 3
        assert state_machine.failure_count == 0
