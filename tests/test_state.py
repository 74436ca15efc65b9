"""Tests for the controller state reducer."""

import pytest

from polarlab.models import CalculationResult
from polarlab.state import (
    VALIDATION_MESSAGE,
    ControllerState,
    InputEdited,
    Phase,
    RequestFailed,
    RequestStarted,
    RequestSucceeded,
    ValidationFailed,
    reduce,
)


@pytest.fixture
def result(sample_payload):
    return CalculationResult.from_payload(sample_payload)


class TestReduce:
    def test_initial_state(self):
        state = ControllerState()
        assert state.phase is Phase.IDLE
        assert state.result is None and state.error is None
        assert state.inputs == ("", "")

    def test_edit_stores_inputs(self):
        state = reduce(ControllerState(), InputEdited("3", "4"))
        assert state.inputs == ("3", "4")
        assert state.phase is Phase.IDLE

    def test_edit_after_error_returns_to_idle_keeping_banner(self):
        state = reduce(ControllerState(), ValidationFailed())
        state = reduce(state, InputEdited("1", ""))
        assert state.phase is Phase.IDLE
        assert state.error == VALIDATION_MESSAGE

    def test_edit_while_loading_stays_loading(self):
        state = reduce(ControllerState(), RequestStarted(1))
        state = reduce(state, InputEdited("9", "9"))
        assert state.phase is Phase.LOADING
        assert state.pending_request == 1

    def test_request_started_clears_error_keeps_result(self, result):
        state = ControllerState(phase=Phase.ERROR, result=result, error="boom")
        state = reduce(state, RequestStarted(7))
        assert state.phase is Phase.LOADING
        assert state.error is None
        assert state.result is result
        assert state.pending_request == 7

    def test_success_replaces_result(self, result):
        state = reduce(ControllerState(), RequestStarted(1))
        state = reduce(state, RequestSucceeded(1, result))
        assert state.phase is Phase.RESULT
        assert state.result is result
        assert state.error is None
        assert state.pending_request is None

    def test_failure_keeps_previous_result(self, result):
        state = ControllerState(phase=Phase.RESULT, result=result)
        state = reduce(state, RequestStarted(2))
        state = reduce(state, RequestFailed(2, "Server error: 500"))
        assert state.phase is Phase.ERROR
        assert state.error == "Server error: 500"
        assert state.result is result

    def test_validation_failure_supersedes_pending_request(self, result):
        state = reduce(ControllerState(), RequestStarted(1))
        state = reduce(state, ValidationFailed())
        assert state.phase is Phase.ERROR
        assert state.pending_request is None
        late = reduce(state, RequestSucceeded(1, result))
        assert late is state

    def test_stale_response_is_discarded(self, result):
        state = reduce(ControllerState(), RequestStarted(1))
        state = reduce(state, RequestStarted(2))
        assert reduce(state, RequestSucceeded(1, result)) is state
        assert reduce(state, RequestFailed(1, "late")) is state

    def test_stale_response_applied_when_not_discarding(self, result):
        state = reduce(ControllerState(), RequestStarted(1))
        state = reduce(state, RequestStarted(2))
        state = reduce(state, RequestSucceeded(1, result), discard_stale=False)
        assert state.phase is Phase.RESULT
        assert state.result is result

    def test_unknown_event(self):
        with pytest.raises(TypeError):
            reduce(ControllerState(), object())
