"""Controller state and the reducer that is the only way to change it.

The state is an immutable value.  Every user action or request settlement is
an event, and :func:`reduce` maps ``(state, event)`` to the next state.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from .models import CalculationResult

VALIDATION_MESSAGE = "Please enter valid numbers for both the real and imaginary parts."
CONNECTION_ERROR_TEMPLATE = "Could not reach the backend: {detail}"


class Phase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESULT = "result"
    ERROR = "error"


@dataclass(frozen=True)
class ControllerState:
    phase: Phase = Phase.IDLE
    result: Optional[CalculationResult] = None
    error: Optional[str] = None
    pending_request: Optional[int] = None
    inputs: Tuple[str, str] = ("", "")

    @property
    def is_loading(self) -> bool:
        return self.phase is Phase.LOADING


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class InputEdited:
    re_text: str
    im_text: str


@dataclass(frozen=True)
class ValidationFailed:
    message: str = VALIDATION_MESSAGE


@dataclass(frozen=True)
class RequestStarted:
    seq: int


@dataclass(frozen=True)
class RequestSucceeded:
    seq: int
    result: CalculationResult


@dataclass(frozen=True)
class RequestFailed:
    seq: int
    message: str


Event = Union[InputEdited, ValidationFailed, RequestStarted, RequestSucceeded, RequestFailed]


def is_stale(state: ControllerState, seq: int) -> bool:
    return state.pending_request != seq


def reduce(state: ControllerState, event: Event, *, discard_stale: bool = True) -> ControllerState:
    """Return the state that follows ``state`` once ``event`` happened.

    With ``discard_stale`` a settlement is only applied when it belongs to
    the request currently pending; otherwise the last response to arrive wins.
    The previous result is never cleared by a failure.
    """

    if isinstance(event, InputEdited):
        phase = Phase.LOADING if state.is_loading else Phase.IDLE
        return replace(state, phase=phase, inputs=(event.re_text, event.im_text))

    if isinstance(event, ValidationFailed):
        return replace(state, phase=Phase.ERROR, error=event.message, pending_request=None)

    if isinstance(event, RequestStarted):
        return replace(state, phase=Phase.LOADING, error=None, pending_request=event.seq)

    if isinstance(event, RequestSucceeded):
        if discard_stale and is_stale(state, event.seq):
            return state
        return replace(state, phase=Phase.RESULT, result=event.result, error=None, pending_request=None)

    if isinstance(event, RequestFailed):
        if discard_stale and is_stale(state, event.seq):
            return state
        return replace(state, phase=Phase.ERROR, error=event.message, pending_request=None)

    raise TypeError(f"Unsupported event: {type(event).__name__}")


__all__ = [
    "CONNECTION_ERROR_TEMPLATE",
    "VALIDATION_MESSAGE",
    "ControllerState",
    "Event",
    "InputEdited",
    "Phase",
    "RequestFailed",
    "RequestStarted",
    "RequestSucceeded",
    "ValidationFailed",
    "reduce",
]
