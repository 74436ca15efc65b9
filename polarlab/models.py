"""Value types exchanged with the Polar Conversion Service."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple


class MalformedResponseError(ValueError):
    """The service answered, but not with a usable calculation result."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


NUMERIC_FIELDS = ("re", "im", "magnitude", "argument_deg", "argument_rad")


def _number(payload: Mapping[str, Any], key: str) -> float:
    if key not in payload:
        raise MalformedResponseError(f"Malformed response: missing field '{key}'")
    value = payload[key]
    # bool is an int subclass but never a valid measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedResponseError(f"Malformed response: field '{key}' is not a number")
    try:
        number = float(value)
    except OverflowError as exc:
        raise MalformedResponseError(f"Malformed response: field '{key}' is out of range") from exc
    if not math.isfinite(number):
        raise MalformedResponseError(f"Malformed response: field '{key}' is not finite")
    return number


@dataclass(frozen=True)
class CalculationResult:
    """Polar conversion of one complex number, as computed by the service."""

    re: float
    im: float
    magnitude: float
    argument_deg: float
    argument_rad: float
    polar_form: str
    steps: Tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, payload: Any) -> "CalculationResult":
        if not isinstance(payload, Mapping):
            raise MalformedResponseError("Malformed response: expected a JSON object")
        numbers = {key: _number(payload, key) for key in NUMERIC_FIELDS}

        polar_form = payload.get("polar_form")
        if not isinstance(polar_form, str):
            raise MalformedResponseError("Malformed response: field 'polar_form' is not a string")

        steps = payload.get("steps", [])
        if not isinstance(steps, list) or not all(isinstance(step, str) for step in steps):
            raise MalformedResponseError("Malformed response: field 'steps' is not a list of strings")

        return cls(polar_form=polar_form, steps=tuple(steps), **numbers)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "re": self.re,
            "im": self.im,
            "magnitude": self.magnitude,
            "argument_deg": self.argument_deg,
            "argument_rad": self.argument_rad,
            "polar_form": self.polar_form,
            "steps": list(self.steps),
        }


__all__ = ["CalculationResult", "MalformedResponseError"]
