"""Fake HTTP sessions standing in for requests.Session."""

import threading
from typing import Any, Dict, List, Optional

SERVICE_URL = "http://testserver/calculate"

SAMPLE_PAYLOAD = {
    "re": 3,
    "im": 4,
    "magnitude": 5,
    "argument_deg": 53.13,
    "argument_rad": 0.927,
    "polar_form": "5(cos53.13° + i·sin53.13°)",
    "steps": ["z = 3 + 4i", "r = 5"],
}


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, *, invalid_json: bool = False) -> None:
        self.status_code = status_code
        self._body = body
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


class FakeSession:
    """Records posts and answers from a queue; the last answer repeats."""

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def post(self, url: str, json: Optional[Dict[str, Any]] = None, timeout: Optional[float] = None):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        answer = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def close(self) -> None:
        self.closed = True


class GatedSession:
    """Each post blocks until the test releases it; answers echo the input."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self._gates: List[threading.Event] = []
        self._lock = threading.Lock()

    def post(self, url: str, json: Optional[Dict[str, Any]] = None, timeout: Optional[float] = None):
        gate = threading.Event()
        with self._lock:
            self.calls.append({"url": url, "json": json})
            self._gates.append(gate)
        gate.wait(timeout=5)
        re, im = json["re"], json["im"]
        body = dict(SAMPLE_PAYLOAD, re=re, im=im, polar_form=f"request {re:g}")
        return FakeResponse(200, body)

    def release(self, index: int) -> None:
        self._gates[index].set()
