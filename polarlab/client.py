"""HTTP client for the Polar Conversion Service."""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from .config import DEFAULT_SERVICE_URL, ServiceConfig
from .models import CalculationResult, MalformedResponseError

logger = logging.getLogger(__name__)


class PolarServiceError(Exception):
    """Base class for every failure talking to the conversion service."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ServiceTransportError(PolarServiceError):
    """The request never completed (refused connection, DNS, reset ...)."""


class ServiceRejectedError(PolarServiceError):
    """The service answered with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Server error: {status_code}")
        self.status_code = status_code


class ServiceMalformedError(PolarServiceError):
    """The service answered 2xx with a body that is not a calculation result."""


class PolarServiceClient:
    """Send complex numbers to ``POST /calculate`` and parse the answer.

    ``session`` only needs a requests-style ``post(url, json=..., timeout=...)``
    returning an object with ``status_code`` and ``json()``; tests pass a
    FastAPI ``TestClient`` or a fake.
    """

    def __init__(
        self,
        url: str = DEFAULT_SERVICE_URL,
        *,
        timeout: Optional[float] = None,
        session: Optional[Any] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    @classmethod
    def from_config(cls, config: ServiceConfig, *, session: Optional[Any] = None) -> "PolarServiceClient":
        return cls(config.url, timeout=config.timeout, session=session)

    def calculate(self, re: float, im: float) -> CalculationResult:
        payload = {"re": re, "im": im}
        options = {} if self.timeout is None else {"timeout": self.timeout}
        logger.debug("POST %s %s", self.url, payload)
        try:
            response = self.session.post(self.url, json=payload, **options)
        except requests.RequestException as exc:
            logger.warning("Polar service unreachable at %s: %s", self.url, exc)
            raise ServiceTransportError(str(exc)) from exc

        status = response.status_code
        if not 200 <= status < 300:
            logger.warning("Polar service rejected %s with HTTP %s", payload, status)
            raise ServiceRejectedError(status)

        try:
            body = response.json()
        except ValueError as exc:
            raise ServiceMalformedError("Malformed response: body is not JSON") from exc
        try:
            result = CalculationResult.from_payload(body)
        except MalformedResponseError as exc:
            logger.warning("Polar service returned an unusable body: %s", exc.detail)
            raise ServiceMalformedError(exc.detail) from exc
        logger.info("z = %s + %si -> r = %.4f, theta = %.4f deg", re, im, result.magnitude, result.argument_deg)
        return result

    def close(self) -> None:
        close = getattr(self.session, "close", None)
        if close is not None:
            close()


__all__ = [
    "PolarServiceClient",
    "PolarServiceError",
    "ServiceTransportError",
    "ServiceRejectedError",
    "ServiceMalformedError",
]
