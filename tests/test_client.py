"""Tests for the Polar Conversion Service client."""

import pytest
import requests

from polarlab.client import (
    PolarServiceClient,
    ServiceMalformedError,
    ServiceRejectedError,
    ServiceTransportError,
)
from polarlab.config import ServiceConfig
from polarlab.models import CalculationResult

from .fakes import SERVICE_URL, FakeResponse, FakeSession


def test_posts_numbers_and_parses_result(sample_payload):
    session = FakeSession(FakeResponse(200, sample_payload))
    client = PolarServiceClient(SERVICE_URL, timeout=2.5, session=session)

    result = client.calculate(3.0, 4.0)

    assert session.calls == [{"url": SERVICE_URL, "json": {"re": 3.0, "im": 4.0}, "timeout": 2.5}]
    assert isinstance(result, CalculationResult)
    assert result.magnitude == 5.0
    assert result.steps == ("z = 3 + 4i", "r = 5")


def test_from_config_uses_url_and_timeout(sample_payload):
    session = FakeSession(FakeResponse(200, sample_payload))
    client = PolarServiceClient.from_config(ServiceConfig(url="http://calc:9000/calculate", timeout=1.0), session=session)
    client.calculate(1.0, 1.0)
    assert session.calls[0]["url"] == "http://calc:9000/calculate"
    assert session.calls[0]["timeout"] == 1.0


def test_transport_failure():
    session = FakeSession(requests.ConnectionError("Connection refused"))
    client = PolarServiceClient(SERVICE_URL, session=session)
    with pytest.raises(ServiceTransportError) as excinfo:
        client.calculate(1.0, 2.0)
    assert excinfo.value.detail == "Connection refused"


@pytest.mark.parametrize("status", [400, 404, 500, 503])
def test_non_success_status(status, sample_payload):
    client = PolarServiceClient(SERVICE_URL, session=FakeSession(FakeResponse(status, sample_payload)))
    with pytest.raises(ServiceRejectedError) as excinfo:
        client.calculate(1.0, 2.0)
    assert excinfo.value.status_code == status
    assert excinfo.value.detail == f"Server error: {status}"


def test_body_not_json():
    client = PolarServiceClient(SERVICE_URL, session=FakeSession(FakeResponse(200, invalid_json=True)))
    with pytest.raises(ServiceMalformedError, match="not JSON"):
        client.calculate(1.0, 2.0)


def test_body_missing_field(sample_payload):
    del sample_payload["magnitude"]
    client = PolarServiceClient(SERVICE_URL, session=FakeSession(FakeResponse(200, sample_payload)))
    with pytest.raises(ServiceMalformedError, match="magnitude"):
        client.calculate(1.0, 2.0)


def test_close_closes_session(sample_payload):
    session = FakeSession(FakeResponse(200, sample_payload))
    PolarServiceClient(SERVICE_URL, session=session).close()
    assert session.closed


def test_against_reference_service(service_client):
    result = service_client.calculate(3.0, 4.0)
    assert result.magnitude == pytest.approx(5.0)
    assert result.argument_deg == pytest.approx(53.1301, abs=1e-4)
    assert result.polar_form == "5.0000(cos 53.1301° + i sin 53.1301°)"
