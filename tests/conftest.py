"""Shared fixtures for the Complex Polar Lab tests."""

from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from polarlab.client import PolarServiceClient
from polarlab.server.app import app as service_app

from .fakes import SAMPLE_PAYLOAD, SERVICE_URL


@pytest.fixture
def sample_payload() -> Dict[str, Any]:
    return dict(SAMPLE_PAYLOAD, steps=list(SAMPLE_PAYLOAD["steps"]))


@pytest.fixture
def service_client():
    """Client wired to the in-process reference service."""
    with TestClient(service_app) as test_client:
        yield PolarServiceClient(SERVICE_URL, session=test_client)
