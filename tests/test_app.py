"""Tests for the per-tab NiceGUI application object."""

from polarlab.app import PolarLabApp
from polarlab.client import PolarServiceClient
from polarlab.config import AppConfig

from .fakes import SERVICE_URL, FakeResponse, FakeSession


def make_app(sample_payload):
    session = FakeSession(FakeResponse(200, sample_payload))
    client = PolarServiceClient(SERVICE_URL, session=session)
    return PolarLabApp(AppConfig.from_env({}), client=client), session


class TestClose:
    def test_close_releases_session_and_listener(self, sample_payload):
        polar_app, session = make_app(sample_payload)
        assert polar_app.controller._listeners
        polar_app.close()
        assert session.closed
        assert polar_app.controller._listeners == []

    def test_close_twice_is_harmless(self, sample_payload):
        polar_app, session = make_app(sample_payload)
        polar_app.close()
        polar_app.close()
        assert session.closed
        assert polar_app.controller._listeners == []
