"""Tests for configuration loading and the command line."""

import pytest

from polarlab.app import configure
from polarlab.config import DEFAULT_SERVICE_URL, AppConfig, CanvasConfig


def test_defaults():
    config = AppConfig.from_env({})
    assert config.service.url == DEFAULT_SERVICE_URL
    assert config.service.timeout is None
    assert config.canvas == CanvasConfig()
    assert config.canvas.center == (250.0, 250.0)
    assert config.discard_stale


def test_environment_overrides():
    config = AppConfig.from_env(
        {
            "POLARLAB_SERVICE_URL": "http://calc:9000/calculate",
            "POLARLAB_SERVICE_TIMEOUT": "2.5",
            "POLARLAB_LOG_LEVEL": "debug",
        }
    )
    assert config.service.url == "http://calc:9000/calculate"
    assert config.service.timeout == 2.5
    assert config.log_level == "DEBUG"


def test_bad_timeout():
    with pytest.raises(ValueError, match="POLARLAB_SERVICE_TIMEOUT"):
        AppConfig.from_env({"POLARLAB_SERVICE_TIMEOUT": "soon"})


def test_command_line_overrides_environment():
    base = AppConfig.from_env({"POLARLAB_SERVICE_URL": "http://env/calculate"})
    config = configure(
        ["--service-url", "http://cli/calculate", "--port", "9090", "--canvas-size", "600", "--keep-stale-responses"],
        base,
    )
    assert config.service.url == "http://cli/calculate"
    assert config.port == 9090
    assert config.canvas.width == 600 and config.canvas.height == 600
    assert not config.discard_stale


def test_command_line_rejects_bad_canvas():
    with pytest.raises(SystemExit):
        configure(["--canvas-size", "-5"], AppConfig.from_env({}))
