"""Configuration models for the Complex Polar Lab application."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

DEFAULT_SERVICE_URL = "http://localhost:3000/calculate"


@dataclass(frozen=True)
class CanvasConfig:
    """Size of the Argand diagram canvas in SVG user units."""

    width: float = 500.0
    height: float = 500.0
    margin: float = 60.0
    headroom: float = 1.3
    inset: float = 20.0
    arc_radius: float = 40.0

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2


@dataclass
class ServiceConfig:
    """Where the Polar Conversion Service lives."""

    url: str = DEFAULT_SERVICE_URL
    timeout: Optional[float] = None  # None: rely on the transport default


@dataclass
class AppConfig:
    """Aggregate settings for the web front-end."""

    service: ServiceConfig = field(default_factory=ServiceConfig)
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    host: str = "0.0.0.0"
    port: int = 8080
    title: str = "Complex Polar Lab"
    discard_stale: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Build a config from ``POLARLAB_*`` environment variables."""

        env = os.environ if environ is None else environ
        config = cls()
        url = env.get("POLARLAB_SERVICE_URL")
        if url:
            config.service.url = url
        timeout = env.get("POLARLAB_SERVICE_TIMEOUT")
        if timeout:
            try:
                config.service.timeout = float(timeout)
            except ValueError as exc:
                raise ValueError(f"POLARLAB_SERVICE_TIMEOUT must be a number, got {timeout!r}") from exc
        level = env.get("POLARLAB_LOG_LEVEL")
        if level:
            config.log_level = level.upper()
        return config


__all__ = ["AppConfig", "CanvasConfig", "ServiceConfig", "DEFAULT_SERVICE_URL"]
