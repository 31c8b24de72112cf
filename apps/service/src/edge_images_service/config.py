"""Configuration management for the Edge Images service."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from edge_images import EngineConfig
from edge_images.config import (
    CONTENT_WIDTH,
    DEFAULT_PROVIDER_HOST,
    DEFAULT_PROVIDER_PATH,
    WIDTH_MAX,
    WIDTH_MIN,
    WIDTH_STEP,
)


@dataclass(frozen=True)
class ServiceConfig:
    """Service configuration loaded from environment variables."""

    host: str = "127.0.0.1"
    port: int = 5001
    cors_origins: str = "*"
    engine: EngineConfig = field(default_factory=EngineConfig)

    @classmethod
    def load(cls) -> ServiceConfig:
        """Load configuration from environment variables."""
        engine = EngineConfig(
            provider_host=os.getenv("EDGE_IMAGES_PROVIDER_HOST", DEFAULT_PROVIDER_HOST),
            provider_path=os.getenv("EDGE_IMAGES_PROVIDER_PATH", DEFAULT_PROVIDER_PATH),
            content_width=int(os.getenv("EDGE_IMAGES_CONTENT_WIDTH", str(CONTENT_WIDTH))),
            width_min=int(os.getenv("EDGE_IMAGES_WIDTH_MIN", str(WIDTH_MIN))),
            width_max=int(os.getenv("EDGE_IMAGES_WIDTH_MAX", str(WIDTH_MAX))),
            width_step=int(os.getenv("EDGE_IMAGES_WIDTH_STEP", str(WIDTH_STEP))),
        )
        return cls(
            host=os.getenv("EDGE_IMAGES_HOST", "127.0.0.1"),
            port=int(os.getenv("EDGE_IMAGES_PORT", "5001")),
            cors_origins=os.getenv("EDGE_IMAGES_CORS_ORIGINS", "*"),
            engine=engine.validate(),
        )
