"""Shared fixtures for the engine, service and CLI tests."""

import pytest

from edge_images import EngineConfig, ImageSource
from edge_images_service import ServiceConfig, create_app

PROVIDER_HOST = "https://example.com"
PHOTO_URL = "https://example.com/photo.jpg"


@pytest.fixture
def engine_config():
    return EngineConfig(provider_host=PROVIDER_HOST)


@pytest.fixture
def photo():
    """A 1200x800 landscape photo."""
    return ImageSource(PHOTO_URL, 1200, 800)


@pytest.fixture
def client(engine_config):
    app = create_app(ServiceConfig(engine=engine_config))
    app.config["TESTING"] = True
    return app.test_client()
