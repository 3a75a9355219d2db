"""
Test Configuration
==================

Shared fixtures for the render service tests.
"""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from svg_render.main import create_app
from svg_render.models.config import APIConfig


SOURCE_URL = "https://templates.example.com/badge.svg"
SVG_CONTENT_TYPE = "image/svg+xml"


@pytest.fixture
def config() -> APIConfig:
    """Configuration with a short fetch timeout."""
    return APIConfig(fetch_timeout_seconds=5.0)


@pytest.fixture
def client(config: APIConfig) -> Iterator[TestClient]:
    """Test client with the application lifespan running."""
    with TestClient(create_app(config)) as test_client:
        yield test_client
