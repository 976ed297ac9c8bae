# FILE: tests/conftest.py

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import random

import pytest

from ownshot.config import get_settings
from ownshot.models.enhance import GenerationResult
from ownshot.providers.gemini import ImageProvider

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 256


class FakeImageProvider(ImageProvider):
    """Records calls and returns a canned result"""

    model_name = "fake-image-model"

    def __init__(self, result=None, text=None, error=None):
        self.result = result or GenerationResult(success=True, image_data=b"enhanced-bytes", mime_type="image/png")
        self.text = text
        self.error = error
        self.calls = []
        self.text_calls = []

    def generate(self, image_data, mime_type, prompt, aspect_ratio, image_size, correlation_id):
        self.calls.append({
            "image_data": image_data,
            "mime_type": mime_type,
            "prompt": prompt,
            "aspect_ratio": aspect_ratio,
            "image_size": image_size,
            "correlation_id": correlation_id,
        })
        return self.result

    def generate_text(self, image_data, mime_type, prompt):
        self.text_calls.append(prompt)
        if self.error:
            raise self.error
        return self.text


@pytest.fixture(scope="session")
def settings():
    """Provide settings for tests"""
    return get_settings()


@pytest.fixture
def png_bytes():
    """Small PNG-looking payload"""
    return PNG_BYTES


@pytest.fixture
def fake_provider():
    return FakeImageProvider()


@pytest.fixture
def rng():
    """Seeded randomness for lifestyle draws"""
    return random.Random(1234)


@pytest.fixture
def client(fake_provider):
    """TestClient with the image provider replaced by a fake"""
    from fastapi.testclient import TestClient
    from ownshot.app import app
    from ownshot.providers.gemini import get_provider_factory

    app.dependency_overrides[get_provider_factory] = lambda: lambda: fake_provider
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
