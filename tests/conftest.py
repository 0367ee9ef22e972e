"""
Pytest configuration and shared fixtures.
"""

import io
import os
import sys

import pytest
from PIL import Image

# Add repo root to path for imports
root_path = os.path.join(os.path.dirname(__file__), "..")
if root_path not in sys.path:
    sys.path.insert(0, root_path)


def encode_sample(format: str, size=(100, 100), mode: str = "RGB") -> bytes:
    """Encode a gradient test image with Pillow."""
    width, height = size
    img = Image.new(mode, size)
    if mode in ("RGB", "RGBA"):
        alpha = (255,) if mode == "RGBA" else ()
        img.putdata(
            [(x * 255 // width, y * 255 // height, 255) + alpha for y in range(height) for x in range(width)]
        )
    buffer = io.BytesIO()
    img.save(buffer, format=format)
    return buffer.getvalue()


@pytest.fixture
def make_image():
    """Factory fixture returning encoded image bytes."""
    return encode_sample


@pytest.fixture
def jpeg_bytes():
    return encode_sample("JPEG")


@pytest.fixture
def png_bytes():
    return encode_sample("PNG")


@pytest.fixture
def gif_bytes():
    return encode_sample("GIF")


@pytest.fixture
def client():
    """Test client for a freshly created app."""
    from fastapi.testclient import TestClient

    from image_resizer.server import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
