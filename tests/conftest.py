"""
Shared pytest fixtures for nano_edit tests
"""
import io

import pytest
from PIL import Image

from nano_edit.image import ImageBlob


def _png_bytes(color: str, size: tuple[int, int] = (10, 10)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure no real credential leaks in from the environment"""
    for var in ("GEMINI_API_KEY", "API_KEY", "GEMINI_IMAGE_MODEL", "GEMINI_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def red_png() -> bytes:
    """10x10 red PNG"""
    return _png_bytes("red")


@pytest.fixture
def blue_png() -> bytes:
    """10x10 blue PNG, stands in for the model's output"""
    return _png_bytes("blue")


@pytest.fixture
def red_blob(red_png) -> ImageBlob:
    return ImageBlob.from_bytes(red_png, "image/png")
