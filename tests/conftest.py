# Test fixtures and configuration
import pytest
import sys
from pathlib import Path

from google.genai import types

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tryon_studio.models import SourceFile  # noqa: E402


class FakeProvider:
    """Stands in for the Gemini client; records every request."""

    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.requests = []

    async def generate(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


def make_response(*parts: types.Part) -> types.GenerateContentResponse:
    """Build a one-candidate Gemini response."""
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=list(parts)))]
    )


def image_part(data: bytes, mime_type: str = "image/png") -> types.Part:
    return types.Part(inline_data=types.Blob(data=data, mime_type=mime_type))


def text_part(text: str) -> types.Part:
    return types.Part(text=text)


@pytest.fixture
def minimal_png_bytes():
    """Minimal valid PNG image bytes."""
    return bytes([
        0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A,  # PNG signature
        0x00, 0x00, 0x00, 0x0D, 0x49, 0x48, 0x44, 0x52,  # IHDR chunk
        0x00, 0x00, 0x00, 0x01, 0x00, 0x00, 0x00, 0x01,  # 1x1 dimensions
        0x08, 0x02, 0x00, 0x00, 0x00, 0x90, 0x77, 0x53,
        0xDE, 0x00, 0x00, 0x00, 0x0C, 0x49, 0x44, 0x41,  # IDAT chunk
        0x54, 0x08, 0xD7, 0x63, 0xF8, 0xCF, 0xC0, 0x00,
        0x00, 0x00, 0x03, 0x00, 0x01, 0x00, 0x05, 0xFE,
        0xD4, 0xAA, 0x00, 0x00, 0x00, 0x00, 0x49, 0x45,  # IEND chunk
        0x4E, 0x44, 0xAE, 0x42, 0x60, 0x82
    ])


@pytest.fixture
def make_file(minimal_png_bytes):
    """Factory for in-memory image files."""
    def _make(name: str = "photo.png", content_type: str = "image/png", data: bytes | None = None):
        return SourceFile(
            filename=name,
            content_type=content_type,
            data=minimal_png_bytes if data is None else data,
        )
    return _make


@pytest.fixture
def png_response():
    """Response whose first part is a PNG with payload 'AAAA'."""
    return make_response(image_part(b"\x00\x00\x00", "image/png"))
