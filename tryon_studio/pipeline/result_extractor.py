"""Pick the generated image out of a provider response."""

import base64
from typing import Any

from ..models import ImageArtifact, NoImageFound

DEFAULT_IMAGE_TYPE = "image/png"


def _field(obj: Any, *names: str) -> Any:
    """Read a field from an SDK object or a plain dict (snake or camel case)."""
    if obj is None:
        return None
    for name in names:
        if isinstance(obj, dict):
            if name in obj:
                return obj[name]
        elif hasattr(obj, name):
            return getattr(obj, name)
    return None


def _first_candidate_parts(response: Any) -> list[Any]:
    candidates = _field(response, "candidates") or []
    if not candidates:
        return []
    content = _field(candidates[0], "content")
    return list(_field(content, "parts") or [])


def extract_result(response: Any) -> ImageArtifact | NoImageFound:
    """Return the first inline image of the first candidate as a data URI.

    First match wins: later image parts are ignored. A response without
    candidates, parts, or image data gives ``NoImageFound``.
    """
    for part in _first_candidate_parts(response):
        inline = _field(part, "inline_data", "inlineData")
        data = _field(inline, "data")
        if not data:
            continue

        mime_type = _field(inline, "mime_type", "mimeType") or DEFAULT_IMAGE_TYPE
        if isinstance(data, (bytes, bytearray)):
            # The Python SDK hands back decoded bytes
            payload = base64.b64encode(bytes(data)).decode("utf-8")
        else:
            payload = str(data)
        return ImageArtifact(data_url=f"data:{mime_type};base64,{payload}")

    return NoImageFound()
