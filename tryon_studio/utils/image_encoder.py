"""Binary file to base64 / data URI conversion."""

import asyncio
import base64
import inspect
import logging
from typing import Any

from ..models import EncodedImagePart

logger = logging.getLogger(__name__)


class ImageEncodingError(RuntimeError):
    """Raised when a selected file cannot be read."""


def to_data_url(data: bytes, media_type: str) -> str:
    """Build a data: URI from raw bytes."""
    encoded = base64.b64encode(data).decode("utf-8")
    return f"data:{media_type};base64,{encoded}"


def split_data_url(data_url: str) -> tuple[str, bytes]:
    """Split a base64 data: URI into (media_type, raw bytes)."""
    if not data_url.startswith("data:") or "," not in data_url:
        raise ValueError("Not a data URL")
    header, encoded = data_url.split(",", 1)
    media_type = header[len("data:"):].split(";", 1)[0] or "application/octet-stream"
    return media_type, base64.b64decode(encoded)


def _strip_prefix(data_url: str) -> str:
    # "data:image/jpeg;base64,AAAA" -> "AAAA"
    return data_url.split(",", 1)[1] if "," in data_url else ""


async def read_as_data_url(file: Any) -> str | None:
    """Read a file-like object and return it as a data: URI.

    ``file`` needs a ``read()`` method (plain or awaitable) and a
    ``content_type`` attribute. Returns None if the read does not produce
    bytes.
    """
    try:
        data = file.read()
        if inspect.isawaitable(data):
            data = await data
    except Exception as e:
        name = getattr(file, "filename", None) or "file"
        raise ImageEncodingError(f"Could not read {name}: {e}") from e

    if not isinstance(data, (bytes, bytearray, memoryview)):
        return None

    media_type = getattr(file, "content_type", None) or "application/octet-stream"
    return await asyncio.to_thread(to_data_url, bytes(data), media_type)


async def encode_image_part(file: Any) -> EncodedImagePart:
    """Encode a file into a provider request part.

    A read that yields no bytes resolves to an empty payload instead of
    raising.
    """
    data_url = await read_as_data_url(file)
    if not isinstance(data_url, str):
        logger.warning("Read of %r produced no data; sending empty payload",
                       getattr(file, "filename", file))
        encoded = ""
    else:
        encoded = _strip_prefix(data_url)

    return EncodedImagePart(
        encoded_data=encoded,
        media_type=getattr(file, "content_type", None) or "",
    )
