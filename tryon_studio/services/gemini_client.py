"""Gemini API client for virtual try-on image generation."""

import base64
import logging
from typing import Any, Protocol

from google import genai
from google.genai import types

from ..config import GeminiConfig
from ..models import EncodedImagePart, TryOnRequest

logger = logging.getLogger(__name__)

INVALID_KEY_MESSAGE = (
    "The provided API key is not valid. Please check your environment configuration."
)
GENERIC_FAILURE_MESSAGE = "Failed to generate virtual try-on image."


class ProviderError(RuntimeError):
    """Raised when the image generation provider call fails."""


class ImageProvider(Protocol):
    """Anything that can turn a try-on request into a provider response."""

    async def generate(self, request: TryOnRequest) -> Any: ...


class GeminiClient:
    """Client for Gemini's multimodal image generation."""

    def __init__(self, config: GeminiConfig, api_key: str):
        if not api_key:
            raise ValueError("A Gemini API key is required")
        self.config = config
        self._api_key = api_key
        self._client: genai.Client | None = None

    @property
    def client(self) -> genai.Client:
        """Get or create the SDK client."""
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    def build_contents(self, request: TryOnRequest) -> list[types.Content]:
        """Convert a try-on request into a single user turn."""
        parts = []
        for part in request.parts:
            if isinstance(part, EncodedImagePart):
                parts.append(types.Part.from_bytes(
                    data=base64.b64decode(part.encoded_data),
                    mime_type=part.media_type,
                ))
            else:
                parts.append(types.Part.from_text(text=part.text))
        return [types.Content(role="user", parts=parts)]

    def build_generation_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            response_modalities=list(self.config.response_modalities),
        )

    async def generate(self, request: TryOnRequest) -> types.GenerateContentResponse:
        """Send the request and return the raw response.

        Raises:
            ProviderError: On any SDK, network, or credential failure.
        """
        logger.info(
            "Calling %s with %d outfit image(s)", self.config.model, len(request.outfits)
        )
        try:
            return await self.client.aio.models.generate_content(
                model=self.config.model,
                contents=self.build_contents(request),
                config=self.build_generation_config(),
            )
        except Exception as e:
            logger.error("Error calling Gemini API: %s", e)
            if "API key not valid" in str(e):
                raise ProviderError(INVALID_KEY_MESSAGE) from e
            raise ProviderError(GENERIC_FAILURE_MESSAGE) from e
