"""External services and UI-side state holders."""

from .gemini_client import GeminiClient, ImageProvider, ProviderError
from .upload_collector import UploadCollector

__all__ = [
    "GeminiClient",
    "ImageProvider",
    "ProviderError",
    "UploadCollector",
]
