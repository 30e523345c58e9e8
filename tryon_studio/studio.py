"""Wires the upload slots to the try-on pipeline."""

from .config import StudioConfig
from .pipeline import TryOnPipeline
from .services import GeminiClient, ImageProvider, UploadCollector


class TryOnStudio:
    """One user's studio: a person slot, an outfit slot, and the pipeline."""

    def __init__(self, provider: ImageProvider, config: StudioConfig | None = None):
        self.config = config or StudioConfig()
        self.pipeline = TryOnPipeline(provider)
        self.person = UploadCollector("single", on_change=self.pipeline.set_person_images)
        self.outfits = UploadCollector("multiple", on_change=self.pipeline.set_outfit_images)

    @classmethod
    def from_config(cls, config: StudioConfig) -> "TryOnStudio":
        """Build a studio backed by the Gemini API."""
        provider = GeminiClient(config=config.gemini, api_key=config.api_key or "")
        return cls(provider, config)

    def collector(self, role: str) -> UploadCollector:
        """Return the upload slot for ``person`` or ``outfits``."""
        if role == "person":
            return self.person
        if role == "outfits":
            return self.outfits
        raise KeyError(role)
