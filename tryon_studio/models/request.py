"""Outbound try-on request model."""

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .images import EncodedImagePart, TextPart


class TryOnRequest(BaseModel):
    """One multimodal request: person image, outfit images, then the instruction."""

    model_config = ConfigDict(frozen=True)

    person: EncodedImagePart
    outfits: list[EncodedImagePart] = Field(min_length=1)
    instruction: str

    @computed_field
    @property
    def parts(self) -> list[EncodedImagePart | TextPart]:
        """Ordered parts as sent to the provider."""
        return [self.person, *self.outfits, TextPart(text=self.instruction)]
