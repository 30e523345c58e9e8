"""Image models for uploads and provider request parts."""

from pydantic import BaseModel, ConfigDict, Field


class SourceFile(BaseModel):
    """A user-selected binary file with its declared media type."""

    model_config = ConfigDict(frozen=True)

    filename: str = "upload"
    content_type: str = "application/octet-stream"
    data: bytes = Field(repr=False)

    async def read(self) -> bytes:
        """Return the file contents (awaitable, like FastAPI's UploadFile)."""
        return self.data


class UploadedImage(BaseModel):
    """An image selected for an upload slot, with a renderable preview."""

    model_config = ConfigDict(frozen=True)

    source_file: SourceFile
    preview_url: str = Field(repr=False, description="data: URI of the source file")


class EncodedImagePart(BaseModel):
    """Transport-ready image payload: bare base64 text plus media type."""

    model_config = ConfigDict(frozen=True)

    encoded_data: str = Field(repr=False, description="base64 text without the data: prefix")
    media_type: str


class TextPart(BaseModel):
    """Plain text request part."""

    model_config = ConfigDict(frozen=True)

    text: str
