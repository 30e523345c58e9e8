"""FastAPI server for the Virtual Try-On Studio.

The browser drives the studio with:
- multipart uploads into the ``person`` or ``outfits`` slot
- removal of a single image by position
- a try-on trigger, whose result can be shown inline or downloaded
"""

import logging
from contextlib import asynccontextmanager
from typing import Literal

from fastapi import FastAPI, File, HTTPException, Response, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from tryon_studio import TryOnStudio, __version__, load_config
from tryon_studio.models import SourceFile, TryOnState, UploadedImage
from tryon_studio.utils import split_data_url

logger = logging.getLogger(__name__)

Role = Literal["person", "outfits"]


# Initialize studio (done at startup, or on first request)
_studio: TryOnStudio | None = None


def get_studio() -> TryOnStudio:
    """Get or create the studio instance."""
    global _studio
    if _studio is None:
        config = load_config()  # Raises ConfigurationError without a credential
        logging.basicConfig(level=config.log_level)
        _studio = TryOnStudio.from_config(config)
    return _studio


@asynccontextmanager
async def lifespan(app: FastAPI):
    get_studio()
    yield


app = FastAPI(
    title="Virtual Try-On Studio",
    description="Upload your photo and outfit photos, get a Gemini-generated composite",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ImagePreview(BaseModel):
    """One selected image as shown in an upload slot."""
    index: int
    filename: str
    content_type: str
    preview_url: str


class UploadsResponse(BaseModel):
    """Current selection of both upload slots."""
    person: list[ImagePreview]
    outfits: list[ImagePreview]
    can_try_on: bool


class TryOnResponse(BaseModel):
    """State of the try-on after a trigger or poll."""
    status: str
    image_data_url: str | None = None
    error: str | None = None


def _previews(images: list[UploadedImage]) -> list[ImagePreview]:
    return [
        ImagePreview(
            index=i,
            filename=img.source_file.filename,
            content_type=img.source_file.content_type,
            preview_url=img.preview_url,
        )
        for i, img in enumerate(images)
    ]


def _uploads(studio: TryOnStudio) -> UploadsResponse:
    return UploadsResponse(
        person=_previews(studio.person.images),
        outfits=_previews(studio.outfits.images),
        can_try_on=studio.pipeline.can_run,
    )


def _tryon_response(state: TryOnState) -> TryOnResponse:
    return TryOnResponse(
        status=state.status.value,
        image_data_url=state.result_url,
        error=state.error,
    )


async def _to_source_file(upload: UploadFile) -> SourceFile:
    return SourceFile(
        filename=upload.filename or "upload",
        content_type=upload.content_type or "application/octet-stream",
        data=await upload.read(),
    )


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Virtual Try-On Studio", "version": __version__}


@app.get("/health")
async def health():
    """Detailed health check."""
    studio = get_studio()
    return {
        "status": "ok",
        "model": studio.config.gemini.model,
        "tryon": studio.pipeline.state.status.value,
    }


@app.get("/api/uploads", response_model=UploadsResponse)
async def list_uploads():
    """Return both upload slots."""
    return _uploads(get_studio())


@app.post("/api/uploads/{role}", response_model=UploadsResponse)
async def add_uploads(role: Role, files: list[UploadFile] = File(...)):
    """Add selected or dropped files to a slot.

    The person slot keeps only the newest image; the outfit slot appends.
    """
    studio = get_studio()
    sources = [await _to_source_file(f) for f in files]
    await studio.collector(role).add_files(sources)
    return _uploads(studio)


@app.delete("/api/uploads/{role}/{index}", response_model=UploadsResponse)
async def remove_upload(role: Role, index: int):
    """Remove one image from a slot."""
    studio = get_studio()
    try:
        studio.collector(role).remove(index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _uploads(studio)


@app.post("/api/tryon", response_model=TryOnResponse)
async def generate_tryon():
    """Generate a virtual try-on image from the selected uploads.

    Failures are reported in the body with ``status="failed"``.
    """
    state = await get_studio().pipeline.run()
    return _tryon_response(state)


@app.get("/api/tryon", response_model=TryOnResponse)
async def get_tryon():
    """Return the state of the last try-on."""
    return _tryon_response(get_studio().pipeline.state)


@app.get("/api/tryon/download")
async def download_tryon():
    """Download the last generated image."""
    studio = get_studio()
    result_url = studio.pipeline.state.result_url
    if not result_url:
        raise HTTPException(status_code=404, detail="No generated image available")

    media_type, data = split_data_url(result_url)
    filename = studio.config.download_filename
    return Response(
        content=data,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


if __name__ == "__main__":
    import uvicorn
    config = load_config()
    uvicorn.run(app, host=config.server.host, port=config.server.port)
