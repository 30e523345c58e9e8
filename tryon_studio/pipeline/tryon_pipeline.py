"""Try-on orchestration: inputs in, one composite image (or an error) out."""

import logging

from ..models import (
    Failure,
    ImageArtifact,
    TryOnResult,
    TryOnState,
    TryOnStatus,
    UploadedImage,
)
from ..services.gemini_client import ImageProvider
from .request_builder import build_tryon_request
from .result_extractor import extract_result

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "Please upload your photo and at least one outfit image."
NO_IMAGE_MESSAGE = (
    "Could not generate an image. The model may not have returned an image result."
)
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


class TryOnPipeline:
    """Runs one try-on request at a time and keeps its transient state.

    Flow:
    1. Check that a person image and at least one outfit image are selected
    2. Encode all images and build the request
    3. Call the provider
    4. Extract the first image from the response

    States go Idle -> Loading -> Success | Failed. Every fault on the way is
    turned into Failed; nothing is raised to the caller.
    """

    def __init__(self, provider: ImageProvider):
        self.provider = provider

        self.person_image: UploadedImage | None = None
        self.outfit_images: list[UploadedImage] = []

        self._status = TryOnStatus.IDLE
        self._error: str | None = None
        self._result: TryOnResult | None = None
        self._in_flight = False

    # Collector callbacks

    def set_person_images(self, images: list[UploadedImage]) -> None:
        self.person_image = images[0] if images else None

    def set_outfit_images(self, images: list[UploadedImage]) -> None:
        self.outfit_images = list(images)

    @property
    def can_run(self) -> bool:
        """Whether the trigger should be enabled."""
        return (
            self.person_image is not None
            and bool(self.outfit_images)
            and not self._in_flight
        )

    @property
    def result(self) -> TryOnResult | None:
        """Outcome of the last request."""
        return self._result

    @property
    def state(self) -> TryOnState:
        result_url = (
            self._result.data_url if isinstance(self._result, ImageArtifact) else None
        )
        return TryOnState(status=self._status, error=self._error, result_url=result_url)

    def reset(self) -> None:
        """Forget the last outcome and go back to Idle."""
        if self._in_flight:
            raise RuntimeError("Cannot reset while a request is in flight")
        self._status = TryOnStatus.IDLE
        self._error = None
        self._result = None

    async def run(self) -> TryOnState:
        """Run the try-on with the currently selected images.

        Returns:
            The state after the request has finished.
        """
        # Checked and set before the first await, so a second trigger on the
        # same loop always sees it.
        if self._in_flight:
            logger.warning("Try-on already in progress; ignoring trigger")
            return self.state

        person = self.person_image
        outfits = list(self.outfit_images)
        if person is None or not outfits:
            self._fail(MISSING_INPUT_MESSAGE)
            return self.state

        self._in_flight = True
        self._status = TryOnStatus.LOADING
        self._error = None
        self._result = None
        logger.info("Try-on started with %d outfit image(s)", len(outfits))

        try:
            request = await build_tryon_request(
                person.source_file,
                [img.source_file for img in outfits],
            )
            response = await self.provider.generate(request)
            outcome = extract_result(response)

            if isinstance(outcome, ImageArtifact):
                self._result = outcome
                self._status = TryOnStatus.SUCCESS
                logger.info("Try-on completed")
            else:
                logger.warning("Provider returned no image")
                self._status = TryOnStatus.FAILED
                self._error = NO_IMAGE_MESSAGE
                self._result = outcome

        except Exception as e:
            logger.exception("Try-on failed")
            self._fail(str(e) or UNKNOWN_ERROR_MESSAGE)

        finally:
            self._in_flight = False

        return self.state

    def _fail(self, message: str) -> None:
        self._status = TryOnStatus.FAILED
        self._error = message
        self._result = Failure(message=message)
