"""Upload slot state: the images a user has picked for one role."""

import asyncio
import logging
from typing import Callable, Iterable, Literal

from ..models import SourceFile, UploadedImage
from ..utils.image_encoder import read_as_data_url

logger = logging.getLogger(__name__)

UploadMode = Literal["single", "multiple"]
ImagesCallback = Callable[[list[UploadedImage]], None]


class UploadCollector:
    """Maintains the ordered selection of one upload slot.

    In ``single`` mode a new batch replaces the selection (first image only);
    in ``multiple`` mode it is appended. Every change is pushed to the
    ``on_change`` subscriber with the full resulting list.
    """

    def __init__(
        self,
        mode: UploadMode = "single",
        on_change: ImagesCallback | None = None,
    ):
        if mode not in ("single", "multiple"):
            raise ValueError(f"Unknown upload mode: {mode!r}")
        self.mode = mode
        self.on_change = on_change
        self._images: list[UploadedImage] = []
        self._active = False

    @property
    def multiple(self) -> bool:
        return self.mode == "multiple"

    @property
    def images(self) -> list[UploadedImage]:
        """Current selection (a copy)."""
        return list(self._images)

    @property
    def is_active(self) -> bool:
        """Whether a drag is currently hovering the drop target."""
        return self._active

    async def add_files(self, files: Iterable[SourceFile]) -> list[UploadedImage]:
        """Add a batch of newly selected files.

        An empty batch leaves the selection untouched and notifies nobody.
        """
        batch = list(files or [])
        if not batch:
            return self.images

        previews = await asyncio.gather(*(read_as_data_url(f) for f in batch))
        new_images = [
            UploadedImage(source_file=f, preview_url=preview or "")
            for f, preview in zip(batch, previews)
        ]

        if self.multiple:
            updated = [*self._images, *new_images]
        else:
            updated = new_images[:1]

        logger.debug("%s slot: %d -> %d image(s)", self.mode, len(self._images), len(updated))
        self._set(updated)
        return self.images

    def remove(self, index: int) -> list[UploadedImage]:
        """Remove the image at ``index``; later images shift down."""
        if index < 0 or index >= len(self._images):
            raise IndexError(f"No image at position {index}")
        updated = [img for i, img in enumerate(self._images) if i != index]
        self._set(updated)
        return self.images

    def reset(self) -> None:
        """Drop every selected image."""
        self._active = False
        self._set([])

    # Drag-and-drop presentation state

    def drag_enter(self) -> None:
        self._active = True

    def drag_over(self) -> None:
        self._active = True

    def drag_leave(self) -> None:
        self._active = False

    async def drop(self, files: Iterable[SourceFile]) -> list[UploadedImage]:
        """Handle files dropped on the slot."""
        self._active = False
        return await self.add_files(files)

    def _set(self, images: list[UploadedImage]) -> None:
        self._images = images
        if self.on_change is not None:
            self.on_change(list(images))
