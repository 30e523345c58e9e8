"""Try-on request assembly."""

import asyncio
from typing import Any, Sequence

from ..models import TryOnRequest
from ..utils.image_encoder import encode_image_part


TRYON_INSTRUCTION = (
    "Take the clothing from the subsequent images and realistically dress the person "
    "from the first image with it. Crucially, you must preserve the original background "
    "from the person's photo exactly as it is. Do not change, replace, or alter the "
    "background in any way. If multiple clothing items are provided, combine them into "
    "a single coherent outfit. Create a photorealistic image of the person wearing the "
    "new outfit, seamlessly integrated into their original environment. The final image "
    "should show the person with the new clothes on, but in the exact same setting as "
    "the original photo."
)


async def build_tryon_request(person_file: Any, outfit_files: Sequence[Any]) -> TryOnRequest:
    """Encode the person and outfit files and assemble one request.

    All files are encoded concurrently; the parts keep the input order.

    Raises:
        ValueError: If no outfit file is given.
    """
    outfits = list(outfit_files)
    if not outfits:
        raise ValueError("At least one outfit image is required")

    person_part, *outfit_parts = await asyncio.gather(
        encode_image_part(person_file),
        *(encode_image_part(f) for f in outfits),
    )

    return TryOnRequest(
        person=person_part,
        outfits=outfit_parts,
        instruction=TRYON_INSTRUCTION,
    )
