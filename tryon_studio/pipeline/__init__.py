"""Try-on request pipeline."""

from .request_builder import TRYON_INSTRUCTION, build_tryon_request
from .result_extractor import extract_result
from .tryon_pipeline import (
    MISSING_INPUT_MESSAGE,
    NO_IMAGE_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    TryOnPipeline,
)

__all__ = [
    "TRYON_INSTRUCTION",
    "build_tryon_request",
    "extract_result",
    "TryOnPipeline",
    "MISSING_INPUT_MESSAGE",
    "NO_IMAGE_MESSAGE",
    "UNKNOWN_ERROR_MESSAGE",
]
