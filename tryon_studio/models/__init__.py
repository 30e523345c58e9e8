"""Data models for the Try-On Studio."""

from .images import SourceFile, UploadedImage, EncodedImagePart, TextPart
from .request import TryOnRequest
from .result import ImageArtifact, NoImageFound, Failure, TryOnResult
from .session import TryOnStatus, TryOnState

__all__ = [
    "SourceFile",
    "UploadedImage",
    "EncodedImagePart",
    "TextPart",
    "TryOnRequest",
    "ImageArtifact",
    "NoImageFound",
    "Failure",
    "TryOnResult",
    "TryOnStatus",
    "TryOnState",
]
