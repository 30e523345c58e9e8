"""Utility helpers."""

from .image_encoder import (
    ImageEncodingError,
    encode_image_part,
    read_as_data_url,
    split_data_url,
    to_data_url,
)

__all__ = [
    "ImageEncodingError",
    "encode_image_part",
    "read_as_data_url",
    "split_data_url",
    "to_data_url",
]
