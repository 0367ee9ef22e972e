"""
Library modules for the image resizer service.
"""

from .image_utils import decode_image, encode_image, resample, sniff_content_type

__all__ = [
    "decode_image",
    "encode_image",
    "resample",
    "sniff_content_type",
]
