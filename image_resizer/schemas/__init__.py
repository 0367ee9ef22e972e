"""
Pydantic schemas and enums for request/response models.
"""

from .formats import ImageFormat, get_supported_formats
from .request import ConvertParams, ResizeParams, ThumbnailParams, parse_dimension
from .response import HealthResponse

__all__ = [
    # Formats
    "ImageFormat",
    "get_supported_formats",
    # Request
    "ResizeParams",
    "ThumbnailParams",
    "ConvertParams",
    "parse_dimension",
    # Response
    "HealthResponse",
]
