"""
Request schemas for the transform API.

Parameters arrive as query strings; the ``from_query`` constructors do the
parsing so that error messages stay exact and plain-text.
"""

from typing import Mapping, Optional, Union

from pydantic import BaseModel, Field
from starlette.datastructures import QueryParams

from ..exceptions import InvalidParameterError

# Pillow stores raster sizes as C ints
MAX_DIMENSION = 2**31 - 1


def first_value(query: Union[QueryParams, Mapping[str, str]], name: str) -> Optional[str]:
    """Return the first value of a query parameter, or None if absent."""
    values = QueryParams(query).getlist(name)
    return values[0] if values else None


def parse_dimension(name: str, raw: str) -> int:
    """Parse a positive pixel dimension from its raw query value."""
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidParameterError(f"invalid {name}: {raw}", details={name: raw})
    value = int(raw)
    if value <= 0 or value > MAX_DIMENSION:
        raise InvalidParameterError(f"invalid {name}: {raw}", details={name: raw})
    return value


class ResizeParams(BaseModel):
    """Parameters for POST /resize."""

    height: int = Field(..., gt=0, le=MAX_DIMENSION, description="Target height in pixels")
    width: int = Field(..., gt=0, le=MAX_DIMENSION, description="Target width in pixels")

    @classmethod
    def from_query(cls, query: Mapping[str, str]) -> "ResizeParams":
        height = first_value(query, "height")
        width = first_value(query, "width")
        if not height or not width:
            raise InvalidParameterError("missing required parameters")
        return cls(height=parse_dimension("height", height), width=parse_dimension("width", width))


class ThumbnailParams(BaseModel):
    """Parameters for POST /thumbnail."""

    width: int = Field(
        ..., gt=0, le=MAX_DIMENSION, description="Target width in pixels; height follows the aspect ratio"
    )

    @classmethod
    def from_query(cls, query: Mapping[str, str]) -> "ThumbnailParams":
        width = first_value(query, "width")
        if not width:
            raise InvalidParameterError("missing required parameter: width")
        return cls(width=parse_dimension("width", width))


class ConvertParams(BaseModel):
    """
    Parameters for POST /convert.

    The format is kept as the raw string; it is resolved against the supported
    formats only after the upload has been decoded.
    """

    format: str = Field(..., min_length=1, description="Target format (jpeg, png, gif)")

    @classmethod
    def from_query(cls, query: Mapping[str, str]) -> "ConvertParams":
        format = first_value(query, "format")
        if not format:
            raise InvalidParameterError("missing required parameter: format")
        return cls(format=format)
