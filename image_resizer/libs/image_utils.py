"""
Image utility functions for decoding, resampling and encoding images.

Thin adapter over Pillow: the rest of the service only deals with raw bytes,
``PIL.Image.Image`` rasters and ``ImageFormat`` tags.
"""

import io
import logging
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

from ..exceptions import ImageEncodeError, InvalidImageError
from ..schemas.formats import ImageFormat

logger = logging.getLogger(__name__)

DEFAULT_JPEG_QUALITY = 75
DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Bicubic with a = -0.5, i.e. the Catmull-Rom spline
RESAMPLE_FILTER = Image.Resampling.BICUBIC

# Pixel modes each encoder writes without conversion
_NATIVE_MODES = {
    ImageFormat.JPEG: ("L", "RGB", "CMYK"),
    ImageFormat.PNG: ("1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"),
    ImageFormat.GIF: ("1", "L", "P", "RGB"),
}

# Mode everything else is converted to before encoding
_FALLBACK_MODES = {
    ImageFormat.JPEG: "RGB",
    ImageFormat.PNG: "RGBA",
    ImageFormat.GIF: "RGB",
}


def decode_image(data: bytes) -> Tuple[Image.Image, Optional[str]]:
    """
    Decode image bytes into a fully loaded raster.

    Args:
        data: Encoded image bytes

    Returns:
        Tuple of (raster, decoder-reported format name such as "JPEG" or "BMP")

    Raises:
        InvalidImageError: If the bytes cannot be decoded
    """
    try:
        image = Image.open(io.BytesIO(data))
        # Image.open only reads the header; force the pixel data in now
        image.load()
    except Exception as e:
        raise InvalidImageError(str(e)) from e

    logger.debug(f"Decoded {image.format} image {image.width}x{image.height} mode={image.mode}")
    return image, image.format


def resample(image: Image.Image, width: int, height: int) -> Image.Image:
    """
    Scale a raster to exactly width x height.

    The source is composited as RGBA so palette and grayscale inputs are
    interpolated instead of falling back to nearest-neighbour.

    Raises:
        ImageEncodeError: If the target size is empty or cannot be allocated
    """
    if width <= 0 or height <= 0:
        raise ImageEncodeError(f"invalid image size: {width}x{height}")

    try:
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return image.resize((width, height), RESAMPLE_FILTER)
    except (ValueError, OverflowError, MemoryError) as e:
        raise ImageEncodeError(f"resample {width}x{height}: {e}") from e


def encode_image(image: Image.Image, format: ImageFormat, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    """
    Encode a raster into bytes.

    Args:
        image: Raster to encode
        format: Target format
        quality: JPEG quality (1-100), ignored for other formats

    Returns:
        Encoded image bytes

    Raises:
        ImageEncodeError: If the encoder fails
    """
    buffer = io.BytesIO()

    if image.mode not in _NATIVE_MODES[format]:
        # JPEG and GIF have no alpha channel; GIF quantizes RGB to its palette
        image = image.convert(_FALLBACK_MODES[format])

    save_kwargs = {"format": format.pil_format}
    if format is ImageFormat.JPEG:
        save_kwargs["quality"] = quality

    try:
        image.save(buffer, **save_kwargs)
    except Exception as e:
        raise ImageEncodeError(f"{format.value}: {e}") from e

    return buffer.getvalue()


def sniff_content_type(data: bytes) -> str:
    """Detect the content type of encoded image bytes from their header."""
    try:
        with Image.open(io.BytesIO(data)) as image:
            return Image.MIME.get(image.format, DEFAULT_CONTENT_TYPE)
    except (UnidentifiedImageError, OSError):
        return DEFAULT_CONTENT_TYPE
