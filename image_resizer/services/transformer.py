"""
Image transforms: resize, thumbnail and convert.

Each transform is a synchronous decode -> (resample) -> encode pass over
request-local data. Nothing is shared between calls, so one transformer
instance serves all requests concurrently.
"""

import logging

from ..libs.image_utils import DEFAULT_JPEG_QUALITY, decode_image, encode_image, resample
from ..schemas.formats import ImageFormat

logger = logging.getLogger(__name__)


class ImageTransformer:
    """Runs image transforms with the configured encoder options."""

    def __init__(self, jpeg_quality: int = DEFAULT_JPEG_QUALITY):
        self.jpeg_quality = jpeg_quality

    def resize(self, data: bytes, height: int, width: int) -> bytes:
        """
        Resize an image to exactly width x height.

        The aspect ratio is not preserved; use ``thumbnail`` for that. The
        output is encoded in the same format as the input.

        Raises:
            InvalidImageError: If the input cannot be decoded
            UnsupportedFormatError: If the input format cannot be re-encoded
            ImageEncodeError: If encoding fails
        """
        image, source_format = decode_image(data)
        target_format = ImageFormat.from_pil(source_format)

        logger.info(f"Resize {source_format} {image.width}x{image.height} -> {width}x{height}")
        resized = resample(image, width, height)
        return encode_image(resized, target_format, quality=self.jpeg_quality)

    def thumbnail(self, data: bytes, width: int) -> bytes:
        """
        Scale an image to the given width, preserving its aspect ratio.

        The height is ``source_height * width // source_width``. The output is
        encoded in the same format as the input.
        """
        image, source_format = decode_image(data)
        target_format = ImageFormat.from_pil(source_format)

        height = image.height * width // image.width
        logger.info(f"Thumbnail {source_format} {image.width}x{image.height} -> {width}x{height}")
        resized = resample(image, width, height)
        return encode_image(resized, target_format, quality=self.jpeg_quality)

    def convert(self, data: bytes, format: str) -> bytes:
        """
        Re-encode an image in another format without resampling.

        Raises:
            InvalidImageError: If the input cannot be decoded
            UnsupportedFormatError: If ``format`` is not a supported target
        """
        image, source_format = decode_image(data)
        target_format = ImageFormat.from_name(format)

        logger.info(f"Convert {source_format} {image.width}x{image.height} -> {target_format.value}")
        return encode_image(image, target_format, quality=self.jpeg_quality)
