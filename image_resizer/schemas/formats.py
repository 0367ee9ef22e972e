"""
Image format definitions.

Format tags are the values accepted by the ``format`` query parameter of
``/convert`` and the only formats the service encodes.
"""

from enum import Enum
from typing import List

from ..exceptions import UnsupportedFormatError


class ImageFormat(str, Enum):
    """Supported encode targets."""

    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"

    @property
    def pil_format(self) -> str:
        """Format name understood by Pillow's encoders."""
        return self.value.upper()

    @classmethod
    def from_name(cls, name: str) -> "ImageFormat":
        """Resolve a request parameter such as ``"png"``."""
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedFormatError(name) from None

    @classmethod
    def from_pil(cls, pil_format: str | None) -> "ImageFormat":
        """Resolve the format tag reported by Pillow's decoder (``"JPEG"``, ``"BMP"``...)."""
        if not pil_format:
            raise UnsupportedFormatError(pil_format)
        return cls.from_name(pil_format.lower())


def get_supported_formats() -> List[str]:
    """Get list of supported format tags."""
    return [fmt.value for fmt in ImageFormat]
