"""
Custom exceptions for the image resizer service.

Every exception carries the HTTP status code it maps to; the message is sent
to the client verbatim.
"""

from typing import Any, Dict, Optional


class ImageResizerError(Exception):
    """Base exception for image resizer errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details or {}
        self.status_code = status_code
        super().__init__(message)


class InvalidParameterError(ImageResizerError):
    """Raised when a query parameter is missing or malformed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="INVALID_PARAMETER", message=message, details=details, status_code=400)


class UnsupportedFormatError(ImageResizerError):
    """Raised when the requested or detected format cannot be encoded."""

    def __init__(self, format: Optional[str] = None):
        super().__init__(
            code="UNSUPPORTED_FORMAT",
            message="unsupported format",
            details={"format": format},
            status_code=422,
        )


class InvalidImageError(ImageResizerError):
    """Raised when the uploaded bytes cannot be decoded."""

    def __init__(self, reason: Optional[str] = None):
        super().__init__(
            code="INVALID_IMAGE",
            message="invalid image",
            details={"reason": reason} if reason else None,
            status_code=500,
        )


class ImageEncodeError(ImageResizerError):
    """Raised when the encoder or resampler fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="ENCODE_ERROR", message=message, details=details, status_code=500)
