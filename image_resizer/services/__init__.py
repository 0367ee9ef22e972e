"""
Service layer for the image resizer.
"""

from .transformer import ImageTransformer

__all__ = ["ImageTransformer"]
