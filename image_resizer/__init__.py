"""
image_resizer - HTTP service for resizing, converting and thumbnailing images.
"""

__version__ = "0.1.0"
