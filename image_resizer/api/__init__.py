"""
HTTP API routes.
"""

from .transform import router as transform_router

__all__ = ["transform_router"]
