"""
Response schemas for the image resizer API.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health."""

    status: str = Field(default="healthy", description="Service status")
