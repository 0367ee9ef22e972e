"""
Configuration management for the image resizer service.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Server settings loaded from environment variables.

    Each field is read from the environment variable named after the matching
    command-line flag (uppercased, dashes replaced by underscores).
    """

    # Server settings
    host: str = Field(default="localhost", alias="HOST")
    port: int = Field(default=8080, alias="PORT")

    # Root logger level (DEBUG, INFO, WARNING, ERROR)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO", alias="LOG_LEVEL")

    # Encoder quality for JPEG output (matches the codec's own default)
    jpeg_quality: int = Field(default=75, ge=1, le=100, alias="JPEG_QUALITY")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        populate_by_name = True


# Global settings instance
settings = Settings()
