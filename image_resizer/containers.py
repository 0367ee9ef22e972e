"""
Dependency injection container using dependency-injector.
"""

from dependency_injector import containers, providers

from .config import Settings
from .services.transformer import ImageTransformer


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Configuration
    config = providers.Singleton(Settings)

    # Stateless, shared by every request
    transformer = providers.Singleton(
        ImageTransformer,
        jpeg_quality=config.provided.jpeg_quality,
    )
