"""Video metadata lookup adapters."""

from tubevote.adapters.metadata.base import (
    MetadataLookupError,
    MetadataNotFoundError,
    MetadataProvider,
    MetadataProviderError,
)
from tubevote.adapters.metadata.stub import StubMetadataProvider
from tubevote.adapters.metadata.youtube import YouTubeMetadataProvider

__all__ = [
    "MetadataLookupError",
    "MetadataNotFoundError",
    "MetadataProvider",
    "MetadataProviderError",
    "StubMetadataProvider",
    "YouTubeMetadataProvider",
]
