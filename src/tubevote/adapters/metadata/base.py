"""Base interface for video metadata providers."""

from abc import ABC, abstractmethod

from tubevote.domain.models import VideoMetadata


class MetadataLookupError(Exception):
    """Raised when metadata for a video cannot be obtained."""

    pass


class MetadataNotFoundError(MetadataLookupError):
    """Raised when the catalog has no video with the given identifier."""

    pass


class MetadataProviderError(MetadataLookupError):
    """Raised when the catalog is unavailable or answers with an error."""

    pass


class MetadataProvider(ABC):
    """Abstract base class for external video catalogs.

    Implementations:
    - StubMetadataProvider: Deterministic offline metadata for tests and local runs
    - YouTubeMetadataProvider: YouTube Data API v3 (videos.list)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        ...

    @abstractmethod
    async def fetch(self, video_id: str) -> VideoMetadata:
        """Look up title and thumbnail for a video.

        Args:
            video_id: The catalog video identifier

        Returns:
            VideoMetadata with title and preferred thumbnail URL

        Raises:
            MetadataNotFoundError: If the catalog has no such video
            MetadataProviderError: On transport or API failure
        """
        ...

    async def close(self) -> None:
        """Release any held resources."""
        return None

    async def health_check(self) -> bool:
        """Check if the provider is configured and reachable."""
        return True
